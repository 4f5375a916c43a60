# ABOUTME: Implementations package
# ABOUTME: Groups the in-memory and no-op runner implementations
