# ABOUTME: Test package for typea
# ABOUTME: Makes shared helpers importable as tests.constants
