# ABOUTME: Contract test package
# ABOUTME: Interface compliance tests shared by every implementation
