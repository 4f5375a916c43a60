# ABOUTME: Base exception classes for the typea library
# ABOUTME: Provides structured error handling with context and error codes

from typing import Dict, Any


class TypeaException(Exception):
    """Base exception class for the typea library.

    Provides structured error handling with optional error codes and contextual
    details. All custom exceptions in the library inherit from this class
    to ensure consistent error handling patterns.

    Attributes:
        message: Human-readable error message
        code: Optional error code for programmatic handling
        details: Optional dictionary containing contextual information
    """

    def __init__(self, message: str, code: str | None = None, details: Dict[str, Any] | None = None):
        """Initialize TypeaException with message, optional code and details.

        Args:
            message: Human-readable error message
            code: Optional error code for programmatic handling
            details: Optional dictionary containing contextual information
        """
        self.message = message
        self.code = code
        self.details = details.copy() if details else {}
        super().__init__(self.message)


class ValidationException(TypeaException):
    """Exception raised for data validation errors.

    Used when input data fails validation checks, such as:
    - A value pushed to an accumulator that is not an entry
    - Invalid arguments to any mixin builder method (the underlying
      pydantic errors are kept under ``details["errors"]``)
    - Inverted time ranges and invalid page numbers
    - Type mismatches

    Should include specific details about what validation failed.
    """

    pass


class ConfigurationException(TypeaException):
    """Exception raised for configuration errors.

    Used when a composite object is wired incorrectly, such as:
    - Missing required collaborators
    - Conflicting mixin registrations
    - Lookups for components that were never configured

    Should include details about the configuration issue.
    """

    pass


class NotSupportedError(TypeaException):
    """Exception raised when a requested operation is not supported.

    Used when a runner or other interpreter meets input it has no
    handling for. Should include details about what was attempted.
    """

    pass
