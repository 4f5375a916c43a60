# ABOUTME: Exceptions package exports
# ABOUTME: Exports the base exception and the accumulator error taxonomy

from typea.exceptions.base import (
    TypeaException,
    ValidationException,
    ConfigurationException,
    NotSupportedError,
)

from typea.exceptions.accumulator import (
    AccumulatorError,
    NotInitializedError,
    AlreadyInitializedError,
    MissingRunnerError,
    AccumulatorSealedError,
    MixinConflictError,
    MixinNotFoundError,
    RunnerError,
    UnsupportedEntryKindError,
)

__all__ = [
    "TypeaException",
    "ValidationException",
    "ConfigurationException",
    "NotSupportedError",
    # Accumulator exceptions
    "AccumulatorError",
    "NotInitializedError",
    "AlreadyInitializedError",
    "MissingRunnerError",
    "AccumulatorSealedError",
    "MixinConflictError",
    "MixinNotFoundError",
    "RunnerError",
    "UnsupportedEntryKindError",
]
