# ABOUTME: Accumulator-specific exception classes
# ABOUTME: Covers lifecycle misuse, mixin wiring, runner failures and unsupported entry kinds

from typing import Any, Dict

from typea.exceptions.base import ConfigurationException, NotSupportedError, TypeaException


class AccumulatorError(TypeaException):
    """Base exception class for accumulator lifecycle errors.

    Should be used as a base for more specific exceptions rather than
    being raised directly.
    """

    pass


class NotInitializedError(AccumulatorError):
    """Raised when push or apply is used before a runner has been bound."""

    def __init__(self, message: str = "Accumulator is not initialized", details: Dict[str, Any] | None = None):
        super().__init__(message, "NOT_INITIALIZED", details)


class AlreadyInitializedError(AccumulatorError):
    """Raised when initialize is called on an accumulator that already has a runner.

    The first binding is left intact.
    """

    def __init__(self, message: str = "Accumulator is already initialized", details: Dict[str, Any] | None = None):
        super().__init__(message, "ALREADY_INITIALIZED", details)


class MissingRunnerError(AccumulatorError):
    """Raised when initialize is called without a usable runner."""

    def __init__(self, message: str = "A callable runner is required", details: Dict[str, Any] | None = None):
        super().__init__(message, "MISSING_RUNNER", details)


class AccumulatorSealedError(AccumulatorError):
    """Raised when a single-use accumulator is used after its apply."""

    def __init__(self, message: str = "Accumulator has already been applied", details: Dict[str, Any] | None = None):
        super().__init__(message, "ACCUMULATOR_SEALED", details)


class MixinConflictError(ConfigurationException):
    """Raised when the same mixin type is composed onto one accumulator twice."""

    def __init__(self, message: str, details: Dict[str, Any] | None = None):
        super().__init__(message, "MIXIN_CONFLICT", details)


class MixinNotFoundError(ConfigurationException, KeyError):
    """Raised when a mixin type was never composed onto the accumulator."""

    def __init__(self, message: str, details: Dict[str, Any] | None = None):
        super().__init__(message, "MIXIN_NOT_FOUND", details)

    def __str__(self) -> str:
        return self.message


class RunnerError(TypeaException):
    """Base class for errors raised by runners.

    Runners are free to raise any exception; apply propagates it unchanged.
    This class exists so runners shipped with or built on typea share a
    common base that callers can catch.
    """

    def __init__(self, message: str, code: str | None = "RUNNER_ERROR", details: Dict[str, Any] | None = None):
        super().__init__(message, code, details)


class UnsupportedEntryKindError(RunnerError, NotSupportedError):
    """Raised by a runner that meets an entry kind it has no handler for.

    Attributes:
        kind: The unrecognized entry tag
        index: Position of the offending entry in the applied sequence, if known
    """

    def __init__(self, kind: str, index: int | None = None, details: Dict[str, Any] | None = None):
        self.kind = kind
        self.index = index
        merged = {"kind": kind, "index": index}
        if details:
            merged.update(details)
        super().__init__(f"Unsupported entry kind '{kind}'", "UNSUPPORTED_ENTRY_KIND", merged)
