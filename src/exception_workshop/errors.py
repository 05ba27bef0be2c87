"""
Error taxonomy for exception-workshop.

Every failure an operation can signal belongs to a closed set of kinds
(ErrorKind). Each kind has exactly one exception class, tagged with its kind
and also deriving from the matching built-in exception so ordinary handlers
(``except KeyError``, ``except ZeroDivisionError``) keep working.
"""

from enum import Enum
from typing import Any


class ErrorKind(str, Enum):
    """Closed set of error kinds an operation may fail with."""

    NULL_INPUT = "null_input"
    INVALID_ARGUMENT = "invalid_argument"
    INDEX_OUT_OF_RANGE = "index_out_of_range"
    INVALID_STATE = "invalid_state"
    FORMAT_ERROR = "format_error"
    KEY_NOT_FOUND = "key_not_found"
    ARITHMETIC_OVERFLOW = "arithmetic_overflow"
    DIVISION_BY_ZERO = "division_by_zero"


class WorkshopError(Exception):
    """Base exception for every operation failure."""

    kind: ErrorKind

    def __init__(self, message: str, **details: Any):
        self.message = message
        self.details = details
        super().__init__(message)

    def __str__(self) -> str:
        return self.message

    def __reduce__(self):
        # Rebuild from the message, then restore details through the instance state
        return type(self), (self.message,), self.__dict__.copy()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(kind={self.kind.value!r}, message={self.message!r})"

    def to_dict(self) -> dict[str, Any]:
        """Serialize the error for result payloads."""
        return {
            "kind": self.kind.value,
            "message": self.message,
            "details": dict(self.details),
        }


class NullInputError(WorkshopError, TypeError):
    """Raised when a required input is absent (None)."""

    kind = ErrorKind.NULL_INPUT


class InvalidArgumentError(WorkshopError, ValueError):
    """Raised when a numeric argument falls outside its valid domain."""

    kind = ErrorKind.INVALID_ARGUMENT


class IndexOutOfRangeError(WorkshopError, IndexError):
    """Raised when a sequence index is negative or not below the length."""

    kind = ErrorKind.INDEX_OUT_OF_RANGE


class InvalidStateError(WorkshopError, RuntimeError):
    """Raised when an operation runs while its precondition flag is false."""

    kind = ErrorKind.INVALID_STATE


class FormatError(WorkshopError, ValueError):
    """Raised when text cannot be parsed into the target numeric type."""

    kind = ErrorKind.FORMAT_ERROR


class KeyNotFoundError(WorkshopError, KeyError):
    """Raised when a lookup key is absent from a mapping."""

    kind = ErrorKind.KEY_NOT_FOUND


class ArithmeticOverflowError(WorkshopError, OverflowError):
    """Raised when an exact integer result exceeds the representable range."""

    kind = ErrorKind.ARITHMETIC_OVERFLOW


class DivisionByZeroError(WorkshopError, ZeroDivisionError):
    """Raised when the divisor of an integer division is zero."""

    kind = ErrorKind.DIVISION_BY_ZERO


_ERRORS_BY_KIND: dict[ErrorKind, type[WorkshopError]] = {
    cls.kind: cls
    for cls in (
        NullInputError,
        InvalidArgumentError,
        IndexOutOfRangeError,
        InvalidStateError,
        FormatError,
        KeyNotFoundError,
        ArithmeticOverflowError,
        DivisionByZeroError,
    )
}


def error_for_kind(kind: ErrorKind | str) -> type[WorkshopError]:
    """
    Get the exception class for an error kind.

    Args:
        kind: ErrorKind member or its string value

    Returns:
        The WorkshopError subclass tagged with that kind

    Raises:
        ValueError: If kind is not a known error kind
    """
    return _ERRORS_BY_KIND[ErrorKind(kind)]
