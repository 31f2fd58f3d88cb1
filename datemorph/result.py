"""Result type returned by every engine operation.

Operations never raise for malformed input. They return a Result that
either carries a value or an ErrorKind describing why the input was
rejected.

Legacy callers that expect in-band markers (``-1``, ``False``,
``"Invalid date format"``) can call :meth:`Result.or_sentinel`.

Examples:
    >>> ok = Result.success(9)
    >>> ok.ok, ok.value
    (True, 9)

    >>> bad = Result.failure(ErrorKind.INVALID_FORMAT, "no match", sentinel=-1)
    >>> bad.ok, bad.error
    (False, <ErrorKind.INVALID_FORMAT: 'invalid_format'>)
    >>> bad.or_sentinel()
    -1
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Generic, TypeVar

T = TypeVar("T")


class ErrorKind(Enum):
    """Reason an operation rejected its input.

    Values:
        INVALID_FORMAT: Pattern is malformed, or input does not strictly
            match it.
        INVALID_TIMESTAMP: Epoch timestamp is negative.
        INVALID_ZONE: Zone identifier is not recognized.
        INVALID_CALENDAR_INPUT: Raw calendar integer (month) out of range.
    """

    INVALID_FORMAT = "invalid_format"
    INVALID_TIMESTAMP = "invalid_timestamp"
    INVALID_ZONE = "invalid_zone"
    INVALID_CALENDAR_INPUT = "invalid_calendar_input"


class ResultError(Exception):
    """Raised by :meth:`Result.unwrap` on a failed result."""

    def __init__(self, kind: ErrorKind, message: str) -> None:
        super().__init__(f"{kind.value}: {message}")
        self.kind = kind
        self.message = message


@dataclass(frozen=True)
class Result(Generic[T]):
    """Outcome of an operation: a value, or an error kind with a message.

    Attributes:
        value: The computed value. None when the operation failed.
        error: The error kind, or None on success.
        message: Human-readable detail for a failure.
        sentinel: Legacy in-band marker for this operation's failure.
    """

    value: T | None = None
    error: ErrorKind | None = None
    message: str = ""
    sentinel: Any = None

    @classmethod
    def success(cls, value: T) -> Result[T]:
        """Build a successful result."""
        return cls(value=value)

    @classmethod
    def failure(
        cls,
        error: ErrorKind,
        message: str,
        *,
        sentinel: Any = None,
    ) -> Result[T]:
        """Build a failed result.

        Args:
            error: Why the operation failed.
            message: Detail suitable for logs or error reports.
            sentinel: Value :meth:`or_sentinel` returns for this failure.
        """
        return cls(error=error, message=message, sentinel=sentinel)

    @property
    def ok(self) -> bool:
        """True if the operation succeeded."""
        return self.error is None

    def unwrap(self) -> T:
        """Return the value, raising ResultError on failure.

        Raises:
            ResultError: If this result is a failure.

        Examples:
            >>> Result.success("2024-01-10").unwrap()
            '2024-01-10'
        """
        if self.error is not None:
            raise ResultError(self.error, self.message)
        return self.value  # type: ignore[return-value]

    def value_or(self, default: T) -> T:
        """Return the value, or ``default`` on failure."""
        if self.error is not None:
            return default
        return self.value  # type: ignore[return-value]

    def or_sentinel(self) -> Any:
        """Return the value, or the operation's legacy sentinel on failure.

        Examples:
            >>> Result.failure(
            ...     ErrorKind.INVALID_FORMAT, "bad", sentinel="Invalid date format"
            ... ).or_sentinel()
            'Invalid date format'
        """
        if self.error is not None:
            return self.sentinel
        return self.value

    def __bool__(self) -> bool:
        return self.ok


__all__ = ["ErrorKind", "Result", "ResultError"]
