"""iCalendar value codec exception classes."""

from __future__ import annotations

from typing import Any


class ICalError(Exception):
    """Base exception for all iCalendar codec errors."""


class ICalValueError(ICalError):
    """Error raised by a value or list codec operation.

    Attributes:
        operation: Name of the operation that failed (e.g. "decode_value")
        message: Human-readable description of the failure
        instance: The value or list the operation was called on
        cause: The underlying exception, or None
    """

    operation: str
    message: str
    instance: Any
    cause: BaseException | None

    def __init__(self, operation: str, message: str, instance: Any, cause: BaseException | None = None) -> None:
        super().__init__(message)
        self.operation = operation
        self.message = message
        self.instance = instance
        self.cause = cause

    def __str__(self) -> str:
        if self.cause is None:
            return f"{self.operation}: {self.message}"
        return f"{self.operation}: {self.message}: {self.cause}"


class ICalParseError(ICalValueError):
    """Text or parameter could not be parsed (bad layout, escaping or timezone)."""


class ICalValidationError(ICalValueError):
    """Parsed value violates calendar rules."""


class ICalEncodeError(ICalValueError):
    """Value could not be encoded to text."""
