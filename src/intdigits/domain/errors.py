"""Conversion errors raised by the digit functions.

Each error carries a stable ``code`` so callers (and the service layer)
can branch on the failure without parsing messages. Errors compare equal
when they are the same class with the same message.

``ConversionError`` is only the fixed message; the digit and overflow
errors add a ``detail`` dict naming the offending digit or width.
"""

from __future__ import annotations

from typing import Any, ClassVar


class DigitsError(Exception):
    """Base class for every intdigits failure."""

    code: ClassVar[str] = "DIGITS_ERROR"

    def __init__(self, message: str, **detail: Any) -> None:
        super().__init__(message)
        self.message = message
        self.detail: dict[str, Any] = detail

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.message!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DigitsError) or type(other) is not type(self):
            return NotImplemented
        return self.message == other.message

    def __hash__(self) -> int:
        return hash((type(self), self.message))


class ConversionError(DigitsError, ValueError):
    """Raised when a negative integer is decomposed into digits."""

    code = "INVALID_INPUT"


class InvalidDigitError(DigitsError, ValueError):
    """Raised when a digit sequence is empty or holds a value outside 0-9."""

    code = "INVALID_DIGIT"


class DigitOverflowError(DigitsError, OverflowError):
    """Raised when a value does not fit in the requested width."""

    code = "OVERFLOW"
