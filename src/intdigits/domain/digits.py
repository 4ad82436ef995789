"""Decompose integers into decimal digits and recompose them.

Digit sequences are most-significant first and never empty: zero is
``[0]``. Both directions are bounded by an :class:`IntWidth`.

Recompose rejects rather than wraps: out-of-range digits and empty
sequences raise :class:`InvalidDigitError`, and a value that grows past
the width raises :class:`DigitOverflowError`.
"""

from __future__ import annotations

from collections.abc import Iterable

from intdigits.domain.errors import ConversionError, DigitOverflowError, InvalidDigitError
from intdigits.domain.widths import IntWidth

RADIX = 10
NEGATIVE_INPUT_MESSAGE = "unable to convert from negative integer to digits"


def _require_int(value: object, what: str) -> int:
    # bool is an int subclass but is never a digit or an operand here.
    if isinstance(value, bool) or not isinstance(value, int):
        msg = f"{what} must be an int, got {type(value).__name__}"
        raise TypeError(msg)
    return value


def check_digits(digits: Iterable[int]) -> list[int]:
    """Validate a digit sequence and return it as a list.

    Raises:
        TypeError: an element is not an ``int``.
        InvalidDigitError: the sequence is empty or holds a value outside 0-9.
    """
    values = [_require_int(d, "digit") for d in digits]
    if not values:
        raise InvalidDigitError("digit sequence is empty")
    for pos, digit in enumerate(values):
        if not 0 <= digit < RADIX:
            msg = f"digit {digit} at position {pos} is outside 0-9"
            raise InvalidDigitError(msg, digit=digit, position=pos)
    return values


def digits_from_int(n: int, *, width: IntWidth = IntWidth.U64) -> list[int]:
    """Return the base-10 digits of *n*, most-significant first.

    Raises:
        TypeError: *n* is not an ``int``.
        ConversionError: *n* is negative.
        DigitOverflowError: *n* does not fit in *width*.
    """
    n = _require_int(n, "value")
    if n < 0:
        raise ConversionError(NEGATIVE_INPUT_MESSAGE)
    if not width.contains(n):
        msg = f"{n} does not fit in {width}"
        raise DigitOverflowError(msg, value=n, width=str(width))

    digits: list[int] = []
    rem = n
    while rem // RADIX > 0:
        rem, last = divmod(rem, RADIX)
        digits.append(last)
    digits.append(rem)
    digits.reverse()
    return digits


def int_from_digits(digits: Iterable[int], *, width: IntWidth = IntWidth.U64) -> int:
    """Return the integer spelled by *digits* (most-significant first).

    Digits are consumed least-significant first; each one is scaled by
    ``10**idx`` and added to the running total.

    Raises:
        TypeError: an element is not an ``int``.
        InvalidDigitError: *digits* is empty or holds a value outside 0-9.
        DigitOverflowError: the result does not fit in *width*.
    """
    values = check_digits(digits)

    number = 0
    multiplier = 1
    for digit in reversed(values):
        number += digit * multiplier
        if number > width.max_value:
            msg = f"digits {values} overflow {width}"
            raise DigitOverflowError(msg, digits=values, width=str(width))
        multiplier *= RADIX
    return number
