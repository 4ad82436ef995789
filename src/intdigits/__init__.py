"""intdigits — convert integers to decimal digit sequences and back."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version

from intdigits.domain.digits import digits_from_int, int_from_digits
from intdigits.domain.errors import (
    ConversionError,
    DigitOverflowError,
    DigitsError,
    InvalidDigitError,
)
from intdigits.domain.iterator import Digits
from intdigits.domain.widths import IntWidth

try:
    __version__ = version("intdigits")
except PackageNotFoundError:
    __version__ = "0.0.0"

__all__ = [
    "ConversionError",
    "DigitOverflowError",
    "Digits",
    "DigitsError",
    "IntWidth",
    "InvalidDigitError",
    "__version__",
    "digits_from_int",
    "int_from_digits",
]
