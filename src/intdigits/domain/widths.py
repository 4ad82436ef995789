"""Fixed integer widths that bound every conversion.

Python integers are unbounded, so the width a value is meant to fit in
is passed explicitly. Eight widths are supported: 8/16/32/64 bits,
signed and unsigned.
"""

from __future__ import annotations

from enum import StrEnum


class IntWidth(StrEnum):
    """Integer width and signedness, named the way they are usually written."""

    U8 = "u8"
    U16 = "u16"
    U32 = "u32"
    U64 = "u64"
    I8 = "i8"
    I16 = "i16"
    I32 = "i32"
    I64 = "i64"

    @property
    def signed(self) -> bool:
        return self.value.startswith("i")

    @property
    def bits(self) -> int:
        return int(self.value[1:])

    @property
    def min_value(self) -> int:
        if self.signed:
            return -(1 << (self.bits - 1))
        return 0

    @property
    def max_value(self) -> int:
        if self.signed:
            return (1 << (self.bits - 1)) - 1
        return (1 << self.bits) - 1

    def contains(self, value: int) -> bool:
        """Check whether *value* is representable in this width."""
        return self.min_value <= value <= self.max_value
