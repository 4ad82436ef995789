"""Digits — a single-pass iterator over a decomposed integer.

The backing sequence is an immutable tuple that stays inspectable
(``len``, ``in``, indexing) without moving the cursor. Exhaustion is
terminal; build a new instance to iterate again, or wrap it in
``itertools.cycle`` to repeat forever.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from intdigits.domain.digits import check_digits, digits_from_int, int_from_digits
from intdigits.domain.widths import IntWidth


class Digits(Iterator[int]):
    """Cursor over a most-significant-first digit sequence.

    Usage::

        digits = Digits.from_int(369)
        assert 3 in digits
        assert sum(digits) == 18
    """

    __slots__ = ("_values", "_index")

    def __init__(self, values: Iterable[int]) -> None:
        if isinstance(values, Digits):
            # Copy the backing tuple; iterating would consume the source's cursor.
            values = values.values
        self._values: tuple[int, ...] = tuple(check_digits(values))
        self._index = 0

    @classmethod
    def from_int(cls, n: int, *, width: IntWidth = IntWidth.U64) -> Digits:
        """Decompose *n* into a fresh iterator.

        Raises:
            TypeError: *n* is not an ``int``.
            ConversionError: *n* is negative.
            DigitOverflowError: *n* does not fit in *width*.
        """
        return cls(digits_from_int(n, width=width))

    @property
    def values(self) -> tuple[int, ...]:
        """The full backing sequence, independent of the cursor."""
        return self._values

    @property
    def position(self) -> int:
        return self._index

    def to_int(self, *, width: IntWidth = IntWidth.U64) -> int:
        return int_from_digits(self._values, width=width)

    def __iter__(self) -> Digits:
        return self

    def __next__(self) -> int:
        if self._index >= len(self._values):
            raise StopIteration
        self._index += 1
        return self._values[self._index - 1]

    def __len__(self) -> int:
        return len(self._values)

    def __contains__(self, digit: object) -> bool:
        return digit in self._values

    def __getitem__(self, index: int) -> int:
        return self._values[index]

    def __repr__(self) -> str:
        return f"Digits({list(self._values)!r}, position={self._index})"
