"""Tests for the Digits iterator."""

import functools
import itertools

import pytest

from intdigits.domain.errors import ConversionError, DigitOverflowError, InvalidDigitError
from intdigits.domain.iterator import Digits
from intdigits.domain.widths import IntWidth


class TestDigitsIteration:
    def test_next_then_exhausted(self) -> None:
        digits = Digits.from_int(42)
        assert next(digits) == 4
        assert next(digits) == 2
        with pytest.raises(StopIteration):
            next(digits)

    def test_exhaustion_is_terminal(self) -> None:
        digits = Digits.from_int(7)
        assert list(digits) == [7]
        assert list(digits) == []
        assert next(digits, None) is None

    def test_cycle_repeats(self) -> None:
        cycled = itertools.cycle(Digits.from_int(42))
        assert list(itertools.islice(cycled, 6)) == [4, 2, 4, 2, 4, 2]

    def test_enumerate(self) -> None:
        assert list(enumerate(Digits.from_int(369))) == [(0, 3), (1, 6), (2, 9)]

    def test_fold_sum(self) -> None:
        assert functools.reduce(lambda acc, x: acc + x, Digits.from_int(369), 0) == 18
        assert sum(Digits.from_int(369)) == 18

    def test_count(self) -> None:
        assert sum(1 for _ in Digits.from_int(369)) == 3

    def test_position_tracks_cursor(self) -> None:
        digits = Digits.from_int(123)
        assert digits.position == 0
        next(digits)
        assert digits.position == 1


class TestDigitsView:
    def test_len(self) -> None:
        assert len(Digits.from_int(42)) == 2

    def test_contains(self) -> None:
        digits = Digits.from_int(369)
        assert 3 in digits
        assert 4 not in digits

    def test_view_does_not_move_cursor(self) -> None:
        digits = Digits.from_int(369)
        next(digits)
        assert 3 in digits
        assert len(digits) == 3
        assert digits[0] == 3
        assert digits.values == (3, 6, 9)
        assert next(digits) == 6

    def test_view_survives_exhaustion(self) -> None:
        digits = Digits.from_int(42)
        list(digits)
        assert digits.values == (4, 2)
        assert digits.to_int() == 42

    def test_repr(self) -> None:
        assert repr(Digits.from_int(42)) == "Digits([4, 2], position=0)"


class TestDigitsConstruction:
    def test_from_int_zero(self) -> None:
        assert Digits.from_int(0).values == (0,)

    def test_from_int_negative_raises(self) -> None:
        with pytest.raises(ConversionError, match="negative integer"):
            Digits.from_int(-42)

    def test_from_int_honours_width(self) -> None:
        assert Digits.from_int(255, width=IntWidth.U8).values == (2, 5, 5)

    def test_from_sequence(self) -> None:
        assert Digits([4, 2]).to_int() == 42

    def test_rebuild_restarts(self) -> None:
        digits = Digits.from_int(42)
        list(digits)
        assert list(Digits(digits.values)) == [4, 2]

    def test_from_partly_read_digits_keeps_all_values(self) -> None:
        source = Digits.from_int(369)
        next(source)
        copy = Digits(source)
        assert copy.values == (3, 6, 9)
        assert copy.position == 0
        assert source.position == 1
        assert next(source) == 6

    def test_from_digits_leaves_source_cursor(self) -> None:
        source = Digits.from_int(369)
        assert list(Digits(source)) == [3, 6, 9]
        assert source.position == 0

    def test_from_int_overflow_and_type(self) -> None:
        with pytest.raises(DigitOverflowError):
            Digits.from_int(256, width=IntWidth.U8)
        with pytest.raises(TypeError):
            Digits.from_int("42")  # type: ignore[arg-type]

    def test_invalid_digit_rejected(self) -> None:
        with pytest.raises(InvalidDigitError):
            Digits([1, 12])

    def test_empty_rejected(self) -> None:
        with pytest.raises(InvalidDigitError):
            Digits([])
