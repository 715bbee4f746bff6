"""Unit tests for validated counts."""

import pytest

from diceroll.num import DiceError, InvalidArgumentError, PositiveCount, non_negative


class TestPositiveCount:
    def test_wraps_value(self) -> None:
        assert PositiveCount(5).value == 5

    def test_large_value(self) -> None:
        assert PositiveCount(2424).value == 2424

    def test_value_round_trips_for_small_range(self) -> None:
        for n in range(1, 50):
            assert PositiveCount(n).value == n

    def test_int_conversion(self) -> None:
        assert int(PositiveCount(20)) == 20

    def test_zero_rejected(self) -> None:
        with pytest.raises(InvalidArgumentError, match="Input must be an integer greater than zero"):
            PositiveCount(0)

    def test_negative_rejected(self) -> None:
        with pytest.raises(InvalidArgumentError):
            PositiveCount(-3)

    def test_non_integer_rejected(self) -> None:
        with pytest.raises(InvalidArgumentError):
            PositiveCount("6")  # type: ignore[arg-type]

    def test_bool_rejected(self) -> None:
        with pytest.raises(InvalidArgumentError):
            PositiveCount(True)

    def test_error_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            PositiveCount(0)
        assert issubclass(InvalidArgumentError, DiceError)

    def test_equality(self) -> None:
        assert PositiveCount(5) == PositiveCount(5)
        assert PositiveCount(5) != PositiveCount(6)

    def test_not_equal_to_plain_int(self) -> None:
        assert PositiveCount(5) != 5

    def test_hashable(self) -> None:
        assert len({PositiveCount(3), PositiveCount(3), PositiveCount(4)}) == 2

    def test_immutable(self) -> None:
        count = PositiveCount(3)
        with pytest.raises(AttributeError):
            count.value = 4  # type: ignore[misc]

    def test_repr(self) -> None:
        assert repr(PositiveCount(7)) == "PositiveCount(7)"


class TestNonNegative:
    def test_zero_allowed(self) -> None:
        assert non_negative(0) == 0

    def test_positive_passthrough(self) -> None:
        assert non_negative(12) == 12

    def test_negative_rejected(self) -> None:
        with pytest.raises(InvalidArgumentError, match="number_of_dice must be"):
            non_negative(-1, "number_of_dice")

    def test_float_rejected(self) -> None:
        with pytest.raises(InvalidArgumentError):
            non_negative(1.5)  # type: ignore[arg-type]
