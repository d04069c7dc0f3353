"""
Тесты для Elementwise — поэлементная арифметика

Проверяемые инварианты:
1. Результат на объединённом диапазоне, после trim
2. Коммутативность сложения
3. LEGACY: позиции вне диапазона y сохраняют значение x
4. ZERO_EXTENDED: op применяется на всём диапазоне
5. Операнды не изменяются
"""

import operator

import pytest

from src.dsp.domain import Sequence
from src.dsp.math.elementwise import (
    DEFAULT_COMBINE_MODE,
    CombineMode,
    add,
    elementwise,
    multiply,
    subtract,
)


# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture
def scenario_a():
    """[1, 1, 1, 3, 1], offset 0."""
    x = Sequence.filled(5, 1.0)
    x[3] = 3.0
    return x


@pytest.fixture
def scenario_b():
    """Десять двоек начиная с индекса -1."""
    return Sequence.filled(10, 2.0, offset=-1)


# =============================================================================
# ТЕСТЫ
# =============================================================================


class TestAdd:
    """Тесты add."""

    def test_add_aligned(self) -> None:
        result = add(Sequence([1.0, 2.0]), Sequence([3.0, 4.0]))
        assert result == Sequence([4.0, 6.0])

    def test_add_different_offsets(self) -> None:
        x = Sequence([1.0, 2.0, 3.0], offset=-1)
        y = Sequence([4.0, 5.0], offset=1)
        assert add(x, y) == Sequence([1.0, 2.0, 7.0, 5.0], offset=-1)

    def test_add_commutative(self) -> None:
        x = Sequence([1.0, 0.0, 3.0], offset=-4)
        y = Sequence([2.0, 5.0, 0.0, 1.0], offset=-2)
        assert add(x, y) == add(y, x)

    def test_operands_untouched(self) -> None:
        x = Sequence([1.0, 2.0], offset=0)
        y = Sequence([3.0], offset=5)
        add(x, y)
        assert x == Sequence([1.0, 2.0], offset=0)
        assert y == Sequence([3.0], offset=5)

    def test_result_trimmed(self) -> None:
        x = Sequence([1.0, 2.0, 3.0])
        y = Sequence([-1.0, 0.0, -3.0])
        assert add(x, y) == Sequence([2.0], offset=1)

    def test_gap_between_operands_is_zero(self) -> None:
        x = Sequence([1.0], offset=0)
        y = Sequence([2.0], offset=3)
        assert add(x, y) == Sequence([1.0, 0.0, 0.0, 2.0], offset=0)


class TestSubtract:
    """Тесты subtract."""

    def test_subtract(self) -> None:
        x = Sequence([5.0], offset=0)
        y = Sequence([1.0, 1.0], offset=0)
        assert subtract(x, y) == Sequence([4.0, -1.0])

    def test_cancellation_to_all_zero(self) -> None:
        """Нулевой результат не схлопывается в пустой."""
        x = Sequence([1.0, 1.0])
        result = subtract(x, x.copy())
        assert result == Sequence([0.0, 0.0])


class TestMultiply:
    """Тесты multiply."""

    def test_scenario_b(self, scenario_a, scenario_b) -> None:
        """x внутри диапазона y: результат на [0, 4]."""
        result = multiply(scenario_a, scenario_b)
        assert result == Sequence([2.0, 2.0, 2.0, 6.0, 2.0], offset=0)

    def test_scenario_b_commuted(self, scenario_a, scenario_b) -> None:
        """Засевается левый операнд: двойки вне [0, 4] сохраняются."""
        result = multiply(scenario_b, scenario_a)
        expected = [2.0, 2.0, 2.0, 2.0, 6.0, 2.0, 2.0, 2.0, 2.0, 2.0]
        assert result == Sequence(expected, offset=-1)

    def test_scenario_b_zero_extended_commutes(self, scenario_a, scenario_b) -> None:
        forward = multiply(scenario_a, scenario_b, mode=CombineMode.ZERO_EXTENDED)
        backward = multiply(scenario_b, scenario_a, mode=CombineMode.ZERO_EXTENDED)
        assert forward == backward == Sequence([2.0, 2.0, 2.0, 6.0, 2.0], offset=0)

    def test_legacy_keeps_x_outside_y(self) -> None:
        """LEGACY: позиции, покрытые только x, не умножаются."""
        x = Sequence([1.0, 2.0, 3.0], offset=0)
        y = Sequence([10.0], offset=1)
        assert multiply(x, y) == Sequence([1.0, 20.0, 3.0])

    def test_zero_extended_zeroes_outside_overlap(self) -> None:
        x = Sequence([1.0, 2.0, 3.0], offset=0)
        y = Sequence([10.0], offset=1)
        result = multiply(x, y, mode=CombineMode.ZERO_EXTENDED)
        assert result == Sequence([20.0], offset=1)

    def test_mode_accepts_string(self) -> None:
        x = Sequence([1.0, 2.0], offset=0)
        y = Sequence([3.0], offset=0)
        assert multiply(x, y, mode="zero_extended") == Sequence([3.0])

    def test_invalid_mode(self) -> None:
        with pytest.raises(ValueError):
            multiply(Sequence([1.0]), Sequence([1.0]), mode="bogus")


class TestElementwise:
    """Тесты обобщённой операции."""

    def test_default_mode(self) -> None:
        assert DEFAULT_COMBINE_MODE is CombineMode.LEGACY

    def test_custom_operator(self) -> None:
        x = Sequence([1, 7, 3])
        y = Sequence([4, 2, 6])
        assert elementwise(x, y, max) == Sequence([4, 7, 6])

    @pytest.mark.parametrize("mode", list(CombineMode))
    def test_add_modes_agree(self, mode) -> None:
        x = Sequence([1.0, 2.0], offset=-1)
        y = Sequence([3.0, 4.0, 5.0], offset=0)
        assert elementwise(x, y, operator.add, mode) == Sequence([1.0, 5.0, 4.0, 5.0], offset=-1)

    def test_integer_elements(self) -> None:
        result = add(Sequence([1, 2]), Sequence([3], offset=2))
        assert result.data == [1, 2, 3]
        assert all(type(v) is int for v in result.data)

    def test_one_empty_operand(self) -> None:
        y = Sequence([1.0, 2.0], offset=3)
        assert add(Sequence(offset=-50), y) == y
        assert add(y, Sequence(offset=50)) == y

    def test_both_empty(self) -> None:
        result = add(Sequence(offset=2), Sequence(offset=-2))
        assert result.is_empty
        assert result.offset == 2

    @pytest.mark.parametrize("mode", list(CombineMode))
    def test_empty_operand_all_modes(self, mode) -> None:
        y = Sequence([2.0], offset=1)
        assert subtract(Sequence(), y, mode=mode) == Sequence([-2.0], offset=1)
