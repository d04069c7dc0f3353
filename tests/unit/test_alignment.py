"""
Тесты для Alignment — выравнивание последовательностей

Проверяемые инварианты:
1. После extend оба операнда занимают общий диапазон
2. Отсчёты не сдвигаются относительно логических индексов
3. Добавляются только нули
4. Пустые операнды обрабатываются без ошибок
"""

import pytest

from src.dsp.domain import Sequence
from src.dsp.math.alignment import extend, logical_span, pad_to_span, union_span


class TestSpans:
    """Тесты logical_span / union_span."""

    def test_logical_span(self) -> None:
        assert logical_span(Sequence([1.0, 2.0, 3.0], offset=-1)) == (-1, 1)
        assert logical_span(Sequence([1.0])) == (0, 0)

    def test_logical_span_empty(self) -> None:
        assert logical_span(Sequence(offset=4)) is None

    def test_union_span(self) -> None:
        x = Sequence([1.0, 2.0], offset=0)
        y = Sequence([1.0] * 10, offset=-1)
        assert union_span(x, y) == (-1, 8)

    def test_union_span_ignores_empty(self) -> None:
        x = Sequence(offset=-100)
        y = Sequence([1.0, 2.0], offset=3)
        assert union_span(x, y) == (3, 4)
        assert union_span(x, Sequence()) is None


class TestExtend:
    """Тесты extend."""

    def test_extend_both_sides(self) -> None:
        x = Sequence([1.0, 2.0], offset=0)
        y = Sequence([3.0], offset=-2)
        extend(x, y)

        assert x.offset == y.offset == -2
        assert len(x) == len(y) == 4
        assert x.data == [0.0, 0.0, 1.0, 2.0]
        assert y.data == [3.0, 0.0, 0.0, 0.0]

    def test_extend_preserves_logical_positions(self) -> None:
        x = Sequence([5.0, 6.0, 7.0], offset=2)
        y = Sequence([1.0, 1.0], offset=-3)
        before_x = {n: x[n] for n in x.indices()}
        before_y = {n: y[n] for n in y.indices()}

        extend(x, y)

        for n, v in before_x.items():
            assert x[n] == v
        for n, v in before_y.items():
            assert y[n] == v
        assert x.indices() == y.indices() == range(-3, 5)

    def test_extend_pads_only_zeros(self) -> None:
        x = Sequence([4, 4], offset=0)
        y = Sequence([9], offset=5)
        extend(x, y)
        assert x.data == [4, 4, 0, 0, 0, 0]
        assert y.data == [0, 0, 0, 0, 0, 9]
        assert all(type(v) is int for v in x.data)

    def test_extend_keeps_storage(self) -> None:
        x = Sequence([1.0], offset=3)
        y = Sequence([1.0], offset=0)
        storage = x.data
        extend(x, y)
        assert x.data is storage

    def test_extend_already_aligned(self) -> None:
        x = Sequence([1.0, 2.0], offset=-1)
        y = Sequence([3.0, 4.0], offset=-1)
        extend(x, y)
        assert x == Sequence([1.0, 2.0], offset=-1)
        assert y == Sequence([3.0, 4.0], offset=-1)

    def test_extend_one_empty(self) -> None:
        x = Sequence(offset=10)
        y = Sequence([1.0, 2.0], offset=-1)
        extend(x, y)
        assert x == Sequence([0.0, 0.0], offset=-1)
        assert y == Sequence([1.0, 2.0], offset=-1)

    def test_extend_both_empty(self) -> None:
        x = Sequence(offset=2)
        y = Sequence(offset=-2)
        extend(x, y)
        assert x == Sequence(offset=2)
        assert y == Sequence(offset=-2)

    def test_extend_same_object(self) -> None:
        x = Sequence([1.0, 2.0], offset=3)
        extend(x, x)
        assert x == Sequence([1.0, 2.0], offset=3)


class TestPadToSpan:
    """Тесты pad_to_span."""

    def test_pad(self) -> None:
        seq = pad_to_span(Sequence([1.0], offset=0), -1, 2)
        assert seq == Sequence([0.0, 1.0, 0.0, 0.0], offset=-1)

    def test_span_must_cover_samples(self) -> None:
        with pytest.raises(ValueError, match="does not cover"):
            pad_to_span(Sequence([1.0, 2.0, 3.0], offset=0), 1, 5)
