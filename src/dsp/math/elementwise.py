"""
Elementwise — поэлементные бинарные операции над последовательностями

Результат строится на объединённом диапазоне операндов, затем обрезается
(trim), чтобы нулевое дополнение не попадало к вызывающему коду.

Режимы комбинирования (CombineMode):
- LEGACY: результат засевается отсчётами x, затем op применяется только
  на диапазоне y: result[p] = op(result[p], y[p]). Позиции, покрытые
  только x, сохраняют исходное значение x (op к ним не применяется).
- ZERO_EXTENDED: оба операнда дополняются нулями до общего диапазона,
  op применяется во всех позициях: result[p] = op(x[p], y[p]).

Для add/subtract режимы совпадают. Для multiply LEGACY оставляет x[p]
там, где y не определён, а ZERO_EXTENDED даёт 0.
"""

import logging
import operator
from enum import Enum
from typing import Any, Callable, Final

from src.dsp.domain.sequence import Sequence
from src.dsp.math.alignment import extend, union_span

logger = logging.getLogger(__name__)

BinaryOp = Callable[[Any, Any], Any]


# =============================================================================
# ENUMS
# =============================================================================


class CombineMode(str, Enum):
    """Трактовка позиций вне диапазона одного из операндов"""

    LEGACY = "legacy"
    ZERO_EXTENDED = "zero_extended"


DEFAULT_COMBINE_MODE: Final[CombineMode] = CombineMode.LEGACY


# =============================================================================
# GENERIC COMBINE
# =============================================================================


def elementwise(
    x: Sequence,
    y: Sequence,
    op: BinaryOp,
    mode: CombineMode = DEFAULT_COMBINE_MODE,
) -> Sequence:
    """
    Поэлементная операция op над x и y с выравниванием по логическим индексам.

    Операнды не изменяются.

    Args:
        x: Левый операнд
        y: Правый операнд
        op: Бинарная операция (operator.add, operator.sub, operator.mul, ...)
        mode: Режим комбинирования (default: CombineMode.LEGACY)

    Returns:
        Новая последовательность после trim(). Тип элемента берётся из x
        (или y, если x пуст). Для двух пустых операндов возвращается пустая
        последовательность со смещением x.
    """
    mode = CombineMode(mode)
    element_type = y.element_type if x.is_empty else x.element_type

    span = union_span(x, y)
    if span is None:
        return Sequence(offset=x.offset, element_type=element_type)

    left, right = span
    logger.debug(f"Combining over [{left}, {right}] with {mode.value} mode")

    if mode is CombineMode.ZERO_EXTENDED:
        xs, ys = x.copy(), y.copy()
        extend(xs, ys)
        combined = [op(a, b) for a, b in zip(xs.data, ys.data)]
        return Sequence.from_array(combined, offset=left, element_type=element_type).trim()

    result = Sequence.filled(right - left + 1, offset=left, element_type=element_type)
    data = result.data

    # засеять x
    if not x.is_empty:
        start = x.offset - left
        data[start : start + len(x)] = x.data

    # применить op на диапазоне y
    start = y.offset - left
    for i, v in enumerate(y.data, start):
        data[i] = op(data[i], v)

    return result.trim()


# =============================================================================
# ARITHMETIC
# =============================================================================


def add(x: Sequence, y: Sequence, mode: CombineMode = DEFAULT_COMBINE_MODE) -> Sequence:
    """Сумма x + y."""
    return elementwise(x, y, operator.add, mode)


def subtract(x: Sequence, y: Sequence, mode: CombineMode = DEFAULT_COMBINE_MODE) -> Sequence:
    """Разность x - y."""
    return elementwise(x, y, operator.sub, mode)


def multiply(x: Sequence, y: Sequence, mode: CombineMode = DEFAULT_COMBINE_MODE) -> Sequence:
    """
    Поэлементное произведение x * y.

    В режиме LEGACY позиции, где определён только x, сохраняют x[p].
    """
    return elementwise(x, y, operator.mul, mode)
