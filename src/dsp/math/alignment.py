"""
Alignment — выравнивание двух последовательностей по логическому диапазону

extend(x, y) дополняет обе последовательности нулями (в начало и/или конец),
чтобы они занимали общий диапазон [min(first), max(last)]. Отсчёты не
сдвигаются относительно своих логических индексов.

Пустая последовательность не вносит вклад в общий диапазон.
"""

import logging

from src.dsp.domain.sequence import Sequence

logger = logging.getLogger(__name__)


def logical_span(seq: Sequence) -> tuple[int, int] | None:
    """
    Занимаемый диапазон логических индексов.

    Returns:
        (first, last) включительно, либо None для пустой последовательности
    """
    if seq.is_empty:
        return None
    return (seq.first_index, seq.last_index)


def union_span(x: Sequence, y: Sequence) -> tuple[int, int] | None:
    """
    Объединённый диапазон двух последовательностей.

    Returns:
        (min(first), max(last)) по непустым операндам, None если оба пусты
    """
    spans = [s for s in (logical_span(x), logical_span(y)) if s is not None]
    if not spans:
        return None
    return (min(s[0] for s in spans), max(s[1] for s in spans))


def pad_to_span(seq: Sequence, left: int, right: int) -> Sequence:
    """
    Дополнить последовательность нулями до диапазона [left, right] на месте.

    Диапазон должен содержать текущие отсчёты последовательности.

    Raises:
        ValueError: Если [left, right] не покрывает существующие отсчёты
    """
    if seq.is_empty:
        seq.data.extend([seq.zero] * (right - left + 1))
        seq.offset = left
        return seq

    if left > seq.first_index or right < seq.last_index:
        raise ValueError(
            f"span [{left}, {right}] does not cover "
            f"[{seq.first_index}, {seq.last_index}]"
        )

    front = seq.first_index - left
    back = right - seq.last_index
    if front > 0:
        seq.data[0:0] = [seq.zero] * front
        seq.offset = left
    if back > 0:
        seq.data.extend([seq.zero] * back)
    return seq


def extend(x: Sequence, y: Sequence) -> None:
    """
    Дополнить x и y нулями до общего логического диапазона (на месте).

    После вызова len(x) == len(y) и x.offset == y.offset, если хотя бы
    одна из последовательностей непуста.
    """
    span = union_span(x, y)
    if span is None:
        return

    left, right = span
    logger.debug(
        f"Extending [{x.first_index}, {x.last_index}] and "
        f"[{y.first_index}, {y.last_index}] to [{left}, {right}]"
    )
    pad_to_span(x, left, right)
    pad_to_span(y, left, right)
