"""
Convolution — дискретная свёртка последовательностей

    y[k] = Σ x[i] · h[k - i]

Длина результата N + M - 1. По умолчанию смещения операндов игнорируются
(оба считаются начинающимися с индекса 0) и результат имеет offset 0.
При honor_offsets=True offset результата равен x.offset + h.offset.
"""

import logging

from src.dsp.domain.sequence import Sequence

logger = logging.getLogger(__name__)


def conv(x: Sequence, y: Sequence, honor_offsets: bool = False) -> Sequence:
    """
    Свёртка x и y.

    Args:
        x: Первый операнд (длина N)
        y: Второй операнд (длина M)
        honor_offsets: Учитывать смещения операндов (default: False)

    Returns:
        Новая последовательность длины N + M - 1 (пустая, если пуст
        хотя бы один операнд). trim() не применяется.

    Examples:
        >>> conv(Sequence([1.0, 1.0]), Sequence([1.0, 2.0])).data
        [1.0, 3.0, 2.0]
    """
    offset = x.offset + y.offset if honor_offsets else 0

    if x.is_empty or y.is_empty:
        return Sequence(offset=offset, element_type=x.element_type)

    n, m = len(x), len(y)
    logger.debug(f"Convolving sequences of length {n} and {m}")

    result = Sequence.filled(n + m - 1, offset=offset, element_type=x.element_type)
    data = result.data
    for i, xv in enumerate(x.data):
        for j, yv in enumerate(y.data):
            data[i + j] += xv * yv
    return result
