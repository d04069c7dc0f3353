"""
Text Format — текстовое представление последовательностей

Два представления:
- Диагностическое (format_sequence): "v0 v1 ... offset: N"
- Каноническое (serialize_sequence / parse_sequence):
      <length> <offset> <v0> <v1> ... <v{length-1}>
  токены разделены пробельными символами и читаются по порядку.

Каноническая форма допускает несколько последовательностей подряд в одном
потоке токенов (parse_sequences).

Ошибки разбора -> SequenceParseError с количеством успешно прочитанных
элементов и частично заполненной последовательностью.
"""

import logging
from typing import IO, Any, Callable, Final

from src.dsp.domain.sequence import Sequence
from src.dsp.domain.numerical_safeguards import (
    DEFAULT_ELEMENT_TYPE,
    infer_element_type,
    format_sample,
)

logger = logging.getLogger(__name__)

# =============================================================================
# КОНСТАНТЫ ФОРМАТА
# =============================================================================

TEXT_SEPARATOR: Final[str] = " "

TEXT_OFFSET_LABEL: Final[str] = "offset:"


# =============================================================================
# EXCEPTIONS
# =============================================================================


class SequenceParseError(ValueError):
    """
    Некорректный или неполный текст канонической формы.

    Attributes:
        expected: Заявленная длина (None, если заголовок не прочитан)
        elements_read: Сколько элементов прочитано успешно
        partial: Последовательность с прочитанными элементами (None, если
            заголовок не прочитан). При нехватке токенов содержит только
            прочитанные элементы; при некорректном элементе он и следующие
            за ним токены заменяются нулями
    """

    def __init__(
        self,
        message: str,
        expected: int | None = None,
        elements_read: int = 0,
        partial: Sequence | None = None,
    ):
        self.expected = expected
        self.elements_read = elements_read
        self.partial = partial
        super().__init__(message)


# =============================================================================
# ФОРМАТИРОВАНИЕ
# =============================================================================


def format_sequence(seq: Sequence) -> str:
    """
    Диагностическая строка: отсчёты по порядку, затем смещение.

    Examples:
        >>> format_sequence(Sequence([1.0, 1.0, 3.0], offset=-1))
        '1 1 3 offset: -1'
    """
    parts = [format_sample(v) for v in seq.data]
    parts.append(f"{TEXT_OFFSET_LABEL} {seq.offset}")
    return TEXT_SEPARATOR.join(parts)


def serialize_sequence(seq: Sequence) -> str:
    """
    Каноническая строка "<length> <offset> <values...>".

    Значения выводятся через str(), что обратимо для float, int,
    Fraction, Decimal и complex.
    """
    parts = [str(len(seq)), str(seq.offset)]
    parts.extend(str(v) for v in seq.data)
    return TEXT_SEPARATOR.join(parts)


# =============================================================================
# РАЗБОР
# =============================================================================


def _parse_header_int(token: str | None, name: str) -> int:
    if token is None:
        raise SequenceParseError(f"missing {name} in header")
    try:
        return int(token)
    except ValueError:
        raise SequenceParseError(f"{name} must be an integer, got {token!r}") from None


def _result_type(
    element_type: Callable[[str], Any], values: list[Any]
) -> Callable[[], Any]:
    """Тип элемента результата: сам element_type, если это тип, иначе тип значений."""
    if isinstance(element_type, type):
        return element_type
    if values:
        return infer_element_type(values[0])
    return DEFAULT_ELEMENT_TYPE


def _parse_one(
    tokens: list[str],
    pos: int,
    element_type: Callable[[str], Any],
) -> tuple[Sequence, int]:
    """
    Разбор одной последовательности начиная с tokens[pos].

    Хранилище растёт по мере чтения токенов, поэтому заявленная в заголовке
    длина не приводит к выделению памяти сверх объёма входного текста.
    """
    length = _parse_header_int(tokens[pos] if pos < len(tokens) else None, "length")
    if length < 0:
        raise SequenceParseError(f"length must be non-negative, got {length}")
    pos += 1
    offset = _parse_header_int(tokens[pos] if pos < len(tokens) else None, "offset")
    pos += 1

    available = len(tokens) - pos
    values: list[Any] = []
    for i, token in enumerate(tokens[pos : pos + min(length, available)]):
        try:
            values.append(element_type(token))
        except (ValueError, TypeError, ArithmeticError):
            logger.warning(f"Malformed element {token!r} at position {i}")
            # нулевое заполнение не длиннее имеющихся во входе токенов
            result_type = _result_type(element_type, values)
            partial = Sequence.from_array(values, offset=offset, element_type=result_type)
            partial.data.extend([partial.zero] * (min(length, available) - i))
            raise SequenceParseError(
                f"malformed element {token!r} at position {i} of {length}",
                expected=length,
                elements_read=i,
                partial=partial,
            ) from None

    result_type = _result_type(element_type, values)
    seq = Sequence.from_array(values, offset=offset, element_type=result_type)
    if len(values) < length:
        logger.warning(f"Sequence text ended after {len(values)} of {length} elements")
        raise SequenceParseError(
            f"expected {length} elements, input ended after {len(values)}",
            expected=length,
            elements_read=len(values),
            partial=seq,
        )

    return seq, pos + length


def parse_sequences(
    text: str, element_type: Callable[[str], Any] = DEFAULT_ELEMENT_TYPE
) -> list[Sequence]:
    """
    Разбор всех последовательностей, записанных подряд.

    Args:
        text: Токены канонической формы
        element_type: Конструктор элемента из токена (default: float).
            Если это тип, он же становится element_type результата;
            иначе тип элемента выводится из прочитанных значений

    Returns:
        Список последовательностей в порядке следования (пустой для пустого текста)

    Raises:
        SequenceParseError: При первой некорректной последовательности
    """
    tokens = text.split()
    sequences = []
    pos = 0
    while pos < len(tokens):
        seq, pos = _parse_one(tokens, pos, element_type)
        sequences.append(seq)
    return sequences


def parse_sequence(
    text: str, element_type: Callable[[str], Any] = DEFAULT_ELEMENT_TYPE
) -> Sequence:
    """
    Разбор ровно одной последовательности.

    Examples:
        >>> parse_sequence("3 -1 1 2 3")
        Sequence([1.0, 2.0, 3.0], offset=-1)

    Raises:
        SequenceParseError: Некорректный заголовок, нехватка или
            некорректность элементов, лишние токены после последовательности
    """
    tokens = text.split()
    seq, pos = _parse_one(tokens, 0, element_type)
    if pos != len(tokens):
        raise SequenceParseError(
            f"unexpected trailing tokens after sequence: {tokens[pos]!r}",
            expected=len(seq),
            elements_read=len(seq),
            partial=seq,
        )
    return seq


# =============================================================================
# ПОТОКИ
# =============================================================================


def write_sequence(seq: Sequence, stream: IO[str]) -> None:
    """Записать каноническую форму и перевод строки."""
    stream.write(serialize_sequence(seq) + "\n")


def read_sequence(
    stream: IO[str], element_type: Callable[[str], Any] = DEFAULT_ELEMENT_TYPE
) -> Sequence:
    """
    Прочитать одну последовательность из текстового потока.

    Поток читается целиком и должен содержать ровно одну последовательность:
    лишние токены -> SequenceParseError. Для потока с несколькими
    последовательностями подряд используйте parse_sequences(stream.read()).
    """
    return parse_sequence(stream.read(), element_type)
