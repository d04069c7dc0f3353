"""
Sequence — дискретный временной ряд со смещением индекса

Модель последовательности x[n]: плотный массив отсчётов data, где data[0]
соответствует логическому индексу offset. Логические индексы могут быть
отрицательными; допустимый диапазон: [offset, offset + len - 1].

Последовательность владеет своим хранилищем. Структурные преобразования
(flip, shift, trim, assign) изменяют объект на месте и возвращают self,
что позволяет строить цепочки: x.flip().shift(2).trim().

Арифметика (extend, elementwise, conv) вынесена в src.dsp.math и
оперирует Sequence как операндом.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. physical = logical - offset; доступ только по логическому индексу
2. Выход за диапазон -> SequenceIndexError (никогда не тихая порча данных)
3. offset сохраняется как есть даже для пустой последовательности
"""

from typing import Any, Callable, Generic, Iterable, Iterator, TypeVar

from src.dsp.domain.numerical_safeguards import (
    DEFAULT_ELEMENT_TYPE,
    DEFAULT_OFFSET,
    ZERO_TOL,
    infer_element_type,
    is_zero_sample,
    validate_count,
    validate_integer,
    zero_of,
)

T = TypeVar("T")


# =============================================================================
# EXCEPTIONS
# =============================================================================


class SequenceIndexError(IndexError):
    """
    Обращение к логическому индексу вне [offset, offset + len - 1].
    """

    def __init__(self, pos: int, first: int, last: int):
        self.pos = pos
        self.first = first
        self.last = last
        # args хранит аргументы конструктора для pickle/deepcopy
        super().__init__(pos, first, last)

    def __str__(self) -> str:
        if self.last < self.first:
            return f"logical index {self.pos} out of range: sequence is empty"
        return f"logical index {self.pos} out of range [{self.first}, {self.last}]"


# =============================================================================
# SEQUENCE
# =============================================================================


class Sequence(Generic[T]):
    """
    Последовательность отсчётов с целочисленным смещением.

    Attributes:
        data: Хранилище отсчётов в порядке возрастания логического индекса
        offset: Логический индекс data[0] (может быть отрицательным)
        element_type: Тип элемента; element_type() даёт нуль для дополнения

    Examples:
        >>> x = Sequence.filled(5, 1.0)
        >>> x[3] = 3.0
        >>> x.data, x.offset
        ([1.0, 1.0, 1.0, 3.0, 1.0], 0)
    """

    def __init__(
        self,
        values: Iterable[T] = (),
        offset: int = DEFAULT_OFFSET,
        element_type: Callable[[], T] | None = None,
    ):
        """
        Создание последовательности из явного списка значений (копируется).

        Args:
            values: Значения в порядке логических индексов
            offset: Логический индекс первого значения (default: 0)
            element_type: Тип элемента (default: тип первого значения или float)
        """
        self.data: list[T] = list(values)
        self.offset: int = validate_integer(offset, "offset")
        self.element_type = element_type or self._infer_type(self.data)

    @classmethod
    def filled(
        cls,
        count: int,
        value: T | None = None,
        offset: int = DEFAULT_OFFSET,
        element_type: Callable[[], T] | None = None,
    ) -> "Sequence[T]":
        """
        Последовательность длины count, все элементы равны value.

        Args:
            count: Длина (>= 0)
            value: Значение заполнения (default: нуль типа элемента)
            offset: Логический индекс первого элемента
            element_type: Тип элемента (default: тип value или float)
        """
        if element_type is None:
            element_type = (
                infer_element_type(value) if value is not None else DEFAULT_ELEMENT_TYPE
            )
        return cls(element_type=element_type).assign(count, value, offset)

    @classmethod
    def from_array(
        cls,
        array: list[T],
        offset: int = DEFAULT_OFFSET,
        element_type: Callable[[], T] | None = None,
    ) -> "Sequence[T]":
        """
        Последовательность поверх готового списка без копирования.

        Список становится хранилищем последовательности; вызывающий код
        не должен продолжать использовать его напрямую.
        """
        if not isinstance(array, list):
            raise TypeError(f"array must be a list, got {type(array).__name__}")
        seq = cls(element_type=element_type or cls._infer_type(array), offset=offset)
        seq.data = array
        return seq

    @staticmethod
    def _infer_type(values: list[Any]) -> Callable[[], Any]:
        if values:
            return infer_element_type(values[0])
        return DEFAULT_ELEMENT_TYPE

    # -------------------------------------------------------------------------
    # Переназначение и доступ
    # -------------------------------------------------------------------------

    def assign(
        self, count: int, value: T | None = None, offset: int = DEFAULT_OFFSET
    ) -> "Sequence[T]":
        """
        Заменить содержимое на count копий value и установить offset.

        Хранилище изменяется на месте (тот же list).

        Returns:
            self
        """
        count = validate_count(count)
        offset = validate_integer(offset, "offset")
        if value is None:
            value = self.zero

        self.data[:] = [value] * count
        self.offset = offset
        return self

    @property
    def zero(self) -> T:
        """Нуль типа элемента."""
        return zero_of(self.element_type)

    @property
    def first_index(self) -> int:
        """Логический индекс первого элемента (равен offset)."""
        return self.offset

    @property
    def last_index(self) -> int:
        """Логический индекс последнего элемента (offset - 1 для пустой)."""
        return self.offset + len(self.data) - 1

    @property
    def is_empty(self) -> bool:
        return not self.data

    def indices(self) -> range:
        """Диапазон допустимых логических индексов."""
        return range(self.first_index, self.last_index + 1)

    def _physical(self, pos: Any) -> int:
        pos = validate_integer(pos, "index")
        physical = pos - self.offset
        if physical < 0 or physical >= len(self.data):
            raise SequenceIndexError(pos, self.first_index, self.last_index)
        return physical

    def __getitem__(self, pos: int) -> T:
        return self.data[self._physical(pos)]

    def __setitem__(self, pos: int, value: T) -> None:
        self.data[self._physical(pos)] = value

    def __len__(self) -> int:
        return len(self.data)

    def __iter__(self) -> Iterator[T]:
        return iter(self.data)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Sequence):
            return NotImplemented
        return self.offset == other.offset and self.data == other.data

    def __repr__(self) -> str:
        return f"Sequence({self.data!r}, offset={self.offset})"

    def copy(self) -> "Sequence[T]":
        """Независимая копия (новое хранилище)."""
        return Sequence(self.data, offset=self.offset, element_type=self.element_type)

    # -------------------------------------------------------------------------
    # Структурные преобразования
    # -------------------------------------------------------------------------

    def flip(self) -> "Sequence[T]":
        """
        Отражение по времени: y[n] = x[-n].

        Диапазон [offset, offset + L - 1] переходит в
        [-(offset + L - 1), -offset], порядок элементов обращается.
        """
        self.data.reverse()
        self.offset = -(self.offset + len(self.data) - 1)
        return self

    def shift(self, n0: int) -> "Sequence[T]":
        """
        Задержка на n0 отсчётов: y[n] = x[n - n0].

        Данные не изменяются, меняется только offset.
        """
        self.offset += validate_integer(n0, "n0")
        return self

    def trim(self, tol: float = ZERO_TOL) -> "Sequence[T]":
        """
        Удалить нулевые элементы с обоих концов.

        offset увеличивается на число удалённых ведущих нулей.
        Пустая или полностью нулевая последовательность не изменяется.

        Args:
            tol: Толерантность сравнения с нулём (default: точное сравнение)
        """
        nonzero = [i for i, v in enumerate(self.data) if not is_zero_sample(v, tol)]
        if not nonzero:
            return self

        start, stop = nonzero[0], nonzero[-1] + 1
        del self.data[stop:]
        del self.data[:start]
        self.offset += start
        return self
