"""
Numerical Safeguards — примитивы для элементов последовательности

Модуль собирает всё, что связано с типом элемента T:
- Построение нуля для произвольного числового типа (T() == 0)
- Проверка элемента на ноль (точная или с толерантностью)
- Валидация целочисленных параметров (offset, count, shift)
- Форматирование отдельного отсчёта для текстового вывода

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Нуль типа T всегда строится как element_type(), без приведения к float
2. bool никогда не принимается как индекс/смещение/длина
3. Все операции детерминированы и не зависят от глобального состояния
"""

import numbers
from typing import Any, Callable, Final

# =============================================================================
# КОНФИГУРАЦИЯ ПО УМОЛЧАНИЮ
# =============================================================================

# Логический индекс первого элемента, если offset не указан
DEFAULT_OFFSET: Final[int] = 0

# Тип элемента, если его невозможно вывести из данных (пустая последовательность)
DEFAULT_ELEMENT_TYPE: Final[Callable[[], Any]] = float

# Толерантность сравнения с нулём: 0.0 означает точное сравнение
ZERO_TOL: Final[float] = 0.0


# =============================================================================
# НУЛЬ ТИПА ЭЛЕМЕНТА
# =============================================================================


def zero_of(element_type: Callable[[], Any]) -> Any:
    """
    Нулевое значение типа элемента.

    Args:
        element_type: Тип элемента (float, int, Fraction, Decimal, complex, ...)

    Returns:
        нуль данного типа, element_type()

    Raises:
        TypeError: Если тип нельзя сконструировать без аргументов

    Examples:
        >>> zero_of(float)
        0.0
        >>> zero_of(int)
        0
    """
    try:
        return element_type()
    except TypeError as e:
        raise TypeError(
            f"element_type {element_type!r} must be default-constructible to zero"
        ) from e


def infer_element_type(value: Any) -> Callable[[], Any]:
    """
    Вывод типа элемента по значению.

    bool приводится к int, чтобы нулевое заполнение было числовым.
    """
    if isinstance(value, bool):
        return int
    return type(value)


def is_zero_sample(value: Any, tol: float = ZERO_TOL) -> bool:
    """
    Проверка, равен ли отсчёт нулю.

    Args:
        value: Отсчёт любого числового типа
        tol: Абсолютная толерантность (default: ZERO_TOL, точное сравнение)

    Returns:
        value == 0 при tol == 0, иначе abs(value) <= tol

    Raises:
        ValueError: Если tol отрицательная
    """
    if tol < 0:
        raise ValueError(f"tol must be non-negative, got {tol}")

    if tol == 0:
        return value == 0
    return abs(value) <= tol


# =============================================================================
# ВАЛИДАЦИЯ ЦЕЛОЧИСЛЕННЫХ ПАРАМЕТРОВ
# =============================================================================


def validate_integer(value: Any, name: str) -> int:
    """
    Валидация, что значение является целым числом (но не bool).

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Returns:
        int(value); numpy-целые и прочие Integral приводятся к int

    Raises:
        TypeError: Если value не целое или bool
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise TypeError(f"{name} must be an integer, got {type(value).__name__}")
    return int(value)


def validate_count(value: Any, name: str = "count") -> int:
    """
    Валидация длины (количества элементов).

    Raises:
        TypeError: Если value не целое
        ValueError: Если value < 0
    """
    count = validate_integer(value, name)
    if count < 0:
        raise ValueError(f"{name} must be non-negative, got {count}")
    return count


# =============================================================================
# ФОРМАТИРОВАНИЕ ОТСЧЁТОВ
# =============================================================================


def format_sample(value: Any) -> str:
    """
    Компактное представление отсчёта для диагностического вывода.

    float выводится в формате %g (1.0 -> "1", 0.5 -> "0.5"),
    остальные типы через str().

    Examples:
        >>> format_sample(3.0)
        '3'
        >>> format_sample(7)
        '7'
    """
    if isinstance(value, float):
        return f"{value:g}"
    return str(value)
