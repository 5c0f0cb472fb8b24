"""
Digit Arithmetic — Magnitude Primitives

Школьные (schoolbook) алгоритмы над модулями чисел, представленными
списком десятичных цифр в порядке least-significant-first:
- Нормализация (удаление старших нулей)
- Сравнение модулей
- Сложение с переносом (carry)
- Вычитание с заёмом (borrow)
- Умножение O(n·m)

Знак здесь не участвует: все функции работают только с модулями.
Знаковая логика живёт в src.core.domain.big_integer.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Результат каждой функции нормализован: не пуст, без старших нулей
2. Каждая цифра результата лежит в [DIGIT_MIN, DIGIT_MAX]
3. Входные последовательности не изменяются (возвращается новый список)
"""

from typing import Final, Sequence

# =============================================================================
# ПАРАМЕТРЫ ПРЕДСТАВЛЕНИЯ
# =============================================================================

# Основание системы счисления (одна десятичная цифра на элемент)
DECIMAL_BASE: Final[int] = 10

# Допустимый диапазон значения одной цифры
DIGIT_MIN: Final[int] = 0
DIGIT_MAX: Final[int] = 9

# Нормализованное представление нуля
ZERO_DIGITS: Final[tuple[int, ...]] = (0,)


# =============================================================================
# НОРМАЛИЗАЦИЯ
# =============================================================================


def normalize_digits(digits: Sequence[int]) -> list[int]:
    """
    Удаление старших нулей из модуля.

    Цифры хранятся в обратном порядке, поэтому старшие нули находятся
    в конце последовательности. Последняя цифра никогда не удаляется.

    Args:
        digits: Цифры модуля (least-significant-first)

    Returns:
        Новый список без старших нулей; пустой вход даёт [0]

    Examples:
        >>> normalize_digits([7, 0, 0])
        [7]
        >>> normalize_digits([0, 0, 0])
        [0]
    """
    result = list(digits)
    while len(result) > 1 and result[-1] == 0:
        result.pop()
    if not result:
        result.append(0)
    return result


def is_zero_magnitude(digits: Sequence[int]) -> bool:
    """True если нормализованный модуль равен нулю."""
    return len(digits) == 1 and digits[0] == 0


# =============================================================================
# СРАВНЕНИЕ
# =============================================================================


def compare_magnitudes(a: Sequence[int], b: Sequence[int]) -> int:
    """
    Сравнение двух нормализованных модулей.

    Сначала сравнивается количество цифр, затем цифры от старшей к младшей.

    Args:
        a: Первый модуль (least-significant-first, нормализован)
        b: Второй модуль (least-significant-first, нормализован)

    Returns:
        -1 если |a| < |b|
         0 если |a| == |b|
        +1 если |a| > |b|

    Examples:
        >>> compare_magnitudes([3, 2, 1], [9, 9])
        1
        >>> compare_magnitudes([1, 2], [2, 1])
        1
        >>> compare_magnitudes([5], [5])
        0
    """
    if len(a) != len(b):
        return -1 if len(a) < len(b) else 1

    for i in range(len(a) - 1, -1, -1):
        if a[i] != b[i]:
            return -1 if a[i] < b[i] else 1

    return 0


# =============================================================================
# СЛОЖЕНИЕ / ВЫЧИТАНИЕ
# =============================================================================


def add_magnitudes(a: Sequence[int], b: Sequence[int]) -> list[int]:
    """
    Сложение модулей с переносом.

    Порядок операндов не важен: более длинный становится ведущим,
    перенос протягивается через его оставшиеся цифры.

    Args:
        a: Первый модуль
        b: Второй модуль

    Returns:
        |a| + |b| (нормализован)

    Examples:
        >>> add_magnitudes([9, 9, 9], [1])
        [0, 0, 0, 1]
    """
    if len(a) < len(b):
        a, b = b, a

    result: list[int] = []
    carry = 0

    for i in range(len(b)):
        total = a[i] + b[i] + carry
        if total >= DECIMAL_BASE:
            total -= DECIMAL_BASE
            carry = 1
        else:
            carry = 0
        result.append(total)

    for i in range(len(b), len(a)):
        total = a[i] + carry
        if total >= DECIMAL_BASE:
            total -= DECIMAL_BASE
            carry = 1
        else:
            carry = 0
        result.append(total)

    if carry:
        result.append(carry)

    return normalize_digits(result)


def subtract_magnitudes(larger: Sequence[int], smaller: Sequence[int]) -> list[int]:
    """
    Вычитание модулей с заёмом: |larger| - |smaller|.

    Предусловие: |larger| >= |smaller| (проверяется вызывающей стороной
    через compare_magnitudes).

    Args:
        larger: Уменьшаемое (больший модуль)
        smaller: Вычитаемое (меньший или равный модуль)

    Returns:
        |larger| - |smaller| (нормализован, ноль как [0])

    Raises:
        ValueError: Если |larger| < |smaller|

    Examples:
        >>> subtract_magnitudes([0, 0, 0, 1], [1])
        [9, 9, 9]
        >>> subtract_magnitudes([5], [5])
        [0]
    """
    if compare_magnitudes(larger, smaller) < 0:
        raise ValueError("subtract_magnitudes requires |larger| >= |smaller|")

    result: list[int] = []
    borrow = 0

    for i in range(len(smaller)):
        diff = larger[i] - smaller[i] - borrow
        if diff < 0:
            diff += DECIMAL_BASE
            borrow = 1
        else:
            borrow = 0
        result.append(diff)

    for i in range(len(smaller), len(larger)):
        diff = larger[i] - borrow
        if diff < 0:
            diff += DECIMAL_BASE
            borrow = 1
        else:
            borrow = 0
        result.append(diff)

    return normalize_digits(result)


# =============================================================================
# УМНОЖЕНИЕ
# =============================================================================


def multiply_magnitudes(a: Sequence[int], b: Sequence[int]) -> list[int]:
    """
    Умножение модулей в столбик.

    Буфер результата имеет длину len(a) + len(b). Для каждой цифры a[i]
    перенос протягивается по всем позициям i + j внутри прохода, остаток
    переноса записывается в позицию i + len(b).

    Сложность: O(len(a) * len(b)).

    Args:
        a: Первый модуль
        b: Второй модуль

    Returns:
        |a| * |b| (нормализован)

    Examples:
        >>> multiply_magnitudes([2, 1], [2, 1])
        [4, 4, 1]
        >>> multiply_magnitudes([5, 4, 3], [0])
        [0]
    """
    result = [0] * (len(a) + len(b))

    for i, digit_a in enumerate(a):
        if digit_a == 0:
            continue
        carry = 0
        for j, digit_b in enumerate(b):
            product = digit_a * digit_b + result[i + j] + carry
            carry, result[i + j] = divmod(product, DECIMAL_BASE)
        # Позиция i + len(b) ещё не заполнена в этом проходе, поэтому
        # result[i + len(b)] + carry < DECIMAL_BASE
        result[i + len(b)] += carry

    return normalize_digits(result)
