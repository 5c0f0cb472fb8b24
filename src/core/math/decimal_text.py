"""
Decimal Text — Parsing & Formatting

Конверсия между внешними представлениями и (digits, is_negative):
- Текст → цифры (строгая грамматика: опциональный '-' и ASCII-цифры)
- Цифры → канонический текст
- Нативный int → цифры

Грамматика разбора:
    text := ["-"] digit+
    digit := "0" | "1" | ... | "9"

ЗАПРЕЩЕНО: ведущий '+', пробелы, разделители разрядов, экспонента,
не-ASCII цифры (например, арабско-индийские).
"""

import logging
import sys
from typing import Final, Sequence

from src.core.math.digit_arithmetic import (
    DECIMAL_BASE,
    is_zero_magnitude,
    normalize_digits,
)

logger = logging.getLogger(__name__)

# =============================================================================
# ПАРАМЕТРЫ ФОРМАТА
# =============================================================================

NEGATIVE_SIGN: Final[str] = "-"

ASCII_DIGITS: Final[str] = "0123456789"

# Границы 64-битного знакового целого (справочно)
INT64_MIN: Final[int] = -(2**63)
INT64_MAX: Final[int] = 2**63 - 1

# Максимальная длина фрагмента входа в сообщении об ошибке
INVALID_FORMAT_PREVIEW_CHARS: Final[int] = 32


# =============================================================================
# EXCEPTIONS
# =============================================================================


class InvalidFormat(ValueError):
    """
    Текст не соответствует грамматике десятичного целого.

    Причины:
    1. Пустая строка
    2. Знак '-' без цифр
    3. Любой символ после знака, не являющийся ASCII-цифрой
    """

    def __init__(self, text: str, reason: str):
        self.text = text
        self.reason = reason
        preview = text
        if len(preview) > INVALID_FORMAT_PREVIEW_CHARS:
            preview = preview[:INVALID_FORMAT_PREVIEW_CHARS] + "..."
        super().__init__(f"Invalid decimal integer {preview!r}: {reason}")


# =============================================================================
# ТЕКСТ → ЦИФРЫ
# =============================================================================


def parse_decimal(text: str) -> tuple[list[int], bool]:
    """
    Разбор десятичного целого.

    Цифры собираются в обратном порядке (первая прочитанная с конца
    строки, младшая), затем нормализуются: "007" → [7], "-0" → ноль.

    Args:
        text: Исходная строка

    Returns:
        (digits, is_negative): нормализованный модуль и знак;
        для нуля знак всегда False

    Raises:
        TypeError: Если text не str
        InvalidFormat: Если text не соответствует грамматике

    Examples:
        >>> parse_decimal("-120")
        ([0, 2, 1], True)
        >>> parse_decimal("-000")
        ([0], False)
    """
    if not isinstance(text, str):
        raise TypeError(f"Expected str, got {type(text).__name__}")

    if not text:
        logger.debug("Rejected decimal text: empty input")
        raise InvalidFormat(text, "empty input")

    start = 0
    is_negative = False
    if text[0] == NEGATIVE_SIGN:
        is_negative = True
        start = 1

    if start == len(text):
        logger.debug("Rejected decimal text %r: missing digits after sign", text)
        raise InvalidFormat(text, "missing digits after sign")

    digits: list[int] = []
    for position in range(len(text) - 1, start - 1, -1):
        char = text[position]
        if char not in ASCII_DIGITS:
            logger.debug("Rejected decimal text %r: invalid digit at %d", text, position)
            raise InvalidFormat(text, f"invalid digit {char!r} at position {position}")
        digits.append(ord(char) - ord("0"))

    digits = normalize_digits(digits)
    if is_zero_magnitude(digits):
        is_negative = False

    return digits, is_negative


# =============================================================================
# ЦИФРЫ → ТЕКСТ
# =============================================================================


def format_decimal(digits: Sequence[int], is_negative: bool) -> str:
    """
    Канонический текст: '-' только для отрицательных, цифры от старшей
    к младшей, без ведущих нулей (гарантируется нормализацией).

    Examples:
        >>> format_decimal([0, 2, 1], True)
        '-120'
        >>> format_decimal([0], False)
        '0'
    """
    body = "".join(ASCII_DIGITS[d] for d in reversed(digits))
    if is_negative:
        return NEGATIVE_SIGN + body
    return body


# =============================================================================
# NATIVE INT → ЦИФРЫ
# =============================================================================


def digits_from_int(value: int) -> tuple[list[int], bool]:
    """
    Конверсия нативного целого в (digits, is_negative).

    Знак фиксируется до взятия модуля. Python int не ограничен по ширине,
    поэтому abs(INT64_MIN) не переполняется и граница 64-бит не требует
    отдельной обработки.

    Args:
        value: Целое число (bool не принимается)

    Returns:
        (digits, is_negative)

    Raises:
        TypeError: Если value не int или является bool

    Examples:
        >>> digits_from_int(-305)
        ([5, 0, 3], True)
        >>> digits_from_int(0)
        ([0], False)
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"Expected int, got {type(value).__name__}")

    is_negative = value < 0
    magnitude = -value if is_negative else value

    if magnitude == 0:
        return [0], False

    digits: list[int] = []
    while magnitude > 0:
        magnitude, digit = divmod(magnitude, DECIMAL_BASE)
        digits.append(digit)

    return digits, is_negative


def digits_to_int(digits: Sequence[int], is_negative: bool) -> int:
    """Обратная конверсия в нативный int (схема Горнера)."""
    result = 0
    for digit in reversed(digits):
        result = result * DECIMAL_BASE + digit
    return -result if is_negative else result


def digits_hash(digits: Sequence[int], is_negative: bool) -> int:
    """
    hash(digits_to_int(digits, is_negative)) за O(n) без построения int.

    Повторяет числовой хэш CPython: модуль берётся по sys.hash_info.modulus,
    знак переносится на результат, значение -1 заменяется на -2.
    """
    modulus = sys.hash_info.modulus
    result = 0
    for digit in reversed(digits):
        result = (result * DECIMAL_BASE + digit) % modulus
    if is_negative:
        result = -result
    if result == -1:
        result = -2
    return result
