"""
Core math modules

Примитивы произвольной точности над десятичными цифрами и текстовые конверсии.
"""

# Digit Arithmetic
from src.core.math.digit_arithmetic import (
    # Constants
    DECIMAL_BASE,
    DIGIT_MAX,
    DIGIT_MIN,
    ZERO_DIGITS,
    # Functions
    add_magnitudes,
    compare_magnitudes,
    is_zero_magnitude,
    multiply_magnitudes,
    normalize_digits,
    subtract_magnitudes,
)

# Decimal Text
from src.core.math.decimal_text import (
    INT64_MAX,
    INT64_MIN,
    INVALID_FORMAT_PREVIEW_CHARS,
    NEGATIVE_SIGN,
    InvalidFormat,
    digits_from_int,
    digits_hash,
    digits_to_int,
    format_decimal,
    parse_decimal,
)

__all__ = [
    # Digit Arithmetic — Constants
    "DECIMAL_BASE",
    "DIGIT_MAX",
    "DIGIT_MIN",
    "ZERO_DIGITS",
    # Digit Arithmetic — Functions
    "add_magnitudes",
    "compare_magnitudes",
    "is_zero_magnitude",
    "multiply_magnitudes",
    "normalize_digits",
    "subtract_magnitudes",
    # Decimal Text — Constants
    "INT64_MAX",
    "INT64_MIN",
    "INVALID_FORMAT_PREVIEW_CHARS",
    "NEGATIVE_SIGN",
    # Decimal Text — Exceptions
    "InvalidFormat",
    # Decimal Text — Functions
    "digits_from_int",
    "digits_hash",
    "digits_to_int",
    "format_decimal",
    "parse_decimal",
]
