"""
BigInteger — Целое произвольной точности

Immutable Pydantic модель знакового десятичного целого без ограничений
разрядности. Все операции точные (без переполнения и округления) и
возвращают новый экземпляр.

Представление:
- digits: десятичные цифры модуля, младшая первой (least-significant-first)
- is_negative: знак, значим только для ненулевого модуля

ИНВАРИАНТЫ (проверяются валидаторами модели):
1. digits не пуст
2. Нет старших нулей, кроме нуля, который равен (0,)
3. Нет отрицательного нуля
4. Каждая цифра — int в [0, 9]
"""

from typing import Any, Sequence

from pydantic import BaseModel, Field, StrictBool, StrictInt, field_validator, model_validator

from src.core.contracts.validators import CONTRACT_SCHEMA_VERSION, validate_big_integer
from src.core.math.decimal_text import (
    digits_from_int,
    digits_hash,
    digits_to_int,
    format_decimal,
    parse_decimal,
)
from src.core.math.digit_arithmetic import (
    DIGIT_MAX,
    DIGIT_MIN,
    ZERO_DIGITS,
    add_magnitudes,
    compare_magnitudes,
    is_zero_magnitude,
    multiply_magnitudes,
    normalize_digits,
    subtract_magnitudes,
)


# =============================================================================
# BIG INTEGER MODEL
# =============================================================================


class BigInteger(BaseModel):
    """
    Знаковое целое произвольной точности.

    Immutable модель (frozen=True): compound-операции (+=, -=, *=)
    связывают имя с новым экземпляром.

    Создание:
        BigInteger()                       # ноль
        BigInteger.from_int(-42)
        BigInteger.from_string("123456789012345678901234567890")

    Операнды арифметики и сравнений: BigInteger или int.
    """

    digits: tuple[StrictInt, ...] = Field(
        default=ZERO_DIGITS,
        min_length=1,
        description="Цифры модуля, младшая первой",
    )
    is_negative: StrictBool = Field(
        default=False, description="Знак (False для нуля)"
    )

    model_config = {"frozen": True}  # Immutable

    @field_validator("digits")
    @classmethod
    def validate_digits(cls, v: tuple[int, ...]) -> tuple[int, ...]:
        """Цифры в диапазоне [0, 9] и без старших нулей."""
        for position, digit in enumerate(v):
            if digit < DIGIT_MIN or digit > DIGIT_MAX:
                raise ValueError(
                    f"digit {digit} at position {position} outside [{DIGIT_MIN}, {DIGIT_MAX}]"
                )
        if len(v) > 1 and v[-1] == 0:
            raise ValueError("digits must not carry most-significant zeros")
        return v

    @model_validator(mode="after")
    def validate_zero_sign(self) -> "BigInteger":
        """Ноль не может быть отрицательным."""
        if self.is_negative and is_zero_magnitude(self.digits):
            raise ValueError("zero cannot be negative")
        return self

    # -------------------------------------------------------------------------
    # Construction
    # -------------------------------------------------------------------------

    @classmethod
    def from_parts(cls, digits: Sequence[int], is_negative: bool) -> "BigInteger":
        """Сборка из сырых цифр: удаление старших нулей и коррекция знака нуля."""
        normalized = normalize_digits(digits)
        if is_zero_magnitude(normalized):
            is_negative = False
        return cls(digits=tuple(normalized), is_negative=is_negative)

    @classmethod
    def from_int(cls, value: int) -> "BigInteger":
        """
        Конверсия нативного целого.

        Raises:
            TypeError: Если value не int (bool не принимается)
        """
        digits, is_negative = digits_from_int(value)
        return cls.from_parts(digits, is_negative)

    @classmethod
    def from_string(cls, text: str) -> "BigInteger":
        """
        Разбор десятичного текста: опциональный '-' и ASCII-цифры.

        Raises:
            InvalidFormat: Пустая строка, знак без цифр, недопустимый символ
            TypeError: Если text не str
        """
        digits, is_negative = parse_decimal(text)
        return cls.from_parts(digits, is_negative)

    parse = from_string

    @classmethod
    def from_contract(cls, data: dict[str, Any]) -> "BigInteger":
        """
        Создание из JSON контракта big_integer.

        Raises:
            jsonschema.ValidationError: Если data не соответствует схеме
        """
        validate_big_integer(data)
        return cls.from_string(data["value"])

    def to_contract(self) -> dict[str, Any]:
        """Сериализация в JSON контракт big_integer."""
        return {"schema_version": CONTRACT_SCHEMA_VERSION, "value": self.to_string()}

    # -------------------------------------------------------------------------
    # Conversion
    # -------------------------------------------------------------------------

    def to_string(self) -> str:
        """Канонический десятичный текст."""
        return format_decimal(self.digits, self.is_negative)

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"BigInteger({self.to_string()!r})"

    def __int__(self) -> int:
        return digits_to_int(self.digits, self.is_negative)

    def __bool__(self) -> bool:
        return not self.is_zero()

    def __hash__(self) -> int:
        # Совместимо с int: BigInteger(n) == n => равные хэши
        return digits_hash(self.digits, self.is_negative)

    # -------------------------------------------------------------------------
    # Predicates
    # -------------------------------------------------------------------------

    def is_zero(self) -> bool:
        return is_zero_magnitude(self.digits)

    def sign(self) -> int:
        """-1, 0 или +1."""
        if self.is_zero():
            return 0
        return -1 if self.is_negative else 1

    def digit_count(self) -> int:
        """Количество десятичных цифр модуля."""
        return len(self.digits)

    # -------------------------------------------------------------------------
    # Comparison
    # -------------------------------------------------------------------------

    def compare(self, other: "BigInteger | int") -> int:
        """
        Полный порядок над BigInteger.

        Returns:
            -1 если self < other
             0 если self == other
            +1 если self > other
        """
        other = _coerce_strict(other)
        if self == other:
            return 0
        return -1 if self < other else 1

    def __eq__(self, other: object) -> bool:
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return self.is_negative == other.is_negative and self.digits == other.digits

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __lt__(self, other: object) -> bool:
        other = _coerce(other)
        if other is None:
            return NotImplemented

        # Разные знаки: отрицательное всегда меньше
        if self.is_negative != other.is_negative:
            return self.is_negative

        order = compare_magnitudes(self.digits, other.digits)
        if self.is_negative:
            # Для отрицательных больший модуль означает меньшее значение
            return order > 0
        return order < 0

    def __le__(self, other: object) -> bool:
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return self < other or self == other

    def __gt__(self, other: object) -> bool:
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return not self <= other

    def __ge__(self, other: object) -> bool:
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return not self < other

    # -------------------------------------------------------------------------
    # Arithmetic
    # -------------------------------------------------------------------------

    def negate(self) -> "BigInteger":
        """Смена знака; -0 == 0."""
        return BigInteger.from_parts(self.digits, not self.is_negative)

    def add(self, other: "BigInteger | int") -> "BigInteger":
        """
        Сумма.

        Одинаковые знаки: сложение модулей, знак общий.
        Разные знаки: a + b вычисляется как a - (-b).
        """
        other = _coerce_strict(other)
        if self.is_negative == other.is_negative:
            return BigInteger.from_parts(
                add_magnitudes(self.digits, other.digits), self.is_negative
            )
        return self.subtract(other.negate())

    def subtract(self, other: "BigInteger | int") -> "BigInteger":
        """
        Разность.

        Одинаковые знаки: из большего модуля вычитается меньший. Знак
        считается как для двух положительных (минус, если модуль self
        меньше) и инвертируется, если оба операнда отрицательные.

        Разные знаки: модули складываются, знак берётся у self.
        """
        other = _coerce_strict(other)
        if self.is_negative != other.is_negative:
            return BigInteger.from_parts(
                add_magnitudes(self.digits, other.digits), self.is_negative
            )

        if compare_magnitudes(self.digits, other.digits) >= 0:
            magnitude = subtract_magnitudes(self.digits, other.digits)
            is_negative = False
        else:
            magnitude = subtract_magnitudes(other.digits, self.digits)
            is_negative = True

        if self.is_negative:
            is_negative = not is_negative

        return BigInteger.from_parts(magnitude, is_negative)

    def multiply(self, other: "BigInteger | int") -> "BigInteger":
        """Произведение; знак отрицательный, если ровно один операнд отрицательный."""
        other = _coerce_strict(other)
        return BigInteger.from_parts(
            multiply_magnitudes(self.digits, other.digits),
            self.is_negative != other.is_negative,
        )

    def increment(self) -> "BigInteger":
        """self + 1"""
        return self.add(ONE)

    def decrement(self) -> "BigInteger":
        """self - 1"""
        return self.subtract(ONE)

    def __neg__(self) -> "BigInteger":
        return self.negate()

    def __pos__(self) -> "BigInteger":
        return self

    def __abs__(self) -> "BigInteger":
        if self.is_negative:
            return self.negate()
        return self

    def __add__(self, other: object) -> "BigInteger":
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return self.add(other)

    def __radd__(self, other: object) -> "BigInteger":
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return other.add(self)

    def __sub__(self, other: object) -> "BigInteger":
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return self.subtract(other)

    def __rsub__(self, other: object) -> "BigInteger":
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return other.subtract(self)

    def __mul__(self, other: object) -> "BigInteger":
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return self.multiply(other)

    def __rmul__(self, other: object) -> "BigInteger":
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return other.multiply(self)


# =============================================================================
# CONSTANTS
# =============================================================================

ZERO = BigInteger()

ONE = BigInteger(digits=(1,))


# =============================================================================
# HELPERS
# =============================================================================


def _coerce(value: object) -> BigInteger | None:
    """BigInteger или int → BigInteger; иначе None."""
    if isinstance(value, BigInteger):
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        return BigInteger.from_int(value)
    return None


def _coerce_strict(value: object) -> BigInteger:
    result = _coerce(value)
    if result is None:
        raise TypeError(f"Expected BigInteger or int, got {type(value).__name__}")
    return result
