"""
BigIntegerCounter — изменяемая привязка к BigInteger

BigInteger неизменяем, поэтому присваивание и инкремент/декремент
моделируются отдельным объектом-переменной, который перепривязывает
своё значение к новому нормализованному экземпляру.

Семантика:
- pre_increment / pre_decrement: изменить, вернуть НОВОЕ значение
- post_increment / post_decrement: изменить, вернуть СТАРОЕ значение
- +=, -=, *=: перепривязка к результату бинарной операции

Не потокобезопасен: синхронизацию обеспечивает вызывающая сторона.
"""

from typing import Optional

from src.core.domain.big_integer import BigInteger


class BigIntegerCounter:
    """Переменная, хранящая BigInteger."""

    def __init__(self, value: Optional["BigInteger | int | str"] = None):
        """
        Args:
            value: начальное значение (BigInteger, int или десятичный текст);
                None — ноль

        Raises:
            InvalidFormat: Если value — строка с недопустимым форматом
        """
        if value is None:
            self.value = BigInteger()
        elif isinstance(value, str):
            self.value = BigInteger.from_string(value)
        elif isinstance(value, BigInteger):
            self.value = value
        else:
            self.value = BigInteger.from_int(value)

    def pre_increment(self) -> BigInteger:
        """++x"""
        self.value = self.value.increment()
        return self.value

    def post_increment(self) -> BigInteger:
        """x++"""
        previous = self.value
        self.value = previous.increment()
        return previous

    def pre_decrement(self) -> BigInteger:
        """--x"""
        self.value = self.value.decrement()
        return self.value

    def post_decrement(self) -> BigInteger:
        """x--"""
        previous = self.value
        self.value = previous.decrement()
        return previous

    def __iadd__(self, other: "BigInteger | int") -> "BigIntegerCounter":
        self.value = self.value + other
        return self

    def __isub__(self, other: "BigInteger | int") -> "BigIntegerCounter":
        self.value = self.value - other
        return self

    def __imul__(self, other: "BigInteger | int") -> "BigIntegerCounter":
        self.value = self.value * other
        return self

    def __str__(self) -> str:
        return str(self.value)

    def __repr__(self) -> str:
        return f"BigIntegerCounter({self.value.to_string()!r})"
