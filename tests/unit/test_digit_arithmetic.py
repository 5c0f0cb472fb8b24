"""
Тесты для модуля Digit Arithmetic

Проверяет:
1. Нормализацию (удаление старших нулей)
2. Сравнение модулей
3. Сложение с переносом
4. Вычитание с заёмом
5. Умножение в столбик
"""

import pytest

from src.core.math.digit_arithmetic import (
    DECIMAL_BASE,
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


def digits_of(n: int) -> list[int]:
    """Цифры неотрицательного int, младшая первой."""
    return [int(c) for c in reversed(str(n))]


# =============================================================================
# ТЕСТЫ НОРМАЛИЗАЦИИ
# =============================================================================


class TestNormalizeDigits:
    """Тесты для normalize_digits"""

    def test_constants(self) -> None:
        """Параметры представления"""
        assert DECIMAL_BASE == 10
        assert DIGIT_MIN == 0
        assert DIGIT_MAX == 9
        assert ZERO_DIGITS == (0,)

    def test_strips_most_significant_zeros(self) -> None:
        """Старшие нули (в конце списка) удаляются"""
        assert normalize_digits([7, 0, 0]) == [7]
        assert normalize_digits([0, 1, 0]) == [0, 1]

    def test_zero_keeps_single_digit(self) -> None:
        """Ноль сохраняется как [0]"""
        assert normalize_digits([0, 0, 0]) == [0]
        assert normalize_digits([0]) == [0]

    def test_empty_becomes_zero(self) -> None:
        """Пустая последовательность даёт [0]"""
        assert normalize_digits([]) == [0]

    def test_input_not_mutated(self) -> None:
        """Вход не изменяется"""
        source = [1, 0, 0]
        normalize_digits(source)
        assert source == [1, 0, 0]

    def test_is_zero_magnitude(self) -> None:
        assert is_zero_magnitude([0])
        assert not is_zero_magnitude([1])
        assert not is_zero_magnitude([0, 1])


# =============================================================================
# ТЕСТЫ СРАВНЕНИЯ
# =============================================================================


class TestCompareMagnitudes:
    """Тесты для compare_magnitudes"""

    def test_longer_is_larger(self) -> None:
        """Больше цифр — больше модуль"""
        assert compare_magnitudes(digits_of(100), digits_of(99)) == 1
        assert compare_magnitudes(digits_of(99), digits_of(100)) == -1

    def test_same_length_most_significant_decides(self) -> None:
        """При равной длине решает первая различающаяся старшая цифра"""
        assert compare_magnitudes(digits_of(521), digits_of(519)) == 1
        assert compare_magnitudes(digits_of(129), digits_of(131)) == -1

    def test_equal(self) -> None:
        assert compare_magnitudes(digits_of(12345), digits_of(12345)) == 0
        assert compare_magnitudes([0], [0]) == 0


# =============================================================================
# ТЕСТЫ СЛОЖЕНИЯ / ВЫЧИТАНИЯ
# =============================================================================


class TestAddMagnitudes:
    """Тесты для add_magnitudes"""

    def test_simple_sum(self) -> None:
        assert add_magnitudes(digits_of(123), digits_of(456)) == digits_of(579)

    def test_carry_through_longer_operand(self) -> None:
        """Перенос протягивается через оставшиеся цифры длинного операнда"""
        assert add_magnitudes(digits_of(99999), digits_of(1)) == digits_of(100000)

    def test_operand_order_irrelevant(self) -> None:
        """Короткий операнд может стоять первым"""
        assert add_magnitudes(digits_of(1), digits_of(99999)) == digits_of(100000)

    def test_final_carry_appends_digit(self) -> None:
        """Перенос за старшую цифру добавляет новую цифру"""
        assert add_magnitudes(digits_of(5), digits_of(5)) == [0, 1]

    def test_zero_identity(self) -> None:
        assert add_magnitudes(digits_of(4096), [0]) == digits_of(4096)
        assert add_magnitudes([0], [0]) == [0]


class TestSubtractMagnitudes:
    """Тесты для subtract_magnitudes"""

    def test_simple_difference(self) -> None:
        assert subtract_magnitudes(digits_of(579), digits_of(456)) == digits_of(123)

    def test_borrow_chain(self) -> None:
        """Заём протягивается через нули"""
        assert subtract_magnitudes(digits_of(100000), digits_of(1)) == digits_of(99999)

    def test_equal_gives_zero(self) -> None:
        """Равные модули дают нормализованный ноль"""
        assert subtract_magnitudes(digits_of(777), digits_of(777)) == [0]

    def test_result_normalized(self) -> None:
        """Старшие нули результата удаляются"""
        assert subtract_magnitudes(digits_of(1000), digits_of(999)) == [1]

    def test_smaller_minuend_raises(self) -> None:
        """Нарушение предусловия |larger| >= |smaller|"""
        with pytest.raises(ValueError, match="larger"):
            subtract_magnitudes(digits_of(1), digits_of(2))


# =============================================================================
# ТЕСТЫ УМНОЖЕНИЯ
# =============================================================================


class TestMultiplyMagnitudes:
    """Тесты для multiply_magnitudes"""

    def test_known_product(self) -> None:
        result = multiply_magnitudes(digits_of(123456789), digits_of(987654321))
        assert result == digits_of(121932631112635269)

    def test_by_zero(self) -> None:
        """Умножение на ноль не оставляет старших нулей"""
        assert multiply_magnitudes(digits_of(98765), [0]) == [0]
        assert multiply_magnitudes([0], digits_of(98765)) == [0]

    def test_by_one(self) -> None:
        assert multiply_magnitudes(digits_of(98765), [1]) == digits_of(98765)

    def test_max_carry(self) -> None:
        """Все девятки: максимальные переносы"""
        assert multiply_magnitudes(digits_of(9999), digits_of(9999)) == digits_of(99980001)

    def test_buffer_fully_used(self) -> None:
        """Произведение занимает len(a) + len(b) цифр"""
        assert len(multiply_magnitudes(digits_of(99), digits_of(99))) == 4

    @pytest.mark.parametrize(
        "a,b",
        [
            (0, 0),
            (7, 8),
            (10, 10),
            (305, 4007),
            (10**20 + 3, 10**15 - 1),
        ],
    )
    def test_matches_native_int(self, a: int, b: int) -> None:
        assert multiply_magnitudes(digits_of(a), digits_of(b)) == digits_of(a * b)
