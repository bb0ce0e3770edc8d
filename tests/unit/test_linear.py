"""
Тесты для модуля Linear Arithmetic

Проверяет:
1. Сложение/вычитание в two's-complement против Python int
2. Отрицание и complement (включая fill word)
3. mul_small / div_small / add_small на граничных словах
4. DivisionByZero в div_small
"""

import pytest

from bigint.core.errors import DivisionByZero
from bigint.core.math.digits import (
    DIGIT_MASK,
    int_from_words,
    is_canonical,
    magnitude_of,
    words_from_int,
)
from bigint.core.math.linear import (
    add_small,
    add_words,
    complement_words,
    div_small,
    mul_small,
    negate_words,
    subtract_words,
)
from tests.helpers import random_signed


def _mag(value: int) -> list[int]:
    return magnitude_of(*words_from_int(value))


def _int(words: list[int]) -> int:
    return int_from_words(tuple(words), False)


# =============================================================================
# СЛОЖЕНИЕ / ВЫЧИТАНИЕ
# =============================================================================


class TestAddWords:
    """Тесты add_words"""

    @pytest.mark.parametrize(
        "a, b",
        [
            (0, 0),
            (1, -1),
            (2**32 - 1, 1),
            (2**64 - 1, 1),
            (-(2**32), 2**32 - 1),
            (2**31 - 1, 1),
            (-(2**31), -1),
            (-(2**95), -(2**95)),
        ],
    )
    def test_carry_and_sign_boundaries(self, a: int, b: int) -> None:
        digits, sign = add_words(*words_from_int(a), *words_from_int(b))
        assert is_canonical(digits, sign)
        assert int_from_words(digits, sign) == a + b

    def test_random_against_int(self, rng) -> None:
        for _ in range(400):
            a = random_signed(rng, 5)
            b = random_signed(rng, 5)
            digits, sign = add_words(*words_from_int(a), *words_from_int(b))
            assert is_canonical(digits, sign)
            assert int_from_words(digits, sign) == a + b


class TestSubtractWords:
    """Тесты subtract_words"""

    def test_random_against_int(self, rng) -> None:
        for _ in range(400):
            a = random_signed(rng, 5)
            b = random_signed(rng, 5)
            digits, sign = subtract_words(*words_from_int(a), *words_from_int(b))
            assert is_canonical(digits, sign)
            assert int_from_words(digits, sign) == a - b

    def test_self_subtraction_is_zero(self, rng) -> None:
        for _ in range(50):
            words = words_from_int(random_signed(rng, 4))
            assert subtract_words(*words, *words) == ((), False)


# =============================================================================
# ОТРИЦАНИЕ / COMPLEMENT
# =============================================================================


class TestNegateAndComplement:
    """Тесты negate_words и complement_words"""

    @pytest.mark.parametrize("value", [0, 1, -1, 2**31, -(2**31), 2**32, -(2**32), 2**63, -(2**64)])
    def test_negate_boundaries(self, value: int) -> None:
        digits, sign = negate_words(*words_from_int(value))
        assert is_canonical(digits, sign)
        assert int_from_words(digits, sign) == -value

    def test_complement_is_minus_x_minus_one(self, rng) -> None:
        for _ in range(200):
            value = random_signed(rng, 4)
            digits, sign = complement_words(*words_from_int(value))
            assert is_canonical(digits, sign)
            assert int_from_words(digits, sign) == ~value

    def test_complement_flips_fill_word(self) -> None:
        assert complement_words((), False) == ((), True)
        assert complement_words((), True) == ((), False)

    def test_double_negation(self, rng) -> None:
        for _ in range(100):
            words = words_from_int(random_signed(rng, 4))
            assert negate_words(*negate_words(*words)) == words


# =============================================================================
# ОДНО СЛОВО
# =============================================================================


class TestMulSmall:
    """Тесты mul_small"""

    def test_max_words(self) -> None:
        """(2**32 - 1)**2 = 0xFFFFFFFE_00000001"""
        assert mul_small([DIGIT_MASK], DIGIT_MASK) == [1, 0xFFFFFFFE]

    def test_by_zero_and_one(self) -> None:
        assert mul_small([1, 2, 3], 0) == []
        assert mul_small([1, 2, 3], 1) == [1, 2, 3]
        assert mul_small([], 7) == []

    def test_random_against_int(self, rng) -> None:
        for _ in range(200):
            value = abs(random_signed(rng, 6))
            word = rng.getrandbits(32)
            assert _int(mul_small(_mag(value), word)) == value * word

    def test_word_out_of_range(self) -> None:
        with pytest.raises(ValueError, match="32 bits"):
            mul_small([1], 2**32)
        with pytest.raises(ValueError):
            mul_small([1], -1)


class TestDivSmall:
    """Тесты div_small"""

    def test_two_words_by_ten(self) -> None:
        """2**32 / 10 = 429496729, остаток 6"""
        assert div_small([0, 1], 10) == ([429496729], 6)

    def test_random_against_int(self, rng) -> None:
        for _ in range(200):
            value = abs(random_signed(rng, 6))
            word = rng.getrandbits(32) or 1
            quotient, remainder = div_small(_mag(value), word)
            assert _int(quotient) == value // word
            assert remainder == value % word

    def test_zero_dividend(self) -> None:
        assert div_small([], 5) == ([], 0)

    def test_division_by_zero(self) -> None:
        with pytest.raises(DivisionByZero):
            div_small([1, 2], 0)

    def test_division_by_zero_is_zero_division_error(self) -> None:
        with pytest.raises(ZeroDivisionError):
            div_small([1], 0)


class TestAddSmall:
    """Тесты add_small"""

    def test_carry_into_new_word(self) -> None:
        assert add_small([DIGIT_MASK], 1) == [0, 1]
        assert add_small([DIGIT_MASK, DIGIT_MASK], 1) == [0, 0, 1]

    def test_to_zero(self) -> None:
        assert add_small([], 0) == []
        assert add_small([], 9) == [9]
