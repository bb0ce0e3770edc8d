"""
Linear Arithmetic: сложение, отрицание, умножение и деление на слово

Все операции O(n) по числу слов:
- add_words / subtract_words / negate_words / complement_words работают
  с two's-complement представлением (digits, sign)
- mul_small / div_small работают с беззнаковым magnitude и являются
  листьями для десятичного кодека, Karatsuba и Knuth division

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Вычитание = сложение с отрицанием, отдельного вычитания magnitude нет
2. Отрицание = complement + 1 (fill word тоже инвертируется)
3. Результат всегда проходит через normalize (знак + shrink атомарно)
4. div_small по нулю -> DivisionByZero
"""

from typing import Sequence

from bigint.core.errors import DivisionByZero
from bigint.core.math.digits import (
    DIGIT_BITS,
    DIGIT_MASK,
    Digits,
    digit_at,
    normalize,
    strip_zeros,
)

ONE: tuple[Digits, bool] = ((1,), False)


# =============================================================================
# СЛОЖЕНИЕ / ВЫЧИТАНИЕ / ОТРИЦАНИЕ
# =============================================================================


def add_words(
    left: Sequence[int],
    left_sign: bool,
    right: Sequence[int],
    right_sign: bool,
) -> tuple[Digits, bool]:
    """
    Сложение двух чисел в two's-complement представлении.

    Оба операнда знаково расширяются до max(len) + 1 слов, затем ripple
    carry с аккумулятором двойной ширины. Перенос из старшего слова
    отбрасывается (сумма всегда помещается в расширенную ширину).

    Returns:
        (digits, sign) суммы в канонической форме
    """
    width = max(len(left), len(right)) + 1
    words = [0] * width
    carry = 0
    for i in range(width):
        carry += digit_at(left, left_sign, i) + digit_at(right, right_sign, i)
        words[i] = carry & DIGIT_MASK
        carry >>= DIGIT_BITS
    return normalize(words)


def complement_words(digits: Sequence[int], sign: bool) -> tuple[Digits, bool]:
    """
    Bitwise complement: ~x == -x - 1.

    Каноническая форма сохраняется: инвертируются и слова, и fill word.
    """
    return tuple(~d & DIGIT_MASK for d in digits), not sign


def negate_words(digits: Sequence[int], sign: bool) -> tuple[Digits, bool]:
    """Two's-complement отрицание: complement и +1."""
    inverted, inverted_sign = complement_words(digits, sign)
    return add_words(inverted, inverted_sign, *ONE)


def subtract_words(
    left: Sequence[int],
    left_sign: bool,
    right: Sequence[int],
    right_sign: bool,
) -> tuple[Digits, bool]:
    """Вычитание: left + (-right)."""
    return add_words(left, left_sign, *negate_words(right, right_sign))


# =============================================================================
# УМНОЖЕНИЕ / ДЕЛЕНИЕ НА ОДНО СЛОВО
# =============================================================================


def mul_small(magnitude: Sequence[int], word: int) -> list[int]:
    """
    Умножение magnitude на одно 32-битное слово.

    Schoolbook проход с 64-битным аккумулятором, результат на одно слово
    длиннее исходного (перенос из старшего слова).

    Args:
        magnitude: Беззнаковое значение (little-endian)
        word: Множитель 0 <= word < BASE

    Returns:
        Новое magnitude без старших нулей
    """
    if not 0 <= word <= DIGIT_MASK:
        raise ValueError(f"word must fit in {DIGIT_BITS} bits, got {word}")

    result = [0] * (len(magnitude) + 1)
    carry = 0
    for i, digit in enumerate(magnitude):
        carry += digit * word
        result[i] = carry & DIGIT_MASK
        carry >>= DIGIT_BITS
    result[len(magnitude)] = carry
    return strip_zeros(result)


def div_small(magnitude: Sequence[int], word: int) -> tuple[list[int], int]:
    """
    Деление magnitude на одно 32-битное слово.

    Long division от старшего слова к младшему: остаток текущего шага
    сдвигается на слово и складывается со следующим словом.

    Args:
        magnitude: Беззнаковое делимое (little-endian)
        word: Делитель 0 < word < BASE

    Returns:
        (quotient, remainder), remainder < word

    Raises:
        DivisionByZero: Если word == 0
    """
    if word == 0:
        raise DivisionByZero("single-word division")
    if not 0 < word <= DIGIT_MASK:
        raise ValueError(f"word must fit in {DIGIT_BITS} bits, got {word}")

    quotient = [0] * len(magnitude)
    remainder = 0
    for i in range(len(magnitude) - 1, -1, -1):
        remainder = (remainder << DIGIT_BITS) | magnitude[i]
        quotient[i] = remainder // word
        remainder %= word
    return strip_zeros(quotient), remainder


def add_small(magnitude: Sequence[int], word: int) -> list[int]:
    """Прибавление одного слова к magnitude (используется парсером)."""
    result = list(magnitude)
    carry = word
    for i in range(len(result)):
        if not carry:
            break
        carry += result[i]
        result[i] = carry & DIGIT_MASK
        carry >>= DIGIT_BITS
    if carry:
        result.append(carry)
    return strip_zeros(result)
