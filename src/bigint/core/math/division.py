"""
Division: Knuth Algorithm D

Деление с усечением к нулю (как в C): знак частного = XOR знаков,
остаток имеет знак делимого и определяется как a - (a / b) * b.

Алгоритм для делителя из >= 2 слов:
1. Нормализация: f = BASE // (top + 1), оба операнда умножаются на f,
   старшее слово делителя становится >= BASE / 2
2. Для каждой позиции частного от старшей к младшей:
   - trial dividend: три старших слова текущего остатка
   - trial divisor: два старших слова нормализованного делителя
   - оценка q = min(trial dividend // trial divisor, BASE - 1)
   - если d * q * BASE^k больше остатка: q -= 1 (не более одного раза)
   - остаток -= d * q * BASE^k

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Делитель 0 -> DivisionByZero
2. Оценка q по двум словам делителя завышена не более чем на 1
3. Остаток перед каждым шагом меньше d * BASE^(k+1)
"""

import logging
from typing import Sequence

from bigint.core.errors import DivisionByZero
from bigint.core.math.digits import (
    BASE,
    DIGIT_BITS,
    DIGIT_MASK,
    Digits,
    compare_magnitudes,
    from_magnitude,
    magnitude_of,
    strip_zeros,
)
from bigint.core.math.linear import div_small, mul_small, subtract_words
from bigint.core.math.multiplication import multiply_words

logger = logging.getLogger(__name__)


# =============================================================================
# KNUTH ALGORITHM D
# =============================================================================


def _word(words: Sequence[int], index: int) -> int:
    return words[index] if 0 <= index < len(words) else 0


def _exceeds_at(product: Sequence[int], remainder: Sequence[int], offset: int, width: int) -> bool:
    """
    product * BASE^offset > remainder, сравнение только в окне
    remainder[offset:offset + width].

    Слова остатка выше окна нулевые (инвариант 3), младшие offset слов
    не влияют.
    """
    for index in range(width - 1, -1, -1):
        product_word = product[index] if index < len(product) else 0
        remainder_word = remainder[offset + index]
        if product_word != remainder_word:
            return product_word > remainder_word
    return False


def _subtract_at(remainder: list[int], product: Sequence[int], offset: int) -> None:
    """remainder -= product * BASE^offset (in-place, результат неотрицателен)."""
    borrow = 0
    index = offset
    for word in product:
        diff = remainder[index] - word - borrow
        remainder[index] = diff & DIGIT_MASK
        borrow = 1 if diff < 0 else 0
        index += 1
    while borrow:
        diff = remainder[index] - borrow
        remainder[index] = diff & DIGIT_MASK
        borrow = 1 if diff < 0 else 0
        index += 1


def knuth_divide(dividend: Sequence[int], divisor: Sequence[int]) -> tuple[list[int], list[int]]:
    """
    Нормализованное деление magnitude (Knuth Algorithm D).

    Args:
        dividend: Беззнаковое делимое без старших нулей
        divisor: Беззнаковый делитель, не менее двух слов

    Returns:
        (quotient, remainder) без старших нулей

    Raises:
        ValueError: Если делитель короче двух слов
    """
    n = len(divisor)
    m = len(dividend)
    if n < 2:
        raise ValueError("knuth_divide requires a divisor of at least two words")
    if m < n:
        return [], strip_zeros(list(dividend))

    factor = BASE // (divisor[-1] + 1)
    remainder = mul_small(dividend, factor)
    scaled = mul_small(divisor, factor)
    logger.debug("knuth division: %d / %d words, normalization factor %d", m, n, factor)

    remainder.extend([0] * (m + 1 - len(remainder)))
    trial_divisor = (scaled[n - 1] << DIGIT_BITS) | scaled[n - 2]
    quotient = [0] * (m - n + 1)

    for k in range(m - n, -1, -1):
        trial_dividend = (
            (_word(remainder, n + k) << (2 * DIGIT_BITS))
            | (_word(remainder, n + k - 1) << DIGIT_BITS)
            | _word(remainder, n + k - 2)
        )
        estimate = min(trial_dividend // trial_divisor, BASE - 1)
        product = mul_small(scaled, estimate)
        if _exceeds_at(product, remainder, k, n + 1):
            logger.debug("knuth division: estimate corrected at position %d", k)
            estimate -= 1
            product = mul_small(scaled, estimate)
        _subtract_at(remainder, product, k)
        quotient[k] = estimate

    remainder_words, _ = div_small(strip_zeros(remainder), factor)
    return strip_zeros(quotient), remainder_words


# =============================================================================
# ПУБЛИЧНОЕ ДЕЛЕНИЕ
# =============================================================================


def divide_magnitudes(dividend: Sequence[int], divisor: Sequence[int]) -> list[int]:
    """
    Частное двух magnitude с выбором стратегии.

    Raises:
        DivisionByZero: Если divisor == 0
    """
    if not divisor:
        raise DivisionByZero()
    if compare_magnitudes(divisor, dividend) > 0:
        return []
    if len(divisor) == 1:
        quotient, _ = div_small(dividend, divisor[0])
        return quotient
    quotient, _ = knuth_divide(dividend, divisor)
    return quotient


def divide_words(
    left: Sequence[int],
    left_sign: bool,
    right: Sequence[int],
    right_sign: bool,
) -> tuple[Digits, bool]:
    """
    Знаковое деление с усечением к нулю.

    Raises:
        DivisionByZero: Если right == 0
    """
    if not right and not right_sign:
        raise DivisionByZero()
    quotient = divide_magnitudes(magnitude_of(left, left_sign), magnitude_of(right, right_sign))
    return from_magnitude(quotient, left_sign != right_sign)


def modulo_words(
    left: Sequence[int],
    left_sign: bool,
    right: Sequence[int],
    right_sign: bool,
) -> tuple[Digits, bool]:
    """
    Остаток: a - (a / b) * b, знак совпадает со знаком делимого.

    Raises:
        DivisionByZero: Если right == 0
    """
    if not right and not right_sign:
        raise DivisionByZero("modulo")
    quotient = divide_words(left, left_sign, right, right_sign)
    return subtract_words(left, left_sign, *multiply_words(*quotient, right, right_sign))


def divmod_words(
    left: Sequence[int],
    left_sign: bool,
    right: Sequence[int],
    right_sign: bool,
) -> tuple[tuple[Digits, bool], tuple[Digits, bool]]:
    """Частное и остаток одним вызовом (усечение к нулю)."""
    if not right and not right_sign:
        raise DivisionByZero("divmod")
    quotient = divide_words(left, left_sign, right, right_sign)
    remainder = subtract_words(left, left_sign, *multiply_words(*quotient, right, right_sign))
    return quotient, remainder
