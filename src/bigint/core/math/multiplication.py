"""
Multiplication: schoolbook и Karatsuba

Умножение работает с абсолютными значениями (magnitude), знак результата
равен XOR знаков операндов и применяется один раз к беззнаковому
произведению.

Стратегии:
- пустой операнд -> 0
- операнд из одного слова -> mul_small
- хотя бы один операнд короче karatsuba_threshold -> schoolbook O(n*m)
- иначе Karatsuba O(n^1.585):
    p1 = Hi_l * Hi_r
    p2 = Lo_l * Lo_r
    p3 = (Hi_l + Lo_l) * (Hi_r + Lo_r)
    result = p1 << 2k слов + (p3 - p1 - p2) << k слов + p2

Обе стратегии дают идентичные результаты; порог влияет только на
производительность.
"""

import logging
from typing import Optional, Sequence

from bigint.core.config import get_arithmetic_config
from bigint.core.math.bitwise import shift_left_words
from bigint.core.math.digits import (
    DIGIT_BITS,
    DIGIT_MASK,
    Digits,
    from_magnitude,
    magnitude_of,
    strip_zeros,
)
from bigint.core.math.linear import add_words, mul_small, subtract_words

logger = logging.getLogger(__name__)


# =============================================================================
# SCHOOLBOOK
# =============================================================================


def schoolbook_multiply(left: Sequence[int], right: Sequence[int]) -> list[int]:
    """
    Schoolbook умножение magnitude.

    Для каждого слова right считается left * word (mul_small) и
    накапливается в результат со смещением i, перенос протягивается через
    перекрывающиеся позиции.

    Args:
        left: Беззнаковый множитель
        right: Беззнаковый множитель

    Returns:
        Произведение без старших нулей
    """
    result = [0] * (len(left) + len(right))
    for i, word in enumerate(right):
        if word == 0:
            continue
        partial = mul_small(left, word)
        carry = 0
        j = 0
        while j < len(partial) or carry:
            carry += result[i + j] + (partial[j] if j < len(partial) else 0)
            result[i + j] = carry & DIGIT_MASK
            carry >>= DIGIT_BITS
            j += 1
    return strip_zeros(result)


# =============================================================================
# KARATSUBA
# =============================================================================


def _split(magnitude: Sequence[int], half: int) -> tuple[list[int], list[int]]:
    """Разделение на (high, low) по границе half слов; каждая часть своя копия."""
    high = list(magnitude[half:])
    low = strip_zeros(list(magnitude[:half]))
    return high, low


def _add_magnitudes(left: Sequence[int], right: Sequence[int]) -> list[int]:
    return magnitude_of(*add_words(*from_magnitude(left, False), *from_magnitude(right, False)))


def karatsuba_multiply(
    left: Sequence[int],
    right: Sequence[int],
    threshold: int,
) -> list[int]:
    """
    Рекурсивное умножение Karatsuba над magnitude.

    Каждый рекурсивный вызов получает собственные срезы операндов. Сборка
    результата выполняется через two's-complement сложение, вычитание и
    сдвиг на 32*k бит.

    Args:
        left: Беззнаковый множитель
        right: Беззнаковый множитель
        threshold: Минимальная длина обоих операндов для рекурсии

    Returns:
        Произведение без старших нулей
    """
    if not left or not right:
        return []
    if len(left) == 1:
        return mul_small(right, left[0])
    if len(right) == 1:
        return mul_small(left, right[0])
    if len(left) < threshold or len(right) < threshold:
        return schoolbook_multiply(left, right)

    half = max(len(left), len(right)) // 2
    left_high, left_low = _split(left, half)
    right_high, right_low = _split(right, half)

    product_1 = karatsuba_multiply(left_high, right_high, threshold)
    product_2 = karatsuba_multiply(left_low, right_low, threshold)
    product_3 = karatsuba_multiply(
        _add_magnitudes(left_high, left_low),
        _add_magnitudes(right_high, right_low),
        threshold,
    )

    p1 = from_magnitude(product_1, False)
    p2 = from_magnitude(product_2, False)
    p3 = from_magnitude(product_3, False)

    middle = subtract_words(*subtract_words(*p3, *p1), *p2)
    result = add_words(
        *shift_left_words(*p1, DIGIT_BITS * 2 * half),
        *shift_left_words(*middle, DIGIT_BITS * half),
    )
    return magnitude_of(*add_words(*result, *p2))


# =============================================================================
# ПУБЛИЧНОЕ УМНОЖЕНИЕ
# =============================================================================


def multiply_magnitudes(
    left: Sequence[int],
    right: Sequence[int],
    threshold: Optional[int] = None,
) -> list[int]:
    """
    Произведение двух magnitude с выбором стратегии.

    Args:
        left: Беззнаковый множитель
        right: Беззнаковый множитель
        threshold: Порог Karatsuba (default: из ArithmeticConfig)
    """
    if threshold is None:
        threshold = get_arithmetic_config().karatsuba_threshold
    if len(left) >= threshold and len(right) >= threshold:
        logger.debug("karatsuba multiply: %d x %d words", len(left), len(right))
    return karatsuba_multiply(left, right, threshold)


def multiply_words(
    left: Sequence[int],
    left_sign: bool,
    right: Sequence[int],
    right_sign: bool,
    threshold: Optional[int] = None,
) -> tuple[Digits, bool]:
    """
    Знаковое умножение: |left| * |right|, знак XOR знаков.

    Returns:
        (digits, sign) произведения в канонической форме
    """
    product = multiply_magnitudes(
        magnitude_of(left, left_sign),
        magnitude_of(right, right_sign),
        threshold,
    )
    return from_magnitude(product, left_sign != right_sign)
