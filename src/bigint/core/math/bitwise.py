"""
Bitwise: AND/OR/XOR, сдвиги и сравнение

Операции над two's-complement представлением (digits, sign). Благодаря
fill word одна и та же реализация корректна для любых комбинаций знаков:
недостающие слова более короткого операнда берутся из его fill word.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Слова читаются только через digit_at
2. Правый сдвиг арифметический (заполнение fill word, а не нулями)
3. Результат проходит через normalize
"""

import operator
from typing import Callable, Sequence

from bigint.core.math.digits import (
    DIGIT_BITS,
    DIGIT_MASK,
    Digits,
    digit_at,
    fill_word,
    normalize,
)


# =============================================================================
# AND / OR / XOR
# =============================================================================


def combine_words(
    left: Sequence[int],
    left_sign: bool,
    right: Sequence[int],
    right_sign: bool,
    fn: Callable[[int, int], int],
) -> tuple[Digits, bool]:
    """
    Пословное применение булевой операции к знаково расширенным операндам.

    Вычисляется max(len) + 1 слов: последнее слово это fn(fill, fill),
    оно и определяет знак результата.
    """
    width = max(len(left), len(right)) + 1
    words = [
        fn(digit_at(left, left_sign, i), digit_at(right, right_sign, i)) & DIGIT_MASK
        for i in range(width)
    ]
    return normalize(words)


def and_words(left, left_sign, right, right_sign) -> tuple[Digits, bool]:
    return combine_words(left, left_sign, right, right_sign, operator.and_)


def or_words(left, left_sign, right, right_sign) -> tuple[Digits, bool]:
    return combine_words(left, left_sign, right, right_sign, operator.or_)


def xor_words(left, left_sign, right, right_sign) -> tuple[Digits, bool]:
    return combine_words(left, left_sign, right, right_sign, operator.xor)


# =============================================================================
# СДВИГИ
# =============================================================================


def _validate_shift(bits: int) -> None:
    if bits < 0:
        raise ValueError(f"negative shift count: {bits}")


def shift_left_words(digits: Sequence[int], sign: bool, bits: int) -> tuple[Digits, bool]:
    """
    Сдвиг влево на bits (умножение на 2**bits).

    bits раскладывается на целые слова и остаток внутри слова. Каждое
    слово объединяется с вытесненными битами предыдущего; сверху
    добавляется fill word, чтобы принять биты, вытесненные из старшего.

    Raises:
        ValueError: Если bits < 0
    """
    _validate_shift(bits)
    if bits == 0:
        return tuple(digits), sign

    blocks, offset = divmod(bits, DIGIT_BITS)
    source = list(digits) + [fill_word(sign)]
    if offset:
        shifted = []
        previous = 0
        for word in source:
            shifted.append(((word << offset) | (previous >> (DIGIT_BITS - offset))) & DIGIT_MASK)
            previous = word
    else:
        shifted = source
    return normalize([0] * blocks + shifted)


def shift_right_words(digits: Sequence[int], sign: bool, bits: int) -> tuple[Digits, bool]:
    """
    Арифметический сдвиг вправо на bits (floor деление на 2**bits).

    Слова за пределами массива берутся из fill word, поэтому
    отрицательные числа остаются отрицательными: -5 >> 1 == -3.

    Raises:
        ValueError: Если bits < 0
    """
    _validate_shift(bits)
    if bits == 0:
        return tuple(digits), sign

    blocks, offset = divmod(bits, DIGIT_BITS)
    source = digits[blocks:]
    words = []
    for i in range(len(source)):
        current = source[i]
        if offset:
            following = digit_at(source, sign, i + 1)
            current = (current >> offset) | ((following << (DIGIT_BITS - offset)) & DIGIT_MASK)
        words.append(current)
    words.append(fill_word(sign))
    return normalize(words)


# =============================================================================
# СРАВНЕНИЕ
# =============================================================================


def compare_words(
    left: Sequence[int],
    left_sign: bool,
    right: Sequence[int],
    right_sign: bool,
) -> int:
    """
    Полный порядок на two's-complement числах.

    Разные знаки решают сразу. При одинаковом знаке слова сравниваются
    как беззнаковые от старшего индекса (включая fill word расширение) к
    младшему.

    Returns:
        -1, 0 или 1
    """
    if left_sign != right_sign:
        return -1 if left_sign else 1
    for index in range(max(len(left), len(right)), -1, -1):
        a = digit_at(left, left_sign, index)
        b = digit_at(right, right_sign, index)
        if a != b:
            return 1 if a > b else -1
    return 0
