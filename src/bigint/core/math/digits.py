"""
Digits: представление чисел и нормализация

Модуль описывает внутреннее представление BigInteger:
- little-endian список беззнаковых 32-битных слов (digits)
- неявное бесконечное знаковое расширение fill word
- каноническая форма (shrink) и атомарное обновление знака (normalize)
- хелперы для работы с беззнаковыми magnitude

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Любой индекс за пределами digits читается как fill word
2. sign == старший бит последнего слова (для пустых digits: () -> 0, ()/True -> -1)
3. В digits нет лишних хвостовых fill word
4. Magnitude хранится без старших нулевых слов ([] == 0)
"""

from typing import Final, Sequence

# =============================================================================
# КОНСТАНТЫ ПРЕДСТАВЛЕНИЯ
# =============================================================================

# Разрядность одного слова
DIGIT_BITS: Final[int] = 32

# Основание системы счисления
BASE: Final[int] = 1 << DIGIT_BITS

# Маска младших 32 бит (заодно fill word отрицательных чисел)
DIGIT_MASK: Final[int] = BASE - 1

# Старший (знаковый) бит слова
SIGN_BIT: Final[int] = 1 << (DIGIT_BITS - 1)


Digits = tuple[int, ...]


# =============================================================================
# FILL WORD И ДОСТУП К СЛОВАМ
# =============================================================================


def fill_word(sign: bool) -> int:
    """
    Fill word: значение всех слов за пределами хранимого префикса.

    Returns:
        0xFFFFFFFF для отрицательных чисел, 0 для неотрицательных
    """
    return DIGIT_MASK if sign else 0


def digit_at(digits: Sequence[int], sign: bool, index: int) -> int:
    """
    Слово с номером index с учётом бесконечного знакового расширения.

    Все bitwise, compare и shift операции читают слова только через эту
    функцию, а не через прямую индексацию.

    Args:
        digits: Хранимые слова (little-endian)
        sign: Знак числа
        index: Номер слова (>= 0)

    Returns:
        digits[index] либо fill word, если index за пределами digits
    """
    if index < len(digits):
        return digits[index]
    return fill_word(sign)


def top_bit(word: int) -> bool:
    """Старший бит слова."""
    return bool(word & SIGN_BIT)


# =============================================================================
# НОРМАЛИЗАЦИЯ
# =============================================================================


def shrink(words: list[int], sign: bool) -> list[int]:
    """
    Удаление избыточных хвостовых fill word (in-place).

    Слово удаляется только если после удаления старший бит нового
    последнего слова (или fill word, если слов не осталось) совпадает со
    знаком. Иначе изменилось бы число, которое восстанавливается
    знаковым расширением.

    Args:
        words: Слова (little-endian), изменяются на месте
        sign: Знак числа

    Returns:
        Тот же список words

    Examples:
        >>> shrink([5, 0, 0], False)
        [5]
        >>> shrink([0x80000000, 0], False)
        [2147483648, 0]
        >>> shrink([0xFFFFFFFF], True)
        []
    """
    fill = fill_word(sign)
    while words and words[-1] == fill:
        below = top_bit(words[-2]) if len(words) > 1 else sign
        if below != sign:
            break
        words.pop()
    return words


def normalize(words: list[int]) -> tuple[Digits, bool]:
    """
    Атомарное обновление знака и shrink.

    Знак берётся из старшего бита самого старшего вычисленного слова,
    поэтому вызывающий код обязан вычислить хотя бы одно слово чистого
    знакового расширения (алгоритмы расширяют операнды на +1 слово).
    Пустой список трактуется как ноль.

    Args:
        words: Сырые слова результата (список потребляется)

    Returns:
        (digits, sign) в канонической форме
    """
    sign = top_bit(words[-1]) if words else False
    shrink(words, sign)
    return tuple(words), sign


def is_canonical(digits: Sequence[int], sign: bool) -> bool:
    """Проверка канонической формы (используется в тестах инвариантов)."""
    if any(d < 0 or d > DIGIT_MASK for d in digits):
        return False
    if digits and top_bit(digits[-1]) != sign:
        return False
    return list(digits) == shrink(list(digits), sign)


# =============================================================================
# MAGNITUDE (беззнаковые значения)
# =============================================================================


def strip_zeros(words: list[int]) -> list[int]:
    """Удаление старших нулевых слов magnitude (in-place)."""
    while words and words[-1] == 0:
        words.pop()
    return words


def magnitude_of(digits: Sequence[int], sign: bool) -> list[int]:
    """
    Абсолютное значение в виде беззнакового magnitude.

    Для отрицательных чисел выполняется two's-complement отрицание на
    ширине len(digits) + 1: complement каждого слова и +1.

    Examples:
        >>> magnitude_of((), True)
        [1]
        >>> magnitude_of((5,), False)
        [5]
    """
    if not sign:
        return strip_zeros(list(digits))

    words = [~digit_at(digits, sign, i) & DIGIT_MASK for i in range(len(digits) + 1)]
    carry = 1
    for i, word in enumerate(words):
        carry += word
        words[i] = carry & DIGIT_MASK
        carry >>= DIGIT_BITS
        if not carry:
            break
    return strip_zeros(words)


def from_magnitude(magnitude: Sequence[int], negative: bool) -> tuple[Digits, bool]:
    """
    Построение (digits, sign) из magnitude и флага знака.

    Magnitude расширяется нулевым словом, чтобы старший бит был чистым,
    затем при negative выполняется two's-complement отрицание.

    Args:
        magnitude: Беззнаковое значение (little-endian)
        negative: Применить знак минус

    Returns:
        (digits, sign) в канонической форме; -0 == 0
    """
    words = strip_zeros(list(magnitude))
    if not words:
        return (), False
    words.append(0)
    if negative:
        carry = 1
        for i, word in enumerate(words):
            carry += ~word & DIGIT_MASK
            words[i] = carry & DIGIT_MASK
            carry >>= DIGIT_BITS
    return normalize(words)


def compare_magnitudes(left: Sequence[int], right: Sequence[int]) -> int:
    """
    Сравнение двух magnitude без старших нулей.

    Returns:
        -1 если left < right, 0 если равны, 1 если left > right
    """
    if len(left) != len(right):
        return -1 if len(left) < len(right) else 1
    for index in range(len(left) - 1, -1, -1):
        if left[index] != right[index]:
            return -1 if left[index] < right[index] else 1
    return 0


def words_from_int(value: int) -> tuple[Digits, bool]:
    """
    Разложение Python int на слова в каноническом виде.

    Использует арифметический сдвиг Python int, поэтому отрицательные
    значения сразу дают two's-complement слова.
    """
    words: list[int] = []
    while value not in (0, -1):
        words.append(value & DIGIT_MASK)
        value >>= DIGIT_BITS
    words.append(fill_word(value == -1))
    return normalize(words)


def int_from_words(digits: Sequence[int], sign: bool) -> int:
    """Обратное преобразование слов в Python int."""
    value = 0
    for word in reversed(digits):
        value = (value << DIGIT_BITS) | word
    if sign:
        value -= 1 << (DIGIT_BITS * len(digits))
    return value
