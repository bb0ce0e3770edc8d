"""
Генераторы операндов для property-тестов.

Python int служит эталоном (oracle) для всех операций.
"""

import random


def random_signed(rng: random.Random, max_words: int) -> int:
    """Случайное знаковое число до max_words 32-битных слов."""
    bits = rng.randint(0, 32 * max_words)
    value = rng.getrandbits(bits) if bits else 0
    return -value if rng.random() < 0.5 else value


def random_words(rng: random.Random, count: int) -> int:
    """
    Положительное число ровно из count слов.

    Слова берутся из набора граничных значений и случайных, чтобы
    проверять переносы и коррекцию оценки частного.
    """
    special = (0, 1, 0x7FFFFFFF, 0x80000000, 0xFFFFFFFE, 0xFFFFFFFF)
    value = 0
    for index in range(count):
        word = rng.choice(special) if rng.random() < 0.4 else rng.getrandbits(32)
        if index == count - 1 and word == 0:
            word = 1
        value |= word << (32 * index)
    return value


def trunc_div(a: int, b: int) -> int:
    """Деление с усечением к нулю (семантика C)."""
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


def trunc_mod(a: int, b: int) -> int:
    """Остаток со знаком делимого."""
    return a - trunc_div(a, b) * b
