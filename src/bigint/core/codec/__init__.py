"""
Codec Module

Десятичное (base 10) преобразование чисел. Другие системы счисления не
поддерживаются.
"""

from .decimal import DECIMAL_DIGITS, format_decimal_words, parse_decimal_words

__all__ = [
    "DECIMAL_DIGITS",
    "format_decimal_words",
    "parse_decimal_words",
]
