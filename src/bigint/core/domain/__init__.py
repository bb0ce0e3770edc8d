"""
Domain Models

Immutable value type BigInteger и функции разбора/форматирования.
"""

from .big_integer import BigInteger, format_decimal, parse_decimal

__all__ = [
    "BigInteger",
    "format_decimal",
    "parse_decimal",
]
