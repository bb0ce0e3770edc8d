"""
bigint: знаковые целые произвольной точности.

Публичный API:
- BigInteger: immutable value type с полным набором операторов
- parse_decimal / format_decimal: десятичный кодек
- DivisionByZero / InvalidFormat: ошибки движка
- ArithmeticConfig: параметры производительности (Karatsuba, кодек)
"""

from bigint.core.config import (
    ArithmeticConfig,
    configure_arithmetic,
    get_arithmetic_config,
    reset_arithmetic_config,
    set_arithmetic_config,
)
from bigint.core.domain import BigInteger, format_decimal, parse_decimal
from bigint.core.errors import BigIntegerError, DivisionByZero, InvalidFormat

__version__ = "0.1.0"

__all__ = [
    # Value type
    "BigInteger",
    "parse_decimal",
    "format_decimal",
    # Errors
    "BigIntegerError",
    "DivisionByZero",
    "InvalidFormat",
    # Config
    "ArithmeticConfig",
    "configure_arithmetic",
    "get_arithmetic_config",
    "reset_arithmetic_config",
    "set_arithmetic_config",
]
