"""
Arithmetic Config: параметры производительности движка

Параметры влияют только на скорость, но не на результаты: любые
допустимые значения дают идентичные числа.

- karatsuba_threshold: минимальная длина (в словах) обоих операндов,
  начиная с которой используется Karatsuba вместо schoolbook
- decimal_chunk_digits: сколько десятичных цифр кодек обрабатывает за
  одно деление/умножение на слово (10**9 < 2**32)
"""

import logging
from typing import Any, Final

from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)

# =============================================================================
# DEFAULTS
# =============================================================================

KARATSUBA_THRESHOLD_DEFAULT: Final[int] = 16

# Ниже этого порога Karatsuba не уменьшает длину операндов при рекурсии
KARATSUBA_THRESHOLD_MIN: Final[int] = 4

DECIMAL_CHUNK_DIGITS_DEFAULT: Final[int] = 9

# 10**9 помещается в одно 32-битное слово, 10**10 уже нет
DECIMAL_CHUNK_DIGITS_MAX: Final[int] = 9


# =============================================================================
# CONFIG MODEL
# =============================================================================


class ArithmeticConfig(BaseModel):
    """
    Конфигурация арифметики BigInteger.

    Immutable модель (frozen=True): изменение конфигурации всегда создаёт
    новый экземпляр через configure_arithmetic.
    """

    karatsuba_threshold: int = Field(
        KARATSUBA_THRESHOLD_DEFAULT,
        ge=KARATSUBA_THRESHOLD_MIN,
        description="Минимальная длина обоих операндов (слов) для Karatsuba",
    )
    decimal_chunk_digits: int = Field(
        DECIMAL_CHUNK_DIGITS_DEFAULT,
        ge=1,
        le=DECIMAL_CHUNK_DIGITS_MAX,
        description="Десятичных цифр на одну операцию кодека",
    )

    model_config = {"frozen": True, "extra": "forbid"}


_DEFAULT_CONFIG: Final[ArithmeticConfig] = ArithmeticConfig()

# Текущая конфигурация процесса
_current_config: ArithmeticConfig = _DEFAULT_CONFIG


# =============================================================================
# ACCESSORS
# =============================================================================


def get_arithmetic_config() -> ArithmeticConfig:
    """Текущая конфигурация арифметики."""
    return _current_config


def set_arithmetic_config(config: ArithmeticConfig) -> None:
    """
    Установка конфигурации арифметики.

    Raises:
        TypeError: Если config не ArithmeticConfig
    """
    global _current_config
    if not isinstance(config, ArithmeticConfig):
        raise TypeError(f"expected ArithmeticConfig, got {type(config).__name__}")
    _current_config = config
    logger.info(
        "arithmetic config updated: karatsuba_threshold=%d decimal_chunk_digits=%d",
        config.karatsuba_threshold,
        config.decimal_chunk_digits,
    )


def configure_arithmetic(**overrides: Any) -> ArithmeticConfig:
    """
    Частичное обновление конфигурации с валидацией.

    Examples:
        >>> configure_arithmetic(karatsuba_threshold=32).karatsuba_threshold
        32

    Raises:
        pydantic.ValidationError: Если значения недопустимы
    """
    config = ArithmeticConfig(**{**_current_config.model_dump(), **overrides})
    set_arithmetic_config(config)
    return config


def reset_arithmetic_config() -> ArithmeticConfig:
    """Возврат к значениям по умолчанию."""
    set_arithmetic_config(_DEFAULT_CONFIG)
    return _DEFAULT_CONFIG
