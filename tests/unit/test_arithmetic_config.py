"""
Тесты для ArithmeticConfig

Проверяет:
1. Значения по умолчанию (Karatsuba 16 слов, кодек 9 цифр)
2. Pydantic валидацию границ и immutability
3. Что результаты не зависят от параметров
4. INFO логирование изменения конфигурации
"""

import logging

import pytest
from pydantic import ValidationError

from bigint import BigInteger
from bigint.core.config import (
    DECIMAL_CHUNK_DIGITS_DEFAULT,
    KARATSUBA_THRESHOLD_DEFAULT,
    ArithmeticConfig,
    configure_arithmetic,
    get_arithmetic_config,
    reset_arithmetic_config,
    set_arithmetic_config,
)
from tests.helpers import random_signed, random_words

# =============================================================================
# МОДЕЛЬ
# =============================================================================


class TestArithmeticConfigModel:
    """Тесты модели ArithmeticConfig"""

    def test_defaults(self) -> None:
        config = ArithmeticConfig()
        assert config.karatsuba_threshold == KARATSUBA_THRESHOLD_DEFAULT == 16
        assert config.decimal_chunk_digits == DECIMAL_CHUNK_DIGITS_DEFAULT == 9

    @pytest.mark.parametrize("threshold", [0, 3, -16])
    def test_threshold_too_small(self, threshold: int) -> None:
        with pytest.raises(ValidationError):
            ArithmeticConfig(karatsuba_threshold=threshold)

    @pytest.mark.parametrize("chunk", [0, 10])
    def test_chunk_digits_out_of_range(self, chunk: int) -> None:
        with pytest.raises(ValidationError):
            ArithmeticConfig(decimal_chunk_digits=chunk)

    def test_extra_fields_forbidden(self) -> None:
        with pytest.raises(ValidationError):
            ArithmeticConfig(karatsuba_cutoff=8)

    def test_frozen(self) -> None:
        config = ArithmeticConfig()
        with pytest.raises(ValidationError):
            config.karatsuba_threshold = 32


# =============================================================================
# ACCESSORS
# =============================================================================


class TestConfigAccessors:
    """Тесты get/set/configure/reset"""

    def test_configure_partial_update(self) -> None:
        configure_arithmetic(karatsuba_threshold=32)
        config = configure_arithmetic(decimal_chunk_digits=4)
        assert config.karatsuba_threshold == 32
        assert config.decimal_chunk_digits == 4
        assert get_arithmetic_config() is config

    def test_configure_invalid_keeps_previous(self) -> None:
        before = get_arithmetic_config()
        with pytest.raises(ValidationError):
            configure_arithmetic(karatsuba_threshold=1)
        assert get_arithmetic_config() is before

    def test_set_rejects_other_types(self) -> None:
        with pytest.raises(TypeError, match="ArithmeticConfig"):
            set_arithmetic_config({"karatsuba_threshold": 8})

    def test_reset(self) -> None:
        configure_arithmetic(karatsuba_threshold=64, decimal_chunk_digits=1)
        assert reset_arithmetic_config() == ArithmeticConfig()
        assert get_arithmetic_config().karatsuba_threshold == 16

    def test_update_is_logged(self, caplog) -> None:
        caplog.set_level(logging.INFO, logger="bigint.core.config")
        configure_arithmetic(karatsuba_threshold=24)
        assert "karatsuba_threshold=24" in caplog.text
        assert "decimal_chunk_digits=9" in caplog.text


# =============================================================================
# РЕЗУЛЬТАТЫ НЕ ЗАВИСЯТ ОТ ПАРАМЕТРОВ
# =============================================================================


class TestConfigDoesNotChangeResults:
    """Параметры влияют только на скорость"""

    @pytest.mark.parametrize("threshold", [4, 8, 16, 1000])
    def test_multiplication(self, rng, threshold: int) -> None:
        a = random_words(rng, 40)
        b = -random_words(rng, 33)
        configure_arithmetic(karatsuba_threshold=threshold)
        assert (BigInteger(a) * BigInteger(b)).to_int() == a * b

    @pytest.mark.parametrize("chunk", [1, 2, 7, 9])
    def test_decimal_codec(self, rng, chunk: int) -> None:
        configure_arithmetic(decimal_chunk_digits=chunk)
        for _ in range(30):
            value = random_signed(rng, 8)
            assert str(BigInteger(str(value))) == str(value)
