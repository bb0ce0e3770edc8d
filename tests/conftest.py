"""
Общие фикстуры тестов bigint.
"""

import random

import pytest

from bigint.core.config import reset_arithmetic_config


@pytest.fixture(autouse=True)
def _isolate_arithmetic_config():
    """Каждый тест начинается и заканчивается с конфигурацией по умолчанию."""
    reset_arithmetic_config()
    yield
    reset_arithmetic_config()


@pytest.fixture
def rng() -> random.Random:
    """Детерминированный генератор для property-тестов."""
    return random.Random(20240917)
