"""
Decimal Codec: преобразование в десятичную строку и обратно

Формат строки: необязательный ведущий знак (+ или -), затем одна или
более ASCII цифр 0-9. Пробелы, разделители и прочие символы запрещены.

Разбор идёт слева направо: result = result * 10**len(chunk) + chunk.
Форматирование: повторное div_small на magnitude, цифры собираются от
младших к старшим и разворачиваются.

Цифры обрабатываются блоками по decimal_chunk_digits (ArithmeticConfig):
одна операция на слово вместо одной на цифру, результат тот же.
"""

from typing import Optional, Sequence

from bigint.core.config import get_arithmetic_config
from bigint.core.errors import InvalidFormat
from bigint.core.math.digits import Digits, from_magnitude, magnitude_of
from bigint.core.math.linear import add_small, div_small, mul_small

DECIMAL_DIGITS = frozenset("0123456789")


# =============================================================================
# PARSE
# =============================================================================


def _validate(text: str) -> tuple[bool, int]:
    """
    Проверка формата строки.

    Returns:
        (negative, start) где start это индекс первой цифры

    Raises:
        InvalidFormat: При пустой строке, одиночном знаке или нецифровом символе
    """
    if not isinstance(text, str):
        raise TypeError(f"expected str, got {type(text).__name__}")
    if not text:
        raise InvalidFormat(text, 0, "empty string")

    start = 1 if text[0] in "+-" else 0
    if start == len(text):
        raise InvalidFormat(text, start, "sign without digits")

    for position in range(start, len(text)):
        if text[position] not in DECIMAL_DIGITS:
            raise InvalidFormat(text, position, f"unexpected character {text[position]!r}")
    return text[0] == "-", start


def parse_decimal_words(text: str, chunk_digits: Optional[int] = None) -> tuple[Digits, bool]:
    """
    Разбор десятичной строки в (digits, sign).

    Args:
        text: Десятичная строка, например "-12345"
        chunk_digits: Цифр на блок (default: из ArithmeticConfig)

    Returns:
        (digits, sign) в канонической форме

    Raises:
        InvalidFormat: Если строка не является десятичным числом
    """
    negative, start = _validate(text)
    if chunk_digits is None:
        chunk_digits = get_arithmetic_config().decimal_chunk_digits

    magnitude: list[int] = []
    position = start
    while position < len(text):
        chunk = text[position:position + chunk_digits]
        magnitude = add_small(mul_small(magnitude, 10 ** len(chunk)), int(chunk))
        position += len(chunk)

    # Знак применяется один раз в конце
    return from_magnitude(magnitude, negative)


# =============================================================================
# FORMAT
# =============================================================================


def format_decimal_words(
    digits: Sequence[int],
    sign: bool,
    chunk_digits: Optional[int] = None,
) -> str:
    """
    Десятичное представление (digits, sign).

    Examples:
        >>> format_decimal_words((), False)
        '0'
        >>> format_decimal_words((), True)
        '-1'
    """
    if chunk_digits is None:
        chunk_digits = get_arithmetic_config().decimal_chunk_digits

    magnitude = magnitude_of(digits, sign)
    if not magnitude:
        return "0"

    chunk_base = 10 ** chunk_digits
    chunks: list[str] = []
    while magnitude:
        magnitude, remainder = div_small(magnitude, chunk_base)
        chunks.append(str(remainder).zfill(chunk_digits) if magnitude else str(remainder))

    text = "".join(reversed(chunks))
    return "-" + text if sign else text
