"""
BigInteger: знаковое целое произвольной точности

Immutable value type поверх two's-complement представления
(bigint.core.math.digits). Все операторы возвращают новые экземпляры;
составные операторы (+=, *= и т.д.) связывают имя с новым значением.

Семантика:
- + - * << >> & | ^ ~ совпадают с Python int
- / и % это деление с усечением к нулю и остаток со знаком делимого
  (как в C): (a / b) * b + a % b == a
- операнды типа int приводятся автоматически
"""

from typing import Any, Union

from bigint.core.codec.decimal import format_decimal_words, parse_decimal_words
from bigint.core.math.bitwise import (
    and_words,
    compare_words,
    or_words,
    shift_left_words,
    shift_right_words,
    xor_words,
)
from bigint.core.math.digits import (
    Digits,
    fill_word,
    from_magnitude,
    int_from_words,
    magnitude_of,
    words_from_int,
)
from bigint.core.math.division import divide_words, divmod_words, modulo_words
from bigint.core.math.linear import (
    add_words,
    complement_words,
    div_small,
    mul_small,
    negate_words,
    subtract_words,
)
from bigint.core.math.multiplication import multiply_words

Operand = Union["BigInteger", int]


class BigInteger:
    """
    Целое число неограниченной величины.

    Attributes:
        digits: Слова (little-endian, base 2**32) в канонической форме
        sign: True если число отрицательное
    """

    __slots__ = ("_digits", "_sign")

    def __init__(self, value: Union["BigInteger", int, str] = 0):
        """
        Args:
            value: int, десятичная строка или другой BigInteger

        Raises:
            InvalidFormat: Если строка не является десятичным числом
            TypeError: Для остальных типов
        """
        if isinstance(value, BigInteger):
            digits, sign = value._digits, value._sign
        elif isinstance(value, bool):
            raise TypeError("BigInteger cannot be constructed from bool")
        elif isinstance(value, int):
            digits, sign = words_from_int(value)
        elif isinstance(value, str):
            digits, sign = parse_decimal_words(value)
        else:
            raise TypeError(f"cannot construct BigInteger from {type(value).__name__}")
        self._digits = digits
        self._sign = sign

    @classmethod
    def _from_words(cls, words: tuple[Digits, bool]) -> "BigInteger":
        """Обёртка над уже нормализованной парой (digits, sign)."""
        result = cls.__new__(cls)
        result._digits, result._sign = words
        return result

    @classmethod
    def from_integer(cls, value: int) -> "BigInteger":
        return cls(value)

    @classmethod
    def from_decimal_string(cls, text: str) -> "BigInteger":
        """
        Разбор десятичной строки.

        Raises:
            InvalidFormat: Если строка содержит что-то кроме знака и цифр
        """
        return cls._from_words(parse_decimal_words(text))

    # =========================================================================
    # REPRESENTATION
    # =========================================================================

    @property
    def digits(self) -> Digits:
        return self._digits

    @property
    def sign(self) -> bool:
        return self._sign

    @property
    def fill_word(self) -> int:
        """Значение слов за пределами digits (0 или 0xFFFFFFFF)."""
        return fill_word(self._sign)

    def _words(self) -> tuple[Digits, bool]:
        return self._digits, self._sign

    @staticmethod
    def _coerce(other: Any) -> "BigInteger":
        if isinstance(other, BigInteger):
            return other
        if isinstance(other, int) and not isinstance(other, bool):
            return BigInteger(other)
        return NotImplemented

    # =========================================================================
    # ARITHMETIC
    # =========================================================================

    def add(self, other: Operand) -> "BigInteger":
        other = _operand(other)
        return BigInteger._from_words(add_words(*self._words(), *other._words()))

    def subtract(self, other: Operand) -> "BigInteger":
        other = _operand(other)
        return BigInteger._from_words(subtract_words(*self._words(), *other._words()))

    def multiply(self, other: Operand) -> "BigInteger":
        other = _operand(other)
        return BigInteger._from_words(multiply_words(*self._words(), *other._words()))

    def divide(self, other: Operand) -> "BigInteger":
        """
        Деление с усечением к нулю.

        Raises:
            DivisionByZero: Если other == 0
        """
        other = _operand(other)
        return BigInteger._from_words(divide_words(*self._words(), *other._words()))

    def modulo(self, other: Operand) -> "BigInteger":
        """
        Остаток a - (a / b) * b, знак совпадает со знаком self.

        Raises:
            DivisionByZero: Если other == 0
        """
        other = _operand(other)
        return BigInteger._from_words(modulo_words(*self._words(), *other._words()))

    def divmod(self, other: Operand) -> tuple["BigInteger", "BigInteger"]:
        other = _operand(other)
        quotient, remainder = divmod_words(*self._words(), *other._words())
        return BigInteger._from_words(quotient), BigInteger._from_words(remainder)

    def negate(self) -> "BigInteger":
        return BigInteger._from_words(negate_words(*self._words()))

    def identity(self) -> "BigInteger":
        return self

    def absolute(self) -> "BigInteger":
        return self.negate() if self._sign else self

    def increment(self) -> "BigInteger":
        return self.add(1)

    def decrement(self) -> "BigInteger":
        return self.subtract(1)

    def mul_small(self, word: int) -> "BigInteger":
        """Умножение на одно 32-битное слово (знак сохраняется)."""
        product = mul_small(magnitude_of(*self._words()), word)
        return BigInteger._from_words(from_magnitude(product, self._sign))

    def div_small(self, word: int) -> tuple["BigInteger", int]:
        """
        Деление на одно 32-битное слово.

        Returns:
            (quotient, remainder): quotient усечён к нулю, remainder это
            остаток от деления |self| на word

        Raises:
            DivisionByZero: Если word == 0
        """
        quotient, remainder = div_small(magnitude_of(*self._words()), word)
        return BigInteger._from_words(from_magnitude(quotient, self._sign)), remainder

    # =========================================================================
    # BITWISE
    # =========================================================================

    def bitwise_and(self, other: Operand) -> "BigInteger":
        other = _operand(other)
        return BigInteger._from_words(and_words(*self._words(), *other._words()))

    def bitwise_or(self, other: Operand) -> "BigInteger":
        other = _operand(other)
        return BigInteger._from_words(or_words(*self._words(), *other._words()))

    def bitwise_xor(self, other: Operand) -> "BigInteger":
        other = _operand(other)
        return BigInteger._from_words(xor_words(*self._words(), *other._words()))

    def bitwise_not(self) -> "BigInteger":
        """~x == -x - 1."""
        return BigInteger._from_words(complement_words(*self._words()))

    def shift_left(self, bits: int) -> "BigInteger":
        """
        Raises:
            ValueError: Если bits < 0
        """
        return BigInteger._from_words(shift_left_words(*self._words(), _shift_count(bits)))

    def shift_right(self, bits: int) -> "BigInteger":
        """
        Арифметический сдвиг вправо (-5 >> 1 == -3).

        Raises:
            ValueError: Если bits < 0
        """
        return BigInteger._from_words(shift_right_words(*self._words(), _shift_count(bits)))

    # =========================================================================
    # COMPARISON
    # =========================================================================

    def compare(self, other: Operand) -> int:
        """
        Returns:
            -1 если self < other, 0 если равны, 1 если self > other
        """
        other = _operand(other)
        return compare_words(*self._words(), *other._words())

    def __eq__(self, other: object) -> bool:
        other = BigInteger._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return self._digits == other._digits and self._sign == other._sign

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    def __lt__(self, other: Operand) -> bool:
        other = BigInteger._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return self.compare(other) < 0

    def __le__(self, other: Operand) -> bool:
        other = BigInteger._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return self.compare(other) <= 0

    def __gt__(self, other: Operand) -> bool:
        other = BigInteger._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return self.compare(other) > 0

    def __ge__(self, other: Operand) -> bool:
        other = BigInteger._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return self.compare(other) >= 0

    def __hash__(self) -> int:
        # Совпадает с hash(int), чтобы BigInteger(5) и 5 были взаимозаменяемы в dict
        return hash(int(self))

    # =========================================================================
    # CONVERSION
    # =========================================================================

    def to_decimal_string(self) -> str:
        return format_decimal_words(*self._words())

    def to_int(self) -> int:
        return int_from_words(*self._words())

    def __int__(self) -> int:
        return self.to_int()

    def __bool__(self) -> bool:
        return bool(self._digits) or self._sign

    def __str__(self) -> str:
        return self.to_decimal_string()

    def __repr__(self) -> str:
        return f"BigInteger('{self.to_decimal_string()}')"

    # =========================================================================
    # OPERATORS
    # =========================================================================

    def __add__(self, other: Operand) -> "BigInteger":
        other = BigInteger._coerce(other)
        return NotImplemented if other is NotImplemented else self.add(other)

    def __radd__(self, other: int) -> "BigInteger":
        other = BigInteger._coerce(other)
        return NotImplemented if other is NotImplemented else other.add(self)

    def __sub__(self, other: Operand) -> "BigInteger":
        other = BigInteger._coerce(other)
        return NotImplemented if other is NotImplemented else self.subtract(other)

    def __rsub__(self, other: int) -> "BigInteger":
        other = BigInteger._coerce(other)
        return NotImplemented if other is NotImplemented else other.subtract(self)

    def __mul__(self, other: Operand) -> "BigInteger":
        other = BigInteger._coerce(other)
        return NotImplemented if other is NotImplemented else self.multiply(other)

    def __rmul__(self, other: int) -> "BigInteger":
        other = BigInteger._coerce(other)
        return NotImplemented if other is NotImplemented else other.multiply(self)

    def __truediv__(self, other: Operand) -> "BigInteger":
        other = BigInteger._coerce(other)
        return NotImplemented if other is NotImplemented else self.divide(other)

    def __rtruediv__(self, other: int) -> "BigInteger":
        other = BigInteger._coerce(other)
        return NotImplemented if other is NotImplemented else other.divide(self)

    def __mod__(self, other: Operand) -> "BigInteger":
        other = BigInteger._coerce(other)
        return NotImplemented if other is NotImplemented else self.modulo(other)

    def __rmod__(self, other: int) -> "BigInteger":
        other = BigInteger._coerce(other)
        return NotImplemented if other is NotImplemented else other.modulo(self)

    def __divmod__(self, other: Operand) -> tuple["BigInteger", "BigInteger"]:
        other = BigInteger._coerce(other)
        return NotImplemented if other is NotImplemented else self.divmod(other)

    def __rdivmod__(self, other: int) -> tuple["BigInteger", "BigInteger"]:
        other = BigInteger._coerce(other)
        return NotImplemented if other is NotImplemented else other.divmod(self)

    def __and__(self, other: Operand) -> "BigInteger":
        other = BigInteger._coerce(other)
        return NotImplemented if other is NotImplemented else self.bitwise_and(other)

    __rand__ = __and__

    def __or__(self, other: Operand) -> "BigInteger":
        other = BigInteger._coerce(other)
        return NotImplemented if other is NotImplemented else self.bitwise_or(other)

    __ror__ = __or__

    def __xor__(self, other: Operand) -> "BigInteger":
        other = BigInteger._coerce(other)
        return NotImplemented if other is NotImplemented else self.bitwise_xor(other)

    __rxor__ = __xor__

    def __lshift__(self, bits: int) -> "BigInteger":
        return self.shift_left(bits)

    def __rshift__(self, bits: int) -> "BigInteger":
        return self.shift_right(bits)

    def __neg__(self) -> "BigInteger":
        return self.negate()

    def __pos__(self) -> "BigInteger":
        return self.identity()

    def __invert__(self) -> "BigInteger":
        return self.bitwise_not()

    def __abs__(self) -> "BigInteger":
        return self.absolute()


def _operand(other: Any) -> BigInteger:
    """
    Операнд именованного метода: те же типы, что принимают операторы.

    Raises:
        TypeError: Для всего, кроме BigInteger и int (bool тоже отклоняется)
    """
    result = BigInteger._coerce(other)
    if result is NotImplemented:
        raise TypeError(f"unsupported operand type for BigInteger: {type(other).__name__}")
    return result


def _shift_count(bits: Any) -> int:
    if isinstance(bits, BigInteger):
        bits = bits.to_int()
    if isinstance(bits, bool) or not isinstance(bits, int):
        raise TypeError(f"shift count must be int, got {type(bits).__name__}")
    if bits < 0:
        raise ValueError(f"negative shift count: {bits}")
    return bits


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def parse_decimal(text: str) -> BigInteger:
    """
    Разбор десятичной строки.

    Raises:
        InvalidFormat: Если строка не является десятичным числом
    """
    return BigInteger.from_decimal_string(text)


def format_decimal(value: BigInteger) -> str:
    """Десятичное представление BigInteger."""
    return value.to_decimal_string()
