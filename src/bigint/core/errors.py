"""
Исключения BigInteger

Все ошибки движка немедленные и терминальные для операции, в которой
возникли: частичных результатов, ретраев и насыщения нет.
"""


class BigIntegerError(Exception):
    """Базовое исключение движка BigInteger."""

    pass


class DivisionByZero(BigIntegerError, ZeroDivisionError):
    """
    Деление на ноль.

    Возникает в divide, modulo, divmod и в примитиве деления на одно
    слово (div_small). Наследует ZeroDivisionError, поэтому ловится
    стандартным обработчиком Python.
    """

    def __init__(self, operation: str = "division"):
        self.operation = operation
        super().__init__(f"{operation} by zero")


class InvalidFormat(BigIntegerError, ValueError):
    """
    Невалидная десятичная строка.

    Допускается необязательный ведущий знак (+/-) и минимум одна
    десятичная цифра. Частично разобранное значение не возвращается.
    """

    def __init__(self, text: str, position: int, reason: str):
        self.text = text
        self.position = position
        self.reason = reason
        super().__init__(f"invalid decimal string {text!r} at position {position}: {reason}")
