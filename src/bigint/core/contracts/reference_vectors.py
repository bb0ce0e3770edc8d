"""
Reference Vectors: эталонные случаи для операций BigInteger

Файл vectors/reference_vectors.json сначала проверяется JSON Schema
(arithmetic_vectors), затем каждая запись превращается в immutable
Pydantic модель ReferenceVector. evaluate_vector прогоняет запись через
BigInteger и возвращает результат в виде десятичной строки либо имя
исключения.
"""

import json
from enum import Enum
from pathlib import Path
from typing import Callable, Dict, Optional

from pydantic import BaseModel, Field, model_validator

from bigint.core.contracts.validators import validate_arithmetic_vectors
from bigint.core.domain.big_integer import BigInteger
from bigint.core.errors import DivisionByZero, InvalidFormat

DEFAULT_VECTORS_PATH = Path(__file__).parent / "vectors" / "reference_vectors.json"


# =============================================================================
# ENUMS
# =============================================================================


class VectorOp(str, Enum):
    """Операции, покрываемые reference vectors."""

    PARSE = "parse"
    ADD = "add"
    SUBTRACT = "subtract"
    MULTIPLY = "multiply"
    DIVIDE = "divide"
    MODULO = "modulo"
    NEGATE = "negate"
    BITWISE_NOT = "bitwise_not"
    INCREMENT = "increment"
    DECREMENT = "decrement"
    AND = "and"
    OR = "or"
    XOR = "xor"
    SHIFT_LEFT = "shift_left"
    SHIFT_RIGHT = "shift_right"
    COMPARE = "compare"


class VectorError(str, Enum):
    """Ожидаемые ошибки."""

    DIVISION_BY_ZERO = "DivisionByZero"
    INVALID_FORMAT = "InvalidFormat"


UNARY_OPS = frozenset(
    {VectorOp.PARSE, VectorOp.NEGATE, VectorOp.BITWISE_NOT, VectorOp.INCREMENT, VectorOp.DECREMENT}
)


# =============================================================================
# MODEL
# =============================================================================


class ReferenceVector(BaseModel):
    """
    Один эталонный случай.

    Immutable модель (frozen=True). Ровно одно из expected/error задано.
    """

    id: str = Field(..., min_length=1, description="Уникальный идентификатор")
    op: VectorOp = Field(..., description="Операция")
    left: str = Field(..., description="Левый операнд (десятичная строка)")
    right: Optional[str] = Field(None, description="Правый операнд или число бит сдвига")
    expected: Optional[str] = Field(None, description="Ожидаемый результат")
    error: Optional[VectorError] = Field(None, description="Ожидаемая ошибка")
    note: Optional[str] = None

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def check_operands(self) -> "ReferenceVector":
        if (self.expected is None) == (self.error is None):
            raise ValueError(f"vector {self.id}: exactly one of expected/error is required")
        if self.op not in UNARY_OPS and self.right is None:
            raise ValueError(f"vector {self.id}: binary op {self.op.value} requires right operand")
        return self

    @property
    def outcome(self) -> str:
        """Ожидаемый исход: результат или имя исключения."""
        return self.expected if self.error is None else self.error.value


# =============================================================================
# LOADING / EVALUATION
# =============================================================================


def load_reference_vectors(path: Optional[Path] = None) -> list[ReferenceVector]:
    """
    Загрузка и валидация reference vectors.

    Args:
        path: Путь к JSON файлу (default: встроенный reference_vectors.json)

    Raises:
        jsonschema.ValidationError: Если файл не соответствует схеме
        pydantic.ValidationError: Если запись нарушает правила модели
    """
    with open(path or DEFAULT_VECTORS_PATH, "r", encoding="utf-8") as f:
        data = json.load(f)

    validate_arithmetic_vectors(data)
    return [ReferenceVector(**item) for item in data["vectors"]]


_BINARY: Dict[VectorOp, Callable[[BigInteger, BigInteger], BigInteger]] = {
    VectorOp.ADD: BigInteger.add,
    VectorOp.SUBTRACT: BigInteger.subtract,
    VectorOp.MULTIPLY: BigInteger.multiply,
    VectorOp.DIVIDE: BigInteger.divide,
    VectorOp.MODULO: BigInteger.modulo,
    VectorOp.AND: BigInteger.bitwise_and,
    VectorOp.OR: BigInteger.bitwise_or,
    VectorOp.XOR: BigInteger.bitwise_xor,
}

_UNARY: Dict[VectorOp, Callable[[BigInteger], BigInteger]] = {
    VectorOp.PARSE: BigInteger.identity,
    VectorOp.NEGATE: BigInteger.negate,
    VectorOp.BITWISE_NOT: BigInteger.bitwise_not,
    VectorOp.INCREMENT: BigInteger.increment,
    VectorOp.DECREMENT: BigInteger.decrement,
}


def _apply(vector: ReferenceVector) -> str:
    left = BigInteger.from_decimal_string(vector.left)
    if vector.op in _UNARY:
        return _UNARY[vector.op](left).to_decimal_string()
    if vector.op is VectorOp.SHIFT_LEFT:
        return left.shift_left(int(vector.right)).to_decimal_string()
    if vector.op is VectorOp.SHIFT_RIGHT:
        return left.shift_right(int(vector.right)).to_decimal_string()

    right = BigInteger.from_decimal_string(vector.right)
    if vector.op is VectorOp.COMPARE:
        return str(left.compare(right))
    return _BINARY[vector.op](left, right).to_decimal_string()


def evaluate_vector(vector: ReferenceVector) -> str:
    """
    Выполнение операции вектора через BigInteger.

    Returns:
        Десятичная строка результата либо имя ожидаемого исключения
        (DivisionByZero / InvalidFormat)
    """
    try:
        return _apply(vector)
    except DivisionByZero:
        return VectorError.DIVISION_BY_ZERO.value
    except InvalidFormat:
        return VectorError.INVALID_FORMAT.value
