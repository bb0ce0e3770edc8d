"""
Contract Validation Module

JSON Schema контракты и reference vectors для операций BigInteger.
"""

from .reference_vectors import (
    DEFAULT_VECTORS_PATH,
    ReferenceVector,
    VectorError,
    VectorOp,
    evaluate_vector,
    load_reference_vectors,
)
from .validators import (
    ArithmeticVectorsValidator,
    SchemaLoader,
    validate_arithmetic_vectors,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ArithmeticVectorsValidator",
    "ReferenceVector",
    "VectorOp",
    "VectorError",
    # Functions
    "validate_arithmetic_vectors",
    "load_reference_vectors",
    "evaluate_vector",
    # Paths
    "DEFAULT_VECTORS_PATH",
]
