"""
Vector File Contract

Проверка файла reference vectors по JSON Schema (Draft 2020-12)
schema/arithmetic_vectors.json до того, как записи превращаются в
pydantic модели.
"""

import json
from pathlib import Path
from typing import Any, Dict, List, Optional

import jsonschema
from jsonschema import Draft202012Validator

SCHEMA_DIR = Path(__file__).parent / "schema"
VECTORS_SCHEMA = "arithmetic_vectors"


class SchemaLoader:
    """Чтение схем из каталога с meta-validation и кэшем по имени."""

    def __init__(self, schema_dir: Optional[Path] = None):
        self._schema_dir = schema_dir or SCHEMA_DIR
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")
        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Raises:
            FileNotFoundError: Если <schema_name>.json нет в каталоге
            ValueError: Если файл не является корректной JSON Schema
        """
        cached = self._schemas.get(schema_name)
        if cached is not None:
            return cached

        path = self._schema_dir / f"{schema_name}.json"
        if not path.exists():
            raise FileNotFoundError(f"Schema not found: {path}")
        with open(path, "r", encoding="utf-8") as f:
            schema = json.load(f)

        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {path.name}: {e.message}") from e

        self._schemas[schema_name] = schema
        return schema


class ArithmeticVectorsValidator:
    """Валидатор документа {"schema_version": ..., "vectors": [...]}."""

    def __init__(self, loader: Optional[SchemaLoader] = None):
        schema = (loader or SchemaLoader()).load_schema(VECTORS_SCHEMA)
        self._validator = Draft202012Validator(schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Raises:
            jsonschema.ValidationError: Первое нарушение схемы
        """
        self._validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        return self._validator.is_valid(data)

    def errors(self, data: Dict[str, Any]) -> List[str]:
        """Все нарушения в виде 'путь: сообщение', отсортированные по пути."""
        found = sorted(self._validator.iter_errors(data), key=lambda e: list(map(str, e.absolute_path)))
        return [f"{'/'.join(map(str, e.absolute_path)) or '<root>'}: {e.message}" for e in found]


def validate_arithmetic_vectors(data: Dict[str, Any]) -> None:
    """
    Raises:
        jsonschema.ValidationError: Если документ не соответствует схеме
    """
    ArithmeticVectorsValidator().validate(data)
