"""
JSON Schema Contract Validators

Модуль для валидации JSON-документов последовательностей согласно
формальному контракту contracts/schema/sequence.json.
Использует библиотеку jsonschema для проверки соответствия данных схеме
и SequenceSnapshot (Pydantic) для построения последовательности.

Документ:
    {
        "schema_version": "1",
        "length": 3,
        "offset": -1,
        "element_type": "float",
        "data": [1.0, 2.0, 3.0]
    }
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Final

import jsonschema
from jsonschema import Draft202012Validator

from src.dsp.domain.sequence import Sequence
from src.dsp.domain.snapshot import SequenceSnapshot

logger = logging.getLogger(__name__)

SCHEMA_VERSION: Final[str] = "1"


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов.

    Находит схемы в contracts/schema/ относительно корня проекта.
    """

    def __init__(self, schema_dir: Path | None = None):
        # Корень проекта: 4 уровня вверх от этого файла
        self._schema_dir = schema_dir or (
            Path(__file__).parent.parent.parent.parent / "contracts" / "schema"
        )
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        # Кэш загруженных схем
        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка JSON Schema файла.

        Args:
            schema_name: Имя схемы без расширения (например, 'sequence')

        Returns:
            Загруженная схема как dict

        Raises:
            FileNotFoundError: Если файл схемы не найден
            ValueError: Если схема не проходит meta-validation
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)

        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}") from e

        logger.debug(f"Loaded schema {schema_path.name}")
        self._schemas[schema_name] = schema
        return schema


# Глобальный экземпляр загрузчика
_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATOR
# =============================================================================


class SequenceDocumentValidator:
    """
    Валидатор JSON-документа последовательности.
    """

    schema_name: Final[str] = "sequence"

    def __init__(self, loader: SchemaLoader | None = None):
        self.schema = (loader or _SCHEMA_LOADER).load_schema(self.schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Валидация документа против схемы и согласованности length/data.

        Raises:
            jsonschema.ValidationError: Если документ не соответствует схеме
            ValueError: Если length не совпадает с len(data)
        """
        self.validator.validate(data)
        if data["length"] != len(data["data"]):
            raise ValueError(
                f"length {data['length']} does not match number of samples {len(data['data'])}"
            )

    def is_valid(self, data: Dict[str, Any]) -> bool:
        """Проверка валидности документа без exception."""
        if not self.validator.is_valid(data):
            return False
        return data["length"] == len(data["data"])

    def iter_errors(self, data: Dict[str, Any]):
        """
        Итератор по ошибкам схемы.

        Yields:
            ValidationError объекты для каждой найденной ошибки
        """
        return self.validator.iter_errors(data)


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_sequence_document(data: Dict[str, Any]) -> None:
    """
    Валидация JSON-документа последовательности.

    Raises:
        jsonschema.ValidationError: Если документ не соответствует схеме
        ValueError: Если length не совпадает с len(data)
    """
    SequenceDocumentValidator().validate(data)


def sequence_to_document(seq: Sequence) -> Dict[str, Any]:
    """
    JSON-документ последовательности (dict).

    Raises:
        ValueError: Если тип элемента не представим в JSON
    """
    snapshot = SequenceSnapshot.from_sequence(seq)
    return {
        "schema_version": SCHEMA_VERSION,
        "length": len(snapshot.data),
        "offset": snapshot.offset,
        "element_type": snapshot.element_type.value,
        "data": list(snapshot.data),
    }


def sequence_from_document(data: Dict[str, Any]) -> Sequence:
    """
    Последовательность из проверенного JSON-документа.

    Raises:
        jsonschema.ValidationError: Если документ не соответствует схеме
        ValueError: Если length не совпадает с len(data) или отсчёты
            не согласованы с element_type (pydantic.ValidationError)
    """
    validate_sequence_document(data)
    snapshot = SequenceSnapshot(
        data=data["data"],
        offset=data["offset"],
        element_type=data["element_type"],
    )
    return snapshot.to_sequence()


def dump_sequence_json(seq: Sequence, indent: int | None = None) -> str:
    """JSON-строка документа последовательности."""
    return json.dumps(sequence_to_document(seq), indent=indent)


def load_sequence_json(text: str) -> Sequence:
    """Последовательность из JSON-строки."""
    return sequence_from_document(json.loads(text))
