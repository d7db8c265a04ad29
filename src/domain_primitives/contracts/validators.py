"""
JSON Schema контракты сериализованных примитивов

Модуль для валидации JSON-представления доменных примитивов согласно
формальным JSON Schema контрактам (Draft 2020-12).

Схемы (domain_primitives/contracts/schema/):
- order_number.json — OrderNumber
- temperature.json — Celsius | Fahrenheit
- range.json — Range

Секретные примитивы (Password, CreditCardNumber) контрактов не имеют:
их сериализованная форма — всегда маска.
"""

import json
from pathlib import Path
from typing import Any, Dict

import jsonschema
from jsonschema import Draft202012Validator


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов.

    Схемы лежат в каталоге schema/ рядом с этим модулем.
    """

    def __init__(self, schema_dir: Path | None = None):
        self._schema_dir = schema_dir or Path(__file__).parent / "schema"
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        # Кэш загруженных схем
        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка JSON Schema файла.

        Args:
            schema_name: Имя схемы без расширения (например, 'order_number')

        Returns:
            Загруженная схема как dict

        Raises:
            FileNotFoundError: Если файл схемы не найден
            ValueError: Если схема не проходит meta-валидацию
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

        self._schemas[schema_name] = schema
        return schema


_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """Валидация данных против одной JSON Schema."""

    def __init__(self, schema_name: str):
        self.schema_name = schema_name
        self.schema = _SCHEMA_LOADER.load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Raises:
            jsonschema.ValidationError: Если данные не соответствуют схеме
        """
        self.validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        return self.validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]):
        return self.validator.iter_errors(data)


class OrderNumberValidator(ContractValidator):
    def __init__(self):
        super().__init__("order_number")


class TemperatureValidator(ContractValidator):
    def __init__(self):
        super().__init__("temperature")


class RangeValidator(ContractValidator):
    """
    Контракт Range.

    JSON Schema не выражает start <= end: это отношение проверяет
    сама модель Range.
    """

    def __init__(self):
        super().__init__("range")


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_order_number(data: Dict[str, Any]) -> None:
    OrderNumberValidator().validate(data)


def validate_temperature(data: Dict[str, Any]) -> None:
    TemperatureValidator().validate(data)


def validate_range(data: Dict[str, Any]) -> None:
    RangeValidator().validate(data)
