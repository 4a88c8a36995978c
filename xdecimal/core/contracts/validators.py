"""
JSON Schema Contract Validators

Модуль для валидации сериализованных Decimal согласно JSON Schema контракту.
Использует библиотеку jsonschema для проверки соответствия данных схемам.

Схемы:
- decimal.json: строковая форма (to_json) или пара mantissa/exponent (to_payload)
"""

import json
from pathlib import Path
from typing import Any, Dict, Iterator

import jsonschema
from jsonschema import Draft202012Validator, ValidationError

from xdecimal.core.domain.decimal import Decimal
from xdecimal.core.domain.payload import DecimalPayload


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов.

    Схемы лежат в contracts/schema/ внутри пакета.
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
            schema_name: Имя схемы без расширения (например, 'decimal')

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
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}")

        self._schemas[schema_name] = schema
        return schema


# Глобальный экземпляр загрузчика (только чтение после загрузки)
_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """
    Базовый класс для валидаторов контрактов.

    Инкапсулирует логику валидации данных против JSON Schema.
    """

    def __init__(self, schema_name: str):
        self.schema_name = schema_name
        self.schema = _SCHEMA_LOADER.load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Any) -> None:
        """
        Валидация данных против схемы.

        Raises:
            ValidationError: Если данные не соответствуют схеме
        """
        self.validator.validate(data)

    def is_valid(self, data: Any) -> bool:
        """Проверка валидности данных без exception"""
        return self.validator.is_valid(data)

    def iter_errors(self, data: Any) -> Iterator[ValidationError]:
        """Итератор по всем ошибкам валидации"""
        return self.validator.iter_errors(data)


class DecimalValidator(ContractValidator):
    """Валидатор для decimal контракта"""

    def __init__(self):
        super().__init__("decimal")


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_decimal(data: Any) -> None:
    """
    Валидация сериализованного Decimal.

    Args:
        data: Строка или dict {"mantissa": ..., "exponent": ...}

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    DecimalValidator().validate(data)


def is_valid_decimal(data: Any) -> bool:
    """Проверка сериализованного Decimal без exception"""
    return DecimalValidator().is_valid(data)


def decimal_from_contract(data: Any) -> Decimal:
    """
    Десериализация с проверкой контракта.

    Args:
        data: Строка или dict {"mantissa": ..., "exponent": ...}

    Returns:
        Нормализованный Decimal

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    validate_decimal(data)
    if isinstance(data, str):
        return Decimal.from_string(data)
    return Decimal.from_payload(DecimalPayload(**data))
