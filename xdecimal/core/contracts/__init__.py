"""
Contract Validation Module

Модуль для валидации JSON контрактов сериализованных Decimal.
"""

from .validators import (
    ContractValidator,
    DecimalValidator,
    SchemaLoader,
    decimal_from_contract,
    is_valid_decimal,
    validate_decimal,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "DecimalValidator",
    # Functions
    "validate_decimal",
    "is_valid_decimal",
    "decimal_from_contract",
]
