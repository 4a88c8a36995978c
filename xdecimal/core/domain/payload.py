"""
DecimalPayload — JSON-форма Decimal

Immutable Pydantic модель {"mantissa": ..., "exponent": ...}.
Совместима с JSON Schema (contracts/schema/decimal.json).
NaN кодируется null в обоих полях.
"""

import math
from typing import TYPE_CHECKING, Optional

from pydantic import BaseModel, Field, FiniteFloat, field_validator, model_validator

if TYPE_CHECKING:
    from xdecimal.core.domain.decimal import Decimal


class DecimalPayload(BaseModel):
    """
    Сериализуемая пара mantissa/exponent.

    Immutable модель (frozen=True). Конверсия в значение — to_decimal().
    """

    mantissa: Optional[FiniteFloat] = Field(
        ..., description="Мантисса (null для NaN)"
    )
    exponent: Optional[FiniteFloat] = Field(
        ..., description="Экспонента, целое значение (null для NaN)"
    )

    model_config = {"frozen": True}  # Immutable

    @field_validator("exponent")
    @classmethod
    def validate_exponent_integral(cls, v: Optional[float]) -> Optional[float]:
        """Экспонента — целое значение"""
        if v is not None and v != math.floor(v):
            raise ValueError(f"exponent must be integral, got {v}")
        return v

    @model_validator(mode="after")
    def validate_nan_encoding(self) -> "DecimalPayload":
        """NaN кодируется только парой null/null"""
        if (self.mantissa is None) != (self.exponent is None):
            raise ValueError("mantissa and exponent must both be null or both be set")
        return self

    def to_decimal(self) -> "Decimal":
        """Нормализованный Decimal"""
        from xdecimal.core.domain.decimal import Decimal

        return Decimal.from_payload(self)
