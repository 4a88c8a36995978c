"""
Domain models and value objects.

Contains the Decimal value type, its formatter and its JSON payload model.
"""

from xdecimal.core.domain.decimal import (
    MINUS_ONE,
    NAN,
    ONE,
    ZERO,
    Decimal,
    DecimalParseError,
    DecimalSource,
)
from xdecimal.core.domain.payload import DecimalPayload

__all__ = [
    # Decimal
    "Decimal",
    "DecimalParseError",
    "DecimalSource",
    # Constants
    "ZERO",
    "ONE",
    "MINUS_ONE",
    "NAN",
    # Payload
    "DecimalPayload",
]
