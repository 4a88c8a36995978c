"""
xdecimal — extended-range decimal numbers

Числа вида mantissa × 10^exponent с ~17 значимыми разрядами и экспонентой
до 1.79e308 для инкрементальных симуляций без arbitrary-precision накладных.

    >>> from xdecimal import Decimal
    >>> (Decimal("1e1000") * 3).to_string()
    '3e+1000'
"""

from xdecimal.core.config import (
    DEFAULT_CONFIG,
    EXP_LIMIT_DOUBLE,
    EXP_LIMIT_SAFE_INTEGER,
    MAX_SIGNIFICANT_DIGITS,
    NUMBER_EXP_MAX,
    NUMBER_EXP_MIN,
    ROUND_TOLERANCE,
    DecimalConfig,
    NegativePowerPolicy,
    get_config,
    use_config,
)
from xdecimal.core.domain import (
    MINUS_ONE,
    NAN,
    ONE,
    ZERO,
    Decimal,
    DecimalParseError,
    DecimalPayload,
    DecimalSource,
)
from xdecimal.core.series import (
    afford_arithmetic_series,
    afford_geometric_series,
    efficiency_of_purchase,
    sum_arithmetic_series,
    sum_geometric_series,
)

__all__ = [
    # Config
    "DEFAULT_CONFIG",
    "EXP_LIMIT_DOUBLE",
    "EXP_LIMIT_SAFE_INTEGER",
    "MAX_SIGNIFICANT_DIGITS",
    "NUMBER_EXP_MAX",
    "NUMBER_EXP_MIN",
    "ROUND_TOLERANCE",
    "DecimalConfig",
    "NegativePowerPolicy",
    "get_config",
    "use_config",
    # Decimal
    "Decimal",
    "DecimalParseError",
    "DecimalPayload",
    "DecimalSource",
    "ZERO",
    "ONE",
    "MINUS_ONE",
    "NAN",
    # Series
    "afford_arithmetic_series",
    "afford_geometric_series",
    "efficiency_of_purchase",
    "sum_arithmetic_series",
    "sum_geometric_series",
]
