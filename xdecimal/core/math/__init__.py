"""
Core math modules для xdecimal

Float-примитивы с IEEE-семантикой и кэш степеней десяти.
"""

# Numerical Safeguards
from xdecimal.core.math.numerical_safeguards import (
    # Constants
    MAX_FIXED_PLACES,
    MAX_SAFE_INTEGER,
    # Checks
    is_integer,
    is_safe_integer,
    is_valid_float,
    # Safe operations
    ieee_divide,
    safe_exp,
    safe_log10,
    safe_pow,
    safe_sinh,
    # Rounding
    round_half_up,
    snap_to_integer,
    trunc_float,
    # Rendering
    format_fixed,
    format_float,
)

# Powers of 10
from xdecimal.core.math.powers import power_of_10, powers_of_10

__all__ = [
    # Numerical Safeguards: Constants
    "MAX_FIXED_PLACES",
    "MAX_SAFE_INTEGER",
    # Numerical Safeguards: Checks
    "is_integer",
    "is_safe_integer",
    "is_valid_float",
    # Numerical Safeguards: Safe operations
    "ieee_divide",
    "safe_exp",
    "safe_log10",
    "safe_pow",
    "safe_sinh",
    # Numerical Safeguards: Rounding
    "round_half_up",
    "snap_to_integer",
    "trunc_float",
    # Numerical Safeguards: Rendering
    "format_fixed",
    "format_float",
    # Powers of 10
    "power_of_10",
    "powers_of_10",
]
