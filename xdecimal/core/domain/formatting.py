"""
Formatting — Строковое представление Decimal

Формы:
- to_string: позиционная запись для -7 < exponent < 21, иначе <m>e<±exp>
- to_exponential(places): мантисса с places знаками + e<±exp>
- to_fixed(places): фиксированная запись, для exponent ≥ 17 — дополнение нулями
- to_precision(places): выбор между fixed и exponential по экспоненте
- mantissa_with_decimal_places(places): округление только мантиссы

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. NaN → "NaN", ±Infinity → "Infinity" / "-Infinity", ноль → "0"
2. Округление мантиссы, переходящее в 10, перенормализуется (1 и exponent + 1)
3. Рендеринг double идентичен Number.prototype.toString / toFixed
"""

import math
from typing import TYPE_CHECKING, Optional

from xdecimal.core.config import MAX_SIGNIFICANT_DIGITS, get_config
from xdecimal.core.math.numerical_safeguards import (
    format_fixed,
    format_float,
    round_half_up,
)

if TYPE_CHECKING:
    from xdecimal.core.domain.decimal import Decimal

# Окно позиционной записи to_string (по экспоненте)
HUMAN_EXP_MIN = -7
HUMAN_EXP_MAX = 21


def _special(value: "Decimal") -> Optional[str]:
    if math.isnan(value.mantissa) or math.isnan(value.exponent):
        return "NaN"
    if value.exponent >= get_config().exp_limit:
        return "Infinity" if value.mantissa > 0 else "-Infinity"
    return None


def _is_zero(value: "Decimal") -> bool:
    return value.mantissa == 0 or value.exponent <= -get_config().exp_limit


def _signed_exponent(exponent: float) -> str:
    return ("+" if exponent >= 0 else "") + format_float(exponent)


def _zero_fraction(places: int) -> str:
    return "." + "0" * places if places > 0 else ""


def _check_places(places: int) -> None:
    if places < 0:
        raise ValueError(f"places must be non-negative, got {places}")


def to_string(value: "Decimal") -> str:
    """
    Строковое представление.

    Examples:
        >>> to_string(Decimal(1e12))
        '1000000000000'
        >>> to_string(Decimal("3.5e400"))
        '3.5e+400'
    """
    special = _special(value)
    if special is not None:
        return special
    if _is_zero(value):
        return "0"
    if HUMAN_EXP_MIN < value.exponent < HUMAN_EXP_MAX:
        return format_float(value.to_number())
    return format_float(value.mantissa) + "e" + _signed_exponent(value.exponent)


def to_exponential(value: "Decimal", places: Optional[int] = None) -> str:
    """
    Экспоненциальная запись с places знаками мантиссы.

    Args:
        value: Decimal
        places: Знаков после точки (None → MAX_SIGNIFICANT_DIGITS)

    Examples:
        >>> to_exponential(Decimal(123456), 2)
        '1.23e+5'
        >>> to_exponential(Decimal(0), 3)
        '0.000e+0'
    """
    if places is None:
        places = MAX_SIGNIFICANT_DIGITS
    _check_places(places)

    special = _special(value)
    if special is not None:
        return special
    if _is_zero(value):
        return "0" + _zero_fraction(places) + "e+0"

    scale = 10.0**places
    mantissa = round_half_up(value.mantissa * scale) / scale
    exponent = value.exponent
    if abs(mantissa) >= 10:
        mantissa /= 10
        exponent += 1
    return format_fixed(mantissa, places) + "e" + _signed_exponent(exponent)


def to_fixed(value: "Decimal", places: int = 0) -> str:
    """
    Фиксированная запись с places знаками после точки.

    Для exponent ≥ MAX_SIGNIFICANT_DIGITS double не различает разряды:
    цифры мантиссы дополняются нулями до exponent + 1 разрядов.

    Examples:
        >>> to_fixed(Decimal("1.5e20"), 2)
        '150000000000000000000.00'
        >>> to_fixed(Decimal(3.14159), 2)
        '3.14'
    """
    _check_places(places)

    special = _special(value)
    if special is not None:
        return special
    if _is_zero(value):
        return "0" + _zero_fraction(places)

    if value.exponent >= MAX_SIGNIFICANT_DIGITS:
        digits = format_float(abs(value.mantissa)).replace(".", "")
        sign = "-" if value.mantissa < 0 else ""
        return sign + digits.ljust(int(value.exponent) + 1, "0") + _zero_fraction(places)

    return format_fixed(value.to_number(), places)


def to_precision(value: "Decimal", places: int) -> str:
    """
    Запись с places значимыми разрядами.

    Examples:
        >>> to_precision(Decimal(123.456), 5)
        '123.46'
        >>> to_precision(Decimal(123456), 3)
        '1.23e+5'
    """
    if value.exponent <= -7:
        return to_exponential(value, places - 1)
    if places > value.exponent:
        return to_fixed(value, int(places - value.exponent - 1))
    return to_exponential(value, places - 1)


def mantissa_with_decimal_places(value: "Decimal", places: int) -> float:
    """
    Мантисса, округлённая до places знаков (для компактного UI).

    Examples:
        >>> mantissa_with_decimal_places(Decimal("1.23456e500"), 2)
        1.23
    """
    _check_places(places)
    if math.isnan(value.mantissa) or math.isnan(value.exponent):
        return math.nan
    if value.mantissa == 0:
        return 0.0

    scale = 10.0**places
    rounded = round_half_up(value.mantissa * scale) / scale
    return float(format_fixed(rounded, places))
