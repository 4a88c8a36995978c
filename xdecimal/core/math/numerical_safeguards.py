"""
Numerical Safeguards — Safe Float Primitives

Модуль обеспечивает IEEE-семантику для всех float-операций ядра Decimal:
- log10/pow/exp/sinh/divide никогда не бросают исключений (NaN/Inf вместо ValueError,
  OverflowError, ZeroDivisionError)
- Округление half-up (как Math.round) и привязка к целому с толерантностью
- Детерминированный рендеринг float: кратчайшие round-trip цифры,
  экспоненциальная форма только вне окна 1e-7 < |x| < 1e21

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Невалидный математический вход → NaN, который пропагирует дальше
2. Переполнение → ±Inf (с сохранением знака)
3. Рендеринг float не зависит от локали и platform repr-настроек
"""

import decimal
import math
from typing import Final

from xdecimal.core.config import ROUND_TOLERANCE

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Максимальное целое, точно представимое в double (Number.MAX_SAFE_INTEGER)
MAX_SAFE_INTEGER: Final[float] = 9007199254740991.0

# Окно позиционной записи float; вне него экспоненциальная
POSITIONAL_MIN_POINT: Final[int] = -6
POSITIONAL_MAX_POINT: Final[int] = 21

# Максимум дробных знаков format_fixed
MAX_FIXED_PLACES: Final[int] = 100

# Контекст для toFixed: 21 целый разряд + до 100 дробных
_FIXED_CONTEXT: Final[decimal.Context] = decimal.Context(prec=128)


# =============================================================================
# ПРОВЕРКИ
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение валидное (finite), False если NaN или Inf
    """
    return math.isfinite(value)


def is_integer(value: float) -> bool:
    """Конечное целое значение (Number.isInteger)"""
    return is_valid_float(value) and value == math.floor(value)


def is_safe_integer(value: float) -> bool:
    """
    Целое в диапазоне точного представления double.

    Examples:
        >>> is_safe_integer(2.0 ** 53 - 1)
        True
        >>> is_safe_integer(2.0 ** 53)
        False
        >>> is_safe_integer(0.5)
        False
    """
    return is_integer(value) and abs(value) <= MAX_SAFE_INTEGER


# =============================================================================
# БЕЗОПАСНЫЕ ОПЕРАЦИИ
# =============================================================================


def safe_log10(value: float) -> float:
    """
    log10 с IEEE-семантикой.

    Returns:
        log10(value); -inf для 0; NaN для отрицательных и NaN

    Examples:
        >>> safe_log10(1000.0)
        3.0
        >>> safe_log10(0.0)
        -inf
        >>> math.isnan(safe_log10(-1.0))
        True
    """
    if math.isnan(value) or value < 0:
        return math.nan
    if value == 0:
        return -math.inf
    return math.log10(value)


def safe_pow(base: float, exponent: float) -> float:
    """
    base ** exponent с IEEE-семантикой (Math.pow).

    Отрицательное основание с нецелым показателем даёт NaN (не complex).
    Переполнение даёт ±Inf, 0 в отрицательной степени — Inf.

    Examples:
        >>> safe_pow(2.0, 10.0)
        1024.0
        >>> math.isnan(safe_pow(-8.0, 1.0 / 3.0))
        True
        >>> safe_pow(10.0, 400.0)
        inf
    """
    try:
        return math.pow(base, exponent)
    except ValueError:
        if base == 0:
            return math.inf
        return math.nan
    except OverflowError:
        if base < 0 and is_integer(exponent) and math.fmod(exponent, 2.0) != 0:
            return -math.inf
        return math.inf


def safe_exp(value: float) -> float:
    """exp с переполнением в Inf вместо OverflowError"""
    try:
        return math.exp(value)
    except OverflowError:
        return math.inf


def safe_sinh(value: float) -> float:
    """
    sinh с переполнением в ±Inf вместо OverflowError.

    Examples:
        >>> safe_sinh(0.0)
        0.0
        >>> safe_sinh(-1000.0)
        -inf
    """
    try:
        return math.sinh(value)
    except OverflowError:
        return math.copysign(math.inf, value)


def ieee_divide(numerator: float, denominator: float) -> float:
    """
    Деление с IEEE-семантикой.

    Returns:
        numerator / denominator; ±Inf при делении ненулевого на ноль;
        NaN для 0/0 и NaN-операндов

    Examples:
        >>> ieee_divide(1.0, 4.0)
        0.25
        >>> ieee_divide(-1.0, 0.0)
        -inf
        >>> math.isnan(ieee_divide(0.0, 0.0))
        True
    """
    if denominator == 0:
        if numerator == 0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)
    return numerator / denominator


# =============================================================================
# ОКРУГЛЕНИЕ
# =============================================================================


def round_half_up(value: float) -> float:
    """
    Округление к ближайшему целому, половины вверх (Math.round).

    Отличается от встроенного round() (banker's rounding) на половинах:
    round_half_up(2.5) == 3.0, round_half_up(-2.5) == -2.0.

    Examples:
        >>> round_half_up(2.5)
        3.0
        >>> round_half_up(-2.5)
        -2.0
        >>> round_half_up(1.4999)
        1.0
    """
    if not is_valid_float(value):
        return value
    return float(math.floor(value + 0.5))


def trunc_float(value: float) -> float:
    """math.trunc, пропускающий NaN/Inf без исключений"""
    if not is_valid_float(value):
        return value
    return float(math.trunc(value))


def snap_to_integer(value: float, tol: float = ROUND_TOLERANCE) -> float:
    """
    Привязка к ближайшему целому, если отклонение меньше tol.

    Компенсирует накопленную ошибку повторных умножений.

    Examples:
        >>> snap_to_integer(99.99999999999999)
        100.0
        >>> snap_to_integer(99.5)
        99.5
    """
    if not is_valid_float(value):
        return value
    rounded = round_half_up(value)
    if abs(rounded - value) < tol:
        return rounded
    return value


# =============================================================================
# РЕНДЕРИНГ FLOAT
# =============================================================================


def _shortest_digits(value: float) -> tuple[str, int]:
    """
    Кратчайшие round-trip цифры |value| и позиция десятичной точки.

    Returns:
        (digits, point): value = 0.<digits> * 10^point
    """
    normalized = decimal.Decimal(repr(abs(value))).normalize()
    _, digit_tuple, exponent = normalized.as_tuple()
    digits = "".join(str(d) for d in digit_tuple)
    return digits, exponent + len(digits)


def format_float(value: float) -> str:
    """
    Рендеринг float как Number.prototype.toString.

    - Целые без ".0"
    - Позиционная запись, если 1e-7 < |value| < 1e21
    - Иначе <d>[.<ddd>]e<+|-><exp>

    Examples:
        >>> format_float(100.0)
        '100'
        >>> format_float(1e16)
        '10000000000000000'
        >>> format_float(1e21)
        '1e+21'
        >>> format_float(1.5e-7)
        '1.5e-7'
        >>> format_float(0.000001)
        '0.000001'
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0:
        return "0"

    prefix = "-" if value < 0 else ""
    digits, point = _shortest_digits(value)
    k = len(digits)

    if k <= point <= POSITIONAL_MAX_POINT:
        return prefix + digits + "0" * (point - k)
    if 0 < point <= POSITIONAL_MAX_POINT:
        return prefix + digits[:point] + "." + digits[point:]
    if POSITIONAL_MIN_POINT < point <= 0:
        return prefix + "0." + "0" * (-point) + digits

    exp_sign = "+" if point - 1 >= 0 else "-"
    head = digits[0] if k == 1 else digits[0] + "." + digits[1:]
    return f"{prefix}{head}e{exp_sign}{abs(point - 1)}"


def format_fixed(value: float, places: int) -> str:
    """
    Рендеринг float с фиксированным числом знаков (Number.prototype.toFixed).

    Округление по точному двоичному значению, половины от нуля.
    Для |value| >= 1e21 — как format_float.

    Examples:
        >>> format_fixed(2.5, 0)
        '3'
        >>> format_fixed(1.005, 2)
        '1.00'
        >>> format_fixed(-0.5, 0)
        '-1'
        >>> format_fixed(12.0, 3)
        '12.000'
    """
    if not 0 <= places <= MAX_FIXED_PLACES:
        raise ValueError(f"places must be in [0, {MAX_FIXED_PLACES}], got {places}")

    if not is_valid_float(value) or abs(value) >= 1e21:
        return format_float(value)

    quantum = decimal.Decimal(1).scaleb(-places)
    exact = decimal.Decimal(value).quantize(
        quantum, rounding=decimal.ROUND_HALF_UP, context=_FIXED_CONTEXT
    )
    text = f"{exact:f}"
    if value == 0 and text.startswith("-"):
        return text[1:]
    return text
