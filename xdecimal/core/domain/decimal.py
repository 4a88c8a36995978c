"""
Decimal — Extended-range десятичное число

Immutable пара (mantissa, exponent), представляющая mantissa × 10^exponent.
Диапазон до 10^exp_limit (exp_limit до 1.79e308), точность ~17 значимых
разрядов (ширина мантиссы double).

КРИТИЧЕСКИЕ ИНВАРИАНТЫ (нормализованная форма):
1. mantissa ≠ 0 → 1 ≤ |mantissa| < 10
2. mantissa == 0 → exponent == 0 (канонический ноль)
3. NaN → mantissa = NaN, exponent = NaN
4. ±Infinity → mantissa = ±1, exponent = exp_limit
5. exponent ≥ exp_limit → насыщение в ±Infinity; exponent ≤ -exp_limit → ноль
6. Математически невалидный вход даёт NaN, исключения не бросаются

ФОРМУЛЫ:
    add:  round(1e14·m_big + 1e14·m_small·10^(e_small - e_big)) × 10^(e_big - 14)
    mul:  (m_a·m_b) × 10^(e_a + e_b)
    log10(x) = e + log10(|m|)          (без материализации x как double)
    pow:  m^n × 10^(e·n), fallback 10^(n·log10|x|)
"""

import logging
import math
import numbers
from dataclasses import dataclass
from typing import TYPE_CHECKING, Final, Optional, Union

from xdecimal.core.config import (
    MAX_SIGNIFICANT_DIGITS,
    NUMBER_EXP_MAX,
    NUMBER_EXP_MIN,
    ROUND_TOLERANCE,
    NegativePowerPolicy,
    get_config,
)
from xdecimal.core.domain import formatting
from xdecimal.core.math.numerical_safeguards import (
    ieee_divide,
    is_integer,
    is_safe_integer,
    round_half_up,
    safe_exp,
    safe_log10,
    safe_pow,
    safe_sinh,
    snap_to_integer,
    trunc_float,
)
from xdecimal.core.math.powers import power_of_10

if TYPE_CHECKING:
    from xdecimal.core.domain.payload import DecimalPayload

logger = logging.getLogger(__name__)

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Окно сложения: мантиссы масштабируются в ~15-разрядные целые
ADD_SCALE: Final[float] = 1e14
ADD_SCALE_DIGITS: Final[int] = 14

# Поправки корней для экспонент, не кратных 2 / 3
SQRT_10: Final[float] = math.sqrt(10.0)
CBRT_10: Final[float] = 2.154434690031883
CBRT_100: Final[float] = 4.641588833612778

# Конверсия log10 → ln / log2
LN_10: Final[float] = math.log(10.0)
LOG2_10: Final[float] = 3.321928094887362

# Диапазон, где native exp() не переполняется и не уходит в 0
EXP_NATIVE_MIN: Final[float] = -706.0
EXP_NATIVE_MAX: Final[float] = 709.0

# Минимальный subnormal double и делитель для экспоненты NUMBER_EXP_MIN
MIN_SUBNORMAL: Final[float] = 5e-324
MIN_EXP_DIVISOR: Final[float] = 1e-323

# Целые с |n| ниже порога конвертируются через float без потерь диапазона
INT_DOUBLE_LIMIT: Final[int] = 10**NUMBER_EXP_MAX

DecimalSource = Union["Decimal", "DecimalPayload", int, float, str]


# =============================================================================
# EXCEPTIONS
# =============================================================================


class DecimalParseError(ValueError):
    """
    Строка не является валидным Decimal.

    Поддерживаемые формы: "<mantissa>e<exponent>", "NaN", литерал float.
    """

    def __init__(self, text: str, reason: str):
        self.text = text
        self.reason = reason
        super().__init__(f"Invalid decimal string {text!r}: {reason}")


# =============================================================================
# НОРМАЛИЗАЦИЯ
# =============================================================================


def _shift_mantissa(mantissa: float, shift: int) -> float:
    """mantissa / 10^shift без потери точности на границе subnormal"""
    if shift == NUMBER_EXP_MIN:
        return mantissa * 10 / MIN_EXP_DIVISOR
    return mantissa / power_of_10(shift)


def _saturate(mantissa: float, exponent: float) -> tuple[float, float]:
    exp_limit = get_config().exp_limit
    if exponent >= exp_limit:
        return math.copysign(1.0, mantissa), exp_limit
    if exponent <= -exp_limit:
        return 0.0, 0.0
    return mantissa, exponent


def _normalize_pair(mantissa: float, exponent: float) -> tuple[float, float]:
    """
    Нормализация пары за один проход.

    Returns:
        (mantissa, exponent) с 1 ≤ |mantissa| < 10, канонический ноль или NaN
    """
    if not math.isfinite(mantissa) or math.isnan(exponent):
        return math.nan, math.nan
    if mantissa == 0:
        return 0.0, 0.0

    if not 1 <= abs(mantissa) < 10:
        shift = math.floor(math.log10(abs(mantissa)))
        mantissa = _shift_mantissa(mantissa, shift)
        exponent += shift
        # log10 около степеней десяти ошибается на 1 ulp
        if abs(mantissa) >= 10:
            mantissa /= 10
            exponent += 1
        elif abs(mantissa) < 1:
            mantissa *= 10
            exponent -= 1

    return _saturate(mantissa, float(exponent))


def _parse_float(part: str, text: str, what: str) -> float:
    try:
        return float(part)
    except ValueError:
        logger.debug("Failed to parse %s %r of %r", what, part, text)
        raise DecimalParseError(text, f"invalid {what} {part!r}") from None


# =============================================================================
# DECIMAL
# =============================================================================


@dataclass(frozen=True, eq=False, init=False, repr=False)
class Decimal:
    """
    Extended-range десятичное число.

    Immutable: каждая операция возвращает новый экземпляр.

    Конструктор принимает любой DecimalSource:
        >>> Decimal(100).to_string()
        '100'
        >>> Decimal("1.5e1000").exponent
        1000.0

    Сырая (не нормализованная) пара — from_mantissa_exponent_no_normalize().
    """

    mantissa: float
    exponent: float

    def __init__(self, value: DecimalSource = 0.0) -> None:
        source = Decimal.from_value(value)
        object.__setattr__(self, "mantissa", source.mantissa)
        object.__setattr__(self, "exponent", source.exponent)

    # -------------------------------------------------------------------------
    # Конструкторы
    # -------------------------------------------------------------------------

    @classmethod
    def from_mantissa_exponent_no_normalize(
        cls, mantissa: float, exponent: float
    ) -> "Decimal":
        """Сырая пара без нормализации (вызывающий гарантирует инвариант)"""
        obj = object.__new__(cls)
        object.__setattr__(obj, "mantissa", float(mantissa))
        object.__setattr__(obj, "exponent", float(exponent))
        return obj

    @classmethod
    def from_mantissa_exponent(cls, mantissa: float, exponent: float) -> "Decimal":
        """
        Нормализованный Decimal из пары.

        Args:
            mantissa: Мантисса (любой конечный double)
            exponent: Экспонента (целое значение)

        Returns:
            Нормализованный Decimal; NaN для нечисловой мантиссы;
            ±Infinity / ноль для экспоненты ±inf
        """
        if not math.isfinite(mantissa) or math.isnan(exponent):
            return NAN
        if math.isinf(exponent):
            if mantissa == 0 or exponent < 0:
                return ZERO
            return cls.infinity(mantissa)
        return cls.from_mantissa_exponent_no_normalize(
            *_normalize_pair(mantissa, exponent)
        )

    @classmethod
    def from_double(cls, value: float) -> "Decimal":
        """
        Decimal из native double.

        Examples:
            >>> Decimal.from_double(1790.0)
            Decimal('1790')
            >>> Decimal.from_double(float("-inf")).to_string()
            '-Infinity'
        """
        if math.isnan(value):
            return NAN
        if value == 0:
            return ZERO
        if math.isinf(value):
            return cls.infinity(value)

        exponent = math.floor(math.log10(abs(value)))
        mantissa = _shift_mantissa(value, exponent)
        return cls.from_mantissa_exponent_no_normalize(
            *_normalize_pair(mantissa, exponent)
        )

    @classmethod
    def from_int(cls, value: int) -> "Decimal":
        """
        Decimal из целого любой разрядности.

        Целые за пределами double берутся по первым 17 разрядам.

        Examples:
            >>> Decimal.from_int(10**400).exponent
            400.0
        """
        if abs(value) < INT_DOUBLE_LIMIT:
            return cls.from_double(float(value))

        magnitude = abs(value)
        exponent = math.floor(math.log10(magnitude))
        head = magnitude // 10 ** (exponent - MAX_SIGNIFICANT_DIGITS + 1)
        mantissa = head / 10.0 ** (MAX_SIGNIFICANT_DIGITS - 1)
        return cls.from_mantissa_exponent(math.copysign(mantissa, value), exponent)

    @classmethod
    def from_string(cls, text: str) -> "Decimal":
        """
        Разбор строки.

        Формы:
        - "<mantissa>e<exponent>" (например, "1.5e1000", "-3e-7", "2.5e+1e+25")
        - "NaN"
        - литерал float ("123.45", "Infinity")

        Raises:
            DecimalParseError: Мантисса или экспонента не разбираются
        """
        stripped = text.strip()
        if stripped == "NaN":
            return NAN

        if "e" in stripped.lower():
            # Экспонента ≥ 1e21 сама записана экспоненциально: "1e+1e+25"
            head, _, tail = stripped.lower().partition("e")
            mantissa = _parse_float(head, text, "mantissa")
            exponent = _parse_float(tail, text, "exponent")
            if math.isfinite(exponent) and not is_integer(exponent):
                whole = math.floor(exponent)
                mantissa *= safe_pow(10.0, exponent - whole)
                exponent = whole
            return cls.from_mantissa_exponent(mantissa, exponent)

        value = _parse_float(stripped, text, "value")
        if math.isnan(value):
            raise DecimalParseError(text, "NaN must be spelled 'NaN'")
        return cls.from_double(value)

    @classmethod
    def from_payload(cls, payload: "DecimalPayload") -> "Decimal":
        """Decimal из JSON-формы {"mantissa": ..., "exponent": ...}"""
        if payload.mantissa is None or payload.exponent is None:
            return NAN
        return cls.from_mantissa_exponent(payload.mantissa, payload.exponent)

    @classmethod
    def from_value(cls, value: DecimalSource) -> "Decimal":
        """
        Приведение поддерживаемого значения к Decimal.

        Raises:
            TypeError: Неподдерживаемый тип
            DecimalParseError: Невалидная строка
        """
        if isinstance(value, Decimal):
            return value
        if isinstance(value, numbers.Integral):
            return cls.from_int(int(value))
        if isinstance(value, numbers.Real):
            return cls.from_double(float(value))
        if isinstance(value, str):
            return cls.from_string(value)

        from xdecimal.core.domain.payload import DecimalPayload

        if isinstance(value, DecimalPayload):
            return cls.from_payload(value)
        raise TypeError(f"Cannot convert {type(value).__name__} to Decimal")

    @classmethod
    def infinity(cls, sign: float = 1.0) -> "Decimal":
        """±Infinity для активного exp_limit"""
        return cls.from_mantissa_exponent_no_normalize(
            math.copysign(1.0, sign), get_config().exp_limit
        )

    @staticmethod
    def pow10(value: float) -> "Decimal":
        """
        10^value.

        Examples:
            >>> Decimal.pow10(1000).exponent
            1000.0
        """
        if math.isnan(value):
            return NAN
        if math.isinf(value):
            return Decimal.infinity() if value > 0 else ZERO
        if is_integer(value):
            return Decimal.from_mantissa_exponent(1.0, value)
        return Decimal.from_mantissa_exponent(
            safe_pow(10.0, math.fmod(value, 1.0)), trunc_float(value)
        )

    # -------------------------------------------------------------------------
    # Нормализация и конверсия
    # -------------------------------------------------------------------------

    def normalize(self) -> "Decimal":
        """Нормализованная форма (идемпотентно)"""
        if 1 <= abs(self.mantissa) < 10:
            mantissa, exponent = _saturate(self.mantissa, self.exponent)
            if (mantissa, exponent) == (self.mantissa, self.exponent):
                return self
            return Decimal.from_mantissa_exponent_no_normalize(mantissa, exponent)
        return Decimal.from_mantissa_exponent_no_normalize(
            *_normalize_pair(self.mantissa, self.exponent)
        )

    def to_number(self) -> float:
        """
        Конверсия в native double (с потерями).

        Returns:
            - NaN для NaN
            - ±inf при exponent > 308
            - ±0.0 при exponent < -324
            - ±5e-324 при exponent == -324
            - mantissa × 10^exponent, привязанное к целому в пределах
              ROUND_TOLERANCE для exponent ≥ 0
        """
        mantissa, exponent = self.mantissa, self.exponent
        if not math.isfinite(exponent):
            return math.nan
        if exponent > NUMBER_EXP_MAX:
            return math.copysign(math.inf, mantissa)
        if exponent < NUMBER_EXP_MIN:
            return math.copysign(0.0, mantissa)
        if exponent == NUMBER_EXP_MIN:
            return math.copysign(MIN_SUBNORMAL, mantissa)

        result = mantissa * power_of_10(int(exponent))
        if not math.isfinite(result) or exponent < 0:
            return result
        return snap_to_integer(result, ROUND_TOLERANCE)

    def to_payload(self) -> "DecimalPayload":
        """JSON-форма; NaN кодируется null-полями"""
        from xdecimal.core.domain.payload import DecimalPayload

        if self.is_nan():
            return DecimalPayload(mantissa=None, exponent=None)
        return DecimalPayload(mantissa=self.mantissa, exponent=self.exponent)

    # -------------------------------------------------------------------------
    # Предикаты
    # -------------------------------------------------------------------------

    def is_nan(self) -> bool:
        return math.isnan(self.mantissa) or math.isnan(self.exponent)

    def is_infinite(self) -> bool:
        return (
            not self.is_nan()
            and self.mantissa != 0
            and self.exponent >= get_config().exp_limit
        )

    def is_finite(self) -> bool:
        return not self.is_nan() and not self.is_infinite()

    def is_zero(self) -> bool:
        return self.mantissa == 0

    def sign(self) -> int:
        """-1, 0 или 1 (0 также для NaN)"""
        if self.mantissa > 0:
            return 1
        if self.mantissa < 0:
            return -1
        return 0

    # -------------------------------------------------------------------------
    # Арифметика
    # -------------------------------------------------------------------------

    def neg(self) -> "Decimal":
        if self.mantissa == 0:
            return self
        return Decimal.from_mantissa_exponent_no_normalize(-self.mantissa, self.exponent)

    def abs(self) -> "Decimal":
        return Decimal.from_mantissa_exponent_no_normalize(
            abs(self.mantissa), self.exponent
        )

    def add(self, other: DecimalSource) -> "Decimal":
        """
        Сложение.

        Если разрыв экспонент больше MAX_SIGNIFICANT_DIGITS, меньший операнд
        незначим и результат — больший операнд без изменений.
        """
        other = Decimal.from_value(other)
        if self.is_nan() or other.is_nan():
            return NAN
        if self.mantissa == 0:
            return other
        if other.mantissa == 0:
            return self
        if self.is_infinite() and other.is_infinite():
            return self if self.sign() == other.sign() else NAN

        if self.exponent >= other.exponent:
            bigger, smaller = self, other
        else:
            bigger, smaller = other, self

        if bigger.exponent - smaller.exponent > MAX_SIGNIFICANT_DIGITS:
            return bigger

        mantissa = round_half_up(
            ADD_SCALE * bigger.mantissa
            + ADD_SCALE
            * smaller.mantissa
            * power_of_10(int(smaller.exponent - bigger.exponent))
        )
        return Decimal.from_mantissa_exponent(
            mantissa, bigger.exponent - ADD_SCALE_DIGITS
        )

    def sub(self, other: DecimalSource) -> "Decimal":
        return self.add(Decimal.from_value(other).neg())

    def mul(self, other: DecimalSource) -> "Decimal":
        other = Decimal.from_value(other)
        return Decimal.from_mantissa_exponent(
            self.mantissa * other.mantissa, self.exponent + other.exponent
        )

    def recip(self) -> "Decimal":
        """1/x; NaN для нуля"""
        if self.mantissa == 0 or self.is_nan():
            return NAN
        return Decimal.from_mantissa_exponent(1 / self.mantissa, -self.exponent)

    def div(self, other: DecimalSource) -> "Decimal":
        return self.mul(Decimal.from_value(other).recip())

    def pow(self, value: DecimalSource) -> "Decimal":
        """
        Возведение в степень.

        Показатель конвертируется в double. Три пути:
        1. e·n — безопасное целое: m^n × 10^(e·n)
        2. 10^(n·log10(m) + дробная часть e·n) × 10^trunc(e·n)
        3. 10^(n·log10|x|) с поправкой знака для отрицательного основания

        Отрицательное основание с нецелым показателем — по
        DecimalConfig.negative_power_policy (NaN или -(|x|^n)).

        Examples:
            >>> Decimal(2).pow(10).to_number()
            1024.0
            >>> Decimal("1e1000").pow(0.5).exponent
            500.0
        """
        number = value if isinstance(value, float) else Decimal.from_value(value).to_number()

        if self.is_nan() or math.isnan(number):
            return NAN
        if number == 0:
            return ONE
        if math.isinf(number):
            return self._pow_infinite(number)
        if self.mantissa == 0:
            return ZERO if number > 0 else NAN
        if self.is_infinite():
            limit = Decimal.infinity() if number > 0 else ZERO
            return self._signed_power(limit, number)

        temp = self.exponent * number
        if is_safe_integer(temp):
            mantissa = safe_pow(self.mantissa, number)
            if math.isfinite(mantissa) and mantissa != 0:
                return Decimal.from_mantissa_exponent(mantissa, temp)

        exponent = trunc_float(temp)
        residue = temp - exponent
        mantissa = safe_pow(10.0, number * safe_log10(self.mantissa) + residue)
        if math.isfinite(mantissa) and mantissa != 0:
            return Decimal.from_mantissa_exponent(mantissa, exponent)

        return self._signed_power(Decimal.pow10(number * self.abs_log10()), number)

    def _signed_power(self, magnitude: "Decimal", number: float) -> "Decimal":
        """Знак |self|^number для отрицательного основания"""
        if self.sign() != -1:
            return magnitude
        if is_integer(number):
            return magnitude.neg() if math.fmod(number, 2.0) != 0 else magnitude
        if get_config().negative_power_policy is NegativePowerPolicy.SIGNED:
            return magnitude.neg()
        return NAN

    def _pow_infinite(self, number: float) -> "Decimal":
        magnitude = self.abs().compare(ONE)
        if magnitude == 0:
            return ONE
        grows = (magnitude > 0) == (number > 0)
        return Decimal.infinity() if grows else ZERO

    def pow_base(self, base: DecimalSource) -> "Decimal":
        """base^self"""
        return Decimal.from_value(base).pow(self)

    def exp(self) -> "Decimal":
        """e^x; native exp() внутри (-706, 709)"""
        x = self.to_number()
        if EXP_NATIVE_MIN < x < EXP_NATIVE_MAX:
            return Decimal.from_double(safe_exp(x))
        return Decimal.from_double(math.e).pow(x)

    def sqr(self) -> "Decimal":
        return Decimal.from_mantissa_exponent(self.mantissa * self.mantissa, self.exponent * 2)

    def sqrt(self) -> "Decimal":
        """Квадратный корень; NaN для отрицательных"""
        if self.is_nan() or self.mantissa < 0:
            return NAN
        if self.is_infinite():
            return self
        root = math.sqrt(self.mantissa)
        if self.exponent % 2 != 0:
            root *= SQRT_10
        return Decimal.from_mantissa_exponent(root, self.exponent // 2)

    def cube(self) -> "Decimal":
        return Decimal.from_mantissa_exponent(self.mantissa**3, self.exponent * 3)

    def cbrt(self) -> "Decimal":
        """
        Кубический корень (определён и для отрицательных).

        exponent = 3q + r, r ∈ {0, 1, 2} (floor-mod по обе стороны от нуля):
        cbrt(m × 10^e) = cbrt(m) × 10^(r/3) × 10^q
        """
        if self.is_nan():
            return NAN
        if self.is_infinite():
            return self
        root = math.copysign(safe_pow(abs(self.mantissa), 1.0 / 3.0), self.mantissa)
        remainder = self.exponent % 3
        if remainder == 1:
            root *= CBRT_10
        elif remainder == 2:
            root *= CBRT_100
        return Decimal.from_mantissa_exponent(root, self.exponent // 3)

    # -------------------------------------------------------------------------
    # Логарифмы (возвращают double)
    # -------------------------------------------------------------------------

    def log10(self) -> float:
        """exponent + log10(mantissa); NaN для отрицательных, -inf для нуля"""
        return self.exponent + safe_log10(self.mantissa)

    def abs_log10(self) -> float:
        return self.exponent + safe_log10(abs(self.mantissa))

    def p_log10(self) -> float:
        """log10, защищённый от x < 1 (тогда 0)"""
        if self.mantissa <= 0 or self.exponent < 0:
            return 0.0
        return self.log10()

    def ln(self) -> float:
        return LN_10 * self.log10()

    def log2(self) -> float:
        return LOG2_10 * self.log10()

    def log(self, base: DecimalSource) -> float:
        return ieee_divide(LN_10, Decimal.from_value(base).ln()) * self.log10()

    # -------------------------------------------------------------------------
    # Гиперболические функции
    # -------------------------------------------------------------------------

    def sinh(self) -> "Decimal":
        return self.exp().sub(self.neg().exp()).div(2)

    def cosh(self) -> "Decimal":
        return self.exp().add(self.neg().exp()).div(2)

    def tanh(self) -> "Decimal":
        return self.sinh().div(self.cosh())

    def asinh(self) -> float:
        return self.add(self.sqr().add(1).sqrt()).ln()

    def acosh(self) -> float:
        return self.add(self.sqr().sub(1).sqrt()).ln()

    def atanh(self) -> float:
        """NaN вне (-1, 1)"""
        if not self.abs().lt(ONE):
            return math.nan
        return self.add(1).div(ONE.sub(self)).ln() / 2

    def factorial(self) -> "Decimal":
        """
        Приближение n! через Γ(n+1) (формула Стирлинга в форме Windschitl).

        Точность падает для малых n; при n → -1 переполнение даёт Infinity.
        NaN при n ≤ -1.
        """
        n = self.to_number() + 1
        if math.isnan(n) or n <= 0:
            return NAN
        if math.isinf(n):
            return Decimal.infinity()

        correction = n * safe_sinh(1 / n) + 1 / (810 * safe_pow(n, 6))
        base = n / math.e * math.sqrt(correction)
        return Decimal.from_double(base).pow(n).mul(math.sqrt(2 * math.pi / n))

    # -------------------------------------------------------------------------
    # Округление
    # -------------------------------------------------------------------------

    def round(self) -> "Decimal":
        if self.exponent < -1:
            return ZERO
        if self.exponent < MAX_SIGNIFICANT_DIGITS:
            return Decimal.from_double(round_half_up(self.to_number()))
        return self

    def trunc(self) -> "Decimal":
        if self.exponent < 0:
            return ZERO
        if self.exponent < MAX_SIGNIFICANT_DIGITS:
            return Decimal.from_double(trunc_float(self.to_number()))
        return self

    def floor(self) -> "Decimal":
        if self.exponent < -1:
            return ZERO if self.sign() >= 0 else MINUS_ONE
        if self.exponent < MAX_SIGNIFICANT_DIGITS:
            return Decimal.from_double(float(math.floor(self.to_number())))
        return self

    def ceil(self) -> "Decimal":
        if self.exponent < -1:
            return ONE if self.sign() > 0 else ZERO
        if self.exponent < MAX_SIGNIFICANT_DIGITS:
            return Decimal.from_double(float(math.ceil(self.to_number())))
        return self

    def decimal_places(self) -> Optional[int]:
        """
        Число значимых дробных разрядов.

        Returns:
            None для NaN, 0 для exponent ≥ MAX_SIGNIFICANT_DIGITS

        Examples:
            >>> Decimal("1.25").decimal_places()
            2
        """
        if self.is_nan():
            return None
        if self.exponent >= MAX_SIGNIFICANT_DIGITS:
            return 0

        mantissa = self.mantissa
        places = -self.exponent
        scale = 1.0
        while abs(round_half_up(mantissa * scale) / scale - mantissa) > ROUND_TOLERANCE:
            scale *= 10
            places += 1
        return max(int(places), 0)

    # -------------------------------------------------------------------------
    # Сравнение
    # -------------------------------------------------------------------------

    def compare(self, other: DecimalSource) -> Optional[int]:
        """
        Полный порядок.

        Returns:
            -1 / 0 / 1; None если один из операндов NaN (неупорядочены)
        """
        other = Decimal.from_value(other)
        if self.is_nan() or other.is_nan():
            return None

        a_m, a_e = self.mantissa, self.exponent
        b_m, b_e = other.mantissa, other.exponent

        if a_m == 0:
            if b_m == 0:
                return 0
            return -1 if b_m > 0 else 1
        if b_m == 0:
            return 1 if a_m > 0 else -1

        if a_m > 0:
            if b_m < 0:
                return 1
            if a_e != b_e:
                return 1 if a_e > b_e else -1
        else:
            if b_m > 0:
                return -1
            # Для отрицательных большая экспонента означает меньшее значение
            if a_e != b_e:
                return -1 if a_e > b_e else 1

        if a_m > b_m:
            return 1
        if a_m < b_m:
            return -1
        return 0

    def eq(self, other: DecimalSource) -> bool:
        other = Decimal.from_value(other)
        return self.mantissa == other.mantissa and self.exponent == other.exponent

    def neq(self, other: DecimalSource) -> bool:
        return not self.eq(other)

    def lt(self, other: DecimalSource) -> bool:
        return self.compare(other) == -1

    def lte(self, other: DecimalSource) -> bool:
        return self.compare(other) in (-1, 0)

    def gt(self, other: DecimalSource) -> bool:
        return self.compare(other) == 1

    def gte(self, other: DecimalSource) -> bool:
        return self.compare(other) in (0, 1)

    def max(self, other: DecimalSource) -> "Decimal":
        other = Decimal.from_value(other)
        return other if self.lt(other) else self

    def min(self, other: DecimalSource) -> "Decimal":
        other = Decimal.from_value(other)
        return other if self.gt(other) else self

    def clamp(self, minimum: DecimalSource, maximum: DecimalSource) -> "Decimal":
        return self.max(minimum).min(maximum)

    def clamp_min(self, minimum: DecimalSource) -> "Decimal":
        return self.max(minimum)

    def clamp_max(self, maximum: DecimalSource) -> "Decimal":
        return self.min(maximum)

    # -------------------------------------------------------------------------
    # Сравнение с толерантностью
    # -------------------------------------------------------------------------

    def eq_tolerance(self, other: DecimalSource, tolerance: DecimalSource) -> bool:
        """
        Относительное равенство.

        Алгоритм:
            abs(a - b) <= tolerance * max(abs(a), abs(b))

        Args:
            other: Второе значение
            tolerance: Относительная толерантность (доля большего модуля)
        """
        other = Decimal.from_value(other)
        if self.is_nan() or other.is_nan():
            return False
        if self.eq(other):
            return True
        bound = self.abs().max(other.abs()).mul(tolerance)
        return self.sub(other).abs().lte(bound)

    def neq_tolerance(self, other: DecimalSource, tolerance: DecimalSource) -> bool:
        return not self.eq_tolerance(other, tolerance)

    def lt_tolerance(self, other: DecimalSource, tolerance: DecimalSource) -> bool:
        return not self.eq_tolerance(other, tolerance) and self.lt(other)

    def lte_tolerance(self, other: DecimalSource, tolerance: DecimalSource) -> bool:
        return self.eq_tolerance(other, tolerance) or self.lt(other)

    def gt_tolerance(self, other: DecimalSource, tolerance: DecimalSource) -> bool:
        return not self.eq_tolerance(other, tolerance) and self.gt(other)

    def gte_tolerance(self, other: DecimalSource, tolerance: DecimalSource) -> bool:
        return self.eq_tolerance(other, tolerance) or self.gt(other)

    def compare_tolerance(
        self, other: DecimalSource, tolerance: DecimalSource
    ) -> Optional[int]:
        if self.eq_tolerance(other, tolerance):
            return 0
        return self.compare(other)

    # -------------------------------------------------------------------------
    # Форматирование
    # -------------------------------------------------------------------------

    def to_string(self) -> str:
        return formatting.to_string(self)

    def to_exponential(self, places: Optional[int] = None) -> str:
        return formatting.to_exponential(self, places)

    def to_fixed(self, places: int = 0) -> str:
        return formatting.to_fixed(self, places)

    def to_precision(self, places: int) -> str:
        return formatting.to_precision(self, places)

    def to_string_with_decimal_places(self, places: int) -> str:
        return formatting.to_exponential(self, places)

    def mantissa_with_decimal_places(self, places: int) -> float:
        return formatting.mantissa_with_decimal_places(self, places)

    def to_json(self) -> str:
        return formatting.to_string(self)

    # -------------------------------------------------------------------------
    # Python protocol
    # -------------------------------------------------------------------------

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"Decimal({self.to_string()!r})"

    def __float__(self) -> float:
        return self.to_number()

    def __int__(self) -> int:
        if self.is_nan():
            raise ValueError("cannot convert NaN to integer")
        if self.is_infinite():
            raise OverflowError("cannot convert Infinity to integer")
        if self.exponent <= NUMBER_EXP_MAX:
            return int(self.to_number())
        # За пределами double: 17 значимых разрядов мантиссы
        head = int(self.mantissa * 10 ** (MAX_SIGNIFICANT_DIGITS - 1))
        return head * 10 ** int(self.exponent - MAX_SIGNIFICANT_DIGITS + 1)

    def __bool__(self) -> bool:
        return self.mantissa != 0

    def __hash__(self) -> int:
        if NUMBER_EXP_MIN < self.exponent <= NUMBER_EXP_MAX:
            return hash(self.to_number())
        return hash((self.mantissa, self.exponent))

    def __eq__(self, other: object) -> bool:
        coerced = _coerce_operand(other)
        if coerced is None:
            return NotImplemented
        return self.eq(coerced)

    def __lt__(self, other: object) -> bool:
        coerced = _coerce_operand(other)
        if coerced is None:
            return NotImplemented
        return self.lt(coerced)

    def __le__(self, other: object) -> bool:
        coerced = _coerce_operand(other)
        if coerced is None:
            return NotImplemented
        return self.lte(coerced)

    def __gt__(self, other: object) -> bool:
        coerced = _coerce_operand(other)
        if coerced is None:
            return NotImplemented
        return self.gt(coerced)

    def __ge__(self, other: object) -> bool:
        coerced = _coerce_operand(other)
        if coerced is None:
            return NotImplemented
        return self.gte(coerced)

    def __neg__(self) -> "Decimal":
        return self.neg()

    def __pos__(self) -> "Decimal":
        return self

    def __abs__(self) -> "Decimal":
        return self.abs()

    def __add__(self, other: object) -> "Decimal":
        coerced = _coerce_operand(other)
        if coerced is None:
            return NotImplemented
        return self.add(coerced)

    def __radd__(self, other: object) -> "Decimal":
        coerced = _coerce_operand(other)
        if coerced is None:
            return NotImplemented
        return coerced.add(self)

    def __sub__(self, other: object) -> "Decimal":
        coerced = _coerce_operand(other)
        if coerced is None:
            return NotImplemented
        return self.sub(coerced)

    def __rsub__(self, other: object) -> "Decimal":
        coerced = _coerce_operand(other)
        if coerced is None:
            return NotImplemented
        return coerced.sub(self)

    def __mul__(self, other: object) -> "Decimal":
        coerced = _coerce_operand(other)
        if coerced is None:
            return NotImplemented
        return self.mul(coerced)

    def __rmul__(self, other: object) -> "Decimal":
        coerced = _coerce_operand(other)
        if coerced is None:
            return NotImplemented
        return coerced.mul(self)

    def __truediv__(self, other: object) -> "Decimal":
        coerced = _coerce_operand(other)
        if coerced is None:
            return NotImplemented
        return self.div(coerced)

    def __rtruediv__(self, other: object) -> "Decimal":
        coerced = _coerce_operand(other)
        if coerced is None:
            return NotImplemented
        return coerced.div(self)

    def __pow__(self, other: object) -> "Decimal":
        coerced = _coerce_operand(other)
        if coerced is None:
            return NotImplemented
        return self.pow(coerced)

    def __rpow__(self, other: object) -> "Decimal":
        coerced = _coerce_operand(other)
        if coerced is None:
            return NotImplemented
        return coerced.pow(self)


def _coerce_operand(value: object) -> Optional[Decimal]:
    """Операнд оператора: Decimal или число; иначе None (NotImplemented)"""
    if isinstance(value, Decimal):
        return value
    if isinstance(value, numbers.Real):
        return Decimal.from_value(value)
    return None


# =============================================================================
# КОНСТАНТЫ ЗНАЧЕНИЙ
# =============================================================================

ZERO: Final[Decimal] = Decimal.from_mantissa_exponent_no_normalize(0.0, 0.0)
ONE: Final[Decimal] = Decimal.from_mantissa_exponent_no_normalize(1.0, 0.0)
MINUS_ONE: Final[Decimal] = Decimal.from_mantissa_exponent_no_normalize(-1.0, 0.0)
NAN: Final[Decimal] = Decimal.from_mantissa_exponent_no_normalize(math.nan, math.nan)
