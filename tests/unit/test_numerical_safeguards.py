"""
Тесты для модуля Numerical Safeguards

Проверяет:
1. Проверки float (finite, integer, safe integer)
2. IEEE-семантику log10/pow/exp/sinh/divide (NaN/Inf вместо исключений)
3. Округление half-up и привязку к целому
4. Рендеринг float (toString / toFixed)
"""

import math

import pytest

from xdecimal.core.math.numerical_safeguards import (
    MAX_FIXED_PLACES,
    MAX_SAFE_INTEGER,
    format_fixed,
    format_float,
    ieee_divide,
    is_integer,
    is_safe_integer,
    is_valid_float,
    round_half_up,
    safe_exp,
    safe_log10,
    safe_pow,
    safe_sinh,
    snap_to_integer,
    trunc_float,
)

# =============================================================================
# ТЕСТЫ ПРОВЕРОК
# =============================================================================


class TestFloatChecks:
    """Тесты для is_valid_float / is_integer / is_safe_integer"""

    def test_valid_float(self) -> None:
        """Конечные значения валидны"""
        assert is_valid_float(0.0)
        assert is_valid_float(-1e308)

    def test_invalid_float(self) -> None:
        """NaN и Inf невалидны"""
        assert not is_valid_float(math.nan)
        assert not is_valid_float(math.inf)
        assert not is_valid_float(-math.inf)

    def test_is_integer(self) -> None:
        """Целые значения float"""
        assert is_integer(3.0)
        assert is_integer(-1e20)
        assert not is_integer(3.5)
        assert not is_integer(math.inf)
        assert not is_integer(math.nan)

    def test_safe_integer_boundary(self) -> None:
        """Граница 2^53 - 1"""
        assert is_safe_integer(MAX_SAFE_INTEGER)
        assert is_safe_integer(-MAX_SAFE_INTEGER)
        assert not is_safe_integer(2.0**53)
        assert not is_safe_integer(0.5)


# =============================================================================
# ТЕСТЫ БЕЗОПАСНЫХ ОПЕРАЦИЙ
# =============================================================================


class TestSafeLog10:
    """Тесты для safe_log10"""

    def test_powers_of_ten(self) -> None:
        assert safe_log10(1000.0) == 3.0
        assert safe_log10(1.0) == 0.0

    def test_zero_is_minus_inf(self) -> None:
        """log10(0) = -inf"""
        assert safe_log10(0.0) == -math.inf

    def test_negative_is_nan(self) -> None:
        """Отрицательный аргумент → NaN, без ValueError"""
        assert math.isnan(safe_log10(-1.0))
        assert math.isnan(safe_log10(math.nan))


class TestSafePow:
    """Тесты для safe_pow"""

    def test_regular(self) -> None:
        assert safe_pow(2.0, 10.0) == 1024.0
        assert safe_pow(4.0, 0.5) == 2.0

    def test_negative_base_fractional_exponent(self) -> None:
        """Отрицательное основание с нецелым показателем → NaN"""
        assert math.isnan(safe_pow(-8.0, 1.0 / 3.0))

    def test_overflow(self) -> None:
        """Переполнение → ±Inf с учётом чётности"""
        assert safe_pow(10.0, 400.0) == math.inf
        assert safe_pow(-10.0, 401.0) == -math.inf
        assert safe_pow(-10.0, 400.0) == math.inf

    def test_zero_negative_exponent(self) -> None:
        """0 в отрицательной степени → Inf"""
        assert safe_pow(0.0, -1.0) == math.inf


class TestSafeExpAndDivide:
    """Тесты для safe_exp / safe_sinh / ieee_divide"""

    def test_exp_overflow(self) -> None:
        assert safe_exp(0.0) == 1.0
        assert safe_exp(1000.0) == math.inf

    def test_sinh_overflow_signed(self) -> None:
        """Переполнение sinh → Inf со знаком аргумента"""
        assert safe_sinh(1.0) == pytest.approx(math.sinh(1.0))
        assert safe_sinh(2000.0) == math.inf
        assert safe_sinh(-2000.0) == -math.inf

    def test_divide_regular(self) -> None:
        assert ieee_divide(1.0, 4.0) == 0.25

    def test_divide_by_zero_signed(self) -> None:
        """Деление ненулевого на ноль → Inf со знаком"""
        assert ieee_divide(1.0, 0.0) == math.inf
        assert ieee_divide(-1.0, 0.0) == -math.inf
        assert ieee_divide(1.0, -0.0) == -math.inf

    def test_zero_by_zero(self) -> None:
        """0/0 → NaN"""
        assert math.isnan(ieee_divide(0.0, 0.0))
        assert math.isnan(ieee_divide(math.nan, 0.0))


# =============================================================================
# ТЕСТЫ ОКРУГЛЕНИЯ
# =============================================================================


class TestRounding:
    """Тесты для round_half_up / trunc_float / snap_to_integer"""

    @pytest.mark.parametrize(
        "value,expected",
        [
            (2.5, 3.0),
            (-2.5, -2.0),
            (1.4999, 1.0),
            (0.5, 1.0),
            (-0.6, -1.0),
        ],
    )
    def test_round_half_up(self, value: float, expected: float) -> None:
        """Половины округляются вверх (в отличие от builtin round)"""
        assert round_half_up(value) == expected

    def test_round_half_up_passes_specials(self) -> None:
        assert round_half_up(math.inf) == math.inf
        assert math.isnan(round_half_up(math.nan))

    @pytest.mark.parametrize("value", [math.inf, -math.inf, math.nan])
    def test_non_finite_passes_through(self, value: float) -> None:
        """Невалидный float не округляется и не бросает исключений"""
        assert not is_valid_float(trunc_float(value))
        assert not is_valid_float(snap_to_integer(value))
        assert format_fixed(value, 2) == format_float(value)

    def test_trunc(self) -> None:
        assert trunc_float(-2.7) == -2.0
        assert trunc_float(2.7) == 2.0
        assert trunc_float(-math.inf) == -math.inf

    def test_snap_close_to_integer(self) -> None:
        """Накопленная ошибка умножения убирается"""
        assert snap_to_integer(99.99999999999999) == 100.0
        assert snap_to_integer(1790.0000000000002) == 1790.0

    def test_snap_keeps_fraction(self) -> None:
        assert snap_to_integer(99.5) == 99.5

    def test_snap_custom_tolerance(self) -> None:
        assert snap_to_integer(1.01, tol=0.1) == 1.0
        assert snap_to_integer(1.01, tol=1e-3) == 1.01


# =============================================================================
# ТЕСТЫ РЕНДЕРИНГА
# =============================================================================


class TestFormatFloat:
    """Тесты для format_float (Number.prototype.toString)"""

    @pytest.mark.parametrize(
        "value,expected",
        [
            (100.0, "100"),
            (1e16, "10000000000000000"),
            (1e20, "100000000000000000000"),
            (1e21, "1e+21"),
            (123.456, "123.456"),
            (-0.5, "-0.5"),
            (0.000001, "0.000001"),
            (1.5e-7, "1.5e-7"),
            (1.7976931348623157e308, "1.7976931348623157e+308"),
            (5e-324, "5e-324"),
        ],
    )
    def test_format(self, value: float, expected: str) -> None:
        assert format_float(value) == expected

    def test_specials(self) -> None:
        """NaN / Infinity / ноль"""
        assert format_float(math.nan) == "NaN"
        assert format_float(math.inf) == "Infinity"
        assert format_float(-math.inf) == "-Infinity"
        assert format_float(0.0) == "0"
        assert format_float(-0.0) == "0"


class TestFormatFixed:
    """Тесты для format_fixed (Number.prototype.toFixed)"""

    @pytest.mark.parametrize(
        "value,places,expected",
        [
            (2.5, 0, "3"),
            (-2.5, 0, "-3"),
            (1.005, 2, "1.00"),
            (12.0, 3, "12.000"),
            (3.14159, 2, "3.14"),
            (0.0, 2, "0.00"),
            (-0.0, 2, "0.00"),
        ],
    )
    def test_format(self, value: float, places: int, expected: str) -> None:
        """Округление по точному двоичному значению"""
        assert format_fixed(value, places) == expected

    def test_large_values_exponential(self) -> None:
        """|value| >= 1e21 → как toString"""
        assert format_fixed(1e21, 2) == "1e+21"

    def test_places_range(self) -> None:
        """places вне [0, MAX_FIXED_PLACES] → ValueError"""
        with pytest.raises(ValueError, match="places must be in"):
            format_fixed(1.0, -1)
        with pytest.raises(ValueError, match="places must be in"):
            format_fixed(1.0, MAX_FIXED_PLACES + 1)

    def test_max_places(self) -> None:
        text = format_fixed(1.0, MAX_FIXED_PLACES)
        assert text == "1." + "0" * MAX_FIXED_PLACES
