"""
Тесты для сравнения Decimal

Проверяет:
1. Полный порядок (знак, экспонента, мантисса)
2. NaN неупорядочен
3. max/min/clamp
4. Сравнение с относительной толерантностью
5. Python операторы сравнения
"""

import pytest

from xdecimal import NAN, ZERO, Decimal


@pytest.fixture
def a() -> Decimal:
    return Decimal.from_mantissa_exponent(3.224, 54)


@pytest.fixture
def b() -> Decimal:
    return Decimal.from_mantissa_exponent(1.24, 53)


@pytest.fixture
def c() -> Decimal:
    return Decimal.from_mantissa_exponent(3.1, 52)


# =============================================================================
# ПОЛНЫЙ ПОРЯДОК
# =============================================================================


class TestCompare:
    """Тесты для compare"""

    @pytest.mark.parametrize(
        "left,right,expected",
        [
            (1, 2, -1),
            (2, 1, 1),
            (5, 5, 0),
            ("1e1000", "9e999", 1),
            (-100, -2, -1),
            (-2, -3, 1),
            (-1, 1, -1),
            (0, -1, 1),
            (0, 5, -1),
            (-1, 0, -1),
            (0, 0, 0),
        ],
    )
    def test_order(self, left: object, right: object, expected: int) -> None:
        assert Decimal(left).compare(right) == expected  # type: ignore[arg-type]

    def test_infinity_above_finite(self) -> None:
        assert Decimal.infinity().compare("1e1000") == 1
        assert Decimal.infinity(-1).compare("-1e1000") == -1

    def test_nan_unordered(self) -> None:
        """NaN не сравнивается ни с чем"""
        assert NAN.compare(1) is None
        assert Decimal(1).compare(NAN) is None
        assert not NAN.lt(1)
        assert not NAN.gte(1)
        assert not NAN.eq(NAN)

    def test_predicates(self) -> None:
        one = Decimal(1)
        assert one.lt(2) and one.lte(2) and one.lte(1)
        assert one.gt(0) and one.gte(0) and one.gte(1)
        assert one.eq(1) and one.neq(2)


class TestMinMaxClamp:
    """Тесты для max / min / clamp"""

    def test_max_min(self, a: Decimal, b: Decimal, c: Decimal) -> None:
        assert a.max(b).eq(a)
        assert a.min(c).eq(c)

    def test_clamp(self, a: Decimal, b: Decimal, c: Decimal) -> None:
        assert a.clamp(c, b).eq(b)
        assert c.clamp(b, b).eq(b)
        assert b.clamp(c, a).eq(b)

    def test_clamp_min_max(self) -> None:
        assert Decimal(5).clamp_min(10).eq(Decimal(10))
        assert Decimal(5).clamp_max(3).eq(Decimal(3))
        assert Decimal(5).clamp_min(3).eq(Decimal(5))


# =============================================================================
# ТОЛЕРАНТНОСТЬ
# =============================================================================


class TestTolerance:
    """Тесты для *_tolerance"""

    def test_eq_tolerance(self) -> None:
        assert Decimal(100).eq_tolerance(101, 0.02)
        assert not Decimal(100).eq_tolerance(103, 0.02)
        assert Decimal(100).neq_tolerance(103, 0.02)

    def test_eq_tolerance_beyond_double(self) -> None:
        assert Decimal("1e1000").eq_tolerance("1.0000001e1000", 1e-6)
        assert not Decimal("1e1000").eq_tolerance("1e1001", 1e-6)

    def test_eq_tolerance_nan(self) -> None:
        assert not NAN.eq_tolerance(NAN, 0.5)
        assert not Decimal(1).eq_tolerance(NAN, 0.5)

    def test_eq_tolerance_zero(self) -> None:
        assert ZERO.eq_tolerance(0, 0)
        assert not ZERO.eq_tolerance(1e-300, 0.5)

    def test_ordering_with_tolerance(self) -> None:
        """Значения в пределах толерантности считаются равными"""
        assert not Decimal(100).lt_tolerance(101, 0.02)
        assert Decimal(100).lt_tolerance(103, 0.02)
        assert Decimal(101).lte_tolerance(100, 0.02)
        assert Decimal(103).gt_tolerance(100, 0.02)
        assert not Decimal(101).gt_tolerance(100, 0.02)
        assert Decimal(100).gte_tolerance(101, 0.02)

    def test_compare_tolerance(self) -> None:
        assert Decimal(100).compare_tolerance(101, 0.02) == 0
        assert Decimal(100).compare_tolerance(103, 0.02) == -1
        assert Decimal(103).compare_tolerance(100, 0.02) == 1


# =============================================================================
# PYTHON ОПЕРАТОРЫ
# =============================================================================


class TestComparisonOperators:
    """Тесты для операторов сравнения"""

    def test_with_decimals(self, a: Decimal, b: Decimal) -> None:
        assert b < a
        assert a > b
        assert a >= a
        assert b <= a
        assert a == Decimal.from_mantissa_exponent(3.224, 54)
        assert a != b

    def test_with_numbers(self) -> None:
        assert Decimal(3) > 2
        assert 2 < Decimal(3)
        assert Decimal(3) == 3
        assert 3.0 == Decimal(3)

    def test_nan_operators(self) -> None:
        assert not NAN < Decimal(1)
        assert not NAN >= Decimal(1)
        assert NAN != NAN

    def test_sorted(self) -> None:
        values = [Decimal("1e100"), Decimal(-5), ZERO, Decimal("-1e100"), Decimal(0.5)]
        assert [v.to_string() for v in sorted(values)] == [
            "-1e+100",
            "-5",
            "0",
            "0.5",
            "1e+100",
        ]
