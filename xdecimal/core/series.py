"""
Series — Геометрические и арифметические ряды цен

Closed-form функции для инкрементальных симуляций:
- Сколько единиц можно купить при геометрическом/арифметическом росте цены
- Суммарная стоимость N единиц
- Эффективность покупки (стоимость на прирост дохода)

Все функции выражены через арифметику Decimal и не имеют состояния.

ФОРМУЛЫ:
    Геометрический ряд (цена k-й единицы = start × ratio^k):
        actual_start = start × ratio^owned
        afford = floor(log10(resources / actual_start × (ratio - 1) + 1) / log10(ratio))
        sum(n) = actual_start × (1 - ratio^n) / (1 - ratio)

    Арифметический ряд (цена k-й единицы = start + add × k):
        actual_start = start + owned × add
        b = actual_start - add / 2
        afford = floor((-b + sqrt(b² + 2 × add × resources)) / add)
        sum(n) = n / 2 × (2 × actual_start + (n - 1) × add)

    Эффективность покупки:
        efficiency = cost / current_rps + cost / delta_rps
"""

from xdecimal.core.domain.decimal import Decimal, DecimalSource

# =============================================================================
# ГЕОМЕТРИЧЕСКИЙ РЯД
# =============================================================================


def afford_geometric_series(
    resources_available: DecimalSource,
    price_start: DecimalSource,
    price_ratio: DecimalSource,
    current_owned: DecimalSource,
) -> Decimal:
    """
    Максимальное число единиц, доступных при геометрическом росте цены.

    Args:
        resources_available: Бюджет
        price_start: Цена первой единицы (при current_owned = 0)
        price_ratio: Множитель цены за единицу (> 1)
        current_owned: Уже купленных единиц

    Returns:
        floor(количества доступных единиц)

    Examples:
        >>> afford_geometric_series(100, 1, 2, 0).to_number()  # 1+2+4+...+32 = 63
        6.0
    """
    resources = Decimal.from_value(resources_available)
    ratio = Decimal.from_value(price_ratio)
    actual_start = Decimal.from_value(price_start).mul(ratio.pow(current_owned))

    count = resources.div(actual_start).mul(ratio.sub(1)).add(1).log10() / ratio.log10()
    return Decimal.from_double(count).floor()


def sum_geometric_series(
    num_items: DecimalSource,
    price_start: DecimalSource,
    price_ratio: DecimalSource,
    current_owned: DecimalSource,
) -> Decimal:
    """
    Стоимость num_items единиц при геометрическом росте цены.

    Examples:
        >>> sum_geometric_series(6, 1, 2, 0).to_number()
        63.0
    """
    ratio = Decimal.from_value(price_ratio)
    actual_start = Decimal.from_value(price_start).mul(ratio.pow(current_owned))
    return actual_start.mul(Decimal(1).sub(ratio.pow(num_items))).div(Decimal(1).sub(ratio))


# =============================================================================
# АРИФМЕТИЧЕСКИЙ РЯД
# =============================================================================


def afford_arithmetic_series(
    resources_available: DecimalSource,
    price_start: DecimalSource,
    price_add: DecimalSource,
    current_owned: DecimalSource,
) -> Decimal:
    """
    Максимальное число единиц, доступных при линейном росте цены.

    Args:
        resources_available: Бюджет
        price_start: Цена первой единицы (при current_owned = 0)
        price_add: Прирост цены за единицу (> 0)
        current_owned: Уже купленных единиц

    Returns:
        floor(количества доступных единиц)

    Examples:
        >>> afford_arithmetic_series(100, 10, 5, 0).to_number()  # 10+15+20+25+30 = 100
        5.0
    """
    add = Decimal.from_value(price_add)
    actual_start = Decimal.from_value(price_start).add(
        Decimal.from_value(current_owned).mul(add)
    )
    b = actual_start.sub(add.div(2))
    discriminant = b.pow(2).add(add.mul(resources_available).mul(2))
    return b.neg().add(discriminant.sqrt()).div(add).floor()


def sum_arithmetic_series(
    num_items: DecimalSource,
    price_start: DecimalSource,
    price_add: DecimalSource,
    current_owned: DecimalSource,
) -> Decimal:
    """
    Стоимость num_items единиц при линейном росте цены.

    Examples:
        >>> sum_arithmetic_series(4, 10, 5, 0).to_number()
        70.0
    """
    items = Decimal.from_value(num_items)
    add = Decimal.from_value(price_add)
    actual_start = Decimal.from_value(price_start).add(
        Decimal.from_value(current_owned).mul(add)
    )
    return items.div(2).mul(actual_start.mul(2).add(items.sub(1).mul(add)))


# =============================================================================
# ЭФФЕКТИВНОСТЬ ПОКУПКИ
# =============================================================================


def efficiency_of_purchase(
    cost: DecimalSource,
    current_rps: DecimalSource,
    delta_rps: DecimalSource,
) -> Decimal:
    """
    Эффективность покупки: время окупить покупку плюс время окупить прирост.

    Меньше — лучше.

    Args:
        cost: Стоимость покупки
        current_rps: Текущий доход в секунду
        delta_rps: Прирост дохода в секунду от покупки

    Examples:
        >>> efficiency_of_purchase(100, 10, 5).to_number()  # 100/10 + 100/5
        30.0
    """
    cost = Decimal.from_value(cost)
    return cost.div(current_rps).add(cost.div(delta_rps))
