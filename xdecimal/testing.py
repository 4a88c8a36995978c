"""
Testing helpers — генератор случайных Decimal для property-тестов.

Не используется арифметикой; только тестами и fuzz-проверками.
"""

import math
import random
from typing import Optional

from xdecimal.core.domain.decimal import ZERO, Decimal
from xdecimal.core.math.numerical_safeguards import round_half_up


def random_decimal_for_testing(
    abs_max_exponent: int, rng: Optional[random.Random] = None
) -> Decimal:
    """
    Случайный Decimal с экспонентой в [-abs_max_exponent, abs_max_exponent).

    Распределение:
    - 5% — ноль
    - 10% ненулевых — целая мантисса
    - знак равновероятен

    Args:
        abs_max_exponent: Граница модуля экспоненты
        rng: Источник случайности (для воспроизводимости передавать seeded Random)

    Returns:
        Нормализованный Decimal
    """
    rng = rng if rng is not None else random.Random()

    if rng.random() * 20 < 1:
        return ZERO

    mantissa = rng.random() * 10
    if rng.random() * 10 < 1:
        mantissa = round_half_up(mantissa)
    mantissa = math.copysign(mantissa, rng.random() * 2 - 1)

    exponent = math.floor(rng.random() * abs_max_exponent * 2) - abs_max_exponent
    return Decimal.from_mantissa_exponent(mantissa, exponent)
