"""
Powers of 10 — Кэш степеней десяти

Таблица 10^k для k в [NUMBER_EXP_MIN, NUMBER_EXP_MAX], индекс = k - NUMBER_EXP_MIN.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Таблица строится один раз (ленивая инициализация под lock)
2. После построения таблица не изменяется (tuple)
3. Каждый элемент — корректно округлённый double литерала "1e<k>"
4. Вызывающий код передаёт только k из допустимого диапазона
"""

import threading
from typing import Optional

from xdecimal.core.config import NUMBER_EXP_MAX, NUMBER_EXP_MIN

_table: Optional[tuple[float, ...]] = None
_table_lock = threading.Lock()


def _build_table() -> tuple[float, ...]:
    # float("1e-324") == 0.0, ниже этого double не различает степени
    return tuple(float(f"1e{k}") for k in range(NUMBER_EXP_MIN, NUMBER_EXP_MAX + 1))


def powers_of_10() -> tuple[float, ...]:
    """
    Таблица степеней десяти (строится при первом обращении).

    Returns:
        Неизменяемый tuple длины NUMBER_EXP_MAX - NUMBER_EXP_MIN + 1
    """
    global _table
    table = _table
    if table is None:
        with _table_lock:
            if _table is None:
                _table = _build_table()
            table = _table
    return table


def power_of_10(power: int) -> float:
    """
    10^power из кэша.

    Args:
        power: Целая степень в [NUMBER_EXP_MIN, NUMBER_EXP_MAX]

    Returns:
        10^power как double

    Examples:
        >>> power_of_10(3)
        1000.0
        >>> power_of_10(-2)
        0.01
    """
    return powers_of_10()[power - NUMBER_EXP_MIN]
