"""
Тесты для кэша степеней десяти

Проверяет:
1. Корректность значений таблицы
2. Однократное построение (один и тот же tuple)
3. Потокобезопасную ленивую инициализацию
"""

from concurrent.futures import ThreadPoolExecutor

import pytest

from xdecimal.core.config import NUMBER_EXP_MAX, NUMBER_EXP_MIN
from xdecimal.core.math import powers
from xdecimal.core.math.powers import power_of_10, powers_of_10


class TestPowerOf10:
    """Тесты для power_of_10"""

    @pytest.mark.parametrize(
        "power,expected",
        [(0, 1.0), (3, 1000.0), (-2, 0.01), (308, 1e308), (-323, 1e-323)],
    )
    def test_values(self, power: int, expected: float) -> None:
        assert power_of_10(power) == expected

    def test_every_entry_matches_literal(self) -> None:
        """Каждый элемент — корректно округлённый литерал 1e<k>"""
        table = powers_of_10()
        for k in range(NUMBER_EXP_MIN, NUMBER_EXP_MAX + 1):
            assert table[k - NUMBER_EXP_MIN] == float(f"1e{k}")


class TestPowersTable:
    """Тесты для powers_of_10"""

    def test_table_length(self) -> None:
        assert len(powers_of_10()) == NUMBER_EXP_MAX - NUMBER_EXP_MIN + 1

    def test_table_built_once(self) -> None:
        """Повторные обращения возвращают тот же объект"""
        assert powers_of_10() is powers_of_10()

    def test_concurrent_first_access(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Конкурентное первое обращение строит одну таблицу"""
        monkeypatch.setattr(powers, "_table", None)

        with ThreadPoolExecutor(max_workers=8) as pool:
            tables = list(pool.map(lambda _: powers_of_10(), range(32)))

        assert all(table is tables[0] for table in tables)
        assert tables[0][-NUMBER_EXP_MIN] == 1.0
