"""
DecimalConfig — Политики и лимиты extended-range Decimal

Модуль задаёт:
- Фундаментальные константы представления (значимые разряды, диапазон double)
- exp_limit: максимальный экспонент (9e15 или 1.79e308)
- negative_power_policy: результат pow() для отрицательного основания
  с нецелым показателем

Активная конфигурация хранится в ContextVar (своя для каждого потока/task),
переключение только через use_config(). Глобального изменяемого состояния нет.
"""

import contextvars
import logging
from contextlib import contextmanager
from enum import Enum
from typing import Final, Iterator, Optional

from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)

# =============================================================================
# КОНСТАНТЫ ПРЕДСТАВЛЕНИЯ
# =============================================================================

# Бюджет значимых разрядов (ширина мантиссы double)
MAX_SIGNIFICANT_DIGITS: Final[int] = 17

# Диапазон десятичных экспонент native double
NUMBER_EXP_MAX: Final[int] = 308
NUMBER_EXP_MIN: Final[int] = -324

# Толерантность привязки к целому при конверсии в double
ROUND_TOLERANCE: Final[float] = 1e-10

# exp_limit: 2^53, экспоненты остаются точными целыми double
EXP_LIMIT_SAFE_INTEGER: Final[float] = 9e15

# exp_limit: максимум double, величины до 10^(1.79e308)
EXP_LIMIT_DOUBLE: Final[float] = 1.79e308


# =============================================================================
# ENUMS
# =============================================================================


class NegativePowerPolicy(str, Enum):
    """Результат pow() для отрицательного основания и нецелого показателя"""

    NAN = "nan"
    SIGNED = "signed"  # -(|base| ** exp)


# =============================================================================
# CONFIG MODEL
# =============================================================================


class DecimalConfig(BaseModel):
    """
    Конфигурация арифметики Decimal.

    Immutable модель (frozen=True): изменение = новый экземпляр.
    """

    exp_limit: float = Field(
        EXP_LIMIT_DOUBLE,
        gt=0,
        allow_inf_nan=False,
        description="Экспонент насыщения в Infinity (и -exp_limit для нуля)",
    )
    negative_power_policy: NegativePowerPolicy = Field(
        NegativePowerPolicy.NAN,
        description="pow() отрицательного основания с нецелым показателем",
    )

    model_config = {"frozen": True}  # Immutable

    @classmethod
    def safe_integer_exponents(cls) -> "DecimalConfig":
        """Вариант с exp_limit = 9e15 (экспоненты точны как целые)"""
        return cls(exp_limit=EXP_LIMIT_SAFE_INTEGER)


DEFAULT_CONFIG: Final[DecimalConfig] = DecimalConfig()

_active_config: contextvars.ContextVar[DecimalConfig] = contextvars.ContextVar(
    "xdecimal_config", default=DEFAULT_CONFIG
)


def get_config() -> DecimalConfig:
    """Активная конфигурация текущего контекста"""
    return _active_config.get()


@contextmanager
def use_config(
    config: Optional[DecimalConfig] = None, **overrides: object
) -> Iterator[DecimalConfig]:
    """
    Временное переключение конфигурации.

    Args:
        config: Базовая конфигурация (default: активная)
        **overrides: Поля для замены (валидируются pydantic)

    Yields:
        Активированная конфигурация

    Examples:
        >>> with use_config(exp_limit=EXP_LIMIT_SAFE_INTEGER):
        ...     get_config().exp_limit
        9000000000000000.0
    """
    base = config if config is not None else get_config()
    if overrides:
        base = DecimalConfig(**{**base.model_dump(), **overrides})

    logger.debug("Switching decimal config: %s", base)
    token = _active_config.set(base)
    try:
        yield base
    finally:
        _active_config.reset(token)
