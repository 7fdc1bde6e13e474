# ➗ catalog_search/domain/pricing/rounding.py
"""
➗ Утиліти Decimal-округлення цін.

🔹 `to_decimal`: безпечне приведення сирої ціни до Decimal через `str()`.
🔹 `round_price`: квантування до заданої точності (за замовчуванням ROUND_HALF_UP).
🔹 `resolve_rounding`: назва режиму з конфігу → константа модуля `decimal`.
"""

from __future__ import annotations

# 🔠 Системні імпорти
import logging
from decimal import (
    ROUND_CEILING,
    ROUND_DOWN,
    ROUND_FLOOR,
    ROUND_HALF_DOWN,
    ROUND_HALF_EVEN,
    ROUND_HALF_UP,
    ROUND_UP,
    Decimal,
    InvalidOperation,
)
from typing import Dict

# 🧩 Внутрішні модулі проєкту
from catalog_search.shared.utils.logger import LOG_NAME
from .interfaces import RawPrice

logger = logging.getLogger(f"{LOG_NAME}.domain.pricing.rounding")

# ================================
# 📏 РЕЖИМИ ОКРУГЛЕННЯ
# ================================
ROUNDING_MODES: Dict[str, str] = {
    "half_up": ROUND_HALF_UP,
    "half_even": ROUND_HALF_EVEN,
    "half_down": ROUND_HALF_DOWN,
    "up": ROUND_UP,
    "down": ROUND_DOWN,
    "ceiling": ROUND_CEILING,
    "floor": ROUND_FLOOR,
}
DEFAULT_ROUNDING = ROUND_HALF_UP


def resolve_rounding(name: str) -> str:
    """Перетворює назву режиму (`half_up`) у константу `decimal`."""
    key = (name or "").strip().lower()
    if key not in ROUNDING_MODES:
        raise ValueError(f"Unknown rounding mode {name!r}; expected one of {sorted(ROUNDING_MODES)}")
    return ROUNDING_MODES[key]


def to_decimal(value: RawPrice) -> Decimal:
    """🧮 Приводить сиру ціну до Decimal через рядкове представлення (без артефактів float)."""
    if isinstance(value, Decimal):
        return value
    if isinstance(value, bool):                                     # 🚫 bool: підклас int, але не ціна
        raise ValueError(f"Invalid price value: {value!r}")
    try:
        return Decimal(str(value).strip())
    except (InvalidOperation, AttributeError, ValueError) as exc:
        logger.error("❌ Неможливо привести до Decimal: %r", value)
        raise ValueError(f"Invalid price value: {value!r}") from exc


def round_price(amount: RawPrice, precision: int, rounding: str = DEFAULT_ROUNDING) -> Decimal:
    """
    Округлює суму до `precision` знаків після коми.

    >>> round_price("19.995", 2)
    Decimal('20.00')
    >>> round_price("19.995", 0)
    Decimal('20')
    """
    if precision < 0:
        raise ValueError(f"precision must be >= 0, got {precision}")
    quantum = Decimal(1).scaleb(-precision)                         # 📐 10^-precision
    rounded = to_decimal(amount).quantize(quantum, rounding=rounding)
    logger.debug("📐 round_price %s → %s (precision=%s, rounding=%s)", amount, rounded, precision, rounding)
    return rounded


__all__ = [
    "ROUNDING_MODES",
    "DEFAULT_ROUNDING",
    "resolve_rounding",
    "to_decimal",
    "round_price",
]
