# 💸 catalog_search/domain/pricing/__init__.py
"""
💸 Пакет `domain.pricing` публікує контракти, DTO, утиліти та сервіс для ціноутворення.

🔹 `interfaces.py`: ProductPrice, IPriceSource, IPriceFormatter, IPrecisionPolicy.
🔹 `rounding.py`: `to_decimal`, `round_price`, режими округлення.
🔹 `precision.py`: `ComputingPrecision` (політика точності).
🔹 `services.py`: `PricingHelper`.
"""

# 🧩 Внутрішні модулі проєкту
from .interfaces import (                                   # 🧱 DTO та контракти
    IPrecisionPolicy,
    IPriceFormatter,
    IPriceSource,
    ProductPrice,
    RawPrice,
)
from .precision import ComputingPrecision                   # 🎯 Політика точності
from .rounding import (                                     # ➗ Утиліти округлення
    DEFAULT_ROUNDING,
    ROUNDING_MODES,
    resolve_rounding,
    round_price,
    to_decimal,
)
from .services import PricingHelper                         # 💼 Сервіс розрахунку


# ================================
# 📤 ПУБЛІЧНИЙ API ПАКЕТА
# ================================
__all__ = [
    # DTO / типи
    "ProductPrice",
    "RawPrice",
    # Контракти
    "IPriceSource",
    "IPriceFormatter",
    "IPrecisionPolicy",
    # Сервіси і правила
    "ComputingPrecision",
    "PricingHelper",
    # Утиліти
    "DEFAULT_ROUNDING",
    "ROUNDING_MODES",
    "resolve_rounding",
    "round_price",
    "to_decimal",
]
