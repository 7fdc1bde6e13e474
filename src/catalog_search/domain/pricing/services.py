# 📦 catalog_search/domain/pricing/services.py
"""
📦 PricingHelper: спільний розрахунок ціни для товару та його комбінацій.

🔹 Запитує у сховища сирі ціни без/з податком для (товар, комбінація?) у цільовій валюті.
🔹 Визначає точність через `IPrecisionPolicy` від кількості знаків валюти.
🔹 Однаково округлює обидві ціни; форматує лише сиру ціну без податку.
"""

from __future__ import annotations

# 🔠 Системні імпорти
import logging                                                # 🪵 Логування кроків розрахунку
from typing import Optional

# 🧩 Внутрішні модулі проєкту
from catalog_search.domain.currency.interfaces import CurrencyRecord
from catalog_search.shared.utils.logger import LOG_NAME       # 🏷️ Базове імʼя логера
from .interfaces import IPrecisionPolicy, IPriceFormatter, IPriceSource, ProductPrice
from .rounding import DEFAULT_ROUNDING, round_price, to_decimal

logger = logging.getLogger(f"{LOG_NAME}.domain.pricing")      # 🧾 Іменований логер сервісу


# ================================
# 🏛️ ДОМЕННИЙ СЕРВІС
# ================================
class PricingHelper:
    """💸 Розрахунок і округлення цін для одного товару або комбінації."""

    def __init__(
        self,
        price_source: IPriceSource,
        formatter: IPriceFormatter,
        precision_policy: IPrecisionPolicy,
        *,
        rounding: str = DEFAULT_ROUNDING,
    ) -> None:
        """
        ⚙️ Привʼязує сервіс до джерела цін, форматера та політики точності.

        Args:
            price_source: Сховище, що віддає сирі ціни.
            formatter: Локалізоване форматування ціни без податку.
            precision_policy: Кількість знаків валюти → точність округлення.
            rounding: Режим округлення `decimal` (ROUND_HALF_UP за замовчуванням).
        """
        self._prices = price_source                                     # 💵 Сирі ціни
        self._formatter = formatter                                     # 🖨️ Форматер
        self._precision = precision_policy                              # 🎯 Політика точності
        self._rounding = rounding                                       # ➗ Режим округлення

    # ================================
    # 🔢 ПУБЛІЧНИЙ API
    # ================================
    def precision_for(self, currency: CurrencyRecord) -> int:
        """Точність округлення для валюти."""
        return self._precision.get_precision(currency.precision)

    def price_for(
        self,
        product_id: int,
        currency: CurrencyRecord,
        attribute_id: Optional[int] = None,
    ) -> ProductPrice:
        """
        🚀 Повертає округлені ціни без/з податком і відформатовану ціну без податку.

        Args:
            product_id: Ідентифікатор товару.
            currency: Резолвлена цільова валюта (id, ISO-код, кількість знаків).
            attribute_id: Комбінація товару або None для базової ціни.

        Returns:
            ProductPrice: Округлена пара цін та рядок для показу.
        """
        raw_excl = self._prices.get_product_price(
            product_id, False, attribute_id, currency_id=currency.currency_id
        )                                                               # 💵 Сира ціна без податку
        raw_incl = self._prices.get_product_price(
            product_id, True, attribute_id, currency_id=currency.currency_id
        )                                                               # 💵 Сира ціна з податком

        precision = self.precision_for(currency)                        # 🎯 Точність від політики
        excl = round_price(raw_excl, precision, self._rounding)
        incl = round_price(raw_incl, precision, self._rounding)
        formatted = self._formatter.format(to_decimal(raw_excl), currency.iso_code)  # 🖨️ Сира ціна без податку, форматер округлює сам

        logger.debug(
            "💸 price_for product=%s attribute=%s | raw=%s/%s → %s/%s %s (precision=%s)",
            product_id,
            attribute_id,
            raw_excl,
            raw_incl,
            excl,
            incl,
            currency.iso_code,
            precision,
        )
        return ProductPrice(
            excluding_tax=excl,
            including_tax=incl,
            formatted_excluding_tax=formatted,
        )
