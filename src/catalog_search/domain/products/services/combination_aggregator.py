# 🎨 catalog_search/domain/products/services/combination_aggregator.py
"""
🎨 CombinationAggregator: згортає рядки комбінацій у мапу `combination_id → ProductCombination`.

🔹 Рядки з однаковим `attribute_id` зливаються: назва атрибута дописується через розділювач
    (`"Red" + "Large" → "Red - Large"`), решта полів береться з останнього рядка.
🔹 Ціни перераховуються для кожного рядка через `PricingHelper` незалежно від ціни товару.
🔹 `NO_ROWS` від сховища → порожня мапа, не помилка.
"""

from __future__ import annotations

# 🔠 Системні імпорти
import logging                                                          # 🧾 Логи згортання
from typing import Dict

# 🧩 Внутрішні модулі проєкту
from catalog_search.domain.currency.interfaces import CurrencyRecord
from catalog_search.domain.pricing.services import PricingHelper
from catalog_search.domain.products.entities import ProductCombination
from catalog_search.domain.products.interfaces import ICatalogStore
from catalog_search.domain.products.rows import NO_ROWS, CombinationRow
from catalog_search.errors.custom_errors import MalformedCatalogDataError
from catalog_search.shared.utils.logger import LOG_NAME

logger = logging.getLogger(f"{LOG_NAME}.domain.combinations")

DEFAULT_LABEL_SEPARATOR = " - "


class CombinationAggregator:
    """🎨 Дедуплікує та оцінює комбінації одного товару."""

    def __init__(
        self,
        store: ICatalogStore,
        pricing: PricingHelper,
        *,
        label_separator: str = DEFAULT_LABEL_SEPARATOR,
    ) -> None:
        self._store = store                                             # 🗄️ Джерело рядків
        self._pricing = pricing                                         # 💸 Ціни комбінацій
        self._separator = label_separator                               # ➖ Розділювач атрибутів

    def aggregate(self, product_id: int, currency: CurrencyRecord) -> Dict[int, ProductCombination]:
        """
        Повертає впорядковану (за першою появою) мапу комбінацій товару.

        Args:
            product_id: Ідентифікатор товару.
            currency: Цільова валюта цін.

        Returns:
            Dict[int, ProductCombination]: Акумулятор; заморожується у `FoundProduct`.
        """
        rows = self._store.get_attribute_combinations(product_id)
        combinations: Dict[int, ProductCombination] = {}
        if rows is NO_ROWS:                                             # 🚫 Комбінацій немає
            logger.debug("🎨 product=%s: no combinations", product_id)
            return combinations

        for row in rows:                                                # 🔁 Порядок рядків = порядок атрибутів у назві
            if not isinstance(row, CombinationRow):
                raise MalformedCatalogDataError(
                    product_id, "combination row is not a parsed CombinationRow", details=repr(row)
                )
            label = row.attribute_name
            existing = combinations.get(row.attribute_id)
            if existing is not None:                                    # ➕ Ще один вимір тієї ж комбінації
                label = f"{existing.attribute_label}{self._separator}{label}"

            price = self._pricing.price_for(product_id, currency, row.attribute_id)
            # dict зберігає позицію першої вставки при перезаписі ключа
            combinations[row.attribute_id] = ProductCombination(
                combination_id=row.attribute_id,
                attribute_label=label,
                quantity_in_stock=row.quantity,
                formatted_price_excluding_tax=price.formatted_excluding_tax,
                price_excluding_tax=price.excluding_tax,
                price_including_tax=price.including_tax,
                stock_location=row.location,
                reference=row.reference,
            )
            logger.debug("🎨 product=%s combination=%s label=%r", product_id, row.attribute_id, label)

        return combinations
