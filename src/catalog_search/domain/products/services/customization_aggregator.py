# ✍️ catalog_search/domain/products/services/customization_aggregator.py
"""
✍️ CustomizationAggregator: поля кастомізації товару активною мовою.
"""

from __future__ import annotations

import logging
from typing import Dict

from catalog_search.domain.products.entities import ProductCustomizationField
from catalog_search.domain.products.interfaces import ICatalogStore
from catalog_search.domain.products.rows import NO_ROWS, CustomizationFieldRow
from catalog_search.errors.custom_errors import MalformedCatalogDataError
from catalog_search.shared.utils.logger import LOG_NAME

logger = logging.getLogger(f"{LOG_NAME}.domain.customization")


class CustomizationAggregator:
    """Згортає групи `type_id → поля` у мапу `field_id → ProductCustomizationField`."""

    def __init__(self, store: ICatalogStore) -> None:
        self._store = store

    def aggregate(self, product_id: int, language_id: int) -> Dict[int, ProductCustomizationField]:
        groups = self._store.get_customization_fields(product_id)
        fields: Dict[int, ProductCustomizationField] = {}
        if groups is NO_ROWS:
            return fields

        for type_id, type_fields in groups.items():
            for localized in type_fields:
                row = localized.get(language_id)                        # 🌍 Кожне поле читається один раз
                if row is None:
                    raise MalformedCatalogDataError(
                        product_id, f"customization field has no entry for language {language_id}"
                    )
                if not isinstance(row, CustomizationFieldRow):
                    raise MalformedCatalogDataError(
                        product_id, "customization row is not a parsed CustomizationFieldRow", details=repr(row)
                    )
                fields[row.field_id] = ProductCustomizationField(
                    field_id=row.field_id,
                    field_type_id=int(type_id),
                    label=row.label,
                    required=row.required,
                )

        logger.debug("✍️ product=%s: %d customization field(s)", product_id, len(fields))
        return fields
