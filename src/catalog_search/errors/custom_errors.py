# 🚨 catalog_search/errors/custom_errors.py
"""
🚨 Ієрархія доменних винятків пошуку товарів.

🔹 `AppError`: базовий клас з `message`/`details` та `to_log_extra()` для логів.
🔹 `ProductSearchQueryError`: невалідна фраза, ліміт або ISO-код у запиті.
🔹 `CurrencyNotFoundError`: ISO-код не має відповідної валюти у сховищі.
🔹 `StoreUnavailableError`: збій введення/виведення колаборатора (сховище, індекс).
🔹 `MalformedCatalogDataError`: структурно неконсистентні дані каталогу.
"""

from __future__ import annotations

# 🔠 Системні імпорти
import logging														# 🧾 Логування створення винятків
from typing import Dict, Optional									# 📐 Типізація

# 🧩 Внутрішні модулі проєкту
from catalog_search.shared.utils.logger import LOG_NAME				# 🏷️ Спільний неймспейс логів


# ================================
# 🧾 ЛОГЕР
# ================================
logger = logging.getLogger(f"{LOG_NAME}.errors")					# 🧾 Локальний логер


# ================================
# ⚠️ КОДИ ПОМИЛОК
# ================================
class ErrorCode:
    """⚠️ Стабільні коди для логів і метрик."""

    QUERY = "invalid_query"											# 🔎 Невалідний запит
    CURRENCY = "currency_not_found"									# 💱 Валюта не знайдена
    STORE = "store_unavailable"										# 🗄️ Сховище недоступне
    CATALOG = "malformed_catalog_data"								# 🧩 Пошкоджені дані каталогу
    UNKNOWN = "unknown_error"										# ❓ Резервний код


# ================================
# 🧠 БАЗОВИЙ ВИНЯТОК
# ================================
class AppError(Exception):
    """🧠 Базовий виняток пакета."""

    code: str = ErrorCode.UNKNOWN

    def __init__(self, message: str, *, details: Optional[str] = None) -> None:
        super().__init__(message)
        self.message = message										# 🗒️ Людиночитний опис
        self.details = details										# 🔍 Технічні подробиці

    def to_log_extra(self) -> Dict[str, object]:
        """📦 Формує словник для `logger.*(..., extra=...)`."""
        extra: Dict[str, object] = {"error_code": self.code}
        if self.details:
            extra["details"] = self.details
        return extra

    def __str__(self) -> str:
        return self.message if not self.details else f"{self.message} ({self.details})"


# ================================
# 🧾 КОНКРЕТНІ ВИНЯТКИ
# ================================
class ProductSearchQueryError(AppError):
    """🔎 Запит пошуку не пройшов валідацію."""

    code = ErrorCode.QUERY


class CurrencyNotFoundError(AppError):
    """💱 Запитаний ISO-код не відповідає жодній збереженій валюті."""

    code = ErrorCode.CURRENCY

    def __init__(self, iso_code: str, *, details: Optional[str] = None) -> None:
        super().__init__(f"Currency with ISO code {iso_code!r} was not found", details=details)
        self.iso_code = iso_code

    def to_log_extra(self) -> Dict[str, object]:
        extra = super().to_log_extra()
        extra["iso_code"] = self.iso_code
        return extra


class StoreUnavailableError(AppError):
    """🗄️ Колаборатор (сховище або індекс) не відповів."""

    code = ErrorCode.STORE

    def __init__(self, operation: str, *, details: Optional[str] = None) -> None:
        super().__init__(f"Catalog backend unavailable during {operation}", details=details)
        self.operation = operation

    def to_log_extra(self) -> Dict[str, object]:
        extra = super().to_log_extra()
        extra["operation"] = self.operation
        return extra


class MalformedCatalogDataError(AppError):
    """🧩 Рядки товару/комбінацій/кастомізації структурно неконсистентні."""

    code = ErrorCode.CATALOG

    def __init__(self, product_id: int, reason: str, *, details: Optional[str] = None) -> None:
        super().__init__(f"Malformed catalog data for product {product_id}: {reason}", details=details)
        self.product_id = product_id
        self.reason = reason
        logger.debug("🧩 MalformedCatalogDataError created", extra={"product_id": product_id, "reason": reason})

    def to_log_extra(self) -> Dict[str, object]:
        extra = super().to_log_extra()
        extra["product_id"] = self.product_id
        return extra


# ================================
# 📤 ПУБЛІЧНИЙ API
# ================================
__all__ = [
    "ErrorCode",
    "AppError",
    "ProductSearchQueryError",
    "CurrencyNotFoundError",
    "StoreUnavailableError",
    "MalformedCatalogDataError",
]
