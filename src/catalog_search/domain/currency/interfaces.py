# 💱 catalog_search/domain/currency/interfaces.py
"""
💱 Value-обʼєкти валют для пошуку товарів.

🔹 `CurrencyCode`: синтаксично валідний ISO 4217 код (три латинські літери, upper case).
🔹 `CurrencyRecord`: збережена валюта: ідентифікатор, ISO-код і кількість десяткових знаків.
"""

from __future__ import annotations

# 🔠 Системні імпорти
import logging                                                      # 🧾 Логи валідації
import re                                                           # 🔍 Перевірка формату ISO
from dataclasses import dataclass                                   # 🧱 Іммʼютабельні DTO

# 🧩 Внутрішні модулі проєкту
from catalog_search.errors.custom_errors import ProductSearchQueryError
from catalog_search.shared.utils.logger import LOG_NAME

logger = logging.getLogger(f"{LOG_NAME}.domain.currency")

_ISO_PATTERN = re.compile(r"^[A-Za-z]{3}$")                         # 🔤 Рівно три ASCII-літери


# ================================
# 🔤 VALUE OBJECT: ISO-КОД
# ================================
@dataclass(frozen=True, slots=True)
class CurrencyCode:
    """Іммʼютабельний ISO 4217 alpha-код. Резолв у сховищі все ще може не вдатися."""

    value: str

    def __post_init__(self) -> None:
        raw = (self.value or "").strip() if isinstance(self.value, str) else ""
        if not _ISO_PATTERN.match(raw):
            logger.debug("❌ CurrencyCode: %r не є ISO 4217 кодом", self.value)
            raise ProductSearchQueryError(
                "Currency ISO code must be exactly three letters",
                details=f"got {self.value!r}",
            )
        object.__setattr__(self, "value", raw.upper())              # 🔐 Фіксуємо нормалізоване значення

    def __str__(self) -> str:
        return self.value


# ================================
# 🏦 ЗБЕРЕЖЕНА ВАЛЮТА
# ================================
@dataclass(frozen=True, slots=True)
class CurrencyRecord:
    """Валюта так, як її повертає сховище каталогу."""

    currency_id: int                                                # 🆔 Ідентифікатор у сховищі
    iso_code: str                                                   # 🔤 ISO 4217
    precision: int = 2                                              # 🔢 Природна кількість десяткових знаків

    def __post_init__(self) -> None:
        if self.precision < 0:
            raise ValueError(f"Currency precision must be >= 0, got {self.precision}")


__all__ = ["CurrencyCode", "CurrencyRecord"]
