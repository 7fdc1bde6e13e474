# 🧾 catalog_search/config/search_options.py
"""
🧾 Налаштування обробника пошуку.

🔹 Іммутабельні опції: стеля ліміту, розділювач атрибутів, режим округлення, локаль форматера.
🔹 Зчитування з ENV (`CATALOG_SEARCH_*`), зі словника конфігу та мердж поверх базових значень.
"""

from __future__ import annotations

# 🔠 Системні імпорти
import logging                                                      # 🧾 Логування валідації
import os                                                           # 🌱 Зчитування ENV
from dataclasses import asdict, dataclass
from typing import Any, Dict, Mapping, Optional

# 🧩 Внутрішні модулі проєкту
from catalog_search.domain.pricing.rounding import ROUNDING_MODES, resolve_rounding
from catalog_search.infrastructure.formatting.price_formatter import LOCALES
from catalog_search.shared.utils.logger import LOG_NAME

logger = logging.getLogger(f"{LOG_NAME}.config.search_options")


def _to_int(val: Optional[str], default_val: int) -> int:
    """🔢 Конвертує ENV-рядок у int; некоректне значення → дефолт."""
    if val is None:
        return default_val
    try:
        return int(val)
    except ValueError:
        logger.warning("⚠️ Неможливо перетворити '%s' у int → fallback=%s.", val, default_val)
        return default_val


# ================================
# 🧱 МОДЕЛЬ ОПЦІЙ
# ================================
@dataclass(frozen=True, slots=True)
class SearchOptions:
    """🧱 Іммутабельні параметри пошуку."""

    max_results_limit: int = 50                                     # 🔢 Стеля для resultsLimit
    label_separator: str = " - "                                    # ➖ Між атрибутами комбінації
    rounding: str = "half_up"                                       # ➗ Назва режиму округлення
    locale: str = "uk"                                              # 🌍 Локаль форматера цін

    def __post_init__(self) -> None:
        if isinstance(self.max_results_limit, bool) or not isinstance(self.max_results_limit, int):
            raise ValueError(f"max_results_limit must be an int, got {self.max_results_limit!r}")
        if self.max_results_limit <= 0:
            raise ValueError("max_results_limit must be > 0")
        if not isinstance(self.label_separator, str) or not self.label_separator:
            raise ValueError("label_separator must be a non-empty string")
        if self.rounding.strip().lower() not in ROUNDING_MODES:
            raise ValueError(f"rounding must be one of {sorted(ROUNDING_MODES)}, got: {self.rounding!r}")
        if self.locale.strip().lower() not in LOCALES:
            raise ValueError(f"locale must be one of {sorted(LOCALES)}, got: {self.locale!r}")

    @property
    def rounding_mode(self) -> str:
        """Константа модуля `decimal` для `rounding`."""
        return resolve_rounding(self.rounding)

    # ================================
    # 🧱 КОНСТРУКТОРИ
    # ================================
    @classmethod
    def from_env(cls, prefix: str = "CATALOG_SEARCH_", base: Optional["SearchOptions"] = None) -> "SearchOptions":
        """🌱 Будує опції з ENV поверх `base` (або дефолтів)."""
        defaults = base or cls()
        options = cls(
            max_results_limit=_to_int(os.getenv(f"{prefix}MAX_RESULTS_LIMIT"), defaults.max_results_limit),
            label_separator=os.getenv(f"{prefix}LABEL_SEPARATOR", defaults.label_separator),
            rounding=os.getenv(f"{prefix}ROUNDING", defaults.rounding),
            locale=os.getenv(f"{prefix}LOCALE", defaults.locale),
        )
        logger.debug("🌱 SearchOptions зібрано з ENV (prefix=%s): %s", prefix, options)
        return options

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> "SearchOptions":
        """🧾 Складання опцій із словника (зайві ключі ігноруються)."""
        if not data:
            return cls()
        keys = {"max_results_limit", "label_separator", "rounding", "locale"}
        kwargs: Dict[str, Any] = {key: data[key] for key in keys if key in data and data[key] is not None}
        return cls(**kwargs)

    # ================================
    # 🧰 УТИЛІТИ ЕКЗЕМПЛЯРА
    # ================================
    def merge(self, **overrides: Any) -> "SearchOptions":
        """🔀 Новий екземпляр із перекритими полями; None ігнорується."""
        base = self.to_kwargs()
        base.update({key: value for key, value in overrides.items() if value is not None})
        return SearchOptions.from_dict(base)

    def to_kwargs(self) -> Dict[str, Any]:
        return asdict(self)
