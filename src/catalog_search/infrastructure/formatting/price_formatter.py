# 🖨️ catalog_search/infrastructure/formatting/price_formatter.py
"""
🖨️ LocalePriceFormatter: людиночитне представлення ціни для вітрини.

🔹 Кількість знаків береться з таблиці валют (`_CCY_DECIMALS`), за замовчуванням 2.
🔹 Локаль визначає роздільник груп, десятковий роздільник та позицію символу.
🔹 Невідомий ISO-код форматується з самим кодом замість символу.
"""

from __future__ import annotations

# 🔠 Системні імпорти
import logging                                                      # 🧾 Логи форматування
from dataclasses import dataclass                                   # 🧱 Опис локалі
from decimal import Decimal                                         # 💰 Точні суми
from typing import Dict, Mapping, Optional

# 🧩 Внутрішні модулі проєкту
from catalog_search.domain.pricing.interfaces import IPriceFormatter
from catalog_search.domain.pricing.rounding import DEFAULT_ROUNDING, round_price, to_decimal
from catalog_search.shared.utils.logger import LOG_NAME

logger = logging.getLogger(f"{LOG_NAME}.infrastructure.formatting")


# ================================
# 📏 ТАБЛИЦІ ВАЛЮТ І ЛОКАЛЕЙ
# ================================
_CCY_DECIMALS: Dict[str, int] = {
    "UAH": 2,                                                       # 🇺🇦 Гривня
    "USD": 2,                                                       # 🇺🇸 Долар
    "EUR": 2,                                                       # 🇪🇺 Євро
    "GBP": 2,                                                       # 🇬🇧 Фунт
    "PLN": 2,                                                       # 🇵🇱 Злотий
    "JPY": 0,                                                       # 🇯🇵 Єна
}

_CCY_SYMBOLS: Dict[str, str] = {
    "UAH": "₴",
    "USD": "$",
    "EUR": "€",
    "GBP": "£",
    "PLN": "zł",
    "JPY": "¥",
}


@dataclass(frozen=True, slots=True)
class LocaleFormat:
    """Правила запису числа й символу валюти для однієї локалі."""

    group_separator: str
    decimal_separator: str
    pattern: str                                                    # 🧩 `{amount}` та `{symbol}`


LOCALES: Dict[str, LocaleFormat] = {
    "uk": LocaleFormat(" ", ",", "{amount} {symbol}"),
    "en": LocaleFormat(",", ".", "{symbol}{amount}"),
    "fr": LocaleFormat(" ", ",", "{amount} {symbol}"),
    "de": LocaleFormat(".", ",", "{amount} {symbol}"),
    "pl": LocaleFormat(" ", ",", "{amount} {symbol}"),
}


# ================================
# 🖨️ ФОРМАТЕР
# ================================
class LocalePriceFormatter(IPriceFormatter):
    """🖨️ Форматує Decimal-суму під локаль і валюту."""

    def __init__(
        self,
        locale: str = "en",
        *,
        currency_digits: Optional[Mapping[str, int]] = None,
        rounding: str = DEFAULT_ROUNDING,
    ) -> None:
        key = (locale or "").strip().lower().replace("_", "-").split("-")[0]
        if key not in LOCALES:
            raise ValueError(f"Unsupported locale: {locale!r}. Known: {sorted(LOCALES)}")
        self._locale = key
        self._format = LOCALES[key]
        self._digits = {**_CCY_DECIMALS, **{k.upper(): int(v) for k, v in (currency_digits or {}).items()}}
        self._rounding = rounding

    @property
    def locale(self) -> str:
        return self._locale

    def digits_for(self, currency_iso_code: str) -> int:
        return self._digits.get(currency_iso_code.upper(), 2)

    def format(self, amount: Decimal, currency_iso_code: str) -> str:
        code = currency_iso_code.upper()
        digits = self.digits_for(code)
        value = round_price(to_decimal(amount), digits, self._rounding)

        sign = "-" if value < 0 else ""
        plain = f"{abs(value):,.{digits}f}"                         # 🔢 `1,234.50` як проміжна форма
        integer, _, fraction = plain.partition(".")
        number = integer.replace(",", self._format.group_separator)
        if fraction:
            number = f"{number}{self._format.decimal_separator}{fraction}"

        text = sign + self._format.pattern.format(amount=number, symbol=_CCY_SYMBOLS.get(code, code))
        logger.debug("🖨️ %s %s → %r (%s)", amount, code, text, self._locale)
        return text
