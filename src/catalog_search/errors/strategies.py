# 📜 catalog_search/errors/strategies.py
"""
📜 Стратегії конвертації сторонніх винятків у доменні `AppError`.

🔹 Виносять знання про конкретні типи винятків із декоратора `translate_errors`.
🔹 Нові джерела збоїв (драйвер БД, HTTP-клієнт пошукового рушія) додаються окремою стратегією.
"""

from __future__ import annotations

# 🔠 Системні імпорти
import logging															# 🧾 Логування стратегій
from typing import Optional, Protocol									# 📐 Типи

# 🧩 Внутрішні модулі проєкту
from catalog_search.shared.utils.logger import LOG_NAME
from .custom_errors import AppError, StoreUnavailableError				# ⚠️ Доменні помилки


# ================================
# 🧾 ЛОГЕР
# ================================
logger = logging.getLogger(f"{LOG_NAME}.errors.strategies")


# ================================
# 🧠 КОНТРАКТ СТРАТЕГІЙ
# ================================
class IErrorHandlingStrategy(Protocol):
    """🧠 Контракт, що визначає єдиний метод `handle`."""

    def handle(self, error: Exception, operation: str) -> Optional[AppError]:
        """Вертає `AppError`, якщо виняток розпізнано, або None."""


# ================================
# 🗄️ СТРАТЕГІЯ ДЛЯ I/O СХОВИЩА
# ================================
class StoreIOErrorStrategy:
    """🗄️ Перетворює мережеві/файлові збої колабораторів на `StoreUnavailableError`."""

    _IO_ERRORS = (ConnectionError, TimeoutError, OSError)

    def handle(self, error: Exception, operation: str) -> Optional[AppError]:
        if isinstance(error, self._IO_ERRORS):							# 🌐 З'єднання, таймаут, файл
            logger.debug("🗄️ store I/O error", extra={"operation": operation, "type": type(error).__name__})
            return StoreUnavailableError(operation, details=f"{type(error).__name__}: {error}")
        return None


__all__ = [
    "IErrorHandlingStrategy",
    "StoreIOErrorStrategy",
]
