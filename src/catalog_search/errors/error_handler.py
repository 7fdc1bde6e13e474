# 🛠️ catalog_search/errors/error_handler.py
"""
🛠️ Фабрика декораторів, що перекладає сторонні винятки у доменні.

🔹 Не змінює сигнатуру функції, працює з будь-якими *args/**kwargs.
🔹 `AppError` пропускається як є; інші винятки проходять через стратегії.
🔹 Нерозпізнаний виняток піднімається без змін.
"""

from __future__ import annotations

# 🔠 Системні імпорти
import functools													# 🧱 wraps для збереження метаданих
import logging														# 🧾 Логи обробки помилок
from typing import Any, Callable, Optional, Sequence, TypeVar		# 📐 Типи для сигнатур

# 🧩 Внутрішні модулі проєкту
from catalog_search.shared.utils.logger import LOG_NAME
from .custom_errors import AppError									# ⚠️ Доменні винятки
from .strategies import IErrorHandlingStrategy, StoreIOErrorStrategy	# 🧠 Конвертери винятків


# ================================
# 🧾 ЛОГЕР
# ================================
logger = logging.getLogger(f"{LOG_NAME}.errors.error_handler")

F = TypeVar("F", bound=Callable[..., Any])


def convert_error(
    error: Exception,
    strategies: Sequence[IErrorHandlingStrategy],
    operation: str,
) -> Optional[AppError]:
    """🔄 Пропускає виняток через стратегії й повертає `AppError`, якщо можливо."""
    if isinstance(error, AppError):									# 🧾 Уже доменний виняток
        return error
    for strategy in strategies:										# 🔁 Перша стратегія, що впізнала, виграє
        converted = strategy.handle(error, operation)
        if converted is not None:
            return converted
    return None


# ================================
# 🏭 ФАБРИКА ДЕКОРАТОРІВ
# ================================
def translate_errors(
    operation: str,
    strategies: Optional[Sequence[IErrorHandlingStrategy]] = None,
) -> Callable[[F], F]:
    """
    Створює декоратор, що перекладає винятки у доменні `AppError`.

    Args:
        operation: Назва операції для логів і повідомлення `StoreUnavailableError`.
        strategies: Набір стратегій; за замовчуванням лише `StoreIOErrorStrategy`.

    Returns:
        Декоратор для синхронних функцій/методів.
    """
    active = list(strategies) if strategies is not None else [StoreIOErrorStrategy()]

    def decorator(func: F) -> F:
        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            try:
                return func(*args, **kwargs)
            except AppError:
                raise												# ↩️ Доменні винятки йдуть далі без змін
            except Exception as exc:									# noqa: BLE001
                converted = convert_error(exc, active, operation)
                if converted is None:
                    raise
                logger.error(
                    "🔥 %s failed: %s",
                    operation,
                    converted,
                    extra=converted.to_log_extra(),
                )
                raise converted from exc

        return wrapper  # type: ignore[return-value]

    return decorator


__all__ = ["convert_error", "translate_errors"]
