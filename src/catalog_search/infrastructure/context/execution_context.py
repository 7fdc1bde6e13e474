# 🌍 catalog_search/infrastructure/context/execution_context.py
"""
🌍 ExecutionContext: амбієнтні мова та валюта процесу.

🔹 Валюта змінюється лише через `currency_scope(...)`, який відновлює попередній стан
    на будь-якому виході з блоку (return, виняток).
🔹 Scope-и вкладаються: відновлення відбувається у зворотному порядку (LIFO).
🔹 Обʼєкт не потокобезпечний; один контекст = один виклик пошуку в момент часу.
"""

from __future__ import annotations

# 🔠 Системні імпорти
import logging                                                      # 🧾 Логи зміни контексту
from contextlib import contextmanager                               # 🧰 Генераторний context manager
from typing import Iterator, Optional

# 🧩 Внутрішні модулі проєкту
from catalog_search.domain.products.interfaces import ContextState, IExecutionContext
from catalog_search.shared.utils.logger import LOG_NAME

logger = logging.getLogger(f"{LOG_NAME}.infrastructure.context")


class ExecutionContext(IExecutionContext):
    """🌍 Мутабельний носій активних мови та валюти."""

    def __init__(self, language_id: int, currency_id: Optional[int] = None) -> None:
        self._language_id = int(language_id)                        # 🗣️ Активна мова
        self._currency_id = currency_id                             # 💱 Активна валюта (None = дефолт магазину)

    @property
    def language_id(self) -> int:
        return self._language_id

    @property
    def currency_id(self) -> Optional[int]:
        return self._currency_id

    def snapshot(self) -> ContextState:
        """📸 Незмінний знімок поточного стану."""
        return ContextState(language_id=self._language_id, currency_id=self._currency_id)

    @contextmanager
    def currency_scope(self, currency_id: int) -> Iterator[ContextState]:
        """
        🔁 Встановлює валюту на час блоку `with`.

        Yields:
            ContextState: Стан усередині scope.
        """
        saved = self.snapshot()                                     # 💾 Що повернути на виході
        self._currency_id = currency_id
        logger.debug("🌍 currency %s → %s", saved.currency_id, currency_id)
        try:
            yield self.snapshot()
        finally:
            self._language_id = saved.language_id
            self._currency_id = saved.currency_id
            logger.debug("🌍 currency restored → %s", saved.currency_id)

    def __repr__(self) -> str:
        return f"ExecutionContext(language_id={self._language_id}, currency_id={self._currency_id})"
