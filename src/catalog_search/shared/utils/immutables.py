# 🧊 catalog_search/shared/utils/immutables.py
"""
🧊 Утиліти для «заморожування» результатів агрегації.

🔹 Акумулятори комбінацій і полів кастомізації будуються як звичайні dict,
    а перед передачею у `FoundProduct` фіксуються через `freeze_mapping`.
🔹 `MappingProxyType` зберігає порядок вставки вихідного словника.
"""

from __future__ import annotations

# 🔠 Системні імпорти
from collections.abc import Mapping                      # 🧰 Перевірки типів колекцій
from types import MappingProxyType                       # 🔒 Незмінна обгортка над dict
from typing import Any, TypeVar

K = TypeVar("K")
V = TypeVar("V")

# ================================
# 🧾 АЛІАСИ
# ================================
FrozenMapping = MappingProxyType                         # 🔄 Псевдонім для читаємості


# ================================
# ❄️ ЗАМОРОЖУВАЧІ
# ================================
def freeze_mapping(data: Mapping[K, V]) -> "MappingProxyType[K, V]":
    """
    Повертає незмінний вигляд на *копію* мапи.

    Копія відрізає зовнішнє посилання: подальші мутації вихідного dict
    не просочуються у вже зібраний агрегат.
    """
    if isinstance(data, MappingProxyType):                # ✅ Уже заморожено
        return data
    return MappingProxyType(dict(data))                   # 📦 Копія + read-only proxy


def is_frozen_mapping(obj: Any) -> bool:
    """Перевіряє, чи є обʼєкт замороженою мапою."""
    return isinstance(obj, MappingProxyType)
