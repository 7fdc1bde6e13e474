# ⚙️ catalog_search/config/config_service.py
"""
⚙️ config_service.py: Сервіс для доступу до статичної конфігурації.

🔹 Клас `ConfigService`:
- Завантажує `config.yaml` з пакета, потім перекриває значеннями з `.env` / ENV.
- Надає єдиний метод `.get()` для доступу до параметра за ключем з крапками.
- Працює як Singleton; `reset()` скидає екземпляр (для тестів).
"""

# 🌐 Зовнішні бібліотеки
import yaml                                  # 📦 YAML-парсинг
from dotenv import load_dotenv               # 🔐 Завантаження змінних із .env

# 🔠 Системні імпорти
import os                                    # 📁 Доступ до змінних середовища
import logging                               # 🧾 Логування
from pathlib import Path                     # 📁 Побудова шляху до файлів
from typing import Any, Callable, Dict, Optional

# 🧩 Внутрішні модулі проєкту
from catalog_search.shared.utils.logger import LOG_NAME

logger = logging.getLogger(f"{LOG_NAME}.config")

_YAML_PATH = Path(__file__).parent / "config.yaml"

# 🔐 ENV-змінна → ключ конфігурації
_ENV_KEYS: Dict[str, str] = {
    "CATALOG_SEARCH_LOCALE": "search.locale",
    "CATALOG_SEARCH_LANGUAGE_ID": "context.language_id",
    "CATALOG_SEARCH_CATALOG_FILE": "catalog.file",
}


# ============================
# ⚙️ СЕРВІС ДОСТУПУ ДО КОНФІГІВ
# ============================
class ConfigService:
    """
    ⚙️ Надає доступ до всіх статичних конфігураційних параметрів пакета.
    Працює як Singleton: конфігурація зчитується лише один раз.
    """

    _instance = None                          # 🧩 Singleton-екземпляр
    _config: Dict[str, Any]                   # 📦 Обʼєднана конфігурація

    def __new__(cls):
        if cls._instance is None:
            instance = super().__new__(cls)
            instance._config = {}
            instance._load_all_configs()      # 🔄 Завантаження під час першого виклику
            cls._instance = instance
            logger.debug("🔄 Singleton ConfigService створено і конфігурація завантажена")
        return cls._instance

    @classmethod
    def reset(cls) -> None:
        """♻️ Забуває екземпляр; наступний `ConfigService()` перечитає джерела."""
        cls._instance = None

    def _load_all_configs(self) -> None:
        """
        📥 Завантажує всі джерела конфігурації в один словник.
        Пріоритет (від нижчого): config.yaml → .env / ENV
        """
        # --- 1. YAML-файл ---
        try:
            with open(_YAML_PATH, "r", encoding="utf-8") as f:
                self._deep_update(self._config, yaml.safe_load(f) or {})
        except (FileNotFoundError, yaml.YAMLError) as e:
            logger.warning("⚠️ Не вдалося завантажити config.yaml: %s", e)

        # --- 2. .env змінні ---
        load_dotenv()
        env_vars = {key: os.getenv(name) for name, key in _ENV_KEYS.items()}
        present = {key: value for key, value in env_vars.items() if value is not None}
        self._deep_update(self._config, self._unflatten_dict(present))

        logger.info("✅ Конфігурацію успішно завантажено.")
        logger.debug("🔍 Обʼєднаний словник конфігурації: %s", self._config)

    def get(self, key: str, default: Any = None, cast: Optional[Callable[[Any], Any]] = None) -> Any:
        """
        🔑 Отримує значення конфігурації за ключем (наприклад: 'search.locale').

        Args:
            key: Ключ у форматі з крапкою.
            default: Значення, якщо ключ не знайдено або він порожній.
            cast: Необовʼязкове приведення типу; збій приведення → default.
        """
        value: Any = self._config
        for part in key.split("."):
            if isinstance(value, dict) and part in value:
                value = value[part]
            else:
                return default
        if value is None:
            return default
        if cast is None:
            return value
        try:
            return cast(value)
        except (TypeError, ValueError):
            logger.warning("⚠️ Ключ '%s': неможливо привести %r через %s", key, value, getattr(cast, "__name__", cast))
            return default

    # ===============================
    # 🔧 ДОПОМІЖНІ МЕТОДИ ЗЛИТТЯ КОНФІГІВ
    # ===============================
    def _unflatten_dict(self, d: Dict[str, Any]) -> Dict[str, Any]:
        """
        🔁 Перетворює ключі з крапками в ієрархічний словник.
        'search.locale' → {'search': {'locale': ...}}
        """
        result: Dict[str, Any] = {}
        for key, value in d.items():
            parts = key.split(".")
            d_ref = result
            for part in parts[:-1]:
                d_ref = d_ref.setdefault(part, {})
            d_ref[parts[-1]] = value
        return result

    def _deep_update(self, source: Dict, overrides: Dict) -> None:
        """🔁 Рекурсивно обʼєднує два словника (вкладені словники зливаються)."""
        for key, value in overrides.items():
            if isinstance(value, dict) and isinstance(source.get(key), dict):
                self._deep_update(source[key], value)
            else:
                source[key] = value
