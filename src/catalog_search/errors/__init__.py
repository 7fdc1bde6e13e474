# 🚨 catalog_search/errors/__init__.py
"""
🚨 Пакет `errors`: доменні винятки та переклад сторонніх збоїв.
"""

from .custom_errors import (
    AppError,
    CurrencyNotFoundError,
    ErrorCode,
    MalformedCatalogDataError,
    ProductSearchQueryError,
    StoreUnavailableError,
)
from .error_handler import convert_error, translate_errors
from .strategies import IErrorHandlingStrategy, StoreIOErrorStrategy

__all__ = [
    "ErrorCode",
    "AppError",
    "ProductSearchQueryError",
    "CurrencyNotFoundError",
    "StoreUnavailableError",
    "MalformedCatalogDataError",
    "IErrorHandlingStrategy",
    "StoreIOErrorStrategy",
    "convert_error",
    "translate_errors",
]
