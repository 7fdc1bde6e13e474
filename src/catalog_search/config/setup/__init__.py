# 📦 catalog_search/config/setup/__init__.py
from .container import Container, bootstrap_logging

__all__ = ["Container", "bootstrap_logging"]
