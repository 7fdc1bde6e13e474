# 🌍 catalog_search/infrastructure/context/__init__.py
from .execution_context import ExecutionContext

__all__ = ["ExecutionContext"]
