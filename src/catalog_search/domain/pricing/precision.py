# 🎯 catalog_search/domain/pricing/precision.py
"""
🎯 Політика точності обчислень для відображуваних цін.

Точність = max(minimum, digits * multiplier). З дефолтними параметрами
(multiplier=1, minimum=0) вона дорівнює природній точності валюти.
"""

from __future__ import annotations

from dataclasses import dataclass

from .interfaces import IPrecisionPolicy


@dataclass(frozen=True)
class ComputingPrecision(IPrecisionPolicy):
    """Обчислювальна точність, похідна від кількості десяткових знаків валюти."""

    multiplier: int = 1
    minimum: int = 0

    def __post_init__(self) -> None:
        if self.multiplier < 1:
            raise ValueError("multiplier must be >= 1")
        if self.minimum < 0:
            raise ValueError("minimum must be >= 0")

    def get_precision(self, currency_decimal_digits: int) -> int:
        return max(self.minimum, int(currency_decimal_digits) * self.multiplier)
