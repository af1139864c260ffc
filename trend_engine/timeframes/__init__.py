"""Candle aggregation across timeframes"""

from .converter import TimeframeConverter

__all__ = ["TimeframeConverter"]
