"""
Price and candle data model.

Immutable value types consumed by the indicator library, the timeframe
converter and the multi-timeframe orchestrator.
"""

from .models import MAX_PRICE, Candle, Price, Timeframe, prices_from_candles
from .provider import InMemoryMarketDataProvider, MarketDataProvider

__all__ = [
    "MAX_PRICE",
    "Candle",
    "Price",
    "Timeframe",
    "prices_from_candles",
    "MarketDataProvider",
    "InMemoryMarketDataProvider",
]
