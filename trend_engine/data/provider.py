"""
Market-data provider port.

The engine never fetches data itself; the façade calls a provider before
computing. ``InMemoryMarketDataProvider`` serves pre-loaded series for wiring
and tests.
"""

from datetime import datetime
from typing import Iterable, Optional, Protocol

from .models import Candle, Price


class MarketDataProvider(Protocol):
    """Source of ordered price and candle series for a symbol."""

    def fetch_price_series(self, symbol: str, start: datetime, end: datetime) -> list[Price]:
        ...

    def fetch_candle_series(self, symbol: str, start: datetime, end: datetime) -> list[Candle]:
        ...


class InMemoryMarketDataProvider:
    """Provider backed by in-memory series keyed by symbol."""

    def __init__(self, prices: Optional[dict[str, Iterable[Price]]] = None,
                 candles: Optional[dict[str, Iterable[Candle]]] = None):
        self._prices = {symbol: sorted(series, key=lambda p: p.timestamp)
                        for symbol, series in (prices or {}).items()}
        self._candles = {symbol: sorted(series, key=lambda c: c.timestamp)
                         for symbol, series in (candles or {}).items()}

    def fetch_price_series(self, symbol: str, start: datetime, end: datetime) -> list[Price]:
        """Prices for ``symbol`` with ``start <= timestamp <= end``."""
        return [p for p in self._prices.get(symbol, []) if start <= p.timestamp <= end]

    def fetch_candle_series(self, symbol: str, start: datetime, end: datetime) -> list[Candle]:
        """Candles for ``symbol`` with ``start <= timestamp <= end``."""
        return [c for c in self._candles.get(symbol, []) if start <= c.timestamp <= end]
