"""Pytest configuration and shared fixtures."""

import pytest
from datetime import datetime, timedelta, timezone
from typing import Callable, List

from trend_engine.data.models import Candle, Price


BASE_TIME = datetime(2024, 1, 1, 0, 0, 0, tzinfo=timezone.utc)


def make_prices(values: List[float], symbol: str = "BTC-USD",
                start: datetime = BASE_TIME, step: timedelta = timedelta(minutes=1)) -> List[Price]:
    """Build a strictly ascending price series from raw values."""
    return [Price.create(symbol, value, start + i * step) for i, value in enumerate(values)]


def make_candles(closes: List[float], start: datetime = BASE_TIME,
                 step: timedelta = timedelta(minutes=1), spread: float = 1.0,
                 volume: float = 100.0) -> List[Candle]:
    """Build one candle per close with open at the previous close."""
    candles = []
    previous = closes[0]
    for i, close in enumerate(closes):
        candles.append(Candle(
            timestamp=start + i * step,
            open=previous,
            high=max(previous, close) + spread,
            low=min(previous, close) - spread,
            close=close,
            volume=volume,
        ))
        previous = close
    return candles


@pytest.fixture
def base_time() -> datetime:
    """Midnight UTC, aligned to every timeframe boundary."""
    return BASE_TIME


@pytest.fixture
def price_series() -> Callable[..., List[Price]]:
    """Factory fixture for price series."""
    return make_prices


@pytest.fixture
def candle_series() -> Callable[..., List[Candle]]:
    """Factory fixture for candle series."""
    return make_candles


@pytest.fixture
def five_minute_candles() -> List[Candle]:
    """Five 1-minute candles that aggregate into a single 5-minute bar."""
    rows = [
        (100.0, 105.0, 99.0, 102.0, 1000.0),
        (102.0, 104.0, 100.0, 103.0, 1200.0),
        (103.0, 108.0, 102.0, 106.0, 1500.0),
        (106.0, 107.0, 104.0, 105.0, 1800.0),
        (106.0, 109.0, 105.0, 107.0, 1100.0),
    ]
    return [
        Candle(timestamp=BASE_TIME + timedelta(minutes=i), open=o, high=h, low=l, close=c, volume=v)
        for i, (o, h, l, c, v) in enumerate(rows)
    ]


@pytest.fixture
def rising_minute_candles() -> List[Candle]:
    """Two days of steadily rising 1-minute candles."""
    closes = [100.0 + i * 0.01 for i in range(2 * 1440)]
    return make_candles(closes, spread=0.5)
