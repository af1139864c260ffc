"""
Canonical data models for price and candle series.

This module defines immutable data structures for the points an indicator
consumes. Prices are validated on construction; candles are trusted as given
and never re-validated by the engine.
"""

import math
import numbers
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Iterable

from ..errors import ValidationError

MAX_PRICE = 1_000_000_000_000.0  # One trillion


class Timeframe(Enum):
    """Candle bucket durations in ascending order."""
    MINUTE = "1m"
    FIVE_MINUTES = "5m"
    FIFTEEN_MINUTES = "15m"
    HOUR = "1h"
    FOUR_HOURS = "4h"
    DAY = "1d"
    WEEK = "1w"

    @property
    def minutes(self) -> int:
        """Fixed duration of one bucket in minutes."""
        return _TIMEFRAME_MINUTES[self]

    @property
    def label(self) -> str:
        """Short label such as '5m' or '1d'."""
        return self.value

    @classmethod
    def from_label(cls, label: str) -> "Timeframe":
        """Look up a timeframe by its short label."""
        try:
            return cls(label)
        except ValueError:
            raise ValidationError(f"Unknown timeframe: {label}", field="timeframe", value=label) from None

    @classmethod
    def ordered(cls, timeframes: Iterable["Timeframe"]) -> list["Timeframe"]:
        """Sort timeframes by ascending duration."""
        return sorted(timeframes, key=lambda tf: tf.minutes)


_TIMEFRAME_MINUTES = {
    Timeframe.MINUTE: 1,
    Timeframe.FIVE_MINUTES: 5,
    Timeframe.FIFTEEN_MINUTES: 15,
    Timeframe.HOUR: 60,
    Timeframe.FOUR_HOURS: 240,
    Timeframe.DAY: 1440,
    Timeframe.WEEK: 10080,
}


@dataclass(frozen=True)
class Price:
    """A single observed price for a symbol."""
    symbol: str
    value: float
    timestamp: datetime

    @classmethod
    def create(cls, symbol: str, value: float, timestamp: datetime,
               max_price: float = MAX_PRICE) -> "Price":
        """
        Create a validated price point.

        Raises:
            ValidationError: If the symbol is blank or the value is negative,
                non-finite or above ``max_price``
        """
        if not symbol or not symbol.strip():
            raise ValidationError("Symbol cannot be empty", field="symbol", value=symbol)

        if isinstance(value, bool) or not isinstance(value, (numbers.Real, Decimal)):
            raise ValidationError(f"Invalid price type: {type(value).__name__}", field="value", value=value)

        try:
            amount = float(value)
        except (ValueError, OverflowError):
            raise ValidationError(f"Invalid price value: {value}", field="value", value=value) from None

        if math.isnan(amount) or math.isinf(amount):
            raise ValidationError(f"Invalid price value: {value}", field="value", value=value)

        if amount < 0:
            raise ValidationError("Price cannot be negative", field="value", value=value)

        if amount > max_price:
            raise ValidationError("Price exceeds maximum allowed value", field="value", value=value)

        return cls(symbol=symbol, value=amount, timestamp=timestamp)


@dataclass(frozen=True)
class Candle:
    """OHLCV bar; ``timestamp`` is the bar open time."""
    timestamp: datetime
    open: float
    high: float
    low: float
    close: float
    volume: float

    @property
    def is_bullish(self) -> bool:
        return self.close > self.open

    @property
    def is_doji(self) -> bool:
        return self.close == self.open

    @property
    def body_size(self) -> float:
        return abs(self.close - self.open)

    @property
    def upper_shadow(self) -> float:
        return self.high - max(self.open, self.close)

    @property
    def lower_shadow(self) -> float:
        return min(self.open, self.close) - self.low

    @property
    def total_range(self) -> float:
        return self.high - self.low


def prices_from_candles(symbol: str, candles: Iterable[Candle],
                        max_price: float = MAX_PRICE) -> list[Price]:
    """Convert bars to a price series using each bar's close."""
    return [Price.create(symbol, candle.close, candle.timestamp, max_price=max_price) for candle in candles]
