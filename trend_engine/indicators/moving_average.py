"""SMA and EMA calculations"""

from typing import Optional

from ..models.results import ScalarResult
from .base import Indicator


def calculate_sma(values: list[float], period: int) -> Optional[float]:
    """
    Calculate Simple Moving Average of the last ``period`` values

    Args:
        values: Values in chronological order
        period: Averaging window

    Returns:
        SMA value or None if insufficient data
    """
    if len(values) < period:
        return None

    window = values[-period:]
    if max(window) == min(window):
        return window[0]
    return sum(window) / period


def ema_series(values: list[float], period: int) -> list[Optional[float]]:
    """
    Calculate the EMA series aligned to ``values``

    alpha = 2 / (period + 1); seeded with the SMA of the first ``period``
    values, then EMA_t = alpha * value_t + (1 - alpha) * EMA_{t-1}.

    Returns:
        EMA per position; entries before index ``period - 1`` are None
    """
    result: list[Optional[float]] = [None] * len(values)
    if len(values) < period:
        return result

    alpha = 2.0 / (period + 1)
    ema = calculate_sma(values[:period], period)
    result[period - 1] = ema

    for i in range(period, len(values)):
        ema = alpha * values[i] + (1 - alpha) * ema
        result[i] = ema

    return result


def calculate_ema(values: list[float], period: int) -> Optional[float]:
    """Final EMA value, or None if insufficient data."""
    if len(values) < period:
        return None
    return ema_series(values, period)[-1]


class SimpleMovingAverage(Indicator):
    """Arithmetic mean of the last ``period`` prices."""

    name = "Simple Moving Average"
    short_name = "SMA"

    def _compute(self, values, start_time, end_time) -> ScalarResult:
        return ScalarResult(value=calculate_sma(values, self.period), start_time=start_time, end_time=end_time)


class ExponentialMovingAverage(Indicator):
    """Exponentially weighted average seeded with the SMA of the first window."""

    name = "Exponential Moving Average"
    short_name = "EMA"

    def _compute(self, values, start_time, end_time) -> ScalarResult:
        return ScalarResult(value=calculate_ema(values, self.period), start_time=start_time, end_time=end_time)
