"""MACD (Moving Average Convergence Divergence) calculation"""

from ..errors import InvalidConfigurationError
from ..models.results import MACDResult
from .base import Indicator, require_positive_period
from .moving_average import ema_series


def calculate_macd(values: list[float], fast_period: int = 12, slow_period: int = 26,
                   signal_period: int = 9) -> tuple[float, float]:
    """
    Calculate the final MACD and signal line values

    macd_t = EMA(fast)_t - EMA(slow)_t from the first index where the slow
    EMA exists; signal = EMA(signal_period) over that MACD series.

    Args:
        values: At least ``slow_period + signal_period`` values

    Returns:
        (macd_line, signal_line)
    """
    fast = ema_series(values, fast_period)
    slow = ema_series(values, slow_period)

    macd_values = [fast[i] - slow[i] for i in range(slow_period - 1, len(values))]
    signal = ema_series(macd_values, signal_period)

    return macd_values[-1], signal[-1]


class MACD(Indicator):
    """Fast/slow EMA spread with a smoothed signal line."""

    name = "MACD"
    short_name = "MACD"

    def __init__(self, fast_period: int = 12, slow_period: int = 26, signal_period: int = 9):
        self.fast_period = require_positive_period(fast_period, "fast period")
        self.slow_period = require_positive_period(slow_period, "slow period")
        self.signal_period = require_positive_period(signal_period, "signal period")

        if fast_period >= slow_period:
            raise InvalidConfigurationError(
                "Fast period must be less than slow period",
                field="fast_period",
                value=fast_period,
                context={"slow_period": slow_period}
            )

        self.period = slow_period

    @property
    def required_points(self) -> int:
        return self.slow_period + self.signal_period

    def _compute(self, values, start_time, end_time) -> MACDResult:
        macd_line, signal_line = calculate_macd(values, self.fast_period, self.slow_period, self.signal_period)
        return MACDResult(
            macd_line=macd_line,
            signal_line=signal_line,
            start_time=start_time,
            end_time=end_time,
            fast_period=self.fast_period,
            slow_period=self.slow_period,
            signal_period=self.signal_period
        )

    def __repr__(self) -> str:
        return f"MACD(fast={self.fast_period}, slow={self.slow_period}, signal={self.signal_period})"
