"""RSI (Relative Strength Index) calculation"""

from ..models.results import OscillatorResult
from .base import Indicator


def calculate_rsi(values: list[float], period: int = 14) -> float:
    """
    Calculate RSI over the last ``period`` price changes

    avg_gain and avg_loss are simple means over ``period`` deltas
    (``period + 1`` prices); RSI = 100 - 100 / (1 + avg_gain / avg_loss).

    Args:
        values: At least ``period + 1`` values in chronological order
        period: Number of deltas to average

    Returns:
        RSI in [0, 100]; 100 when there are no losses, 0 when there are no
        gains, 50 for a flat window
    """
    window = values[-(period + 1):]
    deltas = [window[i] - window[i - 1] for i in range(1, len(window))]

    avg_gain = sum(d for d in deltas if d > 0) / period
    avg_loss = sum(-d for d in deltas if d < 0) / period

    if avg_loss == 0:
        return 50.0 if avg_gain == 0 else 100.0
    if avg_gain == 0:
        return 0.0

    rs = avg_gain / avg_loss
    return 100.0 - (100.0 / (1.0 + rs))


class RelativeStrengthIndex(Indicator):
    """Momentum oscillator comparing average gains with average losses."""

    name = "Relative Strength Index"
    short_name = "RSI"

    @property
    def required_points(self) -> int:
        return self.period + 1

    def _compute(self, values, start_time, end_time) -> OscillatorResult:
        return OscillatorResult(
            value=calculate_rsi(values, self.period),
            start_time=start_time,
            end_time=end_time,
            lower_bound=0.0,
            upper_bound=100.0
        )
