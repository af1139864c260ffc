"""Range-position oscillators: Stochastic %K and Williams %R"""

from ..models.results import OscillatorResult
from .base import Indicator, window_high_low


def calculate_stochastic(values: list[float], period: int) -> float:
    """
    Calculate Stochastic %K

    %K = (close - lowest) / (highest - lowest) * 100 over the last ``period``
    values. A window with no range reads 50.
    """
    highest, lowest = window_high_low(values, period)
    if highest == lowest:
        return 50.0

    return (values[-1] - lowest) / (highest - lowest) * 100.0


def calculate_williams_r(values: list[float], period: int) -> float:
    """
    Calculate Williams %R

    %R = (highest - close) / (highest - lowest) * -100 over the last ``period``
    values, clamped to [-100, 0]. A window with no range reads -50.
    """
    highest, lowest = window_high_low(values, period)
    if highest == lowest:
        return -50.0

    williams_r = (highest - values[-1]) / (highest - lowest) * -100.0
    return max(-100.0, min(0.0, williams_r))


class StochasticOscillator(Indicator):
    """Position of the latest price within the recent high-low range, 0 to 100."""

    name = "Stochastic Oscillator"
    short_name = "STOCH"

    def _compute(self, values, start_time, end_time) -> OscillatorResult:
        return OscillatorResult(
            value=calculate_stochastic(values, self.period),
            start_time=start_time,
            end_time=end_time,
            lower_bound=0.0,
            upper_bound=100.0
        )


class WilliamsPercentR(Indicator):
    """Distance of the latest price below the recent high, -100 to 0."""

    name = "Williams %R"
    short_name = "%R"

    def _compute(self, values, start_time, end_time) -> OscillatorResult:
        return OscillatorResult(
            value=calculate_williams_r(values, self.period),
            start_time=start_time,
            end_time=end_time,
            lower_bound=-100.0,
            upper_bound=0.0
        )
