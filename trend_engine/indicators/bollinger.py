"""Bollinger Bands calculation"""

import math

from ..errors import InvalidConfigurationError
from ..models.results import BandResult
from .base import Indicator
from .moving_average import calculate_sma


def calculate_bollinger_bands(values: list[float], period: int, k: float = 2.0) -> tuple[float, float, float]:
    """
    Calculate Bollinger Bands over the last ``period`` values

    middle = SMA(period), sigma = population standard deviation of the same
    window, upper/lower = middle +/- k * sigma.

    Returns:
        (middle, upper, lower); all three are equal for a flat window
    """
    window = values[-period:]
    middle = calculate_sma(window, period)

    if max(window) == min(window):
        return middle, middle, middle

    variance = sum((v - middle) ** 2 for v in window) / period
    band_width = k * math.sqrt(variance)

    return middle, middle + band_width, middle - band_width


class BollingerBands(Indicator):
    """Moving average enveloped by ``k`` population standard deviations."""

    name = "Bollinger Bands"
    short_name = "BB"

    def __init__(self, period: int, k: float = 2.0):
        super().__init__(period)
        if isinstance(k, bool) or not isinstance(k, (int, float)) or not k > 0:
            raise InvalidConfigurationError(
                "Standard deviation multiplier must be greater than 0",
                field="k",
                value=k
            )
        self.k = float(k)

    def _compute(self, values, start_time, end_time) -> BandResult:
        middle, upper, lower = calculate_bollinger_bands(values, self.period, self.k)
        return BandResult(
            middle_band=middle,
            upper_band=upper,
            lower_band=lower,
            start_time=start_time,
            end_time=end_time
        )

    def __repr__(self) -> str:
        return f"BollingerBands(period={self.period}, k={self.k})"
