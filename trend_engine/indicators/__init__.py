"""Technical indicator library: one calculation unit per indicator type"""

from .base import Indicator
from .bollinger import BollingerBands, calculate_bollinger_bands
from .factory import IndicatorDescription, IndicatorFactory, IndicatorSpec, IndicatorType
from .macd import MACD, calculate_macd
from .moving_average import (
    ExponentialMovingAverage,
    SimpleMovingAverage,
    calculate_ema,
    calculate_sma,
    ema_series,
)
from .oscillators import (
    StochasticOscillator,
    WilliamsPercentR,
    calculate_stochastic,
    calculate_williams_r,
)
from .rsi import RelativeStrengthIndex, calculate_rsi

__all__ = [
    "Indicator",
    "IndicatorDescription",
    "IndicatorFactory",
    "IndicatorSpec",
    "IndicatorType",
    "SimpleMovingAverage",
    "ExponentialMovingAverage",
    "RelativeStrengthIndex",
    "BollingerBands",
    "StochasticOscillator",
    "MACD",
    "WilliamsPercentR",
    "calculate_sma",
    "calculate_ema",
    "ema_series",
    "calculate_rsi",
    "calculate_bollinger_bands",
    "calculate_stochastic",
    "calculate_macd",
    "calculate_williams_r",
]
