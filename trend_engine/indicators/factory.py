"""
Indicator registry and factory.

The registry is built once, explicitly, and never mutated: every supported
indicator type maps to its description, default period range and a
constructor closure. Other components query it instead of hardcoding lists.
"""

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Callable, Mapping, Optional

from ..config.defaults import IndicatorParams
from ..errors import ValidationError
from .base import Indicator, require_positive_period
from .bollinger import BollingerBands
from .macd import MACD
from .moving_average import ExponentialMovingAverage, SimpleMovingAverage
from .oscillators import StochasticOscillator, WilliamsPercentR
from .rsi import RelativeStrengthIndex


class IndicatorType(Enum):
    """Closed set of supported indicators."""
    SIMPLE_MOVING_AVERAGE = "simple_moving_average"
    EXPONENTIAL_MOVING_AVERAGE = "exponential_moving_average"
    RELATIVE_STRENGTH_INDEX = "relative_strength_index"
    BOLLINGER_BANDS = "bollinger_bands"
    STOCHASTIC_OSCILLATOR = "stochastic_oscillator"
    MACD = "macd"
    WILLIAMS_PERCENT_R = "williams_percent_r"


@dataclass(frozen=True)
class IndicatorDescription:
    """Introspection metadata for UI and API layers."""
    name: str
    short_name: str
    description: str
    default_period_range: tuple[int, int]


@dataclass(frozen=True)
class IndicatorSpec:
    """Registry entry: metadata plus how to build the indicator for a period."""
    description: IndicatorDescription
    constructor: Callable[[int], Indicator]


class IndicatorFactory:
    """Validated construction and dispatch from an indicator type to a unit."""

    def __init__(self, specs: Mapping[IndicatorType, IndicatorSpec], params: Optional[IndicatorParams] = None):
        self._specs = MappingProxyType(dict(specs))
        self.params = params or IndicatorParams()

    @classmethod
    def default(cls, params: Optional[IndicatorParams] = None) -> "IndicatorFactory":
        """Build the registry of every supported indicator."""
        params = params or IndicatorParams()

        def build_macd(period: int) -> Indicator:
            return MACD(fast_period=params.macd_fast, slow_period=period, signal_period=params.macd_signal)

        specs = {
            IndicatorType.SIMPLE_MOVING_AVERAGE: IndicatorSpec(
                IndicatorDescription(
                    "Simple Moving Average", "SMA",
                    "Calculates the arithmetic mean of prices over a specified period",
                    (5, 20)
                ),
                SimpleMovingAverage,
            ),
            IndicatorType.EXPONENTIAL_MOVING_AVERAGE: IndicatorSpec(
                IndicatorDescription(
                    "Exponential Moving Average", "EMA",
                    "Calculates a weighted moving average that gives more importance to recent prices",
                    (12, 26)
                ),
                ExponentialMovingAverage,
            ),
            IndicatorType.RELATIVE_STRENGTH_INDEX: IndicatorSpec(
                IndicatorDescription(
                    "Relative Strength Index", "RSI",
                    "Measures the speed and magnitude of recent price changes to evaluate "
                    "overbought or oversold conditions",
                    (9, 25)
                ),
                RelativeStrengthIndex,
            ),
            IndicatorType.BOLLINGER_BANDS: IndicatorSpec(
                IndicatorDescription(
                    "Bollinger Bands", "BB",
                    "Shows price volatility using standard deviations around a moving average",
                    (10, 50)
                ),
                lambda period: BollingerBands(period, k=params.bollinger_k),
            ),
            IndicatorType.STOCHASTIC_OSCILLATOR: IndicatorSpec(
                IndicatorDescription(
                    "Stochastic Oscillator", "STOCH",
                    "Compares the current price to its price range over a period",
                    (5, 21)
                ),
                StochasticOscillator,
            ),
            IndicatorType.MACD: IndicatorSpec(
                IndicatorDescription(
                    "MACD", "MACD",
                    "Moving Average Convergence Divergence: the spread between fast and slow "
                    "exponential moving averages with a signal line",
                    (26, 26)
                ),
                build_macd,
            ),
            IndicatorType.WILLIAMS_PERCENT_R: IndicatorSpec(
                IndicatorDescription(
                    "Williams %R", "%R",
                    "A momentum oscillator that measures overbought and oversold levels "
                    "on a scale of -100 to 0",
                    (10, 20)
                ),
                WilliamsPercentR,
            ),
        }
        return cls(specs, params)

    def create_indicator(self, indicator_type: IndicatorType, period: int) -> Indicator:
        """
        Create an indicator unit for ``period``.

        MACD takes ``period`` as its slow period and the configured fast and
        signal periods.

        Raises:
            ValidationError: If the period is not positive or the type is unknown
            InvalidConfigurationError: If indicator-specific constraints fail
        """
        require_positive_period(period)
        return self._spec(indicator_type).constructor(period)

    def create_macd(self, fast_period: Optional[int] = None, slow_period: Optional[int] = None,
                    signal_period: Optional[int] = None) -> MACD:
        """Create a MACD with explicit periods; omitted periods come from the configured params."""
        return MACD(
            fast_period=self.params.macd_fast if fast_period is None else fast_period,
            slow_period=self.params.macd_slow if slow_period is None else slow_period,
            signal_period=self.params.macd_signal if signal_period is None else signal_period,
        )

    def describe(self, indicator_type: IndicatorType) -> IndicatorDescription:
        return self._spec(indicator_type).description

    def list_supported_types(self) -> tuple[IndicatorType, ...]:
        return tuple(self._specs)

    def is_supported(self, indicator_type: IndicatorType) -> bool:
        return indicator_type in self._specs

    def _spec(self, indicator_type: IndicatorType) -> IndicatorSpec:
        try:
            return self._specs[indicator_type]
        except (KeyError, TypeError):
            raise ValidationError(
                f"Unknown indicator type: {indicator_type}",
                field="indicator_type",
                value=indicator_type
            ) from None
