"""Indicator result variants"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Optional, Union

from ..utils.time import format_timestamp


class ResultKind(Enum):
    """Discriminator shared by every result variant."""
    SCALAR = "scalar"
    BAND = "band"
    OSCILLATOR = "oscillator"
    MACD = "macd"
    EMPTY = "empty"


def _check_window(start_time: datetime, end_time: datetime) -> None:
    if end_time < start_time:
        raise ValueError("End time must not be before start time")


@dataclass(frozen=True)
class ScalarResult:
    """Single value summarizing the input window (SMA, EMA)."""
    value: float
    start_time: datetime
    end_time: datetime
    kind: ResultKind = field(default=ResultKind.SCALAR, init=False)

    def __post_init__(self):
        _check_window(self.start_time, self.end_time)

    @property
    def is_empty(self) -> bool:
        return False

    def to_dict(self) -> dict[str, Any]:
        return {
            "kind": self.kind.value,
            "value": self.value,
            "start_time": format_timestamp(self.start_time),
            "end_time": format_timestamp(self.end_time),
        }


@dataclass(frozen=True)
class BandResult:
    """Volatility envelope; ``value`` is the middle band."""
    middle_band: float
    upper_band: float
    lower_band: float
    start_time: datetime
    end_time: datetime
    kind: ResultKind = field(default=ResultKind.BAND, init=False)

    def __post_init__(self):
        _check_window(self.start_time, self.end_time)
        if not self.lower_band <= self.middle_band <= self.upper_band:
            raise ValueError("Bands must satisfy lower <= middle <= upper")

    @property
    def value(self) -> float:
        return self.middle_band

    @property
    def bandwidth(self) -> float:
        """Distance between the outer bands."""
        return self.upper_band - self.lower_band

    @property
    def is_empty(self) -> bool:
        return False

    def to_dict(self) -> dict[str, Any]:
        return {
            "kind": self.kind.value,
            "value": self.value,
            "middle_band": self.middle_band,
            "upper_band": self.upper_band,
            "lower_band": self.lower_band,
            "start_time": format_timestamp(self.start_time),
            "end_time": format_timestamp(self.end_time),
        }


@dataclass(frozen=True)
class OscillatorResult:
    """Bounded oscillator reading, e.g. [0, 100] for RSI or [-100, 0] for Williams %R."""
    value: float
    start_time: datetime
    end_time: datetime
    lower_bound: float = 0.0
    upper_bound: float = 100.0
    kind: ResultKind = field(default=ResultKind.OSCILLATOR, init=False)

    def __post_init__(self):
        _check_window(self.start_time, self.end_time)
        if not self.lower_bound <= self.value <= self.upper_bound:
            raise ValueError(
                f"Oscillator value {self.value} outside [{self.lower_bound}, {self.upper_bound}]"
            )

    @property
    def is_empty(self) -> bool:
        return False

    def to_dict(self) -> dict[str, Any]:
        return {
            "kind": self.kind.value,
            "value": self.value,
            "lower_bound": self.lower_bound,
            "upper_bound": self.upper_bound,
            "start_time": format_timestamp(self.start_time),
            "end_time": format_timestamp(self.end_time),
        }


@dataclass(frozen=True)
class MACDResult:
    """MACD reading; ``value`` is the MACD line and ``histogram`` is derived."""
    macd_line: float
    signal_line: float
    start_time: datetime
    end_time: datetime
    fast_period: int = 12
    slow_period: int = 26
    signal_period: int = 9
    kind: ResultKind = field(default=ResultKind.MACD, init=False)

    def __post_init__(self):
        _check_window(self.start_time, self.end_time)

    @property
    def value(self) -> float:
        return self.macd_line

    @property
    def histogram(self) -> float:
        return self.macd_line - self.signal_line

    @property
    def is_empty(self) -> bool:
        return False

    def to_dict(self) -> dict[str, Any]:
        return {
            "kind": self.kind.value,
            "value": self.value,
            "macd_line": self.macd_line,
            "signal_line": self.signal_line,
            "histogram": self.histogram,
            "fast_period": self.fast_period,
            "slow_period": self.slow_period,
            "signal_period": self.signal_period,
            "start_time": format_timestamp(self.start_time),
            "end_time": format_timestamp(self.end_time),
        }


@dataclass(frozen=True)
class EmptyResult:
    """No signal: upstream returned no data."""
    reason: Optional[str] = None
    kind: ResultKind = field(default=ResultKind.EMPTY, init=False)

    @property
    def value(self) -> None:
        return None

    @property
    def start_time(self) -> None:
        return None

    @property
    def end_time(self) -> None:
        return None

    @property
    def is_empty(self) -> bool:
        return True

    def to_dict(self) -> dict[str, Any]:
        return {"kind": self.kind.value, "value": None, "reason": self.reason}


IndicatorResult = Union[ScalarResult, BandResult, OscillatorResult, MACDResult, EmptyResult]
