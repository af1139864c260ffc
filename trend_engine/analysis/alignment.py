"""
Alignment analysis across timeframes.

Reduces one indicator's per-timeframe readings to a single verdict:

- alignment score in [0, 1]: 1 when the readings cluster tightly, falling to 0
  as their standard deviation reaches ``dispersion_ratio`` of |mean|
- trend direction from the lowest to the highest timeframe reading
- confluence strength in [-1, 1]: the score signed by the trend direction
- strongest/weakest timeframe: largest/smallest deviation from the mean in
  the trend direction
"""

import math
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping, Optional

from ..config.defaults import AlignmentParams
from ..data.models import Timeframe
from ..logging.config import get_analysis_logger
from ..models.results import IndicatorResult

logger = get_analysis_logger(__name__)


class TrendDirection(Enum):
    """Overall direction of an indicator across timeframes."""
    BEARISH = "bearish"
    NEUTRAL = "neutral"
    BULLISH = "bullish"

    @property
    def sign(self) -> int:
        return {TrendDirection.BULLISH: 1, TrendDirection.BEARISH: -1}.get(self, 0)


@dataclass(frozen=True)
class TimeframeAlignment:
    """Alignment verdict for one indicator across several timeframes."""
    alignment_score: float
    trend_direction: TrendDirection
    confluence_strength: float
    values_by_timeframe: Mapping[Timeframe, float] = field(default_factory=dict)
    strongest_timeframe: Optional[Timeframe] = None
    weakest_timeframe: Optional[Timeframe] = None
    is_strong_confluence: bool = False

    def __post_init__(self):
        object.__setattr__(self, "values_by_timeframe", MappingProxyType(dict(self.values_by_timeframe)))

    def to_dict(self) -> dict[str, Any]:
        """Serialize with timeframe labels as keys."""
        return {
            "alignment_score": self.alignment_score,
            "trend_direction": self.trend_direction.value,
            "confluence_strength": self.confluence_strength,
            "values_by_timeframe": {tf.label: v for tf, v in self.values_by_timeframe.items()},
            "strongest_timeframe": self.strongest_timeframe.label if self.strongest_timeframe else None,
            "weakest_timeframe": self.weakest_timeframe.label if self.weakest_timeframe else None,
            "is_strong_confluence": self.is_strong_confluence,
        }


def calculate_alignment_score(values: list[float], dispersion_ratio: float = 0.2) -> float:
    """
    Score how tightly values cluster.

    score = 1 - min(sigma / (dispersion_ratio * |mean|), 1) with population
    sigma. A zero mean scores 1 only if every value is zero.

    Returns:
        Score in [0, 1]; 1.0 for a single value, 0.0 for no values
    """
    if not values:
        return 0.0
    if len(values) == 1 or max(values) == min(values):
        return 1.0

    mean = sum(values) / len(values)
    std_dev = math.sqrt(sum((v - mean) ** 2 for v in values) / len(values))

    max_expected = dispersion_ratio * abs(mean)
    if max_expected == 0:
        return 0.0

    normalized = min(std_dev / max_expected, 1.0)
    return max(0.0, 1.0 - normalized)


def determine_trend_direction(values: list[float], tolerance: float = 1e-9) -> TrendDirection:
    """
    Compare the lowest-timeframe reading with the highest-timeframe reading.

    Args:
        values: Readings in ascending timeframe order
        tolerance: Relative difference treated as no change

    Returns:
        BULLISH if last > first, BEARISH if last < first, NEUTRAL otherwise
    """
    if len(values) <= 1:
        return TrendDirection.NEUTRAL

    first, last = values[0], values[-1]
    difference = last - first
    if abs(difference) <= tolerance * max(abs(first), 1.0):
        return TrendDirection.NEUTRAL

    return TrendDirection.BULLISH if difference > 0 else TrendDirection.BEARISH


class AlignmentAnalyzer:
    """Reduces per-timeframe indicator results into a TimeframeAlignment."""

    def __init__(self, params: Optional[AlignmentParams] = None):
        self.params = params or AlignmentParams()

    def analyze(self, results_by_timeframe: Mapping[Timeframe, IndicatorResult]) -> TimeframeAlignment:
        """
        Analyze the alignment of one indicator across timeframes.

        Empty results carry no signal and are ignored.

        Args:
            results_by_timeframe: Indicator result per timeframe

        Returns:
            TimeframeAlignment; no usable readings give score 0 and NEUTRAL
        """
        values = {
            tf: float(result.value)
            for tf, result in (results_by_timeframe or {}).items()
            if not result.is_empty
        }
        ordered = Timeframe.ordered(values)
        readings = [values[tf] for tf in ordered]
        values_by_timeframe = {tf: values[tf] for tf in ordered}

        score = calculate_alignment_score(readings, self.params.dispersion_ratio)
        direction = determine_trend_direction(readings, self.params.trend_tolerance)
        confluence = score * direction.sign
        strongest, weakest = self._rank_timeframes(ordered, readings, direction)

        alignment = TimeframeAlignment(
            alignment_score=score,
            trend_direction=direction,
            confluence_strength=confluence,
            values_by_timeframe=values_by_timeframe,
            strongest_timeframe=strongest,
            weakest_timeframe=weakest,
            is_strong_confluence=(
                bool(readings)
                and score >= self.params.strong_score_threshold
                and abs(confluence) >= self.params.strong_confluence_threshold
            ),
        )

        logger.debug(
            "Timeframe alignment analyzed",
            timeframes=[tf.label for tf in ordered],
            alignment_score=score,
            trend_direction=direction.value,
            confluence_strength=confluence
        )
        return alignment

    @staticmethod
    def _rank_timeframes(ordered: list[Timeframe], readings: list[float],
                         direction: TrendDirection) -> tuple[Optional[Timeframe], Optional[Timeframe]]:
        """Strongest/weakest by signed deviation from the mean; ties go to the lower timeframe."""
        if not readings or direction is TrendDirection.NEUTRAL:
            return None, None

        mean = sum(readings) / len(readings)
        deviations = [(v - mean) * direction.sign for v in readings]

        strongest = max(range(len(ordered)), key=lambda i: (deviations[i], -i))
        weakest = min(range(len(ordered)), key=lambda i: (deviations[i], i))
        return ordered[strongest], ordered[weakest]
