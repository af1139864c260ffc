"""Multi-timeframe orchestration and alignment analysis"""

from .alignment import (
    AlignmentAnalyzer,
    TimeframeAlignment,
    TrendDirection,
    calculate_alignment_score,
    determine_trend_direction,
)
from .orchestrator import IndicatorRequest, MultiTimeframeIndicatorService

__all__ = [
    "AlignmentAnalyzer",
    "TimeframeAlignment",
    "TrendDirection",
    "calculate_alignment_score",
    "determine_trend_direction",
    "IndicatorRequest",
    "MultiTimeframeIndicatorService",
]
