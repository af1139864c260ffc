"""
Result models.

Immutable indicator result variants. Callers branch on ``kind`` (or on the
concrete type) rather than downcasting from a shared base class.
"""

from .results import (
    BandResult,
    EmptyResult,
    IndicatorResult,
    MACDResult,
    OscillatorResult,
    ResultKind,
    ScalarResult,
)

__all__ = [
    "BandResult",
    "EmptyResult",
    "IndicatorResult",
    "MACDResult",
    "OscillatorResult",
    "ResultKind",
    "ScalarResult",
]
