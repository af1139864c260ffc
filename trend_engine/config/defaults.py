"""Default configuration parameters for the indicator and alignment engine."""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class IndicatorParams:
    """Indicator construction parameters not covered by the period argument."""
    bollinger_k: float = 2.0                 # Band width in standard deviations
    macd_fast: int = 12                      # Fast EMA period
    macd_slow: int = 26                      # Slow EMA period
    macd_signal: int = 9                     # Signal line EMA period


@dataclass(frozen=True)
class AlignmentParams:
    """Alignment scoring parameters."""
    dispersion_ratio: float = 0.2            # Std dev at this fraction of |mean| scores 0
    trend_tolerance: float = 1e-9            # Relative first/last difference treated as flat
    strong_score_threshold: float = 0.8
    strong_confluence_threshold: float = 0.8


@dataclass(frozen=True)
class OrchestratorParams:
    """Fan-out parameters for batch and multi-timeframe calculations."""
    max_workers: Optional[int] = None        # None means os.cpu_count()


@dataclass(frozen=True)
class PriceParams:
    """Price value object limits."""
    max_price: float = 1_000_000_000_000.0   # One trillion


@dataclass(frozen=True)
class EngineConfig:
    """Complete default configuration."""
    indicators: IndicatorParams
    alignment: AlignmentParams
    orchestrator: OrchestratorParams
    price: PriceParams


def get_default_config() -> EngineConfig:
    """Get the default configuration instance."""
    return EngineConfig(
        indicators=IndicatorParams(),
        alignment=AlignmentParams(),
        orchestrator=OrchestratorParams(),
        price=PriceParams(),
    )
