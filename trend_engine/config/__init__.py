"""Engine configuration: defaults, YAML overrides and validation."""

from .defaults import (
    AlignmentParams,
    EngineConfig,
    IndicatorParams,
    OrchestratorParams,
    PriceParams,
    get_default_config,
)
from .loader import ConfigLoader
from .validation import ConfigIssue, ConfigValidator

__all__ = [
    "AlignmentParams",
    "EngineConfig",
    "IndicatorParams",
    "OrchestratorParams",
    "PriceParams",
    "get_default_config",
    "ConfigLoader",
    "ConfigIssue",
    "ConfigValidator",
]
