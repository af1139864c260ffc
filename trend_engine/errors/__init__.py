"""
Error classification for the indicator and alignment engine.

Data-shape problems (too few points, unsorted input) are data quality errors,
bad parameters are validation errors raised at the call boundary, and
unexpected failures inside a calculation surface as system failures.
"""

from .data_quality import (
    DataQualityError,
    TemporalDataError,
    UnsortedInputError,
    InsufficientDataError,
)
from .validation import (
    ValidationError,
    InvalidConfigurationError,
)
from .system_failures import (
    SystemFailureError,
    IndicatorCalculationError,
)

__all__ = [
    # Data Quality Errors
    "DataQualityError",
    "TemporalDataError",
    "UnsortedInputError",
    "InsufficientDataError",
    # Validation Errors
    "ValidationError",
    "InvalidConfigurationError",
    # System Failures
    "SystemFailureError",
    "IndicatorCalculationError",
]
