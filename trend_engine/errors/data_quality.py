"""
Data quality error classifications for price and candle series.

These exceptions describe input series that cannot produce a correct
indicator value because they are too short or out of order.
"""

from typing import Optional, Dict, Any


class DataQualityError(Exception):
    """Base class for data quality issues that can be handled gracefully."""
    
    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}
        self.recoverable = True


class TemporalDataError(DataQualityError):
    """Timestamp or sequencing issues in a series."""
    
    def __init__(self, message: str, timestamp: Optional[Any] = None, 
                 previous_timestamp: Optional[Any] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.timestamp = timestamp
        self.previous_timestamp = previous_timestamp


class UnsortedInputError(TemporalDataError):
    """Series is not strictly ascending by timestamp."""
    
    def __init__(self, message: str, index: Optional[int] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.index = index


class InsufficientDataError(DataQualityError):
    """Not enough points in the series for the calculation."""
    
    def __init__(self, message: str, required_count: Optional[int] = None, 
                 available_count: Optional[int] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.required_count = required_count
        self.available_count = available_count

    @classmethod
    def for_counts(cls, required: int, actual: int, **kwargs) -> "InsufficientDataError":
        """Build the standard message naming required vs actual counts."""
        return cls(
            f"Insufficient data points: need at least {required}, got {actual}",
            required_count=required,
            available_count=actual,
            **kwargs
        )
