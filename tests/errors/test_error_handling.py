"""
Error handling tests for the indicator engine.

Tests cover the error classification hierarchy, error context and the way
data quality failures are isolated inside batch calculations.
"""

import pytest
from datetime import timedelta

from trend_engine.errors import (
    DataQualityError,
    TemporalDataError,
    UnsortedInputError,
    InsufficientDataError,
    ValidationError,
    InvalidConfigurationError,
    SystemFailureError,
    IndicatorCalculationError,
)
from trend_engine.analysis.orchestrator import MultiTimeframeIndicatorService
from trend_engine.data.models import Timeframe
from trend_engine.indicators.factory import IndicatorFactory, IndicatorType


class TestErrorClassification:
    """Test error classification system."""

    def test_data_quality_error_hierarchy(self):
        """Test that data quality errors have proper hierarchy."""
        base_error = DataQualityError("base error")
        assert base_error.recoverable is True
        assert base_error.context == {}

        temporal_error = TemporalDataError("timestamp error", timestamp=123456789)
        assert isinstance(temporal_error, DataQualityError)
        assert temporal_error.timestamp == 123456789

        unsorted_error = UnsortedInputError("out of order", index=3, previous_timestamp=5)
        assert isinstance(unsorted_error, TemporalDataError)
        assert unsorted_error.index == 3
        assert unsorted_error.previous_timestamp == 5

    def test_insufficient_data_message(self):
        """Test the standard insufficient data message."""
        error = InsufficientDataError.for_counts(3, 2, context={"indicator": "SMA"})
        assert str(error) == "Insufficient data points: need at least 3, got 2"
        assert error.required_count == 3
        assert error.available_count == 2
        assert error.context == {"indicator": "SMA"}

    def test_validation_errors(self):
        """Test that validation errors are not recoverable."""
        error = ValidationError("period must be greater than 0", field="period", value=0)
        assert error.recoverable is False
        assert error.field == "period"
        assert error.value == 0

        config_error = InvalidConfigurationError("Fast period must be less than slow period")
        assert isinstance(config_error, ValidationError)

    def test_system_failures(self):
        """Test system failure classification."""
        error = IndicatorCalculationError("failed", indicator_name="RSI", calculation_input={"period": 14})
        assert isinstance(error, SystemFailureError)
        assert error.recoverable is False
        assert error.indicator_name == "RSI"
        assert error.calculation_input == {"period": 14}

    def test_families_are_disjoint(self):
        """Test the three families do not inherit from each other."""
        assert not issubclass(ValidationError, DataQualityError)
        assert not issubclass(DataQualityError, ValidationError)
        assert not issubclass(SystemFailureError, (DataQualityError, ValidationError))


class TestErrorIsolation:
    """Test that unit failures do not abort sibling units."""

    def test_unsorted_series_isolated(self, price_series):
        """Test an unsorted series fails every unit without raising."""
        prices = price_series([float(v) for v in range(1, 31)])
        prices[10], prices[11] = prices[11], prices[10]

        service = MultiTimeframeIndicatorService(IndicatorFactory.default())
        results = service.calculate_indicators(
            "BTC-USD", prices, [(IndicatorType.SIMPLE_MOVING_AVERAGE, 5), (IndicatorType.MACD, 14)]
        )
        assert results == {}

    def test_gappy_candles_still_aggregate(self, candle_series, base_time):
        """Test gaps in source candles only shorten the aggregated series."""
        candles = candle_series([100.0 + i for i in range(120)])
        candles = [c for c in candles if not (30 <= (c.timestamp - base_time) / timedelta(minutes=1) < 60)]

        service = MultiTimeframeIndicatorService(IndicatorFactory.default())
        results = service.calculate_across_timeframes(
            "BTC-USD", candles, [Timeframe.FIFTEEN_MINUTES, Timeframe.HOUR],
            IndicatorType.SIMPLE_MOVING_AVERAGE, 4
        )
        # 15m keeps 6 of 8 buckets, 1h keeps 2
        assert list(results) == [Timeframe.FIFTEEN_MINUTES]
