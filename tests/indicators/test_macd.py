"""Tests for MACD calculation"""

import pytest
from trend_engine.errors import InsufficientDataError, InvalidConfigurationError, ValidationError
from trend_engine.indicators.macd import MACD, calculate_macd
from trend_engine.models.results import MACDResult, ResultKind


class TestMACDFunction:
    """Test calculate_macd"""

    def test_small_known_series(self):
        """Test MACD over a linear series with short periods"""
        # fast EMA(2) runs 0.5 ahead of slow EMA(3) on a unit-step line
        macd_line, signal_line = calculate_macd([1.0, 2.0, 3.0, 4.0, 5.0], 2, 3, 2)
        assert macd_line == pytest.approx(0.5)
        assert signal_line == pytest.approx(0.5)

    def test_flat_series(self):
        """Test MACD and signal are zero for flat prices"""
        macd_line, signal_line = calculate_macd([100.0] * 40)
        assert macd_line == pytest.approx(0.0, abs=1e-9)
        assert signal_line == pytest.approx(0.0, abs=1e-9)

    def test_rising_series_positive(self):
        """Test fast EMA leads slow EMA in an uptrend"""
        macd_line, _ = calculate_macd([100.0 + i for i in range(60)])
        assert macd_line > 0

    def test_falling_series_negative(self):
        """Test fast EMA trails slow EMA in a downtrend"""
        macd_line, _ = calculate_macd([200.0 - i for i in range(60)])
        assert macd_line < 0


class TestMACDIndicator:
    """Test MACD indicator unit"""

    def test_defaults(self):
        """Test default periods and required points"""
        macd = MACD()
        assert (macd.fast_period, macd.slow_period, macd.signal_period) == (12, 26, 9)
        assert macd.period == 26
        assert macd.required_points == 35

    def test_histogram_identity(self, price_series):
        """Test histogram equals macd_line - signal_line"""
        values = [100.0 + (i % 7) * 1.5 + i * 0.2 for i in range(50)]
        result = MACD().calculate(price_series(values))

        assert isinstance(result, MACDResult)
        assert result.kind is ResultKind.MACD
        assert result.histogram == result.macd_line - result.signal_line
        assert result.value == result.macd_line
        assert (result.fast_period, result.slow_period, result.signal_period) == (12, 26, 9)

    def test_insufficient_data(self, price_series):
        """Test MACD needs slow + signal points"""
        with pytest.raises(InsufficientDataError, match="need at least 35, got 34"):
            MACD().calculate(price_series([100.0] * 34))

    def test_fast_not_less_than_slow(self):
        """Test fast >= slow is an invalid configuration"""
        with pytest.raises(InvalidConfigurationError, match="Fast period must be less than slow period"):
            MACD(fast_period=26, slow_period=12)

        with pytest.raises(InvalidConfigurationError):
            MACD(fast_period=12, slow_period=12)

    @pytest.mark.parametrize("kwargs,field", [
        ({"fast_period": 0}, "fast period"),
        ({"slow_period": -1}, "slow period"),
        ({"signal_period": 0}, "signal period"),
    ])
    def test_non_positive_periods(self, kwargs, field):
        """Test each period must be positive"""
        with pytest.raises(ValidationError) as exc_info:
            MACD(**kwargs)
        assert exc_info.value.field == field
        assert str(exc_info.value) == f"{field} must be greater than 0"
