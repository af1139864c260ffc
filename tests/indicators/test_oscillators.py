"""Tests for Stochastic %K and Williams %R"""

import pytest
from trend_engine.indicators.oscillators import (
    StochasticOscillator,
    WilliamsPercentR,
    calculate_stochastic,
    calculate_williams_r,
)


class TestStochastic:
    """Test Stochastic %K"""

    def test_close_at_high(self):
        """Test %K is 100 when the close is the window high"""
        assert calculate_stochastic([10.0, 12.0, 15.0, 11.0, 20.0], 5) == 100.0

    def test_close_at_low(self):
        """Test %K is 0 when the close is the window low"""
        assert calculate_stochastic([20.0, 15.0, 18.0, 10.0], 4) == 0.0

    def test_midpoint(self):
        """Test %K at the middle of the range"""
        assert calculate_stochastic([10.0, 20.0, 15.0], 3) == 50.0

    def test_zero_range(self):
        """Test a flat window reads 50"""
        assert calculate_stochastic([7.0, 7.0, 7.0], 3) == 50.0

    def test_window_limited_to_period(self):
        """Test extremes outside the window are ignored"""
        assert calculate_stochastic([1000.0, 10.0, 20.0, 15.0], 3) == 50.0

    def test_indicator_bounds(self, price_series):
        """Test result carries [0, 100] bounds"""
        result = StochasticOscillator(5).calculate(price_series([10.0, 12.0, 11.0, 14.0, 13.0]))
        assert (result.lower_bound, result.upper_bound) == (0.0, 100.0)
        assert 0.0 <= result.value <= 100.0


class TestWilliamsR:
    """Test Williams %R"""

    def test_close_at_high(self):
        """Test %R is 0 when the close is the window high"""
        assert calculate_williams_r([10.0, 12.0, 15.0, 11.0, 20.0], 5) == 0.0

    def test_close_at_low(self):
        """Test %R is -100 when the close is the window low"""
        assert calculate_williams_r([20.0, 15.0, 18.0, 10.0], 4) == -100.0

    def test_midpoint(self):
        """Test %R at the middle of the range"""
        assert calculate_williams_r([10.0, 20.0, 15.0], 3) == -50.0

    def test_zero_range(self):
        """Test a flat window reads -50"""
        assert calculate_williams_r([7.0, 7.0, 7.0], 3) == -50.0

    def test_indicator_bounds(self, price_series):
        """Test result carries [-100, 0] bounds"""
        result = WilliamsPercentR(5).calculate(price_series([10.0, 12.0, 11.0, 14.0, 13.0]))
        assert (result.lower_bound, result.upper_bound) == (-100.0, 0.0)
        assert -100.0 <= result.value <= 0.0

    @pytest.mark.parametrize("values", [
        [1.0, 2.0, 3.0, 4.0, 5.0],
        [5.0, 4.0, 3.0, 2.0, 1.0],
        [3.0, 1.0, 4.0, 1.0, 5.0],
    ])
    def test_stochastic_and_williams_agree(self, values):
        """Test %R = %K - 100 for the same window"""
        assert calculate_williams_r(values, 5) == pytest.approx(calculate_stochastic(values, 5) - 100.0)
