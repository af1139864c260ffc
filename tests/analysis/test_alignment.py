"""Tests for multi-timeframe alignment analysis"""

import pytest
from trend_engine.analysis.alignment import (
    AlignmentAnalyzer,
    TimeframeAlignment,
    TrendDirection,
    calculate_alignment_score,
    determine_trend_direction,
)
from trend_engine.config.defaults import AlignmentParams
from trend_engine.data.models import Timeframe
from trend_engine.models.results import EmptyResult, ScalarResult

M1, M5, H1, D1 = Timeframe.MINUTE, Timeframe.FIVE_MINUTES, Timeframe.HOUR, Timeframe.DAY


def scalar(value, base_time):
    return ScalarResult(value=value, start_time=base_time, end_time=base_time)


@pytest.fixture
def results(base_time):
    """Build a timeframe -> ScalarResult map from raw values."""
    def build(values_by_timeframe):
        return {tf: scalar(v, base_time) for tf, v in values_by_timeframe.items()}
    return build


class TestAlignmentScore:
    """Test calculate_alignment_score"""

    def test_no_values(self):
        assert calculate_alignment_score([]) == 0.0

    def test_single_value(self):
        assert calculate_alignment_score([42.0]) == 1.0

    def test_identical_values(self):
        assert calculate_alignment_score([0.0, 0.0, 0.0]) == 1.0
        assert calculate_alignment_score([55.5, 55.5]) == 1.0

    def test_tight_cluster(self):
        """Test sigma well inside the dispersion budget scores near 1"""
        # mean 51, sigma sqrt(2/3), budget 10.2
        assert calculate_alignment_score([50.0, 51.0, 52.0]) == pytest.approx(1 - (2 / 3) ** 0.5 / 10.2)

    def test_wide_spread_scores_zero(self):
        assert calculate_alignment_score([10.0, 50.0, 90.0]) == 0.0

    def test_zero_mean(self):
        """Test values centred on zero have no dispersion budget"""
        assert calculate_alignment_score([-1.0, 1.0]) == 0.0

    def test_dispersion_ratio(self):
        """Test a wider ratio is more forgiving"""
        values = [40.0, 50.0, 60.0]
        assert calculate_alignment_score(values, 0.5) > calculate_alignment_score(values, 0.2)

    @pytest.mark.parametrize("values", [[1.0, 2.0], [100.0, 50.0, 75.0, 80.0], [-30.0, -20.0, -25.0]])
    def test_score_bounded(self, values):
        assert 0.0 <= calculate_alignment_score(values) <= 1.0


class TestTrendDirection:
    """Test determine_trend_direction"""

    def test_bullish(self):
        assert determine_trend_direction([50.0, 49.0, 55.0]) is TrendDirection.BULLISH

    def test_bearish(self):
        assert determine_trend_direction([55.0, 60.0, 50.0]) is TrendDirection.BEARISH

    def test_neutral_when_equal(self):
        assert determine_trend_direction([50.0, 70.0, 50.0]) is TrendDirection.NEUTRAL

    def test_neutral_within_tolerance(self):
        """Test floating-point noise does not flip direction"""
        assert determine_trend_direction([100.0, 100.0 + 1e-12]) is TrendDirection.NEUTRAL

    def test_single_and_empty(self):
        assert determine_trend_direction([1.0]) is TrendDirection.NEUTRAL
        assert determine_trend_direction([]) is TrendDirection.NEUTRAL

    def test_sign(self):
        assert [d.sign for d in TrendDirection] == [-1, 0, 1]


class TestAlignmentAnalyzer:
    """Test AlignmentAnalyzer.analyze"""

    def test_bullish_confluence(self, results):
        """Test tightly clustered rising readings"""
        alignment = AlignmentAnalyzer().analyze(results({M1: 50.0, M5: 51.0, H1: 52.0}))

        assert alignment.trend_direction is TrendDirection.BULLISH
        assert alignment.alignment_score == pytest.approx(0.92, abs=0.005)
        assert alignment.confluence_strength == alignment.alignment_score
        assert alignment.strongest_timeframe is H1
        assert alignment.weakest_timeframe is M1
        assert alignment.is_strong_confluence is True

    def test_bearish_confluence(self, results):
        """Test falling readings give negative confluence"""
        alignment = AlignmentAnalyzer().analyze(results({M1: 52.0, M5: 51.0, H1: 50.0}))

        assert alignment.trend_direction is TrendDirection.BEARISH
        assert alignment.confluence_strength == -alignment.alignment_score
        assert alignment.strongest_timeframe is H1
        assert alignment.weakest_timeframe is M1
        assert alignment.is_strong_confluence is True

    def test_divergent_readings(self, results):
        """Test scattered readings are not strong confluence"""
        alignment = AlignmentAnalyzer().analyze(results({M1: 20.0, M5: 80.0, H1: 45.0}))

        assert alignment.alignment_score == 0.0
        assert alignment.confluence_strength == 0.0
        assert alignment.is_strong_confluence is False

    def test_values_ordered_by_timeframe(self, results):
        """Test readings are ordered by timeframe duration regardless of input order"""
        alignment = AlignmentAnalyzer().analyze(results({D1: 4.0, M1: 1.0, H1: 3.0, M5: 2.0}))
        assert list(alignment.values_by_timeframe) == [M1, M5, H1, D1]
        assert alignment.trend_direction is TrendDirection.BULLISH

    def test_empty_input(self):
        """Test no timeframes gives score 0 and neutral"""
        alignment = AlignmentAnalyzer().analyze({})

        assert alignment.alignment_score == 0.0
        assert alignment.trend_direction is TrendDirection.NEUTRAL
        assert alignment.confluence_strength == 0.0
        assert alignment.strongest_timeframe is None
        assert alignment.weakest_timeframe is None
        assert alignment.is_strong_confluence is False

    def test_single_timeframe(self, results):
        """Test one timeframe aligns perfectly but has no direction"""
        alignment = AlignmentAnalyzer().analyze(results({H1: 65.0}))

        assert alignment.alignment_score == 1.0
        assert alignment.trend_direction is TrendDirection.NEUTRAL
        assert alignment.confluence_strength == 0.0
        assert alignment.strongest_timeframe is None
        assert alignment.is_strong_confluence is False

    def test_empty_results_ignored(self, results):
        """Test EmptyResult entries carry no signal"""
        readings = results({M1: 50.0, H1: 52.0})
        readings[M5] = EmptyResult(reason="No price data")
        alignment = AlignmentAnalyzer().analyze(readings)

        assert list(alignment.values_by_timeframe) == [M1, H1]

    def test_strongest_tie_goes_to_lower_timeframe(self, results):
        """Test equal deviations resolve to the lower timeframe"""
        alignment = AlignmentAnalyzer().analyze(results({M1: 1.0, M5: 3.0, H1: 3.0}))
        assert alignment.strongest_timeframe is M5
        assert alignment.weakest_timeframe is M1

    def test_thresholds_configurable(self, results):
        """Test a stricter score threshold withholds strong confluence"""
        analyzer = AlignmentAnalyzer(AlignmentParams(strong_score_threshold=0.95))
        alignment = analyzer.analyze(results({M1: 50.0, M5: 51.0, H1: 52.0}))
        assert alignment.is_strong_confluence is False

    def test_confluence_bounds(self, results):
        alignment = AlignmentAnalyzer().analyze(results({M1: 30.0, M5: 35.0, H1: 33.0, D1: 40.0}))
        assert -1.0 <= alignment.confluence_strength <= 1.0
        assert 0.0 <= alignment.alignment_score <= 1.0

    def test_to_dict(self, results):
        """Test serialization uses timeframe labels"""
        data = AlignmentAnalyzer().analyze(results({M1: 50.0, H1: 52.0})).to_dict()

        assert data["values_by_timeframe"] == {"1m": 50.0, "1h": 52.0}
        assert data["trend_direction"] == "bullish"
        assert data["strongest_timeframe"] == "1h"
        assert data["weakest_timeframe"] == "1m"

    def test_values_read_only(self, results):
        """Test the per-timeframe readings cannot be changed after analysis"""
        alignment = AlignmentAnalyzer().analyze(results({M1: 50.0, H1: 52.0}))

        with pytest.raises(TypeError):
            alignment.values_by_timeframe[M5] = 51.0
        assert dict(alignment.values_by_timeframe) == {M1: 50.0, H1: 52.0}

    def test_direct_construction_copies_values(self):
        """Test later edits to the source dict do not leak into the alignment"""
        values = {M1: 1.0}
        alignment = TimeframeAlignment(1.0, TrendDirection.NEUTRAL, 0.0, values)
        values[H1] = 2.0

        assert list(alignment.values_by_timeframe) == [M1]
