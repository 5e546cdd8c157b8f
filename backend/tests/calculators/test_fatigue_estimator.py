"""
Tests for the fatigue estimator.

Default config: flat 25, steady 35, boulder 60, technical 75, 04:00 start.
"""

import pytest

from summit_pacer.features.pacing import (
    MIDDLE_TETON_ROUTE,
    BasePaceConfig,
    CheckpointBeforeStartError,
    CheckpointReport,
)
from summit_pacer.features.pacing.calculators import FatigueEstimator, estimate_fatigue
from summit_pacer.shared.constants import PACED_TERRAINS, MidnightPolicy, Terrain


@pytest.fixture
def config():
    return BasePaceConfig()


@pytest.fixture
def estimator(config):
    return FatigueEstimator(MIDDLE_TETON_ROUTE, config)


def checkpoint(mile, actual_time):
    return CheckpointReport(mile=mile, actual_time=actual_time)


# =============================================================================
# Test Expected Time
# =============================================================================

class TestExpectedMinutes:
    """Tests for planned time to a mile at base paces."""

    def test_trailhead(self, estimator):
        assert estimator.expected_minutes_to_mile(0) == 0

    def test_on_waypoint(self, estimator):
        assert estimator.expected_minutes_to_mile(2) == 50
        assert estimator.expected_minutes_to_mile(4) == pytest.approx(110)

    def test_between_waypoints(self, estimator):
        """3 flat miles (75) plus 0.2 steady (7) = 82."""
        assert estimator.expected_minutes_to_mile(3.2) == pytest.approx(82)

    def test_summit(self, estimator):
        assert estimator.expected_minutes_to_mile(6.5) == pytest.approx(254.5)

    def test_past_summit_costs_full_ascent(self, estimator):
        assert estimator.expected_minutes_to_mile(8) == pytest.approx(254.5)

    def test_scenario_config(self):
        config = BasePaceConfig(flat=86, steady=60, boulder=60, technical=75)
        estimator = FatigueEstimator(MIDDLE_TETON_ROUTE, config)
        assert estimator.expected_minutes_to_mile(5.2) == pytest.approx(390)


# =============================================================================
# Test Estimate
# =============================================================================

class TestEstimate:
    """Tests for the fatigue blend."""

    def test_no_checkpoints_is_neutral(self, config):
        adjustment = estimate_fatigue(config, [])

        assert adjustment.overall_fatigue == 1.0
        assert all(adjustment.factors[t] == 1.0 for t in PACED_TERRAINS)

    def test_on_plan_is_neutral(self, config):
        """Arriving exactly on plan gives ratio 1.0 everywhere."""
        adjustment = estimate_fatigue(config, [checkpoint(2, "04:50")])

        assert adjustment.overall_fatigue == pytest.approx(1.0)
        assert all(adjustment.factors[t] == pytest.approx(1.0) for t in PACED_TERRAINS)

    def test_single_checkpoint_sets_all_factors(self):
        """ratio 430 / 390; terrain factor equals overall, so all factors match."""
        config = BasePaceConfig(flat=86, steady=60, boulder=60, technical=75)
        adjustment = estimate_fatigue(config, [checkpoint(5.2, "11:10")])

        expected = 430 / 390
        assert adjustment.overall_fatigue == pytest.approx(expected)
        for terrain in PACED_TERRAINS:
            assert adjustment.factors[terrain] == pytest.approx(expected)

    def test_blend(self, config):
        """
        Flat ratio 60/50 = 1.2, steady ratio 99/110 = 0.9, overall 1.05.

        flat = 1.2*0.6 + 1.05*0.4 = 1.14, steady = 0.9*0.6 + 1.05*0.4 = 0.96,
        terrains without checkpoints take the overall 1.05.
        """
        adjustment = estimate_fatigue(config, [checkpoint(2, "05:00"), checkpoint(4, "05:39")])

        assert adjustment.overall_fatigue == pytest.approx(1.05)
        assert adjustment.factors[Terrain.FLAT] == pytest.approx(1.14)
        assert adjustment.factors[Terrain.STEADY] == pytest.approx(0.96)
        assert adjustment.factors[Terrain.BOULDER] == pytest.approx(1.05)
        assert adjustment.factors[Terrain.TECHNICAL] == pytest.approx(1.05)

    def test_order_independent(self, config):
        first = estimate_fatigue(config, [checkpoint(2, "05:00"), checkpoint(4, "05:39")])
        second = estimate_fatigue(config, [checkpoint(4, "05:39"), checkpoint(2, "05:00")])

        assert first.overall_fatigue == pytest.approx(second.overall_fatigue)
        for terrain in PACED_TERRAINS:
            assert first.factors[terrain] == pytest.approx(second.factors[terrain])

    def test_trailhead_checkpoint_skipped(self, config):
        """Zero expected time has no ratio."""
        adjustment = estimate_fatigue(config, [checkpoint(0, "04:30")])
        assert adjustment.overall_fatigue == 1.0

    def test_incomplete_checkpoint_skipped(self, config):
        adjustment = estimate_fatigue(config, [CheckpointReport(mile=2), checkpoint(2, "05:00")])
        assert adjustment.overall_fatigue == pytest.approx(1.2)

    def test_only_paced_terrains(self, config):
        adjustment = estimate_fatigue(config, [checkpoint(2, "05:00")])
        assert set(adjustment.factors) == set(PACED_TERRAINS)
        assert Terrain.START not in adjustment.factors

    def test_start_time_override(self, config):
        """Start 04:10 makes 05:00 at mile 2 exactly on plan."""
        adjustment = estimate_fatigue(config, [checkpoint(2, "05:00")], start_time="04:10")
        assert adjustment.overall_fatigue == pytest.approx(1.0)


# =============================================================================
# Test Midnight Policy
# =============================================================================

class TestMidnightPolicy:
    """Tests for checkpoint times earlier than the start time."""

    def test_reject(self):
        config = BasePaceConfig(start_time="22:00")
        with pytest.raises(CheckpointBeforeStartError):
            estimate_fatigue(config, [checkpoint(1, "00:10")])

    def test_next_day(self):
        """130 elapsed over 25 expected."""
        config = BasePaceConfig(start_time="22:00")
        adjustment = estimate_fatigue(
            config,
            [checkpoint(1, "00:10")],
            midnight_policy=MidnightPolicy.NEXT_DAY,
        )
        assert adjustment.overall_fatigue == pytest.approx(5.2)


# =============================================================================
# Test Measure
# =============================================================================

class TestMeasure:
    """Tests for per-checkpoint performance."""

    def test_measure(self, estimator):
        perf = estimator.measure([checkpoint(4, "05:39")])[0]

        assert perf.mile == 4
        assert perf.elapsed_minutes == 99
        assert perf.expected_minutes == pytest.approx(110)
        assert perf.terrain == Terrain.STEADY
        assert perf.ratio == pytest.approx(0.9)

    def test_ratio_none_at_trailhead(self, estimator):
        perf = estimator.measure([checkpoint(0, "04:05")])[0]
        assert perf.ratio is None

    def test_skips_incomplete(self, estimator):
        assert estimator.measure([CheckpointReport(actual_time="05:00")]) == []
