"""
Tests for the pace resolver.

Tests terrain/direction lookup, fatigue adjustment and rounding order.
"""

import pytest

from summit_pacer.features.pacing import BasePaceConfig, FatigueAdjustment
from summit_pacer.features.pacing.calculators import PaceResolver, estimate_fatigue, resolve_pace
from summit_pacer.shared.constants import PACED_TERRAINS, Direction, Terrain


@pytest.fixture
def config():
    """Default paces: flat 25, steady 35, boulder 60, technical 75."""
    return BasePaceConfig()


def uniform_adjustment(factor: float) -> FatigueAdjustment:
    return FatigueAdjustment(
        factors={terrain: factor for terrain in PACED_TERRAINS},
        overall_fatigue=factor,
    )


# =============================================================================
# Test Ascent
# =============================================================================

class TestAscentPace:
    """Tests for ascent pace resolution."""

    def test_base_paces(self, config):
        assert resolve_pace(Terrain.FLAT, Direction.ASCENT, config) == 25
        assert resolve_pace(Terrain.STEADY, Direction.ASCENT, config) == 35
        assert resolve_pace(Terrain.BOULDER, Direction.ASCENT, config) == 60
        assert resolve_pace(Terrain.TECHNICAL, Direction.ASCENT, config) == 75

    def test_empty_adjustment_is_base(self, config):
        """No factor for the terrain -> base pace."""
        assert resolve_pace(
            Terrain.BOULDER, Direction.ASCENT, config, FatigueAdjustment.none()
        ) == 60

    def test_adjusted(self, config):
        """round(60 * 1.1026) = 66."""
        adjustment = uniform_adjustment(430 / 390)
        assert resolve_pace(Terrain.BOULDER, Direction.ASCENT, config, adjustment) == 66

    def test_half_rounds_up(self, config):
        """35 * 1.5 = 52.5 -> 53."""
        adjustment = FatigueAdjustment(factors={Terrain.STEADY: 1.5}, overall_fatigue=1.5)
        assert resolve_pace(Terrain.STEADY, Direction.ASCENT, config, adjustment) == 53

    def test_only_listed_terrain_is_adjusted(self, config):
        adjustment = FatigueAdjustment(factors={Terrain.FLAT: 2.0}, overall_fatigue=2.0)
        assert resolve_pace(Terrain.FLAT, Direction.ASCENT, config, adjustment) == 50
        assert resolve_pace(Terrain.STEADY, Direction.ASCENT, config, adjustment) == 35

    def test_start_has_no_pace(self, config):
        with pytest.raises(ValueError):
            resolve_pace(Terrain.START, Direction.ASCENT, config)


# =============================================================================
# Test Neutral Adjustment
# =============================================================================

class TestNeutralAdjustment:
    """The zero-checkpoint adjustment leaves every pace unchanged."""

    @pytest.mark.parametrize("base", [
        BasePaceConfig(),
        BasePaceConfig(flat=26, steady=33, boulder=61, technical=79),
        BasePaceConfig(flat=1, steady=1, boulder=1, technical=1),
    ])
    @pytest.mark.parametrize("direction", [Direction.ASCENT, Direction.DESCENT])
    def test_no_checkpoints_keeps_base_paces(self, base, direction):
        adjustment = estimate_fatigue(base, [])

        for terrain in PACED_TERRAINS:
            assert (
                resolve_pace(terrain, direction, base, adjustment)
                == resolve_pace(terrain, direction, base)
            )

    def test_ascent_equals_configured_pace(self, config):
        adjustment = estimate_fatigue(config, [])
        for terrain in PACED_TERRAINS:
            assert resolve_pace(terrain, Direction.ASCENT, config, adjustment) == config.pace_for(terrain)


# =============================================================================
# Test Descent
# =============================================================================

class TestDescentPace:
    """Tests for descent pace resolution."""

    def test_base_descent(self, config):
        """25/1.8=13.9 -> 14, 35/1.6=21.9 -> 22, 60/1.3=46.2 -> 46, 75/1.1=68.2 -> 68."""
        assert resolve_pace(Terrain.FLAT, Direction.DESCENT, config) == 14
        assert resolve_pace(Terrain.STEADY, Direction.DESCENT, config) == 22
        assert resolve_pace(Terrain.BOULDER, Direction.DESCENT, config) == 46
        assert resolve_pace(Terrain.TECHNICAL, Direction.DESCENT, config) == 68

    def test_descent_uses_rounded_adjusted_ascent(self, config):
        """Adjusted boulder ascent 66 -> 66 / 1.3 = 50.8 -> 51."""
        adjustment = uniform_adjustment(430 / 390)
        assert resolve_pace(Terrain.BOULDER, Direction.DESCENT, config, adjustment) == 51

    def test_rounds_before_dividing(self, config):
        """75 * 1.112 = 83.4 -> 83, 83 / 1.1 = 75.45 -> 75 (not 83.4 / 1.1 = 75.8 -> 76)."""
        adjustment = FatigueAdjustment(factors={Terrain.TECHNICAL: 1.112}, overall_fatigue=1.112)
        assert resolve_pace(Terrain.TECHNICAL, Direction.DESCENT, config, adjustment) == 75

    @pytest.mark.parametrize("terrain", PACED_TERRAINS)
    def test_descent_faster_than_ascent(self, config, terrain):
        assert (
            resolve_pace(terrain, Direction.DESCENT, config)
            < resolve_pace(terrain, Direction.ASCENT, config)
        )

    @pytest.mark.parametrize("terrain", PACED_TERRAINS)
    def test_descent_faster_than_ascent_when_adjusted(self, config, terrain):
        adjustment = uniform_adjustment(1.3)
        assert (
            resolve_pace(terrain, Direction.DESCENT, config, adjustment)
            < resolve_pace(terrain, Direction.ASCENT, config, adjustment)
        )


# =============================================================================
# Test PaceResolver
# =============================================================================

class TestPaceResolver:
    """Tests for the bound resolver."""

    def test_defaults_to_no_adjustment(self, config):
        resolver = PaceResolver(config)
        assert resolver.ascent(Terrain.BOULDER) == 60
        assert resolver.descent(Terrain.BOULDER) == 46

    def test_with_adjustment(self, config):
        resolver = PaceResolver(config, uniform_adjustment(430 / 390))
        assert resolver.ascent(Terrain.BOULDER) == 66
        assert resolver.descent(Terrain.BOULDER) == 51
        assert resolver.resolve(Terrain.BOULDER, Direction.ASCENT) == 66
