"""
Pace Resolver

Maps a terrain class and walking direction to minutes per mile,
applying the active fatigue adjustment.

Ascent:
    pace = base                          (no factor for the terrain)
    pace = round(base * factor)          (factor present)

Descent:
    pace = round(ascent_pace / multiplier)

The ascent pace is rounded BEFORE the descent division, so descent
paces are derived from the same whole-minute ascent pace the user sees.
"""

from typing import Optional

from summit_pacer.shared.clock import round_half_up
from summit_pacer.shared.constants import DESCENT_MULTIPLIERS, Direction, Terrain
from ..models import FatigueAdjustment
from ..schemas import BasePaceConfig


def resolve_pace(
    terrain: Terrain,
    direction: Direction,
    base_paces: BasePaceConfig,
    adjustment: Optional[FatigueAdjustment] = None
) -> int:
    """
    Resolve minutes per mile for one terrain and direction.

    Args:
        terrain: Terrain class (never START)
        direction: ASCENT or DESCENT
        base_paces: User ascent paces
        adjustment: Active fatigue adjustment (None = no adjustment)

    Returns:
        Whole minutes per mile. Unadjusted ascent paces are the
        configured base paces.

    Raises:
        ValueError: For terrain START
    """
    if direction == Direction.DESCENT:
        ascent = resolve_pace(terrain, Direction.ASCENT, base_paces, adjustment)
        return round_half_up(ascent / DESCENT_MULTIPLIERS[terrain])

    base = base_paces.pace_for(terrain)
    factor = adjustment.factor_for(terrain) if adjustment is not None else None
    if factor is None:
        return base
    return round_half_up(base * factor)


class PaceResolver:
    """
    Pace lookup bound to one configuration and adjustment.

    Usage:
        resolver = PaceResolver(config, adjustment)
        resolver.ascent(Terrain.BOULDER)   # 66
        resolver.descent(Terrain.BOULDER)  # 51
    """

    def __init__(
        self,
        base_paces: BasePaceConfig,
        adjustment: Optional[FatigueAdjustment] = None
    ):
        self.base_paces = base_paces
        self.adjustment = adjustment or FatigueAdjustment.none()

    def resolve(self, terrain: Terrain, direction: Direction) -> int:
        return resolve_pace(terrain, direction, self.base_paces, self.adjustment)

    def ascent(self, terrain: Terrain) -> int:
        return self.resolve(terrain, Direction.ASCENT)

    def descent(self, terrain: Terrain) -> int:
        return self.resolve(terrain, Direction.DESCENT)
