"""
Unified constants for terrain classes and pacing.

This module provides a single source of truth for terrain naming,
descent multipliers and fatigue blend weights across the package.
"""

from enum import Enum


class Terrain(str, Enum):
    """
    Terrain class of a route segment.

    The terrain of a segment describes the leg that ARRIVES at it,
    so the pace for walking from mile 3.0 to mile 3.5 is the pace
    of the mile 3.5 segment's terrain.
    """
    START = "start"
    FLAT = "flat"
    STEADY = "steady"
    BOULDER = "boulder"
    TECHNICAL = "technical"


class Direction(str, Enum):
    """Walking direction along the route."""
    ASCENT = "ascent"
    DESCENT = "descent"


class Phase(str, Enum):
    """Phase of a predicted arrival event."""
    ASCENT = "Ascent"
    SUMMIT = "Summit"
    DESCENT = "Descent"


class MidnightPolicy(str, Enum):
    """
    How a reported clock time earlier than the start time is read.

    REJECT:   the report is invalid input (CheckpointBeforeStartError)
    NEXT_DAY: the report is after midnight of the same climbing day
    """
    REJECT = "reject"
    NEXT_DAY = "next_day"


# Terrains that carry a pace. START only marks the trailhead.
PACED_TERRAINS: tuple[Terrain, ...] = (
    Terrain.FLAT,
    Terrain.STEADY,
    Terrain.BOULDER,
    Terrain.TECHNICAL,
)

# Descent pace = ascent pace / multiplier. Always > 1.
DESCENT_MULTIPLIERS: dict[Terrain, float] = {
    Terrain.FLAT: 1.8,
    Terrain.STEADY: 1.6,
    Terrain.BOULDER: 1.3,
    Terrain.TECHNICAL: 1.1,
}


# =============================================================================
# Fatigue blend
# =============================================================================
# adjustment[terrain] = terrain_factor * 0.6 + overall_fatigue * 0.4
TERRAIN_FACTOR_WEIGHT = 0.6
OVERALL_FATIGUE_WEIGHT = 0.4

# Neutral factor: "on pace"
NEUTRAL_FACTOR = 1.0


# =============================================================================
# Display thresholds
# =============================================================================
# Fatigue impact of an adjustment factor on a schedule row
HIGH_IMPACT_FACTOR = 1.15
MODERATE_IMPACT_FACTOR = 1.05
STRONG_IMPACT_FACTOR = 0.95

# Overall fatigue percent bands for the performance analysis
HIGH_FATIGUE_PERCENT = 15
MODERATE_FATIGUE_PERCENT = 5
STRONG_PERFORMANCE_PERCENT = -5

# A checkpoint within this many miles marks a schedule row as observed
CHECKPOINT_MATCH_MILES = 0.1

# Returning at or after this clock hour is flagged as late
DEFAULT_LATE_RETURN_HOUR = 17

DESCENT_LOCATION_SUFFIX = " (Descent)"

MINUTES_PER_DAY = 24 * 60
FEET_PER_MILE = 5280
