"""
Shared utilities (NOT pacing logic).

Usage:
    from summit_pacer.shared import parse_clock, format_clock
    from summit_pacer.shared.formatters import format_duration
"""
from .constants import (
    Terrain,
    Direction,
    Phase,
    MidnightPolicy,
    PACED_TERRAINS,
    DESCENT_MULTIPLIERS,
    TERRAIN_FACTOR_WEIGHT,
    OVERALL_FATIGUE_WEIGHT,
    NEUTRAL_FACTOR,
)
from .clock import (
    round_half_up,
    round_minutes,
    parse_clock,
    format_clock,
    normalize_clock,
    elapsed_minutes,
    clock_hour,
)
from .elevation import (
    interpolate_elevation,
    calculate_grade,
)
from .formatters import (
    format_duration,
    format_pace,
    format_percent_change,
    format_elevation,
    format_mile,
)

__all__ = [
    # constants
    "Terrain",
    "Direction",
    "Phase",
    "MidnightPolicy",
    "PACED_TERRAINS",
    "DESCENT_MULTIPLIERS",
    "TERRAIN_FACTOR_WEIGHT",
    "OVERALL_FATIGUE_WEIGHT",
    "NEUTRAL_FACTOR",
    # clock
    "round_half_up",
    "round_minutes",
    "parse_clock",
    "format_clock",
    "normalize_clock",
    "elapsed_minutes",
    "clock_hour",
    # elevation
    "interpolate_elevation",
    "calculate_grade",
    # formatters
    "format_duration",
    "format_pace",
    "format_percent_change",
    "format_elevation",
    "format_mile",
]
