"""
Elevation utilities along a mile-indexed profile.

Profiles are sequences of objects with `mile` and `elevation` attributes,
ordered by mile.
"""

from typing import Sequence

from .clock import round_half_up
from .constants import FEET_PER_MILE


def interpolate_elevation(mile: float, profile: Sequence) -> float:
    """
    Linear elevation at a mile position.

    Args:
        mile: Position along the route (miles)
        profile: Points with `mile` and `elevation`, ordered by mile

    Returns:
        Interpolated elevation in feet. Positions outside the profile
        interpolate along the first-to-last span.
    """
    lower = profile[0]
    upper = profile[-1]

    for i in range(len(profile) - 1):
        if profile[i].mile <= mile <= profile[i + 1].mile:
            lower = profile[i]
            upper = profile[i + 1]
            break

    span = upper.mile - lower.mile
    if span == 0:
        return float(lower.elevation)

    position = (mile - lower.mile) / span
    return lower.elevation + (upper.elevation - lower.elevation) * position


def calculate_grade(
    start_elevation_ft: float,
    end_elevation_ft: float,
    distance_miles: float
) -> int:
    """
    Average grade in whole percent.

    Args:
        start_elevation_ft: Elevation at the start of the leg
        end_elevation_ft: Elevation at the end of the leg
        distance_miles: Horizontal distance

    Returns:
        Grade percent rounded half-up (0 for zero distance)
    """
    if distance_miles <= 0:
        return 0
    rise = end_elevation_ft - start_elevation_ft
    run = distance_miles * FEET_PER_MILE
    return round_half_up(rise / run * 100)
