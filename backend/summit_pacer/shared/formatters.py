"""
Formatting utilities for display.

Used by the analysis layer and by any presentation layer on top of it.
"""

from typing import Optional


def format_duration(minutes: float) -> str:
    """
    Format minutes as 'Xh Ym'.

    Args:
        minutes: Duration in minutes (e.g., 510)

    Returns:
        Formatted string (e.g., '8h 30m')
    """
    if minutes < 0:
        return "—"

    total_minutes = int(minutes)
    h = total_minutes // 60
    m = total_minutes % 60

    if h == 0:
        return f"{m}m"
    return f"{h}h {m}m"


def format_pace(pace_min_mile: Optional[float]) -> str:
    """
    Format pace as 'N min/mi'.

    Args:
        pace_min_mile: Pace in minutes per mile

    Returns:
        Formatted string (e.g., '25 min/mi')
    """
    if pace_min_mile is None:
        return "—"

    if float(pace_min_mile).is_integer():
        return f"{int(pace_min_mile)} min/mi"
    return f"{pace_min_mile:.1f} min/mi"


def format_percent_change(percent: int) -> str:
    """Format a signed percent change (e.g., '+10%', '-4%', '0%')."""
    if percent > 0:
        return f"+{percent}%"
    return f"{percent}%"


def format_elevation(feet: float) -> str:
    """
    Format elevation with thousands separator.

    Args:
        feet: Elevation in feet

    Returns:
        Formatted string (e.g., '12,804 ft')
    """
    return f"{int(round(feet)):,} ft"


def format_mile(mile: float) -> str:
    """Format a route position (e.g., 'Mile 4.5', 'Mile 3')."""
    if float(mile).is_integer():
        return f"Mile {int(mile)}"
    return f"Mile {mile:g}"
