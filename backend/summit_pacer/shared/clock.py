"""
Wall-clock time utilities.

All public time values are "HH:MM" 24-hour strings. Arithmetic is done
in minutes since midnight. There is no timezone handling.
"""

import math
import re

from .constants import MINUTES_PER_DAY, MidnightPolicy

_CLOCK_RE = re.compile(r"^\s*(\d{1,2}):(\d{2})\s*$")


def round_half_up(value: float) -> int:
    """
    Round to the nearest integer, halves away from zero.

    Python's built-in round() uses banker's rounding (round(32.5) == 32),
    which does not match how paces are rounded here.
    """
    if value < 0:
        return -math.floor(-value + 0.5)
    return math.floor(value + 0.5)


def round_minutes(minutes: float) -> int:
    """Whole minutes, rounded half-up after dropping float noise from mile arithmetic."""
    return round_half_up(round(minutes, 6))


def parse_clock(value: str) -> int:
    """
    Parse "HH:MM" into minutes since midnight.

    Args:
        value: Clock time, e.g. "04:00" or "4:00"

    Returns:
        Minutes since midnight (0..1439)

    Raises:
        ValueError: If the string is not a valid 24-hour clock time
    """
    if not isinstance(value, str):
        raise ValueError(f"Clock time must be a string, got {type(value).__name__}")

    match = _CLOCK_RE.match(value)
    if not match:
        raise ValueError(f"Invalid clock time: {value!r} (expected HH:MM)")

    hours, minutes = int(match.group(1)), int(match.group(2))
    if hours > 23 or minutes > 59:
        raise ValueError(f"Invalid clock time: {value!r} (out of range)")

    return hours * 60 + minutes


def format_clock(minutes: float) -> str:
    """
    Format minutes since midnight as "HH:MM".

    Fractional minutes are rounded half-up; values past midnight wrap.
    """
    total = round_minutes(minutes) % MINUTES_PER_DAY
    return f"{total // 60:02d}:{total % 60:02d}"


def normalize_clock(value: str) -> str:
    """Return the zero-padded "HH:MM" form of a clock string."""
    return format_clock(parse_clock(value))


def elapsed_minutes(
    start: str,
    end: str,
    policy: MidnightPolicy = MidnightPolicy.REJECT
) -> int:
    """
    Minutes between two clock times within one climbing day.

    Args:
        start: Start clock time
        end: Later clock time
        policy: What to do when `end` is numerically earlier than `start`

    Returns:
        Non-negative elapsed minutes

    Raises:
        ValueError: If `end` precedes `start` and policy is REJECT
    """
    delta = parse_clock(end) - parse_clock(start)
    if delta >= 0:
        return delta

    if policy == MidnightPolicy.NEXT_DAY:
        return delta + MINUTES_PER_DAY

    raise ValueError(f"{end} is earlier than start time {start}")


def clock_hour(value: str) -> int:
    """Hour component of a clock time."""
    return parse_clock(value) // 60
