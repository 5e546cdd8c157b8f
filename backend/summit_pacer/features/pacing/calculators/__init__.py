"""
Pacing calculators.

- PaceResolver / resolve_pace: terrain + direction -> minutes per mile
- ScheduleGenerator / generate_schedule: route walk -> arrival events
- FatigueEstimator / estimate_fatigue: checkpoints -> pace adjustment
"""
from .pace import PaceResolver, resolve_pace
from .schedule import ScheduleGenerator, generate_schedule
from .fatigue import CheckpointPerformance, FatigueEstimator, estimate_fatigue

__all__ = [
    "PaceResolver",
    "resolve_pace",
    "ScheduleGenerator",
    "generate_schedule",
    "CheckpointPerformance",
    "FatigueEstimator",
    "estimate_fatigue",
]
