"""
Trip Analysis

Read-only views over a schedule and a fatigue adjustment:
- Trip summary (return time, total duration, late-return warning)
- Performance analysis (overall and per-terrain fatigue percent)
- Original vs adjusted pace table
- Fatigue impact of each schedule row
- Observed vs expected timing per checkpoint
- Leg-by-leg route profile
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterable, List, Optional, Sequence

from summit_pacer.shared.clock import clock_hour, round_half_up, round_minutes
from summit_pacer.shared.constants import (
    CHECKPOINT_MATCH_MILES,
    DEFAULT_LATE_RETURN_HOUR,
    HIGH_FATIGUE_PERCENT,
    HIGH_IMPACT_FACTOR,
    MODERATE_FATIGUE_PERCENT,
    MODERATE_IMPACT_FACTOR,
    NEUTRAL_FACTOR,
    PACED_TERRAINS,
    STRONG_IMPACT_FACTOR,
    STRONG_PERFORMANCE_PERCENT,
    Direction,
    MidnightPolicy,
    Phase,
    Terrain,
)
from summit_pacer.shared.elevation import calculate_grade, interpolate_elevation
from summit_pacer.shared.formatters import (
    format_duration,
    format_elevation,
    format_mile,
    format_pace,
    format_percent_change,
)
from .calculators import FatigueEstimator, resolve_pace
from .models import FatigueAdjustment, PredictionEvent
from .route import Route
from .schemas import BasePaceConfig, CheckpointReport


# =============================================================================
# Trip Summary
# =============================================================================

@dataclass
class TripSummary:
    """Start-to-return overview of a schedule."""
    start_time: str
    return_time: str
    summit_eta: Optional[str]
    total_minutes: int
    updated_from_mile: Optional[float]
    late_return: bool

    @property
    def total_duration(self) -> str:
        return format_duration(self.total_minutes)

    @property
    def headline(self) -> str:
        """One-line summary, e.g. '04:00 start -> 13:58 return (9h 58m)'."""
        line = f"{self.start_time} start -> {self.return_time} return ({self.total_duration})"
        if self.updated_from_mile is not None:
            line += f", updated from {format_mile(self.updated_from_mile)}"
        return line

    def to_dict(self) -> dict:
        return {
            "start_time": self.start_time,
            "return_time": self.return_time,
            "summit_eta": self.summit_eta,
            "total_minutes": self.total_minutes,
            "total_duration": self.total_duration,
            "updated_from_mile": self.updated_from_mile,
            "late_return": self.late_return,
        }


def summarize_trip(
    schedule: Sequence[PredictionEvent],
    start_time: str,
    updated_from_mile: Optional[float] = None,
    late_return_hour: int = DEFAULT_LATE_RETURN_HOUR,
) -> TripSummary:
    """
    Summarize a schedule.

    Total time comes from elapsed minutes, not from subtracting clock
    times, so a return after midnight does not produce a negative total.
    The late-return flag compares the clock hour of the return time.
    """
    if not schedule:
        return TripSummary(
            start_time=start_time,
            return_time=start_time,
            summit_eta=None,
            total_minutes=0,
            updated_from_mile=updated_from_mile,
            late_return=False,
        )

    last = schedule[-1]
    summit_eta = next((e.predicted_time for e in schedule if e.phase == Phase.SUMMIT), None)

    return TripSummary(
        start_time=start_time,
        return_time=last.predicted_time,
        summit_eta=summit_eta,
        total_minutes=round_minutes(last.elapsed_minutes),
        updated_from_mile=updated_from_mile,
        late_return=clock_hour(last.predicted_time) >= late_return_hour,
    )


# =============================================================================
# Performance Analysis
# =============================================================================

class FatigueLevel(str, Enum):
    """Overall fatigue band."""
    HIGH = "high"
    MODERATE = "moderate"
    ON_TARGET = "on_target"
    STRONG = "strong"


FATIGUE_LEVEL_DESCRIPTIONS = {
    FatigueLevel.HIGH: "High fatigue - affects all terrain",
    FatigueLevel.MODERATE: "Moderate fatigue",
    FatigueLevel.ON_TARGET: "On target",
    FatigueLevel.STRONG: "Strong performance - ahead of schedule",
}


def factor_to_percent(factor: float) -> int:
    """Percent change of a factor from neutral (1.103 -> 10)."""
    return round_half_up((factor - 1) * 100)


def classify_fatigue_percent(percent: int) -> FatigueLevel:
    if percent > HIGH_FATIGUE_PERCENT:
        return FatigueLevel.HIGH
    if percent > MODERATE_FATIGUE_PERCENT:
        return FatigueLevel.MODERATE
    if percent < STRONG_PERFORMANCE_PERCENT:
        return FatigueLevel.STRONG
    return FatigueLevel.ON_TARGET


@dataclass
class PerformanceAnalysis:
    """Overall and per-terrain fatigue, as percent change from plan."""
    overall_percent: int
    level: FatigueLevel
    terrain_percents: Dict[Terrain, int]

    @property
    def description(self) -> str:
        return FATIGUE_LEVEL_DESCRIPTIONS[self.level]

    @property
    def headline(self) -> str:
        terrains = " ".join(
            f"{terrain.value}: {format_percent_change(percent)}"
            for terrain, percent in self.terrain_percents.items()
        )
        return (
            f"Overall fatigue: {format_percent_change(self.overall_percent)} "
            f"({self.description}) | {terrains}"
        )


def analyze_performance(adjustment: FatigueAdjustment) -> Optional[PerformanceAnalysis]:
    """Performance analysis of an adjustment; None when no adjustment is active."""
    if not adjustment.is_active:
        return None

    overall_fatigue = adjustment.overall_fatigue
    if overall_fatigue is None:
        overall_fatigue = NEUTRAL_FACTOR
    overall = factor_to_percent(overall_fatigue)
    return PerformanceAnalysis(
        overall_percent=overall,
        level=classify_fatigue_percent(overall),
        terrain_percents={
            terrain: factor_to_percent(factor)
            for terrain, factor in adjustment.factors.items()
        },
    )


# =============================================================================
# Pace Comparison
# =============================================================================

@dataclass
class PaceComparison:
    """Original vs adjusted paces for one terrain (minutes per mile)."""
    terrain: Terrain
    original_ascent: float
    adjusted_ascent: float
    original_descent: float
    adjusted_descent: float
    change_percent: int

    def describe(self) -> str:
        return (
            f"{self.terrain.value}: up {format_pace(self.original_ascent)} -> "
            f"{format_pace(self.adjusted_ascent)}, down {format_pace(self.original_descent)} -> "
            f"{format_pace(self.adjusted_descent)} ({format_percent_change(self.change_percent)})"
        )


def compare_paces(
    config: BasePaceConfig,
    adjustment: FatigueAdjustment,
) -> List[PaceComparison]:
    """One row per paced terrain."""
    rows = []
    for terrain in PACED_TERRAINS:
        factor = adjustment.factor_for(terrain)
        rows.append(PaceComparison(
            terrain=terrain,
            original_ascent=config.pace_for(terrain),
            adjusted_ascent=resolve_pace(terrain, Direction.ASCENT, config, adjustment),
            original_descent=resolve_pace(terrain, Direction.DESCENT, config),
            adjusted_descent=resolve_pace(terrain, Direction.DESCENT, config, adjustment),
            change_percent=factor_to_percent(factor) if factor is not None else 0,
        ))
    return rows


# =============================================================================
# Fatigue Impact
# =============================================================================

class FatigueImpact(str, Enum):
    """How a schedule row should be highlighted."""
    CHECKPOINT = "checkpoint"   # Observed, not predicted
    HIGH = "high"
    MODERATE = "moderate"
    STRONG = "strong"
    NONE = "none"


def classify_fatigue_impact(
    event: PredictionEvent,
    adjustment: FatigueAdjustment,
    checkpoints: Iterable[CheckpointReport] = (),
) -> FatigueImpact:
    """
    Impact of the adjustment on one schedule row.

    A row within 0.1 mile of a complete checkpoint is an observed point.
    Otherwise the row's terrain factor decides.
    """
    for checkpoint in checkpoints:
        if checkpoint.is_complete and abs(checkpoint.mile - event.mile) < CHECKPOINT_MATCH_MILES:
            return FatigueImpact.CHECKPOINT

    factor = adjustment.factor_for(event.terrain)
    if factor is None:
        return FatigueImpact.NONE
    if factor > HIGH_IMPACT_FACTOR:
        return FatigueImpact.HIGH
    if factor > MODERATE_IMPACT_FACTOR:
        return FatigueImpact.MODERATE
    if factor < STRONG_IMPACT_FACTOR:
        return FatigueImpact.STRONG
    return FatigueImpact.NONE


# =============================================================================
# Checkpoint Variance
# =============================================================================

@dataclass
class CheckpointVariance:
    """Observed vs planned timing at one checkpoint."""
    mile: float
    actual_time: str
    elapsed_minutes: int
    expected_minutes: float
    variance: float         # elapsed / max(expected, 1)
    terrain: Terrain
    elevation: float


def checkpoint_variances(
    route: Route,
    config: BasePaceConfig,
    checkpoints: Iterable[CheckpointReport],
    midnight_policy: MidnightPolicy = MidnightPolicy.REJECT,
) -> List[CheckpointVariance]:
    """Variance of every complete checkpoint against the base-pace plan."""
    estimator = FatigueEstimator(route, config, midnight_policy)
    return [
        CheckpointVariance(
            mile=perf.mile,
            actual_time=perf.actual_time,
            elapsed_minutes=perf.elapsed_minutes,
            expected_minutes=perf.expected_minutes,
            variance=perf.elapsed_minutes / max(perf.expected_minutes, 1),
            terrain=perf.terrain,
            elevation=interpolate_elevation(perf.mile, route.segments),
        )
        for perf in estimator.measure(checkpoints)
    ]


# =============================================================================
# Route Profile
# =============================================================================

@dataclass
class RouteLeg:
    """One leg between consecutive waypoints."""
    from_mile: float
    to_mile: float
    to_location: str
    terrain: Terrain
    distance_miles: float
    elevation_gain_ft: float
    grade_percent: int

    def describe(self) -> str:
        return (
            f"{format_mile(self.from_mile)} -> {format_mile(self.to_mile)} {self.to_location}: "
            f"{self.terrain.value}, +{format_elevation(self.elevation_gain_ft)}, {self.grade_percent}%"
        )


def route_profile(route: Route) -> List[RouteLeg]:
    """Leg-by-leg distance, gain and grade of the ascent."""
    legs = []
    for lower, upper in zip(route.segments, route.segments[1:]):
        distance = upper.mile - lower.mile
        legs.append(RouteLeg(
            from_mile=lower.mile,
            to_mile=upper.mile,
            to_location=upper.location,
            terrain=upper.terrain,
            distance_miles=distance,
            elevation_gain_ft=upper.elevation - lower.elevation,
            grade_percent=calculate_grade(lower.elevation, upper.elevation, distance),
        ))
    return legs
