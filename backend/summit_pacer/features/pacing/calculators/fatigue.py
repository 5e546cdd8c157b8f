"""
Fatigue Estimator

Infers a pace adjustment from reported checkpoints.

For each complete checkpoint:
    performance_ratio = actual elapsed minutes / expected elapsed minutes

where the expected time uses the UNADJUSTED base paces. Then:

    overall_fatigue  = mean(all ratios)                 (1.0 with no ratios)
    terrain_factor   = mean(ratios landing in terrain)
    adjustment[T]    = terrain_factor * 0.6 + overall_fatigue * 0.4
                       (or overall_fatigue when T has no checkpoints)

Ratio > 1 means slower than planned. The adjustment is recomputed from
the full checkpoint set every time; it is never merged with a previous one.

Example (start 04:00, expected 390 min to mile 5.2, actual 11:10):
    ratio = 430 / 390 = 1.103 -> every terrain factor 1.103
"""

import logging
from collections import defaultdict
from dataclasses import dataclass
from statistics import mean
from typing import Dict, Iterable, List, Optional

from summit_pacer.shared.clock import elapsed_minutes
from summit_pacer.shared.constants import (
    NEUTRAL_FACTOR,
    OVERALL_FATIGUE_WEIGHT,
    PACED_TERRAINS,
    TERRAIN_FACTOR_WEIGHT,
    MidnightPolicy,
    Terrain,
)
from ..exceptions import CheckpointBeforeStartError
from ..models import FatigueAdjustment
from ..route import MIDDLE_TETON_ROUTE, Route
from ..schemas import BasePaceConfig, CheckpointReport

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CheckpointPerformance:
    """Observed vs expected timing at one checkpoint."""
    mile: float
    actual_time: str
    elapsed_minutes: int
    expected_minutes: float
    terrain: Terrain

    @property
    def ratio(self) -> Optional[float]:
        """Performance ratio, or None when the expected time is not positive."""
        if self.expected_minutes <= 0:
            return None
        return self.elapsed_minutes / self.expected_minutes


class FatigueEstimator:
    """
    Derives a FatigueAdjustment from reported checkpoints.

    Example usage:
        estimator = FatigueEstimator(MIDDLE_TETON_ROUTE, config)
        adjustment = estimator.estimate(checkpoints)
    """

    def __init__(
        self,
        route: Route,
        base_paces: BasePaceConfig,
        midnight_policy: MidnightPolicy = MidnightPolicy.REJECT,
    ):
        self.route = route
        self.base_paces = base_paces
        self.midnight_policy = midnight_policy

    def expected_minutes_to_mile(self, target_mile: float) -> float:
        """
        Planned minutes from the trailhead to a mile, at base paces.

        Args:
            target_mile: Position along the route

        Returns:
            Minutes (0 for the trailhead). Positions past the summit
            cost the full ascent.
        """
        cumulative = 0.0
        segments = self.route.segments

        for segment, next_segment in zip(segments, segments[1:]):
            if segment.mile >= target_mile:
                break

            distance = min(next_segment.mile, target_mile) - segment.mile
            if distance > 0:
                cumulative += distance * self.base_paces.pace_for(next_segment.terrain)

            if next_segment.mile >= target_mile:
                break

        return cumulative

    def measure(
        self,
        checkpoints: Iterable[CheckpointReport],
        start_time: Optional[str] = None,
    ) -> List[CheckpointPerformance]:
        """
        Observed vs expected timing for every complete checkpoint.

        Incomplete checkpoints are skipped.

        Raises:
            CheckpointBeforeStartError: A time precedes the start time
                and the midnight policy is REJECT
        """
        start_time = start_time or self.base_paces.start_time
        results = []

        for checkpoint in checkpoints:
            if not checkpoint.is_complete:
                continue

            try:
                elapsed = elapsed_minutes(
                    start_time, checkpoint.actual_time, self.midnight_policy
                )
            except ValueError as e:
                raise CheckpointBeforeStartError(checkpoint.actual_time, start_time) from e

            results.append(CheckpointPerformance(
                mile=checkpoint.mile,
                actual_time=checkpoint.actual_time,
                elapsed_minutes=elapsed,
                expected_minutes=self.expected_minutes_to_mile(checkpoint.mile),
                terrain=self.route.terrain_for_mile(checkpoint.mile),
            ))

        return results

    def estimate(
        self,
        checkpoints: Iterable[CheckpointReport],
        start_time: Optional[str] = None,
    ) -> FatigueAdjustment:
        """
        Blend checkpoint performance into a fresh adjustment.

        Args:
            checkpoints: All reported checkpoints (order does not matter)
            start_time: Trip start (defaults to the configured start time)

        Returns:
            FatigueAdjustment with a factor for every paced terrain
        """
        ratios: List[float] = []
        by_terrain: Dict[Terrain, List[float]] = defaultdict(list)

        for perf in self.measure(checkpoints, start_time):
            ratio = perf.ratio
            if ratio is None:
                logger.debug(f"Skipping checkpoint at mile {perf.mile}: no expected time")
                continue

            ratios.append(ratio)
            if perf.terrain != Terrain.START:
                by_terrain[perf.terrain].append(ratio)

        overall = mean(ratios) if ratios else NEUTRAL_FACTOR
        terrain_factors = {terrain: mean(values) for terrain, values in by_terrain.items()}

        factors = {}
        for terrain in PACED_TERRAINS:
            terrain_factor = terrain_factors.get(terrain)
            if terrain_factor is None:
                factors[terrain] = overall
            else:
                factors[terrain] = (
                    terrain_factor * TERRAIN_FACTOR_WEIGHT
                    + overall * OVERALL_FATIGUE_WEIGHT
                )

        logger.debug(
            f"Fatigue from {len(ratios)} checkpoint(s): overall={overall:.3f}, "
            + ", ".join(f"{t.value}={f:.3f}" for t, f in factors.items())
        )
        return FatigueAdjustment(factors=factors, overall_fatigue=overall)


def estimate_fatigue(
    base_paces: BasePaceConfig,
    checkpoints: Iterable[CheckpointReport],
    start_time: Optional[str] = None,
    route: Route = MIDDLE_TETON_ROUTE,
    midnight_policy: MidnightPolicy = MidnightPolicy.REJECT,
) -> FatigueAdjustment:
    """Estimate a fatigue adjustment (see FatigueEstimator.estimate)."""
    estimator = FatigueEstimator(route, base_paces, midnight_policy)
    return estimator.estimate(checkpoints, start_time)
