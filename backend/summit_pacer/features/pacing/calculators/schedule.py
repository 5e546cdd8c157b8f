"""
Schedule Generator

Walks the route from a starting mile/time and predicts arrival at every
waypoint: ascent, summit (after which the break is taken) and the full
descent back to the trailhead.

Times accumulate as elapsed minutes since the trip start and are
converted to clock times only for output, so partial-minute legs do
not drift.
"""

import logging
from typing import List, Optional

from summit_pacer.shared.clock import elapsed_minutes, format_clock, parse_clock
from summit_pacer.shared.constants import (
    DESCENT_LOCATION_SUFFIX,
    MidnightPolicy,
    Phase,
)
from ..exceptions import CheckpointBeforeStartError
from ..models import FatigueAdjustment, PredictionEvent
from ..route import MIDDLE_TETON_ROUTE, Route
from ..schemas import BasePaceConfig
from .pace import PaceResolver

logger = logging.getLogger(__name__)


class ScheduleGenerator:
    """
    Forward simulation of a trip over a fixed route.

    Example usage:
        generator = ScheduleGenerator(MIDDLE_TETON_ROUTE, config, adjustment)
        events = generator.generate(from_mile=4.5, from_time="09:20")
    """

    def __init__(
        self,
        route: Route,
        base_paces: BasePaceConfig,
        adjustment: Optional[FatigueAdjustment] = None,
        midnight_policy: MidnightPolicy = MidnightPolicy.REJECT,
    ):
        self.route = route
        self.base_paces = base_paces
        self.midnight_policy = midnight_policy
        self._paces = PaceResolver(base_paces, adjustment)

    def generate(
        self,
        start_time: Optional[str] = None,
        break_minutes: Optional[int] = None,
        from_mile: float = 0.0,
        from_time: Optional[str] = None,
    ) -> List[PredictionEvent]:
        """
        Predict the full schedule.

        Args:
            start_time: Trip start (defaults to the configured start time)
            break_minutes: Summit break (defaults to the configured break)
            from_mile: Position to resume from (clamped to the summit)
            from_time: Clock time at `from_mile` (None = trip start)

        Returns:
            Ascent events by increasing mile (summit last), then descent
            events by decreasing mile.

        Raises:
            CheckpointBeforeStartError: `from_time` precedes `start_time`
                and the midnight policy is REJECT
        """
        start_time = start_time or self.base_paces.start_time
        if break_minutes is None:
            break_minutes = self.base_paces.break_minutes

        start_minutes = parse_clock(start_time)
        summit = self.route.summit
        from_mile = min(from_mile, summit.mile)

        if from_time is None:
            cumulative = 0.0
        else:
            try:
                cumulative = float(elapsed_minutes(start_time, from_time, self.midnight_policy))
            except ValueError as e:
                raise CheckpointBeforeStartError(from_time, start_time) from e

        resume = self.route.resume_index(from_mile)
        logger.debug(
            f"Generating schedule from mile {from_mile} "
            f"(segment {resume}, +{cumulative:.0f} min)"
        )

        events: List[PredictionEvent] = []

        # Ascent: each waypoint is stamped with the arrival time at that waypoint
        for i in range(resume, len(self.route)):
            segment = self.route[i]

            if i > 0:
                leg_start = max(self.route[i - 1].mile, from_mile)
                distance = segment.mile - leg_start
                if distance > 0:
                    cumulative += distance * self._paces.ascent(segment.terrain)

            events.append(PredictionEvent(
                mile=segment.mile,
                location=segment.location,
                predicted_time=format_clock(start_minutes + cumulative),
                elevation=segment.elevation,
                phase=Phase.SUMMIT if segment is summit else Phase.ASCENT,
                terrain=segment.terrain,
                elapsed_minutes=cumulative,
            ))

        cumulative += break_minutes

        # Descent always starts from the summit, over the full route
        descending = list(reversed(self.route.segments))
        for above, below in zip(descending, descending[1:]):
            distance = above.mile - below.mile
            cumulative += distance * self._paces.descent(above.terrain)

            events.append(PredictionEvent(
                mile=below.mile,
                location=below.location + DESCENT_LOCATION_SUFFIX,
                predicted_time=format_clock(start_minutes + cumulative),
                elevation=below.elevation,
                phase=Phase.DESCENT,
                terrain=below.terrain,
                elapsed_minutes=cumulative,
            ))

        return events


def generate_schedule(
    base_paces: BasePaceConfig,
    adjustment: Optional[FatigueAdjustment] = None,
    start_time: Optional[str] = None,
    break_minutes: Optional[int] = None,
    from_mile: float = 0.0,
    from_time: Optional[str] = None,
    route: Route = MIDDLE_TETON_ROUTE,
    midnight_policy: MidnightPolicy = MidnightPolicy.REJECT,
) -> List[PredictionEvent]:
    """Predict a full schedule (see ScheduleGenerator.generate)."""
    generator = ScheduleGenerator(route, base_paces, adjustment, midnight_policy)
    return generator.generate(start_time, break_minutes, from_mile, from_time)
