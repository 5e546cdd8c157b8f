"""
Pacing Service

Orchestrates the pacing calculators:
- Initial schedule from base paces
- Fatigue estimation from reported checkpoints
- Re-prediction from the furthest checkpoint

This is the main entry point for pacing predictions.
"""

import logging
from typing import List, Sequence

from summit_pacer.shared.constants import MidnightPolicy
from .calculators import FatigueEstimator, ScheduleGenerator
from .exceptions import IncompleteCheckpointDataError, NoCheckpointDataError
from .models import FatigueAdjustment, PredictionEvent, PredictionUpdate
from .route import MIDDLE_TETON_ROUTE, Route
from .schemas import BasePaceConfig, CheckpointReport

logger = logging.getLogger(__name__)


def select_furthest_checkpoint(checkpoints: Sequence[CheckpointReport]) -> CheckpointReport:
    """
    Checkpoint with the greatest mile.

    Ties keep the first one seen.

    Raises:
        ValueError: If `checkpoints` is empty
    """
    if not checkpoints:
        raise ValueError("No checkpoints to choose from")

    furthest = checkpoints[0]
    for checkpoint in checkpoints[1:]:
        if checkpoint.mile > furthest.mile:
            furthest = checkpoint
    return furthest


class PacingService:
    """
    Service for pacing predictions over one route.

    Example usage:
        service = PacingService()
        schedule = service.initial_schedule(config)
        update = service.update_predictions(config, checkpoints)
    """

    def __init__(
        self,
        route: Route = MIDDLE_TETON_ROUTE,
        midnight_policy: MidnightPolicy = MidnightPolicy.REJECT,
    ):
        self.route = route
        self.midnight_policy = midnight_policy

    def initial_schedule(self, config: BasePaceConfig) -> List[PredictionEvent]:
        """Schedule at base paces from the trailhead, no adjustment."""
        generator = ScheduleGenerator(self.route, config, None, self.midnight_policy)
        return generator.generate()

    def estimate_fatigue(
        self,
        config: BasePaceConfig,
        checkpoints: Sequence[CheckpointReport],
    ) -> FatigueAdjustment:
        estimator = FatigueEstimator(self.route, config, self.midnight_policy)
        return estimator.estimate(checkpoints)

    def update_predictions(
        self,
        config: BasePaceConfig,
        checkpoints: Sequence[CheckpointReport],
    ) -> PredictionUpdate:
        """
        Re-predict the remaining trip from reported checkpoints.

        All complete checkpoints feed the fatigue blend; the one with the
        greatest mile sets the resume point. A checkpoint at or past the
        summit resumes at the summit (summit event plus full descent).

        Raises:
            NoCheckpointDataError: No checkpoint entries at all
            IncompleteCheckpointDataError: No entry has both mile and time
            CheckpointBeforeStartError: Time precedes start (policy REJECT)
        """
        if not checkpoints:
            raise NoCheckpointDataError()

        valid = [c for c in checkpoints if c.is_complete]
        if not valid:
            raise IncompleteCheckpointDataError()

        adjustment = self.estimate_fatigue(config, valid)
        furthest = select_furthest_checkpoint(valid)

        resume_mile = min(furthest.mile, self.route.summit.mile)
        generator = ScheduleGenerator(self.route, config, adjustment, self.midnight_policy)
        schedule = generator.generate(from_mile=resume_mile, from_time=furthest.actual_time)

        logger.info(
            f"Updated predictions from mile {resume_mile} at {furthest.actual_time} "
            f"using {len(valid)} checkpoint(s), overall fatigue {adjustment.overall_fatigue:.3f}"
        )

        return PredictionUpdate(
            schedule=schedule,
            adjustment=adjustment,
            furthest_checkpoint=furthest,
            resumed_from_mile=resume_mile,
            resumed_from_time=furthest.actual_time,
            checkpoints_used=len(valid),
        )


def update_predictions(
    config: BasePaceConfig,
    checkpoints: Sequence[CheckpointReport],
    route: Route = MIDDLE_TETON_ROUTE,
    midnight_policy: MidnightPolicy = MidnightPolicy.REJECT,
) -> PredictionUpdate:
    """Re-predict from checkpoints (see PacingService.update_predictions)."""
    return PacingService(route, midnight_policy).update_predictions(config, checkpoints)
