"""
Trip Session

Holds the mutable state of one planning session: configuration, the
checkpoint entries being edited, and the currently displayed schedule
and adjustment. All calculation is delegated to PacingService; the
session only decides what to keep.
"""

import logging
import threading
from dataclasses import dataclass
from typing import Dict, List, Optional

from summit_pacer.shared.constants import DEFAULT_LATE_RETURN_HOUR, MidnightPolicy
from .analysis import (
    CheckpointVariance,
    PerformanceAnalysis,
    TripSummary,
    analyze_performance,
    checkpoint_variances,
    summarize_trip,
)
from .models import FatigueAdjustment, PredictionEvent
from .route import MIDDLE_TETON_ROUTE, Route, load_route
from .schemas import BasePaceConfig, CheckpointReport
from .service import PacingService

logger = logging.getLogger(__name__)

_UNSET = object()


@dataclass(frozen=True)
class CheckpointEntry:
    """A checkpoint row as edited by the user."""
    id: int
    report: CheckpointReport


class TripSession:
    """
    Explicit session context for one trip.

    Schedule and adjustment are always replaced as a whole; an update
    never merges old and new predictions.

    Example usage:
        session = TripSession(BasePaceConfig(start_time="04:00"))
        session.calculate_initial_pacing()
        entry_id = session.add_checkpoint(mile=5.2, actual_time="11:10")
        session.update_all_predictions()
    """

    def __init__(
        self,
        config: Optional[BasePaceConfig] = None,
        route: Route = MIDDLE_TETON_ROUTE,
        midnight_policy: MidnightPolicy = MidnightPolicy.REJECT,
        late_return_hour: int = DEFAULT_LATE_RETURN_HOUR,
    ):
        self.config = config or BasePaceConfig()
        self.late_return_hour = late_return_hour
        self._service = PacingService(route, midnight_policy)
        self._lock = threading.Lock()

        self._entries: Dict[int, CheckpointReport] = {}
        self._counter = 0
        self._schedule: List[PredictionEvent] = []
        self._adjustment = FatigueAdjustment.none()
        self._updated_from_mile: Optional[float] = None

    @classmethod
    def from_settings(cls, settings) -> "TripSession":
        """Session with defaults, policy and route taken from application settings."""
        route = load_route(settings.route_file) if settings.route_file else MIDDLE_TETON_ROUTE
        return cls(
            config=BasePaceConfig.from_settings(settings),
            route=route,
            midnight_policy=settings.midnight_policy,
            late_return_hour=settings.late_return_hour,
        )

    # -------------------------------------------------------------------------
    # State
    # -------------------------------------------------------------------------

    @property
    def route(self) -> Route:
        return self._service.route

    @property
    def schedule(self) -> List[PredictionEvent]:
        return list(self._schedule)

    @property
    def adjustment(self) -> FatigueAdjustment:
        return self._adjustment

    @property
    def checkpoints(self) -> List[CheckpointEntry]:
        with self._lock:
            return [CheckpointEntry(id=i, report=r) for i, r in self._entries.items()]

    @property
    def valid_checkpoints(self) -> List[CheckpointReport]:
        return [entry.report for entry in self.checkpoints if entry.report.is_complete]

    # -------------------------------------------------------------------------
    # Checkpoint editing
    # -------------------------------------------------------------------------

    def add_checkpoint(
        self,
        mile: Optional[float] = None,
        actual_time: Optional[str] = None,
    ) -> int:
        """Add a checkpoint row (possibly blank) and return its id."""
        report = CheckpointReport(mile=mile, actual_time=actual_time)
        with self._lock:
            self._counter += 1
            self._entries[self._counter] = report
            return self._counter

    def update_checkpoint(self, entry_id: int, mile=_UNSET, actual_time=_UNSET) -> CheckpointReport:
        """
        Change one or both fields of a checkpoint row.

        Raises:
            KeyError: Unknown entry id
        """
        with self._lock:
            current = self._entries[entry_id]
            report = CheckpointReport(
                mile=current.mile if mile is _UNSET else mile,
                actual_time=current.actual_time if actual_time is _UNSET else actual_time,
            )
            self._entries[entry_id] = report
            return report

    def remove_checkpoint(self, entry_id: int) -> None:
        """Remove a checkpoint row; unknown ids are ignored."""
        with self._lock:
            self._entries.pop(entry_id, None)

    # -------------------------------------------------------------------------
    # Predictions
    # -------------------------------------------------------------------------

    def calculate_initial_pacing(self) -> List[PredictionEvent]:
        """Drop checkpoints and adjustment, then predict at base paces."""
        with self._lock:
            self._entries.clear()
            self._adjustment = FatigueAdjustment.none()
            self._updated_from_mile = None
            self._schedule = self._service.initial_schedule(self.config)
        logger.info(f"Initial pacing calculated from {self.config.start_time}")
        return self.schedule

    def update_all_predictions(self) -> List[PredictionEvent]:
        """
        Re-predict from the current checkpoints.

        On error the previous schedule and adjustment are kept.

        Raises:
            NoCheckpointDataError, IncompleteCheckpointDataError,
            CheckpointBeforeStartError
        """
        with self._lock:
            reports = list(self._entries.values())
            update = self._service.update_predictions(self.config, reports)
            self._schedule = update.schedule
            self._adjustment = update.adjustment
            self._updated_from_mile = update.resumed_from_mile
        return self.schedule

    def clear_progress(self) -> List[PredictionEvent]:
        """Forget all checkpoints, restart ids and recompute initial pacing."""
        with self._lock:
            self._counter = 0
        return self.calculate_initial_pacing()

    def reconfigure(self, config: BasePaceConfig) -> List[PredictionEvent]:
        """Replace the configuration and recompute initial pacing."""
        with self._lock:
            self.config = config
        return self.calculate_initial_pacing()

    # -------------------------------------------------------------------------
    # Analysis
    # -------------------------------------------------------------------------

    def summary(self) -> TripSummary:
        return summarize_trip(
            self._schedule,
            self.config.start_time,
            updated_from_mile=self._updated_from_mile,
            late_return_hour=self.late_return_hour,
        )

    def analysis(self) -> Optional[PerformanceAnalysis]:
        return analyze_performance(self._adjustment)

    def variances(self) -> List[CheckpointVariance]:
        return checkpoint_variances(
            self.route,
            self.config,
            self.valid_checkpoints,
            self._service.midnight_policy,
        )
