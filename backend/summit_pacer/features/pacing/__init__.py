"""
Pacing prediction module.

Usage:
    from summit_pacer.features.pacing import TripSession, BasePaceConfig
    from summit_pacer.features.pacing.calculators import generate_schedule

For one-off predictions, use PacingService; for an interactive planning
session (editing checkpoints, re-predicting), use TripSession.

Available components:
- MIDDLE_TETON_ROUTE, Route, RouteSegment, load_route: route model
- BasePaceConfig, CheckpointReport: validated inputs
- PredictionEvent, FatigueAdjustment, PredictionUpdate: results
- PacingService, update_predictions: orchestration
- TripSession: explicit session state
"""
from .exceptions import (
    PacingError,
    NoCheckpointDataError,
    IncompleteCheckpointDataError,
    CheckpointBeforeStartError,
    RouteDefinitionError,
)
from .route import MIDDLE_TETON_ROUTE, Route, RouteSegment, load_route
from .schemas import BasePaceConfig, CheckpointReport
from .models import FatigueAdjustment, PredictionEvent, PredictionUpdate
from .service import PacingService, select_furthest_checkpoint, update_predictions
from .session import CheckpointEntry, TripSession

__all__ = [
    # Errors
    "PacingError",
    "NoCheckpointDataError",
    "IncompleteCheckpointDataError",
    "CheckpointBeforeStartError",
    "RouteDefinitionError",
    # Route
    "MIDDLE_TETON_ROUTE",
    "Route",
    "RouteSegment",
    "load_route",
    # Inputs / results
    "BasePaceConfig",
    "CheckpointReport",
    "FatigueAdjustment",
    "PredictionEvent",
    "PredictionUpdate",
    # Orchestration
    "PacingService",
    "select_furthest_checkpoint",
    "update_predictions",
    "TripSession",
    "CheckpointEntry",
]
