"""
Pacing result types.

This module contains only dataclasses with no calculation logic.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional

from summit_pacer.shared.constants import Phase, Terrain
from .schemas import CheckpointReport


@dataclass(frozen=True)
class PredictionEvent:
    """Predicted arrival at one waypoint."""
    mile: float
    location: str
    predicted_time: str         # HH:MM
    elevation: float
    phase: Phase
    terrain: Terrain
    elapsed_minutes: float      # Since trip start, unrounded

    def to_dict(self) -> dict:
        """Convert to dict for display layers."""
        return {
            "mile": self.mile,
            "location": self.location,
            "predicted_time": self.predicted_time,
            "elevation": self.elevation,
            "phase": self.phase.value,
            "terrain": self.terrain.value,
        }


@dataclass(frozen=True)
class FatigueAdjustment:
    """
    Multiplicative pace correction per terrain, plus the overall fatigue factor.

    An empty adjustment (no factors) means "no adjustment active": paces
    resolve to the user's base paces.
    """
    factors: Dict[Terrain, float] = field(default_factory=dict)
    overall_fatigue: Optional[float] = None

    @classmethod
    def none(cls) -> "FatigueAdjustment":
        return cls()

    @property
    def is_active(self) -> bool:
        return bool(self.factors)

    def factor_for(self, terrain: Terrain) -> Optional[float]:
        """Factor for a terrain, or None when the terrain has no entry."""
        return self.factors.get(terrain)

    def to_dict(self) -> dict:
        """Flat mapping terrain -> factor, with overall fatigue under 'fatigue'."""
        result = {terrain.value: factor for terrain, factor in self.factors.items()}
        if self.overall_fatigue is not None:
            result["fatigue"] = self.overall_fatigue
        return result


@dataclass
class PredictionUpdate:
    """Outcome of re-predicting from reported checkpoints."""
    schedule: List[PredictionEvent]
    adjustment: FatigueAdjustment
    furthest_checkpoint: CheckpointReport
    resumed_from_mile: float
    resumed_from_time: str
    checkpoints_used: int
