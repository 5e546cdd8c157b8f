"""
Pacing input schemas.

Pydantic models for user-entered configuration and checkpoint reports.
"""
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from summit_pacer.shared.clock import normalize_clock
from summit_pacer.shared.constants import Terrain


class BasePaceConfig(BaseModel):
    """User-configured ascent paces (whole minutes per mile), start time and summit break."""
    model_config = ConfigDict(frozen=True)

    flat: int = Field(25, gt=0, description="Flat/slight incline pace")
    steady: int = Field(35, gt=0, description="Steady climb pace")
    boulder: int = Field(60, gt=0, description="Boulder field pace")
    technical: int = Field(75, gt=0, description="Technical scramble pace")
    start_time: str = Field("04:00", description="Trailhead start (HH:MM)")
    break_minutes: int = Field(30, ge=0, description="Break taken once at the summit")

    @field_validator("start_time")
    @classmethod
    def check_start_time(cls, v: str) -> str:
        return normalize_clock(v)

    def pace_for(self, terrain: Terrain) -> int:
        """
        Base ascent pace for a terrain class.

        Raises:
            ValueError: For terrain START, which has no pace
        """
        if terrain == Terrain.FLAT:
            return self.flat
        if terrain == Terrain.STEADY:
            return self.steady
        if terrain == Terrain.BOULDER:
            return self.boulder
        if terrain == Terrain.TECHNICAL:
            return self.technical
        raise ValueError(f"Terrain {terrain.value!r} has no pace")

    @classmethod
    def from_settings(cls, settings) -> "BasePaceConfig":
        """Build the default configuration from application settings."""
        return cls(
            flat=settings.default_flat_pace,
            steady=settings.default_steady_pace,
            boulder=settings.default_boulder_pace,
            technical=settings.default_technical_pace,
            start_time=settings.default_start_time,
            break_minutes=settings.default_break_minutes,
        )


class CheckpointReport(BaseModel):
    """
    A user-reported (mile, actual time) observation.

    Either field may still be blank while the user is filling it in;
    only complete reports take part in calculations.
    """
    model_config = ConfigDict(frozen=True)

    mile: Optional[float] = Field(None, ge=0, description="Miles from the trailhead")
    actual_time: Optional[str] = Field(None, description="Actual arrival (HH:MM)")

    @field_validator("mile", "actual_time", mode="before")
    @classmethod
    def blank_to_none(cls, v):
        """Empty form fields count as missing."""
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @field_validator("actual_time")
    @classmethod
    def check_actual_time(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return v
        return normalize_clock(v)

    @property
    def is_complete(self) -> bool:
        return self.mile is not None and self.actual_time is not None
