"""
Application Configuration

Uses Pydantic Settings for type-safe configuration.
"""

import logging
import sys
from typing import Optional

from pydantic import ConfigDict, Field, field_validator
from pydantic_settings import BaseSettings

from summit_pacer.shared.clock import normalize_clock
from summit_pacer.shared.constants import DEFAULT_LATE_RETURN_HOUR, MidnightPolicy

LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


class Settings(BaseSettings):
    """Application settings with validation."""

    # === Core ===
    debug: bool = Field(default=False, description="Enable debug mode")
    log_level: str = Field(default="INFO", description="Logging level")

    # === Trip defaults ===
    default_start_time: str = Field(default="04:00", description="Trailhead start (HH:MM)")
    default_break_minutes: int = Field(default=30, ge=0, description="Summit break")

    # === Ascent paces (minutes per mile) ===
    default_flat_pace: int = Field(default=25, gt=0)
    default_steady_pace: int = Field(default=35, gt=0)
    default_boulder_pace: int = Field(default=60, gt=0)
    default_technical_pace: int = Field(default=75, gt=0)

    # === Time arithmetic ===
    midnight_policy: MidnightPolicy = Field(
        default=MidnightPolicy.REJECT,
        description="Reading of a reported time earlier than the start time"
    )

    # === Analysis ===
    late_return_hour: int = Field(default=DEFAULT_LATE_RETURN_HOUR, ge=0, le=23)

    # === Route ===
    route_file: Optional[str] = Field(
        default=None,
        description="YAML route definition (defaults to the built-in Middle Teton route)"
    )

    @field_validator('log_level')
    @classmethod
    def check_log_level(cls, v: str) -> str:
        """Normalize and validate logging level name."""
        level = v.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"Unknown log level: {v}")
        return level

    @field_validator('default_start_time')
    @classmethod
    def check_start_time(cls, v: str) -> str:
        """Start time must be a valid HH:MM clock time."""
        return normalize_clock(v)

    model_config = ConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )


# Global settings instance
settings = Settings()


def setup_logging(level: Optional[str] = None) -> None:
    """
    Configure root logging to stdout.

    Args:
        level: Override for settings.log_level (DEBUG when settings.debug is set)
    """
    if level is None:
        level = "DEBUG" if settings.debug else settings.log_level

    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format=LOG_FORMAT,
        handlers=[
            logging.StreamHandler(sys.stdout),
        ]
    )
