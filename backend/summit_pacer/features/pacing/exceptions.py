"""
Pacing errors.

Every error carries a user-facing `message` that a presentation layer
can show as-is.
"""


class PacingError(Exception):
    """Base pacing error."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NoCheckpointDataError(PacingError):
    """Predictions were updated with no checkpoint entries at all."""

    def __init__(self, message: str = "Please add at least one progress input first."):
        super().__init__(message)


class IncompleteCheckpointDataError(PacingError):
    """Checkpoint entries exist but none has both mile and time."""

    def __init__(
        self,
        message: str = "Please fill in both mile and time for at least one progress input."
    ):
        super().__init__(message)


class CheckpointBeforeStartError(PacingError):
    """A reported time is earlier than the start time (midnight policy REJECT)."""

    def __init__(self, actual_time: str, start_time: str):
        super().__init__(
            f"Reported time {actual_time} is earlier than the start time {start_time}."
        )
        self.actual_time = actual_time
        self.start_time = start_time


class RouteDefinitionError(PacingError, ValueError):
    """Route data breaks a route invariant."""
    pass
