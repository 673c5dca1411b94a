from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta

from ..common.validators import require_non_negative
from ..core.constants import DEFAULT_LONG_PAUSE_THRESHOLD_MINUTES, DEFAULT_SELECTION_MARGIN_MINUTES


@dataclass(frozen=True)
class ShiftPolicy:
    """Tunable thresholds of the inference engine.

    - selection_margin: widening applied to a scheduled window (scheduled strategy).
    - long_pause_threshold: minimum gap that splits logs into segments (unscheduled strategy).
    """

    selection_margin: timedelta
    long_pause_threshold: timedelta

    def __post_init__(self) -> None:
        require_non_negative(self.selection_margin, "selection_margin")
        require_non_negative(self.long_pause_threshold, "long_pause_threshold")

    @classmethod
    def default(cls) -> "ShiftPolicy":
        return cls.from_minutes(
            selection_margin=DEFAULT_SELECTION_MARGIN_MINUTES,
            long_pause_threshold=DEFAULT_LONG_PAUSE_THRESHOLD_MINUTES,
        )

    @classmethod
    def from_minutes(cls, *, selection_margin: int, long_pause_threshold: int) -> "ShiftPolicy":
        return cls(
            selection_margin=timedelta(minutes=int(selection_margin)),
            long_pause_threshold=timedelta(minutes=int(long_pause_threshold)),
        )

    @classmethod
    def from_settings(cls, settings) -> "ShiftPolicy":
        return cls.from_minutes(
            selection_margin=getattr(settings, "SHIFT_SELECTION_MARGIN_MINUTES", DEFAULT_SELECTION_MARGIN_MINUTES),
            long_pause_threshold=getattr(settings, "LONG_PAUSE_THRESHOLD_MINUTES", DEFAULT_LONG_PAUSE_THRESHOLD_MINUTES),
        )
