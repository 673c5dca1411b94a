from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, time, timedelta

from ..common.validators import require_not_none
from ..core.exceptions import ValidationError


@dataclass(frozen=True)
class TimeRange:
    """Local start/end time of a scheduled working day.

    An end time earlier than the start time means the shift ends on the next day.
    """

    start_time: time
    end_time: time

    def __post_init__(self) -> None:
        require_not_none(self.start_time, "start_time")
        require_not_none(self.end_time, "end_time")
        if self.start_time == self.end_time:
            raise ValidationError("start_time and end_time must not be equal")

    def duration(self) -> timedelta:
        anchor = date(2000, 1, 1)
        delta = datetime.combine(anchor, self.end_time) - datetime.combine(anchor, self.start_time)
        if delta < timedelta(0):
            delta += timedelta(hours=24)
        return delta

    def wraps_midnight(self) -> bool:
        return self.end_time < self.start_time

    def __str__(self) -> str:
        return f"{self.start_time:%H:%M} to {self.end_time:%H:%M}"
