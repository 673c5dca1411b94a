from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, timedelta
from zoneinfo import ZoneInfo

from ..common.datetime_utils import at_zone
from ..common.validators import require_not_none
from ..schedules.model import TimeRange
from .intervals import TimeInterval


@dataclass(frozen=True)
class ShiftWindow:
    """Absolute interval of a scheduled shift on a given calendar date."""

    interval: TimeInterval

    @classmethod
    def scheduled(cls, work_date: date, time_range: TimeRange, zone: ZoneInfo) -> "ShiftWindow":
        require_not_none(work_date, "work_date")
        require_not_none(time_range, "time_range")
        require_not_none(zone, "zone")

        start = at_zone(work_date, time_range.start_time, zone)
        # Overnight shift: the end belongs to the next calendar date.
        end_date = work_date if time_range.start_time < time_range.end_time else work_date + timedelta(days=1)
        end = at_zone(end_date, time_range.end_time, zone)
        return cls(TimeInterval(start, end))

    @property
    def start(self) -> datetime:
        return self.interval.start

    @property
    def end(self) -> datetime:
        return self.interval.end

    def expanded_by(self, margin: timedelta) -> TimeInterval:
        return self.interval.expand_by(margin)
