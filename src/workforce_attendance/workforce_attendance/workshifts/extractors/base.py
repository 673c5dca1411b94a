from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import date, timedelta
from typing import Sequence

from ...common.validators import require_not_none
from ...core.exceptions import ExtractionError
from ...timelogs.model import TimeLog
from ...timelogs.time_logs import TimeLogs


@dataclass(frozen=True)
class Pause:
    """Long gap between two consecutive closed logs."""

    before: TimeLog
    after: TimeLog
    duration: timedelta

    def __post_init__(self) -> None:
        require_not_none(self.before, "before")
        require_not_none(self.after, "after")
        require_not_none(self.duration, "duration")


class TimeLogsExtractor(ABC):
    """Strategy Pattern: pick the segment of logs that forms the shift, given the long pauses."""

    @abstractmethod
    def extract(self, work_date: date, time_logs: TimeLogs, pauses: Sequence[Pause]) -> TimeLogs:
        raise NotImplementedError

    @staticmethod
    def _check_arguments(work_date: date, time_logs: TimeLogs, pauses: Sequence[Pause], *, min_pauses: int = 1) -> None:
        require_not_none(work_date, "work_date")
        require_not_none(time_logs, "time_logs")
        require_not_none(pauses, "pauses")
        if len(pauses) < min_pauses:
            raise ExtractionError(f"At least {min_pauses} pause(s) required, got {len(pauses)}")
        if time_logs.is_empty():
            raise ExtractionError("At least one time log is required")

    @staticmethod
    def _index_of(time_logs: TimeLogs, log: TimeLog, role: str) -> int:
        index = time_logs.index_of(log)
        if index < 0:
            raise ExtractionError(f"Pause '{role}' log not found in time logs: {log}")
        return index
