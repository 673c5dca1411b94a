from __future__ import annotations

from datetime import date
from typing import Sequence

from ...timelogs.time_logs import TimeLogs
from .base import Pause, TimeLogsExtractor


class RightSegmentExtractor(TimeLogsExtractor):
    """Everything from the log right after the first pause onward."""

    def extract(self, work_date: date, time_logs: TimeLogs, pauses: Sequence[Pause]) -> TimeLogs:
        self._check_arguments(work_date, time_logs, pauses)
        start_index = self._index_of(time_logs, pauses[0].after, "after")
        return time_logs.slice(start_index, len(time_logs))
