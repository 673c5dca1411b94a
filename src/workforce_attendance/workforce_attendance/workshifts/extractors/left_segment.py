from __future__ import annotations

from datetime import date
from typing import Sequence

from ...timelogs.time_logs import TimeLogs
from .base import Pause, TimeLogsExtractor


class LeftSegmentExtractor(TimeLogsExtractor):
    """Everything up to and including the log right before the first pause."""

    def extract(self, work_date: date, time_logs: TimeLogs, pauses: Sequence[Pause]) -> TimeLogs:
        self._check_arguments(work_date, time_logs, pauses)
        end_index = self._index_of(time_logs, pauses[0].before, "before")
        return time_logs.slice(0, end_index + 1)
