from __future__ import annotations

from datetime import date
from typing import Optional, Sequence
from zoneinfo import ZoneInfo

from ...common.datetime_utils import local_date
from ...common.validators import require_not_none
from ...timelogs.time_logs import TimeLogs
from .base import Pause, TimeLogsExtractor


class ShiftStartAnchoredExtractor(TimeLogsExtractor):
    """Segment around the first log that starts on the target date.

    The anchor is the first log whose local entry date equals the target date. The
    segment runs from the log after the nearest pause strictly before the anchor (or
    index 0) to the log before the nearest pause at or after the anchor (or the end).
    Pauses are located by the index of their `before` log.
    """

    def __init__(self, zone: ZoneInfo):
        self._zone = require_not_none(zone, "zone")

    def extract(self, work_date: date, time_logs: TimeLogs, pauses: Sequence[Pause]) -> TimeLogs:
        self._check_arguments(work_date, time_logs, pauses, min_pauses=2)

        anchor = self._find_anchor_index(work_date, time_logs)
        if anchor is None:
            # No shift starts on that day.
            return TimeLogs.empty()

        separators = sorted(self._index_of(time_logs, pause.before, "before") for pause in pauses)
        left = max((i for i in separators if i < anchor), default=-1)
        right = min((i for i in separators if i >= anchor), default=len(time_logs) - 1)

        start = left + 1
        if start > right:
            return TimeLogs.empty()
        return time_logs.slice(start, right + 1)

    def _find_anchor_index(self, work_date: date, time_logs: TimeLogs) -> Optional[int]:
        for index, log in enumerate(time_logs):
            if local_date(log.entry_time, self._zone) == work_date:
                return index
        return None
