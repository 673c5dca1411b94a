from __future__ import annotations

import logging
from datetime import date, timedelta
from zoneinfo import ZoneInfo

from ...common.datetime_utils import local_date
from ...common.validators import require_not_none
from ...core.exceptions import TimeLogChronologyError
from ...timelogs.time_logs import TimeLogs
from ..extractors.anchored import ShiftStartAnchoredExtractor
from ..extractors.base import Pause, TimeLogsExtractor
from ..extractors.left_segment import LeftSegmentExtractor
from ..extractors.right_segment import RightSegmentExtractor
from ..policy import ShiftPolicy
from .base import ShiftInferenceStrategy

logger = logging.getLogger(__name__)


class UnscheduledShiftStrategy(ShiftInferenceStrategy):
    """Shift detection for days without a schedule, driven by long pauses."""

    def __init__(self, policy: ShiftPolicy, zone: ZoneInfo):
        self._policy = require_not_none(policy, "policy")
        self._zone = require_not_none(zone, "zone")

    def infer(self, work_date: date, ordered_logs: TimeLogs) -> TimeLogs:
        require_not_none(work_date, "work_date")
        require_not_none(ordered_logs, "ordered_logs")
        if ordered_logs.is_empty():
            return ordered_logs

        pauses = self.find_long_pauses(ordered_logs, self._policy.long_pause_threshold)
        logger.debug("Detected %s long pause(s) for %s", len(pauses), work_date)

        if not pauses:
            return ordered_logs
        return self._select_extractor(work_date, pauses).extract(work_date, ordered_logs, pauses)

    @staticmethod
    def find_long_pauses(time_logs: TimeLogs, threshold: timedelta) -> list[Pause]:
        pauses: list[Pause] = []
        for current, nxt in zip(time_logs, list(time_logs)[1:]):
            gap = nxt.entry_time - current.exit_time
            if gap < timedelta(0):
                raise TimeLogChronologyError(f"Exit time is after next entry time: {current} -> {nxt}")
            if gap >= threshold:
                pauses.append(Pause(before=current, after=nxt, duration=gap))
        return pauses

    def _select_extractor(self, work_date: date, pauses: list[Pause]) -> TimeLogsExtractor:
        if len(pauses) >= 2:
            return ShiftStartAnchoredExtractor(self._zone)

        # One pause: either yesterday's tail is on the left, or tomorrow's start is on the right.
        before = pauses[0].before
        exit_date = local_date(before.exit_time, before.worksite.time_zone)
        if exit_date < work_date:
            return RightSegmentExtractor()
        return LeftSegmentExtractor()
