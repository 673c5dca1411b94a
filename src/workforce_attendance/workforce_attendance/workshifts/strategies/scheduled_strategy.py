from __future__ import annotations

import logging
from datetime import date
from zoneinfo import ZoneInfo

from ...common.validators import require_not_none
from ...schedules.model import TimeRange
from ...timelogs.model import TimeLog
from ...timelogs.time_logs import TimeLogs
from ..intervals import TimeInterval
from ..policy import ShiftPolicy
from ..window import ShiftWindow
from .base import ShiftInferenceStrategy

logger = logging.getLogger(__name__)


class ScheduledShiftStrategy(ShiftInferenceStrategy):
    """Logs overlapping the scheduled window widened by the policy's selection margin."""

    def __init__(self, policy: ShiftPolicy, time_range: TimeRange, zone: ZoneInfo):
        self._policy = require_not_none(policy, "policy")
        self._time_range = require_not_none(time_range, "time_range")
        self._zone = require_not_none(zone, "zone")

    def infer(self, work_date: date, ordered_logs: TimeLogs) -> TimeLogs:
        require_not_none(work_date, "work_date")
        require_not_none(ordered_logs, "ordered_logs")

        window = ShiftWindow.scheduled(work_date, self._time_range, self._zone)
        expanded = window.expanded_by(self._policy.selection_margin)
        logger.debug("Scheduled window for %s: [%s, %s) expanded to [%s, %s)",
                     work_date, window.start, window.end, expanded.start, expanded.end)

        selected: list[TimeLog] = []
        for log in ordered_logs:
            # Sorted by entry: nothing later can overlap.
            if expanded.ends_at_or_before(log.entry_time):
                break
            if expanded.overlaps(TimeInterval(log.entry_time, log.exit_time)):
                selected.append(log)

        return TimeLogs(selected)
