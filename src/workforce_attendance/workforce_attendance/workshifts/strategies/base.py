from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import date

from ...timelogs.time_logs import TimeLogs


class ShiftInferenceStrategy(ABC):
    """Strategy Pattern: decide which of an employee's ordered logs form the shift of a date.

    Input logs are pre-filtered to a window around the date and ordered by entry time;
    the result is a subset that keeps the original order.
    """

    @abstractmethod
    def infer(self, work_date: date, ordered_logs: TimeLogs) -> TimeLogs:
        raise NotImplementedError
