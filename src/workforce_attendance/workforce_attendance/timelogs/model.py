from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Optional

from ..worksites.model import Worksite


@dataclass(frozen=True)
class TimeLog:
    """Domain entity: one clock-in/clock-out record.

    `exit_time` is None while the log is open. Instants are timezone-aware (UTC).
    """

    time_log_id: Optional[int]
    employee_id: int
    worksite: Worksite
    entry_time: datetime
    exit_time: Optional[datetime] = None
    deleted: bool = False

    def is_closed(self) -> bool:
        return self.entry_time is not None and self.exit_time is not None

    def work_duration(self) -> Optional[timedelta]:
        if not self.is_closed():
            return None
        return self.exit_time - self.entry_time

    def __str__(self) -> str:
        exit_s = self.exit_time.isoformat() if self.exit_time else "open"
        return f"TimeLog[{self.employee_id}@{self.worksite}: {self.entry_time.isoformat()} -> {exit_s}]"
