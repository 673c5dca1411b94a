from __future__ import annotations

from datetime import datetime
from typing import Optional, Protocol, Sequence

from .model import Employee


class EmployeeRepository(Protocol):
    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        raise NotImplementedError

    def find_ids_with_orphan_time_logs(self, anchor: datetime) -> Sequence[int]:
        """Distinct employee ids having closed logs since `anchor` not linked to any work shift."""

        raise NotImplementedError
