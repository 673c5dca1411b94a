from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Employee:
    """Domain entity: Employee (read-only for the shift engine)."""

    employee_id: int
    name: str
    email: Optional[str] = None
