from __future__ import annotations

from typing import Protocol

from ..core.constants import DEFAULT_DAYS_UNTIL_LOCKED
from ..core.exceptions import ValidationError


class AdminService(Protocol):
    def get_days_until_locked(self) -> int:
        raise NotImplementedError


class SettingsAdminService:
    """Admin policy backed by the settings module (DAYS_UNTIL_LOCKED)."""

    def __init__(self, days_until_locked: int = DEFAULT_DAYS_UNTIL_LOCKED):
        if int(days_until_locked) < 0:
            raise ValidationError("days_until_locked must not be negative")
        self._days_until_locked = int(days_until_locked)

    def get_days_until_locked(self) -> int:
        return self._days_until_locked
