from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..common.validators import require_not_none
from ..schedules.model import TimeRange
from ..worksites.model import Worksite
from .policy import ShiftPolicy
from .strategies.base import ShiftInferenceStrategy
from .strategies.scheduled_strategy import ScheduledShiftStrategy
from .strategies.unscheduled_strategy import UnscheduledShiftStrategy


@dataclass
class ShiftInferenceStrategyResolver:
    """Factory Pattern: scheduled strategy when a time range exists, unscheduled otherwise."""

    def resolve(self, time_range: Optional[TimeRange], worksite: Worksite, policy: ShiftPolicy) -> ShiftInferenceStrategy:
        require_not_none(worksite, "worksite")
        require_not_none(policy, "policy")
        if time_range is not None:
            return ScheduledShiftStrategy(policy, time_range, worksite.time_zone)
        return UnscheduledShiftStrategy(policy, worksite.time_zone)
