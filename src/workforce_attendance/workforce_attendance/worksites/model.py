from __future__ import annotations

from dataclasses import dataclass, field
from zoneinfo import ZoneInfo


@dataclass(frozen=True)
class Worksite:
    """Domain entity: Worksite. Identity is the `code`; the time zone drives all local-date math."""

    worksite_id: int = field(compare=False)
    code: str
    name: str = field(compare=False)
    time_zone: ZoneInfo = field(compare=False)

    def __str__(self) -> str:
        return self.code
