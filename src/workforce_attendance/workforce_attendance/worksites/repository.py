from __future__ import annotations

from typing import Optional, Protocol

from .model import Worksite


class WorksiteRepository(Protocol):
    def get_by_code(self, code: str) -> Optional[Worksite]:
        raise NotImplementedError
