from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Iterable, Optional

from ..common.validators import require_not_none


@dataclass(frozen=True)
class TimeInterval:
    """Immutable half-open interval [start, end) between two instants.

    Touching intervals (one ends exactly where the other starts) do not overlap.
    """

    start: datetime
    end: datetime

    def __post_init__(self) -> None:
        require_not_none(self.start, "start")
        require_not_none(self.end, "end")
        if self.end < self.start:
            raise ValueError("end must not be before start")

    def overlaps(self, other: "TimeInterval") -> bool:
        require_not_none(other, "other")
        return self.start < other.end and other.start < self.end

    def touches(self, other: "TimeInterval") -> bool:
        require_not_none(other, "other")
        return self.end == other.start or other.end == self.start

    def overlaps_or_touches(self, other: "TimeInterval") -> bool:
        return self.overlaps(other) or self.touches(other)

    def merge_with(self, other: "TimeInterval") -> "TimeInterval":
        require_not_none(other, "other")
        if not self.overlaps_or_touches(other):
            raise ValueError("Intervals do not overlap or touch")
        return TimeInterval(min(self.start, other.start), max(self.end, other.end))

    def intersect(self, other: "TimeInterval") -> Optional["TimeInterval"]:
        """Common part of both intervals, or None when they are disjoint or only touch."""
        require_not_none(other, "other")
        start = max(self.start, other.start)
        end = min(self.end, other.end)
        if end <= start:
            return None
        return TimeInterval(start, end)

    def expand_by(self, margin: timedelta) -> "TimeInterval":
        require_not_none(margin, "margin")
        return TimeInterval(self.start - margin, self.end + margin)

    def ends_at_or_before(self, instant: datetime) -> bool:
        return self.end <= instant

    def starts_at_or_after(self, instant: datetime) -> bool:
        return self.start >= instant

    def duration(self) -> timedelta:
        return self.end - self.start


class TimeIntervals:
    """Sorted set of intervals where overlapping or touching members are merged."""

    def __init__(self, intervals: Iterable[TimeInterval]):
        require_not_none(intervals, "intervals")
        self._intervals: tuple[TimeInterval, ...] = tuple(self._merge(intervals))

    @staticmethod
    def _merge(intervals: Iterable[TimeInterval]) -> list[TimeInterval]:
        ordered = sorted(intervals, key=lambda interval: interval.start)
        if not ordered:
            return []

        merged: list[TimeInterval] = []
        current = ordered[0]
        for nxt in ordered[1:]:
            if current.overlaps_or_touches(nxt):
                current = current.merge_with(nxt)
            else:
                merged.append(current)
                current = nxt
        merged.append(current)
        return merged

    def total_covered_duration(self) -> timedelta:
        return sum((interval.duration() for interval in self._intervals), timedelta(0))

    def total_gap_duration(self) -> timedelta:
        return sum(
            (nxt.start - current.end for current, nxt in zip(self._intervals, self._intervals[1:])),
            timedelta(0),
        )

    def __iter__(self):
        return iter(self._intervals)

    def __len__(self) -> int:
        return len(self._intervals)
