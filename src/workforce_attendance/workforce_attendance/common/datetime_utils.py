from __future__ import annotations

from datetime import date, datetime, time, timedelta, timezone
from typing import Protocol
from zoneinfo import ZoneInfo


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def to_utc(value: datetime) -> datetime:
    """Normalize an aware datetime to UTC; naive values are taken as UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def local_date(instant: datetime, zone: ZoneInfo) -> date:
    """Calendar date of an instant as seen in the given zone."""
    return to_utc(instant).astimezone(zone).date()


def at_zone(day: date, local_time: time, zone: ZoneInfo) -> datetime:
    """Instant (UTC) of a local wall-clock time on a given day in a zone."""
    return datetime.combine(day, local_time, tzinfo=zone).astimezone(timezone.utc)


def start_of_day(day: date, zone: ZoneInfo) -> datetime:
    return at_zone(day, time.min, zone)


def day_bounds(day: date, zone: ZoneInfo) -> tuple[datetime, datetime]:
    """Half-open [start, next day start) window of a local calendar day.

    The end is computed from the next calendar date, so DST days are 23h or 25h long.
    """
    return start_of_day(day, zone), start_of_day(day + timedelta(days=1), zone)


class Clock(Protocol):
    def now(self) -> datetime:
        raise NotImplementedError


class SystemClock:
    """Current UTC time.

    Note: Wrapped so tests can inject a fixed clock.
    """

    def now(self) -> datetime:
        return datetime.now(timezone.utc)


class FixedClock:
    def __init__(self, instant: datetime):
        self._instant = to_utc(instant)

    def now(self) -> datetime:
        return self._instant
