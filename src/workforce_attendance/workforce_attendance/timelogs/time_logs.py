from __future__ import annotations

from datetime import timedelta
from typing import Iterable, Iterator, Optional

from ..core.exceptions import TimeLogsValidationError
from .model import TimeLog


class TimeLogs:
    """Immutable, ordered, non-overlapping collection of closed time logs.

    The invariants are checked on construction and never corrected:

    - no ``None`` element,
    - every log is closed,
    - once sorted by entry time, each log exits at or before the next one enters
      (touching logs are allowed).

    Any violation raises :class:`TimeLogsValidationError`, so an instance is valid
    for its whole lifetime.
    """

    _EMPTY: Optional["TimeLogs"] = None

    __slots__ = ("_logs",)

    def __init__(self, time_logs: Iterable[TimeLog]):
        if time_logs is None:
            raise TypeError("time_logs must not be None")

        items = list(time_logs)
        for log in items:
            if log is None:
                raise TimeLogsValidationError("TimeLog element must not be None")
            if not log.is_closed():
                raise TimeLogsValidationError(f"All TimeLogs must be closed: {log}")

        items.sort(key=lambda log: log.entry_time)
        self._assert_no_overlaps(items)
        self._logs: tuple[TimeLog, ...] = tuple(items)

    @staticmethod
    def _assert_no_overlaps(logs: list[TimeLog]) -> None:
        for previous, current in zip(logs, logs[1:]):
            if previous.exit_time > current.entry_time:
                raise TimeLogsValidationError(f"Overlapping TimeLogs detected: {previous} and {current}")

    @classmethod
    def empty(cls) -> "TimeLogs":
        if cls._EMPTY is None:
            cls._EMPTY = cls(())
        return cls._EMPTY

    def as_list(self) -> list[TimeLog]:
        return list(self._logs)

    def index_of(self, time_log: TimeLog) -> int:
        if time_log is None:
            raise TypeError("time_log must not be None")
        try:
            return self._logs.index(time_log)
        except ValueError:
            return -1

    def slice(self, from_index: int, to_index: int) -> "TimeLogs":
        """Sub-collection [from_index, to_index)."""
        if from_index < 0 or to_index > len(self._logs):
            raise IndexError(f"Indexes out of range: from={from_index}, to={to_index}")
        if from_index > to_index:
            raise ValueError(f"from_index ({from_index}) must be <= to_index ({to_index})")
        return TimeLogs(self._logs[from_index:to_index])

    def total_duration(self) -> timedelta:
        return sum((log.work_duration() for log in self._logs), timedelta(0))

    def first(self) -> TimeLog:
        if not self._logs:
            raise IndexError("TimeLogs is empty")
        return self._logs[0]

    def last(self) -> TimeLog:
        if not self._logs:
            raise IndexError("TimeLogs is empty")
        return self._logs[-1]

    def is_empty(self) -> bool:
        return not self._logs

    def __iter__(self) -> Iterator[TimeLog]:
        return iter(self._logs)

    def __len__(self) -> int:
        return len(self._logs)

    def __getitem__(self, index: int) -> TimeLog:
        return self._logs[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TimeLogs):
            return NotImplemented
        return self._logs == other._logs

    def __hash__(self) -> int:
        return hash(self._logs)

    def __repr__(self) -> str:
        return f"TimeLogs(size={len(self._logs)})"
