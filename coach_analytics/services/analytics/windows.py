"""
Time windows - Calendar periods used to bucket log entries.

Every window is right-closed at the reference date: entries dated after
``now`` never fall inside a window.
"""
from abc import ABC, abstractmethod
from datetime import date, datetime, timedelta
from typing import Iterable, List, Optional, Union

from coach_analytics.models.record import LogEntry

DateLike = Union[date, datetime]


def as_date(value: DateLike) -> date:
    """Reduce a datetime to its calendar day."""
    if isinstance(value, datetime):
        return value.date()
    return value


def most_recent(entries: Iterable[LogEntry], limit: int) -> List[LogEntry]:
    """
    Return up to ``limit`` dated entries, newest first.

    Among entries sharing a date, the one earlier in the input counts as
    more recent (the store delivers newest first).
    """
    dated = [(idx, entry) for idx, entry in enumerate(entries) if entry.date is not None]
    dated.sort(key=lambda item: (-item[1].date.toordinal(), item[0]))
    return [entry for _, entry in dated[:max(limit, 0)]]


def entries_in_range(
    entries: Iterable[LogEntry],
    start: DateLike,
    end: DateLike,
) -> List[LogEntry]:
    """Return entries dated within ``[start, end]``, in input order."""
    first, last = as_date(start), as_date(end)
    return [
        entry for entry in entries
        if entry.date is not None and first <= entry.date <= last
    ]


class TimeWindow(ABC):
    """Abstract base class for a bounded calendar period ending at ``now``."""

    name: str = "window"

    def __init__(self, now: DateLike):
        self.end = as_date(now)

    @property
    @abstractmethod
    def start(self) -> date:
        """First day included in the window."""
        pass

    def contains(self, day: Optional[date]) -> bool:
        """Check if a day falls inside the window. Undated entries never do."""
        if day is None:
            return False
        return self.start <= day <= self.end

    def select(self, entries: Iterable[LogEntry]) -> List[LogEntry]:
        """Return the entries dated inside the window, in input order."""
        return [entry for entry in entries if self.contains(entry.date)]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.start.isoformat()}..{self.end.isoformat()})"


class CalendarWeekWindow(TimeWindow):
    """
    Current calendar week.

    ``week_start_day`` uses Python weekday numbering (0 = Monday,
    6 = Sunday).
    """

    name = "week"

    def __init__(self, now: DateLike, week_start_day: int = 6):
        super().__init__(now)
        if not 0 <= week_start_day <= 6:
            raise ValueError(f"week_start_day must be 0-6, got {week_start_day}")
        self.week_start_day = week_start_day

    @property
    def start(self) -> date:
        offset = (self.end.weekday() - self.week_start_day) % 7
        return self.end - timedelta(days=offset)


class CalendarMonthWindow(TimeWindow):
    """Current calendar month, from the first through ``now``."""

    name = "month"

    @property
    def start(self) -> date:
        return self.end.replace(day=1)


class RollingWindow(TimeWindow):
    """The trailing ``days`` calendar days, ``now`` included."""

    name = "rolling"

    def __init__(self, now: DateLike, days: int = 30):
        super().__init__(now)
        if days < 1:
            raise ValueError(f"days must be at least 1, got {days}")
        self.days = days

    @property
    def start(self) -> date:
        return self.end - timedelta(days=self.days - 1)
