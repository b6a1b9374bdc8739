"""
Time Window Aggregator - Hour sums, session counts and mood averages.

Sums are kept at full precision and rounded once, when the summary is
built, so rounding error never compounds.
"""
from collections import defaultdict
from typing import Dict, Iterable, List, Optional

from coach_analytics.core.config import settings
from coach_analytics.core.logging import get_logger
from coach_analytics.models.record import LogEntry
from coach_analytics.models.stats import WindowSummary
from coach_analytics.models.summary import MonthBucket, ProgressTrends
from coach_analytics.services.analytics.numeric import round_half_up, safe_mean
from coach_analytics.services.analytics.windows import (
    CalendarMonthWindow,
    CalendarWeekWindow,
    DateLike,
    RollingWindow,
    as_date,
    most_recent,
)

logger = get_logger(__name__)

RECENT_FEELING_COUNT = 5


class TimeWindowAggregator:
    """
    Buckets log entries into week, month and rolling windows.

    Usage:
        aggregator = TimeWindowAggregator()
        summary = aggregator.aggregate(entries, now=date(2024, 5, 14))
    """

    def __init__(
        self,
        week_start_day: Optional[int] = None,
        rolling_days: Optional[int] = None,
    ):
        self.week_start_day = (
            settings.WEEK_START_DAY if week_start_day is None else week_start_day
        )
        self.rolling_days = settings.ROLLING_WINDOW_DAYS if rolling_days is None else rolling_days

    def aggregate(self, entries: Iterable[LogEntry], now: DateLike) -> WindowSummary:
        """
        Compute windowed statistics.

        Args:
            entries: Normalized log entries, any order
            now: Reference time; both calendar windows end on this day

        Returns:
            WindowSummary with rounded hour sums and unrounded mood averages
        """
        entries = list(entries)
        today = as_date(now)

        week = CalendarWeekWindow(today, self.week_start_day)
        month = CalendarMonthWindow(today)
        week_entries = week.select(entries)
        month_entries = month.select(entries)

        recent = most_recent(entries, RECENT_FEELING_COUNT)

        dated = [entry.date for entry in entries if entry.date is not None]
        first_session_date = min(dated) if dated else today

        summary = WindowSummary(
            total_hours=round_half_up(sum(entry.hours for entry in entries)),
            week_hours=round_half_up(sum(entry.hours for entry in week_entries)),
            week_sessions=len(week_entries),
            month_hours=round_half_up(sum(entry.hours for entry in month_entries)),
            month_sessions=len(month_entries),
            weekly_average_feeling=safe_mean(entry.feeling for entry in week_entries),
            last5_average_feeling=safe_mean(entry.feeling for entry in recent),
            first_session_date=first_session_date,
            total_sessions=len(entries),
            session_type_hours=self.session_type_hours(entries),
            average_feeling=round_half_up(safe_mean(entry.feeling for entry in entries)),
            monthly_breakdown=self.monthly_breakdown(entries),
            trends=self.progress_trends(entries, today),
        )

        logger.debug(
            "Aggregated time windows",
            entries=len(entries),
            week=repr(week),
            week_sessions=summary.week_sessions,
            month_sessions=summary.month_sessions,
        )

        return summary

    def session_type_hours(self, entries: Iterable[LogEntry]) -> Dict[str, float]:
        """Sum hours per session type, each total rounded on its own."""
        totals: Dict[str, float] = {}
        for entry in entries:
            totals[entry.session_type] = totals.get(entry.session_type, 0.0) + entry.hours
        return {session_type: round_half_up(hours) for session_type, hours in totals.items()}

    def monthly_breakdown(self, entries: Iterable[LogEntry]) -> List[MonthBucket]:
        """Group dated entries by calendar month, newest month first."""
        months: Dict[str, List[LogEntry]] = defaultdict(list)
        for entry in entries:
            if entry.date is None:
                continue
            months[f"{entry.date.year:04d}-{entry.date.month:02d}"].append(entry)

        return [
            MonthBucket(
                month=month,
                hours=round_half_up(sum(entry.hours for entry in bucket)),
                sessions=len(bucket),
                average_feeling=round_half_up(safe_mean(entry.feeling for entry in bucket)),
            )
            for month, bucket in sorted(months.items(), reverse=True)
        ]

    def progress_trends(self, entries: Iterable[LogEntry], now: DateLike) -> ProgressTrends:
        """Sessions, mood and weekly hours over the trailing rolling window."""
        window = RollingWindow(now, self.rolling_days)
        recent = window.select(entries)
        weeks = self.rolling_days / 7

        return ProgressTrends(
            window_days=self.rolling_days,
            recent_sessions=len(recent),
            recent_average_feeling=round_half_up(safe_mean(entry.feeling for entry in recent)),
            recent_hours_per_week=round_half_up(sum(entry.hours for entry in recent) / weeks),
        )
