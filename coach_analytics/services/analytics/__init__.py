"""
Analytics module - Training log and assessment statistics.

This module provides:
- Record normalizers for heterogeneous store rows
- Calendar window aggregation and tag frequency ranking
- Skill assessment trend analysis
- The heuristic needs-coaching score
- The summary calculator that composes them
"""
from coach_analytics.services.analytics.adapter import (
    AssessmentNormalizer,
    LogEntryNormalizer,
    NormalizationResult,
    RawRecordAdapter,
    SkippedRecord,
    normalize_assessments,
    normalize_log_entries,
)
from coach_analytics.services.analytics.aggregator import TimeWindowAggregator
from coach_analytics.services.analytics.assessments import SkillAssessmentAnalyzer, classify_level
from coach_analytics.services.analytics.calculator import (
    SummaryCalculator,
    build_logbook_summary,
    build_progress_summary,
)
from coach_analytics.services.analytics.exercises import summarize_exercises, target_accomplishment
from coach_analytics.services.analytics.frequency import FrequencyRanker
from coach_analytics.services.analytics.recommendation import RecommendationScorer
from coach_analytics.services.analytics.windows import (
    CalendarMonthWindow,
    CalendarWeekWindow,
    RollingWindow,
    TimeWindow,
    entries_in_range,
    most_recent,
)

__all__ = [
    # Normalizers
    "RawRecordAdapter",
    "LogEntryNormalizer",
    "AssessmentNormalizer",
    "NormalizationResult",
    "SkippedRecord",
    "normalize_log_entries",
    "normalize_assessments",
    # Windows
    "TimeWindow",
    "CalendarWeekWindow",
    "CalendarMonthWindow",
    "RollingWindow",
    "entries_in_range",
    "most_recent",
    # Components
    "TimeWindowAggregator",
    "FrequencyRanker",
    "SkillAssessmentAnalyzer",
    "classify_level",
    "RecommendationScorer",
    "summarize_exercises",
    "target_accomplishment",
    # Facade
    "SummaryCalculator",
    "build_logbook_summary",
    "build_progress_summary",
]
