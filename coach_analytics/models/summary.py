"""
Summary value objects handed to the presentation layer.

All models are frozen. ``to_dict()`` serializes with camelCase keys
(``totalHours``, ``recommendationScore``, ...) and ISO dates.
"""
from datetime import date
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class SummaryModel(BaseModel):
    """Base for immutable, camelCase-serialized summaries."""

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for the presentation layer."""
        return self.model_dump(by_alias=True, mode="json")


# ========================================
# Logbook items
# ========================================

class TagCount(SummaryModel):
    """A skill tag and how many sessions carried it."""
    tag: str
    count: int


class MonthBucket(SummaryModel):
    """Hours, sessions and mood for one calendar month."""
    month: str  # YYYY-MM
    hours: float
    sessions: int
    average_feeling: float


class ProgressTrends(SummaryModel):
    """Activity over the trailing rolling window."""
    window_days: int
    recent_sessions: int
    recent_average_feeling: float
    recent_hours_per_week: float


class LoggedExercise(SummaryModel):
    """A coach-logged exercise, as shown in the recent exercise list."""
    date: Optional[date]
    exercise_name: Optional[str]
    program_name: Optional[str] = None
    routine_name: Optional[str] = None
    target: Any = None
    result: Any = None


class TargetAccomplishment(SummaryModel):
    """How often logged exercise results met their targets."""
    success_rate: int
    average_achievement: int
    total_exercises: int


class ExerciseSummary(SummaryModel):
    """Statistics over coach-logged exercises."""
    total_exercises: int = 0
    total_sessions: int = 0
    first_log_date: Optional[date] = None
    last_exercises: list[LoggedExercise] = Field(default_factory=list)
    target_accomplishment: Optional[TargetAccomplishment] = None


class LogbookSummary(SummaryModel):
    """Everything the logbook screen needs, computed from raw entries."""
    total_hours: float
    total_sessions: int
    week_hours: float
    week_sessions: int
    month_hours: float
    month_sessions: int
    weekly_average_feeling: float
    last5_average_feeling: float
    average_feeling: float
    first_session_date: date
    session_type_hours: dict[str, float]
    top_strong_skills: list[TagCount]
    top_weak_skills: list[TagCount]
    most_frequent_focus: Optional[str]
    monthly_breakdown: list[MonthBucket]
    trends: ProgressTrends
    exercises: ExerciseSummary
    recommendation_score: int
    skipped_records: int = 0


# ========================================
# Progress items
# ========================================

class TrendPoint(SummaryModel):
    """One plotted score on a skill progress line."""
    date: date
    score: float


class SkillLevel(SummaryModel):
    """Latest score of a skill and its level classification."""
    skill_id: str
    name: str
    score: float
    max_score: float
    percentage: float
    level: str


class ProgressSummary(SummaryModel):
    """Player progress derived from coach assessments."""
    per_skill_average: dict[str, int]
    last_two_delta: dict[str, Optional[float]]
    trend_series: dict[str, list[TrendPoint]]
    latest_summary: dict[str, SkillLevel]
    latest_overall_percentage: Optional[int] = None
    latest_assessment_date: Optional[date] = None
    assessment_count: int = 0
    skipped_records: int = 0
