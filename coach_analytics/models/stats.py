"""
Intermediate statistics produced by the analytics components.

Each component returns one of these; the summary calculator assembles
them into the public summary models.
"""
from dataclasses import dataclass, field
from datetime import date
from typing import Optional

from coach_analytics.models.summary import (
    MonthBucket,
    ProgressTrends,
    SkillLevel,
    TagCount,
    TrendPoint,
)


@dataclass(frozen=True)
class WindowSummary:
    """Time-windowed sums and averages over log entries."""
    total_hours: float
    week_hours: float
    week_sessions: int
    month_hours: float
    month_sessions: int
    weekly_average_feeling: float
    last5_average_feeling: float
    first_session_date: date
    total_sessions: int
    session_type_hours: dict[str, float] = field(default_factory=dict)
    average_feeling: float = 0.0
    monthly_breakdown: list[MonthBucket] = field(default_factory=list)
    trends: Optional[ProgressTrends] = None


@dataclass(frozen=True)
class FrequencySummary:
    """Ranked tag frequencies and recent difficulty rate."""
    strong_skills: list[TagCount] = field(default_factory=list)
    weak_skills: list[TagCount] = field(default_factory=list)
    most_frequent_focus: Optional[str] = None
    recent_difficulty_ratio: float = 0.0


@dataclass(frozen=True)
class AssessmentSummary:
    """Per-skill statistics over qualifying coach assessments."""
    per_skill_average: dict[str, int] = field(default_factory=dict)
    last_two_delta: dict[str, Optional[float]] = field(default_factory=dict)
    trend_series: dict[str, list[TrendPoint]] = field(default_factory=dict)
    latest_summary: dict[str, SkillLevel] = field(default_factory=dict)
    latest_overall_percentage: Optional[int] = None
    latest_assessment_date: Optional[date] = None
    assessment_count: int = 0
