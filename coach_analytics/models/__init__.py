from coach_analytics.models.catalog import DEFAULT_SKILL_CATALOG, SkillCatalog, SkillDefinition
from coach_analytics.models.record import ExerciseDetails, LogEntry, SkillAssessment, SkillScore
from coach_analytics.models.stats import AssessmentSummary, FrequencySummary, WindowSummary
from coach_analytics.models.summary import (
    ExerciseSummary,
    LogbookSummary,
    LoggedExercise,
    MonthBucket,
    ProgressSummary,
    ProgressTrends,
    SkillLevel,
    TagCount,
    TargetAccomplishment,
    TrendPoint,
)

__all__ = [
    # Records
    "LogEntry",
    "ExerciseDetails",
    "SkillAssessment",
    "SkillScore",
    # Catalog
    "SkillCatalog",
    "SkillDefinition",
    "DEFAULT_SKILL_CATALOG",
    # Intermediate stats
    "WindowSummary",
    "FrequencySummary",
    "AssessmentSummary",
    # Summaries
    "LogbookSummary",
    "ProgressSummary",
    "ExerciseSummary",
    "LoggedExercise",
    "MonthBucket",
    "ProgressTrends",
    "SkillLevel",
    "TagCount",
    "TargetAccomplishment",
    "TrendPoint",
]
