"""
coach-analytics - Training analytics and progress aggregation engine.

Turns raw logbook entries and coach assessments into logbook summaries,
player progress summaries and a needs-coaching recommendation score.
"""
from coach_analytics.models import (
    DEFAULT_SKILL_CATALOG,
    LogbookSummary,
    ProgressSummary,
    SkillCatalog,
    SkillDefinition,
)
from coach_analytics.services.analytics import (
    SummaryCalculator,
    build_logbook_summary,
    build_progress_summary,
)

__version__ = "1.0.0"

__all__ = [
    "SummaryCalculator",
    "build_logbook_summary",
    "build_progress_summary",
    "LogbookSummary",
    "ProgressSummary",
    "SkillCatalog",
    "SkillDefinition",
    "DEFAULT_SKILL_CATALOG",
]
