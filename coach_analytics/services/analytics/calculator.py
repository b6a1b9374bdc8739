"""
Summary Calculator - Public entry point of the analytics engine.

Orchestrates:
- Record normalization
- Time window aggregation, tag ranking, assessment analysis
- Recommendation scoring
- Assembly of the immutable summaries handed to the presentation layer

Every call recomputes from the full record set; nothing is cached.
"""
from typing import Any, Iterable, Optional

from coach_analytics.core.logging import get_logger
from coach_analytics.models.catalog import DEFAULT_SKILL_CATALOG, SkillCatalog
from coach_analytics.models.summary import LogbookSummary, ProgressSummary
from coach_analytics.services.analytics.adapter import AssessmentNormalizer, LogEntryNormalizer
from coach_analytics.services.analytics.aggregator import TimeWindowAggregator
from coach_analytics.services.analytics.assessments import SkillAssessmentAnalyzer
from coach_analytics.services.analytics.exercises import summarize_exercises
from coach_analytics.services.analytics.frequency import FrequencyRanker
from coach_analytics.services.analytics.recommendation import RecommendationScorer
from coach_analytics.services.analytics.windows import DateLike

logger = get_logger(__name__)


class SummaryCalculator:
    """
    Composes the analytics components into logbook and progress summaries.

    Usage:
        calculator = SummaryCalculator()
        logbook = calculator.build_logbook_summary(raw_entries, now=date.today())
        progress = calculator.build_progress_summary(raw_assessments)
    """

    def __init__(
        self,
        skill_catalog: Optional[SkillCatalog] = None,
        log_normalizer: Optional[LogEntryNormalizer] = None,
        assessment_normalizer: Optional[AssessmentNormalizer] = None,
        aggregator: Optional[TimeWindowAggregator] = None,
        ranker: Optional[FrequencyRanker] = None,
        analyzer: Optional[SkillAssessmentAnalyzer] = None,
        scorer: Optional[RecommendationScorer] = None,
    ):
        self.skill_catalog = skill_catalog or DEFAULT_SKILL_CATALOG
        self.log_normalizer = log_normalizer or LogEntryNormalizer()
        self.assessment_normalizer = assessment_normalizer or AssessmentNormalizer()
        self.aggregator = aggregator or TimeWindowAggregator()
        self.ranker = ranker or FrequencyRanker()
        self.analyzer = analyzer or SkillAssessmentAnalyzer()
        self.scorer = scorer or RecommendationScorer()

    def build_logbook_summary(
        self,
        raw_entries: Optional[Iterable[Any]],
        now: DateLike,
    ) -> LogbookSummary:
        """
        Build the logbook summary from raw store rows.

        Args:
            raw_entries: Raw logbook rows
            now: Reference time for the calendar windows

        Returns:
            LogbookSummary including the recommendation score
        """
        normalized = self.log_normalizer.normalize(raw_entries)
        entries = normalized.records

        window = self.aggregator.aggregate(entries, now)
        frequency = self.ranker.summarize(entries)
        score = self.scorer.score(window, frequency)

        summary = LogbookSummary(
            total_hours=window.total_hours,
            total_sessions=window.total_sessions,
            week_hours=window.week_hours,
            week_sessions=window.week_sessions,
            month_hours=window.month_hours,
            month_sessions=window.month_sessions,
            weekly_average_feeling=window.weekly_average_feeling,
            last5_average_feeling=window.last5_average_feeling,
            average_feeling=window.average_feeling,
            first_session_date=window.first_session_date,
            session_type_hours=window.session_type_hours,
            top_strong_skills=frequency.strong_skills,
            top_weak_skills=frequency.weak_skills,
            most_frequent_focus=frequency.most_frequent_focus,
            monthly_breakdown=window.monthly_breakdown,
            trends=window.trends,
            exercises=summarize_exercises(entries),
            recommendation_score=score,
            skipped_records=normalized.skipped_count,
        )

        logger.info(
            "Built logbook summary",
            total_sessions=summary.total_sessions,
            skipped_records=summary.skipped_records,
            recommendation_score=score,
        )

        return summary

    def build_progress_summary(
        self,
        raw_assessments: Optional[Iterable[Any]],
        skill_catalog: Optional[SkillCatalog] = None,
        max_series_length: Optional[int] = None,
    ) -> ProgressSummary:
        """
        Build the player progress summary from raw assessment rows.

        Args:
            raw_assessments: Raw coach assessment rows
            skill_catalog: Skills to report on (defaults to the calculator's)
            max_series_length: Maximum points per trend series

        Returns:
            ProgressSummary
        """
        normalized = self.assessment_normalizer.normalize(raw_assessments)
        analysis = self.analyzer.analyze(
            normalized.records,
            skill_catalog or self.skill_catalog,
            max_series_length,
        )

        summary = ProgressSummary(
            per_skill_average=analysis.per_skill_average,
            last_two_delta=analysis.last_two_delta,
            trend_series=analysis.trend_series,
            latest_summary=analysis.latest_summary,
            latest_overall_percentage=analysis.latest_overall_percentage,
            latest_assessment_date=analysis.latest_assessment_date,
            assessment_count=analysis.assessment_count,
            skipped_records=normalized.skipped_count,
        )

        logger.info(
            "Built progress summary",
            assessment_count=summary.assessment_count,
            skipped_records=summary.skipped_records,
        )

        return summary

    def compute_recommendation_score(
        self,
        raw_entries: Optional[Iterable[Any]],
        raw_assessments: Optional[Iterable[Any]],
        now: DateLike,
    ) -> int:
        """
        Compute the needs-coaching score from raw logbook and assessment rows.

        Returns:
            Integer in [0, 100]
        """
        entries = self.log_normalizer.normalize(raw_entries).records
        assessments = self.assessment_normalizer.normalize(raw_assessments).records

        window = self.aggregator.aggregate(entries, now)
        frequency = self.ranker.summarize(entries)
        analysis = self.analyzer.analyze(assessments, self.skill_catalog)

        return self.scorer.score(window, frequency, analysis)


def build_logbook_summary(raw_entries: Optional[Iterable[Any]], now: DateLike) -> LogbookSummary:
    """Build a logbook summary with default components."""
    return SummaryCalculator().build_logbook_summary(raw_entries, now)


def build_progress_summary(
    raw_assessments: Optional[Iterable[Any]],
    skill_catalog: Optional[SkillCatalog] = None,
    max_series_length: Optional[int] = None,
) -> ProgressSummary:
    """Build a progress summary with default components."""
    return SummaryCalculator().build_progress_summary(
        raw_assessments, skill_catalog, max_series_length
    )
