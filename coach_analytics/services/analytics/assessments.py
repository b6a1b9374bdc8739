"""
Skill Assessment Analyzer - Per-skill averages, deltas and trend series.

First-time (Q&A experience) assessments carry no comparable scores and
are dropped before anything is computed.
"""
from typing import Dict, Iterable, List, Optional

from coach_analytics.core.config import settings
from coach_analytics.core.logging import get_logger
from coach_analytics.models.catalog import SkillCatalog, SkillDefinition
from coach_analytics.models.record import SkillAssessment
from coach_analytics.models.stats import AssessmentSummary
from coach_analytics.models.summary import SkillLevel, TrendPoint
from coach_analytics.services.analytics.numeric import round_to_int, safe_mean, safe_ratio

logger = get_logger(__name__)

ADVANCED_THRESHOLD = 75
INTERMEDIATE_THRESHOLD = 50


def classify_level(percentage: float) -> str:
    """Three-tier level for a skill percentage."""
    if percentage >= ADVANCED_THRESHOLD:
        return "Advanced"
    if percentage >= INTERMEDIATE_THRESHOLD:
        return "Intermediate"
    return "Beginner"


def skill_percentage(score: float, max_score: float) -> float:
    """Score as a percentage of the maximum; 0 when the maximum is 0."""
    return safe_ratio(score, max_score) * 100


class SkillAssessmentAnalyzer:
    """
    Computes progress statistics from a sequence of coach assessments.

    Usage:
        analyzer = SkillAssessmentAnalyzer()
        summary = analyzer.analyze(assessments, DEFAULT_SKILL_CATALOG, 6)
    """

    def analyze(
        self,
        assessments: Iterable[SkillAssessment],
        skill_catalog: SkillCatalog,
        max_series_length: Optional[int] = None,
    ) -> AssessmentSummary:
        """
        Analyze assessments against a skill catalog.

        Args:
            assessments: Normalized assessments, any order
            skill_catalog: Skills to report on
            max_series_length: Maximum points per trend series

        Returns:
            AssessmentSummary covering catalog skills only
        """
        series_length = (
            settings.TREND_SERIES_LENGTH if max_series_length is None else max_series_length
        )
        if series_length < 1:
            raise ValueError(f"max_series_length must be at least 1, got {series_length}")

        history = self.chronological(assessments)

        per_skill_average: Dict[str, int] = {}
        last_two_delta: Dict[str, Optional[float]] = {}
        trend_series: Dict[str, List[TrendPoint]] = {}

        for skill in skill_catalog:
            scored = [
                (assessment, assessment.score_for(skill.id))
                for assessment in history
                if assessment.score_for(skill.id) is not None
            ]
            scores = [score for _, score in scored]

            if scores:
                per_skill_average[skill.id] = round_to_int(safe_mean(scores))
                trend_series[skill.id] = [
                    TrendPoint(date=assessment.assessed_on, score=score)
                    for assessment, score in scored[-series_length:]
                ]

            last_two_delta[skill.id] = scores[-1] - scores[-2] if len(scores) >= 2 else None

        latest = history[-1] if history else None
        latest_summary = self.latest_summary(latest, skill_catalog)

        summary = AssessmentSummary(
            per_skill_average=per_skill_average,
            last_two_delta=last_two_delta,
            trend_series=trend_series,
            latest_summary=latest_summary,
            latest_overall_percentage=self._overall_percentage(latest_summary, skill_catalog),
            latest_assessment_date=latest.assessed_on if latest else None,
            assessment_count=len(history),
        )

        logger.debug(
            "Analyzed skill assessments",
            qualifying=len(history),
            skills_with_data=len(per_skill_average),
            series_length=series_length,
        )

        return summary

    def chronological(self, assessments: Iterable[SkillAssessment]) -> List[SkillAssessment]:
        """
        Drop first-time assessments and order the rest oldest to newest.

        Equal timestamps are ordered by reversed delivery position, since
        the store delivers newest first.
        """
        indexed = [
            (idx, assessment)
            for idx, assessment in enumerate(assessments)
            if not assessment.is_first_time
        ]
        indexed.sort(key=lambda item: (item[1].created_at, -item[0]))
        return [assessment for _, assessment in indexed]

    def latest_summary(
        self,
        latest: Optional[SkillAssessment],
        skill_catalog: SkillCatalog,
    ) -> Dict[str, SkillLevel]:
        """Level classification of every catalog skill in the latest assessment."""
        if latest is None:
            return {}

        return {
            skill.id: self._skill_level(skill, latest.score_for(skill.id) or 0.0)
            for skill in skill_catalog
        }

    def _skill_level(self, skill: SkillDefinition, score: float) -> SkillLevel:
        percentage = skill_percentage(score, skill.max_score)
        return SkillLevel(
            skill_id=skill.id,
            name=skill.name,
            score=score,
            max_score=skill.max_score,
            percentage=percentage,
            level=classify_level(percentage),
        )

    def _overall_percentage(
        self,
        latest_summary: Dict[str, SkillLevel],
        skill_catalog: SkillCatalog,
    ) -> Optional[int]:
        if not latest_summary:
            return None
        total = sum(level.score for level in latest_summary.values())
        return round_to_int(skill_percentage(total, skill_catalog.total_max_score))
