"""
Recommendation Scorer - Heuristic 0-100 "needs coaching" index.

Four weighted components:
- Mood (40): low recent feeling raises the score
- Difficulty frequency (30): share of recent sessions reporting a difficulty
- Stagnation (20): number of recurring weak skills
- Cadence (10): few sessions this week raises the score

The coefficients are fixed for behavioral compatibility with existing
clients. Do not retune them.
"""
from typing import Optional

from coach_analytics.core.logging import get_logger
from coach_analytics.models.stats import AssessmentSummary, FrequencySummary, WindowSummary
from coach_analytics.services.analytics.numeric import round_to_int

logger = get_logger(__name__)

MOOD_WEIGHT = 40
DIFFICULTY_WEIGHT = 30
STAGNATION_WEIGHT = 20
CADENCE_WEIGHT = 10

NEUTRAL_SCORE = 50
MIN_ENTRIES = 3
NEUTRAL_FEELING = 3
WEAK_SKILL_CAP = 3
TARGET_WEEKLY_SESSIONS = 3
MIN_WEEKLY_SESSIONS = 2


class RecommendationScorer:
    """Combines window, frequency and assessment outputs into one score."""

    def score(
        self,
        window_summary: WindowSummary,
        frequency_summary: FrequencySummary,
        assessment_summary: Optional[AssessmentSummary] = None,
    ) -> int:
        """
        Compute the needs-coaching score.

        Args:
            window_summary: Output of the time window aggregator
            frequency_summary: Output of the frequency ranker
            assessment_summary: Output of the assessment analyzer, if any

        Returns:
            Integer in [0, 100]; 50 when fewer than three entries exist
        """
        if window_summary.total_sessions < MIN_ENTRIES:
            logger.debug(
                "Not enough entries for recommendation, using neutral score",
                total_sessions=window_summary.total_sessions,
            )
            return NEUTRAL_SCORE

        components = {
            "mood": self.mood_component(window_summary.last5_average_feeling),
            "difficulty": self.difficulty_component(frequency_summary.recent_difficulty_ratio),
            "stagnation": self.stagnation_component(len(frequency_summary.weak_skills)),
            "cadence": self.cadence_component(window_summary.week_sessions),
        }
        score = max(0, min(100, round_to_int(sum(components.values()))))

        logger.debug(
            "Computed recommendation score",
            score=score,
            assessments=assessment_summary.assessment_count if assessment_summary else 0,
            **{name: round(value, 2) for name, value in components.items()},
        )

        return score

    def mood_component(self, last5_average_feeling: float) -> float:
        return max(0.0, (NEUTRAL_FEELING - last5_average_feeling) / 2) * MOOD_WEIGHT

    def difficulty_component(self, recent_difficulty_ratio: float) -> float:
        return recent_difficulty_ratio * DIFFICULTY_WEIGHT

    def stagnation_component(self, weak_skill_count: int) -> float:
        return min(weak_skill_count / WEAK_SKILL_CAP, 1) * STAGNATION_WEIGHT

    def cadence_component(self, week_sessions: int) -> float:
        if week_sessions < MIN_WEEKLY_SESSIONS:
            return float(CADENCE_WEIGHT)
        return max(0.0, (TARGET_WEEKLY_SESSIONS - week_sessions) / TARGET_WEEKLY_SESSIONS) * CADENCE_WEIGHT
