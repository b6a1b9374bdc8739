"""
Frequency Ranker - Tag occurrence counts and top-K rankings.

Trained skills (``training_focus``) rank a player's strong skills;
reported difficulties (``difficulty``) rank the weak ones.
"""
from typing import Dict, Iterable, List, Optional

from coach_analytics.core.config import settings
from coach_analytics.core.logging import get_logger
from coach_analytics.models.record import LogEntry
from coach_analytics.models.stats import FrequencySummary
from coach_analytics.models.summary import TagCount
from coach_analytics.services.analytics.numeric import safe_ratio
from coach_analytics.services.analytics.windows import most_recent

logger = get_logger(__name__)

TAG_FIELDS = ("training_focus", "difficulty")
RECENT_DIFFICULTY_COUNT = 10


class FrequencyRanker:
    """Counts tag occurrences across log entries and ranks them."""

    def __init__(self, top_k: Optional[int] = None):
        self.top_k = settings.TOP_SKILLS_LIMIT if top_k is None else top_k

    def count_tags(self, entries: Iterable[LogEntry], field: str) -> Dict[str, int]:
        """
        Count tag occurrences, one count per tag per entry.

        The returned dict is ordered by first appearance in the input.

        Raises:
            ValueError: if ``field`` is not a tag field
        """
        if field not in TAG_FIELDS:
            raise ValueError(f"field must be one of {TAG_FIELDS}, got {field!r}")

        counts: Dict[str, int] = {}
        for entry in entries:
            for tag in getattr(entry, field):
                counts[tag] = counts.get(tag, 0) + 1
        return counts

    def rank_tags(
        self,
        entries: Iterable[LogEntry],
        field: str,
        top_k: Optional[int] = None,
    ) -> List[TagCount]:
        """
        Rank tags by count, descending.

        Ties keep first-seen order (sorted() is stable), so identical inputs
        always produce identical rankings.

        Args:
            entries: Normalized log entries
            field: ``training_focus`` or ``difficulty``
            top_k: Maximum number of tags to return

        Returns:
            At most ``top_k`` TagCount items, empty if nothing is tagged
        """
        limit = self.top_k if top_k is None else top_k
        if limit < 0:
            raise ValueError(f"top_k must be non-negative, got {limit}")

        counts = self.count_tags(entries, field)
        ranked = sorted(counts.items(), key=lambda item: item[1], reverse=True)

        return [TagCount(tag=tag, count=count) for tag, count in ranked[:limit]]

    def recent_difficulty_ratio(self, entries: Iterable[LogEntry]) -> float:
        """Fraction of the ten most recent entries that report a difficulty."""
        recent = most_recent(entries, RECENT_DIFFICULTY_COUNT)
        flagged = sum(1 for entry in recent if entry.has_difficulty())
        return safe_ratio(flagged, len(recent))

    def summarize(self, entries: Iterable[LogEntry], top_k: Optional[int] = None) -> FrequencySummary:
        """Build the strong/weak skill rankings used by the logbook summary."""
        entries = list(entries)

        strong = self.rank_tags(entries, "training_focus", top_k)
        weak = self.rank_tags(entries, "difficulty", top_k)
        top_focus = self.rank_tags(entries, "training_focus", 1)

        summary = FrequencySummary(
            strong_skills=strong,
            weak_skills=weak,
            most_frequent_focus=top_focus[0].tag if top_focus else None,
            recent_difficulty_ratio=self.recent_difficulty_ratio(entries),
        )

        logger.debug(
            "Ranked skill tags",
            strong=[item.tag for item in strong],
            weak=[item.tag for item in weak],
            recent_difficulty_ratio=round(summary.recent_difficulty_ratio, 3),
        )

        return summary
