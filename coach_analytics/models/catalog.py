"""
Skill catalog - the fixed set of skills coaches score players on.
"""
from dataclasses import dataclass
from typing import Iterable, Iterator, Optional


@dataclass(frozen=True)
class SkillDefinition:
    """A scorable skill with its display name and maximum score."""
    id: str
    name: str
    max_score: float


class SkillCatalog:
    """
    Ordered, immutable collection of skill definitions.

    Per-skill outputs of the analyzers only ever cover skills listed here.
    """

    def __init__(self, skills: Iterable[SkillDefinition]):
        self._skills: tuple[SkillDefinition, ...] = tuple(skills)
        self._by_id = {skill.id: skill for skill in self._skills}

    @classmethod
    def from_mapping(cls, max_scores: dict[str, float]) -> "SkillCatalog":
        """Build a catalog from ``{skill_id: max_score}``, using ids as names."""
        return cls(
            SkillDefinition(id=skill_id, name=skill_id, max_score=max_score)
            for skill_id, max_score in max_scores.items()
        )

    def get(self, skill_id: str) -> Optional[SkillDefinition]:
        return self._by_id.get(skill_id)

    @property
    def ids(self) -> list[str]:
        return [skill.id for skill in self._skills]

    @property
    def total_max_score(self) -> float:
        return sum(skill.max_score for skill in self._skills)

    def __contains__(self, skill_id: object) -> bool:
        return skill_id in self._by_id

    def __iter__(self) -> Iterator[SkillDefinition]:
        return iter(self._skills)

    def __len__(self) -> int:
        return len(self._skills)

    def __repr__(self) -> str:
        return f"SkillCatalog({self.ids!r})"


DEFAULT_SKILL_CATALOG = SkillCatalog([
    SkillDefinition(id="serves", name="Serves", max_score=50),
    SkillDefinition(id="dinks", name="Dinks", max_score=40),
    SkillDefinition(id="volleys", name="Volleys / Resets", max_score=50),
    SkillDefinition(id="third_shot", name="3rd Shot", max_score=40),
    SkillDefinition(id="footwork", name="Footwork", max_score=30),
    SkillDefinition(id="game_play", name="Game Play / Scenarios", max_score=40),
])
