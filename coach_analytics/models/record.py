"""
Normalized training records.

These are the canonical shapes produced by the record normalizers. All
analytics components work with these types, never with raw store rows.
"""
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any, Mapping, Optional


@dataclass(frozen=True)
class ExerciseDetails:
    """Coach-logged exercise attached to a logbook entry."""
    exercise_name: Optional[str] = None
    program_name: Optional[str] = None
    routine_name: Optional[str] = None
    target: Any = None  # free-form, e.g. "20" or "20 reps"
    result: Any = None


@dataclass(frozen=True)
class LogEntry:
    """
    One recorded training or play session.

    ``date`` is None when the stored value could not be parsed; such
    entries still count toward totals but are left out of every
    time-windowed statistic.
    """
    id: str
    date: Optional[date]
    hours: float = 0.0
    feeling: int = 0
    training_focus: tuple[str, ...] = ()
    difficulty: tuple[str, ...] = ()
    session_type: str = "training"
    exercise_details: Optional[ExerciseDetails] = None
    notes: Optional[str] = None
    created_at: Optional[datetime] = None

    def has_difficulty(self) -> bool:
        """Check if the session flagged at least one difficult skill."""
        return len(self.difficulty) > 0

    def has_exercise(self) -> bool:
        """Check if a coach-logged exercise is attached."""
        return bool(self.exercise_details and self.exercise_details.exercise_name)


@dataclass(frozen=True)
class SkillScore:
    """Score given to one skill in an assessment. Maxima come from the catalog."""
    total: float


@dataclass(frozen=True)
class SkillAssessment:
    """Coach-authored snapshot scoring a player across the skill catalog."""
    id: str
    created_at: datetime
    skills: Mapping[str, SkillScore] = field(default_factory=dict)
    assessment_type: Optional[str] = None
    is_first_time: bool = False

    @property
    def assessed_on(self) -> date:
        return self.created_at.date()

    def score_for(self, skill_id: str) -> Optional[float]:
        """Return the skill total, or None if the skill was not scored."""
        skill = self.skills.get(skill_id)
        return skill.total if skill is not None else None
