"""
Exercise statistics - Target accomplishment of coach-logged exercises.
"""
from typing import Iterable, List, Optional

from coach_analytics.models.record import LogEntry
from coach_analytics.models.summary import ExerciseSummary, LoggedExercise, TargetAccomplishment
from coach_analytics.services.analytics.numeric import parse_leading_int, round_to_int
from coach_analytics.services.analytics.windows import most_recent

LAST_EXERCISES_COUNT = 4


def summarize_exercises(entries: Iterable[LogEntry]) -> ExerciseSummary:
    """
    Summarize entries that carry a coach-logged exercise.

    Only exercises whose target and result both parse as integers, with a
    positive target, count toward target accomplishment.
    """
    exercise_entries = [entry for entry in entries if entry.has_exercise()]
    if not exercise_entries:
        return ExerciseSummary()

    dated = [entry.date for entry in exercise_entries if entry.date is not None]

    return ExerciseSummary(
        total_exercises=len(exercise_entries),
        total_sessions=len(set(dated)),
        first_log_date=min(dated) if dated else None,
        last_exercises=[
            _logged_exercise(entry)
            for entry in most_recent(exercise_entries, LAST_EXERCISES_COUNT)
        ],
        target_accomplishment=target_accomplishment(exercise_entries),
    )


def target_accomplishment(entries: Iterable[LogEntry]) -> Optional[TargetAccomplishment]:
    """Success rate and average percentage of target achieved."""
    pairs: List[tuple[int, int]] = []
    for entry in entries:
        if entry.exercise_details is None:
            continue
        target = parse_leading_int(entry.exercise_details.target)
        result = parse_leading_int(entry.exercise_details.result)
        if target is not None and result is not None and target > 0:
            pairs.append((target, result))

    if not pairs:
        return None

    met = sum(1 for target, result in pairs if result >= target)
    achievement = sum(result / target * 100 for target, result in pairs)

    return TargetAccomplishment(
        success_rate=round_to_int(met / len(pairs) * 100),
        average_achievement=round_to_int(achievement / len(pairs)),
        total_exercises=len(pairs),
    )


def _logged_exercise(entry: LogEntry) -> LoggedExercise:
    details = entry.exercise_details
    return LoggedExercise(
        date=entry.date,
        exercise_name=details.exercise_name,
        program_name=details.program_name,
        routine_name=details.routine_name,
        target=details.target,
        result=details.result,
    )
