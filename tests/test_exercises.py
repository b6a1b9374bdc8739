"""Tests for coach-logged exercise statistics."""
from datetime import date

from coach_analytics.models.record import ExerciseDetails, LogEntry
from coach_analytics.services.analytics.exercises import summarize_exercises, target_accomplishment


def _exercise(entry_id, day, target, result, name="Dink drill"):
    return LogEntry(
        id=entry_id,
        date=day,
        exercise_details=ExerciseDetails(exercise_name=name, target=target, result=result),
    )


def test_no_exercises():
    summary = summarize_exercises([LogEntry(id="1", date=date(2024, 5, 1))])
    assert summary.total_exercises == 0
    assert summary.target_accomplishment is None
    assert summary.last_exercises == []


def test_target_accomplishment():
    entries = [
        _exercise("1", date(2024, 5, 1), "20", "20"),
        _exercise("2", date(2024, 5, 1), "20 reps", "10"),
        _exercise("3", date(2024, 5, 2), "10", "15"),
        _exercise("4", date(2024, 5, 3), "n/a", "15"),
        _exercise("5", date(2024, 5, 3), "0", "5"),
    ]
    stats = target_accomplishment(entries)

    assert stats.total_exercises == 3
    assert stats.success_rate == 67
    # (100 + 50 + 150) / 3
    assert stats.average_achievement == 100


def test_exercise_summary():
    entries = [
        _exercise(str(i), date(2024, 5, i + 1), "10", "10", name=f"Drill {i}")
        for i in range(6)
    ]
    entries.append(LogEntry(id="plain", date=date(2024, 5, 20)))
    summary = summarize_exercises(entries)

    assert summary.total_exercises == 6
    assert summary.total_sessions == 6
    assert summary.first_log_date == date(2024, 5, 1)
    assert [item.exercise_name for item in summary.last_exercises] == [
        "Drill 5", "Drill 4", "Drill 3", "Drill 2",
    ]
    assert summary.target_accomplishment.success_rate == 100
