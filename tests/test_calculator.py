"""Tests for the summary calculator (public entry point)."""
from datetime import date

from coach_analytics import build_logbook_summary, build_progress_summary
from coach_analytics.models.catalog import DEFAULT_SKILL_CATALOG
from coach_analytics.services.analytics.calculator import SummaryCalculator


def test_logbook_summary(raw_entries, now):
    summary = build_logbook_summary(raw_entries, now)

    assert summary.total_hours == 5.0
    assert summary.total_sessions == 4
    assert summary.week_hours == 3.5
    assert summary.month_sessions == 3
    assert [item.tag for item in summary.top_strong_skills] == ["dinks", "serves", "footwork"]
    assert [item.tag for item in summary.top_weak_skills] == ["third_shot", "dinks", "footwork"]
    assert summary.most_frequent_focus == "dinks"
    assert summary.recommendation_score == 38
    assert summary.skipped_records == 0


def test_logbook_summary_is_idempotent(raw_entries, now):
    first = build_logbook_summary(raw_entries, now)
    second = build_logbook_summary(raw_entries, now)
    assert first == second
    assert first.to_dict() == second.to_dict()


def test_progress_summary_is_idempotent(make_assessment):
    rows = [
        make_assessment("a2", "2024-02-01T10:00:00Z", {"serves": 40, "dinks": 20}),
        make_assessment("a1", "2024-01-01T10:00:00Z", {"serves": 30}),
    ]
    assert build_progress_summary(rows) == build_progress_summary(rows)


def test_empty_inputs_yield_neutral_summaries():
    now = date(2024, 5, 15)
    calculator = SummaryCalculator()

    logbook = calculator.build_logbook_summary([], now)
    progress = calculator.build_progress_summary([])

    assert logbook.total_hours == 0
    assert logbook.recommendation_score == 50
    assert logbook.first_session_date == now
    assert logbook.top_strong_skills == []
    assert progress.trend_series == {}
    assert progress.per_skill_average == {}
    assert progress.latest_summary == {}
    assert calculator.compute_recommendation_score([], [], now) == 50


def test_skipped_records_are_reported(now):
    rows = [{"id": "ok", "date": "2024-05-14", "hours": 1}, {"hours": 2}, None]
    summary = build_logbook_summary(rows, now)

    assert summary.total_sessions == 1
    assert summary.skipped_records == 2


def test_progress_summary_with_default_catalog(make_assessment):
    rows = [
        make_assessment("a2", "2024-02-01", {"serves": 40, "dinks": 20}),
        make_assessment("a1", "2024-01-01", {"serves": 30}),
        {"id": "bad"},
    ]
    summary = build_progress_summary(rows)

    assert summary.per_skill_average == {"serves": 35, "dinks": 20}
    assert summary.last_two_delta["serves"] == 10
    assert summary.last_two_delta["dinks"] is None
    assert summary.latest_summary["serves"].level == "Advanced"
    assert summary.latest_summary["dinks"].level == "Intermediate"
    assert summary.latest_assessment_date == date(2024, 2, 1)
    assert summary.skipped_records == 1
    assert set(summary.latest_summary) == set(DEFAULT_SKILL_CATALOG.ids)


def test_to_dict_uses_camel_case(raw_entries, now):
    data = build_logbook_summary(raw_entries, now).to_dict()

    assert data["totalHours"] == 5.0
    assert data["last5AverageFeeling"] == 3.5
    assert data["recommendationScore"] == 38
    assert data["firstSessionDate"] == "2024-04-20"
    assert data["topStrongSkills"][0] == {"tag": "dinks", "count": 2}
    assert data["sessionTypeHours"] == {"training": 2.5, "social": 2.0, "class": 0.5}


def test_compute_recommendation_score(raw_entries, now, make_assessment):
    rows = [make_assessment("a1", "2024-01-01", {"serves": 30})]
    assert SummaryCalculator().compute_recommendation_score(raw_entries, rows, now) == 38


def test_out_of_range_numbers_do_not_abort_summaries(now, make_assessment):
    entries = [
        {"id": "a", "date": "2024-05-14", "hours": 10**400, "feeling": 3},
        {"id": "b", "date": "2024-05-13", "hours": 1.0, "feeling": 4},
    ]
    logbook = build_logbook_summary(entries, now)
    assert logbook.total_sessions == 2
    assert logbook.total_hours == 1.0

    progress = build_progress_summary([
        make_assessment("a1", "2024-05-01", {"serves": 10**400, "dinks": 20}),
    ])
    assert progress.per_skill_average == {"dinks": 20}
    assert progress.skipped_records == 0
