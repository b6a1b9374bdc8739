"""Tests for the skill assessment analyzer."""
from datetime import date

import pytest

from coach_analytics.models.catalog import SkillCatalog
from coach_analytics.services.analytics.adapter import normalize_assessments
from coach_analytics.services.analytics.assessments import (
    SkillAssessmentAnalyzer,
    classify_level,
    skill_percentage,
)


def _analyze(rows, catalog, series_length=6):
    assessments = normalize_assessments(rows).records
    return SkillAssessmentAnalyzer().analyze(assessments, catalog, series_length)


@pytest.fixture
def three_assessments(make_assessment):
    # Delivered newest first, as the store does
    return [
        make_assessment("a3", "2024-03-01", {"skillB": 5}),
        make_assessment("a2", "2024-02-01", {"skillA": 20}),
        make_assessment("a1", "2024-01-01", {"skillA": 10}),
    ]


def test_averages_and_deltas(three_assessments, abc_catalog):
    summary = _analyze(three_assessments, abc_catalog)

    assert summary.per_skill_average == {"skillA": 15, "skillB": 5}
    assert summary.last_two_delta == {"skillA": 10, "skillB": None}


def test_input_order_does_not_matter(three_assessments, abc_catalog):
    forward = _analyze(three_assessments, abc_catalog)
    backward = _analyze(list(reversed(three_assessments)), abc_catalog)
    assert forward == backward


def test_average_rounds_half_up(make_assessment, abc_catalog):
    rows = [
        make_assessment("a1", "2024-01-01", {"skillA": 10}),
        make_assessment("a2", "2024-01-02", {"skillA": 11}),
    ]
    assert _analyze(rows, abc_catalog).per_skill_average["skillA"] == 11


def test_trend_series_is_chronological_and_bounded(make_assessment, abc_catalog):
    rows = [
        make_assessment(f"a{i}", f"2024-01-{i + 1:02d}", {"skillA": i})
        for i in range(5)
    ]
    series = _analyze(rows, abc_catalog, series_length=3).trend_series

    assert [(point.date, point.score) for point in series["skillA"]] == [
        (date(2024, 1, 3), 2),
        (date(2024, 1, 4), 3),
        (date(2024, 1, 5), 4),
    ]
    assert "skillB" not in series


def test_trend_series_is_never_padded(make_assessment, abc_catalog):
    rows = [make_assessment("a1", "2024-01-01", {"skillA": 12})]
    series = _analyze(rows, abc_catalog, series_length=6).trend_series
    assert len(series["skillA"]) == 1


def test_first_time_assessments_are_excluded(make_assessment, abc_catalog):
    rows = [
        make_assessment("a1", "2024-01-01", {"skillA": 10}),
        make_assessment("ft", "2024-01-02", {"skillA": 0}, type="first_time"),
        make_assessment("a2", "2024-01-03", {"skillA": 30}),
    ]
    summary = _analyze(rows, abc_catalog)

    assert summary.per_skill_average["skillA"] == 20
    assert summary.last_two_delta["skillA"] == 20
    assert summary.assessment_count == 2


def test_latest_summary_levels(make_assessment, abc_catalog):
    rows = [
        make_assessment("a1", "2024-01-01", {"skillA": 40, "skillB": 20}),
        make_assessment("a2", "2024-02-01", {"skillA": 30}),
    ]
    latest = _analyze(rows, abc_catalog).latest_summary

    assert latest["skillA"].score == 30
    assert latest["skillA"].percentage == 75
    assert latest["skillA"].level == "Advanced"
    # Not scored in the latest assessment
    assert latest["skillB"].score == 0
    assert latest["skillB"].level == "Beginner"


def test_zero_max_score_gives_zero_percentage(make_assessment):
    catalog = SkillCatalog.from_mapping({"skillA": 0})
    rows = [make_assessment("a1", "2024-01-01", {"skillA": 10})]
    level = _analyze(rows, catalog).latest_summary["skillA"]

    assert level.percentage == 0
    assert level.level == "Beginner"


def test_skills_outside_catalog_are_ignored(make_assessment, abc_catalog):
    rows = [make_assessment("a1", "2024-01-01", {"skillA": 10, "mystery": 99})]
    summary = _analyze(rows, abc_catalog)

    assert "mystery" not in summary.per_skill_average
    assert "mystery" not in summary.latest_summary


def test_overall_percentage(make_assessment, abc_catalog):
    rows = [make_assessment("a1", "2024-01-01", {"skillA": 30, "skillB": 15})]
    assert _analyze(rows, abc_catalog).latest_overall_percentage == 75


def test_empty_input(abc_catalog):
    summary = _analyze([], abc_catalog)

    assert summary.per_skill_average == {}
    assert summary.trend_series == {}
    assert summary.latest_summary == {}
    assert summary.last_two_delta == {"skillA": None, "skillB": None}
    assert summary.latest_overall_percentage is None


def test_invalid_series_length(abc_catalog):
    with pytest.raises(ValueError):
        SkillAssessmentAnalyzer().analyze([], abc_catalog, 0)


@pytest.mark.parametrize("percentage,level", [
    (100, "Advanced"),
    (75, "Advanced"),
    (74.9, "Intermediate"),
    (50, "Intermediate"),
    (49.9, "Beginner"),
    (0, "Beginner"),
])
def test_classify_level(percentage, level):
    assert classify_level(percentage) == level


def test_skill_percentage():
    assert skill_percentage(20, 40) == 50
    assert skill_percentage(5, 0) == 0
