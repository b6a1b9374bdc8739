"""Shared fixtures for the analytics test suite."""
from datetime import date

import pytest

from coach_analytics.models.catalog import SkillCatalog


# Wednesday. With the default Sunday week start the week begins 2024-05-12.
NOW = date(2024, 5, 15)


@pytest.fixture
def now():
    return NOW


@pytest.fixture
def raw_entries():
    """Store rows in the shape the remote store delivers them, newest first."""
    return [
        {
            "id": "e1",
            "date": "2024-05-14",
            "hours": 1.5,
            "feeling": 4,
            "training_focus": '["dinks", "serves"]',
            "difficulty": '["third_shot"]',
            "session_type": "training",
        },
        {
            "id": "e2",
            "date": "2024-05-12",
            "hours": 2.0,
            "feeling": 3,
            "training_focus": '["dinks"]',
            "difficulty": "[]",
            "session_type": "social",
        },
        {
            "id": "e3",
            "date": "2024-05-11",
            "hours": 1.0,
            "feeling": 2,
            "training_focus": ["footwork"],
            "difficulty": ["dinks", "footwork"],
            "session_type": None,
        },
        {
            "id": "e4",
            "date": "2024-04-20",
            "hours": 0.5,
            "feeling": 5,
            "training_focus": "volleys",
            "difficulty": None,
            "session_type": "class",
        },
    ]


@pytest.fixture
def abc_catalog():
    return SkillCatalog.from_mapping({"skillA": 40, "skillB": 20})


@pytest.fixture
def make_assessment():
    """Factory for raw assessment rows with ``{skill: total}`` scores."""
    def _make(assessment_id, created_at, skills, **extra):
        row = {
            "id": assessment_id,
            "created_at": created_at,
            "skills_data": {skill: {"total": total} for skill, total in skills.items()},
        }
        row.update(extra)
        return row
    return _make
