import pytest

from gradeplanner.domain.models import AssessmentComponent, AssessmentType


def make_assessment(id=1, weight=50, obtained_score=None, **kwargs):
    return AssessmentComponent(
        id=id,
        unit_id=kwargs.pop("unit_id", 1),
        name=kwargs.pop("name", "Test"),
        type=kwargs.pop("type", AssessmentType.EXAM),
        due_at=kwargs.pop("due_at", "2025-01-01T10:00:00.000Z"),
        weight=weight,
        obtained_score=obtained_score,
        max_score=kwargs.pop("max_score", None),
    )


@pytest.fixture
def assessment():
    """Factory for assessment components"""
    return make_assessment


@pytest.fixture
def half_graded(assessment):
    """One 50% item scored 12, one 50% item ungraded"""
    return [
        assessment(id=1, weight=50, obtained_score=12),
        assessment(id=2, weight=50, obtained_score=None),
    ]


@pytest.fixture
def hopeless(assessment):
    """80% item scored 2, 20% still open"""
    return [
        assessment(id=1, weight=80, obtained_score=2),
        assessment(id=2, weight=20, obtained_score=None),
    ]


@pytest.fixture
def clean_env(monkeypatch):
    monkeypatch.delenv("GRADEPLANNER_DEFAULT_MINIMUM_PASSING_GRADE", raising=False)
    monkeypatch.delenv("GRADEPLANNER_DEFAULT_GRADE_SCALE", raising=False)
    return monkeypatch
