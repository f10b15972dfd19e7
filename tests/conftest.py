"""Shared test fixtures — small candidate lists with realistic data."""

import pytest


@pytest.fixture()
def teams() -> list[str]:
    """A few team names to search through."""
    return ["Atlanta Falcons", "Dallas Cowboys", "New York Jets"]


@pytest.fixture()
def fixtures_by_id() -> dict[str, str]:
    """Candidates keyed by an id, for mapping-source tests."""
    return {
        "f1": "new york mets vs chicago cubs",
        "f2": "chicago cubs at new york mets",
        "f3": "atlanta braves vs pittsburgh pirates",
        "f4": "new york yankees vs boston red sox",
    }


@pytest.fixture()
def characters() -> list[str]:
    """A list with several spellings of the same names."""
    return [
        "Frodo Baggins",
        "Tom Sawyer",
        "Bilbo Baggin",
        "Samuel L. Jackson",
        "F. Baggins",
        "Frody Baggins",
        "Bilbo Baggins",
    ]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the caller's FUZZYSCORE_* settings out of the tests."""
    for name in (
        "FUZZYSCORE_SCORER",
        "FUZZYSCORE_MIN_SCORE",
        "FUZZYSCORE_LIMIT",
        "FUZZYSCORE_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
