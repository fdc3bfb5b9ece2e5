import pytest
from fastapi.testclient import TestClient

from league_matcher.main import app
from league_matcher.models.team import make_teams


@pytest.fixture(name="client")
def client_fixture(monkeypatch):
    """Provide a test client with matcher settings reset to defaults"""
    for name in (
        "MATCHER_TARGET_GROUP_SIZE",
        "MATCHER_MIN_GROUP_SIZE",
        "MATCHER_MAX_GROUP_SIZE",
        "MATCHER_MAX_ATTEMPTS",
        "MATCHER_RECOMPUTE_AVERAGE",
    ):
        monkeypatch.delenv(name, raising=False)

    with TestClient(app) as client:
        yield client


@pytest.fixture(name="six_teams")
def six_teams_fixture():
    """A(10) .. F(5), ranked in sheet order"""
    return make_teams([("A", 10), ("B", 9), ("C", 8), ("D", 7), ("E", 6), ("F", 5)])
