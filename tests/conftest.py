import pytest

from smartquery.query_builder import QueryBuilder
from smartquery.settings import reload_settings


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch):
    """Start every test from default settings, unaffected by the host environment."""
    for name in ("LOG_LEVEL", "LOG_JSON", "LOG_REJECTIONS", "TRACE_RENDER"):
        monkeypatch.delenv(f"SMARTQUERY_{name}", raising=False)
    settings = reload_settings()
    yield settings
    reload_settings()


@pytest.fixture
def builder():
    """Builder with two columns selected from ``table``."""
    return QueryBuilder().select(["id", "name"]).from_("table")
