# tests/conftest.py
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from gql_fastapi.core.pydanticConfig.settings import Settings
from gql_fastapi.main import create_app


@pytest.fixture
def asset(tmp_path) -> Path:
    """A stand-in GraphiQL page, so tests can remove it at will."""
    page = tmp_path / "index.html"
    page.write_text("<html><body>GraphiQL test page</body></html>", encoding="utf-8")
    return page


@pytest.fixture
def make_settings():
    def _make(**overrides) -> Settings:
        values = {"ACTIVATE_GRAPHIQL": False, "LOG_FILE": None}
        values.update(overrides)
        return Settings(**values)
    return _make


@pytest.fixture
def make_client(make_settings):
    """
    Build a TestClient around a fresh app. Server errors are returned as
    responses so the generic 500 handler can be asserted on.
    """
    def _make(**overrides) -> TestClient:
        app = create_app(make_settings(**overrides))
        return TestClient(app, raise_server_exceptions=False)
    return _make


@pytest.fixture
def client(make_client):
    return make_client(ACTIVATE_GRAPHIQL=True)
