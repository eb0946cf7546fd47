"""
Integration test fixtures. Builds the FastAPI app with fake providers and an in-memory SQL store.
"""
import pytest
from fastapi.testclient import TestClient


@pytest.fixture
def make_client(sql_store):
    """Factory: make_client(llms, store=None, raise_server_exceptions=True) -> TestClient."""
    from api.api import create_app
    from api.bootstrap import AppDependencies

    def _make(llms, store=None, raise_server_exceptions=True):
        app = create_app(AppDependencies(llms=list(llms), store=store or sql_store))
        return TestClient(app, raise_server_exceptions=raise_server_exceptions)

    return _make


@pytest.fixture
def plan_body() -> dict:
    return {
        "subject": "Organic Chemistry",
        "level": "Intermediate",
        "duration": "8 weeks",
        "goals": "Master reaction mechanisms",
    }
