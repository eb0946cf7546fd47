"""
Unit test fixtures. Use fakes and mocks; no network. The SQL store runs on in-memory SQLite.
"""
import pytest

from api.schemas.plan_schemas import PlanRequest


@pytest.fixture
def plan_request() -> PlanRequest:
    return PlanRequest(
        subject="Linear Algebra",
        level="Beginner",
        duration="6 weeks",
        goals="Pass the midterm",
    )
