"""
Pytest configuration and shared fixtures for the test suite.
Ensures proper Python path and provides fakes for model providers and plan stores.
"""
import itertools
import sys
from datetime import datetime, timedelta
from pathlib import Path
from typing import List, Optional

import pytest

# Add project root and src to Python path for imports
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))
src_path = project_root / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from agents.core.llm import LLM, GenerationParams  # noqa: E402
from agents.study_plan_agent.store import PlanStore, PlanStoreError  # noqa: E402
from agents.study_plan_agent.types import PlanDraft, StoredPlan  # noqa: E402


class FakeLLM(LLM):
    """Scripted provider: returns `reply`, or raises it when it is an exception."""

    def __init__(self, model_id: str, reply=None):
        self._model_id = model_id
        self.reply = reply
        self.calls: List[tuple[str, GenerationParams]] = []

    @property
    def model_id(self) -> str:
        return self._model_id

    async def generate(self, prompt: str, params: GenerationParams) -> str:
        self.calls.append((prompt, params))
        if isinstance(self.reply, BaseException):
            raise self.reply
        return self.reply


class BrokenStore(PlanStore):
    """Every call fails the way a database outage would."""

    def __init__(self):
        self.add_calls = 0

    async def add(self, draft: PlanDraft) -> str:
        self.add_calls += 1
        raise PlanStoreError("database unavailable")

    async def get(self, plan_id: str) -> Optional[StoredPlan]:
        raise PlanStoreError("database unavailable")

    async def list_recent(self, limit: int = 50) -> List[StoredPlan]:
        raise PlanStoreError("database unavailable")


LONG_PLAN = "Week 1: read the first three chapters and summarise each one. " * 4


@pytest.fixture
def make_llm():
    """Factory: make_llm("model-id", reply="text" | Exception(...))."""
    return FakeLLM


@pytest.fixture
def long_plan() -> str:
    return LONG_PLAN


@pytest.fixture
def broken_store() -> BrokenStore:
    return BrokenStore()


@pytest.fixture
def fake_clock():
    """Strictly increasing naive-UTC timestamps, one second apart."""
    start = datetime(2025, 1, 1, 9, 0, 0)
    counter = itertools.count()
    return lambda: start + timedelta(seconds=next(counter))


# ----- In-memory DB (for tests that need a store without touching a real DB) -----
@pytest.fixture
def in_memory_engine():
    """Create an in-memory SQLite engine with the plan table."""
    from api.config import create_db, create_db_engine

    engine = create_db_engine("sqlite:///:memory:")
    create_db(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def sql_store(in_memory_engine, fake_clock):
    from api.config import make_session_factory
    from infra.store.sql_store import SqlPlanStore

    return SqlPlanStore(make_session_factory(in_memory_engine), clock=fake_clock)
