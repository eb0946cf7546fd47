from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List, Optional

from agents.study_plan_agent.types import PlanDraft, StoredPlan

RECENT_PLANS_LIMIT = 50


class PlanStoreError(Exception):
    """Raised by store implementations when the backing database call fails."""


class PlanStore(ABC):
    """
    Append-only plan storage contract.

    Implementations (SQL, Firestore) live under `infra.store` and must wrap their
    driver errors in PlanStoreError.
    """

    @abstractmethod
    async def add(self, draft: PlanDraft) -> str:
        """Insert a new plan with a server-side creation timestamp. Returns its id."""
        raise NotImplementedError

    @abstractmethod
    async def get(self, plan_id: str) -> Optional[StoredPlan]:
        raise NotImplementedError

    @abstractmethod
    async def list_recent(self, limit: int = RECENT_PLANS_LIMIT) -> List[StoredPlan]:
        """Most recent plans first."""
        raise NotImplementedError
