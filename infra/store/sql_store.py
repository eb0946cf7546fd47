from __future__ import annotations

from datetime import datetime
from typing import Callable, List, Optional
from uuid import uuid4

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker

from agents.study_plan_agent.store import RECENT_PLANS_LIMIT, PlanStore, PlanStoreError
from agents.study_plan_agent.types import PlanDraft, StoredPlan
from api.models.models import StudyPlan
from api.utils.common import utc_now


def _to_stored(row: StudyPlan) -> StoredPlan:
    return StoredPlan(
        id=row.id,
        subject=row.subject,
        level=row.level,
        duration=row.duration,
        goals=row.goals,
        plan=row.plan,
        model_used=row.model_used,
        is_ai_generated=bool(row.is_ai_generated),
        created_at=row.created_at,
    )


class SqlPlanStore(PlanStore):
    """
    PlanStore on any SQLAlchemy database; one row per plan document.
    `clock` stands in for the server timestamp (UTC, naive, like the column).
    """

    def __init__(self, session_factory: sessionmaker, clock: Callable[[], datetime] = utc_now):
        self._session_factory = session_factory
        self._clock = clock

    async def add(self, draft: PlanDraft) -> str:
        plan_id = str(uuid4())
        db = self._session_factory()
        try:
            db.add(
                StudyPlan(
                    id=plan_id,
                    subject=draft.subject,
                    level=draft.level,
                    duration=draft.duration,
                    goals=draft.goals,
                    plan=draft.plan,
                    model_used=draft.model_used,
                    is_ai_generated=draft.is_ai_generated,
                    created_at=self._clock(),
                )
            )
            db.commit()
        except SQLAlchemyError as e:
            db.rollback()
            raise PlanStoreError(f"failed to insert study plan: {e}") from e
        finally:
            db.close()
        return plan_id

    async def get(self, plan_id: str) -> Optional[StoredPlan]:
        db = self._session_factory()
        try:
            row = db.query(StudyPlan).filter(StudyPlan.id == plan_id).first()
            return _to_stored(row) if row is not None else None
        except SQLAlchemyError as e:
            raise PlanStoreError(f"failed to load study plan {plan_id}: {e}") from e
        finally:
            db.close()

    async def list_recent(self, limit: int = RECENT_PLANS_LIMIT) -> List[StoredPlan]:
        db = self._session_factory()
        try:
            rows = db.query(StudyPlan).order_by(StudyPlan.created_at.desc()).limit(limit).all()
            return [_to_stored(r) for r in rows]
        except SQLAlchemyError as e:
            raise PlanStoreError(f"failed to list study plans: {e}") from e
        finally:
            db.close()
