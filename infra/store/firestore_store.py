from __future__ import annotations

from typing import Any, List, Optional

from google.api_core.exceptions import GoogleAPIError
from google.cloud import firestore
from google.oauth2 import service_account

from agents.study_plan_agent.store import RECENT_PLANS_LIMIT, PlanStore, PlanStoreError
from agents.study_plan_agent.types import PlanDraft, StoredPlan


def build_firestore_client(key_path: Optional[str]) -> firestore.AsyncClient:
    """Service-account key file when given, otherwise application default credentials."""
    if key_path:
        creds = service_account.Credentials.from_service_account_file(key_path)
        return firestore.AsyncClient(project=creds.project_id, credentials=creds)
    return firestore.AsyncClient()


class FirestorePlanStore(PlanStore):
    """Plans as documents in one Firestore collection; `createdAt` is the server timestamp."""

    def __init__(self, client: Any, collection: str = "studyPlans"):
        self._client = client
        self._collection = collection

    def _coll(self):
        return self._client.collection(self._collection)

    async def add(self, draft: PlanDraft) -> str:
        data = draft.to_document()
        data["createdAt"] = firestore.SERVER_TIMESTAMP
        try:
            _, ref = await self._coll().add(data)
        except GoogleAPIError as e:
            raise PlanStoreError(f"failed to insert study plan: {e}") from e
        return ref.id

    async def get(self, plan_id: str) -> Optional[StoredPlan]:
        try:
            snap = await self._coll().document(plan_id).get()
        except GoogleAPIError as e:
            raise PlanStoreError(f"failed to load study plan {plan_id}: {e}") from e
        if not snap.exists:
            return None
        return StoredPlan.from_document(snap.id, snap.to_dict() or {})

    async def list_recent(self, limit: int = RECENT_PLANS_LIMIT) -> List[StoredPlan]:
        q = (
            self._coll()
            .order_by("createdAt", direction=firestore.Query.DESCENDING)
            .limit(limit)
        )
        plans: List[StoredPlan] = []
        try:
            async for doc in q.stream():
                plans.append(StoredPlan.from_document(doc.id, doc.to_dict() or {}))
        except GoogleAPIError as e:
            raise PlanStoreError(f"failed to list study plans: {e}") from e
        return plans
