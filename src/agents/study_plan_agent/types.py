from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Optional

FALLBACK_MODEL_ID = "fallback"


@dataclass(frozen=True)
class PlanDraft:
    """
    A plan ready to be stored. `id` and `created_at` are assigned by the store.
    """

    subject: str
    level: str
    duration: str
    goals: str
    plan: str
    model_used: str
    is_ai_generated: bool

    def to_document(self) -> Dict[str, Any]:
        """Document shape used by the hosted store (camelCase, as the web client reads it)."""
        return {
            "subject": self.subject,
            "level": self.level,
            "duration": self.duration,
            "goals": self.goals,
            "plan": self.plan,
            "modelUsed": self.model_used,
            "isAiGenerated": self.is_ai_generated,
        }


@dataclass(frozen=True)
class StoredPlan:
    id: str
    subject: str
    level: str
    duration: str
    goals: str
    plan: str
    model_used: str
    is_ai_generated: bool
    created_at: Optional[datetime]

    @classmethod
    def from_document(cls, doc_id: str, data: Dict[str, Any]) -> "StoredPlan":
        return cls(
            id=doc_id,
            subject=data.get("subject") or "",
            level=data.get("level") or "",
            duration=data.get("duration") or "",
            goals=data.get("goals") or "",
            plan=data.get("plan") or "",
            model_used=data.get("modelUsed") or FALLBACK_MODEL_ID,
            is_ai_generated=bool(data.get("isAiGenerated")),
            created_at=data.get("createdAt"),
        )
