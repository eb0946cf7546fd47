from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from agents.study_plan_agent.types import StoredPlan
from api.utils.common import iso_or_none


class PlanRequest(BaseModel):
    """Body for POST /generate-plan. Fields are optional here so a missing one is a 400, not a 422."""
    subject: Optional[str] = None
    level: Optional[str] = None
    duration: Optional[str] = None
    goals: Optional[str] = None


class PlanRecord(BaseModel):
    model_config = ConfigDict(populate_by_name=True, protected_namespaces=())

    id: str
    subject: str
    level: str
    duration: str
    goals: str
    plan: str
    model_used: str = Field(alias="modelUsed")
    created_at: Optional[str] = Field(default=None, alias="createdAt")
    is_ai_generated: bool = Field(alias="isAiGenerated")

    @classmethod
    def from_stored(cls, p: StoredPlan) -> "PlanRecord":
        return cls(
            id=p.id,
            subject=p.subject,
            level=p.level,
            duration=p.duration,
            goals=p.goals,
            plan=p.plan,
            model_used=p.model_used,
            created_at=iso_or_none(p.created_at),
            is_ai_generated=p.is_ai_generated,
        )


class GeneratePlanResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True, protected_namespaces=())

    success: bool = True
    plan: str
    plan_id: Optional[str] = Field(default=None, alias="planId")
    model_used: str = Field(alias="modelUsed")
    is_ai_generated: bool = Field(alias="isAiGenerated")
    message: Optional[str] = None
    warning: Optional[str] = None


class PlanListResponse(BaseModel):
    success: bool = True
    plans: List[PlanRecord]


class PlanDetailResponse(BaseModel):
    success: bool = True
    plan: PlanRecord


class ModelStatusResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True, protected_namespaces=())

    timestamp: str
    model_status: Dict[str, str] = Field(alias="modelStatus")


class HealthResponse(BaseModel):
    status: str = "healthy"
    server: str
    version: str
    timestamp: str
