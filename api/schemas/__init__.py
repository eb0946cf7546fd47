"""
API schemas package. Import from submodules or from this package.

Example:
    from api.schemas import PlanRecord
    from api.schemas.plan_schemas import GeneratePlanResponse
"""

from api.schemas.plan_schemas import (
    PlanRequest,
    PlanRecord,
    GeneratePlanResponse,
    PlanListResponse,
    PlanDetailResponse,
    ModelStatusResponse,
    HealthResponse,
)

__all__ = [
    "PlanRequest",
    "PlanRecord",
    "GeneratePlanResponse",
    "PlanListResponse",
    "PlanDetailResponse",
    "ModelStatusResponse",
    "HealthResponse",
]
