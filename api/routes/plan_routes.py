"""
Study plan endpoints: generate, list, fetch by id.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Request

from api.schemas.plan_schemas import (
    GeneratePlanResponse,
    PlanDetailResponse,
    PlanListResponse,
    PlanRequest,
)
from api.services.plan_service import PlanService

plan_routes = APIRouter()


def get_plan_service(request: Request) -> PlanService:
    """The service built at startup (see api.api.create_app)."""
    return request.app.state.plan_service


@plan_routes.post(
    "/generate-plan",
    response_model=GeneratePlanResponse,
    response_model_exclude_none=True,
)
async def generate_plan(
    req: Optional[PlanRequest] = None,
    service: PlanService = Depends(get_plan_service),
) -> GeneratePlanResponse:
    """Generate a plan with the first usable model, or the template plan if none answers."""
    # An empty body is reported like any other missing field (400).
    return await service.generate_plan(req or PlanRequest())


@plan_routes.get("/study-plans", response_model=PlanListResponse)
async def list_study_plans(service: PlanService = Depends(get_plan_service)) -> PlanListResponse:
    """Most recent 50 plans, newest first."""
    return PlanListResponse(plans=await service.list_plans())


@plan_routes.get("/study-plan/{plan_id}", response_model=PlanDetailResponse)
async def get_study_plan(
    plan_id: str,
    service: PlanService = Depends(get_plan_service),
) -> PlanDetailResponse:
    return PlanDetailResponse(plan=await service.get_plan(plan_id))
