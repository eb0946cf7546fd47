"""
Candidate model status: probe each configured model with a tiny request.
"""

from fastapi import APIRouter, Depends

from api.routes.plan_routes import get_plan_service
from api.schemas.plan_schemas import ModelStatusResponse
from api.services.plan_service import PlanService

model_routes = APIRouter()


@model_routes.get("/check-models", response_model=ModelStatusResponse)
async def check_models(service: PlanService = Depends(get_plan_service)) -> ModelStatusResponse:
    """
    Returns { "timestamp": ..., "modelStatus": { "<model id>": "Available" | "Unavailable: <reason>" } }.
    """
    return await service.check_models()
