"""
Study plan generation.

- generate_with_fallback: try candidate models in order, first usable answer wins
- generate_fallback_plan: deterministic template plan when every model fails
- PlanStore: append-only storage contract for generated plans
"""

from .fallback_chain import (
    MIN_PLAN_CHARS,
    PLAN_PARAMS,
    FallbackResult,
    ModelsExhaustedError,
    generate_with_fallback,
)
from .fallback_plan import generate_fallback_plan, parse_duration_weeks
from .store import PlanStore, PlanStoreError
from .types import FALLBACK_MODEL_ID, PlanDraft, StoredPlan

__all__ = [
    "MIN_PLAN_CHARS",
    "PLAN_PARAMS",
    "FallbackResult",
    "ModelsExhaustedError",
    "generate_with_fallback",
    "generate_fallback_plan",
    "parse_duration_weeks",
    "PlanStore",
    "PlanStoreError",
    "FALLBACK_MODEL_ID",
    "PlanDraft",
    "StoredPlan",
]
