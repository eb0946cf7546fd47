"""
Study plan service.

Builds the prompt, runs the ordered model fallback, falls back to the template plan
when every model fails, and stores the result. A storage failure never fails a
generate request; the plan is returned with a warning instead.
"""

from __future__ import annotations

from typing import Dict, List, Sequence

from agents.core.llm import LLM, GenerationParams
from agents.study_plan_agent import (
    FALLBACK_MODEL_ID,
    MIN_PLAN_CHARS,
    ModelsExhaustedError,
    PlanDraft,
    PlanStore,
    PlanStoreError,
    generate_fallback_plan,
    generate_with_fallback,
)
from api.prompt_builders import build_study_plan_prompt
from api.schemas.plan_schemas import (
    GeneratePlanResponse,
    ModelStatusResponse,
    PlanRecord,
    PlanRequest,
)
from api.utils.common import iso_format, missing_fields, utc_now
from api.utils.logger import configure_logging

logger = configure_logging()

REQUIRED_FIELDS = ("subject", "level", "duration", "goals")

PROBE_INPUT = "Hello"
PROBE_PARAMS = GenerationParams(max_new_tokens=5)

FALLBACK_MESSAGE = "AI service unavailable, fallback used"
FALLBACK_NOT_SAVED_WARNING = "Fallback plan not saved due to DB error"
PLAN_NOT_SAVED_WARNING = "Plan not saved due to DB error"


class MissingFieldsError(ValueError):
    def __init__(self, fields: List[str]):
        self.fields = fields
        super().__init__("All fields are required")


class PlanNotFoundError(LookupError):
    def __init__(self, plan_id: str):
        self.plan_id = plan_id
        super().__init__("Not found")


class PlanService:
    """Request handling for study plans. Providers and store are injected at startup."""

    def __init__(self, llms: Sequence[LLM], store: PlanStore, min_plan_chars: int = MIN_PLAN_CHARS):
        self.llms = list(llms)
        self.store = store
        self.min_plan_chars = min_plan_chars

    async def generate_plan(self, req: PlanRequest) -> GeneratePlanResponse:
        values = req.model_dump()
        missing = missing_fields(values, REQUIRED_FIELDS)
        if missing:
            raise MissingFieldsError(missing)

        subject, level, duration, goals = (values[f] for f in REQUIRED_FIELDS)
        prompt = build_study_plan_prompt(subject=subject, level=level, duration=duration, goals=goals)

        try:
            result = await generate_with_fallback(prompt, self.llms, min_chars=self.min_plan_chars)
        except ModelsExhaustedError as e:
            logger.warning("using fallback plan subject=%r attempts=%s", subject, e.attempts)
            plan = generate_fallback_plan(subject, level, duration, goals)
            draft = PlanDraft(subject, level, duration, goals, plan, FALLBACK_MODEL_ID, False)
            plan_id = await self._try_save(draft)
            if plan_id is None:
                return GeneratePlanResponse(
                    plan=plan,
                    model_used=FALLBACK_MODEL_ID,
                    is_ai_generated=False,
                    warning=FALLBACK_NOT_SAVED_WARNING,
                )
            return GeneratePlanResponse(
                plan=plan,
                plan_id=plan_id,
                model_used=FALLBACK_MODEL_ID,
                is_ai_generated=False,
                message=FALLBACK_MESSAGE,
            )

        draft = PlanDraft(subject, level, duration, goals, result.text, result.model_id, True)
        plan_id = await self._try_save(draft)
        return GeneratePlanResponse(
            plan=result.text,
            plan_id=plan_id,
            model_used=result.model_id,
            is_ai_generated=True,
            warning=PLAN_NOT_SAVED_WARNING if plan_id is None else None,
        )

    async def _try_save(self, draft: PlanDraft) -> str | None:
        try:
            plan_id = await self.store.add(draft)
        except PlanStoreError:
            logger.exception("plan not saved model=%s", draft.model_used)
            return None
        logger.info("plan saved id=%s model=%s ai=%s", plan_id, draft.model_used, draft.is_ai_generated)
        return plan_id

    async def list_plans(self) -> List[PlanRecord]:
        return [PlanRecord.from_stored(p) for p in await self.store.list_recent()]

    async def get_plan(self, plan_id: str) -> PlanRecord:
        stored = await self.store.get(plan_id)
        if stored is None:
            raise PlanNotFoundError(plan_id)
        return PlanRecord.from_stored(stored)

    async def check_models(self) -> ModelStatusResponse:
        """Probe every candidate, one after another, with a tiny request."""
        status: Dict[str, str] = {}
        for llm in self.llms:
            try:
                await llm.generate(PROBE_INPUT, PROBE_PARAMS)
                status[llm.model_id] = "Available"
            except Exception as e:
                logger.info("model probe failed model=%s error=%r", llm.model_id, e)
                status[llm.model_id] = f"Unavailable: {e}"
        return ModelStatusResponse(timestamp=iso_format(utc_now()), model_status=status)
