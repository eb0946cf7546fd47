"""
Process-start wiring: build the candidate model providers and the plan store once
and hand them to the app. No client is created at import time.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence

from agents.core.llm import LLM
from agents.study_plan_agent.store import PlanStore
from api.config import Settings, create_db, create_db_engine, make_session_factory
from api.utils.logger import configure_logging
from infra.llm.huggingface import HuggingFaceLLM, build_inference_client
from infra.llm.ollama import OLLAMA_PREFIX, OllamaLLM
from infra.store.sql_store import SqlPlanStore

logger = configure_logging()


@dataclass
class AppDependencies:
    llms: List[LLM]
    store: PlanStore
    min_plan_chars: int = 100


def build_llms(
    model_ids: Sequence[str],
    *,
    huggingface_api_key: Optional[str] = None,
    inference_timeout: Optional[float] = None,
    ollama_base_url: str = "http://localhost:11434",
) -> List[LLM]:
    """One provider per candidate id, in order. `ollama:<name>` ids go to Ollama, the rest to Hugging Face."""
    llms: List[LLM] = []
    hf_client = None
    for model_id in model_ids:
        if model_id.startswith(OLLAMA_PREFIX):
            llms.append(OllamaLLM(model=model_id[len(OLLAMA_PREFIX):], base_url=ollama_base_url))
            continue
        if hf_client is None:
            hf_client = build_inference_client(huggingface_api_key, inference_timeout)
        llms.append(HuggingFaceLLM(model=model_id, client=hf_client))
    return llms


def build_store(settings: Settings) -> PlanStore:
    if settings.plan_store == "firestore":
        from infra.store.firestore_store import FirestorePlanStore, build_firestore_client

        client = build_firestore_client(settings.firebase_key_path)
        return FirestorePlanStore(client, collection=settings.firestore_collection)

    engine = create_db_engine(settings.database_url)
    create_db(engine)
    return SqlPlanStore(make_session_factory(engine))


def build_dependencies(settings: Settings) -> AppDependencies:
    if not settings.huggingface_api_key:
        logger.warning("HUGGINGFACE_API_KEY is not set; hosted models will likely fail and fallback plans will be used")
    llms = build_llms(
        settings.candidate_model_ids,
        huggingface_api_key=settings.huggingface_api_key,
        inference_timeout=settings.inference_timeout,
        ollama_base_url=settings.ollama_base_url,
    )
    store = build_store(settings)
    logger.info(
        "dependencies ready models=%s store=%s",
        [llm.model_id for llm in llms],
        type(store).__name__,
    )
    return AppDependencies(llms=llms, store=store, min_plan_chars=settings.min_plan_chars)
