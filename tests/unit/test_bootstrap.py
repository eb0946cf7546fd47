"""Unit tests for startup wiring and settings."""
from unittest.mock import MagicMock, patch

import pytest

from api.bootstrap import build_dependencies, build_llms, build_store
from api.config import DEFAULT_CANDIDATE_MODELS, Settings
from infra.llm.huggingface import HuggingFaceLLM
from infra.llm.ollama import OllamaLLM
from infra.store.sql_store import SqlPlanStore


@pytest.mark.unit
class TestSettings:
    def test_default_candidates_in_order(self):
        settings = Settings(_env_file=None)
        assert settings.candidate_model_ids == DEFAULT_CANDIDATE_MODELS
        assert settings.candidate_model_ids[0] == "mistralai/Mistral-7B-Instruct-v0.3"
        assert settings.min_plan_chars == 100
        assert settings.port == 3001

    def test_candidates_split_on_commas(self):
        settings = Settings(_env_file=None, candidate_models=" a/b , ,ollama:qwen:latest,c/d ")
        assert settings.candidate_model_ids == ["a/b", "ollama:qwen:latest", "c/d"]


@pytest.mark.unit
class TestBuildLlms:
    def test_providers_follow_candidate_order(self):
        hf_client = MagicMock()
        with patch("api.bootstrap.build_inference_client", return_value=hf_client) as build_client:
            llms = build_llms(
                ["org/model-1", "ollama:qwen:latest", "org/model-2"],
                huggingface_api_key="hf_test",
                inference_timeout=30.0,
            )

        assert [llm.model_id for llm in llms] == ["org/model-1", "ollama:qwen:latest", "org/model-2"]
        assert isinstance(llms[0], HuggingFaceLLM)
        assert isinstance(llms[1], OllamaLLM)
        # One shared inference client for every hosted model.
        build_client.assert_called_once_with("hf_test", 30.0)

    def test_no_hosted_models_no_client(self):
        with patch("api.bootstrap.build_inference_client") as build_client:
            llms = build_llms(["ollama:llama3"])
        assert [llm.model_id for llm in llms] == ["ollama:llama3"]
        build_client.assert_not_called()


@pytest.mark.unit
class TestBuildStore:
    def test_sql_store_by_default(self):
        store = build_store(Settings(_env_file=None, database_url="sqlite:///:memory:"))
        assert isinstance(store, SqlPlanStore)

    def test_firestore_store(self):
        client = MagicMock()
        with patch("infra.store.firestore_store.build_firestore_client", return_value=client) as build_client:
            store = build_store(
                Settings(
                    _env_file=None,
                    plan_store="firestore",
                    firebase_key_path="/secrets/key.json",
                    firestore_collection="plans",
                )
            )
        build_client.assert_called_once_with("/secrets/key.json")
        assert type(store).__name__ == "FirestorePlanStore"

    def test_build_dependencies(self):
        settings = Settings(
            _env_file=None,
            candidate_models="ollama:qwen:latest",
            database_url="sqlite:///:memory:",
            min_plan_chars=42,
        )
        deps = build_dependencies(settings)
        assert [llm.model_id for llm in deps.llms] == ["ollama:qwen:latest"]
        assert isinstance(deps.store, SqlPlanStore)
        assert deps.min_plan_chars == 42
