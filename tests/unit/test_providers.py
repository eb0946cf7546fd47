"""Unit tests for the Hugging Face and Ollama providers (clients mocked)."""
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from agents.core.llm import GenerationParams
from agents.study_plan_agent.fallback_chain import PLAN_PARAMS
from infra.llm.huggingface import HuggingFaceLLM
from infra.llm.ollama import OllamaLLM


@pytest.mark.unit
class TestHuggingFaceLLM:
    @pytest.mark.asyncio
    async def test_passes_model_and_sampling_params(self):
        client = MagicMock()
        client.text_generation = AsyncMock(return_value="generated plan")
        llm = HuggingFaceLLM(model="mistralai/Mistral-7B-Instruct-v0.3", client=client)

        out = await llm.generate("prompt", PLAN_PARAMS)

        assert out == "generated plan"
        client.text_generation.assert_awaited_once_with(
            "prompt",
            model="mistralai/Mistral-7B-Instruct-v0.3",
            max_new_tokens=2000,
            temperature=0.7,
            top_p=0.95,
            repetition_penalty=1.15,
            do_sample=True,
        )

    @pytest.mark.asyncio
    async def test_unset_params_are_not_sent(self):
        client = MagicMock()
        client.text_generation = AsyncMock(return_value="Hi")
        llm = HuggingFaceLLM(model="google/flan-t5-large", client=client)

        await llm.generate("Hello", GenerationParams(max_new_tokens=5))

        client.text_generation.assert_awaited_once_with(
            "Hello", model="google/flan-t5-large", max_new_tokens=5
        )

    @pytest.mark.asyncio
    async def test_errors_propagate(self):
        client = MagicMock()
        client.text_generation = AsyncMock(side_effect=RuntimeError("429 Too Many Requests"))
        llm = HuggingFaceLLM(model="bigscience/bloom-560m", client=client)

        with pytest.raises(RuntimeError):
            await llm.generate("prompt", PLAN_PARAMS)

    def test_model_id(self):
        assert HuggingFaceLLM(model="m", client=MagicMock()).model_id == "m"


@pytest.mark.unit
class TestOllamaLLM:
    @pytest.mark.asyncio
    async def test_generate_maps_params(self):
        mock_llm = MagicMock()
        mock_llm.ainvoke = AsyncMock(return_value="local plan")

        with patch("infra.llm.ollama.LangChainOllamaLLM", return_value=mock_llm) as ctor:
            llm = OllamaLLM(model="qwen:latest", base_url="http://ollama:11434")
            out = await llm.generate("prompt", PLAN_PARAMS)

        assert out == "local plan"
        ctor.assert_called_once_with(
            model="qwen:latest",
            base_url="http://ollama:11434",
            num_predict=2000,
            temperature=0.7,
            top_p=0.95,
            repeat_penalty=1.15,
        )
        mock_llm.ainvoke.assert_awaited_once_with("prompt")

    @pytest.mark.asyncio
    async def test_client_reused_per_params(self):
        mock_llm = MagicMock()
        mock_llm.ainvoke = AsyncMock(return_value="ok")

        with patch("infra.llm.ollama.LangChainOllamaLLM", return_value=mock_llm) as ctor:
            llm = OllamaLLM(model="qwen:latest")
            await llm.generate("a", PLAN_PARAMS)
            await llm.generate("b", PLAN_PARAMS)
            await llm.generate("Hello", GenerationParams(max_new_tokens=5))

        assert ctor.call_count == 2

    def test_model_id_keeps_prefix(self):
        assert OllamaLLM(model="qwen:latest").model_id == "ollama:qwen:latest"
