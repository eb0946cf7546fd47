from __future__ import annotations

from typing import Any, Dict, Optional

from huggingface_hub import AsyncInferenceClient

from agents.core.llm import LLM, GenerationParams


def build_inference_client(api_key: Optional[str], timeout: Optional[float] = None) -> AsyncInferenceClient:
    """One client per process; every HuggingFaceLLM shares it and passes its own model id."""
    return AsyncInferenceClient(token=api_key, timeout=timeout)


class HuggingFaceLLM(LLM):
    """Hosted Hugging Face text-generation endpoint for a single model."""

    def __init__(self, model: str, client: AsyncInferenceClient):
        self._model = model
        self._client = client

    @property
    def model_id(self) -> str:
        return self._model

    async def generate(self, prompt: str, params: GenerationParams) -> str:
        kwargs: Dict[str, Any] = {"max_new_tokens": params.max_new_tokens}
        if params.temperature is not None:
            kwargs["temperature"] = params.temperature
        if params.top_p is not None:
            kwargs["top_p"] = params.top_p
        if params.repetition_penalty is not None:
            kwargs["repetition_penalty"] = params.repetition_penalty
        if params.do_sample is not None:
            kwargs["do_sample"] = params.do_sample

        return await self._client.text_generation(prompt, model=self._model, **kwargs)

    def __repr__(self) -> str:
        return f"HuggingFaceLLM(model={self._model!r})"
