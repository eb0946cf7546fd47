from __future__ import annotations

from typing import Dict

from langchain_ollama import OllamaLLM as LangChainOllamaLLM

from agents.core.llm import LLM, GenerationParams

OLLAMA_PREFIX = "ollama:"


class OllamaLLM(LLM):
    """
    Local Ollama model behind the LLM contract.

    Candidate ids look like `ollama:qwen:latest`; the prefix is kept in `model_id`
    so a stored plan shows which backend produced it.
    """

    def __init__(self, model: str, base_url: str = "http://localhost:11434"):
        # Avoid infinite recursion: this wrapper is `OllamaLLM`, the LangChain class is aliased.
        self._model = model
        self._base_url = base_url
        self._clients: Dict[GenerationParams, LangChainOllamaLLM] = {}

    @property
    def model_id(self) -> str:
        return f"{OLLAMA_PREFIX}{self._model}"

    def _client_for(self, params: GenerationParams) -> LangChainOllamaLLM:
        client = self._clients.get(params)
        if client is None:
            # Ollama has no do_sample switch; sampling is governed by temperature alone.
            client = LangChainOllamaLLM(
                model=self._model,
                base_url=self._base_url,
                num_predict=params.max_new_tokens,
                temperature=params.temperature,
                top_p=params.top_p,
                repeat_penalty=params.repetition_penalty,
            )
            self._clients[params] = client
        return client

    async def generate(self, prompt: str, params: GenerationParams) -> str:
        return await self._client_for(params).ainvoke(prompt)

    def __repr__(self) -> str:
        return f"OllamaLLM(model={self._model!r}, base_url={self._base_url!r})"
