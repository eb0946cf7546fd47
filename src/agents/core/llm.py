from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class GenerationParams:
    """
    Sampling settings for one text-generation call.
    Unset fields are left to the provider's defaults.
    """

    max_new_tokens: int = 2000
    temperature: Optional[float] = None
    top_p: Optional[float] = None
    repetition_penalty: Optional[float] = None
    do_sample: Optional[bool] = None


class LLM(ABC):
    """
    Defines the contract for all text-generation providers.
    """

    @property
    @abstractmethod
    def model_id(self) -> str:
        """Identifier reported as `modelUsed` when this provider wins."""
        raise NotImplementedError

    @abstractmethod
    async def generate(self, prompt: str, params: GenerationParams) -> str:
        raise NotImplementedError
