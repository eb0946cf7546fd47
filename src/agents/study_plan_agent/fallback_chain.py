"""
Ordered model fallback.

Providers are tried one at a time, in order; the first one whose cleaned output
reaches `min_chars` wins. Failures and short answers move on to the next provider.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

from agents.core.llm import LLM, GenerationParams
from api.utils.logger import configure_logging, log_request

logger = configure_logging()

MIN_PLAN_CHARS = 100

PLAN_PARAMS = GenerationParams(
    max_new_tokens=2000,
    temperature=0.7,
    top_p=0.95,
    repetition_penalty=1.15,
    do_sample=True,
)


@dataclass(frozen=True)
class FallbackResult:
    text: str
    model_id: str
    attempts: int


class ModelsExhaustedError(Exception):
    """No provider produced an acceptable response."""

    def __init__(self, attempts: int, last_error: Optional[BaseException] = None):
        self.attempts = attempts
        self.last_error = last_error
        super().__init__(f"all {attempts} candidate models failed (last error: {last_error!r})")


def strip_prompt_echo(text: str, prompt: str) -> str:
    """Drop a leading copy of the prompt (some endpoints echo it) and trim."""
    if prompt and text.startswith(prompt):
        text = text[len(prompt):]
    return text.strip()


async def generate_with_fallback(
    prompt: str,
    llms: Sequence[LLM],
    params: GenerationParams = PLAN_PARAMS,
    min_chars: int = MIN_PLAN_CHARS,
) -> FallbackResult:
    last_error: Optional[BaseException] = None

    for attempt, llm in enumerate(llms, start=1):
        try:
            with log_request(logger, f"generate model={llm.model_id}"):
                raw = await llm.generate(prompt, params)
        except Exception as e:
            last_error = e
            continue

        text = strip_prompt_echo(raw, prompt) if isinstance(raw, str) else ""
        if len(text) >= min_chars:
            return FallbackResult(text=text, model_id=llm.model_id, attempts=attempt)

        logger.info(
            "model=%s returned %d chars (< %d); trying next candidate",
            llm.model_id,
            len(text),
            min_chars,
        )

    err = ModelsExhaustedError(len(llms), last_error)
    logger.warning("%s", err)
    raise err
