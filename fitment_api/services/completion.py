"""Chat completion client used to delegate fitment reasoning to an LLM.

The service depends on the ``CompletionClient`` protocol so tests can inject a
deterministic stub; ``OpenAICompletionClient`` is the production client.
"""

import time
from typing import Protocol

from openai import AsyncOpenAI, OpenAIError

from ..core.errors import CompletionError
from ..core.logging import log_external_call


class CompletionClient(Protocol):
    """Send chat messages, receive the reply text or raise ``CompletionError``."""

    async def complete(
        self,
        messages: list[dict[str, str]],
        *,
        model: str,
        temperature: float,
        max_tokens: int,
    ) -> str: ...


class OpenAICompletionClient:
    """Single-attempt OpenAI chat completions, no streaming."""

    def __init__(self, api_key: str, client: AsyncOpenAI | None = None) -> None:
        # max_retries=0: one call per request
        self._client = client or AsyncOpenAI(api_key=api_key, max_retries=0)

    async def complete(
        self,
        messages: list[dict[str, str]],
        *,
        model: str,
        temperature: float,
        max_tokens: int,
    ) -> str:
        start = time.time()
        try:
            response = await self._client.chat.completions.create(
                model=model,
                messages=messages,  # type: ignore[arg-type]
                temperature=temperature,
                max_tokens=max_tokens,
            )
        except OpenAIError as e:
            duration_ms = (time.time() - start) * 1000
            log_external_call("openai", "chat.completions", False, duration_ms)
            raise CompletionError(str(e)) from e

        duration_ms = (time.time() - start) * 1000
        log_external_call("openai", "chat.completions", True, duration_ms)

        if not response.choices:
            raise CompletionError("Completion returned no choices")
        content = response.choices[0].message.content
        if content is None:
            raise CompletionError("Completion returned no content")
        return content

    async def close(self) -> None:
        await self._client.close()
