"""
Single-shot chat completions through the OpenAI API.

No streaming, no retries, no caching.
"""

import logging
from typing import Optional

import openai

from workout_mcp.errors import UpstreamError
from workout_mcp.sdk.types import COMPLETION_MAX_TOKENS, COMPLETION_TEMPERATURE
from workout_mcp.utils import with_deadline

logger = logging.getLogger(__name__)


class CompletionClient:
    """Issues one chat completion per call with fixed sampling settings."""

    def __init__(
        self,
        client,
        model: str,
        max_tokens: int = COMPLETION_MAX_TOKENS,
        temperature: float = COMPLETION_TEMPERATURE,
        timeout: Optional[float] = None,
    ):
        self._client = client
        self.model = model
        self.max_tokens = max_tokens
        self.temperature = temperature
        self._timeout = timeout

    async def complete(self, system: str, prompt: str) -> str:
        """
        Request a completion.

        Args:
            system: System message
            prompt: User message

        Returns:
            The completion text

        Raises:
            UpstreamError: On API failure, timeout, or an empty completion
        """
        try:
            completion = await with_deadline(
                self._client.chat.completions.create(
                    model=self.model,
                    messages=[
                        {"role": "system", "content": system},
                        {"role": "user", "content": prompt},
                    ],
                    max_tokens=self.max_tokens,
                    temperature=self.temperature,
                ),
                self._timeout,
                "completion request",
            )
        except openai.OpenAIError as e:
            logger.error(f"Completion request failed: {e}")
            raise UpstreamError(str(e)) from e

        if not completion.choices or not completion.choices[0].message.content:
            raise UpstreamError("Completion service returned no content")
        return completion.choices[0].message.content
