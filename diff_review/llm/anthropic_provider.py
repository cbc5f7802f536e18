"""Anthropic Claude provider implementation."""

import asyncio
from typing import Optional

from anthropic import Anthropic
from anthropic import APIError as AnthropicAPIError

from diff_review.core.logging import get_logger
from diff_review.llm.base import BaseLLMProvider
from diff_review.llm.errors import APIError

logger = get_logger(__name__)

MAX_OUTPUT_TOKENS = 8192


class AnthropicProvider(BaseLLMProvider):
    """Anthropic Claude provider."""

    provider_name = "anthropic"

    def __init__(self, model: str, api_key: str):
        """
        Initialize Anthropic provider.

        Args:
            model: Model identifier (e.g., "claude-sonnet-4-20250514")
            api_key: Anthropic API key
        """
        super().__init__(model, api_key)
        self.client = Anthropic(api_key=api_key)

    async def generate(self, prompt: str) -> Optional[str]:
        """Generate a completion with the Messages API."""
        try:
            logger.info(f"Calling Claude API with model {self.model}, prompt length: {len(prompt)} chars")

            result, execution_time = await self._time_execution(self._call_claude(prompt))

            logger.info(
                f"Claude API call completed: {result.usage.input_tokens + result.usage.output_tokens} tokens, "
                f"time: {execution_time:.2f}s"
            )

            text_blocks = [block.text for block in result.content if getattr(block, "type", None) == "text"]
            return "".join(text_blocks) or None

        except AnthropicAPIError as e:
            logger.error(f"Claude API error: {e}")
            raise APIError(str(e), status_code=getattr(e, "status_code", None)) from e
        finally:
            self.client.close()

    async def _call_claude(self, prompt: str):
        """Run the blocking SDK call in the default executor."""

        def _sync_call():
            return self.client.messages.create(
                model=self.model,
                max_tokens=MAX_OUTPUT_TOKENS,
                messages=[
                    {
                        "role": "user",
                        "content": prompt,
                    }
                ],
            )

        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(None, _sync_call)
