"""OpenAI GPT provider implementation."""

import asyncio
from typing import Optional

from openai import OpenAI
from openai import APIError as OpenAIAPIError

from diff_review.core.logging import get_logger
from diff_review.llm.base import BaseLLMProvider
from diff_review.llm.errors import APIError

logger = get_logger(__name__)


class OpenAIProvider(BaseLLMProvider):
    """OpenAI GPT provider."""

    provider_name = "openai"

    def __init__(self, model: str, api_key: str):
        """
        Initialize OpenAI provider.

        Args:
            model: Model identifier (e.g., "gpt-5-mini", "gpt-5")
            api_key: OpenAI API key
        """
        super().__init__(model, api_key)
        self.client = OpenAI(api_key=api_key)

    async def generate(self, prompt: str) -> Optional[str]:
        """Generate a chat completion from a single user message."""
        try:
            logger.info(f"Calling OpenAI API with model {self.model}, prompt length: {len(prompt)} chars")

            result, execution_time = await self._time_execution(self._call_openai(prompt))

            usage = result.usage
            total_tokens = usage.total_tokens if usage else 0
            logger.info(f"OpenAI API call completed: {total_tokens} tokens, time: {execution_time:.2f}s")

            if not result.choices:
                return None
            return result.choices[0].message.content

        except OpenAIAPIError as e:
            logger.error(f"OpenAI API error: {e}")
            raise APIError(str(e), status_code=getattr(e, "status_code", None)) from e
        finally:
            self.client.close()

    async def _call_openai(self, prompt: str):
        """Run the blocking SDK call in the default executor."""

        def _sync_call():
            return self.client.chat.completions.create(
                model=self.model,
                messages=[
                    {
                        "role": "user",
                        "content": prompt,
                    },
                ],
            )

        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(None, _sync_call)
