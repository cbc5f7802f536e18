"""Google Gemini provider implementation."""

from typing import Optional

from google import genai
from google.genai import errors as genai_errors

from diff_review.core.logging import get_logger
from diff_review.llm.base import BaseLLMProvider
from diff_review.llm.errors import APIError

logger = get_logger(__name__)


class GeminiProvider(BaseLLMProvider):
    """Google Gemini provider using the google-genai SDK."""

    provider_name = "gemini"

    def __init__(self, model: str, api_key: str):
        """
        Initialize Gemini provider.

        Args:
            model: Model identifier (e.g., "gemini-2.5-flash")
            api_key: Google AI Studio API key
        """
        super().__init__(model, api_key)
        self.client = genai.Client(api_key=api_key)

    async def generate(self, prompt: str) -> Optional[str]:
        """Generate content from a single prompt with the async client."""
        try:
            logger.info(f"Calling Gemini API with model {self.model}, prompt length: {len(prompt)} chars")

            result, execution_time = await self._time_execution(
                self.client.aio.models.generate_content(model=self.model, contents=prompt)
            )

            usage = result.usage_metadata
            total_tokens = (usage.total_token_count or 0) if usage else 0
            logger.info(f"Gemini API call completed: {total_tokens} tokens, time: {execution_time:.2f}s")

            return result.text

        except genai_errors.APIError as e:
            logger.error(f"Gemini API error: {e}")
            raise APIError(str(e), status_code=e.code) from e
        finally:
            await self.client.aio.aclose()
