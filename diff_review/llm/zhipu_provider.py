"""Zhipu GLM provider implementation."""

from typing import Optional

import httpx

from diff_review.core.logging import get_logger
from diff_review.llm.base import BaseLLMProvider
from diff_review.llm.errors import APIError

logger = get_logger(__name__)

ZHIPU_API_BASE = "https://open.bigmodel.cn/api/paas/v4/chat/completions"
ZHIPU_TIMEOUT = 60.0


class ZhipuProvider(BaseLLMProvider):
    """Zhipu GLM provider over the plain HTTP chat-completions API."""

    provider_name = "zhipu"

    def __init__(self, model: str, api_key: str):
        """
        Initialize Zhipu provider.

        Args:
            model: Model identifier (e.g., "glm-4.6")
            api_key: Zhipu API key
        """
        super().__init__(model, api_key)
        self.headers = {
            "Authorization": f"Bearer {api_key}",
            "Content-Type": "application/json",
        }

    async def generate(self, prompt: str) -> Optional[str]:
        """Generate a chat completion from a single user message."""
        try:
            logger.info(f"Calling Zhipu API with model {self.model}, prompt length: {len(prompt)} chars")

            result, execution_time = await self._time_execution(self._call_zhipu(prompt))

            usage = result.get("usage") or {}
            logger.info(
                f"Zhipu API call completed: {usage.get('total_tokens', 0)} tokens, "
                f"time: {execution_time:.2f}s"
            )

            choices = result.get("choices") or []
            if not choices:
                return None
            return (choices[0].get("message") or {}).get("content")

        except httpx.HTTPStatusError as e:
            logger.error(f"Zhipu API HTTP error: {e.response.status_code}")
            raise APIError(_error_message(e.response), status_code=e.response.status_code) from e
        except httpx.RequestError as e:
            logger.error(f"Zhipu API request error: {e}")
            raise APIError(f"Zhipu request error: {e}") from e

    async def _call_zhipu(self, prompt: str) -> dict:
        """POST the prompt to the chat-completions endpoint."""
        payload = {
            "model": self.model,
            "messages": [
                {
                    "role": "user",
                    "content": prompt,
                },
            ],
        }

        async with httpx.AsyncClient(timeout=ZHIPU_TIMEOUT) as client:
            response = await client.post(
                ZHIPU_API_BASE,
                headers=self.headers,
                json=payload,
            )
            response.raise_for_status()
            return response.json()


def _error_message(response: httpx.Response) -> str:
    """Pull the vendor's error message out of an error response body."""
    try:
        body = response.json()
    except ValueError:
        return response.text or f"HTTP {response.status_code}"
    error = body.get("error") if isinstance(body, dict) else None
    if isinstance(error, dict) and error.get("message"):
        return error["message"]
    return response.text
