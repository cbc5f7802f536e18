"""Base abstract class for LLM providers."""

import time
from abc import ABC, abstractmethod
from typing import Optional

from diff_review.core.logging import get_logger

logger = get_logger(__name__)


class BaseLLMProvider(ABC):
    """A model handle bound to one vendor, one model and one API key.

    Constructing a provider configures a client only; no request is made
    until ``generate`` is awaited. A handle serves one call: vendor clients
    are closed when ``generate`` returns.
    """

    provider_name = "base"

    def __init__(self, model: str, api_key: str):
        """
        Initialize LLM provider.

        Args:
            model: Model identifier (e.g., "gemini-2.5-flash")
            api_key: API key for the provider
        """
        self.model = model
        self._api_key = api_key

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(model={self.model!r})"

    @abstractmethod
    async def generate(self, prompt: str) -> Optional[str]:
        """
        Generate text for a prompt in a single request.

        The prompt is sent as the entire context: one user turn, no system
        message and no history.

        Args:
            prompt: Full prompt text

        Returns:
            The generated text, or None if the vendor returned none

        Raises:
            APIError: If the vendor call fails
        """
        pass

    async def _time_execution(self, coro):
        """
        Execute a coroutine and measure execution time.

        Args:
            coro: Coroutine to execute

        Returns:
            Tuple of (result, execution_time_in_seconds)
        """
        start_time = time.time()
        result = await coro
        execution_time = time.time() - start_time
        return result, execution_time
