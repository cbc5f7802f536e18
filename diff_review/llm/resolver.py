"""Model resolution: provider and strength flag to a model handle."""

from typing import Dict, Type

from diff_review.core.logging import get_logger
from diff_review.llm.anthropic_provider import AnthropicProvider
from diff_review.llm.base import BaseLLMProvider
from diff_review.llm.errors import UnsupportedProviderError
from diff_review.llm.gemini_provider import GeminiProvider
from diff_review.llm.models import ModelSelection, ModelStrength, Provider
from diff_review.llm.openai_provider import OpenAIProvider
from diff_review.llm.zhipu_provider import ZhipuProvider

logger = get_logger(__name__)

# Single place to update when vendors release new models.
MODEL_IDS: Dict[Provider, Dict[ModelStrength, str]] = {
    Provider.GEMINI: {
        ModelStrength.WEAK: "gemini-2.5-flash",
        ModelStrength.STRONG: "gemini-2.5-pro",
    },
    Provider.OPENAI: {
        ModelStrength.WEAK: "gpt-5-mini",
        ModelStrength.STRONG: "gpt-5",
    },
    Provider.ANTHROPIC: {
        ModelStrength.WEAK: "claude-sonnet-4-20250514",
        ModelStrength.STRONG: "claude-opus-4-1-20250805",
    },
    Provider.ZHIPU: {
        ModelStrength.WEAK: "glm-4.5-air",
        ModelStrength.STRONG: "glm-4.6",
    },
}

PROVIDER_CLASSES: Dict[Provider, Type[BaseLLMProvider]] = {
    Provider.GEMINI: GeminiProvider,
    Provider.OPENAI: OpenAIProvider,
    Provider.ANTHROPIC: AnthropicProvider,
    Provider.ZHIPU: ZhipuProvider,
}


def parse_provider(provider: str | Provider) -> Provider:
    """
    Normalize a provider tag.

    Raises:
        UnsupportedProviderError: If the tag is not a supported vendor
    """
    if isinstance(provider, Provider):
        return provider
    try:
        return Provider(str(provider).strip().lower())
    except ValueError as e:
        raise UnsupportedProviderError(str(provider)) from e


def select_model(provider: str | Provider, use_strong_model: bool = False) -> ModelSelection:
    """Pick the model id for a provider and strength flag."""
    resolved = parse_provider(provider)
    strength = ModelStrength.STRONG if use_strong_model else ModelStrength.WEAK
    return ModelSelection(
        provider=resolved,
        model_id=MODEL_IDS[resolved][strength],
        strength=strength,
    )


def get_model_label(provider: str | Provider, use_strong_model: bool = False) -> str:
    """Model identifier for a provider and strength flag."""
    return select_model(provider, use_strong_model).model_id


def resolve(provider: str | Provider, api_key: str, use_strong_model: bool = False) -> BaseLLMProvider:
    """
    Build a model handle for a provider.

    The handle is bound to the given API key. No network call is made here.

    Args:
        provider: Vendor tag
        api_key: Caller-supplied API key
        use_strong_model: Use the stronger model instead of the default

    Returns:
        Provider instance exposing ``generate``

    Raises:
        UnsupportedProviderError: If the provider is not supported
    """
    selection = select_model(provider, use_strong_model)
    provider_class = PROVIDER_CLASSES[selection.provider]

    logger.debug(f"Resolved provider {selection.provider.value} to model {selection.model_id}")
    return provider_class(model=selection.model_id, api_key=api_key)
