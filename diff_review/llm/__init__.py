"""LLM provider abstraction for code review."""

from diff_review.llm.base import BaseLLMProvider
from diff_review.llm.errors import (
    APIError,
    EmptyInputError,
    InvalidCredentialsError,
    LLMProviderError,
    MissingApiKeyError,
    ReviewError,
    UnsupportedProviderError,
    UpstreamEmptyResponseError,
    UpstreamFailureError,
)
from diff_review.llm.models import ModelSelection, ModelStrength, Provider, ReviewRequest, ReviewResult
from diff_review.llm.resolver import MODEL_IDS, get_model_label, resolve, select_model

__all__ = [
    "APIError",
    "BaseLLMProvider",
    "EmptyInputError",
    "InvalidCredentialsError",
    "LLMProviderError",
    "MODEL_IDS",
    "MissingApiKeyError",
    "ModelSelection",
    "ModelStrength",
    "Provider",
    "ReviewError",
    "ReviewRequest",
    "ReviewResult",
    "UnsupportedProviderError",
    "UpstreamEmptyResponseError",
    "UpstreamFailureError",
    "get_model_label",
    "resolve",
    "select_model",
]
