"""Review dispatch: validate, resolve a model, generate, normalize errors."""

import re
import time

from diff_review.core.logging import get_logger
from diff_review.llm.errors import (
    EmptyInputError,
    InvalidCredentialsError,
    MissingApiKeyError,
    ReviewError,
    UpstreamEmptyResponseError,
    UpstreamFailureError,
)
from diff_review.llm.models import ReviewRequest, ReviewResult
from diff_review.llm.prompts import SUMMARY_INSTRUCTIONS, build_prompt
from diff_review.llm.resolver import resolve

logger = get_logger(__name__)

AUTH_STATUS_CODES = {401, 403}

# Vendor SDKs phrase key failures differently and change wording between
# releases; matching is best-effort.
AUTH_ERROR_PATTERNS = [
    re.compile(r"api[ _-]?key.*\b(invalid|not valid|incorrect)\b", re.IGNORECASE | re.DOTALL),
    re.compile(r"\b(invalid|incorrect)\b.*api[ _-]?key", re.IGNORECASE | re.DOTALL),
    re.compile(r"permission", re.IGNORECASE),
    re.compile(r"unauthori[sz]ed", re.IGNORECASE),
    re.compile(r"unauthenticated", re.IGNORECASE),
    re.compile(r"authentication", re.IGNORECASE),
    re.compile(r"\b401\b"),
]


def _is_blank(value: str | None) -> bool:
    return not value or not value.strip()


def validate_request(request: ReviewRequest) -> None:
    """
    Reject a request before any model is resolved.

    Raises:
        MissingApiKeyError: If the API key is empty
        EmptyInputError: If instructions or diff are empty
    """
    if _is_blank(request.api_key):
        raise MissingApiKeyError()
    if _is_blank(request.instructions):
        raise EmptyInputError("Review instructions")
    if _is_blank(request.diff_text):
        raise EmptyInputError("Diff content")


def is_auth_failure(error: Exception) -> bool:
    """Guess whether a vendor error means the API key was rejected."""
    if getattr(error, "status_code", None) in AUTH_STATUS_CODES:
        return True
    message = str(error)
    return any(pattern.search(message) for pattern in AUTH_ERROR_PATTERNS)


def classify_error(error: Exception, api_key: str | None = None) -> ReviewError:
    """
    Map a vendor failure onto the review error taxonomy.

    Credential failures get a fixed message. Anything else keeps the
    vendor's message, except that the API key is never echoed back.
    """
    if is_auth_failure(error):
        return InvalidCredentialsError()
    detail = str(error) or error.__class__.__name__
    if api_key and api_key in detail:
        detail = detail.replace(api_key, "***")
    return UpstreamFailureError(detail)


async def review(request: ReviewRequest) -> ReviewResult:
    """
    Run a single code review.

    Args:
        request: Diff, instructions, provider, key and model flag

    Returns:
        ReviewResult with the model's review text

    Raises:
        MissingApiKeyError: If no API key was given
        EmptyInputError: If the diff or instructions are empty
        UnsupportedProviderError: If the provider is not supported
        InvalidCredentialsError: If the vendor rejected the key
        UpstreamEmptyResponseError: If the vendor returned no text
        UpstreamFailureError: For any other vendor failure
    """
    validate_request(request)

    handle = resolve(request.provider, request.api_key, request.use_strong_model)
    prompt = build_prompt(request.instructions, request.diff_text)

    logger.info(
        f"Requesting review from {handle.provider_name} ({handle.model}), "
        f"diff length: {len(request.diff_text)} chars"
    )

    start_time = time.time()
    try:
        text = await handle.generate(prompt)
    except Exception as e:
        normalized = classify_error(e, api_key=request.api_key)
        logger.warning(f"Review failed via {handle.provider_name}: {normalized.kind}")
        raise normalized from e
    processing_time = time.time() - start_time

    if _is_blank(text):
        logger.warning(f"Empty review returned by {handle.provider_name} ({handle.model})")
        raise UpstreamEmptyResponseError()

    logger.info(f"Review completed by {handle.provider_name} in {processing_time:.2f}s")
    return ReviewResult(
        review_text=text,
        provider=handle.provider_name,
        model_used=handle.model,
        processing_time=processing_time,
    )


async def summarize(
    diff_text: str, provider: str, api_key: str, use_strong_model: bool = False
) -> ReviewResult:
    """Produce a comprehensive review summary of a diff with fixed instructions."""
    return await review(
        ReviewRequest(
            diff_text=diff_text,
            instructions=SUMMARY_INSTRUCTIONS,
            provider=provider,
            api_key=api_key,
            use_strong_model=use_strong_model,
        )
    )
