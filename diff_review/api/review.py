"""Review endpoints called by the browser UI."""

from fastapi import APIRouter

from diff_review import review as dispatcher
from diff_review.core.config import settings
from diff_review.core.logging import get_logger
from diff_review.llm.models import Provider, ReviewRequest
from diff_review.llm.prompts import DEFAULT_REVIEW_INSTRUCTIONS
from diff_review.llm.resolver import get_model_label
from diff_review.models.schemas import (
    ErrorResponse,
    InstructionsResponse,
    ProviderModels,
    ProvidersResponse,
    ReviewPayload,
    ReviewResponse,
    SummaryPayload,
    SummaryResponse,
)

logger = get_logger(__name__)
router = APIRouter()

ERROR_RESPONSES = {
    400: {"model": ErrorResponse, "description": "Missing API key or empty input"},
    401: {"model": ErrorResponse, "description": "API key rejected by the provider"},
    422: {"model": ErrorResponse, "description": "Unsupported provider"},
    502: {"model": ErrorResponse, "description": "Provider failed or returned nothing"},
}


@router.post("/review", response_model=ReviewResponse, responses=ERROR_RESPONSES)
async def create_review(payload: ReviewPayload):
    """Review a diff with the caller's instructions."""
    result = await dispatcher.review(
        ReviewRequest(
            diff_text=payload.diff,
            instructions=payload.review_instructions,
            provider=payload.provider,
            api_key=payload.api_key,
            use_strong_model=payload.use_pro_model,
        )
    )
    return ReviewResponse(review=result.review_text)


@router.post("/review/summary", response_model=SummaryResponse, responses=ERROR_RESPONSES)
async def create_summary(payload: SummaryPayload):
    """Summarize a diff as a full review, including style and nitpicks."""
    result = await dispatcher.summarize(
        diff_text=payload.diff,
        provider=payload.provider,
        api_key=payload.api_key,
        use_strong_model=payload.use_pro_model,
    )
    return SummaryResponse(summary=result.review_text)


@router.get("/review/default-instructions", response_model=InstructionsResponse)
async def default_instructions():
    """Instructions the UI offers before the user customizes them."""
    return InstructionsResponse(instructions=DEFAULT_REVIEW_INSTRUCTIONS)


@router.get("/providers", response_model=ProvidersResponse)
async def list_providers():
    """Supported providers and the model used for each strength."""
    return ProvidersResponse(
        default_provider=settings.default_provider,
        providers=[
            ProviderModels(
                provider=provider.value,
                weak_model=get_model_label(provider, use_strong_model=False),
                strong_model=get_model_label(provider, use_strong_model=True),
            )
            for provider in Provider
        ],
    )
