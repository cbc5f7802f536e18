"""Data models for review dispatch."""

from enum import Enum

from pydantic import BaseModel, Field


class Provider(str, Enum):
    """Supported LLM vendors."""

    GEMINI = "gemini"
    OPENAI = "openai"
    ANTHROPIC = "anthropic"
    ZHIPU = "zhipu"


class ModelStrength(str, Enum):
    """Model tier: a fast default or an opt-in stronger model."""

    WEAK = "weak"
    STRONG = "strong"


class ModelSelection(BaseModel):
    """Concrete model chosen for a provider and strength flag."""

    provider: Provider
    model_id: str
    strength: ModelStrength


class ReviewRequest(BaseModel):
    """A single review call.

    Fields are validated by the dispatcher rather than here, so that empty
    values and unknown providers surface as review errors instead of
    validation errors.
    """

    diff_text: str = Field(..., description="Unified diff to review")
    instructions: str = Field(..., description="Review instructions placed before the diff")
    provider: str = Field(..., description="Vendor tag: gemini, openai, anthropic, zhipu")
    api_key: str = Field(..., repr=False, description="Caller-supplied vendor API key")
    use_strong_model: bool = Field(default=False, description="Use the provider's stronger model")


class ReviewResult(BaseModel):
    """Successful review output."""

    review_text: str = Field(..., description="Review text as returned by the model")
    provider: str = Field(default="", description="Provider that produced the review")
    model_used: str = Field(default="", description="Model identifier used")
    processing_time: float = Field(default=0.0, description="Generation time in seconds")

    class Config:
        json_schema_extra = {
            "example": {
                "review_text": "### File: src/utils.py\n\nConsider closing the connection.\n\n---",
                "provider": "gemini",
                "model_used": "gemini-2.5-flash",
                "processing_time": 4.2,
            }
        }
