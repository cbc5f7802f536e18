"""Pydantic schemas for request/response models."""

from typing import List

from pydantic import BaseModel, Field


class ReviewPayload(BaseModel):
    """Review request as sent by the browser."""

    diff: str = ""
    review_instructions: str = Field(default="", alias="reviewInstructions")
    provider: str = ""
    api_key: str = Field(default="", alias="apiKey", repr=False)
    use_pro_model: bool = Field(default=False, alias="useProModel")

    class Config:
        populate_by_name = True


class ReviewResponse(BaseModel):
    """Successful review response."""

    review: str


class SummaryPayload(BaseModel):
    """Summary request as sent by the browser."""

    diff: str = ""
    provider: str = ""
    api_key: str = Field(default="", alias="apiKey", repr=False)
    use_pro_model: bool = Field(default=False, alias="useProModel")

    class Config:
        populate_by_name = True


class SummaryResponse(BaseModel):
    """Successful summary response."""

    summary: str


class ErrorResponse(BaseModel):
    """Normalized failure; ``detail`` is meant to be shown verbatim."""

    detail: str
    error: str


class ProviderModels(BaseModel):
    """Model identifiers offered for a provider."""

    provider: str
    weak_model: str
    strong_model: str


class ProvidersResponse(BaseModel):
    """Supported providers."""

    default_provider: str
    providers: List[ProviderModels]


class InstructionsResponse(BaseModel):
    """Default review instructions."""

    instructions: str
