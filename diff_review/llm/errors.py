"""Custom exceptions for review dispatch and LLM providers."""


INVALID_CREDENTIALS_MESSAGE = (
    "The provider rejected the API key. Check that the key is correct, "
    "active, and belongs to the selected provider."
)


class ReviewError(Exception):
    """Base exception for review errors.

    ``kind`` is a stable tag the HTTP layer reports alongside the message.
    """

    kind = "review_error"


class MissingApiKeyError(ReviewError):
    """Raised when no API key was supplied."""

    kind = "missing_api_key"

    def __init__(self, message: str = "An API key is required to request a review."):
        super().__init__(message)


class EmptyInputError(ReviewError):
    """Raised when the diff or the review instructions are empty."""

    kind = "empty_input"

    def __init__(self, field: str):
        super().__init__(f"{field} cannot be empty.")
        self.field = field


class UnsupportedProviderError(ReviewError):
    """Raised when a provider tag is not one of the supported vendors."""

    kind = "unsupported_provider"

    def __init__(self, provider: str):
        super().__init__(f"Unsupported provider: {provider}")
        self.provider = provider


class InvalidCredentialsError(ReviewError):
    """Raised when the vendor refused the supplied API key."""

    kind = "invalid_credentials"

    def __init__(self, message: str = INVALID_CREDENTIALS_MESSAGE):
        super().__init__(message)


class UpstreamEmptyResponseError(ReviewError):
    """Raised when the vendor returned no text."""

    kind = "upstream_empty_response"

    def __init__(self, message: str = "The model returned an empty review."):
        super().__init__(message)


class UpstreamFailureError(ReviewError):
    """Raised for any other vendor failure; carries the vendor message as-is."""

    kind = "upstream_failure"

    def __init__(self, detail: str):
        super().__init__(detail)
        self.detail = detail


class LLMProviderError(Exception):
    """Base exception for LLM provider errors."""

    pass


class APIError(LLMProviderError):
    """Raised by a provider when its vendor API call fails."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code
