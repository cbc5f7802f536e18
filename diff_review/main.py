"""FastAPI application entry point."""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from diff_review import __version__
from diff_review.api import review
from diff_review.core.config import settings
from diff_review.core.logging import get_logger, setup_logging
from diff_review.llm.errors import (
    EmptyInputError,
    InvalidCredentialsError,
    MissingApiKeyError,
    ReviewError,
    UnsupportedProviderError,
)

# Setup logging
setup_logging()
logger = get_logger(__name__)

ERROR_STATUS_CODES = {
    MissingApiKeyError: 400,
    EmptyInputError: 400,
    UnsupportedProviderError: 422,
    InvalidCredentialsError: 401,
}


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events."""
    logger.info(f"Starting {settings.app_title} ({settings.environment})")
    yield
    logger.info("Application shut down")


app = FastAPI(
    title=settings.app_title,
    description="Send a diff and review instructions to an LLM provider and get a code review back",
    version=__version__,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(ReviewError)
async def review_error_handler(request: Request, exc: ReviewError):
    """Render review errors as ``{"detail": ..., "error": ...}``."""
    status_code = ERROR_STATUS_CODES.get(type(exc), 502)
    return JSONResponse(
        status_code=status_code,
        content={"detail": str(exc), "error": exc.kind},
    )


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    """Render malformed payloads in the same shape as review errors.

    Submitted values are left out of the message so an API key is never echoed.
    """
    problems = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
        problems.append(f"{location}: {error.get('msg')}" if location else str(error.get("msg")))
    return JSONResponse(
        status_code=400,
        content={"detail": "Invalid request. " + "; ".join(problems), "error": "invalid_request"},
    )


@app.get("/")
async def root():
    """Root endpoint."""
    return {"message": f"{settings.app_title} API", "version": __version__}


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy"}


app.include_router(review.router, prefix="/api", tags=["review"])
