"""Application configuration."""

from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings.

    API keys are intentionally absent: every review call carries its own
    key, so nothing here can leak a credential into a later request.
    """

    # App Settings
    app_title: str = "Diff Review"
    log_level: str = "INFO"
    environment: str = "development"

    # Server
    host: str = "127.0.0.1"
    port: int = 8000

    # Browser collaborator origins
    cors_origins: List[str] = ["*"]

    # Provider preselected by the UI; requests always name their own provider
    default_provider: str = "gemini"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


settings = Settings()
