"""Configuration management for docrag."""

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def _sanitize_secret(value: str) -> str:
    """Remove BOM characters and whitespace from secrets.

    Secrets pasted into .env files or injected by a platform may carry a BOM
    that breaks HTTP headers.
    """
    if not value:
        return value
    return value.lstrip("\ufeff").strip()


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Google AI API (embeddings and answer generation)
    google_api_key: str = ""

    @field_validator("google_api_key", mode="after")
    @classmethod
    def sanitize_secrets(cls, value: str) -> str:
        """Remove BOM and whitespace from secret values."""
        return _sanitize_secret(value)

    # Model settings
    embedding_model: str = "gemini-embedding-001"
    embedding_dimension: int = 1536
    llm_model: str = "gemini-2.0-flash"
    llm_temperature: float = 0.7
    llm_max_tokens: int = 1000
    llm_requests_per_minute: int | None = 15
    embedding_requests_per_minute: int | None = 60

    # RAG settings
    top_k_results: int = 5
    max_context_tokens: int = 2000
    similarity_threshold: float = 0.1
    preprocess_queries: bool = True
    expand_queries: bool = False

    # Ingestion
    scrape_timeout: int = 30

    # Logging and diagnostics
    log_level: str = "INFO"
    log_json: bool = False
    # Include stack traces in API and CLI error output
    debug: bool = False

    # HTTP API
    cors_origins: list[str] = ["http://localhost:3000", "http://localhost:5173"]

    @property
    def remote_enabled(self) -> bool:
        """Whether remote providers are configured."""
        return bool(self.google_api_key)


# Global settings instance
settings = Settings()
