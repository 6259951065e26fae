from pydantic_settings import BaseSettings
from functools import lru_cache
from pathlib import Path

_BACKEND_DIR = Path(__file__).resolve().parents[1]
_ENV_FILES = (
    _BACKEND_DIR / ".env",
    ".env",
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    app_title: str = "Asset Tracker API"
    app_version: str = "0.1.0"
    app_env: str = "development"
    database_url: str = "sqlite:///./asset_tracker.db"
    cors_origins: list[str] = ["http://localhost:3000"]

    # OpenRouter configuration (status suggestions)
    openrouter_api_key: str = ""
    openrouter_base_url: str = "https://openrouter.ai/api/v1"
    openrouter_app_name: str = "Asset Tracker"
    status_suggestion_model: str = "google/gemini-2.0-flash-001"

    # Transactions: conflict retries for allocations and status changes
    transaction_max_retries: int = 2
    transaction_retry_backoff_seconds: float = 0.05

    # Allocation
    max_allocation_batch: int = 500

    # Logging — per-category log levels (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    log_level: str = "INFO"                  # Root / app-wide
    log_level_sql: str = "WARNING"           # sqlalchemy.engine — SQL queries
    log_level_http: str = "WARNING"          # httpx / httpcore — outbound HTTP
    log_level_uvicorn: str = "INFO"          # uvicorn.access / uvicorn.error
    log_level_openrouter: str = "INFO"       # OpenRouter LLM client

    model_config = {
        "env_file": _ENV_FILES,
        "env_file_encoding": "utf-8",
    }


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance — reads .env once."""
    return Settings()
