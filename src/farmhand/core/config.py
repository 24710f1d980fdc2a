from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

# .env file is in the project root (parent of src/)
# Only use if it exists (CI uses environment variables directly)
# Path: core/config.py -> farmhand -> src -> project root -> .env
_ENV_FILE = Path(__file__).parent.parent.parent.parent / ".env"
_ENV_FILE = _ENV_FILE if _ENV_FILE.exists() else None


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=_ENV_FILE,
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Apper record storage backend
    # Both credentials must be set, otherwise the record client is unavailable
    apper_project_id: str | None = None
    apper_public_key: str | None = None
    apper_api_url: str = "https://api.apper.io/v1"

    # Per-request timeout for record client calls (seconds)
    request_timeout: float = 30.0

    # How long a fetched weather forecast is served from memory (minutes)
    forecast_cache_minutes: float = 30.0


settings = Settings()
