from pathlib import Path
from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict


def choose_env_file() -> str:
    return ".env.local" if Path(".env.local").exists() else ".env"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=choose_env_file(),
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",  # tolerate unrelated env vars
    )

    APP_TITLE: str = "Rei Algo API"
    ENVIRONMENT: str = "development"

    # Logging
    LOG_LEVEL: str = "INFO"

    # Routing
    API_PREFIX: str = "/api"

    # CORS, set as a JSON list: CORS_ALLOWED_ORIGINS='["http://localhost:3000"]'
    CORS_ALLOWED_ORIGINS: List[str] = ["http://localhost:3000"]

    @property
    def docs_enabled(self) -> bool:
        return self.ENVIRONMENT != "production"


# Global settings instance (evaluated at import, but reads env on construction)
settings = Settings()
