from functools import lru_cache
from typing import List

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    project_name: str = "Trip Planner Client"
    api_v1_prefix: str = "/api/v1"

    platform_api_url: str = Field(default="http://localhost:5000/api", description="Remote platform REST API")
    platform_api_timeout: float = 10.0

    max_duration_days: int = 30
    default_currency: str = "USD"

    search_debounce_ms: int = 300
    search_suggestion_limit: int = 6

    log_level: str = "INFO"

    cors_origins: List[str] = Field(default_factory=lambda: ["*"])

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


@lru_cache
def get_settings() -> Settings:
    return Settings()  # type: ignore[arg-type]


settings = get_settings()
