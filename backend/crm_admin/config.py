"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - get_settings() is cached (lru_cache) — single instance per process
    - Defaults provided for every setting: library works without a .env file

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Validation constraints (password/name lengths) are NOT settings: they are the API contract
"""

from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False, extra="ignore")

    # Observability
    log_level: str = "INFO"
    log_format: Literal["json", "text"] = "json"

    # Price formatting
    currency_symbol: str = "$"
    price_unavailable_text: str = "Price not available"


@lru_cache
def get_settings() -> Settings:
    return Settings()
