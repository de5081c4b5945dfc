"""Application settings loaded from environment variables and ``.env``.

All variables use the ``CURRENCY_CORE_`` prefix, e.g.
``CURRENCY_CORE_COINGECKO_API_KEY``. API keys are ``SecretStr`` so they are
masked when settings are printed or logged.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration."""

    model_config = SettingsConfigDict(
        env_prefix="CURRENCY_CORE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    app_name: str = "currency-core"
    app_env: Literal["development", "staging", "production"] = "development"
    debug: bool = False
    log_level: Literal["TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR"] = "INFO"

    data_dir: Path = Field(default=Path("data"), description="Root of the JSON cache")
    http_timeout: float = Field(default=30.0, gt=0, description="Default request timeout (s)")
    ticker_ttl_minutes: int = Field(default=5, ge=1, description="Price ticker cache lifetime")

    # Optional API credentials
    coingecko_api_key: SecretStr = SecretStr("")
    blockcypher_token: SecretStr = SecretStr("")
    tronscan_api_key: SecretStr = SecretStr("")
    subscan_api_key: SecretStr = SecretStr("")
    pinata_jwt: SecretStr = SecretStr("")
    lighthouse_api_key: SecretStr = SecretStr("")


@lru_cache
def get_settings() -> Settings:
    """Return the process-wide settings instance."""
    return Settings()
