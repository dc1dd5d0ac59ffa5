"""
techsolutions_api.settings

Central configuration model (Pydantic Settings).

Responsibilities:
- Provide strongly-typed, env-driven settings for all layers.
- Hide secrets from repr/logging (e.g., JWT secret).
- Refuse to run production with the development signing secret.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEV_JWT_SECRET = "dev-secret-change-me-before-deploying-anywhere"


class Settings(BaseSettings):
    """
    Built once at process start and handed to `create_app`; nothing below the
    composition root reads the environment directly.
    """

    model_config = SettingsConfigDict(env_prefix="TSA_", case_sensitive=False, frozen=True)

    # Environment controls toggle behavior like auto-init DB tables.
    env: Literal["dev", "test", "prod"] = "dev"
    service_name: str = "techsolutions-api"
    log_level: str = "INFO"

    api_host: str = "0.0.0.0"
    api_port: int = 8080

    # Auth
    jwt_issuer: str = "TechSolutionsAPI"
    jwt_audience: str = "TechSolutionsClient"
    jwt_secret: str = Field(default=DEV_JWT_SECRET, min_length=32, repr=False)
    jwt_expiration_minutes: int = Field(default=60, ge=1)

    # Persistence
    database_url: str = "sqlite+aiosqlite:///./techsolutions.db"

    @model_validator(mode="after")
    def _reject_dev_secret_in_prod(self) -> Settings:
        if self.env == "prod" and self.jwt_secret == DEV_JWT_SECRET:
            raise ValueError("TSA_JWT_SECRET must be set in prod")
        return self

    @property
    def expose_error_details(self) -> bool:
        return self.env != "prod"


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    # Only entrypoints call this; request handlers read app.state.settings.
    return Settings()


# --- Module Notes -----------------------------------------------------------
# Signing config (secret/issuer/audience/ttl) is turned into an immutable
# `JwtConfig` once in `api.app.create_app`.
