"""
Application configuration via pydantic-settings.

All settings are loaded from environment variables (and .env file).

HumanCode credentials live under the HUMANCODE_ prefix so they cannot clash
with unrelated variables on the host (APP_ID is a common name).
"""

from __future__ import annotations

from typing import Optional

from pydantic import field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class HumanCodeSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env", env_prefix="HUMANCODE_", extra="ignore"
    )

    app_id: str
    app_key: str
    debug: bool = False
    base_url: str = "https://humancodeai.com"
    timeout_seconds: float = 10.0

    # Where the hosted page sends the user after registration/verification
    callback_url: str = "http://localhost:8000/verify"

    # Used by GET /verificationUrl when the caller does not pass human_id
    placeholder_human_id: str = "123456"

    @field_validator("base_url")
    @classmethod
    def _strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")

    @property
    def is_configured(self) -> bool:
        return bool(self.app_id and self.app_key)


class LoggingSettings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    log_level: str = "INFO"
    log_format: str = "console"  # "json" in production


class AppSettings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # Core
    env: str = "development"
    app_name: str = "humancode-gateway"

    # CORS — all origins, credentials allowed
    cors_origins: list[str] = ["*"]

    # OpenAPI docs URL (None disables the docs UI); ignored in production
    docs_url: Optional[str] = "/docs"

    # Sub-configs (composed via model_validator below)
    humancode: Optional[HumanCodeSettings] = None
    logging: Optional[LoggingSettings] = None

    @model_validator(mode="after")
    def _populate_sub_configs(self) -> "AppSettings":
        # Populate sub-configs from the same env/dotenv source
        if self.humancode is None:
            self.humancode = HumanCodeSettings()
        if self.logging is None:
            self.logging = LoggingSettings()

        return self

    @property
    def is_production(self) -> bool:
        return self.env == "production"
