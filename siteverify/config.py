"""
Configuration via pydantic-settings.

All settings are loaded from environment variables (and .env file).
List-valued settings take JSON, e.g.
RECAPTCHA_ALLOWED_HOSTS='["example.com", "www.example.com"]'.
"""

from __future__ import annotations

from typing import Optional

from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from siteverify.infrastructure.captcha.recaptcha import (
    DEFAULT_ENDPOINT,
    DEFAULT_THRESHOLD,
    DEFAULT_TIMEOUT,
)


class CaptchaSettings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    recaptcha_secret: str = ""
    recaptcha_endpoint: str = DEFAULT_ENDPOINT
    # Expected in [0, 1]; not enforced.
    recaptcha_threshold: float = DEFAULT_THRESHOLD
    recaptcha_allowed_hosts: list[str] = []
    recaptcha_allowed_actions: list[str] = []

    http_timeout_seconds: float = DEFAULT_TIMEOUT

    # Refuse to build a verifier without a secret instead of letting every
    # lookup fail at the service with "missing-input-secret".
    require_secret: bool = False


class LoggingSettings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    env: str = "development"
    log_level: str = "INFO"
    log_format: str = "console"  # "json" in production


class AppSettings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    captcha: Optional[CaptchaSettings] = None
    logging: Optional[LoggingSettings] = None

    @model_validator(mode="after")
    def _populate_sub_configs(self) -> "AppSettings":
        # Populate sub-configs from the same env/dotenv source
        if self.captcha is None:
            self.captcha = CaptchaSettings()
        if self.logging is None:
            self.logging = LoggingSettings()
        return self
