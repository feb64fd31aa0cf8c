"""
Unit test configuration.

Patches dotenv so pydantic-settings never reads the project's real .env file
during unit tests, and clears siteverify's own variables from the process
environment. Tests control config exclusively through monkeypatch.setenv().
"""

import pytest

_SETTINGS_ENV_VARS = (
    "RECAPTCHA_SECRET",
    "RECAPTCHA_ENDPOINT",
    "RECAPTCHA_THRESHOLD",
    "RECAPTCHA_ALLOWED_HOSTS",
    "RECAPTCHA_ALLOWED_ACTIONS",
    "HTTP_TIMEOUT_SECONDS",
    "REQUIRE_SECRET",
    "ENV",
    "LOG_LEVEL",
    "LOG_FORMAT",
)


@pytest.fixture(autouse=True)
def disable_dotenv_loading(monkeypatch):
    """Prevent pydantic-settings from loading .env files in all unit tests."""
    import pydantic_settings.sources.providers.dotenv as ps_dotenv

    monkeypatch.setattr(ps_dotenv, "dotenv_values", lambda *a, **kw: {})
    for var in _SETTINGS_ENV_VARS:
        monkeypatch.delenv(var, raising=False)
