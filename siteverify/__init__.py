"""Verify CAPTCHA tokens against a siteverify endpoint and apply local policy."""

from siteverify.errors import AppError, ConfigurationError, LookupFailureError
from siteverify.infrastructure.captcha.recaptcha import (
    RecaptchaVerifier,
    VerifierConfig,
    new_verifier,
    with_allowed_actions,
    with_allowed_hosts,
    with_endpoint,
    with_http_client,
    with_required_threshold,
    with_secret,
    with_timeout,
    with_transport,
)
from siteverify.infrastructure.captcha.secrets import env_secret, static_secret
from siteverify.schemas.models.lookup import LookupResult

__all__ = [
    "AppError",
    "ConfigurationError",
    "LookupFailureError",
    "LookupResult",
    "RecaptchaVerifier",
    "VerifierConfig",
    "env_secret",
    "new_verifier",
    "static_secret",
    "with_allowed_actions",
    "with_allowed_hosts",
    "with_endpoint",
    "with_http_client",
    "with_required_threshold",
    "with_secret",
    "with_timeout",
    "with_transport",
]
