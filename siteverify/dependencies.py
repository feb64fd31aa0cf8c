"""
Providers that wire settings into ready-to-use verifiers.
"""

from __future__ import annotations

from typing import Optional

from siteverify.config import CaptchaSettings
from siteverify.errors import ConfigurationError
from siteverify.infrastructure.captcha.protocol import HttpTransport
from siteverify.infrastructure.captcha.recaptcha import (
    RecaptchaVerifier,
    new_verifier,
    with_allowed_actions,
    with_allowed_hosts,
    with_endpoint,
    with_required_threshold,
    with_secret,
    with_timeout,
    with_transport,
)


def verifier_from_settings(
    settings: Optional[CaptchaSettings] = None,
    transport: Optional[HttpTransport] = None,
) -> RecaptchaVerifier:
    """Build a RecaptchaVerifier from CaptchaSettings.

    The secret is read from ``settings`` on every lookup rather than copied
    at construction. Pass ``transport`` to share an HTTP client between
    verifiers; otherwise the verifier creates and owns its own.
    """
    if settings is None:
        settings = CaptchaSettings()

    if settings.require_secret and not settings.recaptcha_secret:
        raise ConfigurationError(
            "RECAPTCHA_SECRET is required", details={"setting": "recaptcha_secret"}
        )

    options = [
        with_secret(lambda: settings.recaptcha_secret),
        with_endpoint(settings.recaptcha_endpoint),
        with_required_threshold(settings.recaptcha_threshold),
        with_allowed_hosts(*settings.recaptcha_allowed_hosts),
        with_allowed_actions(*settings.recaptcha_allowed_actions),
        with_timeout(settings.http_timeout_seconds),
    ]
    if transport is not None:
        options.append(with_transport(transport))

    return new_verifier(*options)
