"""siteverify client: verify captcha tokens and apply local policy.

Speaks the form-POST / JSON protocol shared by Google reCAPTCHA, hCaptcha
and Cloudflare Turnstile; only the endpoint differs between them.

Configuration is an immutable VerifierConfig built from defaults plus a
sequence of options applied in order, so later options win:

    verifier = new_verifier(
        with_secret(env_secret("RECAPTCHA_SECRET")),
        with_required_threshold(0.5),
        with_allowed_actions("login"),
    )
    accepted = await verifier.verify(token, client_ip)

verify() returns False when the token fails policy and raises
LookupFailureError when the service cannot be consulted. Callers must keep
those two cases apart.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from typing import Any, Callable, Optional

import httpx
from pydantic import ValidationError

from siteverify.errors import LookupFailureError
from siteverify.infrastructure.captcha.protocol import HttpTransport, SecretProvider
from siteverify.infrastructure.http_client import HttpClient
from siteverify.schemas.models.lookup import LookupResult
from siteverify.shared.logging import get_logger, hash_ip

log = get_logger(__name__)

DEFAULT_ENDPOINT = "https://www.google.com/recaptcha/api/siteverify"
DEFAULT_THRESHOLD = 0.3
DEFAULT_TIMEOUT = 5.0

_CONTENT_TYPE_HEADER = "Content-Type"
_FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"


def _empty_secret() -> str:
    return ""


@dataclass(frozen=True)
class VerifierConfig:
    secret: SecretProvider = _empty_secret
    # None means "build a private HttpClient"; the verifier then owns and closes it.
    transport: Optional[HttpTransport] = None
    endpoint: str = DEFAULT_ENDPOINT
    threshold: float = DEFAULT_THRESHOLD
    allowed_hosts: frozenset[str] = field(default_factory=frozenset)
    allowed_actions: frozenset[str] = field(default_factory=frozenset)
    timeout: float = DEFAULT_TIMEOUT


VerifierOption = Callable[[VerifierConfig], VerifierConfig]


def with_secret(callback: SecretProvider) -> VerifierOption:
    return lambda config: dataclasses.replace(config, secret=callback)


def with_transport(transport: HttpTransport) -> VerifierOption:
    return lambda config: dataclasses.replace(config, transport=transport)


with_http_client = with_transport


def with_endpoint(url: str) -> VerifierOption:
    return lambda config: dataclasses.replace(config, endpoint=url)


def with_required_threshold(value: float) -> VerifierOption:
    return lambda config: dataclasses.replace(config, threshold=value)


def with_allowed_hosts(*hosts: str) -> VerifierOption:
    """Restrict accepted hostnames. Calling with no hosts lifts the restriction."""
    return lambda config: dataclasses.replace(config, allowed_hosts=frozenset(hosts))


def with_allowed_actions(*actions: str) -> VerifierOption:
    """Restrict accepted action names. Calling with no actions lifts the restriction."""
    return lambda config: dataclasses.replace(
        config, allowed_actions=frozenset(actions)
    )


def with_timeout(seconds: float) -> VerifierOption:
    """Timeout for the default HttpClient. Ignored when a transport is supplied."""
    return lambda config: dataclasses.replace(config, timeout=seconds)


def build_config(*options: VerifierOption) -> VerifierConfig:
    config = VerifierConfig()
    for option in options:
        config = option(config)
    return config


def new_verifier(*options: VerifierOption) -> "RecaptchaVerifier":
    return RecaptchaVerifier(build_config(*options))


class RecaptchaVerifier:
    def __init__(self, config: Optional[VerifierConfig] = None) -> None:
        self._config = config if config is not None else VerifierConfig()
        self._owned_client: Optional[HttpClient] = None
        if self._config.transport is None:
            self._owned_client = HttpClient(timeout=self._config.timeout)
            self._transport: HttpTransport = self._owned_client
        else:
            self._transport = self._config.transport

    @property
    def config(self) -> VerifierConfig:
        return self._config

    async def verify(self, token: str, client_ip: str = "") -> bool:
        token = token.strip()
        if not token:
            log.debug("captcha_empty_token")
            return False

        response = await self._send(token, client_ip)
        lookup = await self._parse_lookup(response)

        cfg = self._config
        reason = lookup.rejection_reason(
            cfg.allowed_hosts, cfg.allowed_actions, cfg.threshold
        )
        if reason is not None:
            log.info(
                "captcha_rejected",
                reason=reason,
                score=lookup.score,
                threshold=cfg.threshold,
                action=lookup.action,
                hostname=lookup.hostname,
                error_codes=lookup.error_codes,
                ip_hash=hash_ip(client_ip),
            )
            return False

        log.debug(
            "captcha_verified",
            score=lookup.score,
            action=lookup.action,
            hostname=lookup.hostname,
        )
        return True

    def _build_request(self, token: str, client_ip: str) -> httpx.Request:
        form = {
            "secret": self._config.secret(),
            "response": token,
        }
        if client_ip:
            form["remoteip"] = client_ip

        return httpx.Request(
            "POST",
            self._config.endpoint,
            data=form,
            headers={_CONTENT_TYPE_HEADER: _FORM_CONTENT_TYPE},
        )

    async def _send(self, token: str, client_ip: str) -> httpx.Response:
        # Building the request sits inside the try: a malformed endpoint
        # is reported the same way as an unreachable one.
        try:
            request = self._build_request(token, client_ip)
            return await self._transport.send(request)
        except Exception as e:
            log.error(
                "captcha_lookup_failed",
                endpoint=self._config.endpoint,
                error=str(e),
                error_type=type(e).__name__,
            )
            raise LookupFailureError(
                "captcha verification service unavailable",
                details={"error_type": type(e).__name__},
            ) from e

    async def _parse_lookup(self, response: httpx.Response) -> LookupResult:
        try:
            if not response.is_success:
                log.warning("captcha_http_status", status_code=response.status_code)
            body = await response.aread()
            return LookupResult.model_validate_json(body)
        except (ValidationError, httpx.HTTPError, httpx.StreamError) as e:
            log.error(
                "captcha_bad_response",
                status_code=response.status_code,
                error_type=type(e).__name__,
            )
            raise LookupFailureError(
                "captcha verification response could not be decoded",
                details={"status_code": response.status_code},
            ) from e
        finally:
            await response.aclose()

    async def aclose(self) -> None:
        """Close the transport if this verifier created it."""
        if self._owned_client is not None:
            await self._owned_client.aclose()

    async def __aenter__(self) -> "RecaptchaVerifier":
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.aclose()
