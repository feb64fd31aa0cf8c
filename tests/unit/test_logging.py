"""Unit tests for logging configuration and helpers."""

import structlog

from siteverify.config import LoggingSettings
from siteverify.shared import logging_config
from siteverify.shared.logging import get_logger, hash_ip
from siteverify.shared.logging_config import redact_sensitive_fields, setup_logging


class TestRedaction:
    def test_redacts_secret_and_token(self):
        event = {
            "event": "captcha_lookup_failed",
            "secret": "s3cret",
            "token": "abc",
            "captcha_token": "abc",
            "client_secret": "x",
            "endpoint": "https://example.com",
        }
        out = redact_sensitive_fields(None, "info", event)
        assert out["secret"] == "***REDACTED***"
        assert out["token"] == "***REDACTED***"
        assert out["captcha_token"] == "***REDACTED***"
        assert out["client_secret"] == "***REDACTED***"
        assert out["endpoint"] == "https://example.com"
        assert out["event"] == "captcha_lookup_failed"

    def test_event_name_never_redacted(self):
        out = redact_sensitive_fields(None, "debug", {"event": "captcha_empty_token"})
        assert out["event"] == "captcha_empty_token"


class TestHashIp:
    def test_passthrough_in_development(self, monkeypatch):
        monkeypatch.setattr(logging_config, "_is_production", False)
        assert hash_ip("203.0.113.9") == "203.0.113.9"

    def test_hashed_in_production(self, monkeypatch):
        monkeypatch.setattr(logging_config, "_is_production", True)
        hashed = hash_ip("203.0.113.9")
        assert hashed != "203.0.113.9"
        assert len(hashed) == 16

    def test_empty_and_none(self, monkeypatch):
        monkeypatch.setattr(logging_config, "_is_production", True)
        assert hash_ip(None) is None
        assert hash_ip("") == ""


class TestSetupLogging:
    def test_production_enables_ip_hashing(self, monkeypatch):
        monkeypatch.setattr(logging_config, "_is_production", False)
        try:
            setup_logging(LoggingSettings(env="production", log_format="json"))
            assert logging_config._is_production is True
        finally:
            structlog.reset_defaults()

    def test_get_logger_binds(self):
        log = get_logger("siteverify.test")
        assert log.bind(request_id="req_1") is not None
