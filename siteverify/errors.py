"""
Error hierarchy for siteverify.

AppError is the base for all typed errors. Only two kinds of failure leave
the verifier: a lookup that could not be performed (LookupFailureError) and
settings that cannot produce a working verifier (ConfigurationError).

A token that simply fails policy is NOT an error: verify() returns False.
"""

from __future__ import annotations

from typing import Any, Optional


class AppError(Exception):
    """Base siteverify error. All typed errors inherit from this."""

    error_code: str = "internal_error"

    def __init__(self, message: str, *, details: Optional[Any] = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details

    def to_dict(self) -> dict:
        payload: dict = {"error": self.message, "code": self.error_code}
        if self.details is not None:
            payload["details"] = self.details
        return payload


class LookupFailureError(AppError):
    """The verification service could not be reached or its reply not decoded."""

    error_code = "lookup_failure"


class ConfigurationError(AppError):
    error_code = "configuration_error"
