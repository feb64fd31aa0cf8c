"""Ready-made SecretProvider implementations."""

import os

from siteverify.infrastructure.captcha.protocol import SecretProvider


def static_secret(value: str) -> SecretProvider:
    return lambda: value


def env_secret(name: str, default: str = "") -> SecretProvider:
    """Read ``name`` from the environment on every call.

    Lets a secret be rotated in the process environment without rebuilding
    the verifier.
    """

    def _read() -> str:
        return os.environ.get(name, default)

    return _read
