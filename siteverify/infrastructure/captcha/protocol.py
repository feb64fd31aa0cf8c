"""Collaborator protocols. The verifier depends on these, not on concrete classes."""

from typing import Callable, Protocol

import httpx

# Zero-argument callable returning the current shared secret. Invoked on every
# lookup, so rotated secrets take effect without rebuilding the verifier.
SecretProvider = Callable[[], str]


class HttpTransport(Protocol):
    async def send(self, request: httpx.Request) -> httpx.Response: ...
