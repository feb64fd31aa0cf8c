"""Unit tests for the infrastructure layer: HttpClient and secret providers."""

from unittest.mock import MagicMock

import httpx
import pytest

from siteverify.infrastructure.captcha.secrets import env_secret, static_secret
from siteverify.infrastructure.http_client import HttpClient


# ── HttpClient ────────────────────────────────────────────────────────────────


class TestHttpClient:
    async def test_send_delegates_to_httpx(self, mocker):
        client = HttpClient()
        fake_resp = MagicMock(status_code=200)
        mocker.patch.object(client._client, "send", return_value=fake_resp)
        request = httpx.Request("POST", "http://example.com")
        resp = await client.send(request)
        assert resp.status_code == 200
        client._client.send.assert_awaited_once_with(request)
        await client.aclose()

    async def test_send_propagates_exception(self, mocker):
        client = HttpClient()
        mocker.patch.object(client._client, "send", side_effect=Exception("timeout"))
        with pytest.raises(Exception, match="timeout"):
            await client.send(httpx.Request("GET", "http://example.com"))
        await client.aclose()

    async def test_mock_transport_round_trip(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json={"echo": request.content.decode()})

        async with HttpClient(transport=httpx.MockTransport(handler)) as client:
            request = httpx.Request("POST", "https://example.com", data={"k": "v"})
            resp = await client.send(request)
        assert resp.json() == {"echo": "k=v"}

    def test_timeout_applied(self):
        client = HttpClient(timeout=1.5)
        assert client._client.timeout.read == 1.5

    async def test_context_manager(self):
        async with HttpClient() as client:
            assert client is not None
        assert client._client.is_closed


# ── Secret providers ──────────────────────────────────────────────────────────


class TestSecretProviders:
    def test_static_secret(self):
        assert static_secret("s3cret")() == "s3cret"

    def test_env_secret_reads_each_call(self, monkeypatch):
        monkeypatch.setenv("CAPTCHA_TEST_SECRET", "old")
        provider = env_secret("CAPTCHA_TEST_SECRET")
        assert provider() == "old"
        monkeypatch.setenv("CAPTCHA_TEST_SECRET", "new")
        assert provider() == "new"

    def test_env_secret_default(self, monkeypatch):
        monkeypatch.delenv("CAPTCHA_TEST_SECRET", raising=False)
        assert env_secret("CAPTCHA_TEST_SECRET")() == ""
        assert env_secret("CAPTCHA_TEST_SECRET", "fallback")() == "fallback"
