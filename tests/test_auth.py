# Tests for meigetsuid/auth.py
# Created: 2026-10-19

from datetime import UTC, datetime

import httpx
import pytest

from meigetsuid.auth import (
    get_authorization_id,
    get_token,
    get_token_by_auth_code,
    get_token_by_refresh_token,
)
from meigetsuid.errors import APIError
from meigetsuid.models import ClientInformation, TokenInformation


@pytest.fixture
def confidential_client():
    return ClientInformation(
        client_id="cid",
        client_secret="csecret",
        redirect_uri="https://app.example.com/callback",
    )


class TestGetAuthorizationID:
    async def test_request_body(self, server, settings, confidential_client):
        server.reply(text="auth-id-123")
        auth_id = await get_authorization_id(
            confidential_client,
            ["user.read", "application.write"],
            "challenge",
            "S256",
            settings=settings,
            transport=server.transport,
        )

        assert auth_id == "auth-id-123"
        assert server.last.method == "POST"
        assert server.last.url.path == "/api/v2/auth"
        assert server.last.headers["Content-Type"] == "application/json"
        assert "authorization" not in server.last.headers
        assert server.last_json() == {
            "client_id": "cid",
            "client_secret": "csecret",
            "scope": ["user.read", "application.write"],
            "callback_url": "https://app.example.com/callback",
            "code_challenge": "challenge",
            "code_challenge_method": "S256",
        }

    async def test_public_client_secret(self, server, settings):
        server.reply(text="auth-id")
        info = ClientInformation(client_id="cid", redirect_uri="https://app.example.com/cb")
        await get_authorization_id(
            info, ["user.read"], "c", "S256", settings=settings, transport=server.transport
        )
        assert server.last_json()["client_secret"] == "public"

    async def test_empty_secret_is_sent_as_is(self, server, settings):
        server.reply(text="auth-id")
        info = ClientInformation(
            client_id="cid", client_secret="", redirect_uri="https://app.example.com/cb"
        )
        await get_authorization_id(
            info, ["user.read"], "c", "S256", settings=settings, transport=server.transport
        )
        assert server.last_json()["client_secret"] == ""

    async def test_rejected(self, server, settings, confidential_client):
        server.reply(400, text="invalid callback url")
        with pytest.raises(APIError, match=r"^400: invalid callback url$"):
            await get_authorization_id(
                confidential_client, [], "c", "S256", settings=settings, transport=server.transport
            )


class TestGetToken:
    async def test_refresh_token_grant(self, server, settings, wire_token):
        server.reply(json_body=wire_token)
        token = await get_token("refresh-xyz", settings=settings, transport=server.transport)

        assert server.last.method == "POST"
        assert server.last.url.path == "/api/v2/auth/token"
        assert server.last_json() == {"grant_type": "refresh_token", "refresh_token": "refresh-xyz"}
        assert isinstance(token, TokenInformation)
        assert token.access_token == "access-abc"
        assert token.expires_at.access_token == datetime(2026, 10, 19, 12, 0, tzinfo=UTC)

    async def test_authorization_code_grant(self, server, settings, wire_token):
        server.reply(json_body=wire_token)
        await get_token("code-1", "verifier-1", settings=settings, transport=server.transport)

        assert server.last_json() == {
            "grant_type": "authorization_code",
            "code": "code-1",
            "code_verifier": "verifier-1",
        }

    async def test_named_grants(self, server, settings, wire_token):
        server.reply(json_body=wire_token)
        await get_token_by_auth_code("code", "verifier", settings=settings, transport=server.transport)
        await get_token_by_refresh_token("refresh", settings=settings, transport=server.transport)

        grants = [r.content for r in server.requests]
        assert b'"authorization_code"' in grants[0]
        assert b'"refresh_token"' in grants[1]

    async def test_rejected(self, server, settings):
        server.reply(401, text="invalid_grant")
        with pytest.raises(APIError) as exc_info:
            await get_token("stale", settings=settings, transport=server.transport)
        assert str(exc_info.value) == "401: invalid_grant"
        assert exc_info.value.method == "POST"

    async def test_transport_error_propagates(self, settings):
        def _fail(request):
            raise httpx.ConnectError("connection refused", request=request)

        with pytest.raises(httpx.ConnectError):
            await get_token("r", settings=settings, transport=httpx.MockTransport(_fail))
