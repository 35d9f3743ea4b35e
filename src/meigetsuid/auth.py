# Authorization flow - authorization id request and token grants.
# Created: 2026-10-19

from __future__ import annotations

import logging

import httpx

from meigetsuid._http import send
from meigetsuid.config import Settings, get_settings
from meigetsuid.models import ClientInformation, TokenInformation

logger = logging.getLogger(__name__)

# Secret sent on behalf of public (PKCE-only) clients.
PUBLIC_CLIENT_SECRET = "public"


async def get_authorization_id(
    client_info: ClientInformation,
    scopes: list[str],
    code_challenge: str,
    code_challenge_method: str,
    *,
    settings: Settings | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> str:
    """Start an authorization-code flow.

    Args:
        client_info: Registered client. ``client_secret`` defaults to ``"public"``.
        scopes: Requested scopes.
        code_challenge: PKCE challenge derived from the verifier.
        code_challenge_method: PKCE method, e.g. ``"S256"``.

    Returns:
        Opaque authorization id used to continue the flow out of band.
    """
    body = {
        "client_id": client_info.client_id,
        "client_secret": (
            PUBLIC_CLIENT_SECRET if client_info.client_secret is None else client_info.client_secret
        ),
        "scope": scopes,
        "callback_url": client_info.redirect_uri,
        "code_challenge": code_challenge,
        "code_challenge_method": code_challenge_method,
    }
    resp = await send(
        "POST",
        "/auth",
        settings=settings or get_settings(),
        json=body,
        transport=transport,
    )
    logger.info("Authorization id issued for client %s", client_info.client_id)
    return resp.text


async def get_token_by_auth_code(
    auth_code: str,
    code_verifier: str,
    *,
    settings: Settings | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> TokenInformation:
    """Exchange an authorization code and its PKCE verifier for tokens."""
    return await _request_token(
        {
            "grant_type": "authorization_code",
            "code": auth_code,
            "code_verifier": code_verifier,
        },
        settings=settings,
        transport=transport,
    )


async def get_token_by_refresh_token(
    refresh_token: str,
    *,
    settings: Settings | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> TokenInformation:
    """Obtain a fresh token pair from a refresh token."""
    return await _request_token(
        {"grant_type": "refresh_token", "refresh_token": refresh_token},
        settings=settings,
        transport=transport,
    )


async def get_token(
    refresh_token_or_auth_code: str,
    code_verifier: str | None = None,
    *,
    settings: Settings | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> TokenInformation:
    """Refresh-token grant with one argument, authorization-code grant with two."""
    if code_verifier is None:
        return await get_token_by_refresh_token(
            refresh_token_or_auth_code, settings=settings, transport=transport
        )
    return await get_token_by_auth_code(
        refresh_token_or_auth_code, code_verifier, settings=settings, transport=transport
    )


async def _request_token(
    body: dict[str, str],
    *,
    settings: Settings | None,
    transport: httpx.AsyncBaseTransport | None,
) -> TokenInformation:
    resp = await send(
        "POST",
        "/auth/token",
        settings=settings or get_settings(),
        json=body,
        transport=transport,
    )
    token = TokenInformation.model_validate(resp.json())
    logger.info("Token issued via %s grant", body["grant_type"])
    return token
