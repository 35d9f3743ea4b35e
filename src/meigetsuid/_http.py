# Shared HTTP round trip for MeigetsuID API calls.
# Created: 2026-10-19

from __future__ import annotations

import logging
from typing import Any

import httpx

from meigetsuid.config import Settings
from meigetsuid.errors import APIError

logger = logging.getLogger(__name__)

TEXT_CONTENT_TYPE = "text/plain;charset=UTF-8"


async def send(
    method: str,
    path: str,
    *,
    settings: Settings,
    access_token: str | None = None,
    params: dict[str, Any] | None = None,
    json: Any = None,
    text: str | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.Response:
    """Send one request to the API root and return the 200 response.

    Args:
        method: HTTP verb.
        path: Endpoint path relative to ``settings.server``.
        access_token: Sent as a bearer token when given.
        params: Query parameters.
        json: JSON body.
        text: Plain-text body (mutually exclusive with ``json``).
        transport: Optional httpx transport, mainly for tests.

    Raises:
        APIError: For any status other than 200.
        httpx.HTTPError: On transport failure.
    """
    url = f"{settings.server}{path}"
    headers: dict[str, str] = {}
    if access_token:
        headers["Authorization"] = f"Bearer {access_token}"

    kwargs: dict[str, Any] = {"params": params, "headers": headers}
    if json is not None:
        kwargs["json"] = json
    elif text is not None:
        headers["Content-Type"] = TEXT_CONTENT_TYPE
        kwargs["content"] = text.encode("utf-8")

    logger.debug("%s %s", method, url)
    async with httpx.AsyncClient(timeout=settings.timeout, transport=transport) as client:
        resp = await client.request(method, url, **kwargs)

    if resp.status_code != 200:
        logger.warning("%s %s rejected with %d", method, path, resp.status_code)
        raise APIError(resp.status_code, resp.text, method=method, url=url)
    return resp
