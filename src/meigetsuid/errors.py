# MeigetsuID client exceptions.
# Created: 2026-10-19

from __future__ import annotations


class MeigetsuIDError(Exception):
    """Base exception for all MeigetsuID client errors."""


class APIError(MeigetsuIDError):
    """Non-200 response from the MeigetsuID API.

    ``str(error)`` is ``"<status>: <body>"`` with the raw response text.

    Attributes:
        status_code: HTTP status code
        body: Response body as text
        method: HTTP method of the rejected request
        url: Request URL
    """

    def __init__(self, status_code: int, body: str, method: str = "", url: str = ""):
        self.status_code = status_code
        self.body = body
        self.method = method
        self.url = url
        super().__init__(f"{status_code}: {body}")
