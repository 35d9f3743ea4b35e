# PKCE (RFC 7636) verifier and challenge helpers.
# Created: 2026-10-19

from __future__ import annotations

import base64
import hashlib
import secrets


def generate_code_verifier(length: int = 64) -> str:
    """Random code verifier of ``length`` characters (43-128)."""
    if not 43 <= length <= 128:
        raise ValueError(f"Code verifier length must be 43-128, got {length}")
    return secrets.token_urlsafe(length)[:length]


def create_code_challenge(verifier: str, method: str = "S256") -> str:
    if method == "S256":
        digest = hashlib.sha256(verifier.encode("ascii")).digest()
        return base64.urlsafe_b64encode(digest).rstrip(b"=").decode("ascii")
    if method == "plain":
        return verifier
    raise ValueError(f"Unsupported code challenge method: {method}")


def generate_pkce_pair(method: str = "S256") -> tuple[str, str]:
    """Return a ``(verifier, challenge)`` pair."""
    verifier = generate_code_verifier()
    return verifier, create_code_challenge(verifier, method)
