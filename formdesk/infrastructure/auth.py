"""Bearer token authentication hooks.

Protected routes ask the configured :class:`Authenticator` whether the raw
``Authorization`` header is acceptable.  The default implementation compares
against one shared secret; a stronger scheme only needs to provide a
compatible object and call ``configure_authenticator`` during start-up.
"""
from __future__ import annotations

import hmac
from typing import Protocol

BEARER_PREFIX = "Bearer "


class Authenticator(Protocol):
    """Contract for request authentication."""

    def authenticate(self, header_value: str | None) -> bool:
        """Return ``True`` when the ``Authorization`` header grants access."""


def extract_bearer_token(header_value: str | None) -> str | None:
    if not header_value or not header_value.startswith(BEARER_PREFIX):
        return None
    token = header_value[len(BEARER_PREFIX):]
    return token or None


class StaticTokenAuthenticator:
    """Accepts exactly one configured shared secret."""

    def __init__(self, secret: str) -> None:
        self._secret = secret

    def authenticate(self, header_value: str | None) -> bool:
        token = extract_bearer_token(header_value)
        if token is None or not self._secret:
            return False
        return hmac.compare_digest(token.encode("utf-8"), self._secret.encode("utf-8"))


class DenyAllAuthenticator:
    """Fallback used until an authenticator is configured."""

    def authenticate(self, header_value: str | None) -> bool:  # pragma: no cover - trivial
        return False


_authenticator: Authenticator = DenyAllAuthenticator()


def configure_authenticator(authenticator: Authenticator) -> None:
    """Install the authenticator used by protected routes."""

    global _authenticator
    _authenticator = authenticator


def get_authenticator() -> Authenticator:
    """Return the currently configured authenticator."""

    return _authenticator
