from __future__ import annotations

from fastapi import Header, HTTPException

from formdesk.infrastructure import get_authenticator


async def require_bearer(authorization: str | None = Header(default=None)) -> None:
    """Reject the request with 401 unless the bearer token is accepted."""
    if not get_authenticator().authenticate(authorization):
        raise HTTPException(
            status_code=401,
            detail="Unauthorized",
            headers={"WWW-Authenticate": "Bearer"},
        )
