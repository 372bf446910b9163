from __future__ import annotations

from fastapi import HTTPException, Request

from .users import authenticate_admin

_BEARER_PREFIX = "Bearer "


def get_bearer_token(request: Request) -> str | None:
    """Return the token from an ``Authorization: Bearer`` header, or ``None``."""
    header = request.headers.get("authorization", "")
    if not header.startswith(_BEARER_PREFIX):
        return None
    return header[len(_BEARER_PREFIX):]


def require_admin(request: Request) -> None:
    """Raise 401 unless the request carries the admin password."""
    token = get_bearer_token(request)
    if not token or not authenticate_admin(token):
        raise HTTPException(
            status_code=401,
            detail="Unauthorized",
            headers={"WWW-Authenticate": "Bearer"},
        )
