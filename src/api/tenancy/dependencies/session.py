"""Session identity FastAPI dependency.

Reads the session token from the session cookie, falling back to an
``Authorization: Bearer`` header, and resolves it into a SessionIdentity.
A missing or invalid token never fails the request: the identity is
anonymous and the guard decides what an anonymous caller may do.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Annotated

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from infrastructure.settings import get_session_settings
from shared_kernel.auth import (
    DefaultSessionValidatorProbe,
    InvalidSessionTokenError,
    SessionIdentity,
    SessionTokenValidator,
)

# Bearer scheme for Swagger UI; auto_error=False so anonymous requests pass
bearer_scheme = HTTPBearer(auto_error=False)


@lru_cache
def get_session_validator() -> SessionTokenValidator:
    """Get cached session token validator configured from settings."""
    settings = get_session_settings()
    return SessionTokenValidator(
        secret=settings.secret.get_secret_value(),
        probe=DefaultSessionValidatorProbe(),
        algorithm=settings.algorithm,
        issuer=settings.issuer,
    )


def extract_session_token(
    request: Request,
    credentials: HTTPAuthorizationCredentials | None,
    cookie_name: str,
) -> str | None:
    """Return the raw session token, preferring the session cookie."""
    cookie = request.cookies.get(cookie_name)
    if cookie:
        return cookie
    if credentials is not None and credentials.credentials:
        return credentials.credentials
    return None


async def get_session_identity(
    request: Request,
    credentials: Annotated[
        HTTPAuthorizationCredentials | None, Depends(bearer_scheme)
    ],
    validator: Annotated[SessionTokenValidator, Depends(get_session_validator)],
) -> SessionIdentity:
    """Resolve the caller's identity for the current request.

    Returns:
        The validated SessionIdentity, or the anonymous identity when the
        request carries no usable session
    """
    token = extract_session_token(
        request, credentials, get_session_settings().cookie_name
    )
    if token is None:
        DefaultSessionValidatorProbe().session_missing()
        return SessionIdentity.anonymous()

    try:
        return validator.validate(token)
    except InvalidSessionTokenError:
        # Already recorded by the validator's probe
        return SessionIdentity.anonymous()
