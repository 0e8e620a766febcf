"""Bearer-token authentication and the two authorization tiers.

Tokens are HS256 JWTs whose payload is ``{"username": ..., "isAdmin": ...}``.
A missing or invalid token means an anonymous caller; the ``ensure_*``
dependencies turn that into 401/403 responses.
"""

from __future__ import annotations

import logging

import jwt
from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from jobly.config import Settings, settings as default_settings
from jobly.exceptions import ForbiddenError, UnauthorizedError

logger = logging.getLogger(__name__)

bearer_scheme = HTTPBearer(auto_error=False)


class CurrentUser(BaseModel):
    """Identity carried by a valid token."""

    model_config = ConfigDict(populate_by_name=True)

    username: str
    is_admin: bool = Field(default=False, alias="isAdmin")


def create_token(username: str, is_admin: bool = False, settings: Settings | None = None) -> str:
    """
    Sign a token for ``username``.

    Args:
        username: Subject of the token
        is_admin: Whether the token grants the admin tier
        settings: Settings holding the signing key (defaults to the global settings)

    Returns:
        Encoded JWT string
    """
    settings = settings or default_settings
    payload = {"username": username, "isAdmin": is_admin}
    return jwt.encode(payload, settings.secret_key, algorithm=settings.jwt_algorithm)


def decode_token(token: str, settings: Settings) -> CurrentUser | None:
    """Return the user a token identifies, or None if it does not verify."""
    try:
        payload = jwt.decode(token, settings.secret_key, algorithms=[settings.jwt_algorithm])
        return CurrentUser.model_validate(payload)
    except (jwt.InvalidTokenError, ValidationError) as exc:
        logger.debug("Rejected bearer token: %s", exc)
        return None


def get_current_user(
    request: Request,
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> CurrentUser | None:
    """FastAPI dependency: the caller's identity, or None when anonymous."""
    if credentials is None:
        return None
    return decode_token(credentials.credentials, request.app.state.settings)


def ensure_logged_in(user: CurrentUser | None = Depends(get_current_user)) -> CurrentUser:
    """
    Require any logged-in caller.

    Raises:
        UnauthorizedError: If the caller is anonymous
    """
    if user is None:
        raise UnauthorizedError()
    return user


def ensure_admin(user: CurrentUser | None = Depends(get_current_user)) -> CurrentUser:
    """
    Require an admin caller.

    Raises:
        UnauthorizedError: If the caller is anonymous
        ForbiddenError: If the caller is logged in but not an admin
    """
    if user is None:
        raise UnauthorizedError()
    if not user.is_admin:
        raise ForbiddenError("Admin privileges required")
    return user
