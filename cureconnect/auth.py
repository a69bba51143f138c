"""Authentication helpers for request-scoped user context."""

from dataclasses import dataclass
from typing import Annotated

import structlog
from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from cureconnect.config import Settings, get_settings
from cureconnect.logger import get_logger
from cureconnect.security import TokenVerificationError, decode_access_token
from cureconnect.utils.exceptions import raise_forbidden

logger = get_logger(__name__)

# auto_error=False so a missing header maps to our own 403 body
bearer_scheme = HTTPBearer(auto_error=False)


@dataclass(frozen=True)
class AuthenticatedUser:
    user_id: int
    username: str


async def get_current_user(
    request: Request,
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    config: Settings = Depends(get_settings),
) -> AuthenticatedUser:
    """Resolve the caller from the ``Authorization: Bearer`` header.

    Purely cryptographic: the user table is not consulted, so a token stays
    usable until it expires even after logout.
    """
    if credentials is None or not credentials.credentials:
        logger.warning("Missing bearer token")
        raise_forbidden("Access denied")

    try:
        claims = decode_access_token(credentials.credentials, config=config)
    except TokenVerificationError as exc:
        logger.info("Rejected bearer token", reason=type(exc).__name__)
        raise_forbidden("Invalid token", cause=exc)

    user = AuthenticatedUser(user_id=claims.user_id, username=claims.username)
    request.state.user = user
    structlog.contextvars.bind_contextvars(user_id=user.user_id)
    return user


CurrentUser = Annotated[AuthenticatedUser, Depends(get_current_user)]
