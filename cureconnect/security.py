"""Security utilities for JWT and password hashing."""

from dataclasses import dataclass
from datetime import UTC, datetime, timedelta

import bcrypt
import jwt

from cureconnect.config import Settings, settings
from cureconnect.logger import get_logger

logger = get_logger(__name__)

REQUIRED_CLAIMS = ["sub", "username", "iat", "exp"]


class MissingSecretKeyError(RuntimeError):
    """Raised when tokens are used without JWT_SECRET configured."""


class TokenVerificationError(Exception):
    """Base class for rejected bearer tokens."""


class TokenMalformedError(TokenVerificationError):
    pass


class TokenSignatureError(TokenVerificationError):
    pass


class TokenExpiredError(TokenVerificationError):
    pass


@dataclass(frozen=True)
class TokenClaims:
    user_id: int
    username: str


def _secret(config: Settings) -> str:
    if not config.secret_key:
        raise MissingSecretKeyError("JWT_SECRET is not configured")
    return config.secret_key


def create_access_token(
    user_id: int,
    username: str,
    *,
    config: Settings = settings,
    now: datetime | None = None,
) -> str:
    """Create a signed access token that expires after the configured lifetime."""
    issued_at = now or datetime.now(UTC)
    expire = issued_at + timedelta(minutes=config.access_token_expire_minutes)
    to_encode = {
        "sub": str(user_id),
        "username": username,
        "iat": issued_at,
        "exp": expire,
    }
    return jwt.encode(to_encode, _secret(config), algorithm=config.jwt_algorithm)


def decode_access_token(token: str, *, config: Settings = settings) -> TokenClaims:
    """Decode and validate an access token.

    Raises:
        TokenExpiredError: the token is past its ``exp`` claim.
        TokenSignatureError: the signature does not match the secret.
        TokenMalformedError: anything else that stops the token from decoding.
    """
    secret = _secret(config)
    try:
        payload = jwt.decode(
            token,
            secret,
            algorithms=[config.jwt_algorithm],
            options={"require": REQUIRED_CLAIMS},
        )
    except jwt.ExpiredSignatureError as exc:
        logger.debug("JWT token expired")
        raise TokenExpiredError("Token has expired") from exc
    except jwt.InvalidSignatureError as exc:
        logger.warning("JWT signature mismatch")
        raise TokenSignatureError("Token signature is invalid") from exc
    except jwt.PyJWTError as exc:
        logger.warning(
            "JWT decode failed",
            error=str(exc),
            error_type=type(exc).__name__,
        )
        raise TokenMalformedError("Token could not be decoded") from exc

    try:
        user_id = int(payload["sub"])
    except (TypeError, ValueError) as exc:
        raise TokenMalformedError("Token subject is not a user id") from exc

    username = payload["username"]
    if not isinstance(username, str):
        raise TokenMalformedError("Token username claim is not a string")

    return TokenClaims(user_id=user_id, username=username)


def hash_password(password: str, *, config: Settings = settings, rounds: int | None = None) -> str:
    """Hash a password using bcrypt with a fresh salt.

    ``rounds`` overrides the cost configured in ``config.bcrypt_rounds``.
    """
    salt = bcrypt.gensalt(rounds=rounds or config.bcrypt_rounds)
    return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a password against its hash."""
    try:
        return bcrypt.checkpw(plain_password.encode("utf-8"), hashed_password.encode("utf-8"))
    except ValueError:
        # Malformed stored hash or a password beyond bcrypt's 72-byte limit
        return False
