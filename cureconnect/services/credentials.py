"""Credential store: account creation, login checks and profile updates."""

import re
from functools import lru_cache

from sqlalchemy import and_, not_, or_, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from cureconnect.config import Settings, settings
from cureconnect.logger import get_logger
from cureconnect.models import User
from cureconnect.schemas import ProfileUpdate, SignupRequest
from cureconnect.security import hash_password, verify_password

logger = get_logger(__name__)

EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")

INVALID_CREDENTIALS_MESSAGE = "Invalid username or password"


class CredentialServiceError(Exception):
    """Base exception for credential store errors."""


class UserConflictError(CredentialServiceError):
    """Username or email already belongs to another account."""


class InvalidCredentialsError(CredentialServiceError):
    """Unknown username or wrong password. The two are never told apart."""


class InvalidProfileError(CredentialServiceError):
    """Profile fields failed validation."""


class UserNotFoundError(CredentialServiceError):
    """User not found error."""


def is_valid_email(email: str) -> bool:
    return EMAIL_PATTERN.fullmatch(email) is not None


async def create_user(db: AsyncSession, data: SignupRequest, *, config: Settings = settings) -> User:
    """Persist a new account.

    The caller has already checked that both password fields match. The
    unique constraints on ``users`` back up the pre-check when two signups
    race for the same username or email.
    """
    result = await db.execute(
        select(User.id).where(or_(User.username == data.username, User.email == data.email)).limit(1)
    )
    if result.scalar_one_or_none() is not None:
        raise UserConflictError("User already exists with this username or email")

    user = User(
        first_name=data.first_name,
        last_name=data.last_name,
        username=data.username,
        email=data.email,
        password=hash_password(data.password, config=config),
    )
    db.add(user)
    try:
        await db.commit()
    except IntegrityError as exc:
        await db.rollback()
        raise UserConflictError("User already exists with this username or email") from exc
    await db.refresh(user)

    logger.info("User created", user_id=user.id)
    return user


@lru_cache
def _unknown_user_hash() -> str:
    return hash_password("unknown-user-placeholder")


async def authenticate(db: AsyncSession, username: str, password: str) -> User:
    result = await db.execute(select(User).where(User.username == username))
    user = result.scalar_one_or_none()

    if user is None:
        # Same bcrypt cost as a real check for a known username
        verify_password(password, _unknown_user_hash())
        raise InvalidCredentialsError(INVALID_CREDENTIALS_MESSAGE)
    if not verify_password(password, user.password):
        raise InvalidCredentialsError(INVALID_CREDENTIALS_MESSAGE)

    return user


async def get_user(db: AsyncSession, user_id: int) -> User:
    result = await db.execute(select(User).where(User.id == user_id))
    user = result.scalar_one_or_none()

    if user is None:
        raise UserNotFoundError(f"User {user_id} not found")

    return user


async def update_profile(db: AsyncSession, user_id: int, data: ProfileUpdate) -> None:
    """Overwrite name, username and email of ``user_id``.

    Raises UserNotFoundError when no row changed, which covers both an unknown
    id and a payload identical to what is already stored.
    """
    if not is_valid_email(data.email):
        raise InvalidProfileError("Invalid email format")

    result = await db.execute(
        select(User.id)
        .where(or_(User.username == data.username, User.email == data.email))
        .where(User.id != user_id)
        .limit(1)
    )
    if result.scalar_one_or_none() is not None:
        raise UserConflictError("Username or email already in use")

    unchanged = and_(
        User.first_name == data.first_name,
        User.last_name == data.last_name,
        User.username == data.username,
        User.email == data.email,
    )
    stmt = (
        update(User)
        .where(User.id == user_id, not_(unchanged))
        .values(
            first_name=data.first_name,
            last_name=data.last_name,
            username=data.username,
            email=data.email,
        )
        .execution_options(synchronize_session=False)
    )
    try:
        result = await db.execute(stmt)
        await db.commit()
    except IntegrityError as exc:
        await db.rollback()
        raise UserConflictError("Username or email already in use") from exc

    if result.rowcount == 0:
        raise UserNotFoundError("User not found or no changes made")

    logger.info("Profile updated", user_id=user_id)
