"""Session log lifecycle: OPEN at login, CLOSED at logout."""

import math
from datetime import UTC, datetime

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from cureconnect.logger import get_logger
from cureconnect.models import UserLog

logger = get_logger(__name__)


class NoActiveSessionError(Exception):
    """The user has no OPEN session record to close."""


def _as_utc(value: datetime) -> datetime:
    # SQLite hands back naive datetimes even for timezone-aware columns
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value


def session_duration_seconds(login_time: datetime, logout_time: datetime) -> int:
    """Whole seconds between login and logout, never negative."""
    elapsed = (_as_utc(logout_time) - _as_utc(login_time)).total_seconds()
    return max(0, math.floor(elapsed))


async def record_login(db: AsyncSession, user_id: int, *, now: datetime | None = None) -> UserLog:
    entry = UserLog(user_id=user_id, login_time=now or datetime.now(UTC))
    db.add(entry)
    await db.commit()
    await db.refresh(entry)

    logger.info("Session opened", user_id=user_id, session_id=entry.id)
    return entry


async def record_logout(db: AsyncSession, user_id: int, *, now: datetime | None = None) -> UserLog:
    """Close the newest OPEN record of ``user_id``.

    Older OPEN records, e.g. left behind by a client that never logged out,
    are not touched.
    """
    result = await db.execute(
        select(UserLog)
        .where(UserLog.user_id == user_id, UserLog.logout_time.is_(None))
        .order_by(UserLog.login_time.desc(), UserLog.id.desc())
        .limit(1)
    )
    entry = result.scalar_one_or_none()
    if entry is None:
        raise NoActiveSessionError("No active session found")

    logout_time = now or datetime.now(UTC)
    entry.logout_time = logout_time
    entry.session_duration = session_duration_seconds(entry.login_time, logout_time)
    await db.commit()
    await db.refresh(entry)

    logger.info(
        "Session closed",
        user_id=user_id,
        session_id=entry.id,
        duration_s=entry.session_duration,
    )
    return entry


async def list_sessions(db: AsyncSession, user_id: int) -> list[UserLog]:
    result = await db.execute(
        select(UserLog)
        .where(UserLog.user_id == user_id)
        .order_by(UserLog.login_time.desc(), UserLog.id.desc())
    )
    return list(result.scalars().all())
