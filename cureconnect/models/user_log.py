"""Login/logout session log."""

from datetime import UTC, datetime
from enum import Enum

from sqlalchemy import DateTime, ForeignKey, Index, Integer
from sqlalchemy.orm import Mapped, mapped_column

from cureconnect.database import Base


class SessionState(str, Enum):
    OPEN = "open"
    CLOSED = "closed"


class UserLog(Base):
    """One login, closed at most once by the matching logout."""

    __tablename__ = "user_log"
    __table_args__ = (Index("ix_user_log_user_id_login_time", "user_id", "login_time"),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(Integer, ForeignKey("users.id"), nullable=False)
    login_time: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(UTC),
    )
    logout_time: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    session_duration: Mapped[int | None] = mapped_column(Integer, nullable=True)  # seconds

    @property
    def state(self) -> SessionState:
        return SessionState.OPEN if self.logout_time is None else SessionState.CLOSED
