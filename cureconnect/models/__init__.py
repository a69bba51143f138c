"""SQLAlchemy models package."""

from cureconnect.models.reference import DiseaseProduct, DiseaseSolution
from cureconnect.models.user import User
from cureconnect.models.user_log import SessionState, UserLog

__all__ = [
    "DiseaseProduct",
    "DiseaseSolution",
    "SessionState",
    "User",
    "UserLog",
]
