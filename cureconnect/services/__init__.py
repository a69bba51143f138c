"""Business services."""

from cureconnect.services import credentials, reference, session_log
from cureconnect.services.credentials import (
    CredentialServiceError,
    InvalidCredentialsError,
    InvalidProfileError,
    UserConflictError,
    UserNotFoundError,
)
from cureconnect.services.session_log import NoActiveSessionError

__all__ = [
    "CredentialServiceError",
    "InvalidCredentialsError",
    "InvalidProfileError",
    "NoActiveSessionError",
    "UserConflictError",
    "UserNotFoundError",
    "credentials",
    "reference",
    "session_log",
]
