"""API routers package."""

from cureconnect.routers import auth, profile, reference

__all__ = [
    "auth",
    "profile",
    "reference",
]
