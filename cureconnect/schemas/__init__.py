"""Pydantic schemas package."""

from cureconnect.schemas.auth import (
    LoginRequest,
    LoginResponse,
    LogoutResponse,
    SignupRequest,
    SignupResponse,
)
from cureconnect.schemas.reference import DiseaseResponse, DiseaseSolutionResponse, MedicineResponse
from cureconnect.schemas.user import (
    MessageResponse,
    ProfileResponse,
    ProfileUpdate,
    UsernameResponse,
)

__all__ = [
    "DiseaseResponse",
    "DiseaseSolutionResponse",
    "LoginRequest",
    "LoginResponse",
    "LogoutResponse",
    "MedicineResponse",
    "MessageResponse",
    "ProfileResponse",
    "ProfileUpdate",
    "SignupRequest",
    "SignupResponse",
    "UsernameResponse",
]
