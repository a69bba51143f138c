"""Pydantic schemas for authentication."""

from typing import Annotated

from pydantic import Field, field_validator

from cureconnect.schemas.base import BaseResponse, CamelRequest

NonEmpty = Annotated[str, Field(min_length=1, max_length=255)]

# bcrypt only looks at the first 72 bytes
BCRYPT_MAX_BYTES = 72


class SignupRequest(CamelRequest):
    """Schema for user registration."""

    first_name: NonEmpty = Field(alias="firstName")
    last_name: NonEmpty = Field(alias="lastName")
    username: NonEmpty
    email: NonEmpty
    password: Annotated[str, Field(min_length=1)]
    confirm_password: Annotated[str, Field(min_length=1)] = Field(
        alias="confirmPassword"
    )

    @field_validator("password")
    @classmethod
    def password_fits_bcrypt(cls, v: str) -> str:
        if len(v.encode("utf-8")) > BCRYPT_MAX_BYTES:
            raise ValueError(f"Password must be at most {BCRYPT_MAX_BYTES} bytes")
        return v


class LoginRequest(CamelRequest):
    """Schema for user login."""

    username: NonEmpty
    password: Annotated[str, Field(min_length=1)]


class SignupResponse(BaseResponse):
    success: bool = True
    message: str = "Signup successful"


class LoginResponse(BaseResponse):
    """Login result. ``use_id`` is the key existing clients read the user id from."""

    success: bool = True
    token: str
    use_id: int
    token_type: str = "bearer"


class LogoutResponse(BaseResponse):
    success: bool = True
