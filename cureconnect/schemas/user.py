"""Pydantic schemas for profiles."""

from typing import Annotated

from pydantic import Field

from cureconnect.schemas.base import BaseResponse, CamelRequest

NonEmpty = Annotated[str, Field(min_length=1, max_length=255)]


class ProfileUpdate(CamelRequest):
    """Schema for updating a profile. Email shape is checked by the service."""

    first_name: NonEmpty = Field(alias="firstName")
    last_name: NonEmpty = Field(alias="lastName")
    username: NonEmpty
    email: NonEmpty


class UsernameResponse(BaseResponse):
    username: str


class ProfileResponse(BaseResponse):
    username: str
    email: str
    first_name: str
    last_name: str


class MessageResponse(BaseResponse):
    message: str
