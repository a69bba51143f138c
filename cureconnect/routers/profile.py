"""Profile API router."""

from fastapi import APIRouter

from cureconnect.deps import CurrentUser, DbSession
from cureconnect.logger import get_logger
from cureconnect.schemas import MessageResponse, ProfileResponse, ProfileUpdate, UsernameResponse
from cureconnect.services import (
    InvalidProfileError,
    UserConflictError,
    UserNotFoundError,
    credentials,
)
from cureconnect.utils.exceptions import raise_bad_request, raise_not_found, raise_not_found_detail

router = APIRouter(tags=["profile"])
logger = get_logger(__name__)


@router.get("/getUsername", response_model=UsernameResponse)
async def get_username(user: CurrentUser, db: DbSession) -> UsernameResponse:
    try:
        record = await credentials.get_user(db, user.user_id)
    except UserNotFoundError as e:
        raise_not_found("User", cause=e)
    return UsernameResponse(username=record.username)


@router.get("/getProfile", response_model=ProfileResponse)
async def get_profile(user: CurrentUser, db: DbSession) -> ProfileResponse:
    try:
        record = await credentials.get_user(db, user.user_id)
    except UserNotFoundError as e:
        raise_not_found("User", cause=e)
    return ProfileResponse.model_validate(record)


@router.put("/updateProfile", response_model=MessageResponse)
async def update_profile(data: ProfileUpdate, user: CurrentUser, db: DbSession) -> MessageResponse:
    """Replace name, username and email of the caller."""
    try:
        await credentials.update_profile(db, user.user_id, data)
    except (InvalidProfileError, UserConflictError) as e:
        raise_bad_request(str(e), cause=e)
    except UserNotFoundError as e:
        logger.debug("Profile update matched no row", user_id=user.user_id)
        raise_not_found_detail(str(e), cause=e)

    return MessageResponse(message="Profile updated successfully")
