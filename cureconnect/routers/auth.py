"""Authentication API router: signup, login and logout."""

from fastapi import APIRouter, status

from cureconnect.deps import AppSettings, CurrentUser, DbSession
from cureconnect.logger import get_logger
from cureconnect.schemas import (
    LoginRequest,
    LoginResponse,
    LogoutResponse,
    SignupRequest,
    SignupResponse,
)
from cureconnect.security import create_access_token
from cureconnect.services import (
    InvalidCredentialsError,
    NoActiveSessionError,
    UserConflictError,
    credentials,
    session_log,
)
from cureconnect.utils.exceptions import raise_bad_request

router = APIRouter(tags=["auth"])
logger = get_logger(__name__)


@router.post("/signup", response_model=SignupResponse, status_code=status.HTTP_201_CREATED)
async def signup(data: SignupRequest, db: DbSession, config: AppSettings) -> SignupResponse:
    """Register a new user. No token is issued; the client logs in next."""
    if data.password != data.confirm_password:
        raise_bad_request("Passwords do not match")

    try:
        await credentials.create_user(db, data, config=config)
    except UserConflictError as e:
        logger.info("Signup rejected: duplicate username or email")
        raise_bad_request(str(e), cause=e)

    return SignupResponse()


@router.post("/login", response_model=LoginResponse)
async def login(data: LoginRequest, db: DbSession, config: AppSettings) -> LoginResponse:
    """Check credentials, issue a bearer token and open a session record."""
    try:
        user = await credentials.authenticate(db, data.username, data.password)
    except InvalidCredentialsError as e:
        logger.warning("Failed login attempt")
        raise_bad_request(str(e), cause=e)

    token = create_access_token(user.id, user.username, config=config)
    await session_log.record_login(db, user.id)

    logger.info("Successful login", user_id=user.id)
    return LoginResponse(token=token, use_id=user.id)


@router.post("/logout", response_model=LogoutResponse)
async def logout(user: CurrentUser, db: DbSession) -> LogoutResponse:
    """Close the caller's latest open session. The token itself stays valid."""
    try:
        await session_log.record_logout(db, user.user_id)
    except NoActiveSessionError as e:
        raise_bad_request(str(e), cause=e)

    return LogoutResponse()
