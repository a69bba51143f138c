"""Tests for the bearer token dependency."""

from datetime import UTC, datetime, timedelta

import pytest
from fastapi import HTTPException
from fastapi.security import HTTPAuthorizationCredentials
from starlette.requests import Request

from cureconnect.auth import AuthenticatedUser, get_current_user
from cureconnect.config import Settings
from cureconnect.security import create_access_token


def _mock_request() -> Request:
    scope = {
        "type": "http",
        "method": "GET",
        "path": "/getProfile",
        "headers": [],
        "client": ("127.0.0.1", 12345),
    }
    return Request(scope=scope)


def _bearer(token: str) -> HTTPAuthorizationCredentials:
    return HTTPAuthorizationCredentials(scheme="Bearer", credentials=token)


@pytest.mark.asyncio
async def test_valid_token_attaches_identity(test_settings: Settings) -> None:
    request = _mock_request()
    token = create_access_token(5, "alee", config=test_settings)

    user = await get_current_user(request, _bearer(token), test_settings)

    assert user == AuthenticatedUser(user_id=5, username="alee")
    assert request.state.user is user


@pytest.mark.asyncio
async def test_missing_credentials_is_forbidden(test_settings: Settings) -> None:
    with pytest.raises(HTTPException) as exc_info:
        await get_current_user(_mock_request(), None, test_settings)

    assert exc_info.value.status_code == 403
    assert exc_info.value.detail == "Access denied"


@pytest.mark.asyncio
async def test_expired_token_is_forbidden(test_settings: Settings) -> None:
    issued = datetime.now(UTC) - timedelta(hours=2)
    token = create_access_token(5, "alee", config=test_settings, now=issued)

    with pytest.raises(HTTPException) as exc_info:
        await get_current_user(_mock_request(), _bearer(token), test_settings)

    assert exc_info.value.status_code == 403
    assert exc_info.value.detail == "Invalid token"


@pytest.mark.asyncio
async def test_no_header_returns_403(public_client) -> None:
    response = await public_client.get("/getProfile")

    assert response.status_code == 403
    assert response.json()["detail"] == "Access denied"


@pytest.mark.asyncio
async def test_non_bearer_scheme_returns_403(public_client) -> None:
    response = await public_client.get("/getProfile", headers={"Authorization": "Basic abc"})

    assert response.status_code == 403


@pytest.mark.asyncio
async def test_garbage_token_returns_403(public_client) -> None:
    response = await public_client.get("/getUsername", headers={"Authorization": "Bearer nonsense"})

    assert response.status_code == 403
    assert response.json()["detail"] == "Invalid token"


@pytest.mark.asyncio
async def test_gate_does_not_touch_the_database(public_client) -> None:
    """A well-signed token for an unknown user passes the gate; the handler 404s."""
    token = create_access_token(9999, "ghost")

    response = await public_client.get("/getUsername", headers={"Authorization": f"Bearer {token}"})

    assert response.status_code == 404
