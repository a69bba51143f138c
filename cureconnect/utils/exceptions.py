"""Common exception utilities for FastAPI routers."""

from typing import NoReturn

from fastapi import HTTPException, status


def raise_not_found(resource_name: str, *, cause: Exception | None = None) -> NoReturn:
    raise HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=f"{resource_name} not found",
    ) from cause


def raise_bad_request(detail: str, *, cause: Exception | None = None) -> NoReturn:
    raise HTTPException(
        status_code=status.HTTP_400_BAD_REQUEST,
        detail=detail,
    ) from cause


def raise_forbidden(detail: str, *, cause: Exception | None = None) -> NoReturn:
    raise HTTPException(
        status_code=status.HTTP_403_FORBIDDEN,
        detail=detail,
    ) from cause


def raise_internal_error(detail: str, *, cause: Exception | None = None) -> NoReturn:
    raise HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail=detail,
    ) from cause


def raise_not_found_detail(detail: str, *, cause: Exception | None = None) -> NoReturn:
    """404 carrying ``detail`` verbatim instead of ``"<resource> not found"``."""
    raise HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=detail,
    ) from cause
