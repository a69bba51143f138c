"""Utility functions and helpers."""

from .exceptions import (
    raise_bad_request,
    raise_forbidden,
    raise_internal_error,
    raise_not_found,
    raise_not_found_detail,
)

__all__ = [
    "raise_bad_request",
    "raise_forbidden",
    "raise_internal_error",
    "raise_not_found",
    "raise_not_found_detail",
]
