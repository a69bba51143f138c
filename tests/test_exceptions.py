"""Unit tests for exception utilities."""

import pytest
from fastapi import HTTPException

from cureconnect.utils.exceptions import (
    raise_bad_request,
    raise_forbidden,
    raise_internal_error,
    raise_not_found,
    raise_not_found_detail,
)


class TestRaiseNotFound:
    def test_basic_usage(self):
        with pytest.raises(HTTPException) as exc_info:
            raise_not_found("User")
        assert exc_info.value.status_code == 404
        assert exc_info.value.detail == "User not found"

    def test_preserves_cause(self):
        original = LookupError("no row")
        with pytest.raises(HTTPException) as exc_info:
            raise_not_found("User", cause=original)
        assert exc_info.value.__cause__ is original

    def test_detail_variant_is_verbatim(self):
        original = LookupError("no row")
        with pytest.raises(HTTPException) as exc_info:
            raise_not_found_detail("User not found or no changes made", cause=original)
        assert exc_info.value.status_code == 404
        assert exc_info.value.detail == "User not found or no changes made"
        assert exc_info.value.__cause__ is original


@pytest.mark.parametrize(
    ("helper", "status_code"),
    [
        (raise_bad_request, 400),
        (raise_forbidden, 403),
        (raise_internal_error, 500),
    ],
)
def test_detail_helpers(helper, status_code):
    original = ValueError("boom")
    with pytest.raises(HTTPException) as exc_info:
        helper("Something went wrong", cause=original)
    assert exc_info.value.status_code == status_code
    assert exc_info.value.detail == "Something went wrong"
    assert exc_info.value.__cause__ is original
