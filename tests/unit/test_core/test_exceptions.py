"""Unit tests for application exceptions."""
from __future__ import annotations

from user_directory.core.exceptions import AppException, InvalidRequestException


class TestAppException:
    """Tests for the base exception."""

    def test_default_title(self):
        exc = AppException(status_code=404, detail="missing")

        assert exc.title == "Not Found"
        assert exc.type == "about:blank"
        assert str(exc) == "missing"

    def test_unknown_status_title(self):
        assert AppException(status_code=418, detail="teapot").title == "Error"

    def test_problem_details(self):
        exc = AppException(
            status_code=400,
            detail="bad",
            type="bad-request",
            instance="/users",
            extra={"field": "first"},
        )

        assert exc.to_problem_details() == {
            "type": "bad-request",
            "title": "Bad Request",
            "status": 400,
            "detail": "bad",
            "instance": "/users",
            "field": "first",
        }


class TestInvalidRequestException:
    """Tests for the pagination request error."""

    def test_fields(self):
        exc = InvalidRequestException(detail="first cannot be negative", extra={"first": -1})

        assert isinstance(exc, AppException)
        assert exc.status_code == 400
        assert exc.type == "invalid-pagination-request"
        assert exc.title == "Invalid Pagination Request"
        assert exc.extra == {"first": -1}
