"""Tests for the error taxonomy."""

from mcp.shared.exceptions import McpError
from mcp.types import INTERNAL_ERROR, INVALID_PARAMS, METHOD_NOT_FOUND

from github_task_server.utils.errors import (
    GitHubApiError,
    InternalError,
    InvalidParamsError,
    MethodNotFoundError,
    RateLimitError,
)


def test_codes_match_json_rpc():
    assert InvalidParamsError("bad").error.code == INVALID_PARAMS
    assert MethodNotFoundError("foo").error.code == METHOD_NOT_FOUND
    assert InternalError("boom").error.code == INTERNAL_ERROR
    assert GitHubApiError("Not Found").error.code == INTERNAL_ERROR


def test_all_errors_are_mcp_errors():
    for error in (
        InvalidParamsError("bad"),
        MethodNotFoundError("foo"),
        InternalError("boom"),
        RateLimitError("API rate limit exceeded", status_code=403),
    ):
        assert isinstance(error, McpError)


def test_github_api_error_message_wraps_reason():
    error = GitHubApiError("Not Found", status_code=404)

    assert str(error) == "GitHub API error: Not Found"
    assert error.reason == "Not Found"
    assert error.error.model_dump(exclude_none=True) == {
        "code": INTERNAL_ERROR,
        "message": "GitHub API error: Not Found",
        "data": {"status_code": 404},
    }


def test_error_without_details_has_no_data():
    assert MethodNotFoundError("foo").error.model_dump(exclude_none=True) == {
        "code": METHOD_NOT_FOUND,
        "message": "Unknown tool: foo",
    }


def test_unexpected_wraps_error_text():
    error = InternalError.unexpected(RuntimeError("disk on fire"))

    assert error.error.message == "Unexpected error: disk on fire"
