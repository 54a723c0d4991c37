"""Structured error handling utilities.

Every failure that leaves the server is one of the exceptions below. They
subclass the SDK's ``McpError`` so the protocol layer turns them into
JSON-RPC error responses carrying the matching error code.
"""

import logging
from typing import Any, Dict, Optional

from mcp.shared.exceptions import McpError
from mcp.types import INTERNAL_ERROR, INVALID_PARAMS, METHOD_NOT_FOUND, ErrorData


# Configure module logger
logger = logging.getLogger(__name__)

INVALID_URL_MESSAGE = (
    "Invalid GitHub issue URL format. "
    "Expected: https://github.com/owner/repo/issues/number"
)
MISSING_URL_MESSAGE = "URL parameter is required"


class TaskServerError(McpError):
    """Base exception for errors returned to the MCP client."""

    code: int = INTERNAL_ERROR

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(
            ErrorData(code=self.code, message=message, data=self.details or None)
        )
        logger.debug(f"{type(self).__name__} ({self.code}): {message}")


class InvalidParamsError(TaskServerError):
    """Tool arguments are missing or malformed."""

    code = INVALID_PARAMS


class MethodNotFoundError(TaskServerError):
    """The requested tool does not exist."""

    code = METHOD_NOT_FOUND

    def __init__(self, tool_name: str):
        self.tool_name = tool_name
        super().__init__(f"Unknown tool: {tool_name}")


class InternalError(TaskServerError):
    """Anything that went wrong on the server side."""

    code = INTERNAL_ERROR

    @classmethod
    def unexpected(cls, error: BaseException) -> "InternalError":
        return cls(f"Unexpected error: {error}")


class GitHubApiError(InternalError):
    """Exception for GitHub API errors."""

    def __init__(
        self,
        reason: str,
        status_code: Optional[int] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        self.reason = reason
        self.status_code = status_code
        full_details = dict(details or {})
        if status_code:
            full_details["status_code"] = status_code
        super().__init__(f"GitHub API error: {reason}", full_details)


class RateLimitError(GitHubApiError):
    """Exception for GitHub API rate limit errors."""

    def __init__(
        self,
        reason: str,
        status_code: int,
        reset_at: Optional[str] = None,
        limit_remaining: int = 0
    ):
        details: Dict[str, Any] = {
            "limit_remaining": limit_remaining,
            "hint": "Set GITHUB_AUTH_TOKEN environment variable for higher rate limits (5000/hr vs 60/hr)"
        }
        if reset_at:
            details["resets_at"] = reset_at
        super().__init__(reason, status_code=status_code, details=details)
