"""GitHub API client for fetching issues."""

import logging
from typing import Any, Dict, Optional
from urllib.parse import quote

import httpx

from ..config import ServerConfig, get_github_headers
from ..utils.errors import GitHubApiError, RateLimitError
from ..utils.redact import safe_error_message
from .models import IssueCoordinates, IssueDetails


logger = logging.getLogger(__name__)


class GitHubClient:
    """Client for interacting with the GitHub API."""

    def __init__(self, config: ServerConfig):
        """
        Initialize the GitHub API client.

        Args:
            config: Server configuration holding the optional token,
                API base URL and request timeout
        """
        self.config = config
        self.base_url = config.api_base_url
        self.timeout = config.request_timeout
        logger.debug(
            f"GitHubClient initialized with {self.timeout}s timeout "
            f"({'authenticated' if config.authenticated else 'anonymous'})"
        )

    @staticmethod
    def _header_int(response: httpx.Response, name: str) -> Optional[int]:
        """Read a numeric header; proxies may send junk, which counts as absent."""
        value = (response.headers.get(name) or "").strip()
        return int(value) if value.isascii() and value.isdigit() else None

    def _extract_rate_limit_info(self, response: httpx.Response) -> Dict[str, Any]:
        """Extract rate limit information from response headers."""
        return {
            "limit": self._header_int(response, "X-RateLimit-Limit"),
            "remaining": self._header_int(response, "X-RateLimit-Remaining"),
            "reset": response.headers.get("X-RateLimit-Reset")
        }

    def _check_rate_limit(self, response: httpx.Response) -> None:
        """Check and log rate limit status from response headers."""
        rate_info = self._extract_rate_limit_info(response)
        remaining = rate_info.get("remaining")
        limit = rate_info.get("limit")

        if remaining is not None and limit:
            logger.debug(f"GitHub API rate limit: {remaining}/{limit} remaining")

            # Warn if approaching limit
            if remaining < limit * 0.1:  # Less than 10% remaining
                logger.warning(f"Approaching GitHub API rate limit: {remaining}/{limit}")

    @staticmethod
    def _error_reason(response: httpx.Response) -> str:
        """Pull the human-readable message out of a GitHub error response."""
        try:
            payload = response.json()
        except ValueError:
            payload = None

        if isinstance(payload, dict) and payload.get("message"):
            return str(payload["message"])
        return response.reason_phrase or f"HTTP {response.status_code}"

    def _raise_for_status(self, response: httpx.Response) -> None:
        """Map an error response onto GitHubApiError / RateLimitError."""
        if not response.is_error:
            return

        reason = self._error_reason(response)
        status = response.status_code

        if status in (403, 429):
            remaining = self._header_int(response, "X-RateLimit-Remaining")
            if "rate limit" in reason.lower() or remaining == 0:
                raise RateLimitError(
                    reason,
                    status_code=status,
                    reset_at=response.headers.get("X-RateLimit-Reset"),
                    limit_remaining=remaining or 0
                )

        raise GitHubApiError(reason, status_code=status)

    def _issue_url(self, coordinates: IssueCoordinates) -> str:
        owner = quote(coordinates.owner, safe="")
        repo = quote(coordinates.repo, safe="")
        return f"{self.base_url}/repos/{owner}/{repo}/issues/{coordinates.issue_number}"

    async def get_issue(self, coordinates: IssueCoordinates) -> IssueDetails:
        """
        Get a specific issue from a repository.

        Exactly one request is made; failures are not retried.

        Args:
            coordinates: Owner, repo and issue number

        Returns:
            IssueDetails object

        Raises:
            RateLimitError: If the rate limit is exhausted
            GitHubApiError: If the request fails for any other reason
        """
        url = self._issue_url(coordinates)
        logger.debug(f"Fetching issue {coordinates}")

        try:
            async with httpx.AsyncClient(
                timeout=self.timeout,
                follow_redirects=True
            ) as client:
                response = await client.get(url, headers=get_github_headers(self.config))
        except httpx.HTTPError as e:
            logger.debug(safe_error_message(e, f"Network error fetching {coordinates}"))
            raise GitHubApiError(str(e) or type(e).__name__) from e

        self._check_rate_limit(response)
        self._raise_for_status(response)

        try:
            data = response.json()
        except ValueError as e:
            raise GitHubApiError(f"Invalid JSON in response: {e}") from e

        return IssueDetails.from_api(data)
