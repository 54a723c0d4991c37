"""Configuration and constants for the GitHub Task MCP server."""

import os
from typing import Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field

# Server identity
SERVER_NAME = "github-issue-server"
PACKAGE_NAME = "github-task-mcp"

# GitHub API Configuration
GITHUB_API_BASE = "https://api.github.com"
GITHUB_API_VERSION = "2022-11-28"
DEFAULT_TIMEOUT = 30.0
USER_AGENT = "github-task-mcp"

# Environment variables
TOKEN_ENV = "GITHUB_AUTH_TOKEN"
API_URL_ENV = "GITHUB_API_URL"
TIMEOUT_ENV = "GITHUB_TIMEOUT"
LOG_LEVEL_ENV = "LOG_LEVEL"
LOG_FILE_ENV = "LOG_FILE"


class ServerConfig(BaseModel):
    """Process-wide settings, read once at startup and never mutated."""

    model_config = ConfigDict(frozen=True)

    github_token: Optional[str] = Field(default=None, repr=False)
    api_base_url: str = GITHUB_API_BASE
    request_timeout: float = Field(default=DEFAULT_TIMEOUT, gt=0)
    log_level: str = "INFO"
    log_file: Optional[str] = None

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "ServerConfig":
        """
        Build the configuration from environment variables.

        Args:
            environ: Mapping to read from (defaults to os.environ)

        Returns:
            ServerConfig instance
        """
        env = os.environ if environ is None else environ

        token = (env.get(TOKEN_ENV) or "").strip() or None
        base_url = (env.get(API_URL_ENV) or "").strip() or GITHUB_API_BASE

        values = {
            "github_token": token,
            "api_base_url": base_url.rstrip("/"),
            "log_level": (env.get(LOG_LEVEL_ENV) or "INFO").strip().upper(),
            "log_file": (env.get(LOG_FILE_ENV) or "").strip() or None,
        }
        if env.get(TIMEOUT_ENV):
            values["request_timeout"] = env[TIMEOUT_ENV]

        return cls(**values)

    @property
    def authenticated(self) -> bool:
        return self.github_token is not None


def get_github_headers(config: ServerConfig) -> dict:
    """Get GitHub API headers with optional authentication."""
    headers = {
        "Accept": "application/vnd.github+json",
        "X-GitHub-Api-Version": GITHUB_API_VERSION,
        "User-Agent": USER_AGENT,
    }
    if config.github_token:
        headers["Authorization"] = f"Bearer {config.github_token}"
    return headers
