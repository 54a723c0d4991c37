"""GitHub Task MCP Server.

A local MCP server exposing one tool, get_issue_task, which turns a
GitHub issue URL into a task (title, description, source) for an agent
to work on. Speaks MCP over stdio.
"""

import asyncio
import logging
import os
import signal
import sys
from importlib.metadata import PackageNotFoundError, version as package_version
from pathlib import Path

# Add parent directory to Python path to support running directly
# This allows: python github_task_server/server.py from the project root
if __name__ == "__main__":
    parent_dir = str(Path(__file__).parent.parent)
    if parent_dir not in sys.path:
        sys.path.insert(0, parent_dir)

import anyio
from dotenv import load_dotenv
from mcp.server.lowlevel import Server
from mcp.server.stdio import stdio_server
from pydantic import ValidationError

from github_task_server.config import PACKAGE_NAME, ServerConfig
from github_task_server.dispatcher import TaskDispatcher, build_server
from github_task_server.github.client import GitHubClient
from github_task_server.utils.logging_config import setup_logging, get_logger

logger = get_logger(__name__)


class StartupError(Exception):
    """The server could not be brought up."""


def get_version() -> str:
    """Read the server version from the installed package metadata."""
    try:
        return package_version(PACKAGE_NAME)
    except PackageNotFoundError as e:
        raise StartupError(f"Could not read package metadata for {PACKAGE_NAME}") from e


def create_server(config: ServerConfig) -> Server:
    """
    Wire up the GitHub client, dispatcher and MCP server.

    Args:
        config: Startup configuration

    Returns:
        MCP server ready to run
    """
    client = GitHubClient(config)
    dispatcher = TaskDispatcher(client)
    return build_server(dispatcher, version=get_version())


async def _exit_on_interrupt(*, task_status=anyio.TASK_STATUS_IGNORED) -> None:
    """Exit with status 0 on SIGINT without waiting for the stdin reader."""
    with anyio.open_signal_receiver(signal.SIGINT) as signals:
        task_status.started()
        async for _ in signals:
            logger.info("Server shutdown requested")
            sys.stdout.flush()
            logging.shutdown()
            # The stdio transport reads stdin from a worker thread that only
            # returns on EOF, so unwinding would block until the client hangs up.
            os._exit(0)


async def serve(server: Server) -> None:
    """Run the server over stdio until the client disconnects or SIGINT arrives."""
    async with stdio_server() as (read_stream, write_stream):
        async with anyio.create_task_group() as tg:
            await tg.start(_exit_on_interrupt)
            logger.info("GitHub Task MCP server running on stdio")
            await server.run(
                read_stream,
                write_stream,
                server.create_initialization_options()
            )
            tg.cancel_scope.cancel()


def main() -> None:
    """Entry point for the github-task-mcp console script."""
    load_dotenv(override=False)

    try:
        config = ServerConfig.from_env()
    except ValidationError as e:
        setup_logging()
        logger.error(f"Invalid configuration: {e}")
        sys.exit(1)

    setup_logging(log_level=config.log_level, log_file=config.log_file)

    if config.authenticated:
        logger.info("GitHub token configured")
    else:
        logger.warning("No GITHUB_AUTH_TOKEN set - using unauthenticated API (60 req/hour limit)")

    try:
        server = create_server(config)
    except StartupError as e:
        logger.error(f"Failed to start server: {e}", exc_info=True)
        sys.exit(1)

    try:
        asyncio.run(serve(server))
    except KeyboardInterrupt:
        logger.info("Server shutdown requested")
    except Exception as e:
        logger.error(f"Server error: {e}", exc_info=True)
        sys.exit(1)


# ============================================================================
# Server Entry Point
# ============================================================================

if __name__ == "__main__":
    main()
