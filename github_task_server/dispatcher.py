"""Tool catalog and request dispatch for the get_issue_task tool."""

import logging
from typing import Any, Dict, List, Optional

from mcp import types
from mcp.server.lowlevel import Server
from mcp.shared.exceptions import McpError

from .config import SERVER_NAME
from .github.client import GitHubClient
from .github.models import TaskPayload
from .github.url_parser import parse_issue_url
from .task.formatter import format_task, render_task
from .utils.errors import (
    MISSING_URL_MESSAGE,
    InternalError,
    InvalidParamsError,
    MethodNotFoundError,
)


logger = logging.getLogger(__name__)

GET_ISSUE_TASK = "get_issue_task"

GET_ISSUE_TASK_TOOL = types.Tool(
    name=GET_ISSUE_TASK,
    description="Fetch GitHub issue details to use as a task",
    inputSchema={
        "type": "object",
        "properties": {
            "url": {
                "type": "string",
                "description": "GitHub issue URL (https://github.com/owner/repo/issues/number)",
            },
        },
        "required": ["url"],
    },
    annotations=types.ToolAnnotations(
        title="Get Issue Task",
        readOnlyHint=True,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=True,
    ),
)


class TaskDispatcher:
    """Routes tool calls to the issue -> task pipeline.

    Holds no mutable state besides the (read-only) GitHub client, so
    concurrent calls are independent of each other.
    """

    def __init__(self, client: GitHubClient):
        self.client = client

    def list_tools(self) -> List[types.Tool]:
        return [GET_ISSUE_TASK_TOOL]

    async def get_issue_task(self, url: str) -> TaskPayload:
        """Parse the URL, fetch the issue and reshape it into a task."""
        coordinates = parse_issue_url(url)
        issue = await self.client.get_issue(coordinates)
        return format_task(issue)

    async def call_tool(
        self,
        name: str,
        arguments: Optional[Dict[str, Any]]
    ) -> List[types.TextContent]:
        """
        Handle a call-tool request.

        Args:
            name: Requested tool name
            arguments: Tool arguments from the request

        Returns:
            A single text content item holding the task JSON

        Raises:
            MethodNotFoundError: If the tool name is unknown
            InvalidParamsError: If the URL is missing or malformed
            InternalError: For GitHub API failures and anything unexpected
        """
        if name != GET_ISSUE_TASK:
            raise MethodNotFoundError(name)

        url = (arguments or {}).get("url")
        if not url:
            raise InvalidParamsError(MISSING_URL_MESSAGE)

        logger.debug(f"{GET_ISSUE_TASK} called: url={url}")

        try:
            payload = await self.get_issue_task(url)
        except McpError:
            raise
        except Exception as e:
            logger.error(f"Unexpected error handling {GET_ISSUE_TASK}: {e}", exc_info=True)
            raise InternalError.unexpected(e) from e

        return [types.TextContent(type="text", text=render_task(payload))]


def build_server(dispatcher: TaskDispatcher, version: Optional[str] = None) -> Server:
    """
    Create the MCP server and register the tool handlers.

    Args:
        dispatcher: Dispatcher serving list-tools and call-tool requests
        version: Server version advertised during initialization

    Returns:
        Configured low-level MCP server
    """
    server = Server(SERVER_NAME, version=version)

    @server.list_tools()
    async def list_tools() -> List[types.Tool]:
        return dispatcher.list_tools()

    async def call_tool(request: types.CallToolRequest) -> types.ServerResult:
        content = await dispatcher.call_tool(request.params.name, request.params.arguments)
        return types.ServerResult(types.CallToolResult(content=content))

    # Registered directly: the @server.call_tool() decorator reports raised
    # errors as tool results, but these must reach the client as JSON-RPC
    # errors with their InvalidParams / MethodNotFound / InternalError codes.
    server.request_handlers[types.CallToolRequest] = call_tool

    return server
