"""MCP-stdio client that drives a running Help Center server.

Lets the console exercise the exact tool surface an LLM host sees: the server
script is launched as a subprocess and the two operations are forwarded as
``searchArticles`` / ``getArticle`` tool calls.
"""

import contextlib
import json
import os
import sys
from pathlib import Path
from typing import Any

import structlog
from mcp import McpError
from mcp.client.session import ClientSession
from mcp.client.stdio import StdioServerParameters, stdio_client

from zendesk_help_center.core.application.retrieval import parse_positive_int
from zendesk_help_center.core.application.tools import HelpCenterTool
from zendesk_help_center.core.domain.help_center import ArticleResult, SearchResult
from zendesk_help_center.core.exceptions import ConfigurationError, RequestFailureError

logger = structlog.get_logger()

_PROVIDER = "HelpCenterMCP"


class HelpCenterMcpClient(HelpCenterTool):
    """HelpCenterTool implementation backed by an MCP stdio session."""

    def __init__(self, server_script: str | None = None) -> None:
        self._server_script = server_script
        self._exit_stack: contextlib.AsyncExitStack | None = None
        self._session: ClientSession | None = None

    # ── MCP lifecycle ──

    async def connect(self) -> None:
        """Open a persistent MCP session via AsyncExitStack and list the server tools."""
        await self._ensure_session()

    async def _ensure_session(self) -> ClientSession:
        if self._session is not None:
            return self._session
        params = self._server_params()
        exit_stack = contextlib.AsyncExitStack()
        try:
            transport = await exit_stack.enter_async_context(stdio_client(params))
            session = await exit_stack.enter_async_context(ClientSession(*transport))
            await session.initialize()
            response = await session.list_tools()
        except (OSError, McpError) as exc:
            await exit_stack.aclose()
            logger.error(
                "Failed to open MCP session",
                command=params.command,
                error_type=type(exc).__name__,
                error_details=str(exc),
                source_system=_PROVIDER,
            )
            raise RequestFailureError(
                operation="connect", message=f"Could not start MCP server {params.command}: {exc}"
            ) from exc
        self._exit_stack = exit_stack
        self._session = session
        logger.info(
            "Persistent MCP session opened",
            tools=[tool.name for tool in response.tools],
            source_system=_PROVIDER,
        )
        return session

    async def disconnect(self) -> None:
        """Close the persistent MCP session and release subprocess resources."""
        if self._exit_stack is not None:
            await self._exit_stack.aclose()
            self._exit_stack = None
            self._session = None
            logger.info("Persistent MCP session closed", source_system=_PROVIDER)

    def _server_params(self) -> StdioServerParameters:
        """Launch the given server script, or this package's own server when none is set."""
        env = os.environ.copy()
        if self._server_script is None:
            return StdioServerParameters(
                command=sys.executable, args=["-m", "zendesk_help_center", "serve"], env=env
            )
        suffix = Path(self._server_script).suffix
        if suffix == ".py":
            command = sys.executable
        elif suffix == ".js":
            command = "node"
        else:
            raise ConfigurationError("Server script must be a .py or .js file")
        return StdioServerParameters(command=command, args=[self._server_script], env=env)

    # ── HelpCenterTool implementation ──

    async def search_articles(
        self,
        query: str,
        locale: str | None = None,
        page: int | str | None = None,
        per_page: int | str | None = None,
    ) -> SearchResult:
        # The tool takes ints; anything else is left out so the server defaults apply.
        arguments = _drop_none(
            {
                "query": query,
                "locale": locale,
                "page": parse_positive_int(page),
                "per_page": parse_positive_int(per_page),
            }
        )
        return await self._invoke_tool("searchArticles", arguments)

    async def get_article(self, article_id: int, locale: str | None = None) -> ArticleResult:
        arguments = _drop_none({"id": article_id, "locale": locale})
        return await self._invoke_tool("getArticle", arguments)

    # ── MCP call internals ──

    async def _invoke_tool(self, tool_name: str, arguments: dict[str, Any]) -> Any:
        """Call the tool on the open session and decode its JSON text content."""
        session = await self._ensure_session()
        logger.info("Invoking MCP tool", tool_name=tool_name, source_system=_PROVIDER)
        try:
            result = await session.call_tool(tool_name, arguments=arguments)
        except McpError as exc:
            raise RequestFailureError(
                operation=tool_name, message=f"MCP protocol error: {exc}"
            ) from exc

        text = _extract_text(result)
        if result.isError:
            logger.error(
                "MCP tool returned error",
                tool_name=tool_name,
                error_details=text,
                source_system=_PROVIDER,
            )
            raise RequestFailureError(operation=tool_name, message=text or "No detail")
        try:
            return json.loads(text)
        except json.JSONDecodeError as exc:
            raise RequestFailureError(
                operation=tool_name, message=f"Tool returned non-JSON content: {text[:200]}"
            ) from exc


def _extract_text(result: Any) -> str:
    """Extract plain text from an MCP CallToolResult safely."""
    if result.content:
        first = result.content[0]
        return getattr(first, "text", str(first))
    return ""


def _drop_none(arguments: dict[str, Any]) -> dict[str, Any]:
    return {key: value for key, value in arguments.items() if value is not None}
