"""MCP stdio server exposing the Help Center retrieval operations as tools."""

import json
from typing import Annotated, Any

import structlog
from mcp.server.fastmcp import FastMCP
from mcp.server.fastmcp.exceptions import ToolError
from pydantic import Field

from zendesk_help_center import __version__
from zendesk_help_center.core.application.tools import HelpCenterTool
from zendesk_help_center.core.exceptions import HelpCenterError

logger = structlog.get_logger()

SERVER_NAME = "zendesk-help-center"
LOCALE_DESCRIPTION = "Locale code (e.g., 'ja', 'en-us')"


class HelpCenterToolHandlers:
    """Tool bodies: validate arguments, call the operation, serialize to JSON text."""

    def __init__(self, tool: HelpCenterTool) -> None:
        self._tool = tool

    async def search_articles(
        self,
        query: str,
        locale: str | None = None,
        page: int | None = None,
        per_page: int | None = None,
    ) -> str:
        if not query or not query.strip():
            raise ToolError("Search error: query must not be empty")
        try:
            result = await self._tool.search_articles(
                query, locale=locale, page=page, per_page=per_page
            )
        except HelpCenterError as exc:
            _log_tool_failure("searchArticles", exc)
            raise ToolError(f"Search error: {exc}") from exc
        return _to_json(result)

    async def get_article(self, article_id: int, locale: str | None = None) -> str:
        try:
            result = await self._tool.get_article(article_id, locale=locale)
        except HelpCenterError as exc:
            _log_tool_failure("getArticle", exc)
            raise ToolError(f"Article retrieval error: {exc}") from exc
        return _to_json(result)


def create_server(tool: HelpCenterTool) -> FastMCP:
    """Build the FastMCP server with the searchArticles and getArticle tools."""
    server = FastMCP(SERVER_NAME)
    handlers = HelpCenterToolHandlers(tool)

    @server.tool(name="searchArticles", description="Search for articles in Zendesk Help Center")
    async def search_articles(
        query: Annotated[str, Field(description="Search keyword")],
        locale: Annotated[str | None, Field(description=LOCALE_DESCRIPTION)] = None,
        page: Annotated[int | None, Field(description="Page number")] = None,
        per_page: Annotated[
            int | None, Field(description="Number of results per page (max 100)")
        ] = None,
    ) -> str:
        return await handlers.search_articles(query, locale=locale, page=page, per_page=per_page)

    @server.tool(
        name="getArticle",
        description="Get details of a specific Zendesk Help Center article by ID",
    )
    async def get_article(
        id: Annotated[int, Field(description="Article ID")],  # noqa: A002
        locale: Annotated[str | None, Field(description=LOCALE_DESCRIPTION)] = None,
    ) -> str:
        return await handlers.get_article(id, locale=locale)

    logger.info("MCP server created", server=SERVER_NAME, version=__version__)
    return server


def _to_json(result: Any) -> str:
    return json.dumps(result, indent=2, ensure_ascii=False)


def _log_tool_failure(tool_name: str, exc: HelpCenterError) -> None:
    logger.error(
        "MCP tool failed",
        tool_name=tool_name,
        error_type=type(exc).__name__,
        error_details=str(exc),
        source_system="ZendeskHelpCenter",
    )
