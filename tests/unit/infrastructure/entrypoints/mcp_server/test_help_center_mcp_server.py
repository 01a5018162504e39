"""Unit tests — MCP server tool registration and handlers."""

import json

import pytest
from mcp.server.fastmcp.exceptions import ToolError

from zendesk_help_center.core.application.retrieval import HelpCenterRetrievalService
from zendesk_help_center.core.exceptions import RequestFailureError
from zendesk_help_center.infrastructure.entrypoints.mcp_server import (
    HelpCenterToolHandlers,
    create_server,
)


@pytest.fixture
def search_payload() -> dict:
    return {
        "results": [{"id": 1, "title": "Billing", "body": "<p>x</p>", "draft": False}],
        "count": 1,
        "next_page": None,
    }


class TestServerRegistration:
    async def test_registers_both_tools(self, builder, make_transport) -> None:
        server = create_server(HelpCenterRetrievalService(builder, make_transport({})))

        tools = {tool.name: tool for tool in await server.list_tools()}

        assert set(tools) == {"searchArticles", "getArticle"}
        assert tools["searchArticles"].inputSchema["required"] == ["query"]
        assert tools["getArticle"].inputSchema["required"] == ["id"]
        assert set(tools["searchArticles"].inputSchema["properties"]) == {
            "query",
            "locale",
            "page",
            "per_page",
        }


class TestSearchHandler:
    async def test_returns_projected_json_text(self, builder, make_transport, search_payload) -> None:
        transport = make_transport(search_payload)
        handlers = HelpCenterToolHandlers(HelpCenterRetrievalService(builder, transport))

        text = await handlers.search_articles("billing", per_page=5)

        assert json.loads(text) == {
            "results": [{"id": 1, "title": "Billing"}],
            "count": 1,
            "next_page": None,
            "previous_page": None,
        }
        assert transport.requests[0].params["per_page"] == 5

    @pytest.mark.parametrize("query", ["", "   "])
    async def test_rejects_empty_query(self, builder, make_transport, query: str) -> None:
        transport = make_transport({})
        handlers = HelpCenterToolHandlers(HelpCenterRetrievalService(builder, transport))

        with pytest.raises(ToolError, match="query must not be empty"):
            await handlers.search_articles(query)

        assert transport.requests == []

    async def test_request_failure_becomes_tool_error(self, builder, make_transport) -> None:
        transport = make_transport(error=RequestFailureError("search", "HTTP 503", status_code=503))
        handlers = HelpCenterToolHandlers(HelpCenterRetrievalService(builder, transport))

        with pytest.raises(ToolError, match="^Search error: search: HTTP 503"):
            await handlers.search_articles("billing")


class TestArticleHandler:
    async def test_returns_article_with_clean_body(self, builder, make_transport) -> None:
        transport = make_transport({"article": {"id": 9, "body": "<p> </p><p>Hi</p>", "draft": True}})
        handlers = HelpCenterToolHandlers(HelpCenterRetrievalService(builder, transport))

        text = await handlers.get_article(9, locale="en-us")

        assert json.loads(text) == {"article": {"id": 9, "body": "<p>Hi</p>"}}

    async def test_request_failure_becomes_tool_error(self, builder, make_transport) -> None:
        transport = make_transport(error=RequestFailureError("article", "HTTP 404", status_code=404))
        handlers = HelpCenterToolHandlers(HelpCenterRetrievalService(builder, transport))

        with pytest.raises(ToolError, match="^Article retrieval error"):
            await handlers.get_article(999)

        assert len(transport.requests) == 1
