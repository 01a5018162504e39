import logging
from typing import Any

from zendesk_help_center.core.application.normalization import project_article
from zendesk_help_center.core.application.ports import HelpCenterTransport
from zendesk_help_center.core.application.retrieval.help_center_request_builder import (
    HelpCenterRequestBuilder,
)
from zendesk_help_center.core.application.tools import HelpCenterTool
from zendesk_help_center.core.domain.help_center import ArticleResult, SearchResult

logger = logging.getLogger(__name__)


class HelpCenterRetrievalService(HelpCenterTool):
    """Search and fetch Help Center articles, projected to a token-efficient shape.

    Each operation issues exactly one request through the transport. Failures
    surface as RequestFailureError and are never retried here.
    """

    def __init__(self, builder: HelpCenterRequestBuilder, transport: HelpCenterTransport) -> None:
        self._builder = builder
        self._transport = transport

    async def search_articles(
        self,
        query: str,
        locale: str | None = None,
        page: int | str | None = None,
        per_page: int | str | None = None,
    ) -> SearchResult:
        request = self._builder.build_search(query, locale=locale, page=page, per_page=per_page)
        payload = _as_dict(await self._transport.fetch(request))

        raw_results = payload.get("results")
        if not isinstance(raw_results, list):
            raw_results = []
        results = [project_article(raw, include_body=False) for raw in raw_results]
        logger.info("[HelpCenter] Search '%s' returned %d articles", query, len(results))
        return {
            "results": results,
            "count": payload.get("count", len(results)),
            "next_page": payload.get("next_page"),
            "previous_page": payload.get("previous_page"),
        }

    async def get_article(self, article_id: int, locale: str | None = None) -> ArticleResult:
        request = self._builder.build_article(article_id, locale=locale)
        payload = _as_dict(await self._transport.fetch(request))
        logger.info("[HelpCenter] Fetched article %s", article_id)
        return {"article": project_article(payload.get("article"), include_body=True)}


def _as_dict(payload: Any) -> dict[str, Any]:
    return payload if isinstance(payload, dict) else {}
