from abc import ABC, abstractmethod

from zendesk_help_center.core.domain.help_center import ArticleResult, SearchResult


class HelpCenterTool(ABC):
    """Abstract contract for the two Help Center retrieval operations."""

    async def connect(self) -> None:
        """Open a persistent connection (no-op by default; MCP clients override)."""
        return

    async def disconnect(self) -> None:
        """Close the persistent connection (no-op by default; MCP clients override)."""
        return

    @abstractmethod
    async def search_articles(
        self,
        query: str,
        locale: str | None = None,
        page: int | str | None = None,
        per_page: int | str | None = None,
    ) -> SearchResult: ...

    @abstractmethod
    async def get_article(self, article_id: int, locale: str | None = None) -> ArticleResult: ...
