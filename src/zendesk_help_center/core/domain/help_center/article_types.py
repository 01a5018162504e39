"""Result shapes returned by the retrieval operations.

Projected articles are plain dicts so that an allow-listed field missing from
the raw record is absent from the output instead of being ``None``.
"""

from typing import Any, TypedDict

RawArticle = dict[str, Any]

ARTICLE_FIELDS: tuple[str, ...] = (
    "id",
    "url",
    "html_url",
    "author_id",
    "created_at",
    "updated_at",
    "title",
    "label_names",
)

BODY_FIELD = "body"


class ProjectedArticle(TypedDict, total=False):
    id: int
    url: str
    html_url: str
    author_id: int
    created_at: str
    updated_at: str
    title: str
    label_names: list[str]
    body: str | None


class SearchResult(TypedDict):
    results: list[ProjectedArticle]
    count: int
    next_page: str | None
    previous_page: str | None


class ArticleResult(TypedDict):
    article: ProjectedArticle
