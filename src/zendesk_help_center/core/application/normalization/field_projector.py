"""Allow-list projection of raw Help Center articles."""

from typing import Any

from zendesk_help_center.core.application.normalization.html_normalizer import normalize_html
from zendesk_help_center.core.domain.help_center import ARTICLE_FIELDS, BODY_FIELD, ProjectedArticle


def project_article(raw: Any, include_body: bool) -> ProjectedArticle:
    """Keep only the allow-listed fields of ``raw``, copied verbatim.

    Fields missing from ``raw`` are left out rather than set to ``None``. The
    body key exists only when ``include_body`` is true, and then holds the
    normalized HTML. A body that is not a string is passed through unchanged.
    """
    source: dict[str, Any] = raw if isinstance(raw, dict) else {}
    projected: ProjectedArticle = {}
    for name in ARTICLE_FIELDS:
        if name in source:
            projected[name] = source[name]  # type: ignore[literal-required]
    if include_body:
        body = source.get(BODY_FIELD)
        if isinstance(body, str):
            body = normalize_html(body)
        projected[BODY_FIELD] = body  # type: ignore[literal-required]
    return projected
