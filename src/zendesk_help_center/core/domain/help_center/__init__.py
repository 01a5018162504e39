from zendesk_help_center.core.domain.help_center.article_types import (
    ARTICLE_FIELDS,
    BODY_FIELD,
    ArticleResult,
    ProjectedArticle,
    RawArticle,
    SearchResult,
)
from zendesk_help_center.core.domain.help_center.credentials import Credentials
from zendesk_help_center.core.domain.help_center.help_center_request import (
    HelpCenterOperation,
    HelpCenterRequest,
)
from zendesk_help_center.core.domain.help_center.retrieval_defaults import RetrievalDefaults

__all__ = [
    "ARTICLE_FIELDS",
    "BODY_FIELD",
    "ArticleResult",
    "Credentials",
    "HelpCenterOperation",
    "HelpCenterRequest",
    "ProjectedArticle",
    "RawArticle",
    "RetrievalDefaults",
    "SearchResult",
]
