import logging
from typing import Any

from zendesk_help_center.core.domain.help_center import (
    Credentials,
    HelpCenterOperation,
    HelpCenterRequest,
    RetrievalDefaults,
)
from zendesk_help_center.core.exceptions import MalformedInputError

logger = logging.getLogger(__name__)


class HelpCenterRequestBuilder:
    """Builds GET descriptors for the Help Center search and article endpoints.

    Optional parameters are merged onto the configured defaults. Pagination
    values that are not positive integers fall back to the default instead of
    failing.
    """

    def __init__(self, credentials: Credentials, defaults: RetrievalDefaults) -> None:
        self._credentials = credentials
        self._defaults = defaults
        self.base_url = f"https://{credentials.subdomain}.zendesk.com/api/v2/help_center"

    def build_search(
        self,
        query: str,
        locale: str | None = None,
        page: Any = None,
        per_page: Any = None,
    ) -> HelpCenterRequest:
        params = {
            "query": query,
            "locale": locale or self._defaults.locale,
            "page": _positive_int_or_default("page", page, self._defaults.page),
            "per_page": _positive_int_or_default("per_page", per_page, self._defaults.per_page),
        }
        return HelpCenterRequest(
            operation=HelpCenterOperation.SEARCH,
            url=f"{self.base_url}/articles/search.json",
            params=params,
            auth=self._credentials.basic_auth,
        )

    def build_article(self, article_id: Any, locale: str | None = None) -> HelpCenterRequest:
        article_id = _require_article_id(article_id)
        return HelpCenterRequest(
            operation=HelpCenterOperation.ARTICLE,
            url=f"{self.base_url}/articles/{article_id}.json",
            params={"locale": locale or self._defaults.locale},
            auth=self._credentials.basic_auth,
        )


def parse_positive_int(value: Any) -> int | None:
    """Return ``value`` as a positive int, or ``None`` when it is not one."""
    number = _as_int(value)
    if number is None or number < 1:
        return None
    return number


def _positive_int_or_default(name: str, value: Any, default: int) -> int:
    if value is None:
        return default
    number = parse_positive_int(value)
    if number is None:
        logger.debug("Ignoring invalid %s value %r, using %d", name, value, default)
        return default
    return number


def _require_article_id(value: Any) -> int:
    article_id = _as_int(value)
    if article_id is None:
        raise MalformedInputError(f"Article ID must be numeric, got {value!r}")
    return article_id


def _as_int(value: Any) -> int | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if value.is_integer() else None
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            return None
    return None
