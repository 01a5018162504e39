from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any


class HelpCenterOperation(StrEnum):
    SEARCH = "search"
    ARTICLE = "article"


@dataclass(frozen=True)
class HelpCenterRequest:
    """Descriptor of one outbound GET call. Credentials never appear in its repr."""

    operation: HelpCenterOperation
    url: str
    params: dict[str, Any]
    auth: tuple[str, str] = field(repr=False)
