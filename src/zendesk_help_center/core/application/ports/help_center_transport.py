from abc import ABC, abstractmethod
from typing import Any

from zendesk_help_center.core.domain.help_center import HelpCenterRequest


class HelpCenterTransport(ABC):
    """Port for issuing one Help Center request and returning its decoded JSON body."""

    @abstractmethod
    async def fetch(self, request: HelpCenterRequest) -> Any:
        """Raise RequestFailureError when the call does not succeed."""
