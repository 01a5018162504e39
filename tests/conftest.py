from typing import Any

import pytest

from zendesk_help_center.core.application.ports import HelpCenterTransport
from zendesk_help_center.core.application.retrieval import HelpCenterRequestBuilder
from zendesk_help_center.core.domain.help_center import (
    Credentials,
    HelpCenterRequest,
    RetrievalDefaults,
)
from zendesk_help_center.infrastructure.configuration import HelpCenterSettings

BASE_URL = "https://acme.zendesk.com/api/v2/help_center"


class RecordingTransport(HelpCenterTransport):
    """In-memory transport: records every request and replays a payload or an error."""

    def __init__(self, payload: Any = None, error: Exception | None = None) -> None:
        self.payload = payload
        self.error = error
        self.requests: list[HelpCenterRequest] = []

    async def fetch(self, request: HelpCenterRequest) -> Any:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        return self.payload


@pytest.fixture
def credentials() -> Credentials:
    return Credentials(subdomain="acme", email="agent@acme.io", api_token="secret-token")


@pytest.fixture
def defaults() -> RetrievalDefaults:
    return RetrievalDefaults(locale="ja", page=1, per_page=20)


@pytest.fixture
def builder(credentials: Credentials, defaults: RetrievalDefaults) -> HelpCenterRequestBuilder:
    return HelpCenterRequestBuilder(credentials, defaults)


@pytest.fixture
def settings() -> HelpCenterSettings:
    return HelpCenterSettings(
        ZENDESK_SUBDOMAIN="acme",
        ZENDESK_EMAIL="agent@acme.io",
        ZENDESK_API_TOKEN="secret-token",
        DEFAULT_LOCALE="ja",
        _env_file=None,  # type: ignore[call-arg]
    )


@pytest.fixture
def make_transport() -> type[RecordingTransport]:
    return RecordingTransport
