from zendesk_help_center.core.application.retrieval import (
    HelpCenterRequestBuilder,
    HelpCenterRetrievalService,
)
from zendesk_help_center.infrastructure.configuration import HelpCenterSettings
from zendesk_help_center.infrastructure.tools.help_center import HelpCenterHttpClient


def build_retrieval_service(settings: HelpCenterSettings) -> HelpCenterRetrievalService:
    """Wire settings → request builder + httpx transport → retrieval service."""
    builder = HelpCenterRequestBuilder(settings.credentials(), settings.retrieval_defaults())
    transport = HelpCenterHttpClient(timeout=settings.timeout_seconds)
    return HelpCenterRetrievalService(builder, transport)
