from zendesk_help_center.core.application.retrieval.help_center_request_builder import (
    HelpCenterRequestBuilder,
    parse_positive_int,
)
from zendesk_help_center.core.application.retrieval.help_center_retrieval_service import (
    HelpCenterRetrievalService,
)

__all__ = ["HelpCenterRequestBuilder", "HelpCenterRetrievalService", "parse_positive_int"]
