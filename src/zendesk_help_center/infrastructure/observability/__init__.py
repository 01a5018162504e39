from zendesk_help_center.infrastructure.observability.logger_factory_service import (
    configure_logging,
)

__all__ = ["configure_logging"]
