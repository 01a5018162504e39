from zendesk_help_center.infrastructure.entrypoints.mcp_server.help_center_mcp_server import (
    HelpCenterToolHandlers,
    create_server,
)

__all__ = ["HelpCenterToolHandlers", "create_server"]
