from zendesk_help_center.infrastructure.tools.help_center.help_center_http_client import (
    HelpCenterHttpClient,
)
from zendesk_help_center.infrastructure.tools.help_center.help_center_mcp_client import (
    HelpCenterMcpClient,
)

__all__ = ["HelpCenterHttpClient", "HelpCenterMcpClient"]
