from zendesk_help_center.infrastructure.configuration.help_center_settings import (
    HelpCenterSettings,
    load_settings,
)

__all__ = ["HelpCenterSettings", "load_settings"]
