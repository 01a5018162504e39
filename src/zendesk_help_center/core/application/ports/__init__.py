from zendesk_help_center.core.application.ports.help_center_transport import HelpCenterTransport

__all__ = ["HelpCenterTransport"]
