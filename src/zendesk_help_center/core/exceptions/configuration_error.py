from __future__ import annotations

from zendesk_help_center.core.exceptions.help_center_error import HelpCenterError


class ConfigurationError(HelpCenterError):
    """Raised when configuration is invalid or incomplete."""
