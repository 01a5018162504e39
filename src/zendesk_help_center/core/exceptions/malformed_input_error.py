from __future__ import annotations

from zendesk_help_center.core.exceptions.help_center_error import HelpCenterError


class MalformedInputError(HelpCenterError):
    """Raised when adapter input (console command or tool arguments) cannot be used."""

    def __init__(self, message: str, usage: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.usage = usage

    def __str__(self) -> str:
        return self.usage or self.message
