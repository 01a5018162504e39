from __future__ import annotations

from zendesk_help_center.core.exceptions.help_center_error import HelpCenterError


class RequestFailureError(HelpCenterError):
    """The outbound Help Center call did not complete successfully.

    Covers connection errors, timeouts, non-2xx responses and undecodable
    bodies. The transport exception is chained as ``__cause__``.
    """

    def __init__(self, operation: str, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.operation = operation
        self.message = message
        self.status_code = status_code

    def __str__(self) -> str:
        code = f" status={self.status_code}" if self.status_code is not None else ""
        return f"{self.operation}: {self.message}{code}"
