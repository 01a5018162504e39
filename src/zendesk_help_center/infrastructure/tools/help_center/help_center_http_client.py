from typing import Any

import httpx
import structlog

from zendesk_help_center.core.application.ports import HelpCenterTransport
from zendesk_help_center.core.domain.help_center import HelpCenterRequest
from zendesk_help_center.core.exceptions import RequestFailureError

logger = structlog.get_logger()

DEFAULT_TIMEOUT_SECONDS = 30.0


class HelpCenterHttpClient(HelpCenterTransport):
    """httpx transport for the Help Center REST API.

    One short-lived AsyncClient per request. Every failure is translated into
    RequestFailureError with the httpx exception chained; nothing is retried.
    """

    def __init__(self, timeout: float = DEFAULT_TIMEOUT_SECONDS) -> None:
        self.timeout = timeout

    async def fetch(self, request: HelpCenterRequest) -> Any:
        operation = str(request.operation)
        logger.info(
            "Help Center request",
            operation=operation,
            url=request.url,
            params=request.params,
            source_system="ZendeskHelpCenter",
        )
        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.get(request.url, params=request.params, auth=request.auth)
            response.raise_for_status()
            payload = response.json()
        except httpx.HTTPStatusError as exc:
            status_code = exc.response.status_code
            self._log_failure(operation, "HTTPStatusError", f"HTTP {status_code}", status_code)
            raise RequestFailureError(
                operation=operation,
                message=f"HTTP {status_code} from {request.url}",
                status_code=status_code,
            ) from exc
        except httpx.HTTPError as exc:
            self._log_failure(operation, type(exc).__name__, str(exc))
            raise RequestFailureError(
                operation=operation,
                message=f"{type(exc).__name__} calling {request.url}: {exc}",
            ) from exc
        except ValueError as exc:
            self._log_failure(operation, "JSONDecodeError", str(exc), response.status_code)
            raise RequestFailureError(
                operation=operation,
                message=f"Response from {request.url} is not valid JSON",
                status_code=response.status_code,
            ) from exc

        logger.info(
            "Help Center request completed",
            operation=operation,
            status_code=response.status_code,
            source_system="ZendeskHelpCenter",
        )
        return payload

    @staticmethod
    def _log_failure(
        operation: str, error_type: str, details: str, status_code: int | None = None
    ) -> None:
        logger.error(
            "Help Center request failed",
            operation=operation,
            error_type=error_type,
            error_details=details,
            status_code=status_code,
            source_system="ZendeskHelpCenter",
        )
