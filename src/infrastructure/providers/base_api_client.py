"""Base API client for third-party HTTP services.

Shared by the Supabase Auth adapter and the Resend email adapter:
- HTTP request execution with timeout/connection error handling
- Response status code interpretation
- JSON parsing with error handling
- Structured logging with service context

Subclasses provide authentication headers and translate failures into their
protocol's error type through two hooks (``_rejected_error`` and
``_unavailable_error``).

Architecture:
    - Infrastructure layer (adapter for external APIs)
    - Uses httpx for async HTTP
    - Returns Result types (no exceptions for expected failures)
"""

from typing import Any

import httpx
import structlog

from src.core.errors import DomainError
from src.core.result import Failure, Result, Success

DEFAULT_TIMEOUT_SECONDS = 10.0
RESPONSE_BODY_MAX_LENGTH = 500


class BaseAPIClient:
    """Base class for API clients with shared HTTP handling.

    Attributes:
        _base_url: Service base URL (without trailing slash).
        _service_name: Service identifier for logging and error messages.
        _timeout: HTTP request timeout in seconds.
        _transport: Optional httpx transport (tests).
        _logger: Structured logger with service context.
    """

    def __init__(
        self,
        *,
        base_url: str,
        service_name: str,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize base API client.

        Args:
            base_url: Service base URL.
            service_name: Service identifier ("supabase", "resend").
            timeout: HTTP request timeout in seconds.
            transport: Optional custom transport.
        """
        self._base_url = base_url.rstrip("/")
        self._service_name = service_name
        self._timeout = timeout
        self._transport = transport
        self._logger = structlog.get_logger(f"{service_name}_api")

    # -------------------------------------------------------------------------
    # Hooks
    # -------------------------------------------------------------------------

    def _rejected_error(self, message: str, status_code: int) -> DomainError:
        """Build the error returned when the service refuses a request."""
        raise NotImplementedError

    def _unavailable_error(
        self, message: str, status_code: int | None = None
    ) -> DomainError:
        """Build the error returned when the service cannot be reached."""
        raise NotImplementedError

    # -------------------------------------------------------------------------
    # HTTP
    # -------------------------------------------------------------------------

    async def _execute_request(
        self,
        *,
        method: str,
        path: str,
        headers: dict[str, str],
        params: dict[str, str] | None = None,
        json_data: dict[str, Any] | None = None,
        operation: str,
    ) -> Result[httpx.Response, DomainError]:
        """Execute HTTP request with error handling.

        Args:
            method: HTTP method (GET, POST, DELETE, ...).
            path: URL path relative to base_url.
            headers: HTTP headers including authentication.
            params: Optional query parameters.
            json_data: Optional JSON body.
            operation: Operation name for logging.

        Returns:
            Success(httpx.Response): Raw response (any status).
            Failure(DomainError): On timeout or connection error.
        """
        url = f"{self._base_url}{path}"

        try:
            async with httpx.AsyncClient(
                timeout=self._timeout, transport=self._transport
            ) as client:
                response = await client.request(
                    method=method,
                    url=url,
                    headers=headers,
                    params=params,
                    json=json_data,
                )
            return Success(value=response)

        except httpx.TimeoutException as e:
            self._logger.warning(
                f"{self._service_name}_api_timeout",
                operation=operation,
                error=str(e),
            )
            return Failure(
                error=self._unavailable_error(
                    f"{self._service_name.title()} API request timed out"
                )
            )

        except httpx.RequestError as e:
            self._logger.warning(
                f"{self._service_name}_api_connection_error",
                operation=operation,
                error=str(e),
            )
            return Failure(
                error=self._unavailable_error(
                    f"Failed to connect to {self._service_name.title()} API: {e}"
                )
            )

    def _check_error_response(
        self,
        response: httpx.Response,
        operation: str,
    ) -> Failure[DomainError] | None:
        """Map a non-2xx response to a Failure.

        Args:
            response: HTTP response to check.
            operation: Operation name for logging.

        Returns:
            Failure if the status is an error, None for 2xx.
        """
        status = response.status_code

        if 200 <= status < 300:
            return None

        if status >= 500:
            self._logger.warning(
                f"{self._service_name}_api_server_error",
                operation=operation,
                status_code=status,
            )
            return Failure(
                error=self._unavailable_error(
                    f"{self._service_name.title()} API server error: {status}",
                    status_code=status,
                )
            )

        message = self._extract_error_message(response)
        self._logger.warning(
            f"{self._service_name}_api_rejected",
            operation=operation,
            status_code=status,
            reason=message,
        )
        return Failure(error=self._rejected_error(message, status))

    def _parse_json_object(
        self,
        response: httpx.Response,
        operation: str,
    ) -> Result[dict[str, Any], DomainError]:
        """Parse response as JSON object with error handling.

        Empty 2xx bodies parse to ``{}``.

        Args:
            response: HTTP response to parse.
            operation: Operation name for logging.

        Returns:
            Success(dict) or Failure(DomainError).
        """
        error_result = self._check_error_response(response, operation)
        if error_result is not None:
            return error_result

        if not response.content:
            return Success(value={})

        try:
            data = response.json()
        except ValueError as e:
            self._logger.error(
                f"{self._service_name}_api_invalid_json",
                operation=operation,
                error=str(e),
            )
            return Failure(
                error=self._rejected_error(
                    f"Invalid JSON response from {self._service_name.title()}",
                    response.status_code,
                )
            )

        if not isinstance(data, dict):
            return Failure(
                error=self._rejected_error(
                    f"Expected object response from {self._service_name.title()}",
                    response.status_code,
                )
            )

        self._logger.debug(f"{self._service_name}_api_succeeded", operation=operation)
        return Success(value=data)

    async def _execute_and_parse_object(
        self,
        *,
        method: str,
        path: str,
        headers: dict[str, str],
        params: dict[str, str] | None = None,
        json_data: dict[str, Any] | None = None,
        operation: str,
    ) -> Result[dict[str, Any], DomainError]:
        """Execute request and parse response as JSON object."""
        result = await self._execute_request(
            method=method,
            path=path,
            headers=headers,
            params=params,
            json_data=json_data,
            operation=operation,
        )

        if isinstance(result, Failure):
            return result

        return self._parse_json_object(result.value, operation)

    @staticmethod
    def _extract_error_message(response: httpx.Response) -> str:
        """Best human-readable message from an error body."""
        try:
            body = response.json()
        except ValueError:
            return response.text[:RESPONSE_BODY_MAX_LENGTH] or f"HTTP {response.status_code}"

        if isinstance(body, dict):
            for key in ("msg", "message", "error_description", "error"):
                value = body.get(key)
                if isinstance(value, str) and value:
                    return value
        return f"HTTP {response.status_code}"
