"""
Transport Seam
==============

Interface used by endpoint functions to send a request and interpret the
response, plus the default implementation backed by ``PlaidClient``.

Any object implementing ``Transport`` can be passed as ``config["client"]``
to an endpoint function, which is how tests run without a network.
"""

import asyncio
import json
from abc import ABC, abstractmethod
from typing import Any, Callable

import aiohttp

from plaid_income.config.logging import get_logger
from plaid_income.models.schemas import PlaidError, Result
from .connection import PlaidClient, RawResponse
from .request import Request

logger = get_logger(__name__)


class Transport(ABC):
    """Abstract transport capability."""

    @abstractmethod
    async def send_request(self, request: Request, client: PlaidClient) -> RawResponse:
        """Send ``request`` using ``client`` and return the raw response."""
        pass

    @abstractmethod
    def handle_response(self, response: RawResponse, decode_fn: Callable[[Any], Any]) -> Result:
        """Turn a raw response into a decoded success or an error result."""
        pass


class PlaidTransport(Transport):
    """Default transport sending requests over HTTP."""

    def __init__(self) -> None:
        self.logger: Any = logger.bind(component="plaid_transport")  # structlog.BoundLoggerBase

    async def send_request(self, request: Request, client: PlaidClient) -> RawResponse:
        """
        Send a request, converting connection failures into a response value.

        Args:
            request: Request to send
            client: Client handle for this call

        Returns:
            RawResponse, with ``error`` set when no HTTP response was received
        """
        self.logger.debug(
            "Sending Plaid request", method=request.method, endpoint=request.endpoint
        )
        try:
            return await client.post(request)
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            error_msg = f"{type(e).__name__}: {e}" if str(e) else type(e).__name__
            self.logger.error(
                "Plaid request failed", endpoint=request.endpoint, error=error_msg
            )
            return RawResponse(status=None, error=error_msg)

    def handle_response(self, response: RawResponse, decode_fn: Callable[[Any], Any]) -> Result:
        """
        Interpret a raw response.

        Args:
            response: Response returned by ``send_request``
            decode_fn: Applied to the parsed body of a successful response

        Returns:
            Result holding the decoded value or a PlaidError
        """
        if response.status is None:
            return Result.failure(
                PlaidError(
                    error_type="TRANSPORT_ERROR",
                    error_message=response.error or "No response received",
                )
            )

        if not response.is_success:
            error = error_from_body(response.status, response.body)
            self.logger.warning(
                "Plaid returned an error",
                status=response.status,
                error_type=error.error_type,
                error_code=error.error_code,
                request_id=error.request_id,
            )
            return Result.failure(error)

        try:
            body = json.loads(response.body) if response.body else {}
        except ValueError as e:
            self.logger.error("Invalid JSON in Plaid response", status=response.status, error=str(e))
            return Result.failure(
                PlaidError(
                    error_type="INVALID_RESPONSE",
                    error_message=f"Response body is not valid JSON: {e}",
                    status_code=response.status,
                )
            )

        return Result.success(decode_fn(body))


def error_from_body(status: int, body: bytes) -> PlaidError:
    """Build a PlaidError from a non-2xx response body."""
    try:
        data = json.loads(body) if body else {}
    except ValueError:
        data = {}

    if not isinstance(data, dict):
        data = {}

    known = {k: v for k, v in data.items() if k in PlaidError.model_fields and v is not None}
    known["status_code"] = status
    error = PlaidError.model_construct(**known)

    if error.error_message is None and not data:
        text = body.decode("utf-8", errors="replace").strip()
        error = error.model_copy(update={"error_message": text or f"HTTP {status}"})
    return error


# Registered once at import; endpoint calls without config["client"] use it
DEFAULT_TRANSPORT: Transport = PlaidTransport()


def get_default_transport() -> Transport:
    """Get the process-wide default transport."""
    return DEFAULT_TRANSPORT
