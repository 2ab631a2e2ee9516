"""
Test Mocks
===========

Transport doubles for running endpoint functions without a network.
"""

import json
from typing import Any, Callable, Dict, List, Optional, Union

from plaid_income.core.client.connection import PlaidClient, RawResponse
from plaid_income.core.client.request import Request
from plaid_income.core.client.transport import PlaidTransport
from plaid_income.models.schemas import Result


def json_response(payload: Any, status: int = 200) -> RawResponse:
    """Build a raw response carrying ``payload`` as JSON."""
    return RawResponse(
        status=status,
        body=json.dumps(payload).encode("utf-8"),
        headers={"Content-Type": "application/json"},
    )


def failed_response(error: str = "ClientConnectorError: Connection refused") -> RawResponse:
    """Build a raw response for a request that never reached the server."""
    return RawResponse(status=None, error=error)


class MockTransport(PlaidTransport):
    """
    Transport double returning canned responses.

    Response handling is inherited from ``PlaidTransport`` so results match
    production behaviour; only the network call is replaced.
    """

    def __init__(self, responses: Optional[List[RawResponse]] = None):
        super().__init__()
        self._responses: List[RawResponse] = list(responses or [])
        self.requests: List[Request] = []
        self.clients: List[PlaidClient] = []
        self.decode_calls: int = 0

    def queue(self, response: Union[RawResponse, Dict[str, Any]], status: int = 200) -> "MockTransport":
        """Queue a response; mappings are serialized as JSON."""
        if not isinstance(response, RawResponse):
            response = json_response(response, status=status)
        self._responses.append(response)
        return self

    async def send_request(self, request: Request, client: PlaidClient) -> RawResponse:
        """Record the request and return the next queued response."""
        self.requests.append(request)
        self.clients.append(client)
        if self._responses:
            return self._responses.pop(0)
        return json_response({})

    def handle_response(self, response: RawResponse, decode_fn: Callable[[Any], Any]) -> Result:
        """Delegate to the real handler while counting decode calls."""

        def counting_decode(value: Any) -> Any:
            self.decode_calls += 1
            return decode_fn(value)

        return super().handle_response(response, counting_decode)

    @property
    def last_request(self) -> Request:
        return self.requests[-1]
