"""
Plaid HTTP Client
=================

aiohttp-backed client handle. Holds the resolved base URL, credentials and
timeouts for one endpoint call and opens a fresh session per request.
"""

import aiohttp
from typing import Optional, Dict, Any, Mapping

from pydantic import BaseModel, Field

from plaid_income import __version__
from plaid_income.config.logging import get_logger
from plaid_income.config.settings import PLAID_ENVIRONMENTS, get_settings
from .request import Request

logger = get_logger(__name__)


class RawResponse(BaseModel):
    """Undecoded HTTP response, or the reason no response was received."""
    status: Optional[int] = Field(None, description="HTTP status, None when the call failed")
    body: bytes = Field(b"", description="Raw response body")
    headers: Dict[str, str] = Field(default_factory=dict)
    error: Optional[str] = Field(None, description="Transport failure description")

    @property
    def is_success(self) -> bool:
        return self.status is not None and 200 <= self.status < 300


class PlaidClient:
    """Client handle for sending requests to the Plaid API."""

    def __init__(
        self,
        root_uri: str,
        client_id: Optional[str] = None,
        secret: Optional[str] = None,
        request_timeout: float = 30.0,
        connect_timeout: float = 10.0,
    ):
        self.root_uri = root_uri if root_uri.endswith("/") else root_uri + "/"
        self.client_id = client_id
        self.secret = secret
        self.request_timeout = request_timeout
        self.connect_timeout = connect_timeout
        self.logger: Any = logger.bind(component="plaid_client")  # structlog.BoundLoggerBase

    def url_for(self, endpoint: str) -> str:
        """Absolute URL for an endpoint path."""
        return self.root_uri + endpoint.lstrip("/")

    def payload_for(self, request: Request) -> Dict[str, Any]:
        """Request body with credentials added unless the caller set them."""
        payload = dict(request.body)
        if self.client_id is not None:
            payload.setdefault("client_id", self.client_id)
        if self.secret is not None:
            payload.setdefault("secret", self.secret)
        return payload

    async def post(self, request: Request) -> RawResponse:
        """
        Send ``request`` and read the full response.

        Raises:
            aiohttp.ClientError: On connection or protocol failures
            asyncio.TimeoutError: When the request exceeds its timeout
        """
        url = self.url_for(request.endpoint)
        headers = {"User-Agent": f"plaid-income/{__version__}", **request.headers}
        timeout = aiohttp.ClientTimeout(total=self.request_timeout, connect=self.connect_timeout)

        async with aiohttp.ClientSession(timeout=timeout) as session:
            async with session.request(
                request.method.upper(), url, json=self.payload_for(request), headers=headers
            ) as response:
                body = await response.read()
                self.logger.debug(
                    "Plaid response received",
                    endpoint=request.endpoint,
                    status=response.status,
                    size=len(body),
                )
                return RawResponse(
                    status=response.status, body=body, headers=dict(response.headers)
                )


def new_client(config: Optional[Mapping[str, Any]] = None) -> PlaidClient:
    """
    Build a client handle from per-call config, falling back to settings.

    Recognized keys: ``root_uri``, ``environment``, ``client_id``, ``secret``,
    ``request_timeout``, ``connect_timeout``.
    """
    config = config or {}
    settings = get_settings()

    root_uri = config.get("root_uri")
    if not root_uri and "environment" in config:
        environment = str(config["environment"]).lower()
        if environment not in PLAID_ENVIRONMENTS:
            raise ValueError(f"Environment must be one of: {set(PLAID_ENVIRONMENTS)}")
        root_uri = PLAID_ENVIRONMENTS[environment]

    return PlaidClient(
        root_uri=root_uri or settings.base_url,
        client_id=config.get("client_id", settings.client_id),
        secret=config.get("secret", settings.secret),
        request_timeout=config.get("request_timeout", settings.request_timeout),
        connect_timeout=config.get("connect_timeout", settings.connect_timeout),
    )
