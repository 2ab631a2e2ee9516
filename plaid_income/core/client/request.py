"""
Request Builder
===============

Immutable request value handed to a transport, and the helpers that build it.
"""

from typing import Any, Dict, Literal, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from plaid_income.config.settings import get_settings


# Per-call config entries that never travel as request metadata
PRIVATE_CONFIG_KEYS = frozenset({"client", "secret"})


class Request(BaseModel):
    """Outbound API request."""
    method: Literal["get", "post", "put", "patch", "delete"] = Field("post", description="HTTP verb")
    endpoint: str = Field(..., description="Path relative to the API root, e.g. income/get")
    body: Dict[str, Any] = Field(default_factory=dict, description="JSON body parameters")
    headers: Dict[str, str] = Field(default_factory=dict, description="Extra HTTP headers")
    metadata: Dict[str, Any] = Field(default_factory=dict, description="Per-call metadata")

    model_config = ConfigDict(frozen=True)

    @field_validator("method", mode="before")
    @classmethod
    def normalize_method(cls, v):
        """Accept HTTP verbs in any case."""
        return v.lower() if isinstance(v, str) else v


def build_request(endpoint: str, body: Optional[Mapping[str, Any]] = None, method: str = "post") -> Request:
    """
    Build a request for ``endpoint``.

    The body is copied as given. Required parameters are the provider's
    concern and are not checked here.
    """
    return Request(method=method, endpoint=endpoint, body=dict(body or {}))


def add_metadata(request: Request, config: Optional[Mapping[str, Any]] = None) -> Request:
    """
    Merge per-call configuration into a request.

    Args:
        request: Request to extend
        config: Endpoint configuration mapping

    Returns:
        New request carrying the metadata and version header
    """
    config = config or {}
    metadata = {**request.metadata}
    metadata.update({k: v for k, v in config.items() if k not in PRIVATE_CONFIG_KEYS})

    headers = {**request.headers}
    plaid_version = config.get("plaid_version", get_settings().plaid_version)
    if plaid_version:
        headers["Plaid-Version"] = str(plaid_version)

    return request.model_copy(update={"metadata": metadata, "headers": headers})
