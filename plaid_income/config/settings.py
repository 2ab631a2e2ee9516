"""
Client Settings
===============

Plaid credentials and HTTP client settings using Pydantic Settings.
Values come from ``PLAID_*`` environment variables or a ``.env`` file and
can be overridden per call through the endpoint ``config`` mapping.
"""

from typing import Optional
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


PLAID_ENVIRONMENTS = {
    "sandbox": "https://sandbox.plaid.com/",
    "development": "https://development.plaid.com/",
    "production": "https://production.plaid.com/",
}


class PlaidSettings(BaseSettings):
    """Plaid client settings with environment variable support."""

    # Credentials
    client_id: Optional[str] = Field(default=None, description="Plaid client id")
    secret: Optional[str] = Field(default=None, description="Plaid secret")

    # API Configuration
    environment: str = Field(
        default="sandbox", description="Plaid environment: sandbox, development, production"
    )
    root_uri: Optional[str] = Field(
        default=None, description="Base URL override, takes precedence over environment"
    )
    plaid_version: Optional[str] = Field(
        default="2020-09-14", description="Value sent in the Plaid-Version header"
    )

    # HTTP Configuration
    request_timeout: float = Field(default=30.0, gt=0, description="Total request timeout in seconds")
    connect_timeout: float = Field(default=10.0, gt=0, description="Connect timeout in seconds")

    # Logging Configuration
    log_level: str = Field(default="INFO", description="Logging level")
    log_json: bool = Field(default=False, description="Render logs as JSON")

    @field_validator("environment")
    @classmethod
    def validate_environment(cls, v: str) -> str:
        """Validate environment value."""
        v = v.lower()
        if v not in PLAID_ENVIRONMENTS:
            raise ValueError(f"Environment must be one of: {set(PLAID_ENVIRONMENTS)}")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level."""
        allowed = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if v.upper() not in allowed:
            raise ValueError(f"Log level must be one of: {allowed}")
        return v.upper()

    @field_validator("root_uri")
    @classmethod
    def normalize_root_uri(cls, v: Optional[str]) -> Optional[str]:
        """Ensure the root URI ends with a slash so endpoints can be appended."""
        if v and not v.endswith("/"):
            return v + "/"
        return v

    @property
    def base_url(self) -> str:
        """Resolved base URL for API calls."""
        return self.root_uri or PLAID_ENVIRONMENTS[self.environment]

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=False, env_prefix="PLAID_"
    )


# Global settings instance - will be initialized when needed
settings = None


def get_settings() -> PlaidSettings:
    """Get the global settings instance."""
    global settings
    if settings is None:
        settings = PlaidSettings()
    return settings


def reload_settings() -> PlaidSettings:
    """Reload settings from environment."""
    global settings
    settings = PlaidSettings()
    return settings
