"""
Test Configuration
==================

Pytest configuration with settings override, mock transports and sample
Plaid payloads.
"""

import pytest
from typing import Any, Dict, Generator
from unittest.mock import patch

from pydantic_settings import SettingsConfigDict

from plaid_income.config import settings as settings_module
from plaid_income.config.settings import PlaidSettings

from tests.utils.data_generators import PlaidResponseGenerator
from tests.utils.mocks import MockTransport


# Test settings override
class TestSettings(PlaidSettings):
    """Test-specific settings."""

    client_id: str = "test-client-id"
    secret: str = "test-secret"
    environment: str = "sandbox"
    root_uri: str = "https://plaid.test/"
    plaid_version: str = "2020-09-14"
    log_level: str = "DEBUG"

    model_config = SettingsConfigDict(env_file=".env.test")


@pytest.fixture(scope="session")
def test_settings() -> TestSettings:
    """Test settings fixture."""
    return TestSettings()


@pytest.fixture(scope="session", autouse=True)
def override_settings(test_settings: TestSettings) -> Generator[TestSettings, None, None]:
    """Override client settings for testing."""
    with patch.object(settings_module, "settings", test_settings):
        yield test_settings


@pytest.fixture
def income_payload() -> Dict[str, Any]:
    """Sample income/get response body."""
    return PlaidResponseGenerator.income_response()


@pytest.fixture
def credit_sessions_payload() -> Dict[str, Any]:
    """Sample credit/sessions/get response body."""
    return PlaidResponseGenerator.credit_sessions_response()


@pytest.fixture
def bank_income_payload() -> Dict[str, Any]:
    """Sample credit/bank_income/get response body."""
    return PlaidResponseGenerator.bank_income_response()


@pytest.fixture
def user_create_payload() -> Dict[str, Any]:
    """Sample user/create response body."""
    return PlaidResponseGenerator.user_create_response()


@pytest.fixture
def error_payload() -> Dict[str, Any]:
    """Sample Plaid error body."""
    return PlaidResponseGenerator.error_response()


@pytest.fixture
def mock_transport() -> MockTransport:
    """Mock transport answering 200 with an empty body until configured."""
    return MockTransport()
