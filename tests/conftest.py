"""
Shared test fixtures for Auth0 SDK tests.

Provides common fixtures for configuration, clients and sample
Authentication API payloads.
"""

from collections.abc import Iterator

import pytest
import structlog

from auth0_sdk import telemetry
from auth0_sdk.client import AuthAPI
from auth0_sdk.config import AuthAPIConfig, TelemetryConfig

DOMAIN = "domain.auth0.com"
BASE_URL = f"https://{DOMAIN}"
CLIENT_ID = "clientId"
CLIENT_SECRET = "clientSecret"


@pytest.fixture(autouse=True)
def reset_telemetry() -> Iterator[None]:
    """Undo global tracer/logger changes made by a test."""
    yield
    telemetry._tracer = None
    telemetry._logger = None
    telemetry._trace_requests = True
    structlog.reset_defaults()


@pytest.fixture
def base_config() -> AuthAPIConfig:
    """Provide a basic SDK configuration for testing."""
    return AuthAPIConfig(
        domain=DOMAIN,
        client_id=CLIENT_ID,
        client_secret=CLIENT_SECRET,
    )


@pytest.fixture
def telemetry_config() -> TelemetryConfig:
    """Provide telemetry configuration for testing."""
    return TelemetryConfig(
        enabled=False,
        service_name="test-sdk",
        trace_requests=False,
    )


@pytest.fixture
def api() -> Iterator[AuthAPI]:
    """Provide a sync client that is closed after the test."""
    with AuthAPI(DOMAIN, CLIENT_ID, CLIENT_SECRET) as client:
        yield client


@pytest.fixture
def sample_user_info() -> dict:
    """Provide a sample ``/userinfo`` response."""
    return {
        "email_verified": False,
        "email": "test.account@userinfo.com",
        "clientID": "q2hnj2iu...",
        "updated_at": "2016-12-05T15:15:40.545Z",
        "name": "test.account@userinfo.com",
        "picture": "https://s.gravatar.com/avatar/dummy.png",
        "user_id": "auth0|58454...",
        "nickname": "test.account",
        "identities": [
            {
                "user_id": "58454...",
                "provider": "auth0",
                "connection": "Username-Password-Authentication",
                "isSocial": False,
            }
        ],
        "created_at": "2016-12-05T11:16:59.640Z",
        "sub": "auth0|58454...",
    }
