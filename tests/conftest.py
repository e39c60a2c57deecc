"""Pytest fixtures and shared test configuration.

Provides reusable fixtures for unit and integration tests.

Fixtures:
    - gateway_config: GatewayConfig with a dummy API key
    - fake_gateway: In-memory completion backend with scripted replies
    - app: FastAPI app whose gateway dependency is the fake gateway
    - async_client: HTTPX client for API testing
    - mock_session_id: Consistent session ID for tests
"""

from collections.abc import AsyncGenerator

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from chatway.api.app import create_app
from chatway.gateway.completion import get_completion_gateway
from chatway.gateway.config import GatewayConfig
from tests.helpers import FakeGateway


@pytest.fixture
def gateway_config() -> GatewayConfig:
    """Return a config that does not need a real API key."""
    return GatewayConfig(api_key="gsk-test-key")


@pytest.fixture
def fake_gateway() -> FakeGateway:
    return FakeGateway()


@pytest.fixture
def mock_session_id() -> str:
    """Generate consistent session ID for testing.

    Returns:
        Predictable session ID for test assertions.
    """
    return "test-session-12345"


@pytest.fixture
def app(fake_gateway: FakeGateway) -> FastAPI:
    """Create an app wired to the fake gateway."""
    application = create_app()
    application.dependency_overrides[get_completion_gateway] = lambda: fake_gateway
    return application


@pytest.fixture
async def async_client(app: FastAPI) -> AsyncGenerator[AsyncClient, None]:
    """Create async HTTP client for API testing.

    Yields:
        Configured AsyncClient for making test requests.
    """
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
