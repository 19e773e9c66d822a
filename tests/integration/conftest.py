"""
Integration Test Fixtures.

Fixtures for integration tests - the real application served over an
in-process ASGI transport, backed by a temporary blogs file.
"""

from collections.abc import AsyncGenerator

import pytest
from httpx import ASGITransport, AsyncClient

from blogapi.backend.main import create_app
from blogapi.backend.repositories.blog import BlogStore


# =============================================================================
# API Client Fixtures
# =============================================================================


@pytest.fixture
def app(blog_store: BlogStore):
    """Application serving the test store."""
    return create_app(store=blog_store)


@pytest.fixture
async def client(app) -> AsyncGenerator[AsyncClient, None]:
    """
    HTTP client talking to the application in-process.

    Usage:
        async def test_home(client: AsyncClient):
            response = await client.get("/")
            assert response.status_code == 200
    """
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as test_client:
        yield test_client
