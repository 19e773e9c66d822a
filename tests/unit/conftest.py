"""
Unit Test Fixtures.

Fixtures for unit tests - the network is always mocked.
"""

import io
from typing import Any
from unittest.mock import AsyncMock, MagicMock

import httpx
import pytest
from rich.console import Console


# =============================================================================
# Console Fixtures
# =============================================================================


@pytest.fixture
def output() -> io.StringIO:
    """Buffer capturing everything printed to the test console."""
    return io.StringIO()


@pytest.fixture
def console(output: io.StringIO) -> Console:
    """Rich console writing plain text to the output buffer."""
    return Console(file=output, width=120, color_system=None, force_terminal=False)


# =============================================================================
# HTTP Mock Fixtures
# =============================================================================


def _make_response(status_code: int, json_data: Any = None, text: str | None = None) -> httpx.Response:
    """Build a real httpx.Response with either a JSON or a text body."""
    if text is not None:
        return httpx.Response(status_code, text=text)
    return httpx.Response(status_code, json=json_data)


@pytest.fixture
def make_response():
    """Provide the response builder: make_response(200, [...]) or make_response(404, text="...")."""
    return _make_response


@pytest.fixture
def mock_api_client() -> MagicMock:
    """
    Mock blog API client.

    Usage:
        async def test_x(mock_api_client, make_response):
            mock_api_client.list_blogs.return_value = make_response(200, [])
    """
    client = MagicMock()
    client.list_blogs = AsyncMock(return_value=_make_response(200, []))
    client.get_blog = AsyncMock()
    client.create_blog = AsyncMock()
    client.update_blog = AsyncMock()
    client.delete_blog = AsyncMock()
    client.close = AsyncMock()
    return client


# =============================================================================
# Logging Mock Fixtures
# =============================================================================


@pytest.fixture
def mock_logger() -> MagicMock:
    """
    Mock logger for testing logging calls.

    Usage:
        def test_logging(mock_logger):
            with patch("module.logger", mock_logger):
                ...
                mock_logger.error.assert_called_once()
    """
    logger = MagicMock()
    logger.debug = MagicMock()
    logger.info = MagicMock()
    logger.warning = MagicMock()
    logger.error = MagicMock()
    logger.exception = MagicMock()
    return logger
