"""
HTTP Client for CLI.

Thin async wrapper over httpx for the blog endpoints. Every method
returns the raw httpx.Response whatever its status, because the shell
shows 400 and 404 bodies to the user as-is. Only transport failures
raise.
"""

from typing import Any

import httpx

from blogapi.backend.core.config import get_server_base_url
from blogapi.backend.core.logging import get_logger, log_with_source

logger = get_logger(__name__)

BLOGS_PATH = "/api/blogs"


def _blog_path(blog_id: str) -> str:
    # The id goes out exactly as typed; the server decides what it means
    return f"{BLOGS_PATH}/{blog_id}"


class APIClient:
    """
    Client for the blog API.

    Usage:
        client = APIClient()
        response = await client.create_blog("Hello world")
        print(response.status_code, response.json())
        await client.close()
    """

    def __init__(self, base_url: str | None = None, timeout: float | None = None):
        """
        Args:
            base_url: e.g. http://127.0.0.1:3000. Defaults to the server
                address in application.yaml.
            timeout: Seconds per request. Defaults to client.timeout_seconds
                in application.yaml.
        """
        if base_url is None or timeout is None:
            config_base_url, config_timeout = get_server_base_url()
            base_url = base_url or config_base_url
            timeout = timeout if timeout is not None else config_timeout

        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._client: httpx.AsyncClient | None = None

    async def _get_client(self) -> httpx.AsyncClient:
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                timeout=self.timeout,
                headers={"X-Frontend-ID": "cli"},
            )
        return self._client

    async def close(self) -> None:
        """Close the underlying connection pool."""
        if self._client and not self._client.is_closed:
            await self._client.aclose()
        self._client = None

    async def request(self, method: str, path: str, **kwargs: Any) -> httpx.Response:
        """
        Send one request and return the response, whatever its status.

        Raises:
            httpx.HTTPError: If the server could not be reached or timed out
        """
        client = await self._get_client()

        try:
            response = await client.request(method, path, **kwargs)
        except httpx.HTTPError as e:
            log_with_source(
                logger, "cli", "error", "API request failed",
                method=method, path=path, error=str(e),
            )
            raise

        log_with_source(
            logger, "cli", "debug", "API request",
            method=method, path=path, status_code=response.status_code,
        )
        return response

    async def list_blogs(self) -> httpx.Response:
        return await self.request("GET", BLOGS_PATH)

    async def get_blog(self, blog_id: str) -> httpx.Response:
        return await self.request("GET", _blog_path(blog_id))

    async def create_blog(self, content: str) -> httpx.Response:
        return await self.request("POST", BLOGS_PATH, json={"content": content})

    async def update_blog(self, blog_id: str, content: str) -> httpx.Response:
        return await self.request("PUT", _blog_path(blog_id), json={"content": content})

    async def delete_blog(self, blog_id: str) -> httpx.Response:
        return await self.request("DELETE", _blog_path(blog_id))


_client: APIClient | None = None


def get_api_client() -> APIClient:
    """Shared client for the interactive shell, created on first use."""
    global _client
    if _client is None:
        _client = APIClient()
    return _client


async def close_api_client() -> None:
    global _client
    if _client:
        await _client.close()
        _client = None
