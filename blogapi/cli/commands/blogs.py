"""
Blog Commands.

One coroutine per shell verb. Each issues a single request, waits for
the response and prints it under a fixed label. Transport errors are
printed and swallowed so the shell keeps running.
"""

from collections.abc import Awaitable

import httpx
from rich.console import Console

from blogapi.cli.client import APIClient


async def _run(console: Console, label: str, call: Awaitable[httpx.Response]) -> httpx.Response | None:
    """Await a request and print its outcome."""
    try:
        response = await call
    except httpx.HTTPError as e:
        console.print(f"Request error: {e}", style="red", markup=False)
        return None

    display_response(console, label, response)
    return response


def display_response(console: Console, label: str, response: httpx.Response) -> None:
    """Print JSON bodies pretty-printed under the label, anything else as raw text."""
    if response.is_success:
        try:
            data = response.json()
        except ValueError:
            console.print(response.text, markup=False)
            return
        console.print(label, style="bold")
        console.print_json(data=data)
        return

    console.print(f"[{response.status_code}] {response.text}", style="yellow", markup=False)


async def list_blogs(client: APIClient, console: Console) -> httpx.Response | None:
    """Print every blog."""
    return await _run(console, "Blogs:", client.list_blogs())


async def get_blog(client: APIClient, console: Console, blog_id: str) -> httpx.Response | None:
    """Print one blog."""
    return await _run(console, "Blog:", client.get_blog(blog_id))


async def create_blog(client: APIClient, console: Console, content: str) -> httpx.Response | None:
    """Create a blog and print it."""
    return await _run(console, "New Blog:", client.create_blog(content))


async def update_blog(
    client: APIClient,
    console: Console,
    blog_id: str,
    content: str,
) -> httpx.Response | None:
    """Update a blog and print it."""
    return await _run(console, "Updated Blog:", client.update_blog(blog_id, content))


async def delete_blog(client: APIClient, console: Console, blog_id: str) -> httpx.Response | None:
    """Delete a blog and print the ones left."""
    return await _run(console, "Remaining Blogs:", client.delete_blog(blog_id))
