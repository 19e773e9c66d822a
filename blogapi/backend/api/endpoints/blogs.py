"""
Blogs API Endpoints.

REST API endpoints for blog records. Responses are the bare record or
list of records; errors are plain text (see exception_handlers).

Request bodies are taken raw and validated by the service so that an
unknown id on PUT is reported before a malformed body.
"""

from typing import Any

from fastapi import APIRouter, Body

from blogapi.backend.core.dependencies import BlogServiceDep
from blogapi.backend.core.utils import parse_int_prefix
from blogapi.backend.schemas.blog import Blog

router = APIRouter()


@router.get(
    "",
    response_model=list[Blog],
    summary="List blogs",
    description="Get every blog in insertion order.",
)
async def list_blogs(service: BlogServiceDep) -> list[Blog]:
    """List all blogs."""
    return service.list_blogs()


@router.get(
    "/{blog_id}",
    response_model=Blog,
    summary="Get a blog",
    description="Get a single blog by ID.",
)
async def get_blog(blog_id: str, service: BlogServiceDep) -> Blog:
    """Get a blog by ID."""
    return service.get_blog(parse_int_prefix(blog_id))


@router.post(
    "",
    response_model=Blog,
    summary="Create a blog",
    description="Create a new blog. Content must be at least 5 characters.",
)
async def create_blog(
    service: BlogServiceDep,
    payload: Any = Body(default=None),
) -> Blog:
    """Create a new blog."""
    return service.create_blog(payload)


@router.put(
    "/{blog_id}",
    response_model=Blog,
    summary="Update a blog",
    description="Replace the content of an existing blog.",
)
async def update_blog(
    blog_id: str,
    service: BlogServiceDep,
    payload: Any = Body(default=None),
) -> Blog:
    """Update a blog."""
    return service.update_blog(parse_int_prefix(blog_id), payload)


@router.delete(
    "/{blog_id}",
    response_model=list[Blog],
    summary="Delete a blog",
    description="Permanently delete a blog and return the blogs that remain.",
)
async def delete_blog(blog_id: str, service: BlogServiceDep) -> list[Blog]:
    """Delete a blog."""
    return service.delete_blog(parse_int_prefix(blog_id))
