"""
FastAPI Dependencies.

Shared dependencies for request handling.
"""

from typing import Annotated

from fastapi import Depends, Request

from blogapi.backend.repositories.blog import BlogStore
from blogapi.backend.services.blog import BlogService


def get_blog_store(request: Request) -> BlogStore:
    """Return the store owned by the running application."""
    return request.app.state.blog_store


# Type alias for the blog store dependency
BlogStoreDep = Annotated[BlogStore, Depends(get_blog_store)]


def get_blog_service(store: BlogStoreDep) -> BlogService:
    """Build a request-scoped service around the application's store."""
    return BlogService(store)


BlogServiceDep = Annotated[BlogService, Depends(get_blog_service)]
