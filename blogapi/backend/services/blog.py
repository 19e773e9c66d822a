"""
Blog Service.

Business logic layer for blog records. Validates payloads, delegates to
the store, and raises NotFoundError for unknown ids.
"""

from typing import Any

from blogapi.backend.core.exceptions import NotFoundError
from blogapi.backend.schemas.blog import Blog
from blogapi.backend.services.base import BaseService
from blogapi.backend.services.validation import validate_blog


class BlogService(BaseService):
    """
    Service for blog business logic.

    Ids arrive already parsed; None stands for a path segment that was
    not a number and never matches a record.
    """

    def list_blogs(self) -> list[Blog]:
        """Return every blog in insertion order."""
        return self.store.list_all()

    def get_blog(self, blog_id: int | None) -> Blog:
        """
        Get a blog by ID.

        Raises:
            NotFoundError: If no blog has that id
        """
        blog = self.store.get_by_id(blog_id)
        if blog is None:
            raise NotFoundError()
        return blog

    def create_blog(self, payload: Any) -> Blog:
        """
        Validate a payload and create a blog from it.

        Args:
            payload: Decoded request body

        Returns:
            Created blog

        Raises:
            ValidationError: If the payload is invalid
        """
        result = validate_blog(payload)
        self._require_valid(result)

        blog = self.store.create(result.payload.content)
        self._log_operation("Blog created", blog_id=blog.id)
        return blog

    def update_blog(self, blog_id: int | None, payload: Any) -> Blog:
        """
        Replace a blog's content.

        Existence is checked before the payload, so an unknown id is
        reported as not found even when the body is also invalid.

        Raises:
            NotFoundError: If no blog has that id
            ValidationError: If the payload is invalid
        """
        self.get_blog(blog_id)

        result = validate_blog(payload)
        self._require_valid(result)

        blog = self.store.update(blog_id, result.payload.content)
        self._log_operation("Blog updated", blog_id=blog_id)
        return blog

    def delete_blog(self, blog_id: int | None) -> list[Blog]:
        """
        Delete a blog.

        Returns:
            The blogs that remain

        Raises:
            NotFoundError: If no blog has that id
        """
        remaining = self.store.delete(blog_id)
        if remaining is None:
            raise NotFoundError()

        self._log_operation("Blog deleted", blog_id=blog_id, remaining=len(remaining))
        return remaining
