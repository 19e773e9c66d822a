"""
API Schemas.

Pydantic models for request/response validation and persistence.
"""

from blogapi.backend.schemas.blog import CONTENT_MIN_LENGTH, Blog, BlogPayload

__all__ = [
    "CONTENT_MIN_LENGTH",
    "Blog",
    "BlogPayload",
]
