"""
Blog Schemas.

Pydantic schemas for the persisted blog record and the create/update payload.
"""

from pydantic import BaseModel, ConfigDict, Field

CONTENT_MIN_LENGTH = 5


class Blog(BaseModel):
    """A persisted blog record. Serialized as-is in API responses and on disk."""

    id: int = Field(gt=0, description="Blog unique identifier")
    content: str = Field(description="Blog content")


class BlogPayload(BaseModel):
    """Body accepted by create and update. Unknown keys are rejected."""

    content: str = Field(
        ...,
        min_length=CONTENT_MIN_LENGTH,
        description="Blog content",
        examples=["My first blog post"],
    )

    model_config = ConfigDict(extra="forbid", strict=True)
