"""
Blog Payload Validation.

Stateless check run before every create and update. The rules live on
BlogPayload; this module turns the first rule a payload breaks into a
single human-readable message.
"""

from dataclasses import dataclass
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from blogapi.backend.schemas.blog import CONTENT_MIN_LENGTH, BlogPayload


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of validating a payload. ``message`` is set only on failure."""

    ok: bool
    message: str | None = None
    payload: BlogPayload | None = None


def _field_name(loc: tuple[Any, ...]) -> str:
    return ".".join(str(part) for part in loc) if loc else "value"


def _describe(error: dict[str, Any]) -> str:
    """Render one pydantic error in the wording clients have always seen."""
    field = _field_name(error.get("loc", ()))
    error_type = error.get("type")

    if error_type == "missing":
        return f'"{field}" is required'
    if error_type == "string_type":
        return f'"{field}" must be a string'
    if error_type == "string_too_short":
        min_length = error.get("ctx", {}).get("min_length", CONTENT_MIN_LENGTH)
        return f'"{field}" length must be at least {min_length} characters long'
    if error_type == "extra_forbidden":
        return f'"{field}" is not allowed'
    return f'"{field}" {error.get("msg", "is invalid")}'


def validate_blog(payload: Any) -> ValidationResult:
    """
    Validate a create/update payload.

    Args:
        payload: Decoded JSON request body (any type)

    Returns:
        ValidationResult with ok=True and the parsed payload, or ok=False
        and a message describing the first violated rule
    """
    if not isinstance(payload, dict):
        return ValidationResult(ok=False, message='"value" must be of type object')

    try:
        parsed = BlogPayload.model_validate(payload)
    except PydanticValidationError as e:
        return ValidationResult(ok=False, message=_describe(e.errors()[0]))

    return ValidationResult(ok=True, payload=parsed)
