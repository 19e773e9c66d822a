"""
Base Service.

Base class for services. Services sit between the HTTP layer and the
store: they enforce business rules and turn "absent" results into
application exceptions.

Usage:
    from blogapi.backend.services.base import BaseService

    class BlogService(BaseService):
        def get_blog(self, blog_id: int) -> Blog:
            ...
"""

from typing import Any

from blogapi.backend.core.exceptions import ValidationError
from blogapi.backend.core.logging import get_logger
from blogapi.backend.repositories.blog import BlogStore
from blogapi.backend.services.validation import ValidationResult


class BaseService:
    """
    Base class for all services.

    Provides:
    - Access to the application's blog store
    - Logging context
    - Conversion of failed validation results to exceptions
    """

    def __init__(self, store: BlogStore) -> None:
        """
        Initialize the service with the store it operates on.

        Args:
            store: The application's blog store
        """
        self._store = store
        self._logger = get_logger(self.__class__.__module__)

    @property
    def store(self) -> BlogStore:
        """Get the blog store."""
        return self._store

    def _require_valid(self, result: ValidationResult) -> None:
        """
        Raise if a validation result failed.

        Raises:
            ValidationError: Carrying the result's message
        """
        if not result.ok:
            raise ValidationError(result.message or "Validation failed")

    def _log_operation(
        self,
        operation: str,
        **context: Any,
    ) -> None:
        """
        Log a service operation with context.

        Args:
            operation: Description of the operation
            **context: Additional context to include in log
        """
        self._logger.info(
            operation,
            extra={"service": self.__class__.__name__, **context},
        )

