"""Content layer exceptions."""

from typing import Any


class ContentError(Exception):
    """Base class for content store errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """Initialize content error.

        Args:
            message: Human-readable error message.
            details: Optional dictionary with additional error context.
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ContentWriteError(ContentError):
    """Raised when a write to the content store fails."""

    pass
