"""Custom exceptions for notification record operations."""

from typing import Any
from uuid import UUID


class NotificationError(Exception):
    """Base exception for notification record errors."""

    def __init__(self, message: str, status_code: int | None = None):
        """Initialize notification error.

        Args:
            message: Error message
            status_code: HTTP status code the error maps to
        """
        self.status_code = status_code
        super().__init__(message)


class ValidationError(NotificationError):
    """Notification payload failed validation (400).

    Raised before anything is persisted, so a failed create never leaves a
    partial record behind.
    """

    def __init__(self, message: str, errors: list[dict[str, Any]] | None = None):
        """Initialize validation error.

        Args:
            message: Error message
            errors: Field-level error details, pydantic ``errors()`` format
        """
        self.errors = errors or []
        super().__init__(message=message, status_code=400)


class NotFoundError(NotificationError):
    """Notification does not exist (404)."""

    def __init__(self, notification_id: UUID | str):
        """Initialize not found error.

        Args:
            notification_id: ID of the notification that was not found
        """
        self.notification_id = notification_id
        super().__init__(
            message=f"Notification with ID {notification_id} not found",
            status_code=404,
        )
