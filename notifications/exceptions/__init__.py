"""Exception handling utilities for the notifications app."""

from notifications.exceptions.handlers import custom_exception_handler
from notifications.exceptions.notification_exceptions import (
    NotFoundError,
    NotificationError,
    ValidationError,
)

__all__ = [
    "NotFoundError",
    "NotificationError",
    "ValidationError",
    "custom_exception_handler",
]
