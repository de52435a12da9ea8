"""DeliveryStatus model for per-channel delivery tracking.

This module defines the delivery status model which records the latest
delivery outcome per tracked channel (push, SMS, email) of a notification.
"""

from typing import Any, ClassVar

from django.db import models

from notifications.enums import TRACKED_CHANNELS


class DeliveryStatus(models.Model):
    """Latest delivery outcome of one channel of a notification.

    One row exists per (notification, channel) pair and is created together
    with the notification, with every outcome field unset. Each reported
    attempt overwrites the row; no history is kept.

    Attributes:
        notification: Reference to the parent Notification.
        channel: Tracked delivery channel (push, sms, email).
        status: Free-form delivery status reported by the dispatcher.
        sent_at: When the latest outcome was recorded.
        error: Error detail from the latest failing attempt.
        created_at: When the status record was created.
        updated_at: When the status was last updated.
    """

    notification = models.ForeignKey(
        "notifications.Notification",
        on_delete=models.CASCADE,
        related_name="delivery_statuses",
        db_column="notification_id",
        help_text="Parent notification",
    )
    channel = models.CharField(
        max_length=10,
        choices=[(channel, channel) for channel in TRACKED_CHANNELS],
        help_text="Delivery channel (push, sms, email)",
    )
    status = models.TextField(
        null=True,
        blank=True,
        help_text="Delivery status reported by the dispatcher",
    )
    sent_at = models.DateTimeField(
        null=True,
        blank=True,
        help_text="When the latest outcome was recorded",
    )
    error = models.TextField(
        null=True,
        blank=True,
        help_text="Error details if delivery failed",
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        """Django model metadata."""

        db_table = "notification_delivery_statuses"
        ordering: ClassVar[list[str]] = ["channel"]
        unique_together: ClassVar[list[list[str]]] = [["notification", "channel"]]

    def __str__(self) -> str:
        """Return string representation of delivery status."""
        return f"{self.channel} - {self.status or 'unset'}"

    def __repr__(self) -> str:
        """Return detailed representation of delivery status."""
        return (
            f"<DeliveryStatus(notification={self.notification_id}, "
            f"channel={self.channel}, "
            f"status={self.status})>"
        )

    def as_dict(self) -> dict[str, Any]:
        """Return the outcome triple as a plain dict."""
        return {"status": self.status, "sent_at": self.sent_at, "error": self.error}
