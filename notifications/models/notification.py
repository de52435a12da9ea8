"""Notification model for recipient-facing notification records.

This module defines the canonical notification record: recipient, content,
channel selection, read state and temporal fields. Per-channel delivery
outcomes are stored separately in the DeliveryStatus model.
"""

import uuid
from datetime import datetime
from typing import Any, ClassVar

from django.db import models
from django.utils import timezone

from notifications.enums import (
    TRACKED_CHANNELS,
    NotificationCategory,
    NotificationChannel,
    NotificationPriority,
    NotificationType,
)


class Notification(models.Model):
    """A notification intended for one recipient.

    A notification can be delivered over push, SMS, email and in-app
    channels. The ``*_enabled`` flags record which channels should be
    attempted; outcomes of attempts on the tracked channels (push, SMS,
    email) live in ``delivery_statuses``, one row per channel. Enablement
    and recorded outcomes are independent of each other.

    Attributes:
        notification_id: Unique identifier for the notification.
        recipient_id: User the notification is for.
        recipient_role: Role of the recipient at time of sending.
        notification_type: Domain event that triggered the notification.
        category: Delivery policy class.
        title: Human-readable title.
        message: Human-readable message body.
        data: Opaque producer-defined JSON payload.
        priority: Notification priority.
        is_read: Whether the recipient has read the notification.
        read_at: When the notification was marked read.
        expires_at: After this time the record is purged by the expiry sweep.
        scheduled_for: Deferred delivery time, if any.
        created_at: When the notification was created.
        updated_at: When the notification was last updated.
    """

    notification_id = models.UUIDField(
        primary_key=True,
        default=uuid.uuid4,
        editable=False,
        help_text="Unique identifier for the notification",
    )
    recipient_id = models.UUIDField(
        help_text="User receiving the notification",
    )
    recipient_role = models.CharField(
        max_length=100,
        blank=True,
        default="",
        help_text="Role of the recipient at time of sending",
    )
    notification_type = models.CharField(
        max_length=30,
        choices=[(t.value, t.value) for t in NotificationType],
        help_text="Domain event that triggered the notification",
    )
    category = models.CharField(
        max_length=20,
        choices=[(c.value, c.value) for c in NotificationCategory],
        default=NotificationCategory.TRANSACTIONAL.value,
        help_text="Delivery policy class",
    )
    title = models.CharField(max_length=255)
    message = models.TextField()
    data = models.JSONField(
        null=True,
        blank=True,
        help_text="Opaque payload defined by the producer",
    )
    push_enabled = models.BooleanField(default=True)
    sms_enabled = models.BooleanField(default=False)
    email_enabled = models.BooleanField(default=False)
    in_app_enabled = models.BooleanField(default=True)
    priority = models.CharField(
        max_length=10,
        choices=[(p.value, p.value) for p in NotificationPriority],
        default=NotificationPriority.MEDIUM.value,
    )
    is_read = models.BooleanField(default=False)
    read_at = models.DateTimeField(null=True, blank=True)
    related_order_id = models.UUIDField(null=True, blank=True)
    related_menu_item_id = models.UUIDField(null=True, blank=True)
    action_type = models.CharField(max_length=50, null=True, blank=True)
    action_url = models.CharField(max_length=500, null=True, blank=True)
    action_label = models.CharField(max_length=100, null=True, blank=True)
    expires_at = models.DateTimeField(
        null=True,
        blank=True,
        help_text="Record is purged by the expiry sweep after this time",
    )
    scheduled_for = models.DateTimeField(
        null=True,
        blank=True,
        help_text="Deferred delivery time",
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        """Django model metadata."""

        db_table = "notifications"
        ordering: ClassVar[list[str]] = ["-created_at"]
        indexes: ClassVar[list] = [
            models.Index(
                fields=["recipient_id", "is_read", "-created_at"],
                name="notif_recipient_unread_idx",
            ),
            models.Index(fields=["expires_at"], name="notif_expires_at_idx"),
            models.Index(fields=["scheduled_for"], name="notif_scheduled_for_idx"),
        ]

    def __str__(self) -> str:
        """Return string representation of notification."""
        return f"{self.notification_type} for user {self.recipient_id}"

    def __repr__(self) -> str:
        """Return detailed representation of notification."""
        return (
            f"<Notification(id={self.notification_id}, "
            f"type={self.notification_type}, "
            f"recipient={self.recipient_id}, "
            f"is_read={self.is_read})>"
        )

    @property
    def recipient(self) -> dict[str, Any]:
        """Recipient reference as ``{id, role}``."""
        return {"id": self.recipient_id, "role": self.recipient_role}

    @property
    def channels(self) -> dict[str, bool]:
        """Channel selection keyed by channel name."""
        return {
            NotificationChannel.PUSH.value: self.push_enabled,
            NotificationChannel.SMS.value: self.sms_enabled,
            NotificationChannel.EMAIL.value: self.email_enabled,
            NotificationChannel.IN_APP.value: self.in_app_enabled,
        }

    @property
    def action(self) -> dict[str, str | None] | None:
        """The callable action attached to the notification, if any."""
        if not (self.action_type or self.action_url or self.action_label):
            return None
        return {
            "type": self.action_type,
            "url": self.action_url,
            "label": self.action_label,
        }

    @property
    def delivery_status(self) -> dict[str, dict[str, Any]]:
        """Latest delivery outcome for every tracked channel.

        Channels without a recorded attempt map to an all-``None`` entry.
        """
        recorded = {row.channel: row for row in self.delivery_statuses.all()}
        result = {}
        for channel in TRACKED_CHANNELS:
            row = recorded.get(channel)
            result[channel] = (
                row.as_dict()
                if row
                else {"status": None, "sent_at": None, "error": None}
            )
        return result

    def pending_channels(self) -> list[str]:
        """Return enabled tracked channels that have no recorded outcome."""
        channels = self.channels
        return [
            channel
            for channel, outcome in self.delivery_status.items()
            if channels[channel] and outcome["status"] is None
        ]

    def is_expired(self, now: datetime | None = None) -> bool:
        """Check whether the record is past its expiry time."""
        now = now or timezone.now()
        return self.expires_at is not None and self.expires_at <= now

    def is_scheduled(self, now: datetime | None = None) -> bool:
        """Check whether delivery is deferred to a future time."""
        now = now or timezone.now()
        return self.scheduled_for is not None and self.scheduled_for > now
