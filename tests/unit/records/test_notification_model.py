"""Tests for Notification and DeliveryStatus models."""

from datetime import timedelta

from django.db import IntegrityError, transaction
from django.utils import timezone

import pytest

from notifications.models import DeliveryStatus, Notification
from tests.factories import create_notification


@pytest.mark.django_db
class TestNotificationModel:
    """Test suite for Notification model."""

    @pytest.fixture
    def notification(self):
        """Create test notification."""
        return create_notification()

    def test_notification_creation_defaults(self, notification):
        """Test notification is created with correct defaults."""
        assert notification.notification_id is not None
        assert notification.is_read is False
        assert notification.read_at is None
        assert notification.category == "transactional"
        assert notification.priority == "medium"
        assert notification.channels == {
            "push": True,
            "sms": False,
            "email": False,
            "inApp": True,
        }
        assert notification.action is None

    def test_notification_str_representation(self, notification):
        """Test notification string representation."""
        result = str(notification)
        assert notification.notification_type in result
        assert str(notification.recipient_id) in result

    def test_notification_repr(self, notification):
        """Test notification repr."""
        result = repr(notification)
        assert "Notification" in result
        assert str(notification.notification_id) in result

    def test_recipient_property(self, notification):
        """Test recipient is exposed as id and role."""
        assert notification.recipient == {
            "id": notification.recipient_id,
            "role": "customer",
        }

    def test_delivery_status_unset_for_every_tracked_channel(self, notification):
        """Test a fresh notification has all-null delivery status."""
        assert notification.delivery_status == {
            "push": {"status": None, "sent_at": None, "error": None},
            "sms": {"status": None, "sent_at": None, "error": None},
            "email": {"status": None, "sent_at": None, "error": None},
        }

    def test_delivery_status_without_rows(self):
        """Test delivery status falls back to nulls when no rows exist."""
        notification = create_notification()
        notification.delivery_statuses.all().delete()

        assert notification.delivery_status["push"] == {
            "status": None,
            "sent_at": None,
            "error": None,
        }

    def test_action_property(self):
        """Test action is assembled from its columns."""
        notification = create_notification(
            action={"type": "open_order", "url": "/orders/1", "label": "View"}
        )

        assert notification.action == {
            "type": "open_order",
            "url": "/orders/1",
            "label": "View",
        }

    def test_pending_channels(self):
        """Test pending channels lists enabled channels without an outcome."""
        notification = create_notification(
            channels={"push": True, "sms": True, "email": False, "inApp": True}
        )
        DeliveryStatus.objects.filter(
            notification=notification, channel="push"
        ).update(status="sent")

        assert notification.pending_channels() == ["sms"]

    def test_is_expired(self):
        """Test expiry check against a reference time."""
        now = timezone.now()
        notification = create_notification(
            expires_at=(now + timedelta(hours=1)).isoformat()
        )

        assert notification.is_expired(now) is False
        assert notification.is_expired(now + timedelta(hours=2)) is True

    def test_is_expired_without_expiry(self, notification):
        """Test a notification without expiry never expires."""
        assert notification.is_expired() is False

    def test_is_scheduled(self):
        """Test scheduled check against a reference time."""
        now = timezone.now()
        notification = create_notification(
            scheduled_for=(now + timedelta(minutes=30)).isoformat()
        )

        assert notification.is_scheduled(now) is True
        assert notification.is_scheduled(now + timedelta(hours=1)) is False

    def test_default_ordering_newest_first(self):
        """Test default ordering is by created_at descending."""
        assert Notification._meta.ordering == ["-created_at"]


@pytest.mark.django_db
class TestDeliveryStatusModel:
    """Test suite for DeliveryStatus model."""

    def test_rows_created_for_tracked_channels(self):
        """Test one unset row per tracked channel is created."""
        notification = create_notification()

        rows = DeliveryStatus.objects.filter(notification=notification)
        assert sorted(row.channel for row in rows) == ["email", "push", "sms"]
        assert all(row.status is None for row in rows)

    def test_str_representation(self):
        """Test delivery status string representation."""
        notification = create_notification()
        row = notification.delivery_statuses.get(channel="push")

        assert str(row) == "push - unset"
        row.status = "delivered"
        assert str(row) == "push - delivered"

    def test_repr(self):
        """Test delivery status repr."""
        notification = create_notification()
        row = notification.delivery_statuses.get(channel="sms")

        assert "DeliveryStatus" in repr(row)
        assert "sms" in repr(row)

    def test_as_dict(self):
        """Test outcome triple as dict."""
        notification = create_notification()
        row = notification.delivery_statuses.get(channel="email")

        assert row.as_dict() == {"status": None, "sent_at": None, "error": None}

    def test_unique_per_notification_and_channel(self):
        """Test a channel cannot have two rows for one notification."""
        notification = create_notification()

        with pytest.raises(IntegrityError), transaction.atomic():
            DeliveryStatus.objects.create(notification=notification, channel="push")

    def test_cascade_delete(self):
        """Test rows are deleted with their notification."""
        notification = create_notification()
        notification_id = notification.notification_id

        notification.delete()

        assert not DeliveryStatus.objects.filter(
            notification_id=notification_id
        ).exists()
