"""Notification service: the query and lifecycle API.

This module provides the NotificationService class used by dispatchers and
by the recipient-facing read path. It orchestrates the notification store
(NotificationRepository) and the per-channel DeliveryTracker:
- create, get and delete notification records
- list and count unread notifications for a recipient
- mark notifications as read
- record delivery outcomes
- find due scheduled notifications and purge expired ones
"""

from datetime import datetime
from typing import Any
from uuid import UUID

from django.conf import settings

import structlog

from notifications.enums import DeliveryOutcome, NotificationChannel
from notifications.exceptions import NotFoundError, ValidationError
from notifications.models import DeliveryStatus, Notification
from notifications.repositories.notification_repository import NotificationRepository
from notifications.schemas.notification import NotificationCreate
from notifications.services.delivery_tracker import DeliveryTracker

logger = structlog.get_logger(__name__)

DEFAULT_UNREAD_LIMIT = 20

# Marks an omitted limit; an explicit None means no cap.
_DEFAULT_LIMIT: Any = object()


class NotificationService:
    """Service for notification records and their lifecycle.

    The read state is a one-way ``unread -> read`` transition for the record
    as a whole. Delivery outcomes are tracked independently per channel by
    the DeliveryTracker.
    """

    def __init__(
        self,
        repository: NotificationRepository | None = None,
        tracker: DeliveryTracker | None = None,
    ) -> None:
        """Initialize notification service.

        Args:
            repository: Notification store (default: NotificationRepository).
            tracker: Delivery tracker (default: one sharing the repository).
        """
        self.repository = repository or NotificationRepository()
        self.tracker = tracker or DeliveryTracker(self.repository)

    def create_notification(
        self, payload: NotificationCreate | dict[str, Any]
    ) -> Notification:
        """Create a notification record.

        Args:
            payload: Creation payload (schema instance or raw dict).

        Returns:
            The created Notification.

        Raises:
            ValidationError: If a required field is missing or an enumerated
                field is outside its closed set.
        """
        try:
            notification = self.repository.create(payload)
        except ValidationError as err:
            logger.warning(
                "notification_validation_failed",
                errors=err.errors,
            )
            raise

        logger.info(
            "notification_created",
            notification_id=str(notification.notification_id),
            recipient_id=str(notification.recipient_id),
            notification_type=notification.notification_type,
            channels=notification.channels,
            scheduled_for=(
                notification.scheduled_for.isoformat()
                if notification.scheduled_for
                else None
            ),
        )

        return notification

    def get_notification(self, notification_id: UUID | str) -> Notification:
        """Get a notification by ID.

        Args:
            notification_id: Notification ID.

        Returns:
            Notification instance with delivery statuses prefetched.

        Raises:
            NotFoundError: If notification not found.
        """
        try:
            return self.repository.get(notification_id)
        except NotFoundError:
            logger.warning(
                "notification_not_found",
                notification_id=str(notification_id),
            )
            raise

    def find_unread_for_user(
        self, recipient_id: UUID | str, limit: int | None = _DEFAULT_LIMIT
    ) -> list[Notification]:
        """List a recipient's unread notifications, newest first.

        Args:
            recipient_id: Recipient user ID.
            limit: Maximum number of results, or None for every unread
                notification (default: NOTIFICATION_UNREAD_DEFAULT_LIMIT).

        Returns:
            Unread notifications ordered by created_at descending.
        """
        if limit is _DEFAULT_LIMIT:
            limit = self.default_unread_limit()
        return self.repository.list_unread(recipient_id, limit=limit)

    @staticmethod
    def default_unread_limit() -> int:
        """Page size used when a caller gives no limit."""
        return getattr(
            settings, "NOTIFICATION_UNREAD_DEFAULT_LIMIT", DEFAULT_UNREAD_LIMIT
        )

    def count_unread_for_user(self, recipient_id: UUID | str) -> int:
        """Count a recipient's unread notifications."""
        return self.repository.count_unread(recipient_id)

    def mark_as_read(self, notification_id: UUID | str) -> Notification:
        """Mark a notification as read.

        ``read_at`` is set on every call, so repeated calls move it forward;
        ``is_read`` stays true either way.

        Args:
            notification_id: Notification ID.

        Returns:
            The updated Notification.

        Raises:
            NotFoundError: If notification not found.
        """
        try:
            self.repository.mark_read(notification_id)
        except NotFoundError:
            logger.warning(
                "notification_not_found_for_read",
                notification_id=str(notification_id),
            )
            raise

        logger.info(
            "notification_marked_as_read",
            notification_id=str(notification_id),
        )
        return self.get_notification(notification_id)

    def mark_all_as_read(self, recipient_id: UUID | str) -> list[UUID]:
        """Mark all of a recipient's unread notifications as read.

        Args:
            recipient_id: Recipient user ID.

        Returns:
            List of notification IDs that were marked as read.
        """
        notification_ids = self.repository.mark_all_read(recipient_id)

        logger.info(
            "all_notifications_marked_as_read",
            recipient_id=str(recipient_id),
            count=len(notification_ids),
        )
        return notification_ids

    def record_delivery_outcome(
        self,
        notification_id: UUID | str,
        channel: str | NotificationChannel,
        status: str | DeliveryOutcome,
        error: str | None = None,
    ) -> DeliveryStatus | None:
        """Record the outcome of one delivery attempt on one channel.

        See DeliveryTracker.record_delivery_outcome.
        """
        return self.tracker.record_delivery_outcome(
            notification_id=notification_id,
            channel=channel,
            status=status,
            error=error,
        )

    def delete_notification(self, notification_id: UUID | str) -> None:
        """Delete a notification.

        Raises:
            NotFoundError: If notification not found.
        """
        try:
            self.repository.delete(notification_id)
        except NotFoundError:
            logger.warning(
                "notification_not_found_for_deletion",
                notification_id=str(notification_id),
            )
            raise

        logger.info("notification_deleted", notification_id=str(notification_id))

    def find_due_scheduled(
        self, now: datetime | None = None, limit: int = 100
    ) -> list[Notification]:
        """Find scheduled notifications whose delivery time has come.

        Args:
            now: Reference time (default: current time).
            limit: Maximum number of results.

        Returns:
            Due notifications with no recorded delivery attempt.
        """
        return self.repository.find_due_scheduled(now=now, limit=limit)

    def purge_expired(self, now: datetime | None = None) -> int:
        """Delete every notification past its expiry time.

        Args:
            now: Cutoff time (default: current time).

        Returns:
            Number of notifications deleted.
        """
        count = self.repository.purge_expired(now=now)
        logger.info("expired_notifications_purged", count=count)
        return count


# Singleton instance for use throughout the application
notification_service = NotificationService()
