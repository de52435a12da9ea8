"""Delivery status tracking for notification channels.

This module provides the DeliveryTracker class which records the outcome of
one delivery attempt on one channel. Dispatchers call it after talking to a
provider; it only persists the outcome and never performs network I/O.
"""

from uuid import UUID

import structlog

from notifications.enums import TRACKED_CHANNELS, DeliveryOutcome, NotificationChannel
from notifications.exceptions import NotFoundError
from notifications.models import DeliveryStatus
from notifications.repositories.notification_repository import NotificationRepository

logger = structlog.get_logger(__name__)


class DeliveryTracker:
    """Per-channel delivery state machine.

    Each tracked channel moves from "no attempt" to "attempted" and is then
    overwritten by every later report: latest write wins and no history is
    kept, so retried reports are safe. Outcomes are recorded regardless of
    whether the channel is enabled on the notification.
    """

    def __init__(self, repository: NotificationRepository | None = None) -> None:
        """Initialize delivery tracker.

        Args:
            repository: Notification store (default: NotificationRepository).
        """
        self.repository = repository or NotificationRepository()

    def record_delivery_outcome(
        self,
        notification_id: UUID | str,
        channel: str | NotificationChannel,
        status: str | DeliveryOutcome,
        error: str | None = None,
    ) -> DeliveryStatus | None:
        """Record the outcome of one delivery attempt on one channel.

        Only push, sms and email are tracked. Any other channel name,
        including inApp, is accepted and ignored so writers can introduce
        new channels before readers know about them.

        Args:
            notification_id: Notification ID.
            channel: Channel the attempt was made on.
            status: Free-form delivery status (see DeliveryOutcome).
            error: Error detail; only stored when provided.

        Returns:
            The updated DeliveryStatus, or None if the channel is not tracked.

        Raises:
            NotFoundError: If the notification does not exist.
        """
        if isinstance(channel, NotificationChannel):
            channel = channel.value
        if isinstance(status, DeliveryOutcome):
            status = status.value

        if channel not in TRACKED_CHANNELS:
            if not self.repository.exists(notification_id):
                logger.warning(
                    "notification_not_found_for_delivery_outcome",
                    notification_id=str(notification_id),
                    channel=channel,
                )
                raise NotFoundError(notification_id)

            logger.info(
                "delivery_outcome_ignored",
                notification_id=str(notification_id),
                channel=channel,
                status=status,
            )
            return None

        try:
            delivery_status = self.repository.update_delivery_status(
                notification_id=notification_id,
                channel=channel,
                status=status,
                error=error,
            )
        except NotFoundError:
            logger.warning(
                "notification_not_found_for_delivery_outcome",
                notification_id=str(notification_id),
                channel=channel,
            )
            raise

        log = logger.warning if error else logger.info
        log(
            "delivery_outcome_recorded",
            notification_id=str(notification_id),
            channel=channel,
            status=status,
            error=error,
        )

        return delivery_status


# Singleton instance for use throughout the application
delivery_tracker = DeliveryTracker()
