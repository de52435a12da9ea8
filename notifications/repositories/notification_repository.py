"""Repository for notification record storage and lookup."""

from datetime import datetime
from typing import Any
from uuid import UUID

from django.db import transaction
from django.db.models import Exists, OuterRef
from django.utils import timezone

import pydantic

from notifications.enums import TRACKED_CHANNELS
from notifications.exceptions import NotFoundError, ValidationError
from notifications.models import DeliveryStatus, Notification
from notifications.schemas.notification import NotificationCreate


class NotificationRepository:
    """Durable keyed storage of notification records.

    Every mutation runs in its own transaction and touches a single
    notification, so records are independent units of consistency. All
    mutations refresh ``updated_at``; queryset ``update()`` bypasses
    ``auto_now``, so it is set explicitly.
    """

    @staticmethod
    def validate(payload: NotificationCreate | dict[str, Any]) -> NotificationCreate:
        """Validate a creation payload.

        Args:
            payload: Raw payload (camelCase or snake_case keys) or an already
                validated schema instance.

        Returns:
            The validated NotificationCreate.

        Raises:
            ValidationError: If a required field is missing or an enumerated
                field is outside its closed set.
        """
        if isinstance(payload, NotificationCreate):
            return payload
        try:
            return NotificationCreate.model_validate(payload)
        except pydantic.ValidationError as err:
            raise ValidationError(
                "Invalid notification payload",
                errors=err.errors(include_url=False, include_context=False),
            ) from err

    @staticmethod
    def create(payload: NotificationCreate | dict[str, Any]) -> Notification:
        """Persist a new notification with unset delivery status rows.

        Validation happens before the transaction opens, so an invalid
        payload never produces a partial write.

        Args:
            payload: Creation payload.

        Returns:
            The created Notification.

        Raises:
            ValidationError: If the payload is invalid.
        """
        request = NotificationRepository.validate(payload)
        action = request.action

        with transaction.atomic():
            notification = Notification.objects.create(
                recipient_id=request.recipient.id,
                recipient_role=request.recipient.role,
                notification_type=request.notification_type,
                category=request.category,
                title=request.title,
                message=request.message,
                data=request.data,
                push_enabled=request.channels.push,
                sms_enabled=request.channels.sms,
                email_enabled=request.channels.email,
                in_app_enabled=request.channels.in_app,
                priority=request.priority,
                related_order_id=request.related_order,
                related_menu_item_id=request.related_menu_item,
                action_type=action.action_type if action else None,
                action_url=action.url if action else None,
                action_label=action.label if action else None,
                expires_at=request.expires_at,
                scheduled_for=request.scheduled_for,
            )
            DeliveryStatus.objects.bulk_create(
                [
                    DeliveryStatus(notification=notification, channel=channel)
                    for channel in TRACKED_CHANNELS
                ]
            )

        return notification

    @staticmethod
    def get(notification_id: UUID | str) -> Notification:
        """Look up a notification by ID.

        Args:
            notification_id: Notification ID.

        Returns:
            The Notification with its delivery statuses prefetched.

        Raises:
            NotFoundError: If no such notification exists.
        """
        try:
            return Notification.objects.prefetch_related("delivery_statuses").get(
                notification_id=notification_id
            )
        except Notification.DoesNotExist as err:
            raise NotFoundError(notification_id) from err

    @staticmethod
    def exists(notification_id: UUID | str) -> bool:
        """Check whether a notification exists."""
        return Notification.objects.filter(notification_id=notification_id).exists()

    @staticmethod
    def list_unread(
        recipient_id: UUID | str, limit: int | None = 20
    ) -> list[Notification]:
        """List a recipient's unread notifications, newest first.

        Args:
            recipient_id: Recipient user ID.
            limit: Maximum number of results; None for no cap.

        Returns:
            Unread notifications ordered by created_at descending.
        """
        queryset = (
            Notification.objects.filter(recipient_id=recipient_id, is_read=False)
            .prefetch_related("delivery_statuses")
            .order_by("-created_at")
        )
        if limit is not None:
            queryset = queryset[:limit]
        return list(queryset)

    @staticmethod
    def count_unread(recipient_id: UUID | str) -> int:
        """Count a recipient's unread notifications."""
        return Notification.objects.filter(
            recipient_id=recipient_id, is_read=False
        ).count()

    @staticmethod
    def mark_read(notification_id: UUID | str, now: datetime | None = None) -> None:
        """Set is_read and read_at in a single UPDATE.

        Args:
            notification_id: Notification ID.
            now: Read timestamp (default: current time).

        Raises:
            NotFoundError: If no such notification exists.
        """
        now = now or timezone.now()
        updated = Notification.objects.filter(notification_id=notification_id).update(
            is_read=True, read_at=now, updated_at=now
        )
        if not updated:
            raise NotFoundError(notification_id)

    @staticmethod
    def mark_all_read(
        recipient_id: UUID | str, now: datetime | None = None
    ) -> list[UUID]:
        """Mark every unread notification of a recipient as read.

        Args:
            recipient_id: Recipient user ID.
            now: Read timestamp (default: current time).

        Returns:
            IDs of the notifications that were transitioned.
        """
        now = now or timezone.now()
        with transaction.atomic():
            unread_ids = list(
                Notification.objects.select_for_update()
                .filter(recipient_id=recipient_id, is_read=False)
                .values_list("notification_id", flat=True)
            )
            if unread_ids:
                Notification.objects.filter(notification_id__in=unread_ids).update(
                    is_read=True, read_at=now, updated_at=now
                )
        return unread_ids

    @staticmethod
    def update_delivery_status(
        notification_id: UUID | str,
        channel: str,
        status: str,
        error: str | None = None,
        now: datetime | None = None,
    ) -> DeliveryStatus:
        """Overwrite the delivery outcome of one tracked channel.

        ``status`` and ``sent_at`` (and ``error`` when given) are written by
        one statement, so concurrent reports on the same channel never
        interleave. The parent row is touched first, which both checks it
        exists and refreshes its ``updated_at``.

        Args:
            notification_id: Notification ID.
            channel: Tracked channel name (push, sms, email).
            status: Delivery status.
            error: Error detail; left untouched when falsy.
            now: Outcome timestamp (default: current time).

        Returns:
            The updated DeliveryStatus row.

        Raises:
            NotFoundError: If no such notification exists.
        """
        now = now or timezone.now()
        fields: dict[str, Any] = {"status": status, "sent_at": now}
        if error:
            fields["error"] = error

        with transaction.atomic():
            touched = Notification.objects.filter(
                notification_id=notification_id
            ).update(updated_at=now)
            if not touched:
                raise NotFoundError(notification_id)

            updated = DeliveryStatus.objects.filter(
                notification_id=notification_id, channel=channel
            ).update(updated_at=now, **fields)
            if not updated:
                DeliveryStatus.objects.create(
                    notification_id=notification_id, channel=channel, **fields
                )

        return DeliveryStatus.objects.get(
            notification_id=notification_id, channel=channel
        )

    @staticmethod
    def delete(notification_id: UUID | str) -> None:
        """Delete a notification and its delivery statuses.

        Raises:
            NotFoundError: If no such notification exists.
        """
        deleted, _ = Notification.objects.filter(
            notification_id=notification_id
        ).delete()
        if not deleted:
            raise NotFoundError(notification_id)

    @staticmethod
    def purge_expired(now: datetime | None = None) -> int:
        """Delete every notification whose expires_at has passed.

        Args:
            now: Cutoff time (default: current time).

        Returns:
            Number of notifications deleted.
        """
        now = now or timezone.now()
        _, per_model = Notification.objects.filter(expires_at__lte=now).delete()
        return per_model.get(Notification._meta.label, 0)

    @staticmethod
    def find_due_scheduled(
        now: datetime | None = None, limit: int = 100
    ) -> list[Notification]:
        """Find scheduled notifications that are due and not yet attempted.

        A notification is due when ``scheduled_for <= now`` and none of its
        tracked channels has a recorded outcome.

        Args:
            now: Reference time (default: current time).
            limit: Maximum number of results.

        Returns:
            Due notifications, earliest schedule first.
        """
        now = now or timezone.now()
        attempted = DeliveryStatus.objects.filter(
            notification=OuterRef("pk"), status__isnull=False
        )
        queryset = (
            Notification.objects.filter(scheduled_for__lte=now)
            .exclude(Exists(attempted))
            .prefetch_related("delivery_statuses")
            .order_by("scheduled_for")
        )
        return list(queryset[:limit])
