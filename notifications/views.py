"""API views for the notifications app.

A thin HTTP adapter over NotificationService for dispatchers (create,
report delivery outcomes) and for the recipient-facing read path (list and
count unread, mark read). Authentication is handled upstream.
"""

from uuid import UUID

from django.conf import settings

import pydantic
import structlog
from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from notifications.constants import MAX_UNREAD_LIMIT
from notifications.exceptions import ValidationError
from notifications.models import Notification
from notifications.schemas.notification import (
    DeliveryOutcomeRequest,
    MarkAllReadResponse,
    NotificationDetail,
    UnreadCountResponse,
    UnreadNotificationListResponse,
)
from notifications.services.notification_service import notification_service

logger = structlog.get_logger(__name__)


def _parse_uuid(value: str, field: str) -> UUID:
    """Parse a path parameter as UUID.

    Raises:
        ValidationError: If the value is not a valid UUID.
    """
    try:
        return UUID(value)
    except ValueError as err:
        raise ValidationError(
            f"Invalid {field} format",
            errors=[{"type": "uuid_parsing", "loc": [field], "msg": "Invalid UUID"}],
        ) from err


def _parse_limit(value: str | None, max_limit: int) -> int | None:
    """Parse the optional ``limit`` query parameter.

    Raises:
        ValidationError: If the value is not an integer in 1..max_limit.
    """
    if value is None:
        return None
    try:
        limit = int(value)
    except ValueError:
        limit = 0
    if not 1 <= limit <= max_limit:
        raise ValidationError(
            f"limit must be an integer between 1 and {max_limit}",
            errors=[{"type": "limit_range", "loc": ["limit"], "msg": "Out of range"}],
        )
    return limit


def _serialize(notification: Notification) -> dict:
    """Serialize a notification to its camelCase JSON representation."""
    return NotificationDetail.from_model(notification).model_dump(
        mode="json", by_alias=True
    )


class NotificationsAPIView(APIView):
    """Base view: no authentication at this layer."""

    authentication_classes: tuple = ()
    permission_classes = (AllowAny,)


class NotificationCreateView(NotificationsAPIView):
    """API endpoint for creating notification records.

    POST: Create a notification (used by the dispatcher)
    """

    def post(self, request):
        """Create a notification.

        Args:
            request: HTTP request with the notification payload

        Returns:
            201 Created with NotificationDetail
            400 Bad Request if validation fails
        """
        notification = notification_service.create_notification(request.data)
        return Response(_serialize(notification), status=status.HTTP_201_CREATED)


class NotificationDetailView(NotificationsAPIView):
    """API endpoint for retrieving and deleting individual notifications.

    GET: Retrieve notification details
    DELETE: Delete a notification
    """

    def get(self, _request, notification_id):
        """Retrieve notification by ID.

        Returns:
            200 OK with NotificationDetail
            400 Bad Request if the ID is malformed
            404 Not Found if the notification does not exist
        """
        notification_uuid = _parse_uuid(notification_id, "notification_id")

        notification = notification_service.get_notification(notification_uuid)
        return Response(_serialize(notification), status=status.HTTP_200_OK)

    def delete(self, _request, notification_id):
        """Delete notification by ID.

        Returns:
            204 No Content on success
            400 Bad Request if the ID is malformed
            404 Not Found if the notification does not exist
        """
        notification_uuid = _parse_uuid(notification_id, "notification_id")

        notification_service.delete_notification(notification_uuid)
        return Response(status=status.HTTP_204_NO_CONTENT)


class NotificationReadView(NotificationsAPIView):
    """API endpoint for marking a notification as read."""

    def post(self, _request, notification_id):
        """Mark notification as read.

        Returns:
            200 OK with the updated NotificationDetail
            400 Bad Request if the ID is malformed
            404 Not Found if the notification does not exist
        """
        notification_uuid = _parse_uuid(notification_id, "notification_id")

        notification = notification_service.mark_as_read(notification_uuid)
        return Response(_serialize(notification), status=status.HTTP_200_OK)


class DeliveryOutcomeView(NotificationsAPIView):
    """API endpoint for reporting the outcome of a delivery attempt.

    Untracked channels (inApp or unknown names) are accepted and leave the
    record unchanged.
    """

    def post(self, request, notification_id, channel):
        """Record a delivery outcome for one channel.

        Args:
            request: HTTP request with ``{status, error?}``
            notification_id: UUID of the notification
            channel: Channel the attempt was made on

        Returns:
            200 OK with the NotificationDetail after the update
            400 Bad Request if the ID or body is invalid
            404 Not Found if the notification does not exist
        """
        notification_uuid = _parse_uuid(notification_id, "notification_id")

        try:
            outcome = DeliveryOutcomeRequest.model_validate(request.data)
        except pydantic.ValidationError as e:
            errors = e.errors(include_url=False, include_context=False)
            logger.warning(
                "invalid_delivery_outcome_body",
                notification_id=notification_id,
                validation_errors=errors,
            )
            raise ValidationError("Invalid request parameters", errors=errors) from e

        notification_service.record_delivery_outcome(
            notification_id=notification_uuid,
            channel=channel,
            status=outcome.status,
            error=outcome.error,
        )
        notification = notification_service.get_notification(notification_uuid)
        return Response(_serialize(notification), status=status.HTTP_200_OK)


class UnreadNotificationListView(NotificationsAPIView):
    """API endpoint listing a recipient's unread notifications, newest first."""

    def get(self, request, recipient_id):
        """List unread notifications.

        Query parameters:
        - limit: Maximum number of results (1-100, default 20)

        Returns:
            200 OK with UnreadNotificationListResponse
            400 Bad Request if the ID or limit is invalid
        """
        recipient_uuid = _parse_uuid(recipient_id, "recipient_id")

        max_limit = getattr(settings, "NOTIFICATION_UNREAD_MAX_LIMIT", MAX_UNREAD_LIMIT)
        limit = _parse_limit(
            request.query_params.get("limit"), max_limit
        ) or notification_service.default_unread_limit()

        notifications = notification_service.find_unread_for_user(
            recipient_uuid, limit=limit
        )
        response = UnreadNotificationListResponse(
            notifications=[NotificationDetail.from_model(n) for n in notifications],
            count=len(notifications),
            limit=limit,
        )
        return Response(
            response.model_dump(mode="json", by_alias=True), status=status.HTTP_200_OK
        )


class UnreadCountView(NotificationsAPIView):
    """API endpoint returning a recipient's unread badge count."""

    def get(self, _request, recipient_id):
        """Count unread notifications.

        Returns:
            200 OK with UnreadCountResponse
            400 Bad Request if the ID is malformed
        """
        recipient_uuid = _parse_uuid(recipient_id, "recipient_id")

        response = UnreadCountResponse(
            unread_count=notification_service.count_unread_for_user(recipient_uuid)
        )
        return Response(
            response.model_dump(mode="json", by_alias=True), status=status.HTTP_200_OK
        )


class MarkAllReadView(NotificationsAPIView):
    """API endpoint marking all of a recipient's notifications as read."""

    def post(self, _request, recipient_id):
        """Mark all unread notifications as read.

        Returns:
            200 OK with MarkAllReadResponse
            400 Bad Request if the ID is malformed
        """
        recipient_uuid = _parse_uuid(recipient_id, "recipient_id")

        notification_ids = notification_service.mark_all_as_read(recipient_uuid)
        response = MarkAllReadResponse(
            notification_ids=notification_ids, count=len(notification_ids)
        )
        return Response(
            response.model_dump(mode="json", by_alias=True), status=status.HTTP_200_OK
        )
