"""Component tests for the recipient-facing unread endpoints."""

import uuid
from datetime import timedelta

from django.test import override_settings
from django.utils import timezone

from notifications.models import Notification
from tests.base import BaseComponentTest
from tests.factories import create_notification


class RecipientEndpointTest(BaseComponentTest):
    """Shared fixtures for /users/{recipientId}/notifications endpoints."""

    def setUp(self):
        """Set up a recipient with three unread notifications."""
        super().setUp()
        self.recipient_id = uuid.uuid4()
        self.user_path = f"{self.base_url}/users/{self.recipient_id}/notifications"
        now = timezone.now()
        self.notifications = []
        for minutes_ago in (30, 20, 10):
            notification = create_notification(recipient_id=self.recipient_id)
            Notification.objects.filter(
                notification_id=notification.notification_id
            ).update(created_at=now - timedelta(minutes=minutes_ago))
            self.notifications.append(notification)
        create_notification()


class TestUnreadListEndpoint(RecipientEndpointTest):
    """Component tests for GET /users/{recipientId}/notifications/unread."""

    def test_lists_unread_newest_first(self):
        """Test unread notifications are returned newest first."""
        response = self.client.get(f"{self.user_path}/unread")

        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertEqual(body["count"], 3)
        self.assertEqual(body["limit"], 20)
        self.assertEqual(
            [n["notificationId"] for n in body["notifications"]],
            [str(n.notification_id) for n in reversed(self.notifications)],
        )

    def test_limit_query_parameter(self):
        """Test the limit caps the page."""
        response = self.client.get(f"{self.user_path}/unread", {"limit": 2})

        body = response.json()
        self.assertEqual(body["count"], 2)
        self.assertEqual(body["limit"], 2)

    @override_settings(NOTIFICATION_UNREAD_MAX_LIMIT=5)
    def test_invalid_limit_returns_400(self):
        """Test out-of-range and non-numeric limits are rejected."""
        for limit in ("0", "6", "many"):
            with self.subTest(limit=limit):
                response = self.client.get(
                    f"{self.user_path}/unread", {"limit": limit}
                )
                self.assertEqual(response.status_code, 400)

    def test_invalid_recipient_returns_400(self):
        """Test a malformed recipient ID is rejected."""
        response = self.client.get(
            f"{self.base_url}/users/not-a-uuid/notifications/unread"
        )

        self.assertEqual(response.status_code, 400)

    def test_unknown_recipient_has_empty_list(self):
        """Test a recipient without notifications gets an empty page."""
        response = self.client.get(
            f"{self.base_url}/users/{uuid.uuid4()}/notifications/unread"
        )

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["notifications"], [])


class TestUnreadCountEndpoint(RecipientEndpointTest):
    """Component tests for GET /users/{recipientId}/notifications/unread/count."""

    def test_count_tracks_read_state(self):
        """Test the badge count drops as notifications are read."""
        response = self.client.get(f"{self.user_path}/unread/count")
        self.assertEqual(response.json(), {"unreadCount": 3})

        self.post_json(f"/notifications/{self.notifications[0].notification_id}/read")

        response = self.client.get(f"{self.user_path}/unread/count")
        self.assertEqual(response.json(), {"unreadCount": 2})


class TestMarkAllReadEndpoint(RecipientEndpointTest):
    """Component tests for POST /users/{recipientId}/notifications/read-all."""

    def test_marks_all_and_returns_ids(self):
        """Test every unread notification of the recipient is marked read."""
        response = self.post_json(f"/users/{self.recipient_id}/notifications/read-all")

        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertEqual(body["count"], 3)
        self.assertEqual(
            set(body["notificationIds"]),
            {str(n.notification_id) for n in self.notifications},
        )
        self.assertEqual(
            self.client.get(f"{self.user_path}/unread/count").json(),
            {"unreadCount": 0},
        )

    def test_second_call_marks_nothing(self):
        """Test repeating the call is a no-op."""
        self.post_json(f"/users/{self.recipient_id}/notifications/read-all")

        response = self.post_json(f"/users/{self.recipient_id}/notifications/read-all")

        self.assertEqual(response.json(), {"notificationIds": [], "count": 0})
