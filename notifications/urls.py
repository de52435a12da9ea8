"""URL routing configuration for the notifications application."""

from django.urls import path

from .views import (
    DeliveryOutcomeView,
    MarkAllReadView,
    NotificationCreateView,
    NotificationDetailView,
    NotificationReadView,
    UnreadCountView,
    UnreadNotificationListView,
)

urlpatterns = [
    # Notification endpoints (specific routes before generic)
    path(
        "notifications",
        NotificationCreateView.as_view(),
        name="notification-create",
    ),
    path(
        "notifications/<str:notification_id>/read",
        NotificationReadView.as_view(),
        name="notification-read",
    ),
    path(
        "notifications/<str:notification_id>/delivery/<str:channel>",
        DeliveryOutcomeView.as_view(),
        name="notification-delivery-outcome",
    ),
    path(
        "notifications/<str:notification_id>",
        NotificationDetailView.as_view(),
        name="notification-detail",
    ),
    # Recipient endpoints
    path(
        "users/<str:recipient_id>/notifications/unread/count",
        UnreadCountView.as_view(),
        name="unread-count",
    ),
    path(
        "users/<str:recipient_id>/notifications/unread",
        UnreadNotificationListView.as_view(),
        name="unread-notifications",
    ),
    path(
        "users/<str:recipient_id>/notifications/read-all",
        MarkAllReadView.as_view(),
        name="mark-all-read",
    ),
]
