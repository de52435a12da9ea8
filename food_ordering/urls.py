"""URL configuration for the food-ordering notification service."""

from django.urls import include, path

urlpatterns = [
    path("api/v1/notifications/", include("notifications.urls")),
]
