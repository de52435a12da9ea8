"""Unit tests for Django app configuration."""

import unittest
from unittest.mock import patch

from django.apps import AppConfig, apps
from django.conf import settings
from django.test import SimpleTestCase, override_settings

from notifications.apps import NotificationsConfig


class TestNotificationsConfig(unittest.TestCase):
    """Tests for NotificationsConfig class."""

    def test_inherits_from_appconfig(self):
        """Test that NotificationsConfig inherits from AppConfig."""
        self.assertTrue(issubclass(NotificationsConfig, AppConfig))

    def test_name_is_correct(self):
        """Test that NotificationsConfig has correct app name."""
        self.assertEqual(NotificationsConfig.name, "notifications")

    def test_default_auto_field_is_set(self):
        """Test that NotificationsConfig has default_auto_field set."""
        self.assertEqual(
            NotificationsConfig.default_auto_field, "django.db.models.BigAutoField"
        )


class TestNotificationsAppIntegration(SimpleTestCase):
    """Tests for notifications app integration with Django."""

    def test_app_is_installed(self):
        """Test that the notifications app is registered."""
        self.assertTrue(apps.is_installed("notifications"))
        self.assertIsInstance(
            apps.get_app_config("notifications"), NotificationsConfig
        )

    def test_required_apps_installed(self):
        """Test that the third-party apps are installed."""
        for app in ("rest_framework", "django_rq"):
            with self.subTest(app=app):
                self.assertIn(app, settings.INSTALLED_APPS)

    @patch("notifications.logging.setup_logging")
    def test_ready_skips_logging_when_disabled(self, mock_setup_logging):
        """Test ready() leaves logging alone when CONFIGURE_STRUCTLOG is off."""
        apps.get_app_config("notifications").ready()

        mock_setup_logging.assert_not_called()

    @override_settings(CONFIGURE_STRUCTLOG=True)
    @patch("notifications.logging.setup_logging")
    def test_ready_configures_logging(self, mock_setup_logging):
        """Test ready() configures structlog when enabled."""
        apps.get_app_config("notifications").ready()

        mock_setup_logging.assert_called_once_with()
