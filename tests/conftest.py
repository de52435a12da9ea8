"""Pytest configuration and shared fixtures."""

import os
import uuid

import django
from django.test import Client

import pytest

# Configure Django settings for tests
os.environ.setdefault("DJANGO_SETTINGS_MODULE", "food_ordering.settings_test")
django.setup()

from tests.factories import notification_payload  # noqa: E402


@pytest.fixture
def api_client():
    """Provide Django test client."""
    return Client()


@pytest.fixture
def recipient_id():
    """Provide a fresh recipient UUID."""
    return uuid.uuid4()


@pytest.fixture
def payload(recipient_id):
    """Provide a valid creation payload for the recipient."""
    return notification_payload(recipient_id=recipient_id)
