"""Base test classes for different test types."""

from django.test import Client, TestCase


class BaseUnitTest(TestCase):
    """Base class for unit tests.

    Use this for tests that exercise the store and services directly
    against the SQLite in-memory database.
    """


class BaseComponentTest(TestCase):
    """Base class for component tests.

    Use this for tests that go through the full Django request/response
    cycle: URL routing, middleware, views and the exception handler.
    """

    base_url = "/api/v1/notifications"

    def setUp(self):
        """Set up the test client."""
        self.client = Client()

    def post_json(self, path, data=None, **extra):
        """POST a JSON body to an API path."""
        return self.client.post(
            f"{self.base_url}{path}",
            data=data or {},
            content_type="application/json",
            **extra,
        )
