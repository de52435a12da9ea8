"""Unit tests for food_ordering.wsgi and food_ordering.asgi modules."""

import unittest

from food_ordering import asgi, wsgi


class TestWsgiModule(unittest.TestCase):
    """Tests for WSGI configuration module."""

    def test_wsgi_application_is_created(self):
        """Test that WSGI application object is created."""
        self.assertTrue(hasattr(wsgi, "application"))
        self.assertIsNotNone(wsgi.application)


class TestAsgiModule(unittest.TestCase):
    """Tests for ASGI configuration module."""

    def test_asgi_application_is_created(self):
        """Test that ASGI application object is created."""
        self.assertTrue(hasattr(asgi, "application"))
        self.assertTrue(callable(asgi.application))


if __name__ == "__main__":
    unittest.main()
