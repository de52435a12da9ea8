"""ASGI config for the food-ordering notification service."""

import os

from django.core.asgi import get_asgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "food_ordering.settings")

application = get_asgi_application()
