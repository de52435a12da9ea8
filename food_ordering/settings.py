"""Django settings for the food-ordering notification service.

Every deployment-specific value is read from the environment so the same
module serves local runs, containers and RQ workers.
"""

import os
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent.parent

# SECURITY WARNING: keep the secret key used in production secret!
SECRET_KEY = os.getenv("DJANGO_SECRET_KEY", "django-insecure-change-me")

# SECURITY WARNING: don't run with debug turned on in production!
DEBUG = os.getenv("DJANGO_DEBUG", "false").lower() in ("1", "true", "yes")

ALLOWED_HOSTS: list[str] = os.getenv("DJANGO_ALLOWED_HOSTS", "*").split(",")

# Application definition

INSTALLED_APPS = [
    "django.contrib.contenttypes",
    "django.contrib.auth",
    # Third-party apps
    "rest_framework",
    "django_rq",
    # Domain apps
    "notifications.apps.NotificationsConfig",
]

MIDDLEWARE = [
    "notifications.middleware.RequestIDMiddleware",
    "notifications.middleware.ProcessTimeMiddleware",
    "django.middleware.security.SecurityMiddleware",
    "django.middleware.common.CommonMiddleware",
]

ROOT_URLCONF = "food_ordering.urls"

WSGI_APPLICATION = "food_ordering.wsgi.application"

# Database

DATABASES = {
    "default": {
        "ENGINE": os.getenv("DB_ENGINE", "django.db.backends.postgresql"),
        "NAME": os.getenv("DB_NAME", "food_ordering"),
        "USER": os.getenv("DB_USER", "food_ordering"),
        "PASSWORD": os.getenv("DB_PASSWORD", ""),
        "HOST": os.getenv("DB_HOST", "localhost"),
        "PORT": os.getenv("DB_PORT", "5432"),
        "CONN_MAX_AGE": 60,
    }
}

DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

# Internationalization

LANGUAGE_CODE = "en-us"

TIME_ZONE = "UTC"

USE_I18N = False

USE_TZ = True

# Cache and background jobs

REDIS_URL = os.getenv("REDIS_URL", "redis://localhost:6379/0")

CACHES = {
    "default": {
        "BACKEND": "django.core.cache.backends.redis.RedisCache",
        "LOCATION": REDIS_URL,
    }
}

RQ_QUEUES = {
    "default": {
        "URL": REDIS_URL,
        "DEFAULT_TIMEOUT": 360,
    },
}

# Django REST Framework

REST_FRAMEWORK = {
    "DEFAULT_AUTHENTICATION_CLASSES": [],
    "DEFAULT_PERMISSION_CLASSES": [
        "rest_framework.permissions.AllowAny",
    ],
    "DEFAULT_RENDERER_CLASSES": [
        "rest_framework.renderers.JSONRenderer",
    ],
    "DEFAULT_PARSER_CLASSES": [
        "rest_framework.parsers.JSONParser",
    ],
    "EXCEPTION_HANDLER": "notifications.exceptions.custom_exception_handler",
    "UNAUTHENTICATED_USER": None,
}

# Logging is configured with structlog by NotificationsConfig.ready().
CONFIGURE_STRUCTLOG = True
LOGGING_CONFIG = None

# Notification settings

NOTIFICATION_UNREAD_DEFAULT_LIMIT = int(
    os.getenv("NOTIFICATION_UNREAD_DEFAULT_LIMIT", "20")
)
NOTIFICATION_UNREAD_MAX_LIMIT = int(os.getenv("NOTIFICATION_UNREAD_MAX_LIMIT", "100"))
NOTIFICATION_EXPIRY_SWEEP_INTERVAL = int(
    os.getenv("NOTIFICATION_EXPIRY_SWEEP_INTERVAL", "300")
)
