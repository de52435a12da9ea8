"""Production server startup script for the food-ordering notification service.

Starts the Django application under Gunicorn. Used as the container
entrypoint for the API; RQ workers for the expiry sweep are started
separately with ``rqworker``.
"""

import os
import sys

from gunicorn.app.wsgiapp import run

WSGI_APP = "food_ordering.wsgi:application"


def build_argv():
    """Build the Gunicorn command line from the environment.

    Environment Variables:
    - GUNICORN_BIND: Address to bind (default: 0.0.0.0:8000)
    - WEB_CONCURRENCY: Worker processes (default: 4)
    - GUNICORN_THREADS: Threads per worker (default: 2)
    - GUNICORN_TIMEOUT: Worker timeout in seconds (default: 30)

    Access and error logs go to stdout/stderr for container log aggregation.
    """
    return [
        "gunicorn",
        WSGI_APP,
        "--bind",
        os.getenv("GUNICORN_BIND", "0.0.0.0:8000"),
        "--workers",
        os.getenv("WEB_CONCURRENCY", "4"),
        "--threads",
        os.getenv("GUNICORN_THREADS", "2"),
        "--timeout",
        os.getenv("GUNICORN_TIMEOUT", "30"),
        "--access-logfile",
        "-",
        "--error-logfile",
        "-",
    ]


def main():
    """Start the food-ordering notification service using Gunicorn."""
    sys.argv = build_argv()
    run()


if __name__ == "__main__":
    main()
