"""Thread-local context management for request tracking."""

import threading

_request_context = threading.local()


def set_request_id(request_id: str) -> None:
    """Store the request ID for the current thread.

    Args:
        request_id: The unique request identifier to store.
    """
    _request_context.request_id = request_id


def get_request_id() -> str | None:
    """Return the request ID of the current thread, or None if not set."""
    return getattr(_request_context, "request_id", None)


def clear_request_id() -> None:
    """Forget the request ID of the current thread.

    Called once the request is finished so worker threads do not leak a
    request ID into the next request they serve.
    """
    if hasattr(_request_context, "request_id"):
        delattr(_request_context, "request_id")
