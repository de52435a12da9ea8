"""Request ID middleware for log correlation."""

import uuid
from collections.abc import Callable

from django.http import HttpRequest, HttpResponse

from notifications.constants import REQUEST_ID_HEADER
from notifications.logging.context import clear_request_id, set_request_id


class RequestIDMiddleware:
    """Attach a request ID to every request, its logs and its response.

    An incoming X-Request-ID header is reused, so a dispatcher can correlate
    its own logs with the outcome reports it sends; otherwise a UUID is
    generated. The ID is held in thread-local storage while the request is
    processed and cleared afterwards.
    """

    def __init__(self, get_response: Callable[[HttpRequest], HttpResponse]) -> None:
        """Initialize the middleware.

        Args:
            get_response: The next middleware or view in the chain.
        """
        self.get_response = get_response

    def __call__(self, request: HttpRequest) -> HttpResponse:
        """Process the request with its request ID set.

        Args:
            request: The incoming HTTP request.

        Returns:
            The HTTP response with the request ID header added.
        """
        request_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid.uuid4())

        set_request_id(request_id)
        request.request_id = request_id  # type: ignore[attr-defined]

        try:
            response = self.get_response(request)
            response[REQUEST_ID_HEADER] = request_id
            return response
        finally:
            clear_request_id()
