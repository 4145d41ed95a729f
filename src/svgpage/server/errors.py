"""Failure to response mapping.

Routing errors answer their own status with a short plain-text detail.
Anything that goes wrong while building a page answers one fixed 500 so
the client cannot tell a missing file from a broken template; the log
holds the difference.
"""

from svgpage.errors import HTTPError, PageError
from svgpage.http.request import Request
from svgpage.http.response import PLAIN_TEXT, Response
from svgpage.server.terminal_errors import log_error

PAGE_FAILURE_BODY = "Failed to render page"
INTERNAL_ERROR_BODY = "Internal Server Error"


def http_error_response(exc: HTTPError) -> Response:
    return Response(
        body=exc.detail or f"Error {exc.status}",
        status=exc.status,
        content_type=PLAIN_TEXT,
        headers=exc.headers,
    )


def page_error_response(exc: Exception, request: Request) -> Response:
    """Log *exc* in full and answer an opaque 500."""
    log_error(exc, request)
    body = PAGE_FAILURE_BODY if isinstance(exc, PageError) else INTERNAL_ERROR_BODY
    return Response(body=body, status=500, content_type=PLAIN_TEXT)
