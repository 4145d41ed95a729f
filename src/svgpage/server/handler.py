"""ASGI HTTP handling: one scope in, one complete response out.

The only module that builds raw ASGI messages. Route matching, the two
page handlers, and failure mapping all meet here.
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable, MutableMapping
from typing import TYPE_CHECKING, Any, TypeAlias

from svgpage.errors import HTTPError
from svgpage.http.request import Request
from svgpage.http.response import Response
from svgpage.server.errors import http_error_response, page_error_response
from svgpage.server.routes import RouteMatch, match_route

if TYPE_CHECKING:
    from svgpage.app import App

Scope: TypeAlias = MutableMapping[str, Any]
Receive: TypeAlias = Callable[[], Awaitable[MutableMapping[str, Any]]]
Send: TypeAlias = Callable[[MutableMapping[str, Any]], Awaitable[None]]

logger = logging.getLogger("svgpage.server")


async def handle_request(scope: Scope, send: Send, *, app: App) -> None:
    """Answer a single HTTP request for *app*."""
    request = Request.from_scope(scope)
    try:
        route = match_route(request.method, request.path)
        response = await _dispatch(route, app)
    except HTTPError as exc:
        logger.debug("%d %s %s: %s", exc.status, request.method, request.path, exc.detail)
        response = http_error_response(exc)
    except Exception as exc:
        response = page_error_response(exc, request)

    await send_response(response, send)


async def _dispatch(route: RouteMatch, app: App) -> Response:
    if route.is_index:
        return app.index(app.config).to_response()
    assert route.page is not None
    return await app.page(route.page, app.config, app.kida_env)


async def send_response(response: Response, send: Send) -> None:
    """Emit *response* as ``http.response.start`` plus a single body message."""
    body = response.body_bytes
    headers = [(b"content-type", response.content_type.encode("latin-1"))]
    headers += [(k.lower().encode("latin-1"), v.encode("latin-1")) for k, v in response.headers]
    headers.append((b"content-length", str(len(body)).encode("latin-1")))

    await send({"type": "http.response.start", "status": response.status, "headers": headers})
    await send({"type": "http.response.body", "body": body})
