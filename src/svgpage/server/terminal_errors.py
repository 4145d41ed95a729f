"""Operator-facing logs for 500s.

Page failures are routine (a mistyped URL, a broken SVG, a template
typo) and get one line naming the request and the cause::

    500 GET /home: Failed to load SVG at svg/home.svg: [Errno 2] No such file or directory

Kida template errors keep kida's compact rendering inside a banner::

    -- Template Error -----------------------------------------------
    K-RUN-001: Undefined variable 'titel' in layout.html:6

      Route: GET /home
    -----------------------------------------------------------------

Anything else is a bug and is logged with its traceback.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from svgpage.errors import PageError, RenderFailure

if TYPE_CHECKING:
    from svgpage.http.request import Request

logger = logging.getLogger("svgpage.server")

_BANNER_WIDTH = 65


def _is_kida_error(exc: BaseException) -> bool:
    return "kida" in (type(exc).__module__ or "")


def format_template_error(exc: BaseException, request: Request | None = None) -> str:
    """Banner text for a template engine error."""
    title = "-- Template Error "
    detail = exc.format_compact() if hasattr(exc, "format_compact") else str(exc)
    lines = [title.ljust(_BANNER_WIDTH, "-"), detail]
    if request is not None:
        lines += ["", f"  Route: {request.method} {request.path}"]
    lines.append("-" * _BANNER_WIDTH)
    return "\n".join(lines)


def log_error(exc: BaseException, request: Request | None = None) -> None:
    """Log a 500-causing error with everything the operator needs."""
    prefix = f"500 {request.method} {request.path}" if request is not None else "Server error"

    if isinstance(exc, RenderFailure) and _is_kida_error(exc.reason):
        logger.error("%s\n%s", prefix, format_template_error(exc.reason, request))
    elif isinstance(exc, PageError):
        logger.error("%s: %s", prefix, exc)
    else:
        logger.error(prefix, exc_info=exc)
