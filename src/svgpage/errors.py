"""svgpage exception hierarchy.

Shared by the route table, App, request handler, and the page pipeline so every module
raises and catches the same types.
"""

from dataclasses import dataclass
from pathlib import Path


class SvgPageError(Exception):
    """Base for all svgpage-specific errors."""


class ConfigurationError(SvgPageError):
    """Raised when app configuration is invalid.

    Raised by ``App.freeze()`` at startup.
    """


@dataclass(frozen=True, slots=True)
class HTTPError(SvgPageError):
    """An error that maps directly to an HTTP status code.

    Raised by route matching. The request handler answers with the status,
    the detail as plain text, and any extra headers.
    """

    status: int
    detail: str = ""
    headers: tuple[tuple[str, str], ...] = ()

    def __str__(self) -> str:
        if self.detail:
            return f"{self.status}: {self.detail}"
        return str(self.status)


class NotFound(HTTPError):  # noqa: N818
    """404: no route matched the request path."""

    def __init__(self, detail: str = "Not Found") -> None:
        super().__init__(status=404, detail=detail)


class MethodNotAllowed(HTTPError):  # noqa: N818
    """405: route exists but not for this HTTP method.

    Includes an ``Allow`` header listing the valid methods.
    """

    def __init__(self, allowed: frozenset[str], detail: str = "") -> None:
        allow_value = ", ".join(sorted(allowed))
        default_detail = f"Method not allowed. Allowed methods: {allow_value}"
        super().__init__(
            status=405,
            detail=detail or default_detail,
            headers=(("Allow", allow_value),),
        )


# -- Page pipeline --


class PageError(SvgPageError):
    """A failure while turning a page name into a rendered page.

    Every subclass is reported to the client as the same opaque 500;
    the message carries the operator-facing detail.
    """


class MalformedSvg(PageError):  # noqa: N818
    """The document has no parseable ``<svg ...>`` opening tag."""


class AssetNotFound(PageError):  # noqa: N818
    """The SVG file is missing, unreadable, or not valid UTF-8 text."""

    def __init__(self, path: Path, reason: BaseException | str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load SVG at {path}: {reason}")


class RenderFailure(PageError):  # noqa: N818
    """The template engine could not produce the page."""

    def __init__(self, template: str, reason: BaseException) -> None:
        self.template = template
        self.reason = reason
        super().__init__(f"Template {template!r} failed to render: {reason}")
