"""URL table: ``GET /`` and ``GET /{page}``, nothing else.

A page name is exactly one path segment; nested SVG folders are reached
with ``:`` inside that segment, never with extra slashes.
"""

from dataclasses import dataclass

from svgpage.errors import MethodNotAllowed, NotFound

ALLOWED_METHODS = frozenset({"GET"})


@dataclass(frozen=True, slots=True)
class RouteMatch:
    """``page`` is ``None`` for the index route."""

    page: str | None = None

    @property
    def is_index(self) -> bool:
        return self.page is None


def match_route(method: str, path: str) -> RouteMatch:
    """Resolve *method* and *path* to a route.

    Raises:
        NotFound: More than one path segment.
        MethodNotAllowed: Known path, but not a GET.
    """
    segments = [s for s in path.split("/") if s]
    if len(segments) > 1:
        raise NotFound(f"No route matches {method} {path!r}")
    if method not in ALLOWED_METHODS:
        raise MethodNotAllowed(ALLOWED_METHODS)
    return RouteMatch(page=segments[0] if segments else None)
