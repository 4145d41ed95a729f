"""What the server sends back: a page, a plain-text error, or a redirect."""

from __future__ import annotations

from dataclasses import dataclass

HTML = "text/html; charset=utf-8"
PLAIN_TEXT = "text/plain; charset=utf-8"


@dataclass(frozen=True, slots=True)
class Response:
    """A complete HTTP response. ``headers`` excludes content-type/length."""

    body: str | bytes = ""
    status: int = 200
    content_type: str = HTML
    headers: tuple[tuple[str, str], ...] = ()

    @property
    def body_bytes(self) -> bytes:
        if isinstance(self.body, str):
            return self.body.encode("utf-8")
        return self.body

    @property
    def text(self) -> str:
        if isinstance(self.body, bytes):
            return self.body.decode("utf-8")
        return self.body


@dataclass(frozen=True, slots=True)
class Redirect:
    """Send the client to *url*.

    307 keeps the request method; ``permanent()`` gives 308.
    """

    url: str
    status: int = 307

    @classmethod
    def permanent(cls, url: str) -> Redirect:
        return cls(url, status=308)

    def to_response(self) -> Response:
        return Response(
            body="",
            status=self.status,
            content_type=PLAIN_TEXT,
            headers=(("location", self.url),),
        )
