"""In-process client that drives an svgpage App through ASGI."""

from typing import Any

from svgpage.app import App
from svgpage.http.response import HTML, Response


class TestClient:
    """Send requests straight to the ASGI callable, no sockets involved.

    Usage::

        async with TestClient(app) as client:
            response = await client.get("/home")
            assert response.status == 200
    """

    __test__ = False  # Tell pytest this is not a test class
    __slots__ = ("app",)

    def __init__(self, app: App) -> None:
        self.app = app

    async def __aenter__(self) -> "TestClient":
        self.app.freeze()
        return self

    async def __aexit__(self, *args: object) -> None:
        return None

    async def get(self, path: str) -> Response:
        return await self.request("GET", path)

    async def request(self, method: str, path: str) -> Response:
        """Run one request and collect what the app sends back.

        The returned ``headers`` hold everything except content-type and
        content-length, with lowercase names.
        """
        scope = {"type": "http", "method": method, "path": path}
        start: dict[str, Any] = {}
        chunks: list[bytes] = []

        async def receive() -> dict[str, Any]:
            return {"type": "http.request", "body": b"", "more_body": False}

        async def send(message: dict[str, Any]) -> None:
            if message["type"] == "http.response.start":
                start.update(message)
            else:
                chunks.append(message["body"])

        await self.app(scope, receive, send)

        headers = [(k.decode("latin-1"), v.decode("latin-1")) for k, v in start["headers"]]
        content_type = next((v for k, v in headers if k == "content-type"), HTML)
        return Response(
            body=b"".join(chunks),
            status=start["status"],
            content_type=content_type,
            headers=tuple((k, v) for k, v in headers if k not in ("content-type", "content-length")),
        )
