"""The svgpage ASGI application.

Holds the configuration and the two page handlers. On first use it
checks the SVG folder and builds the kida environment; after that it is
read-only and shared by every request.
"""

from __future__ import annotations

import threading
from collections.abc import Awaitable, Callable
from pathlib import Path
from typing import TypeAlias

from kida import Environment

from svgpage.config import AppConfig
from svgpage.errors import ConfigurationError
from svgpage.http.response import Redirect, Response
from svgpage.server.handler import Receive, Scope, Send, handle_request
from svgpage.templating.integration import create_environment

IndexHandler: TypeAlias = Callable[[AppConfig], Redirect]
PageHandler: TypeAlias = Callable[[str, AppConfig, Environment], Awaitable[Response]]


class App:
    """Serves ``GET /`` with *index* and ``GET /{page}`` with *page*.

    Thread safety:
        ``freeze()`` takes a lock and re-checks, so when several workers
        see their first request at once the folder check and environment
        build still happen exactly once.
    """

    __slots__ = ("_freeze_lock", "_frozen", "_kida_env", "config", "index", "page")

    def __init__(
        self,
        config: AppConfig | None = None,
        *,
        index: IndexHandler,
        page: PageHandler,
    ) -> None:
        self.config: AppConfig = config or AppConfig()
        self.index = index
        self.page = page
        self._frozen = False
        self._freeze_lock = threading.Lock()
        self._kida_env: Environment | None = None

    @property
    def kida_env(self) -> Environment:
        """The template environment. Freezes the app on first access."""
        self.freeze()
        assert self._kida_env is not None
        return self._kida_env

    def freeze(self) -> None:
        """Validate the config and build the environment, once.

        Raises:
            ConfigurationError: ``svg_dir`` is not an existing directory.
        """
        if self._frozen:
            return
        with self._freeze_lock:
            if self._frozen:
                return
            svg_dir = Path(self.config.svg_dir)
            if not svg_dir.is_dir():
                msg = f"SVG folder '{svg_dir}' does not exist"
                raise ConfigurationError(msg)
            self._kida_env = create_environment(self.config)
            self._frozen = True

    def run(self) -> None:
        """Freeze, then serve on ``config.host:config.port`` with pounce."""
        self.freeze()

        from svgpage.server.dev import run_server

        run_server(
            self,
            self.config.host,
            self.config.port,
            reload=self.config.debug,
            log_level=self.config.log_level,
        )

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] == "lifespan":
            await self._lifespan(receive, send)
        elif scope["type"] == "http":
            self.freeze()
            await handle_request(scope, send, app=self)

    async def _lifespan(self, receive: Receive, send: Send) -> None:
        # A missing SVG folder fails startup instead of the first request.
        while True:
            message = await receive()
            if message["type"] == "lifespan.startup":
                try:
                    self.freeze()
                except ConfigurationError as exc:
                    await send({"type": "lifespan.startup.failed", "message": str(exc)})
                    return
                await send({"type": "lifespan.startup.complete"})
            elif message["type"] == "lifespan.shutdown":
                await send({"type": "lifespan.shutdown.complete"})
                return
