"""Run the app under pounce.

Pounce's ``run()`` takes an import string, but svgpage has a live ``App``
object built from command-line configuration, so ``pounce.Server`` is
driven directly with the ASGI callable.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from svgpage.app import App


def run_server(
    app: App,
    host: str,
    port: int,
    *,
    reload: bool = False,
    log_level: str = "info",
) -> None:
    """Start a pounce server with the given App.

    Args:
        app: ASGI callable (svgpage App instance).
        host: Bind host address.
        port: Bind port number.
        reload: Restart on source changes (development only).
        log_level: pounce log level (debug, info, warning, error).
    """
    from pounce.config import ServerConfig
    from pounce.server import Server

    config = ServerConfig(
        host=host,
        port=port,
        workers=1,
        reload=reload,
        log_level=log_level,
    )
    Server(config, app).run()
