"""The two routes svgpage serves.

``GET /`` redirects to the configured index page. ``GET /{page}`` loads
``<svg_dir>/<page>.svg``, stretches it to full width, and wraps it in
the layout template. Every page failure answers the same opaque 500
(see ``svgpage.server.errors``); the cause goes to the server log.
"""

import logging

from kida import Environment

from svgpage.app import App
from svgpage.config import AppConfig
from svgpage.http.response import HTML, Redirect, Response
from svgpage.pages.binder import RenderContext, render_page
from svgpage.pages.resolve import load_page, normalize_page_name
from svgpage.pages.rewrite import rewrite_root_tag

logger = logging.getLogger("svgpage.server")


def home_redirect(config: AppConfig) -> Redirect:
    """Send ``/`` to the configured index page."""
    logger.info("Redirecting / to %s", config.index)
    if config.permanent_redirect:
        return Redirect.permanent(config.index)
    return Redirect(config.index)


async def render_svg(page: str, config: AppConfig, env: Environment) -> Response:
    """Render one SVG file as a full HTML page."""
    svg_content = await load_page(config.svg_dir, page)
    context = RenderContext(
        title=normalize_page_name(page),
        svg_content=rewrite_root_tag(svg_content),
    )
    html = render_page(env, config.layout_file, context)
    return Response(body=html, content_type=HTML)


def create_app(config: AppConfig | None = None) -> App:
    """Build the svgpage App for *config*."""
    return App(config, index=home_redirect, page=render_svg)
