"""The page pipeline: resolve a name, rewrite the SVG, bind the layout.

Usage::

    svg = await load_page(config.svg_dir, "icons:arrow")
    html = render_page(env, "layout.html", RenderContext("icons/arrow", rewrite_root_tag(svg)))
"""

from svgpage.pages.binder import RenderContext, render_page
from svgpage.pages.resolve import load_page, normalize_page_name, page_path
from svgpage.pages.rewrite import rewrite_root_tag

__all__ = [
    "RenderContext",
    "load_page",
    "normalize_page_name",
    "page_path",
    "render_page",
    "rewrite_root_tag",
]
