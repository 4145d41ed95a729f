"""svgpage — serve SVG files as full-width HTML pages.

Each SVG under a folder becomes a page: ``/diagram`` renders
``diagram.svg`` inside the layout template, ``/icons:arrow`` renders
``icons/arrow.svg``, and ``/`` redirects to the index page.

Basic usage::

    from svgpage import AppConfig, create_app

    app = create_app(AppConfig(svg_dir="diagrams"))
    app.run()

Or from the shell::

    svgpage diagrams --port 5000
"""

__version__ = "0.1.0"
__all__ = [
    "App",
    "AppConfig",
    "AssetNotFound",
    "ConfigurationError",
    "HTTPError",
    "MalformedSvg",
    "PageError",
    "Redirect",
    "RenderFailure",
    "Response",
    "SvgPageError",
    "create_app",
    "rewrite_root_tag",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import svgpage`` fast (no kida import) while providing a
    clean top-level API.
    """
    if name == "App":
        from svgpage.app import App

        return App

    if name == "AppConfig":
        from svgpage.config import AppConfig

        return AppConfig

    if name == "create_app":
        from svgpage.site import create_app

        return create_app

    if name == "rewrite_root_tag":
        from svgpage.pages.rewrite import rewrite_root_tag

        return rewrite_root_tag

    if name in ("Response", "Redirect"):
        from svgpage.http import response as _resp

        return getattr(_resp, name)

    if name in (
        "AssetNotFound",
        "ConfigurationError",
        "HTTPError",
        "MalformedSvg",
        "PageError",
        "RenderFailure",
        "SvgPageError",
    ):
        from svgpage import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
