"""Application configuration.

AppConfig is a frozen dataclass, immutable after creation, built once at
startup and handed to the app, never a module-level mutable global.
"""

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True, slots=True)
class AppConfig:
    """Application configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = AppConfig(svg_dir="diagrams", index="/overview", port=8080)
    """

    # Server
    host: str = "127.0.0.1"
    port: int = 5000
    debug: bool = False

    # Pages
    svg_dir: str | Path = "."
    index: str = "/home"  # Where "/" redirects to
    permanent_redirect: bool = False  # 308 instead of 307 for "/"

    # Templates
    template_dir: str | Path | None = None  # Overrides the packaged templates
    layout_template: str = "layout"
    template_suffix: str = ".html"
    autoescape: bool = True
    trim_blocks: bool = True
    lstrip_blocks: bool = True

    # Logging
    log_level: str = "info"

    @property
    def layout_file(self) -> str:
        """Template file the layout name resolves to (``layout`` -> ``layout.html``)."""
        return f"{self.layout_template}{self.template_suffix}"
