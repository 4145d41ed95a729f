"""Shared fixtures: a throwaway SVG folder and an app serving it."""

from pathlib import Path

import pytest

from svgpage.app import App
from svgpage.config import AppConfig
from svgpage.site import create_app

HOME_SVG = """\
<?xml version="1.0" encoding="UTF-8"?>
<svg xmlns="http://www.w3.org/2000/svg" width="640" height="480" viewBox="0 0 640 480">
  <rect x="10" y="10" width="100" height="50" fill="teal"/>
</svg>
"""

ARROW_SVG = '<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 24 24"><path d="M4 12h16"/></svg>'


@pytest.fixture
def svg_dir(tmp_path: Path) -> Path:
    """A folder with ``home.svg`` and ``icons/arrow.svg``."""
    root = tmp_path / "svg"
    (root / "icons").mkdir(parents=True)
    (root / "home.svg").write_text(HOME_SVG, encoding="utf-8")
    (root / "icons" / "arrow.svg").write_text(ARROW_SVG, encoding="utf-8")
    return root


@pytest.fixture
def app(svg_dir: Path) -> App:
    return create_app(AppConfig(svg_dir=svg_dir))
