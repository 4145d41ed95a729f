"""Kida environment setup.

Creates a kida Environment from AppConfig. The environment is created
once during ``App._freeze()`` and shared read-only by every request.
"""

from pathlib import Path
from typing import Any

from kida import ChoiceLoader, Environment, FileSystemLoader

from svgpage.config import AppConfig

# Templates shipped with the package (the default ``layout.html``)
PACKAGED_TEMPLATES = Path(__file__).parent / "templates"


def create_environment(config: AppConfig) -> Environment:
    """Create a kida Environment from app configuration.

    ``config.template_dir`` comes first in the search order, so a
    ``layout.html`` placed there replaces the packaged one.
    """
    loaders = []
    if config.template_dir is not None:
        loaders.append(FileSystemLoader(str(config.template_dir)))
    loaders.append(FileSystemLoader(str(PACKAGED_TEMPLATES)))

    return Environment(
        loader=ChoiceLoader(loaders),
        autoescape=config.autoescape,
        auto_reload=config.debug,
        trim_blocks=config.trim_blocks,
        lstrip_blocks=config.lstrip_blocks,
    )


def render_template(env: Environment, name: str, context: dict[str, Any]) -> str:
    """Render a full template to string."""
    template = env.get_template(name)
    return template.render(context)
