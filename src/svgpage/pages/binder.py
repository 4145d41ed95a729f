"""Bind a rewritten SVG into the page layout template."""

from dataclasses import asdict, dataclass
from typing import Any

from kida import Environment
from kida.utils.html import Markup

from svgpage.errors import RenderFailure
from svgpage.templating.integration import render_template


@dataclass(frozen=True, slots=True)
class RenderContext:
    """The two values the layout template sees."""

    title: str
    svg_content: str

    def as_dict(self) -> dict[str, Any]:
        # The SVG is markup the layout embeds verbatim; autoescape must skip it.
        data = asdict(self)
        data["svg_content"] = Markup(self.svg_content)
        return data


def render_page(env: Environment, template: str, context: RenderContext) -> str:
    """Render *template* with *context*.

    Raises:
        RenderFailure: Any error out of the template engine: missing
            template, bad syntax, undefined variables, runtime errors.
    """
    try:
        return render_template(env, template, context.as_dict())
    except Exception as exc:
        raise RenderFailure(template, exc) from exc
