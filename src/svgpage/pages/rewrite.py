"""Root-tag rewrite — make an SVG scale to the width of its container.

Plain text surgery on the first ``<svg ...>`` opening tag. No document
model is built; callers only depend on ``rewrite_root_tag`` so a parser
based implementation can replace this one without touching them.

Behavior worth knowing before changing anything here:

- ``height="..."`` is dropped from the tag.
- ``width="..."`` becomes ``width="100%"``. A tag without a width keeps
  having no width; one is never added.
- The first ``<svg`` in the text is the root, even when it sits inside a
  comment or CDATA block, and the rewritten tag goes back in with
  ``str.replace(..., 1)`` (first textual match, not an index splice).
"""

import re

from svgpage.errors import MalformedSvg

SVG_START = "<svg"
FULL_WIDTH = 'width="100%"'

HEIGHT_RE = re.compile(r'height\s*=\s*"[^"]*"')
WIDTH_RE = re.compile(r'width\s*=\s*"[^"]*"')


def root_tag_span(svg_content: str) -> str:
    """Return the text of the first ``<svg ...>`` opening tag, ``>`` included.

    Raises:
        MalformedSvg: No ``<svg`` in the document, or no ``>`` after it.
    """
    start = svg_content.find(SVG_START)
    if start == -1:
        raise MalformedSvg("No SVG start found")
    end = svg_content.find(">", start)
    if end == -1:
        raise MalformedSvg("No SVG end found")
    return svg_content[start : end + 1]


def rewrite_tag(tag: str) -> str:
    """Drop ``height`` and force ``width="100%"`` inside a single tag."""
    tag = HEIGHT_RE.sub("", tag)
    return WIDTH_RE.sub(FULL_WIDTH, tag)


def rewrite_root_tag(svg_content: str) -> str:
    """Return *svg_content* with its root tag set to full container width.

    Usage::

        >>> rewrite_root_tag('<svg width="40" height="20"><rect/></svg>')
        '<svg width="100%" ><rect/></svg>'

    Raises:
        MalformedSvg: The document has no ``<svg ...>`` opening tag.
    """
    tag = root_tag_span(svg_content)
    return svg_content.replace(tag, rewrite_tag(tag), 1)
