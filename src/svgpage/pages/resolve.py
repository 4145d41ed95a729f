"""Page resolution — URL segment to SVG file to text.

A page name is the last URL segment, lowercased, with ``:`` standing in
for a directory separator so nested folders are reachable from a single
segment::

    /Icons:Arrow  ->  <svg_dir>/icons/arrow.svg

The read itself is blocking, so ``load_page`` hands it to an anyio worker
thread and other requests keep flowing while the disk catches up.
"""

import logging
from pathlib import Path

import anyio.to_thread

from svgpage.errors import AssetNotFound

logger = logging.getLogger("svgpage.pages")

PAGE_SEPARATOR = ":"
SVG_SUFFIX = ".svg"


def normalize_page_name(segment: str) -> str:
    """Lowercase *segment* and turn every ``:`` into ``/``.

    No other cleanup happens here; containment is checked by ``page_path``.
    """
    return segment.lower().replace(PAGE_SEPARATOR, "/")


def page_path(svg_dir: str | Path, segment: str) -> Path:
    """Map a raw URL segment to the SVG file it names under *svg_dir*.

    Raises:
        AssetNotFound: The name points outside *svg_dir* (``..`` segments,
            absolute names, or symlinks leaving the folder), or cannot be
            resolved at all (embedded NUL, symlink loops).
    """
    root = Path(svg_dir)
    candidate = root / f"{normalize_page_name(segment)}{SVG_SUFFIX}"
    try:
        resolved = candidate.resolve()
    except (OSError, RuntimeError, ValueError) as exc:
        raise AssetNotFound(candidate, exc) from exc
    if not resolved.is_relative_to(root.resolve()):
        raise AssetNotFound(candidate, "path escapes the SVG folder")
    return candidate


def _read_text(path: Path) -> str:
    with path.open(encoding="utf-8") as fh:
        return fh.read()


async def load_page(svg_dir: str | Path, segment: str) -> str:
    """Read the SVG document for *segment* as text.

    Raises:
        AssetNotFound: Missing, unreadable, a directory, or not UTF-8.
    """
    path = page_path(svg_dir, segment)
    logger.debug("Loading SVG at: %s", path)
    try:
        return await anyio.to_thread.run_sync(_read_text, path)
    except (OSError, ValueError) as exc:
        raise AssetNotFound(path, exc) from exc
