"""svgpage CLI — serve a folder of SVG files.

Entry point registered as ``svgpage`` in ``pyproject.toml``::

    [project.scripts]
    svgpage = "svgpage.cli:main"
"""

import argparse
import ipaddress
import sys
from pathlib import Path

from svgpage.config import AppConfig


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="svgpage",
        description="Serve SVG files as full-width HTML pages.",
    )
    parser.add_argument(
        "path",
        nargs="?",
        default=".",
        help="Directory containing the SVG files to be served (default: current directory)",
    )
    parser.add_argument("-b", "--bind", default="127.0.0.1", help="Bind address to listen on")
    parser.add_argument("-p", "--port", type=int, default=5000, help="Port to listen on")
    parser.add_argument("-i", "--index", default="/home", help="Route to redirect / to")
    parser.add_argument(
        "--permanent",
        action="store_true",
        help="Redirect / with 308 instead of 307",
    )
    parser.add_argument(
        "--templates",
        default=None,
        help="Directory whose layout.html replaces the built-in page layout",
    )
    parser.add_argument("--debug", action="store_true", help="Reload on changes, log at debug")
    parser.add_argument(
        "--log-level",
        default=None,
        choices=["debug", "info", "warning", "error"],
        help="Log level (default: info, or debug with --debug)",
    )
    return parser


def config_from_args(args: argparse.Namespace) -> AppConfig:
    """Turn parsed arguments into the app's immutable configuration."""
    return AppConfig(
        host=args.bind,
        port=args.port,
        debug=args.debug,
        svg_dir=Path(args.path),
        index=args.index,
        permanent_redirect=args.permanent,
        template_dir=Path(args.templates) if args.templates else None,
        log_level=args.log_level or ("debug" if args.debug else "info"),
    )


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``svgpage`` command."""
    from svgpage.cli._logging import configure_logging
    from svgpage.cli._usage import USAGE_GUIDE

    args = build_parser().parse_args(argv)
    print(f"{USAGE_GUIDE}\n\n")

    config = config_from_args(args)

    try:
        ipaddress.ip_address(config.host)
    except ValueError:
        print(f"Error: Invalid bind address '{config.host}'", file=sys.stderr)
        raise SystemExit(1) from None

    if not Path(config.svg_dir).is_dir():
        print(f"Error: SVG folder '{config.svg_dir}' does not exist", file=sys.stderr)
        raise SystemExit(1)

    configure_logging(config.log_level)

    from svgpage.site import create_app

    app = create_app(config)
    host = f"[{config.host}]" if ":" in config.host else config.host
    print(f"Server started at http://{host}:{config.port}")
    app.run()
