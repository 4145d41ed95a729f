"""Startup banner printed before the server comes up."""

USAGE_GUIDE = """\
svgpage: SVG files as full-width HTML pages

  GET /                 redirects to the index page (-i/--index, default /home)
  GET /<name>           renders <path>/<name>.svg
  GET /<dir>:<name>     renders <path>/<dir>/<name>.svg

Names are case-insensitive (files are looked up in lowercase). The root
<svg> tag loses its height and gets width="100%", so the drawing fills the
page width. Failures answer 500; details are in this log.

Override the page shell with --templates DIR containing layout.html; it
receives {{ title }} and {{ svg_content }}."""
