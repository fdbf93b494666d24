"""Markdown to themed HTML rendering."""

from mdconverter.rendering.markdown_renderer import to_html  # noqa: F401

__all__ = ["to_html"]
