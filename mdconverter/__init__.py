"""Convert terminal output to Markdown and render it as themed HTML."""

__version__ = "0.1.0"
