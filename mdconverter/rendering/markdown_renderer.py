"""Render Markdown into a self-contained, themed HTML page.

Markdown parsing is delegated to Python-Markdown; this module only chooses
the extensions (tables, lists, emoji shortcodes) and wraps the body in a page
with inlined CSS for a light or dark palette.
"""

from __future__ import annotations

import logging
from dataclasses import asdict, dataclass
from string import Template

import markdown
import pymdownx.emoji

logger = logging.getLogger(__name__)

# "extra" bundles tables and fenced_code; "sane_lists" keeps - and 1. lists apart
MARKDOWN_EXTENSIONS = ["extra", "sane_lists", "pymdownx.emoji"]
# Shortcodes such as :smile: become plain unicode, keeping the page self-contained
MARKDOWN_EXTENSION_CONFIGS = {
    "pymdownx.emoji": {
        "emoji_index": pymdownx.emoji.gemoji,
        "emoji_generator": pymdownx.emoji.to_alt,
    },
}

EMPTY_PLACEHOLDER = "<p style='color:#888;font-style:italic'>No content yet.</p>"


@dataclass(frozen=True)
class Palette:
    """Colours substituted into the page stylesheet."""

    bg: str
    fg: str
    heading_fg: str
    h1_border: str
    h2_border: str
    code_bg: str
    pre_bg: str
    pre_fg: str
    bq_bg: str
    bq_border: str
    hr_color: str
    th_bg: str
    td_border: str
    td_even_bg: str
    tr_hover_bg: str
    link_fg: str


LIGHT = Palette(
    bg="#ffffff",
    fg="#1e1e1e",
    heading_fg="#111111",
    h1_border="#e0e0e0",
    h2_border="#e8e8e8",
    code_bg="#f3f3f3",
    pre_bg="#1e1e1e",
    pre_fg="#d4d4d4",
    bq_bg="#f0f7ff",
    bq_border="#0078d4",
    hr_color="#e0e0e0",
    th_bg="#f0f4f8",
    td_border="#d0d7de",
    td_even_bg="#f9fbfc",
    tr_hover_bg="#eef4fb",
    link_fg="#0078d4",
)

DARK = Palette(
    bg="#1e1e2e",
    fg="#cdd6f4",
    heading_fg="#cdd6f4",
    h1_border="#45475a",
    h2_border="#45475a",
    code_bg="#313244",
    pre_bg="#11111b",
    pre_fg="#cdd6f4",
    bq_bg="#1e2030",
    bq_border="#89b4fa",
    hr_color="#45475a",
    th_bg="#313244",
    td_border="#45475a",
    td_even_bg="#252535",
    tr_hover_bg="#2a2a3a",
    link_fg="#89b4fa",
)

_PAGE = Template("""<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="UTF-8"/>
<meta name="viewport" content="width=device-width, initial-scale=1"/>
<style>
  *, *::before, *::after { box-sizing: border-box; }

  body {
    font-family: -apple-system, "Segoe UI", Roboto, Arial, sans-serif;
    font-size: 15px;
    line-height: 1.65;
    color: $fg;
    background: $bg;
    max-width: 860px;
    margin: 0 auto;
    padding: 24px 28px 48px;
  }

  h1 { font-size: 1.9em; border-bottom: 2px solid $h1_border; padding-bottom: .3em; margin-top: 1em; }
  h2 { font-size: 1.45em; border-bottom: 1px solid $h2_border; padding-bottom: .25em; margin-top: 1.4em; }
  h3 { font-size: 1.15em; margin-top: 1.2em; }
  h1, h2, h3 { font-weight: 700; color: $heading_fg; }

  p { margin: .6em 0; }

  a { color: $link_fg; text-decoration: none; }
  a:hover { text-decoration: underline; }

  code {
    font-family: "Cascadia Code", Consolas, "Courier New", monospace;
    font-size: .88em;
    background: $code_bg;
    padding: 2px 5px;
    border-radius: 3px;
  }

  pre {
    background: $pre_bg;
    color: $pre_fg;
    padding: 14px 16px;
    border-radius: 6px;
    overflow-x: auto;
    font-size: .88em;
  }
  pre code { background: none; padding: 0; color: inherit; }

  blockquote {
    border-left: 4px solid $bq_border;
    margin: 1em 0;
    padding: .4em 1em;
    color: $fg;
    background: $bq_bg;
    border-radius: 0 4px 4px 0;
  }

  hr { border: none; border-top: 2px solid $hr_color; margin: 1.5em 0; }

  ul, ol { padding-left: 1.6em; margin: .5em 0; }
  li { margin: .2em 0; }

  table { border-collapse: collapse; width: 100%; margin: 1em 0; font-size: .93em; }
  th {
    background: $th_bg;
    font-weight: 600;
    text-align: left;
    padding: 8px 12px;
    border: 1px solid $td_border;
    color: $fg;
  }
  td {
    padding: 7px 12px;
    border: 1px solid $td_border;
    vertical-align: top;
    color: $fg;
  }
  tr:nth-child(even) td { background: $td_even_bg; }
  tr:hover td { background: $tr_hover_bg; }

  strong { font-weight: 700; }
  em     { font-style: italic; }
</style>
</head>
<body>
$body
</body>
</html>
""")


def palette_for(is_dark: bool) -> Palette:
    return DARK if is_dark else LIGHT


def markdown_to_body(text: str) -> str:
    """Convert Markdown to an HTML fragment (no page wrapper)."""
    # A fresh Markdown instance per call; instances keep per-document state
    md = markdown.Markdown(
        extensions=MARKDOWN_EXTENSIONS,
        extension_configs=MARKDOWN_EXTENSION_CONFIGS,
        output_format="html",
    )
    return md.convert(text)


def wrap_in_page(body: str, is_dark: bool = False) -> str:
    """Wrap an HTML fragment in a complete page with the inlined stylesheet."""
    return _PAGE.substitute(asdict(palette_for(is_dark)), body=body)


def to_html(text: str | None, is_dark: bool = False) -> str:
    """Render Markdown as a complete, self-contained HTML document.

    Args:
        text: Markdown source. Empty or whitespace-only input renders a
            "No content yet." placeholder.
        is_dark: Use the dark palette instead of the light one.

    Returns:
        HTML5 document string with inlined CSS.
    """
    if text is None or not text.strip():
        return wrap_in_page(EMPTY_PLACEHOLDER, is_dark)

    body = markdown_to_body(text)
    logger.debug("Rendered %d chars of markdown to %d chars of HTML", len(text), len(body))
    return wrap_in_page(body, is_dark)
