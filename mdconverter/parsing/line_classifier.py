"""Classify terminal text lines and emit the matching Markdown.

The converter walks the input once.  Each position is classified with
:func:`classify_line` into a :class:`~mdconverter.parsing.models.LineCategory`
using a fixed priority order, then the category's renderer appends Markdown
to the per-call :class:`~mdconverter.parsing.models.ConversionState`.

Priority order (first match wins):

1. table top border → whole table block
2. blank
3. pure horizontal rule → ``---``
4. bullet → ``- item``
5. header (isolated short line) → ``#`` first, ``##`` afterwards
6. sub-header (short line ending in ``:``) → ``**text**``
7. plain text
"""

from __future__ import annotations

import logging
import re
from collections import Counter

from mdconverter.log_setup import TRACE
from mdconverter.parsing.box_glyphs import (
    BULLET_GLYPH,
    is_bullet,
    is_pure_horizontal_rule,
    is_table_line,
    is_table_top_border,
)
from mdconverter.parsing.models import ConversionState, LineCategory
from mdconverter.parsing.table_reconstructor import convert_table, find_table_end

logger = logging.getLogger(__name__)

HEADER_MIN_LENGTH = 3
HEADER_MAX_LENGTH = 80
SUB_HEADER_MAX_LENGTH = 60

_LINE_BREAK_RE = re.compile(r"\r\n|\r")


# ---------------------------------------------------------------------------
# Input normalization
# ---------------------------------------------------------------------------

def split_lines(raw_text: str) -> list[str]:
    """Normalize line endings and right-strip every line.

    Leading whitespace is kept; predicates work on ``line.lstrip()``.
    """
    return [line.rstrip() for line in _LINE_BREAK_RE.sub("\n", raw_text).split("\n")]


# ---------------------------------------------------------------------------
# Classification predicates
# ---------------------------------------------------------------------------

def _is_blank(line: str) -> bool:
    return not line.strip()


def is_header(lines: list[str], index: int) -> bool:
    """Return True if ``lines[index]`` looks like a standalone section title.

    A header is a short line that is not a bullet, rule or table row, does
    not end with a colon, and has a blank line (or the document boundary)
    directly above and below it.
    """
    trimmed = lines[index].lstrip()

    if not HEADER_MIN_LENGTH <= len(trimmed) <= HEADER_MAX_LENGTH:
        return False
    if is_bullet(trimmed) or is_pure_horizontal_rule(trimmed) or is_table_line(trimmed):
        return False
    if trimmed.endswith(":"):
        return False

    prev_blank = index == 0 or _is_blank(lines[index - 1])
    next_blank = index == len(lines) - 1 or _is_blank(lines[index + 1])
    return prev_blank and next_blank


def is_sub_header(trimmed: str) -> bool:
    """Return True for short label lines such as ``✅ Wins:``."""
    return (
        trimmed.endswith(":")
        and len(trimmed) <= SUB_HEADER_MAX_LENGTH
        and not is_bullet(trimmed)
    )


def classify_line(lines: list[str], index: int) -> LineCategory:
    """Classify the line at ``index``; the result depends on its neighbours.

    Args:
        lines: Full, right-stripped line sequence.
        index: Position of the line to classify.

    Returns:
        The first matching category in priority order.
    """
    trimmed = lines[index].lstrip()

    if is_table_top_border(trimmed):
        return LineCategory.TABLE_BLOCK
    if _is_blank(trimmed):
        return LineCategory.BLANK
    if is_pure_horizontal_rule(trimmed):
        return LineCategory.HORIZONTAL_RULE
    if is_bullet(trimmed):
        return LineCategory.BULLET
    if is_header(lines, index):
        return LineCategory.HEADER
    if is_sub_header(trimmed):
        return LineCategory.SUB_HEADER
    return LineCategory.PLAIN


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------

def format_bullet(trimmed: str) -> str:
    """Normalize a ``• item`` bullet to ``- item``; dash forms pass through."""
    if trimmed.startswith(BULLET_GLYPH + " "):
        return "- " + trimmed[2:]
    return trimmed


def _emit_table(lines: list[str], start: int, state: ConversionState) -> int:
    """Emit the table opened at ``start`` and return the next cursor position.

    Without a closing border only the top-border line is consumed; it is
    written as plain text and the following lines are classified normally.
    """
    end = find_table_end(lines, start)
    if end is None:
        state.output.append(lines[start].lstrip())
        return start + 1

    state.output.extend(convert_table(lines, start, end))
    state.output.append("")
    return end + 1


def _emit_line(category: LineCategory, trimmed: str, state: ConversionState) -> None:
    if category is LineCategory.BLANK:
        state.output.append("")
    elif category is LineCategory.HORIZONTAL_RULE:
        state.output.append("---")
    elif category is LineCategory.BULLET:
        state.output.append(format_bullet(trimmed))
    elif category is LineCategory.HEADER:
        state.output.append(f"{state.header_prefix()} {trimmed}")
    elif category is LineCategory.SUB_HEADER:
        state.output.append(f"**{trimmed}**")
    else:
        state.output.append(trimmed)


def convert(raw_text: str | None) -> str:
    """Convert terminal output text to Markdown.

    Never raises: ``None``, empty and whitespace-only input yield ``""`` and
    a table without a closing border degrades to plain text.

    Args:
        raw_text: Captured terminal text in any line-ending convention.

    Returns:
        Markdown text without trailing blank lines.
    """
    if raw_text is None or not raw_text.strip():
        return ""

    lines = split_lines(raw_text)
    state = ConversionState()
    counts: Counter = Counter()
    i = 0

    while i < len(lines):
        category = classify_line(lines, i)
        counts[category.value] += 1
        logger.log(TRACE, "line[%d] %s: %s", i, category.name, lines[i])

        if category is LineCategory.TABLE_BLOCK:
            i = _emit_table(lines, i, state)
            continue

        _emit_line(category, lines[i].lstrip(), state)
        i += 1

    logger.debug("Converted %d lines: %s", len(lines), dict(counts))
    return "\n".join(state.output).rstrip()
