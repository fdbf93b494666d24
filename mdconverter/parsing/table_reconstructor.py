"""Rebuild box-drawing tables as Markdown pipe tables.

A table block starts at a top border (``┌──┬──┐``) and ends at the first
bottom border (``└──┴──┘``) below it.  Only data rows (``│ a │ b │``) carry
content; every other row in the block is structural and is dropped.  The
first data row is always promoted to the Markdown header row.
"""

from __future__ import annotations

import logging

from mdconverter.log_setup import TRACE
from mdconverter.parsing.box_glyphs import (
    VERTICAL_BAR,
    is_table_bottom_border,
    is_table_data_row,
)

logger = logging.getLogger(__name__)


def find_table_end(lines: list[str], start: int) -> int | None:
    """Locate the bottom border closing the table opened at ``start``.

    Args:
        lines: Full, right-stripped line sequence.
        start: Index of the top-border line.

    Returns:
        Index of the closing bottom border, or None when no bottom border
        follows (malformed table).
    """
    for i in range(start + 1, len(lines)):
        if is_table_bottom_border(lines[i].lstrip()):
            return i
    logger.debug("No bottom border for table starting at line %d", start)
    return None


def parse_data_row(trimmed: str) -> list[str]:
    """Split a ``│ a │ b │`` row into stripped cell values.

    The segments before the first bar and after the last bar are discarded.
    Empty cells between two bars are kept as empty strings.
    """
    parts = trimmed.split(VERTICAL_BAR)
    return [part.strip() for part in parts[1:-1]]


def build_markdown_row(cells: list[str]) -> str:
    return "| " + " | ".join(cells) + " |"


def build_separator_row(column_count: int) -> str:
    return "| " + " | ".join(["---"] * column_count) + " |"


def convert_table(lines: list[str], start: int, end: int) -> list[str]:
    """Convert the table block ``lines[start:end + 1]`` to pipe-table rows.

    The separator row is sized to the first data row.  Later rows are
    emitted with whatever cell count they have, without padding or
    truncation.

    Args:
        lines: Full, right-stripped line sequence.
        start: Index of the top border.
        end: Index of the bottom border (inclusive).

    Returns:
        Markdown table lines; empty if the block has no data rows.
    """
    rows: list[str] = []
    header_done = False

    for i in range(start, end + 1):
        trimmed = lines[i].lstrip()
        if not is_table_data_row(trimmed):
            continue

        cells = parse_data_row(trimmed)
        rows.append(build_markdown_row(cells))
        if not header_done:
            rows.append(build_separator_row(len(cells)))
            header_done = True

    logger.log(TRACE, "Table lines %d..%d -> %d markdown rows", start, end, len(rows))
    return rows
