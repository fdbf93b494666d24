"""Box-drawing glyphs and line-shape predicates for terminal tables.

All predicates take a *trimmed* line (leading whitespace already removed)
and only look at its shape, never at its neighbours.
"""

from __future__ import annotations

import re

# --- Canonical box-drawing glyphs ---

TOP_LEFT = "┌"
TOP_RIGHT = "┐"
BOTTOM_LEFT = "└"
BOTTOM_RIGHT = "┘"
LEFT_JUNCTION = "├"
RIGHT_JUNCTION = "┤"
TOP_JUNCTION = "┬"
BOTTOM_JUNCTION = "┴"
CROSS_JUNCTION = "┼"
HORIZONTAL = "─"
VERTICAL_BAR = "│"

TABLE_BORDER_CHARS = (
    TOP_LEFT, TOP_RIGHT, BOTTOM_LEFT, BOTTOM_RIGHT,
    LEFT_JUNCTION, RIGHT_JUNCTION, TOP_JUNCTION, BOTTOM_JUNCTION,
    CROSS_JUNCTION, HORIZONTAL, VERTICAL_BAR,
)

BULLET_GLYPH = "•"

# --- Line-shape patterns ---

# Three or more of ─, - or = and nothing else
_PURE_RULE_RE = re.compile(r"^[─\-=]{3,}$")
_BULLET_RE = re.compile(r"^(?:- |\* |• )")


def is_table_top_border(trimmed: str) -> bool:
    """Return True for ``┌──┬──┐`` style lines (corner first, corner later)."""
    return trimmed.startswith(TOP_LEFT) and TOP_RIGHT in trimmed[1:]


def is_table_bottom_border(trimmed: str) -> bool:
    """Return True for ``└──┴──┘`` style lines."""
    return trimmed.startswith(BOTTOM_LEFT) and BOTTOM_RIGHT in trimmed[1:]


def is_table_separator_row(trimmed: str) -> bool:
    """Return True for border rows that open with a corner or left junction."""
    return (
        trimmed.startswith((LEFT_JUNCTION, TOP_LEFT, BOTTOM_LEFT))
        and HORIZONTAL in trimmed
    )


def is_table_data_row(trimmed: str) -> bool:
    """Return True for ``│ a │ b │`` rows (bar at both ends)."""
    # A lone bar is both first and last char; it carries no cells
    return (
        len(trimmed) >= 2
        and trimmed.startswith(VERTICAL_BAR)
        and trimmed.endswith(VERTICAL_BAR)
    )


def is_table_line(trimmed: str) -> bool:
    """Return True if the line has any of the table-row shapes."""
    return (
        is_table_top_border(trimmed)
        or is_table_data_row(trimmed)
        or is_table_separator_row(trimmed)
    )


def is_pure_horizontal_rule(trimmed: str) -> bool:
    return bool(_PURE_RULE_RE.match(trimmed))


def is_bullet(trimmed: str) -> bool:
    return bool(_BULLET_RE.match(trimmed))
