"""Shared data types for the text-to-Markdown conversion pass."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class LineCategory(Enum):
    """Semantic category of one input line (or, for tables, a run of lines).

    Members are listed in classification priority order.
    """

    TABLE_BLOCK = "table_block"
    BLANK = "blank"
    HORIZONTAL_RULE = "horizontal_rule"
    BULLET = "bullet"
    HEADER = "header"
    SUB_HEADER = "sub_header"
    PLAIN = "plain"


@dataclass
class ConversionState:
    """Mutable state owned by a single conversion run.

    Attributes:
        first_header_emitted: Whether a ``#`` header has already been written;
            later headers are demoted to ``##``.
        output: Markdown lines accumulated so far, in input order.
    """

    first_header_emitted: bool = False
    output: list[str] = field(default_factory=list)

    def header_prefix(self) -> str:
        """Return the ATX prefix for the next header and mark it emitted."""
        if self.first_header_emitted:
            return "##"
        self.first_header_emitted = True
        return "#"
