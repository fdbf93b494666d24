"""Terminal text to Markdown: box_glyphs → table_reconstructor → line_classifier."""

from mdconverter.parsing.line_classifier import convert  # noqa: F401
from mdconverter.parsing.models import LineCategory  # noqa: F401

__all__ = ["LineCategory", "convert"]
