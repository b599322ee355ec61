"""Text offsets, ranges and line/column lookup."""

from turtlefmt.text.text import ZERO, LineCol, LineIndex, TextRange, TextSize, slice_text_range

__all__ = [
    "ZERO",
    "LineCol",
    "LineIndex",
    "TextRange",
    "TextSize",
    "slice_text_range",
]
