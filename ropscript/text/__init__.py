"""Source text offsets and ranges."""

from ropscript.text.text import TextRange, TextSize, slice_text_range

__all__ = [
    "TextRange",
    "TextSize",
    "slice_text_range",
]
