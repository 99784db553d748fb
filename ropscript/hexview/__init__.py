"""Hex dump view of a compiled chain."""

from ropscript.hexview.formatter import (
    PLACEHOLDER_HEX,
    PLACEHOLDER_POSITIONS,
    ByteMapping,
    HexDump,
    HexRow,
    ensure_non_empty,
    format_address,
    format_hex_dump,
)

__all__ = [
    "PLACEHOLDER_HEX",
    "PLACEHOLDER_POSITIONS",
    "ByteMapping",
    "HexDump",
    "HexRow",
    "ensure_non_empty",
    "format_address",
    "format_hex_dump",
]
