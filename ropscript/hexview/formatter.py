"""Hex dump formatting and byte <-> source selection sync."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from ropscript.assembler import DEFAULT_ROW_WIDTH, WORD_MASK
from ropscript.text import TextRange

PLACEHOLDER_HEX = "00"
PLACEHOLDER_POSITIONS: tuple[int, ...] = (0, 0)


def ensure_non_empty(hex_chars: str, position_map: Sequence[int]) -> tuple[str, tuple[int, ...]]:
    """Substitute a single zero byte so the display always has one row."""
    if hex_chars:
        return hex_chars, tuple(position_map)
    return PLACEHOLDER_HEX, PLACEHOLDER_POSITIONS


def format_address(value: int) -> str:
    return f"{value & WORD_MASK:04X}"


@dataclass(frozen=True, slots=True)
class ByteMapping:
    """Source offsets of a displayed byte's two hex characters.

    Row padding has no source, so both halves are None.
    """

    first: int | None
    second: int | None

    def input_range(self) -> TextRange:
        """Text selection for this byte (a byte click selects `[first, second + 1)`)."""
        if self.first is not None and self.second is not None:
            return TextRange.from_offsets(self.first, self.second + 1)
        known = self.first if self.first is not None else self.second
        if known is None:
            return TextRange.from_offsets(0, 0)
        return TextRange.from_offsets(known, known + 1)


@dataclass(frozen=True, slots=True)
class HexRow:
    index: int
    left_address: int
    right_address: int
    bytes: tuple[str, ...]
    mappings: tuple[ByteMapping, ...]

    @property
    def left_label(self) -> str:
        return format_address(self.left_address)

    @property
    def right_label(self) -> str:
        return format_address(self.right_address)

    def to_text(self) -> str:
        return " ".join(self.bytes)


@dataclass(frozen=True, slots=True)
class HexDump:
    """Fixed-width rows of the compiled chain with per-byte source mappings."""

    rows: tuple[HexRow, ...]
    row_width: int = DEFAULT_ROW_WIDTH
    left_base: int = 0
    right_base: int = 0

    def mapping_at(self, row: int, column: int) -> ByteMapping | None:
        if not 0 <= row < len(self.rows):
            return None
        mappings = self.rows[row].mappings
        if not 0 <= column < len(mappings):
            return None
        return mappings[column]

    def input_range_for(self, row: int, column: int) -> TextRange:
        mapping = self.mapping_at(row, column)
        if mapping is None:
            return TextRange.from_offsets(0, 0)
        return mapping.input_range()

    def find_byte(self, start: int, end: int | None = None) -> tuple[int, int] | None:
        """First `(row, column)` whose source range overlaps `[start, end)`.

        A caret (no `end`) is treated as the one-character range at `start`.
        """
        selection = TextRange.from_offsets(start, start + 1 if end is None or end <= start else end)
        for row in self.rows:
            for column, mapping in enumerate(row.mappings):
                if mapping.input_range().overlaps(selection):
                    return row.index, column
        return None

    def byte_addresses(self, row: int, column: int) -> tuple[str, str]:
        """Left/right display addresses of one byte."""
        offset = row * self.row_width + column
        return format_address(self.left_base + offset), format_address(self.right_base + offset)

    def byte_count(self) -> int:
        """Bytes up to and including the last non-zero byte."""
        flat = [byte for row in self.rows for byte in row.bytes]
        for index in range(len(flat) - 1, -1, -1):
            if flat[index] != "00":
                return index + 1
        return 0

    def to_text(self) -> str:
        return "\n".join(row.to_text() for row in self.rows)


def format_hex_dump(
    hex_chars: str,
    position_map: Sequence[int],
    *,
    left_base: int = 0,
    right_base: int = 0,
    row_width: int = DEFAULT_ROW_WIDTH,
) -> HexDump:
    """Split the flat hex stream into rows of `row_width` bytes.

    The final row is right-padded with `0`; padded characters have no source.
    """
    hex_chars, positions = ensure_non_empty(hex_chars, position_map)
    if len(positions) != len(hex_chars):
        raise ValueError("position map must have one entry per hex character")

    row_chars = row_width * 2
    rows: list[HexRow] = []
    for row_index, row_start in enumerate(range(0, len(hex_chars), row_chars)):
        chunk = hex_chars[row_start : row_start + row_chars].ljust(row_chars, "0")
        row_bytes: list[str] = []
        row_mappings: list[ByteMapping] = []
        for column in range(row_width):
            first_index = row_start + column * 2
            row_bytes.append(chunk[column * 2 : column * 2 + 2])
            row_mappings.append(
                ByteMapping(
                    first=_position(positions, first_index),
                    second=_position(positions, first_index + 1),
                )
            )
        offset = row_index * row_width
        rows.append(
            HexRow(
                index=row_index,
                left_address=left_base + offset,
                right_address=right_base + offset,
                bytes=tuple(row_bytes),
                mappings=tuple(row_mappings),
            )
        )
    return HexDump(rows=tuple(rows), row_width=row_width, left_base=left_base, right_base=right_base)


def _position(positions: tuple[int, ...], index: int) -> int | None:
    if index < len(positions):
        return positions[index]
    return None
