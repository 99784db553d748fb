from dataclasses import dataclass


@dataclass(frozen=True, slots=True, order=True)
class TextSize:
    """Offset into the script's flat character index."""

    value: int

    def __post_init__(self):
        if self.value < 0:
            raise ValueError("TextSize cannot be negative")

    def __repr__(self) -> str:
        return f"TextSize({self.value})"


@dataclass(frozen=True, slots=True, order=True)
class TextRange:
    """
    Half-open range [start, end) in script text.

    Invariant:
    - 0 <= start <= end
    """

    _start: int
    _end: int

    def __post_init__(self):
        if self._start < 0 or self._end < 0:
            raise ValueError("TextRange positions cannot be negative")
        if self._start > self._end:
            raise ValueError("TextRange invariant violated: start > end")

    @staticmethod
    def from_offsets(start: int, end: int) -> "TextRange":
        """Create a TextRange from plain integer offsets."""
        return TextRange(start, end)

    @property
    def start(self) -> TextSize:
        return TextSize(self._start)

    @property
    def end(self) -> TextSize:
        return TextSize(self._end)

    def as_tuple(self) -> tuple[int, int]:
        return (self._start, self._end)

    def overlaps(self, other: "TextRange") -> bool:
        """True when both ranges share at least one character."""
        return self._start < other._end and other._start < self._end

    def shift(self, delta: int) -> "TextRange":
        """Move the range `delta` characters to the right (line -> script offsets)."""
        return TextRange(self._start + delta, self._end + delta)

    def __repr__(self) -> str:
        return f"TextRange({self._start}, {self._end})"


def slice_text_range(source: str, range: TextRange) -> str:
    """Get the substring of the source text covered by the given TextRange."""
    return source[range.start.value : range.end.value]
