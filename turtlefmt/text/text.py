from bisect import bisect_right
from dataclasses import dataclass
from typing import Final


@dataclass(frozen=True, slots=True, order=True)
class TextSize:
    """Offset into (or length of) a source document, counted in characters."""

    value: int

    def __post_init__(self):
        if self.value < 0:
            raise ValueError("TextSize cannot be negative")

    @staticmethod
    def of(text: str) -> "TextSize":
        return TextSize(len(text))

    @staticmethod
    def from_int(value: int) -> "TextSize":
        return TextSize(value)

    def __add__(self, other: "TextSize") -> "TextSize":
        return TextSize(self.value + other.value)

    def __repr__(self) -> str:
        return f"TextSize({self.value})"


ZERO: Final[TextSize] = TextSize(0)


@dataclass(frozen=True, slots=True, order=True)
class TextRange:
    """
    Half-open range [start, end) in text.

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
    def new(start: TextSize, end: TextSize) -> "TextRange":
        return TextRange(start.value, end.value)

    @staticmethod
    def at(offset: TextSize, length: TextSize) -> "TextRange":
        return TextRange(offset.value, offset.value + length.value)

    @staticmethod
    def empty(offset: TextSize) -> "TextRange":
        return TextRange(offset.value, offset.value)

    @staticmethod
    def from_offsets(start: int, end: int) -> "TextRange":
        return TextRange(start, end)

    @property
    def start(self) -> TextSize:
        return TextSize(self._start)

    @property
    def end(self) -> TextSize:
        return TextSize(self._end)

    def len(self) -> TextSize:
        return TextSize(self._end - self._start)

    def is_empty(self) -> bool:
        return self._start == self._end

    def as_tuple(self) -> tuple[int, int]:
        return (self._start, self._end)

    def __repr__(self) -> str:
        return f"TextRange({self._start}, {self._end})"


def slice_text_range(source: str, range: TextRange) -> str:
    """Substring of ``source`` covered by ``range`` (ranges use str indices)."""
    return source[range.start.value : range.end.value]


@dataclass(frozen=True, slots=True, order=True)
class LineCol:
    """Zero-based row and column of an offset."""

    row: int
    column: int


class LineIndex:
    """Offset -> (row, column) lookup.

    A line ends at ``\\n``, at ``\\r\\n`` or at a lone ``\\r``, matching how the
    lexer counts line breaks.
    """

    __slots__ = ("_line_starts", "_len")

    def __init__(self, text: str) -> None:
        starts = [0]
        index = 0
        length = len(text)
        while index < length:
            ch = text[index]
            if ch == "\n":
                starts.append(index + 1)
            elif ch == "\r":
                if index + 1 < length and text[index + 1] == "\n":
                    index += 1
                starts.append(index + 1)
            index += 1
        self._line_starts = starts
        self._len = length

    def line_col(self, offset: int) -> LineCol:
        if offset < 0 or offset > self._len:
            raise ValueError(f"Offset {offset} is outside of the indexed text")
        row = bisect_right(self._line_starts, offset) - 1
        return LineCol(row=row, column=offset - self._line_starts[row])
