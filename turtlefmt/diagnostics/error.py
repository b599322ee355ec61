"""Terminal error raised by the formatter."""

from __future__ import annotations

from turtlefmt.diagnostics.diagnostic import Diagnostic
from turtlefmt.text import LineIndex


class TurtleFormatError(ValueError):
    """Raised when a document cannot be formatted.

    Carries the structured ``diagnostic`` and, when the source is known, the
    1-based ``line`` and the 1-based ``columns`` range of the offending text.
    """

    def __init__(
        self,
        diagnostic: Diagnostic,
        *,
        line: int | None = None,
        columns: tuple[int, int] | None = None,
    ) -> None:
        super().__init__(diagnostic.message)
        self.diagnostic = diagnostic
        self.line = line
        self.columns = columns

    @property
    def code(self) -> str:
        return self.diagnostic.code

    @property
    def message(self) -> str:
        return self.diagnostic.message

    @staticmethod
    def located(diagnostic: Diagnostic, index: LineIndex) -> TurtleFormatError:
        start = index.line_col(diagnostic.range.start.value)
        end = index.line_col(diagnostic.range.end.value)
        columns = (start.column + 1, end.column + 1) if start.row == end.row else None
        return TurtleFormatError(diagnostic, line=start.row + 1, columns=columns)
