"""Output buffer shared by the document and term formatters."""

from collections.abc import Sequence

from turtlefmt.ast import Comment
from turtlefmt.format.options import FormatOptions
from turtlefmt.format.trivia import render_comments


class FormatWriter:
    def __init__(self, options: FormatOptions) -> None:
        self._options = options
        self._parts: list[str] = []

    def write(self, text: str) -> None:
        self._parts.append(text)

    def newlines(self, count: int) -> None:
        if count > 0:
            self._parts.append("\n" * count)

    def new_indented_line(self, level: int) -> None:
        self._parts.append("\n" + " " * (self._options.indentation * level))

    def comments(self, comments: Sequence[Comment], *, inline: bool) -> None:
        if comments:
            self._parts.append(render_comments(comments, inline=inline))

    def getvalue(self) -> str:
        return "".join(self._parts)
