"""Lossless tree sink for parser events."""

from dataclasses import dataclass

from turtlefmt.cst import GreenNode, TreeBuilder
from turtlefmt.diagnostics import Diagnostic
from turtlefmt.lexer import Trivia, TriviaKind, TriviaPiece
from turtlefmt.syntax import TurtleSyntaxKind
from turtlefmt.text import TextRange, TextSize


@dataclass(frozen=True, slots=True)
class ParsedGreenTree:
    root: GreenNode
    diagnostics: list[Diagnostic]
    # Every `#` comment, in source order.
    comments: tuple[TextRange, ...] = ()


class LosslessTreeSink:
    """Builds the green tree from parser events, handing each trivia run to one token.

    Trivia on the line a token ends on trails that token; everything from the
    first newline on leads the next token. The EOF token collects what is left.
    """

    def __init__(self, text: str, trivia: list[Trivia]) -> None:
        self._text = text
        self._trivia = trivia
        self._trivia_pos = 0
        self._text_pos = 0
        self._depth = 0
        self._eof_emitted = False
        self._builder = TreeBuilder()
        self._errors: list[Diagnostic] = []
        self._comments: list[TextRange] = []

    def token(self, kind: TurtleSyntaxKind, end: TextSize) -> None:
        self._emit_token(kind, end.value)

    def start_node(self, kind: TurtleSyntaxKind) -> None:
        self._builder.start_node(kind)
        self._depth += 1

    def finish_node(self) -> None:
        self._depth -= 1
        if self._depth < 0:
            raise RuntimeError("finish_node called more often than start_node")
        if self._depth == 0 and not self._eof_emitted:
            self._emit_token(TurtleSyntaxKind.EOF, len(self._text))
        self._builder.finish_node()

    def errors(self, errors: list[Diagnostic]) -> None:
        self._errors = list(errors)

    def finish(self) -> ParsedGreenTree:
        return ParsedGreenTree(
            root=self._builder.finish(),
            diagnostics=self._errors,
            comments=tuple(self._comments),
        )

    def _emit_token(self, kind: TurtleSyntaxKind, end: int) -> None:
        if kind == TurtleSyntaxKind.EOF:
            self._eof_emitted = True

        leading = self._take_trivia(trailing=False, limit=end)
        start = self._text_pos
        self._text_pos = end
        trailing = self._take_trivia(trailing=True, limit=None)

        self._builder.token_with_trivia(
            kind=kind,
            text=self._text[start:end],
            leading=leading,
            trailing=trailing,
        )

    def _take_trivia(self, *, trailing: bool, limit: int | None) -> tuple[TriviaPiece, ...]:
        pieces: list[TriviaPiece] = []
        while self._trivia_pos < len(self._trivia):
            trivia = self._trivia[self._trivia_pos]
            start, end = trivia.range.as_tuple()
            if trivia.trailing != trailing or start != self._text_pos:
                break
            if limit is not None and end > limit:
                break

            if trivia.kind == TriviaKind.COMMENT:
                self._comments.append(trivia.range)
            pieces.append(TriviaPiece(kind=trivia.kind, length=trivia.range.len()))
            self._text_pos = end
            self._trivia_pos += 1
        return tuple(pieces)
