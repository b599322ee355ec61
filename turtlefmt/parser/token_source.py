"""Token source that hides trivia and records it separately."""

from turtlefmt.diagnostics import Diagnostic
from turtlefmt.lexer import Lexer
from turtlefmt.lexer.tokens import (
    TokenFlags,
    TokenKind,
    Trivia,
    TriviaKind,
    trivia_kind_from_token_kind,
)
from turtlefmt.text import TextRange, TextSize, slice_text_range


class TokenSource:
    """Bridge between lexer and parser that strips trivia but records ownership.

    Trivia following a token on the same line is trailing; everything from the
    first newline on is leading trivia of the next token.
    """

    def __init__(self, lexer: Lexer) -> None:
        self._lexer = lexer
        self._trivia: list[Trivia] = []
        self._current_kind: TokenKind = TokenKind.EOF
        self._current_range: TextRange = TextRange.empty(TextSize.from_int(0))
        self._preceding_line_break = False
        self._next_non_trivia_token(first_token=True)

    @property
    def current(self) -> TokenKind:
        return self._current_kind

    @property
    def current_range(self) -> TextRange:
        return self._current_range

    @property
    def current_text(self) -> str:
        return slice_text_range(self._lexer.source, self._current_range)

    @property
    def text(self) -> str:
        return self._lexer.source

    @property
    def position(self) -> TextSize:
        return self._current_range.start

    @property
    def has_preceding_line_break(self) -> bool:
        return self._preceding_line_break

    @property
    def trivia(self) -> list[Trivia]:
        return self._trivia

    def bump(self) -> None:
        if self._current_kind != TokenKind.EOF:
            self._next_non_trivia_token(first_token=False)

    def finish(self) -> tuple[list[Trivia], list[Diagnostic]]:
        return self._trivia, self._lexer.diagnostics

    def _next_non_trivia_token(self, first_token: bool) -> None:
        trailing = not first_token
        self._preceding_line_break = False

        while True:
            token = self._lexer.next_token()

            if token.kind.is_trivia:
                trivia_kind = trivia_kind_from_token_kind(token.kind)
                if trivia_kind == TriviaKind.NEWLINE:
                    trailing = False
                    self._preceding_line_break = True
                self._trivia.append(Trivia(trivia_kind, token.range, trailing))
                continue

            self._current_kind = token.kind
            self._current_range = token.range
            if token.flags & TokenFlags.PRECEDING_LINE_BREAK:
                self._preceding_line_break = True
            break
