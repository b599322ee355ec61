"""Event-based parser core."""

from dataclasses import dataclass

from turtlefmt.diagnostics import Diagnostic
from turtlefmt.lexer import TokenKind
from turtlefmt.parser.event import Event, StartEvent, TokenEvent
from turtlefmt.parser.marker import CompletedMarker, Marker
from turtlefmt.parser.token_source import TokenSource
from turtlefmt.syntax import TurtleSyntaxKind
from turtlefmt.text import TextRange, TextSize


@dataclass(slots=True)
class ParserProgress:
    """Detect parser stalls inside list-style loops."""

    _position: TextSize | None = None

    def has_progressed(self, parser: "Parser") -> bool:
        has_progressed = self._position is None or self._position < parser.position
        self._position = parser.position
        return has_progressed

    def assert_progressing(self, parser: "Parser") -> None:
        if not self.has_progressed(parser):
            raise RuntimeError(f"Parser stopped making progress at {parser.current.name} {parser.current_range}")


class Parser:
    """Event-based recursive-descent parser over a trivia-free token stream."""

    def __init__(self, source: TokenSource) -> None:
        self._source = source
        self._events: list[Event] = []
        self._diagnostics: list[Diagnostic] = []

    @property
    def source(self) -> TokenSource:
        return self._source

    @property
    def events(self) -> list[Event]:
        return self._events

    @property
    def diagnostics(self) -> list[Diagnostic]:
        return self._diagnostics

    @property
    def current(self) -> TokenKind:
        return self._source.current

    @property
    def current_range(self) -> TextRange:
        return self._source.current_range

    @property
    def current_text(self) -> str:
        return self._source.current_text

    @property
    def position(self) -> TextSize:
        return self._source.position

    @property
    def has_preceding_line_break(self) -> bool:
        return self._source.has_preceding_line_break

    def at(self, kind: TokenKind) -> bool:
        return self.current == kind

    def at_set(self, kinds: frozenset[TokenKind] | set[TokenKind]) -> bool:
        return self.current in kinds

    def start(self) -> Marker:
        pos = len(self._events)
        self._events.append(StartEvent.tombstone())
        return Marker(pos=pos, start=self.position)

    def bump(self) -> None:
        if self.current == TokenKind.EOF:
            return
        self._events.append(
            TokenEvent(
                kind=TurtleSyntaxKind.from_token_kind(self.current),
                end=self.current_range.end,
            )
        )
        self._source.bump()

    def eat(self, kind: TokenKind) -> bool:
        if self.current == kind:
            self.bump()
            return True
        return False

    def expect(self, kind: TokenKind, diagnostic: Diagnostic) -> bool:
        """Eat ``kind`` or record ``diagnostic`` and leave a zero-width MISSING node."""
        if self.eat(kind):
            return True
        self.error(diagnostic)
        self.missing()
        return False

    def missing(self) -> CompletedMarker:
        return self.start().complete(self, TurtleSyntaxKind.MISSING)

    def error(self, diagnostic: Diagnostic) -> None:
        if self._diagnostics:
            previous = self._diagnostics[-1]
            if previous.range.start == diagnostic.range.start:
                return
        self._diagnostics.append(diagnostic)

    def finish(self) -> tuple[list[Event], list[Diagnostic]]:
        return self._events, self._diagnostics
