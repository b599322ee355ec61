"""Parser recovery primitives."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING

from turtlefmt.lexer import TokenKind
from turtlefmt.parser.marker import CompletedMarker
from turtlefmt.syntax import TurtleSyntaxKind

if TYPE_CHECKING:
    from turtlefmt.parser.parser import Parser


class RecoveryError(StrEnum):
    EOF = "eof"


@dataclass(frozen=True, slots=True)
class ParseRecoveryTokenSet:
    """Recover by consuming tokens into an ERROR node until a safe token is reached.

    The unexpected token itself is always consumed, so every recovery makes
    progress. When ``terminator`` is set and reached, it is consumed as well.
    """

    node_kind: TurtleSyntaxKind
    recovery_set: frozenset[TokenKind]
    terminator: TokenKind | None = None

    def recover(self, parser: Parser) -> tuple[CompletedMarker | None, RecoveryError | None]:
        if parser.at(TokenKind.EOF):
            return None, RecoveryError.EOF

        marker = parser.start()
        parser.bump()
        while not parser.at(TokenKind.EOF) and not self.is_at_recovered(parser):
            parser.bump()
        if self.terminator is not None:
            parser.eat(self.terminator)

        return marker.complete(parser, self.node_kind), None

    def is_at_recovered(self, parser: Parser) -> bool:
        return parser.at_set(self.recovery_set)
