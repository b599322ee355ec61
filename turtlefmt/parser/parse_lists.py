"""Reusable node-list parse loop."""

from collections.abc import Callable
from dataclasses import dataclass

from turtlefmt.lexer import TokenKind
from turtlefmt.parser.marker import CompletedMarker
from turtlefmt.parser.parsed_syntax import ParsedSyntax
from turtlefmt.parser.parser import Parser, ParserProgress
from turtlefmt.syntax import TurtleSyntaxKind


@dataclass(slots=True)
class ParseNodeList:
    """Non-separated list parser with progress and recovery hooks."""

    list_kind: TurtleSyntaxKind
    is_at_list_end: Callable[[Parser], bool]
    parse_element: Callable[[Parser], ParsedSyntax]
    recover: Callable[[Parser, ParsedSyntax], bool]

    def parse_list(self, parser: Parser) -> CompletedMarker:
        marker = parser.start()
        progress = ParserProgress()

        while not parser.at(TokenKind.EOF) and not self.is_at_list_end(parser):
            progress.assert_progressing(parser)
            parsed_element = self.parse_element(parser)
            if not self.recover(parser, parsed_element):
                break

        return marker.complete(parser, self.list_kind)
