"""High-level parse entrypoint for Turtle source text."""

from __future__ import annotations

from typing import TYPE_CHECKING

from loguru import logger

from turtlefmt.diagnostics import collect_diagnostics
from turtlefmt.lexer import Lexer
from turtlefmt.parser.event import process_events
from turtlefmt.parser.grammar import parse_turtle_doc
from turtlefmt.parser.parser import Parser
from turtlefmt.parser.token_source import TokenSource
from turtlefmt.parser.tree_sink import LosslessTreeSink, ParsedGreenTree

if TYPE_CHECKING:
    from turtlefmt.pipeline import TurtleParseResult


def parse(text: str) -> ParsedGreenTree:
    lexer = Lexer(text)
    source = TokenSource(lexer)
    parser = Parser(source)

    parse_turtle_doc(parser)
    events, parser_diagnostics = parser.finish()
    trivia, lexer_diagnostics = source.finish()
    diagnostics = collect_diagnostics(lexer_diagnostics, parser_diagnostics)
    if diagnostics:
        logger.debug("Parsed Turtle source with {} diagnostic(s)", len(diagnostics))

    sink = LosslessTreeSink(text=text, trivia=trivia)
    process_events(sink, events, diagnostics)
    return sink.finish()


def parse_result(text: str) -> TurtleParseResult:
    from turtlefmt.pipeline import TurtleParseResult

    return TurtleParseResult(source_text=text, parsed=parse(text))
