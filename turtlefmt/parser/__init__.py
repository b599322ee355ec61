"""Parser infrastructure (token source + event-based parser + tree sink)."""

from turtlefmt.parser.event import (
    Event,
    FinishEvent,
    StartEvent,
    TokenEvent,
    process_events,
)
from turtlefmt.parser.grammar import parse_statement, parse_turtle_doc
from turtlefmt.parser.marker import CompletedMarker, Marker
from turtlefmt.parser.parse_lists import ParseNodeList
from turtlefmt.parser.parse_recovery import ParseRecoveryTokenSet, RecoveryError
from turtlefmt.parser.parsed_syntax import ParsedSyntax
from turtlefmt.parser.parser import Parser, ParserProgress
from turtlefmt.parser.token_source import TokenSource
from turtlefmt.parser.tree_sink import LosslessTreeSink, ParsedGreenTree
from turtlefmt.parser.turtle import parse, parse_result

__all__ = [
    "CompletedMarker",
    "Event",
    "FinishEvent",
    "LosslessTreeSink",
    "Marker",
    "ParseNodeList",
    "ParseRecoveryTokenSet",
    "ParsedGreenTree",
    "ParsedSyntax",
    "Parser",
    "ParserProgress",
    "RecoveryError",
    "StartEvent",
    "TokenEvent",
    "TokenSource",
    "parse",
    "parse_result",
    "parse_statement",
    "parse_turtle_doc",
    "process_events",
]
