"""Deterministic pretty-printer for RDF Turtle documents."""

from loguru import logger

from turtlefmt.diagnostics import Diagnostic, TurtleFormatError
from turtlefmt.format import FormatOptions, FormatStyle, format_turtle, run_format
from turtlefmt.parser import parse_result as parse_turtle
from turtlefmt.pipeline import FormatRunResult, TurtleParseResult

logger.disable("turtlefmt")

__all__ = [
    "Diagnostic",
    "FormatOptions",
    "FormatRunResult",
    "FormatStyle",
    "TurtleFormatError",
    "TurtleParseResult",
    "format_turtle",
    "parse_turtle",
    "run_format",
]
