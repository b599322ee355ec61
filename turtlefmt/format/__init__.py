"""Turtle formatting engine."""

from turtlefmt.format.document import DocumentFormatter, format_document
from turtlefmt.format.normalize import (
    LexicalError,
    decode_escapes,
    is_turtle_boolean,
    is_turtle_decimal,
    is_turtle_double,
    is_turtle_integer,
    normalize_iri,
    normalize_local_name,
    normalize_string,
)
from turtlefmt.format.options import FormatOptions, FormatStyle
from turtlefmt.format.runner import MAX_PASSES, format_once, format_turtle, run_format
from turtlefmt.format.sort import TermKindRank, sorted_items, term_sort_key
from turtlefmt.format.terms import TermFormatter
from turtlefmt.format.trivia import PendingComments, RootContext

__all__ = [
    "MAX_PASSES",
    "DocumentFormatter",
    "FormatOptions",
    "FormatStyle",
    "LexicalError",
    "PendingComments",
    "RootContext",
    "TermFormatter",
    "TermKindRank",
    "decode_escapes",
    "format_document",
    "format_once",
    "format_turtle",
    "is_turtle_boolean",
    "is_turtle_decimal",
    "is_turtle_double",
    "is_turtle_integer",
    "normalize_iri",
    "normalize_local_name",
    "normalize_string",
    "run_format",
    "sorted_items",
    "term_sort_key",
]
