"""Diagnostics."""

from turtlefmt.diagnostics.codes import (
    INVALID_IRI_CHARACTER,
    INVALID_LOCAL_NAME_ESCAPE,
    INVALID_NUMERIC_LITERAL,
    INVALID_STRING_ESCAPE,
    INVALID_UNICODE_ESCAPE,
    LEXER_INVALID_IRI,
    LEXER_UNEXPECTED_CHARACTER,
    LEXER_UNTERMINATED_STRING,
    PARSER_EXPECTED_TOKEN,
    PARSER_UNEXPECTED_TOKEN,
    SORT_WITH_COMMENTS,
    SYNTAX_ERROR,
    UNDEFINED_PREFIX,
    DiagnosticSpec,
)
from turtlefmt.diagnostics.diagnostic import Diagnostic, Severity, collect_diagnostics, first_error, has_errors
from turtlefmt.diagnostics.error import TurtleFormatError

__all__ = [
    "INVALID_IRI_CHARACTER",
    "INVALID_LOCAL_NAME_ESCAPE",
    "INVALID_NUMERIC_LITERAL",
    "INVALID_STRING_ESCAPE",
    "INVALID_UNICODE_ESCAPE",
    "LEXER_INVALID_IRI",
    "LEXER_UNEXPECTED_CHARACTER",
    "LEXER_UNTERMINATED_STRING",
    "PARSER_EXPECTED_TOKEN",
    "PARSER_UNEXPECTED_TOKEN",
    "SORT_WITH_COMMENTS",
    "SYNTAX_ERROR",
    "UNDEFINED_PREFIX",
    "Diagnostic",
    "DiagnosticSpec",
    "Severity",
    "TurtleFormatError",
    "collect_diagnostics",
    "first_error",
    "has_errors",
]
