"""Diagnostic codes and messages."""

from dataclasses import dataclass
from typing import Final

from turtlefmt.diagnostics.diagnostic import Diagnostic, Severity
from turtlefmt.text import TextRange


@dataclass(frozen=True, slots=True)
class DiagnosticSpec:
    code: str
    message: str
    hint: str | None = None
    severity: Severity = "error"
    category: str | None = None

    def at(self, range: TextRange, message: str | None = None, *, severity: Severity | None = None) -> Diagnostic:
        """Instantiate this spec for a source range, optionally with a specific message."""
        return Diagnostic(
            code=self.code,
            message=message if message is not None else self.message,
            range=range,
            severity=severity if severity is not None else self.severity,
            hint=self.hint,
            category=self.category,
        )


LEXER_UNTERMINATED_STRING: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LEXER_UNTERMINATED_STRING",
    message="Unterminated or malformed string literal.",
    hint="Close the string with its opening quote and only use \\t \\b \\n \\r \\f \\\" \\' \\\\ \\u \\U escapes.",
    category="lexer",
)

LEXER_INVALID_IRI: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LEXER_INVALID_IRI",
    message="Malformed IRI reference.",
    hint="IRIs may not contain spaces, control characters or any of <>\"{}|^`\\ unless \\u-escaped.",
    category="lexer",
)

LEXER_UNEXPECTED_CHARACTER: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LEXER_UNEXPECTED_CHARACTER",
    message="Unexpected character.",
    category="lexer",
)

PARSER_EXPECTED_TOKEN: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_EXPECTED_TOKEN",
    message="Expected token",
    category="parser",
)

PARSER_UNEXPECTED_TOKEN: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_UNEXPECTED_TOKEN",
    message="Unexpected token",
    category="parser",
)

SYNTAX_ERROR: Final[DiagnosticSpec] = DiagnosticSpec(
    code="SYNTAX_ERROR",
    message="The document is not valid Turtle.",
    category="format",
)

UNDEFINED_PREFIX: Final[DiagnosticSpec] = DiagnosticSpec(
    code="UNDEFINED_PREFIX",
    message="Prefix is not defined.",
    hint="Declare the prefix with @prefix before its first use.",
    category="format",
)

INVALID_IRI_CHARACTER: Final[DiagnosticSpec] = DiagnosticSpec(
    code="INVALID_IRI_CHARACTER",
    message="Character is not allowed in IRIs.",
    category="format",
)

INVALID_LOCAL_NAME_ESCAPE: Final[DiagnosticSpec] = DiagnosticSpec(
    code="INVALID_LOCAL_NAME_ESCAPE",
    message="Unexpected escape character in local name.",
    category="format",
)

INVALID_STRING_ESCAPE: Final[DiagnosticSpec] = DiagnosticSpec(
    code="INVALID_STRING_ESCAPE",
    message="The escaped character is not valid.",
    category="format",
)

INVALID_UNICODE_ESCAPE: Final[DiagnosticSpec] = DiagnosticSpec(
    code="INVALID_UNICODE_ESCAPE",
    message="The escaped unicode character is not encoding a valid unicode character.",
    category="format",
)

INVALID_NUMERIC_LITERAL: Final[DiagnosticSpec] = DiagnosticSpec(
    code="INVALID_NUMERIC_LITERAL",
    message="Literal does not match its numeric grammar.",
    category="format",
)

SORT_WITH_COMMENTS: Final[DiagnosticSpec] = DiagnosticSpec(
    code="SORT_WITH_COMMENTS",
    message="Not allowed to sort terms while comments are present without forced writing (force).",
    hint="Comments will almost certainly end up in the wrong place; convert them into triples or disable sorting.",
    category="format",
)
