"""Diagnostic record and the helpers that query lists of them."""

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Literal

from turtlefmt.text import TextRange

Severity = Literal["error", "warning"]


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic emitted by the lexer, parser and formatter."""

    code: str
    message: str
    range: TextRange
    severity: Severity = "error"
    hint: str | None = None
    category: str | None = None

    @property
    def is_error(self) -> bool:
        return self.severity == "error"


def collect_diagnostics(*groups: Iterable[Diagnostic]) -> list[Diagnostic]:
    return [diagnostic for group in groups for diagnostic in group]


def has_errors(diagnostics: Iterable[Diagnostic]) -> bool:
    return any(diagnostic.is_error for diagnostic in diagnostics)


def first_error(diagnostics: Iterable[Diagnostic]) -> Diagnostic | None:
    """Earliest error by source position; lexer and parser errors arrive in separate groups."""
    return min(
        (diagnostic for diagnostic in diagnostics if diagnostic.is_error),
        key=lambda diagnostic: diagnostic.range.as_tuple(),
        default=None,
    )
