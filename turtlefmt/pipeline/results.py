"""Pipeline run result carriers."""

from __future__ import annotations

from dataclasses import dataclass

from turtlefmt.diagnostics import Diagnostic
from turtlefmt.pipeline.result import TurtleParseResult


@dataclass(frozen=True, slots=True)
class FormatRunResult:
    """Result of formatting from a shared parse result.

    ``diagnostics`` only ever holds warnings: errors are raised.
    """

    parse: TurtleParseResult
    formatted_text: str
    diagnostics: list[Diagnostic]
    passes: int
    changed: bool
