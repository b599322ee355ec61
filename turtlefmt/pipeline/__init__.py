"""Shared parse carriers and lazy pipeline entrypoint exports."""

from __future__ import annotations

from typing import TYPE_CHECKING

from turtlefmt.pipeline.result import TurtleParseResult
from turtlefmt.pipeline.results import FormatRunResult

if TYPE_CHECKING:
    from turtlefmt.format.options import FormatOptions


def run_format(
    text: str,
    options: FormatOptions | None = None,
    *,
    parse: TurtleParseResult | None = None,
) -> FormatRunResult:
    from turtlefmt.format.runner import run_format as _run_format

    return _run_format(text, options, parse=parse)


__all__ = [
    "FormatRunResult",
    "TurtleParseResult",
    "run_format",
]
