"""Format runner over a shared Turtle parse result."""

from __future__ import annotations

from typing import Final

from loguru import logger

from turtlefmt.ast import parse_to_ast
from turtlefmt.diagnostics import SORT_WITH_COMMENTS, Diagnostic, TurtleFormatError
from turtlefmt.format.document import format_document
from turtlefmt.format.options import FormatOptions
from turtlefmt.parser import parse_result
from turtlefmt.pipeline.result import TurtleParseResult
from turtlefmt.pipeline.results import FormatRunResult
from turtlefmt.text import TextRange

MAX_PASSES: Final[int] = 2

_SORT_WITH_COMMENTS_WARNING: Final[str] = (
    "You have chosen to sort terms while your source contains comments. "
    "This is not properly supported, so your comments will almost certainly end up in the wrong place."
)


def format_once(text: str, options: FormatOptions) -> str:
    """One formatting pass: parse, lower and render ``text``."""
    return format_document(parse_to_ast(text), options)


def run_format(
    text: str,
    options: FormatOptions | None = None,
    *,
    parse: TurtleParseResult | None = None,
) -> FormatRunResult:
    """Format ``text``; a second pass over the output runs when sorting is enabled."""
    resolved_options = options if options is not None else FormatOptions()
    resolved_parse = _resolve_parse(text, parse=parse)

    document = resolved_parse.ast_root()
    diagnostics: list[Diagnostic] = []
    if resolved_options.includes_sorting and resolved_parse.has_comments:
        diagnostics.append(_sort_with_comments(resolved_parse.source_text, resolved_options))

    formatted = format_document(document, resolved_options)

    passes = 1
    # Normalization can change sort keys, so the sorted output is sorted once more.
    while resolved_options.includes_sorting and passes < MAX_PASSES:
        formatted = format_once(formatted, resolved_options)
        passes += 1
    logger.debug("Formatted Turtle document in {} pass(es)", passes)

    return FormatRunResult(
        parse=resolved_parse,
        formatted_text=formatted,
        diagnostics=diagnostics,
        passes=passes,
        changed=formatted != resolved_parse.source_text,
    )


def format_turtle(text: str, options: FormatOptions | None = None) -> str:
    """Format a Turtle document; raises ``TurtleFormatError`` on failure."""
    return run_format(text, options).formatted_text


def _sort_with_comments(source: str, options: FormatOptions) -> Diagnostic:
    document_range = TextRange.from_offsets(0, len(source))
    logger.warning(_SORT_WITH_COMMENTS_WARNING)
    if options.force:
        logger.warning("... as you have chosen to force write, the formatting result is returned anyway.")
        return SORT_WITH_COMMENTS.at(document_range, severity="warning")

    logger.error("... as you have not chosen to force write, no formatting result is returned.")
    raise TurtleFormatError(SORT_WITH_COMMENTS.at(document_range))


def _resolve_parse(text: str, *, parse: TurtleParseResult | None) -> TurtleParseResult:
    if parse is not None:
        if parse.source_text != text:
            raise ValueError("Provided parse result was built from a different text")
        return parse
    return parse_result(text)
