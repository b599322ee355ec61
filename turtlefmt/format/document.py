"""Top-level document formatting: directive groups, triple blocks and comments."""

from dataclasses import dataclass

from turtlefmt.ast import BaseDirective, Comment, Document, PrefixDirective, Triples
from turtlefmt.format.options import FormatOptions
from turtlefmt.format.sort import prefix_sort_key
from turtlefmt.format.terms import TermFormatter
from turtlefmt.format.trivia import (
    RootContext,
    is_inline_comment,
    newlines_before_block_comment,
    newlines_before_directive,
    newlines_before_triples,
)
from turtlefmt.format.writer import FormatWriter


@dataclass(slots=True)
class _BufferedPrefix:
    directive: PrefixDirective
    comments: list[Comment]


class DocumentFormatter:
    """Single forward pass over the statements of one document."""

    def __init__(self, options: FormatOptions) -> None:
        self._options = options
        self._writer = FormatWriter(options)
        self._terms = TermFormatter(self._writer, options)
        self._context = RootContext.START
        self._prefix_buffer: list[_BufferedPrefix] = []

    def format(self, document: Document) -> str:
        writer = self._writer
        row: int | None = None

        for item in document.items:
            match item:
                case Comment():
                    self._format_comment(item, row)
                case BaseDirective():
                    self._flush_prefixes()
                    writer.newlines(newlines_before_directive(self._context))
                    self._context = RootContext.PREFIXES
                    self._format_base(item)
                case PrefixDirective():
                    self._prefix_buffer.append(_BufferedPrefix(item, list(item.comments)))
                case Triples():
                    self._flush_prefixes()
                    previous_row = item.span.start.row if row is None else row
                    writer.newlines(newlines_before_triples(self._context, item.span.start.row, previous_row))
                    self._terms.format_triples(item)
                    self._context = RootContext.TRIPLES
            row = item.span.end.row

        self._flush_prefixes()
        writer.newlines(1)
        return writer.getvalue()

    def _format_comment(self, comment: Comment, previous_row: int | None) -> None:
        if is_inline_comment(previous_row, comment.span.start.row):
            if self._prefix_buffer:
                self._prefix_buffer[-1].comments.append(comment)
            else:
                self._writer.comments([comment], inline=True)
            return

        self._flush_prefixes()
        row_gap = 0 if previous_row is None else comment.span.start.row - previous_row
        self._writer.newlines(newlines_before_block_comment(row_gap, self._context))
        self._writer.comments([comment], inline=False)
        self._context = RootContext.COMMENT

    def _flush_prefixes(self) -> None:
        if not self._prefix_buffer:
            return

        self._writer.newlines(newlines_before_directive(self._context))
        buffered = self._prefix_buffer
        if self._options.sort_terms:
            buffered = sorted(buffered, key=lambda entry: prefix_sort_key(entry.directive))

        for index, entry in enumerate(buffered):
            if index > 0:
                self._writer.newlines(1)
            self._format_prefix(entry.directive)
            self._writer.comments(entry.comments, inline=True)

        self._prefix_buffer = []
        self._context = RootContext.PREFIXES

    def _format_prefix(self, directive: PrefixDirective) -> None:
        iri = self._terms.iri(directive.iri)
        self._writer.write(f"@prefix {directive.label}: <{iri}> .")
        self._terms.prefixes[directive.label] = iri

    def _format_base(self, directive: BaseDirective) -> None:
        iri = self._terms.iri(directive.iri)
        self._writer.write(f"@base <{iri}> .")
        self._writer.comments(directive.comments, inline=True)


def format_document(document: Document, options: FormatOptions) -> str:
    return DocumentFormatter(options).format(document)
