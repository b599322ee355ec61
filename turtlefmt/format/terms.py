"""Rendering of triples, predicate-object groups and terms."""

from typing import Final

from turtlefmt.ast import (
    AKeyword,
    AnonBlankNode,
    BlankNodePropertyList,
    BooleanLiteral,
    Collection,
    Comment,
    DecimalLiteral,
    DoubleLiteral,
    IntegerLiteral,
    IriRef,
    LabeledBlankNode,
    Literal,
    PredicateObjects,
    PrefixedName,
    Span,
    Term,
    Triples,
)
from turtlefmt.diagnostics import INVALID_NUMERIC_LITERAL, UNDEFINED_PREFIX, Diagnostic, TurtleFormatError
from turtlefmt.format.normalize import (
    LexicalError,
    is_turtle_boolean,
    is_turtle_decimal,
    is_turtle_double,
    is_turtle_integer,
    normalize_iri,
    normalize_local_name,
    normalize_string,
)
from turtlefmt.format.options import FormatOptions
from turtlefmt.format.sort import predicate_objects_sort_key, sorted_items, term_sort_key
from turtlefmt.format.trivia import PendingComments
from turtlefmt.format.writer import FormatWriter

RDF_TYPE: Final[str] = "http://www.w3.org/1999/02/22-rdf-syntax-ns#type"
RDF_LANG_STRING: Final[str] = "http://www.w3.org/1999/02/22-rdf-syntax-ns#langString"
XSD_STRING: Final[str] = "http://www.w3.org/2001/XMLSchema#string"
XSD_BOOLEAN: Final[str] = "http://www.w3.org/2001/XMLSchema#boolean"
XSD_INTEGER: Final[str] = "http://www.w3.org/2001/XMLSchema#integer"
XSD_DECIMAL: Final[str] = "http://www.w3.org/2001/XMLSchema#decimal"
XSD_DOUBLE: Final[str] = "http://www.w3.org/2001/XMLSchema#double"

_BARE_LEXICAL_FORMS = {
    XSD_BOOLEAN: is_turtle_boolean,
    XSD_INTEGER: is_turtle_integer,
    XSD_DECIMAL: is_turtle_decimal,
    XSD_DOUBLE: is_turtle_double,
}

_NUMERIC_GRAMMARS = {
    BooleanLiteral: is_turtle_boolean,
    IntegerLiteral: is_turtle_integer,
    DecimalLiteral: is_turtle_decimal,
    DoubleLiteral: is_turtle_double,
}


def span_error(diagnostic: Diagnostic, span: Span) -> TurtleFormatError:
    """Attach the 1-based line and column range of ``span`` to ``diagnostic``."""
    columns = (span.start.column + 1, span.end.column + 1) if span.start.row == span.end.row else None
    return TurtleFormatError(diagnostic, line=span.start.row + 1, columns=columns)


class TermFormatter:
    """Renders statements into a ``FormatWriter``, resolving names through the prefix table."""

    def __init__(self, writer: FormatWriter, options: FormatOptions) -> None:
        self._writer = writer
        self._options = options
        self.prefixes: dict[str, str] = {}

    def format_triples(self, triples: Triples) -> None:
        writer = self._writer
        diff_layout = self._options.diff_minimizing_layout
        pending = PendingComments()

        self.format_term(triples.subject, pending, is_predicate=False, indent=0)

        items = triples.items
        if self._options.sort_terms:
            items = tuple(sorted_items(items, predicate_objects_sort_key))

        has_groups = False
        for item in items:
            if isinstance(item, Comment):
                pending.push(item)
                continue

            if not has_groups:
                has_groups = True
                new_line = diff_layout
                if not diff_layout:
                    writer.write(" ")
            else:
                writer.write(" ;")
                new_line = True
            if new_line:
                writer.comments(pending.drain(), inline=True)
                writer.new_indented_line(1)
            self.format_predicate_objects(item, pending, indent=1)

        if diff_layout and has_groups:
            writer.write(" ;")
            writer.new_indented_line(1)
            writer.write(".")
        else:
            writer.write(" .")
        writer.comments(pending.drain(), inline=True)

    def format_predicate_objects(self, group: PredicateObjects, pending: PendingComments, indent: int) -> None:
        writer = self._writer
        options = self._options
        object_count = len(group.objects)

        self.format_term(group.predicate, pending, is_predicate=True, indent=indent + 1)

        items = group.items
        if options.sort_terms and object_count > 0:
            items = tuple(sorted_items(items, term_sort_key))

        is_first_object = True
        for item in items:
            if isinstance(item, Comment):
                pending.push(item)
                continue

            if is_first_object:
                is_first_object = False
                lone_object_below = options.single_object_on_new_line and object_count == 1
                list_below = options.diff_minimizing_layout and object_count > 1
                if lone_object_below or list_below:
                    writer.new_indented_line(indent + 1)
                else:
                    writer.write(" ")
            elif options.diff_minimizing_layout:
                writer.write(" ,")
                writer.new_indented_line(indent + 1)
            else:
                writer.write(" , ")
            self.format_term(item, pending, is_predicate=False, indent=indent + 1)

    def format_term(self, term: Term, pending: PendingComments, *, is_predicate: bool, indent: int) -> None:
        writer = self._writer
        match term:
            case IriRef():
                iri = self.iri(term)
                writer.write("a" if is_predicate and iri == RDF_TYPE else f"<{iri}>")
            case PrefixedName():
                prefix, local, resolved = self.prefixed_name(term)
                writer.write("a" if is_predicate and resolved == RDF_TYPE else f"{prefix}:{local}")
            case AKeyword():
                writer.write("a")
            case AnonBlankNode():
                writer.write("[]")
            case LabeledBlankNode():
                writer.write(f"_:{term.label}")
            case BlankNodePropertyList():
                self._format_blank_node_property_list(term, pending, indent)
            case Collection():
                self._format_collection(term, pending, indent)
            case Literal():
                self._format_literal(term, pending)
            case BooleanLiteral() | IntegerLiteral() | DecimalLiteral() | DoubleLiteral():
                if not _NUMERIC_GRAMMARS[type(term)](term.text):
                    raise span_error(
                        INVALID_NUMERIC_LITERAL.at(term.span.range, f"{term.text!r} does not match its literal grammar"),
                        term.span,
                    )
                writer.write(term.text)

    def iri(self, iri: IriRef) -> str:
        try:
            return normalize_iri(iri.iri)
        except LexicalError as error:
            raise span_error(error.at(iri.span.range), iri.span) from error

    def prefixed_name(self, name: PrefixedName) -> tuple[str, str, str]:
        """Return ``(prefix, normalized local, resolved IRI)``."""
        prefix = name.prefix
        namespace = self.prefixes.get(prefix)
        if namespace is None:
            line = name.span.start.row + 1
            raise span_error(
                UNDEFINED_PREFIX.at(name.span.range, f"The prefix {prefix}: is not defined on line {line}"),
                name.span,
            )
        try:
            local = normalize_local_name(name.local)
        except LexicalError as error:
            raise span_error(error.at(name.span.range), name.span) from error
        return prefix, local, namespace + local

    def _format_blank_node_property_list(
        self,
        node: BlankNodePropertyList,
        pending: PendingComments,
        indent: int,
    ) -> None:
        writer = self._writer
        diff_layout = self._options.diff_minimizing_layout

        items = node.items
        if self._options.sort_terms:
            items = tuple(sorted_items(items, predicate_objects_sort_key))

        writer.write("[")
        is_first_group = True
        for item in items:
            if isinstance(item, Comment):
                pending.push(item)
                continue

            if not is_first_group:
                writer.write(" ;")
            is_first_group = False
            if diff_layout:
                writer.comments(pending.drain(), inline=True)
                writer.new_indented_line(indent + 1)
            else:
                writer.write(" ")
            self.format_predicate_objects(item, pending, indent=indent + 1)

        if diff_layout:
            writer.write(" ;")
            writer.new_indented_line(indent)
        else:
            writer.write(" ")
        writer.write("]")

    def _format_collection(self, collection: Collection, pending: PendingComments, indent: int) -> None:
        writer = self._writer
        diff_layout = self._options.diff_minimizing_layout

        writer.write("(")
        has_items = False
        for item in collection.items:
            if isinstance(item, Comment):
                pending.push(item)
                continue

            has_items = True
            if diff_layout:
                writer.new_indented_line(indent + 1)
            else:
                writer.write(" ")
            self.format_term(item, pending, is_predicate=False, indent=indent + 1)

        if diff_layout and has_items:
            writer.new_indented_line(indent)
        else:
            writer.write(" ")
        writer.write(")")

    def _format_literal(self, literal: Literal, pending: PendingComments) -> None:
        pending.extend(literal.comments)
        try:
            value = normalize_string(literal.body, is_long=literal.is_long)
        except LexicalError as error:
            raise span_error(error.at(literal.span.range), literal.span) from error

        annotation = ""
        datatype = XSD_STRING
        if literal.language is not None:
            annotation = f"@{literal.language}"
            datatype = RDF_LANG_STRING
        elif isinstance(literal.datatype, IriRef):
            datatype = self.iri(literal.datatype)
            annotation = f"^^<{datatype}>"
        elif isinstance(literal.datatype, PrefixedName):
            prefix, local, datatype = self.prefixed_name(literal.datatype)
            annotation = f"^^{prefix}:{local}"

        is_bare_form = _BARE_LEXICAL_FORMS.get(datatype)
        if is_bare_form is not None and is_bare_form(value):
            self._writer.write(value)
            return

        quote = '"""' if literal.is_long else '"'
        self._writer.write(f"{quote}{value}{quote}{annotation}")
