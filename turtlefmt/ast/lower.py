"""Lower a Turtle CST into the typed AST."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from dataclasses import replace

from turtlefmt.ast.model import (
    AKeyword,
    AnonBlankNode,
    BaseDirective,
    BlankNodePropertyList,
    BooleanLiteral,
    Collection,
    Comment,
    DecimalLiteral,
    Document,
    DoubleLiteral,
    IntegerLiteral,
    IriRef,
    LabeledBlankNode,
    Literal,
    PredicateObjects,
    PrefixDirective,
    PrefixedName,
    Span,
    Statement,
    Term,
    Triples,
    Verb,
)
from turtlefmt.cst import SyntaxNode, SyntaxToken, from_green
from turtlefmt.diagnostics import SYNTAX_ERROR, Diagnostic, TurtleFormatError, first_error
from turtlefmt.lexer import TriviaKind
from turtlefmt.parser import parse
from turtlefmt.syntax import TurtleSyntaxKind
from turtlefmt.text import LineIndex, TextRange

_LEAF_TERMS: dict[TurtleSyntaxKind, type] = {
    TurtleSyntaxKind.IRI: IriRef,
    TurtleSyntaxKind.PREFIXED_NAME: PrefixedName,
    TurtleSyntaxKind.VERB_A: AKeyword,
    TurtleSyntaxKind.ANON_BLANK_NODE: AnonBlankNode,
    TurtleSyntaxKind.BLANK_NODE: LabeledBlankNode,
    TurtleSyntaxKind.BOOLEAN_LITERAL: BooleanLiteral,
    TurtleSyntaxKind.INTEGER_LITERAL: IntegerLiteral,
    TurtleSyntaxKind.DECIMAL_LITERAL: DecimalLiteral,
    TurtleSyntaxKind.DOUBLE_LITERAL: DoubleLiteral,
}


def parse_to_ast(text: str) -> Document:
    parsed = parse(text)
    syntax_root = from_green(parsed.root, text)
    return lower_syntax_tree(syntax_root, parsed.diagnostics)


def lower_syntax_tree(root: SyntaxNode, diagnostics: Iterable[Diagnostic] = ()) -> Document:
    """Lower a red tree, raising ``TurtleFormatError`` on any syntax error."""
    check_syntax(root, diagnostics)

    document = root.first_child_node(TurtleSyntaxKind.TURTLE_DOC)
    full_span = _span(root.line_index, 0, len(root.source))
    if document is None:
        return Document(span=full_span, items=())

    comments = _collect_comments(root)
    items = _interleave(document.child_nodes(), comments, _lower_statement)
    return Document(span=full_span, items=tuple(items))


def check_syntax(root: SyntaxNode, diagnostics: Iterable[Diagnostic] = ()) -> None:
    """Raise for the first ERROR/MISSING node, error token or error diagnostic.

    A lexer error at or before the first parser error is reported with its own
    range and message.
    """
    collected = list(diagnostics)
    reason = first_error(collected)
    lexical = first_error(diagnostic for diagnostic in collected if diagnostic.category == "lexer")
    if reason is not None and lexical is not None and lexical.range.as_tuple() <= reason.range.as_tuple():
        start, end = lexical.range.as_tuple()
        diagnostic = SYNTAX_ERROR.at(
            lexical.range,
            f"{_describe_location(root.line_index, start, end)}: {lexical.message}",
        )
        raise TurtleFormatError.located(replace(diagnostic, hint=lexical.hint), root.line_index)

    error = root.find_error()
    if error is None:
        if reason is None:
            return
        raise TurtleFormatError.located(
            SYNTAX_ERROR.at(reason.range, reason.message),
            root.line_index,
        )

    if isinstance(error, SyntaxToken):
        sexp = f"(ERROR {error.text!r})"
    else:
        sexp = error.to_sexp()
    start, end = error.token_start, error.token_end
    diagnostic = SYNTAX_ERROR.at(
        TextRange.from_offsets(start, end),
        f"{_describe_location(root.line_index, start, end)}: {sexp}",
    )
    if reason is not None:
        diagnostic = replace(diagnostic, hint=reason.message)
    raise TurtleFormatError.located(diagnostic, root.line_index)


def _describe_location(index: LineIndex, start: int, end: int) -> str:
    start_pos = index.line_col(start)
    end_pos = index.line_col(end)
    if start_pos.row == end_pos.row:
        return (
            f"Error on line {start_pos.row + 1} "
            f"between columns {start_pos.column + 1} and {end_pos.column + 1}"
        )
    return f"Error between lines {start_pos.row + 1} and {end_pos.row + 1}"


def _lower_statement(node: SyntaxNode, comments: list[Comment]) -> Statement:
    match node.kind:
        case TurtleSyntaxKind.PREFIX:
            label_token = next(token for token in node.child_tokens() if token.kind == TurtleSyntaxKind.PNAME)
            return PrefixDirective(
                span=_node_span(node),
                text=node.text,
                label=label_token.text[:-1],
                iri=_lower_iri(node),
                comments=tuple(comments),
            )
        case TurtleSyntaxKind.BASE:
            return BaseDirective(
                span=_node_span(node),
                text=node.text,
                iri=_lower_iri(node),
                comments=tuple(comments),
            )
        case TurtleSyntaxKind.TRIPLES:
            subject, *items = _interleave(node.child_nodes(), comments, _lower_triples_child)
            return Triples(
                span=_node_span(node),
                text=node.text,
                subject=subject,
                items=tuple(items),
            )
        case _:
            raise _unexpected_node(node)


def _lower_triples_child(node: SyntaxNode, comments: list[Comment]) -> Term | PredicateObjects:
    if node.kind == TurtleSyntaxKind.PREDICATE_OBJECTS:
        return _lower_predicate_objects(node, comments)
    return _lower_term(node, comments)


def _lower_predicate_objects(node: SyntaxNode, comments: list[Comment]) -> PredicateObjects:
    predicate, *items = _interleave(node.child_nodes(), comments, _lower_term)
    return PredicateObjects(
        span=_node_span(node),
        text=node.text,
        predicate=_as_verb(predicate, node),
        items=tuple(items),
    )


def _lower_term(node: SyntaxNode, comments: list[Comment]) -> Term:
    if (leaf_type := _LEAF_TERMS.get(node.kind)) is not None:
        return leaf_type(span=_node_span(node), text=node.text)

    match node.kind:
        case TurtleSyntaxKind.LITERAL:
            return _lower_literal(node, comments)
        case TurtleSyntaxKind.COLLECTION:
            return Collection(
                span=_node_span(node),
                text=node.text,
                items=tuple(_interleave(node.child_nodes(), comments, _lower_term)),
            )
        case TurtleSyntaxKind.BLANK_NODE_PROPERTY_LIST:
            return BlankNodePropertyList(
                span=_node_span(node),
                text=node.text,
                items=tuple(_interleave(node.child_nodes(), comments, _lower_predicate_objects)),
            )
        case _:
            raise _unexpected_node(node)


def _lower_literal(node: SyntaxNode, comments: list[Comment]) -> Literal:
    value = ""
    language: str | None = None
    for token in node.child_tokens():
        if token.kind == TurtleSyntaxKind.STRING:
            value = token.text
        elif token.kind == TurtleSyntaxKind.LANGTAG:
            language = token.text[1:]

    datatype: IriRef | PrefixedName | None = None
    datatype_node = node.child_nodes()
    if datatype_node:
        lowered = _lower_term(datatype_node[0], [])
        if not isinstance(lowered, IriRef | PrefixedName):
            raise _unexpected_node(datatype_node[0])
        datatype = lowered

    return Literal(
        span=_node_span(node),
        text=node.text,
        value=value,
        language=language,
        datatype=datatype,
        comments=tuple(comments),
    )


def _lower_iri(node: SyntaxNode) -> IriRef:
    iri_node = node.first_child_node(TurtleSyntaxKind.IRI)
    if iri_node is None:
        raise _unexpected_node(node)
    return IriRef(span=_node_span(iri_node), text=iri_node.text)


def _as_verb(term: Term | Comment, parent: SyntaxNode) -> Verb:
    if isinstance(term, IriRef | PrefixedName | AKeyword):
        return term
    raise _unexpected_node(parent)


def _interleave[T](
    nodes: Sequence[SyntaxNode],
    comments: Sequence[Comment],
    lower: Callable[[SyntaxNode, list[Comment]], T],
) -> list[T | Comment]:
    """Lower ``nodes`` in order, placing each comment between them or inside one."""
    items: list[T | Comment] = []
    index = 0
    for node in nodes:
        while index < len(comments) and comments[index].span.start_offset < node.token_start:
            items.append(comments[index])
            index += 1
        inner: list[Comment] = []
        while index < len(comments) and comments[index].span.start_offset < node.token_end:
            inner.append(comments[index])
            index += 1
        items.append(lower(node, inner))
    items.extend(comments[index:])
    return items


def _collect_comments(root: SyntaxNode) -> list[Comment]:
    index = root.line_index
    comments: list[Comment] = []
    for token in root.descendants_tokens():
        for piece in token.comments():
            comments.append(Comment(span=_span(index, piece.start, piece.end), text=piece.text))
    return comments


def _node_span(node: SyntaxNode) -> Span:
    return _span(node.line_index, node.token_start, node.token_end)


def _span(index: LineIndex, start: int, end: int) -> Span:
    return Span(
        range=TextRange.from_offsets(start, end),
        start=index.line_col(start),
        end=index.line_col(end),
    )


def _unexpected_node(node: SyntaxNode) -> TurtleFormatError:
    diagnostic = SYNTAX_ERROR.at(
        TextRange.from_offsets(node.token_start, node.token_end),
        f"Unexpected {node.kind.sexp_name}: {node.to_sexp()}",
    )
    return TurtleFormatError.located(diagnostic, node.line_index)


__all__ = ["check_syntax", "lower_syntax_tree", "parse_to_ast"]
