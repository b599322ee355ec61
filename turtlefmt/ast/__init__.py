"""Typed AST over the Turtle CST."""

from turtlefmt.ast.lower import check_syntax, lower_syntax_tree, parse_to_ast
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

__all__ = [
    "AKeyword",
    "AnonBlankNode",
    "BaseDirective",
    "BlankNodePropertyList",
    "BooleanLiteral",
    "Collection",
    "Comment",
    "DecimalLiteral",
    "Document",
    "DoubleLiteral",
    "IntegerLiteral",
    "IriRef",
    "LabeledBlankNode",
    "Literal",
    "PredicateObjects",
    "PrefixDirective",
    "PrefixedName",
    "Span",
    "Statement",
    "Term",
    "Triples",
    "Verb",
    "check_syntax",
    "lower_syntax_tree",
    "parse_to_ast",
]
