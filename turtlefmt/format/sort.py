"""Canonical ordering of predicate-object groups and objects."""

from collections.abc import Callable, Iterable
from enum import IntEnum

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
    PrefixDirective,
    PrefixedName,
    Term,
)


class TermKindRank(IntEnum):
    """Fixed total order over term kinds; lower ranks sort first."""

    COMMENT = 0
    A = 1
    PREFIXED_NAME = 2
    IRI_REF = 3
    COLLECTION = 4
    ANON_BLANK_NODE = 5
    LABELED_BLANK_NODE = 6
    BLANK_NODE_PROPERTY_LIST = 7
    LITERAL = 8
    BOOLEAN = 9
    INTEGER = 10
    DECIMAL = 11
    DOUBLE = 12
    STRING = 13
    NONE = 14


_RANKS: dict[type, TermKindRank] = {
    Comment: TermKindRank.COMMENT,
    AKeyword: TermKindRank.A,
    PrefixedName: TermKindRank.PREFIXED_NAME,
    IriRef: TermKindRank.IRI_REF,
    Collection: TermKindRank.COLLECTION,
    AnonBlankNode: TermKindRank.ANON_BLANK_NODE,
    LabeledBlankNode: TermKindRank.LABELED_BLANK_NODE,
    BlankNodePropertyList: TermKindRank.BLANK_NODE_PROPERTY_LIST,
    Literal: TermKindRank.LITERAL,
    BooleanLiteral: TermKindRank.BOOLEAN,
    IntegerLiteral: TermKindRank.INTEGER,
    DecimalLiteral: TermKindRank.DECIMAL,
    DoubleLiteral: TermKindRank.DOUBLE,
}

type SortKey = tuple[TermKindRank, str]


def rank_of(term: Term | Comment) -> TermKindRank:
    return _RANKS.get(type(term), TermKindRank.NONE)


def sort_text(term: Term | Comment) -> str:
    """Raw source text compared between terms of the same rank."""
    match term:
        case IriRef():
            return term.iri
        case LabeledBlankNode():
            return term.label
        case _:
            return term.text


def term_sort_key(term: Term | Comment) -> SortKey:
    return rank_of(term), sort_text(term)


def predicate_objects_sort_key(group: PredicateObjects) -> SortKey:
    return term_sort_key(group.predicate)


def prefix_sort_key(prefix: PrefixDirective) -> str:
    return prefix.label


def sorted_items[T](
    items: Iterable[T | Comment],
    key: Callable[[T], SortKey],
) -> list[T | Comment]:
    """Comments keep their relative order and come first; everything else is sorted after them."""
    fixed: list[T | Comment] = []
    to_sort: list[T] = []
    for item in items:
        if isinstance(item, Comment):
            fixed.append(item)
        else:
            to_sort.append(item)
    fixed.extend(sorted(to_sort, key=key))
    return fixed
