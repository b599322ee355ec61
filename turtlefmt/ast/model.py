"""AST data model for Turtle documents.

Every statement and term kind the formatter understands is one frozen
dataclass; ``Term`` and ``Statement`` close the union over them. Comments are
kept as items interleaved with the children of the innermost construct that
surrounds them.
"""

from __future__ import annotations

from dataclasses import dataclass

from turtlefmt.text import LineCol, TextRange


@dataclass(frozen=True, slots=True)
class Span:
    """Character range plus zero-based row/column of both ends."""

    range: TextRange
    start: LineCol
    end: LineCol

    @property
    def start_offset(self) -> int:
        return self.range.start.value

    @property
    def end_offset(self) -> int:
        return self.range.end.value


@dataclass(frozen=True, slots=True)
class Comment:
    span: Span
    text: str

    @property
    def body(self) -> str:
        """Comment text without the leading ``#`` and trailing whitespace."""
        return self.text[1:].rstrip()


@dataclass(frozen=True, slots=True)
class IriRef:
    span: Span
    text: str

    @property
    def iri(self) -> str:
        """Raw (still escaped) IRI between the angle brackets."""
        return self.text[1:-1]


@dataclass(frozen=True, slots=True)
class PrefixedName:
    span: Span
    text: str

    @property
    def prefix(self) -> str:
        return self.text.split(":", 1)[0]

    @property
    def local(self) -> str:
        return self.text.split(":", 1)[1]


@dataclass(frozen=True, slots=True)
class AKeyword:
    span: Span
    text: str = "a"


@dataclass(frozen=True, slots=True)
class AnonBlankNode:
    span: Span
    text: str


@dataclass(frozen=True, slots=True)
class LabeledBlankNode:
    span: Span
    text: str

    @property
    def label(self) -> str:
        return self.text[2:]


@dataclass(frozen=True, slots=True)
class BooleanLiteral:
    span: Span
    text: str


@dataclass(frozen=True, slots=True)
class IntegerLiteral:
    span: Span
    text: str


@dataclass(frozen=True, slots=True)
class DecimalLiteral:
    span: Span
    text: str


@dataclass(frozen=True, slots=True)
class DoubleLiteral:
    span: Span
    text: str


@dataclass(frozen=True, slots=True)
class Literal:
    """Quoted literal: ``value`` is the raw string token including its quotes."""

    span: Span
    text: str
    value: str
    language: str | None = None
    datatype: IriRef | PrefixedName | None = None
    comments: tuple[Comment, ...] = ()

    @property
    def is_long(self) -> bool:
        return self.value.startswith(('"""', "'''"))

    @property
    def body(self) -> str:
        """Raw string body between the quotes."""
        quote_len = 3 if self.is_long else 1
        return self.value[quote_len:-quote_len]


@dataclass(frozen=True, slots=True)
class PredicateObjects:
    span: Span
    text: str
    predicate: Verb
    items: tuple[Term | Comment, ...]

    @property
    def objects(self) -> tuple[Term, ...]:
        return tuple(item for item in self.items if not isinstance(item, Comment))


@dataclass(frozen=True, slots=True)
class BlankNodePropertyList:
    span: Span
    text: str
    items: tuple[PredicateObjects | Comment, ...]


@dataclass(frozen=True, slots=True)
class Collection:
    span: Span
    text: str
    items: tuple[Term | Comment, ...]


@dataclass(frozen=True, slots=True)
class PrefixDirective:
    span: Span
    text: str
    label: str
    iri: IriRef
    comments: tuple[Comment, ...] = ()


@dataclass(frozen=True, slots=True)
class BaseDirective:
    span: Span
    text: str
    iri: IriRef
    comments: tuple[Comment, ...] = ()


@dataclass(frozen=True, slots=True)
class Triples:
    span: Span
    text: str
    subject: Term
    items: tuple[PredicateObjects | Comment, ...]


@dataclass(frozen=True, slots=True)
class Document:
    span: Span
    items: tuple[Statement | Comment, ...]


type Verb = IriRef | PrefixedName | AKeyword
type Term = (
    IriRef
    | PrefixedName
    | AKeyword
    | AnonBlankNode
    | LabeledBlankNode
    | BlankNodePropertyList
    | Collection
    | Literal
    | BooleanLiteral
    | IntegerLiteral
    | DecimalLiteral
    | DoubleLiteral
)
type Statement = PrefixDirective | BaseDirective | Triples


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
]
