"""Red CST wrappers over immutable green nodes/tokens."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from turtlefmt.cst.green import GreenNode
from turtlefmt.lexer import TriviaKind, TriviaPiece
from turtlefmt.syntax import TurtleSyntaxKind
from turtlefmt.text import LineIndex


@dataclass(frozen=True, slots=True)
class SyntaxTriviaPiece:
    kind: TriviaKind
    text: str
    start: int

    @property
    def end(self) -> int:
        return self.start + len(self.text)


class SyntaxToken:
    __slots__ = (
        "kind",
        "text",
        "leading_trivia",
        "trailing_trivia",
        "parent",
        "_start",
        "_token_start",
        "_token_end",
        "_end",
    )

    def __init__(
        self,
        *,
        kind: TurtleSyntaxKind,
        text: str,
        leading_pieces: tuple[TriviaPiece, ...],
        trailing_pieces: tuple[TriviaPiece, ...],
        parent: SyntaxNode,
        source: str,
        start: int,
    ) -> None:
        self.kind = kind
        self.text = text
        self.parent = parent
        self._start = start

        leading_len = sum(piece.length.value for piece in leading_pieces)
        trailing_len = sum(piece.length.value for piece in trailing_pieces)

        self._token_start = start + leading_len
        self._token_end = self._token_start + len(text)
        self._end = self._token_end + trailing_len

        self.leading_trivia = _build_trivia(source=source, start=self._start, pieces=leading_pieces)
        self.trailing_trivia = _build_trivia(source=source, start=self._token_end, pieces=trailing_pieces)

    @property
    def start(self) -> int:
        return self._start

    @property
    def end(self) -> int:
        return self._end

    @property
    def token_start(self) -> int:
        return self._token_start

    @property
    def token_end(self) -> int:
        return self._token_end

    def comments(self) -> Iterator[SyntaxTriviaPiece]:
        for piece in (*self.leading_trivia, *self.trailing_trivia):
            if piece.kind == TriviaKind.COMMENT:
                yield piece

    def __repr__(self) -> str:
        return f"SyntaxToken({self.kind.name}, {self.text!r}, {self._token_start}..{self._token_end})"


class SyntaxNode:
    __slots__ = (
        "kind",
        "parent",
        "_children",
        "_source",
        "_line_index",
        "_start",
        "_end",
    )

    def __init__(
        self,
        *,
        kind: TurtleSyntaxKind,
        parent: SyntaxNode | None,
        source: str,
        line_index: LineIndex,
        start: int,
    ) -> None:
        self.kind = kind
        self.parent = parent
        self._source = source
        self._line_index = line_index
        self._start = start
        self._end = start
        self._children: tuple[SyntaxElement, ...] = ()

    @property
    def start(self) -> int:
        return self._start

    @property
    def end(self) -> int:
        return self._end

    @property
    def source(self) -> str:
        return self._source

    @property
    def line_index(self) -> LineIndex:
        return self._line_index

    @property
    def children(self) -> tuple[SyntaxElement, ...]:
        return self._children

    @property
    def token_start(self) -> int:
        """Start of the first token, excluding its leading trivia."""
        first = self.first_token()
        return first.token_start if first is not None else self._start

    @property
    def token_end(self) -> int:
        """End of the last token, excluding its trailing trivia."""
        last = self.last_token()
        return last.token_end if last is not None else self.token_start

    @property
    def text(self) -> str:
        """Source text of the node without surrounding trivia."""
        return self._source[self.token_start : self.token_end]

    def child_nodes(self) -> tuple[SyntaxNode, ...]:
        return tuple(child for child in self._children if isinstance(child, SyntaxNode))

    def child_tokens(self) -> tuple[SyntaxToken, ...]:
        return tuple(child for child in self._children if isinstance(child, SyntaxToken))

    def first_child_node(self, kind: TurtleSyntaxKind) -> SyntaxNode | None:
        for child in self._children:
            if isinstance(child, SyntaxNode) and child.kind == kind:
                return child
        return None

    def first_token(self) -> SyntaxToken | None:
        for child in self._children:
            if isinstance(child, SyntaxToken):
                if child.kind != TurtleSyntaxKind.EOF:
                    return child
                continue
            token = child.first_token()
            if token is not None:
                return token
        return None

    def last_token(self) -> SyntaxToken | None:
        for child in reversed(self._children):
            if isinstance(child, SyntaxToken):
                if child.kind != TurtleSyntaxKind.EOF:
                    return child
                continue
            token = child.last_token()
            if token is not None:
                return token
        return None

    def descendants_tokens(self) -> tuple[SyntaxToken, ...]:
        tokens: list[SyntaxToken] = []

        def walk(node: SyntaxNode) -> None:
            for child in node.children:
                if isinstance(child, SyntaxToken):
                    tokens.append(child)
                else:
                    walk(child)

        walk(self)
        return tuple(tokens)

    def find_error(self) -> SyntaxNode | SyntaxToken | None:
        """First ERROR/MISSING node or error token in document order."""
        if self.kind.is_error:
            return self
        for child in self._children:
            if isinstance(child, SyntaxNode):
                found = child.find_error()
                if found is not None:
                    return found
            elif child.kind.is_error:
                return child
        return None

    def to_sexp(self) -> str:
        """Structural dump in the usual ``(kind (child) ...)`` notation."""
        if self.kind == TurtleSyntaxKind.MISSING:
            return "(MISSING)"
        name = "ERROR" if self.kind == TurtleSyntaxKind.ERROR else self.kind.sexp_name
        parts = [name]
        for child in self._children:
            if isinstance(child, SyntaxNode):
                parts.append(child.to_sexp())
            elif child.kind == TurtleSyntaxKind.ERROR_TOKEN or self.kind == TurtleSyntaxKind.ERROR:
                parts.append(repr(child.text))
        return "(" + " ".join(parts) + ")"

    def __repr__(self) -> str:
        return f"SyntaxNode({self.kind.name}, {self.token_start}..{self.token_end})"


type SyntaxElement = SyntaxNode | SyntaxToken


def from_green(root: GreenNode, source: str = "") -> SyntaxNode:
    red_root, _ = _build_node(
        green=root,
        parent=None,
        source=source,
        line_index=LineIndex(source),
        start=0,
    )
    return red_root


def _build_node(
    *,
    green: GreenNode,
    parent: SyntaxNode | None,
    source: str,
    line_index: LineIndex,
    start: int,
) -> tuple[SyntaxNode, int]:
    node = SyntaxNode(
        kind=green.kind,
        parent=parent,
        source=source,
        line_index=line_index,
        start=start,
    )

    current = start
    children: list[SyntaxElement] = []
    for child in green.children:
        if isinstance(child, GreenNode):
            red_child, current = _build_node(
                green=child,
                parent=node,
                source=source,
                line_index=line_index,
                start=current,
            )
            children.append(red_child)
            continue

        token = SyntaxToken(
            kind=child.kind,
            text=child.text,
            leading_pieces=child.leading_trivia,
            trailing_pieces=child.trailing_trivia,
            parent=node,
            source=source,
            start=current,
        )
        children.append(token)
        current = token.end

    node._children = tuple(children)
    node._end = current
    return node, current


def _build_trivia(
    *,
    source: str,
    start: int,
    pieces: tuple[TriviaPiece, ...],
) -> tuple[SyntaxTriviaPiece, ...]:
    if not pieces:
        return ()

    out: list[SyntaxTriviaPiece] = []
    offset = start
    for piece in pieces:
        piece_end = offset + piece.length.value
        out.append(SyntaxTriviaPiece(kind=piece.kind, text=source[offset:piece_end], start=offset))
        offset = piece_end
    return tuple(out)


__all__ = [
    "SyntaxElement",
    "SyntaxNode",
    "SyntaxToken",
    "SyntaxTriviaPiece",
    "from_green",
]
