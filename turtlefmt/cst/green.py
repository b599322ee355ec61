"""Immutable green CST: position-independent nodes and tokens."""

from dataclasses import dataclass

from turtlefmt.lexer import TriviaPiece
from turtlefmt.syntax import TurtleSyntaxKind
from turtlefmt.text import TextSize


@dataclass(frozen=True, slots=True)
class GreenToken:
    kind: TurtleSyntaxKind
    text: str
    leading_trivia: tuple[TriviaPiece, ...]
    trailing_trivia: tuple[TriviaPiece, ...]

    @property
    def text_len(self) -> TextSize:
        total = len(self.text)
        total += sum(piece.length.value for piece in self.leading_trivia)
        total += sum(piece.length.value for piece in self.trailing_trivia)
        return TextSize.from_int(total)


@dataclass(frozen=True, slots=True)
class GreenNode:
    kind: TurtleSyntaxKind
    children: tuple["GreenElement", ...]

    @property
    def text_len(self) -> TextSize:
        return TextSize.from_int(sum(child.text_len.value for child in self.children))

    def contains_errors(self) -> bool:
        if self.kind.is_error:
            return True
        for child in self.children:
            if isinstance(child, GreenNode):
                if child.contains_errors():
                    return True
            elif child.kind.is_error:
                return True
        return False


type GreenElement = GreenNode | GreenToken


class TreeBuilder:
    """Stack-based builder turning start/token/finish calls into green nodes."""

    def __init__(self) -> None:
        self._stack: list[tuple[TurtleSyntaxKind, list[GreenElement]]] = []
        self._roots: list[GreenElement] = []

    def start_node(self, kind: TurtleSyntaxKind) -> None:
        self._stack.append((kind, []))

    def token_with_trivia(
        self,
        kind: TurtleSyntaxKind,
        text: str,
        leading: tuple[TriviaPiece, ...],
        trailing: tuple[TriviaPiece, ...],
    ) -> None:
        self._push_element(
            GreenToken(
                kind=kind,
                text=text,
                leading_trivia=leading,
                trailing_trivia=trailing,
            )
        )

    def finish_node(self) -> None:
        if not self._stack:
            raise RuntimeError("finish_node called with empty builder stack")

        kind, children = self._stack.pop()
        self._push_element(GreenNode(kind=kind, children=tuple(children)))

    def finish(self) -> GreenNode:
        if self._stack:
            raise RuntimeError("Cannot finish tree: unclosed nodes remain on stack")

        if len(self._roots) == 1 and isinstance(self._roots[0], GreenNode):
            root = self._roots[0]
            if root.kind == TurtleSyntaxKind.ROOT:
                return root

        return GreenNode(kind=TurtleSyntaxKind.ROOT, children=tuple(self._roots))

    def _push_element(self, element: GreenElement) -> None:
        if self._stack:
            self._stack[-1][1].append(element)
            return
        self._roots.append(element)
