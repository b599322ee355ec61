"""Concrete syntax tree: immutable green storage and positioned red views."""

from turtlefmt.cst.green import GreenElement, GreenNode, GreenToken, TreeBuilder
from turtlefmt.cst.red import (
    SyntaxElement,
    SyntaxNode,
    SyntaxToken,
    SyntaxTriviaPiece,
    from_green,
)

__all__ = [
    "GreenElement",
    "GreenNode",
    "GreenToken",
    "SyntaxElement",
    "SyntaxNode",
    "SyntaxToken",
    "SyntaxTriviaPiece",
    "TreeBuilder",
    "from_green",
]
