"""Syntax kinds."""

from turtlefmt.syntax.kind import TurtleSyntaxKind

__all__ = ["TurtleSyntaxKind"]
