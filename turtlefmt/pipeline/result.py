"""Parse carrier shared by the formatter and its callers."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from turtlefmt.cst import from_green
from turtlefmt.diagnostics import has_errors
from turtlefmt.parser.tree_sink import ParsedGreenTree

if TYPE_CHECKING:
    from turtlefmt.ast import Document
    from turtlefmt.cst import SyntaxNode
    from turtlefmt.diagnostics import Diagnostic


@dataclass(slots=True)
class TurtleParseResult:
    """Parse once, then hand out the red tree and the lowered AST on demand."""

    source_text: str
    parsed: ParsedGreenTree
    _syntax_root: SyntaxNode | None = field(default=None, init=False, repr=False)
    _ast_root: Document | None = field(default=None, init=False, repr=False)

    @property
    def diagnostics(self) -> list[Diagnostic]:
        return self.parsed.diagnostics

    @property
    def has_comments(self) -> bool:
        return bool(self.parsed.comments)

    @property
    def has_errors(self) -> bool:
        return has_errors(self.parsed.diagnostics) or self.parsed.root.contains_errors()

    def syntax_root(self) -> SyntaxNode:
        if self._syntax_root is None:
            self._syntax_root = from_green(self.parsed.root, self.source_text)
        return self._syntax_root

    def ast_root(self) -> Document:
        """Lowered document; raises ``TurtleFormatError`` if the source has syntax errors."""
        if self._ast_root is None:
            from turtlefmt.ast.lower import lower_syntax_tree

            self._ast_root = lower_syntax_tree(self.syntax_root(), self.diagnostics)
        return self._ast_root
