"""Result of one grammar routine."""

from dataclasses import dataclass

from turtlefmt.syntax import TurtleSyntaxKind


@dataclass(frozen=True, slots=True)
class ParsedSyntax:
    """Kind of the node a grammar routine completed, or ``None`` when nothing matched."""

    kind: TurtleSyntaxKind | None = None

    @staticmethod
    def present(kind: TurtleSyntaxKind) -> "ParsedSyntax":
        return ParsedSyntax(kind=kind)

    @staticmethod
    def absent() -> "ParsedSyntax":
        return ParsedSyntax()

    def is_present(self) -> bool:
        return self.kind is not None

    def is_absent(self) -> bool:
        return self.kind is None
