"""Unified syntax kinds for parser and CST."""

from enum import IntEnum

from turtlefmt.lexer import TokenKind


class TurtleSyntaxKind(IntEnum):
    """Turtle syntax vocabulary (tokens + nodes).

    Token kinds share their numeric value with ``TokenKind``.
    """

    TOMBSTONE = 0
    EOF = 1
    ERROR_TOKEN = 2

    # Trivia tokens
    WHITESPACE = 10
    NEWLINE = 11
    COMMENT = 12

    # Lexical tokens
    IRIREF = 20
    PNAME = 21
    BLANK_NODE_LABEL = 22
    STRING = 23
    INTEGER = 24
    DECIMAL = 25
    DOUBLE = 26
    TRUE = 27
    FALSE = 28
    LANGTAG = 29
    ANON = 30

    A = 40
    PREFIX_KW = 41
    BASE_KW = 42
    SPARQL_PREFIX = 43
    SPARQL_BASE = 44

    DOT = 50
    SEMICOLON = 51
    COMMA = 52
    LBRACKET = 53
    RBRACKET = 54
    LPAREN = 55
    RPAREN = 56
    CARET_CARET = 57

    # Node kinds
    ROOT = 1000
    ERROR = 1001
    MISSING = 1002
    TURTLE_DOC = 1003
    PREFIX = 1004
    BASE = 1005
    TRIPLES = 1006
    PREDICATE_OBJECTS = 1007
    IRI = 1008
    PREFIXED_NAME = 1009
    BLANK_NODE = 1010
    ANON_BLANK_NODE = 1011
    BLANK_NODE_PROPERTY_LIST = 1012
    COLLECTION = 1013
    LITERAL = 1014
    INTEGER_LITERAL = 1015
    DECIMAL_LITERAL = 1016
    DOUBLE_LITERAL = 1017
    BOOLEAN_LITERAL = 1018
    VERB_A = 1019

    @property
    def is_trivia(self) -> bool:
        return self in (
            TurtleSyntaxKind.WHITESPACE,
            TurtleSyntaxKind.NEWLINE,
            TurtleSyntaxKind.COMMENT,
        )

    @property
    def is_token(self) -> bool:
        return self != TurtleSyntaxKind.TOMBSTONE and self.value < TurtleSyntaxKind.ROOT.value

    @property
    def is_node(self) -> bool:
        return self.value >= TurtleSyntaxKind.ROOT.value

    @property
    def is_error(self) -> bool:
        return self in (
            TurtleSyntaxKind.ERROR,
            TurtleSyntaxKind.MISSING,
            TurtleSyntaxKind.ERROR_TOKEN,
        )

    @staticmethod
    def from_token_kind(kind: TokenKind) -> "TurtleSyntaxKind":
        if kind == TokenKind.ERROR:
            return TurtleSyntaxKind.ERROR_TOKEN
        try:
            return TurtleSyntaxKind(int(kind))
        except ValueError:
            raise ValueError(f"Unsupported TokenKind mapping: {kind!r}") from None

    @property
    def sexp_name(self) -> str:
        """Lower-case name used in s-expression dumps of the tree."""
        return self.name.lower()
