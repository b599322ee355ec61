"""Lexer tokens."""

from dataclasses import dataclass
from enum import IntEnum, IntFlag

from turtlefmt.text import TextRange, TextSize


class TokenKind(IntEnum):
    # -------------------------
    # Special / sentinels
    # -------------------------
    EOF = 1
    ERROR = 2  # bytes no lexical rule accepts

    # -------------------------
    # Trivia tokens (emitted by the lexer)
    # -------------------------
    WHITESPACE = 10
    NEWLINE = 11
    COMMENT = 12

    # -------------------------
    # Terms
    # -------------------------
    IRIREF = 20  # <http://example.com/>
    PNAME = 21  # ex:local, ex:, :local
    BLANK_NODE_LABEL = 22  # _:b0
    STRING = 23  # "...", '...', """...""", '''...'''
    INTEGER = 24
    DECIMAL = 25
    DOUBLE = 26
    TRUE = 27
    FALSE = 28
    LANGTAG = 29  # @en-US
    ANON = 30  # [ ]

    # -------------------------
    # Keywords
    # -------------------------
    A = 40  # a
    PREFIX_KW = 41  # @prefix
    BASE_KW = 42  # @base
    SPARQL_PREFIX = 43  # PREFIX (case-insensitive)
    SPARQL_BASE = 44  # BASE (case-insensitive)

    # -------------------------
    # Punctuation / separators
    # -------------------------
    DOT = 50  # .
    SEMICOLON = 51  # ;
    COMMA = 52  # ,
    LBRACKET = 53  # [
    RBRACKET = 54  # ]
    LPAREN = 55  # (
    RPAREN = 56  # )
    CARET_CARET = 57  # ^^

    @property
    def is_trivia(self) -> bool:
        return self in (
            TokenKind.WHITESPACE,
            TokenKind.NEWLINE,
            TokenKind.COMMENT,
        )


class TriviaKind(IntEnum):
    """The trivia vocabulary (separate from TokenKind for type-safety)."""

    WHITESPACE = 1
    NEWLINE = 2
    COMMENT = 3


def trivia_kind_from_token_kind(kind: TokenKind) -> TriviaKind:
    """Map lexer trivia token kinds to TriviaKind.

    Raises if called with a non-trivia TokenKind.
    """
    match kind:
        case TokenKind.NEWLINE:
            return TriviaKind.NEWLINE
        case TokenKind.WHITESPACE:
            return TriviaKind.WHITESPACE
        case TokenKind.COMMENT:
            return TriviaKind.COMMENT
        case _:
            raise ValueError(f"Not a trivia token kind: {kind!r}")


class TokenFlags(IntFlag):
    """Token metadata flags."""

    NONE = 0
    PRECEDING_LINE_BREAK = 1 << 0
    LONG_STRING = 1 << 1  # triple-quoted
    HAS_ESCAPE = 1 << 2


@dataclass(frozen=True, slots=True)
class Token:
    """A single lexed token (trivia or non-trivia)."""

    kind: TokenKind
    range: TextRange
    flags: TokenFlags = TokenFlags.NONE

    def has_preceding_line_break(self) -> bool:
        return bool(self.flags & TokenFlags.PRECEDING_LINE_BREAK)


@dataclass(frozen=True, slots=True)
class Trivia:
    """Range-based trivia recorded by the TokenSource."""

    kind: TriviaKind
    range: TextRange
    trailing: bool


@dataclass(frozen=True, slots=True)
class TriviaPiece:
    """Compact trivia unit stored in the CST (kind + length)."""

    kind: TriviaKind
    length: TextSize
