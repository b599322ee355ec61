"""Lexer."""

from turtlefmt.lexer.lexer import Lexer, dump_tokens, token_text
from turtlefmt.lexer.tokens import (
    Token,
    TokenFlags,
    TokenKind,
    Trivia,
    TriviaKind,
    TriviaPiece,
    trivia_kind_from_token_kind,
)

__all__ = [
    "Lexer",
    "Token",
    "TokenFlags",
    "TokenKind",
    "Trivia",
    "TriviaKind",
    "TriviaPiece",
    "dump_tokens",
    "token_text",
    "trivia_kind_from_token_kind",
]
