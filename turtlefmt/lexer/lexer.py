"""Lexer."""

import re
from typing import Final

from turtlefmt.diagnostics import (
    LEXER_INVALID_IRI,
    LEXER_UNEXPECTED_CHARACTER,
    LEXER_UNTERMINATED_STRING,
    Diagnostic,
    DiagnosticSpec,
)
from turtlefmt.lexer.tokens import Token, TokenFlags, TokenKind
from turtlefmt.text import TextRange, TextSize, slice_text_range

# [163s] PN_CHARS_BASE, [164s] PN_CHARS_U, [166s] PN_CHARS
PN_CHARS_BASE: Final[str] = (
    "A-Za-z\u00c0-\u00d6\u00d8-\u00f6\u00f8-\u02ff\u0370-\u037d\u037f-\u1fff\u200c-\u200d"
    "\u2070-\u218f\u2c00-\u2fef\u3001-\ud7ff\uf900-\ufdcf\ufdf0-\ufffd\U00010000-\U000effff"
)
PN_CHARS_U: Final[str] = PN_CHARS_BASE + "_"
PN_CHARS: Final[str] = PN_CHARS_U + "\\-0-9\u00b7\u0300-\u036f\u203f-\u2040"

# [169s] PLX ::= PERCENT | PN_LOCAL_ESC
PLX: Final[str] = r"%[0-9A-Fa-f]{2}|\\[_~.\-!$&'()*+,;=/?#@%]"
PN_PREFIX: Final[str] = f"[{PN_CHARS_BASE}](?:[{PN_CHARS}.]*[{PN_CHARS}])?"
PN_LOCAL: Final[str] = f"(?:[{PN_CHARS_U}:0-9]|{PLX})(?:(?:[{PN_CHARS}.:]|{PLX})*(?:[{PN_CHARS}:]|{PLX}))?"

_ESCAPE: Final[str] = r"""\\[tbnrf"'\\]|\\u[0-9A-Fa-f]{4}|\\U[0-9A-Fa-f]{8}"""

_PNAME_RE = re.compile(f"(?:{PN_PREFIX})?:(?:{PN_LOCAL})?")
_BLANK_NODE_LABEL_RE = re.compile(f"_:[{PN_CHARS_U}0-9](?:[{PN_CHARS}.]*[{PN_CHARS}])?")
_IRIREF_RE = re.compile(r'<(?:[^\x00-\x20<>"{}|^`\\]|\\u[0-9A-Fa-f]{4}|\\U[0-9A-Fa-f]{8})*>')
_LANGTAG_RE = re.compile(r"@[a-zA-Z]+(?:-[a-zA-Z0-9]+)*")
_DOUBLE_RE = re.compile(r"[+-]?(?:[0-9]+\.[0-9]*[eE][+-]?[0-9]+|\.[0-9]+[eE][+-]?[0-9]+|[0-9]+[eE][+-]?[0-9]+)")
_DECIMAL_RE = re.compile(r"[+-]?[0-9]*\.[0-9]+")
_INTEGER_RE = re.compile(r"[+-]?[0-9]+")
_ANON_RE = re.compile(r"\[[\x20\t\r\n]*\]")
_WORD_RE = re.compile(r"[A-Za-z]+")
_STRING_LONG_QUOTE_RE = re.compile(f'"""(?:(?:"|"")?(?:[^"\\\\]|{_ESCAPE}))*"""')
_STRING_LONG_SINGLE_QUOTE_RE = re.compile(f"'''(?:(?:'|'')?(?:[^'\\\\]|{_ESCAPE}))*'''")
_STRING_QUOTE_RE = re.compile(f'"(?:[^"\\\\\\n\\r]|{_ESCAPE})*"')
_STRING_SINGLE_QUOTE_RE = re.compile(f"'(?:[^'\\\\\\n\\r]|{_ESCAPE})*'")

_PUNCTUATION: Final[dict[str, TokenKind]] = {
    ".": TokenKind.DOT,
    ";": TokenKind.SEMICOLON,
    ",": TokenKind.COMMA,
    "]": TokenKind.RBRACKET,
    "(": TokenKind.LPAREN,
    ")": TokenKind.RPAREN,
}


class Lexer:
    """Lossless lexer that emits trivia and non-trivia tokens."""

    def __init__(self, source: str) -> None:
        self._source = source
        self._position = 0
        self._after_newline = False
        self._current_start = TextSize.from_int(0)
        self._current_kind = TokenKind.EOF
        self._current_flags = TokenFlags.NONE
        self._eof_emitted = False
        self._diagnostics: list[Diagnostic] = []

    @property
    def source(self) -> str:
        """Original source text."""
        return self._source

    @property
    def diagnostics(self) -> list[Diagnostic]:
        """List of diagnostics emitted during lexing."""
        return self._diagnostics

    @property
    def current(self) -> TokenKind:
        return self._current_kind

    @property
    def current_range(self) -> TextRange:
        return TextRange.new(self._current_start, TextSize.from_int(self._position))

    @property
    def current_flags(self) -> TokenFlags:
        return self._current_flags

    @property
    def position(self) -> int:
        return self._position

    @property
    def is_eof(self) -> bool:
        return self._position >= len(self._source)

    def next_token(self) -> Token:
        self._current_start = TextSize.from_int(self._position)
        self._current_flags = TokenFlags.NONE

        if self.is_eof:
            self._eof_emitted = True
            self._current_kind = TokenKind.EOF
            return Token(TokenKind.EOF, TextRange.empty(self._current_start), self._current_flags)

        kind = self._lex_token()
        if self._after_newline:
            self._current_flags |= TokenFlags.PRECEDING_LINE_BREAK
        self._current_kind = kind

        if not kind.is_trivia:
            self._after_newline = False

        return Token(kind, self.current_range, self._current_flags)

    def lex(self) -> list[Token]:
        tokens: list[Token] = []
        while True:
            token = self.next_token()
            tokens.append(token)
            if token.kind == TokenKind.EOF:
                break
        return tokens

    def _lex_token(self) -> TokenKind:
        ch = self._current_char()

        if ch == "\r" or ch == "\n":
            self._consume_newline()
            self._after_newline = True
            return TokenKind.NEWLINE

        if ch == " " or ch == "\t":
            self._consume_whitespaces()
            return TokenKind.WHITESPACE

        if ch == "#":
            return self._lex_comment()

        if ch == "<":
            return self._lex_iriref()

        if ch == '"' or ch == "'":
            return self._lex_string()

        if ch == "@":
            return self._lex_at_keyword()

        if ch == "_" and self._peek_char() == ":":
            if self._eat_regex(_BLANK_NODE_LABEL_RE):
                return TokenKind.BLANK_NODE_LABEL
            return self._lex_error(LEXER_UNEXPECTED_CHARACTER, 2)

        if ch.isdigit() or ch in "+-" or (ch == "." and self._peek_char().isdigit()):
            return self._lex_number()

        if ch == "^" and self._peek_char() == "^":
            self._advance(2)
            return TokenKind.CARET_CARET

        if ch == "[":
            if self._eat_regex(_ANON_RE):
                return TokenKind.ANON
            self._advance(1)
            return TokenKind.LBRACKET

        if (kind := _PUNCTUATION.get(ch)) is not None:
            self._advance(1)
            return kind

        return self._lex_name()

    def _lex_comment(self) -> TokenKind:
        # Consume until end of line, do not consume the newline itself.
        self._advance(1)
        while not self.is_eof:
            ch = self._current_char()
            if ch == "\n" or ch == "\r":
                break
            self._advance(1)
        return TokenKind.COMMENT

    def _lex_iriref(self) -> TokenKind:
        if self._eat_regex(_IRIREF_RE):
            if "\\" in self._current_text():
                self._current_flags |= TokenFlags.HAS_ESCAPE
            return TokenKind.IRIREF

        # Swallow the broken reference up to its closing bracket on the same line.
        end = self._position + 1
        while end < len(self._source) and self._source[end] not in "\r\n>":
            end += 1
        if end < len(self._source) and self._source[end] == ">":
            end += 1
        return self._lex_error(LEXER_INVALID_IRI, end - self._position)

    def _lex_string(self) -> TokenKind:
        if self._source.startswith('"""', self._position):
            matched = self._eat_regex(_STRING_LONG_QUOTE_RE)
            self._current_flags |= TokenFlags.LONG_STRING
        elif self._source.startswith("'''", self._position):
            matched = self._eat_regex(_STRING_LONG_SINGLE_QUOTE_RE)
            self._current_flags |= TokenFlags.LONG_STRING
        elif self._current_char() == '"':
            matched = self._eat_regex(_STRING_QUOTE_RE)
        else:
            matched = self._eat_regex(_STRING_SINGLE_QUOTE_RE)

        if not matched:
            self._current_flags &= ~TokenFlags.LONG_STRING
            end = self._position + 1
            while end < len(self._source) and self._source[end] not in "\r\n":
                end += 1
            return self._lex_error(LEXER_UNTERMINATED_STRING, end - self._position)

        if "\\" in self._current_text():
            self._current_flags |= TokenFlags.HAS_ESCAPE
        return TokenKind.STRING

    def _lex_at_keyword(self) -> TokenKind:
        if not self._eat_regex(_LANGTAG_RE):
            return self._lex_error(LEXER_UNEXPECTED_CHARACTER, 1)
        text = self._current_text()
        if text == "@prefix":
            return TokenKind.PREFIX_KW
        if text == "@base":
            return TokenKind.BASE_KW
        return TokenKind.LANGTAG

    def _lex_number(self) -> TokenKind:
        # Longest match wins: 1.5e3 is a double, 1.5 a decimal, and "1." an integer and a dot.
        if self._eat_regex(_DOUBLE_RE):
            return TokenKind.DOUBLE
        if self._eat_regex(_DECIMAL_RE):
            return TokenKind.DECIMAL
        if self._eat_regex(_INTEGER_RE):
            return TokenKind.INTEGER
        return self._lex_error(LEXER_UNEXPECTED_CHARACTER, 1)

    def _lex_name(self) -> TokenKind:
        if self._eat_regex(_PNAME_RE):
            return TokenKind.PNAME

        word = _WORD_RE.match(self._source, self._position)
        if word is None:
            return self._lex_error(LEXER_UNEXPECTED_CHARACTER, 1)

        self._advance(len(word.group()))
        text = word.group()
        if text == "a":
            return TokenKind.A
        if text == "true":
            return TokenKind.TRUE
        if text == "false":
            return TokenKind.FALSE
        if text.upper() == "PREFIX":
            return TokenKind.SPARQL_PREFIX
        if text.upper() == "BASE":
            return TokenKind.SPARQL_BASE
        self._diagnostics.append(
            LEXER_UNEXPECTED_CHARACTER.at(self.current_range, f"Unexpected bare word {text!r}")
        )
        return TokenKind.ERROR

    def _lex_error(self, spec: DiagnosticSpec, length: int) -> TokenKind:
        self._advance(max(length, 1))
        self._diagnostics.append(spec.at(self.current_range))
        return TokenKind.ERROR

    def _eat_regex(self, pattern: re.Pattern[str]) -> bool:
        matched = pattern.match(self._source, self._position)
        if matched is None or matched.end() == self._position:
            return False
        self._position = matched.end()
        return True

    def _consume_whitespaces(self) -> None:
        while not self.is_eof:
            ch = self._current_char()
            if ch == " " or ch == "\t":
                self._advance(1)
                continue
            break

    def _consume_newline(self) -> None:
        if self._current_char() == "\r" and self._peek_char() == "\n":
            self._advance(2)
        else:
            self._advance(1)

    def _current_text(self) -> str:
        return self._source[self._current_start.value : self._position]

    def _current_char(self) -> str:
        if self.is_eof:
            return "\0"
        return self._source[self._position]

    def _peek_char(self, ahead: int = 1) -> str:
        index = self._position + ahead
        if index >= len(self._source):
            return "\0"
        return self._source[index]

    def _advance(self, steps: int) -> None:
        self._position = min(self._position + steps, len(self._source))


def token_text(source: str, token: Token) -> str:
    """Get the text of a token from the source string based on its range."""
    if token.kind == TokenKind.EOF:
        return ""
    return slice_text_range(source, token.range)


def dump_tokens(tokens: list[Token], source: str, diagnostics: list[Diagnostic] | None = None) -> None:
    """Print token list with kind, range, flags, and text for debugging."""
    for i, tok in enumerate(tokens):
        text = token_text(source, tok)
        print(f"{i:03d} {tok.kind.name:<18} range={tok.range.as_tuple()} flags={tok.flags} text={text!r}")

    if diagnostics is not None:
        print("\nDiagnostics:")
        for d in diagnostics:
            print(f"- {d.severity.upper()} {d.code} range={d.range.as_tuple()} message={d.message}")
