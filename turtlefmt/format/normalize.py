"""Lexical normalization of IRIs, strings, local names and numeric literals.

Every function here works on raw source text and either returns the
canonical spelling or raises ``LexicalError``; callers attach the source
range when turning it into a ``TurtleFormatError``.
"""

import re
from collections.abc import Iterator
from typing import Final

from turtlefmt.diagnostics import (
    INVALID_IRI_CHARACTER,
    INVALID_LOCAL_NAME_ESCAPE,
    INVALID_STRING_ESCAPE,
    INVALID_UNICODE_ESCAPE,
    Diagnostic,
    DiagnosticSpec,
)
from turtlefmt.text import TextRange

_ECHARS: Final[dict[str, str]] = {
    "t": "\t",
    "b": "\b",
    "n": "\n",
    "r": "\r",
    "f": "\f",
    '"': '"',
    "'": "'",
    "\\": "\\",
}

_IRI_FORBIDDEN: Final[frozenset[str]] = frozenset('<>"{}|^`\\')

# Escaped in local names wherever they appear.
_LOCAL_KEEP_ESCAPED: Final[frozenset[str]] = frozenset("~!$&'()*+,;=/?#@%")

_SHORT_STRING_ESCAPES: Final[dict[str, str]] = {
    '"': '\\"',
    "\\": "\\\\",
    "\r": "\\r",
    "\n": "\\n",
    "\t": "\\t",
}

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")
_DECIMAL_RE = re.compile(r"[+-]?[0-9]*\.[0-9]+")
_DOUBLE_RE = re.compile(r"[+-]?(?:[0-9]+\.[0-9]*|\.[0-9]+|[0-9]+)[eE][+-]?[0-9]+")

_HEX_DIGITS: Final[frozenset[str]] = frozenset("0123456789abcdefABCDEF")


class LexicalError(ValueError):
    """A lexical form that cannot be normalized."""

    def __init__(self, spec: DiagnosticSpec, message: str) -> None:
        super().__init__(message)
        self.spec = spec
        self.message = message

    def at(self, range: TextRange) -> Diagnostic:
        return self.spec.at(range, self.message)


def decode_escapes(raw: str) -> Iterator[str]:
    """Yield the characters of ``raw`` with ECHAR and UCHAR escapes decoded."""
    index = 0
    length = len(raw)
    while index < length:
        ch = raw[index]
        if ch != "\\":
            yield ch
            index += 1
            continue

        marker = raw[index + 1] if index + 1 < length else ""
        if marker == "u":
            yield decode_uchar(raw[index : index + 6])
            index += 6
        elif marker == "U":
            yield decode_uchar(raw[index : index + 10])
            index += 10
        else:
            yield decode_echar(marker)
            index += 2


def decode_echar(ch: str) -> str:
    decoded = _ECHARS.get(ch)
    if decoded is None:
        raise LexicalError(INVALID_STRING_ESCAPE, f"The escaped character '\\{ch}' is not valid")
    return decoded


def decode_uchar(sequence: str) -> str:
    """Decode ``\\uXXXX`` or ``\\UXXXXXXXX`` into one Unicode scalar value."""
    digits = sequence[2:]
    expected = 4 if sequence.startswith("\\u") else 8
    if len(digits) != expected or not all(digit in _HEX_DIGITS for digit in digits):
        raise LexicalError(
            INVALID_UNICODE_ESCAPE,
            f"The escaped unicode character '{sequence}' is not a complete escape sequence",
        )

    code_point = int(digits, 16)
    if code_point > 0x10FFFF or 0xD800 <= code_point <= 0xDFFF:
        raise LexicalError(
            INVALID_UNICODE_ESCAPE,
            f"The escaped unicode character '{sequence}' is not encoding a valid unicode character",
        )
    return chr(code_point)


def normalize_iri(raw: str) -> str:
    """Decode the escapes of an IRI body and reject characters IRIs may not contain."""
    normalized: list[str] = []
    for ch in decode_escapes(raw):
        if ch <= "\x20" or ch in _IRI_FORBIDDEN:
            raise LexicalError(INVALID_IRI_CHARACTER, f"The character {ch!r} is not allowed in IRIs")
        normalized.append(ch)
    return "".join(normalized)


def normalize_local_name(local: str) -> str:
    """Canonical escaping of the local part of a prefixed name.

    ``\\_`` is unescaped, ``\\.`` and ``\\-`` stay escaped only as the first
    character, the remaining punctuation escapes are kept and a trailing
    ``.`` is always escaped.
    """
    normalized: list[str] = []
    in_escape = False
    for ch in local:
        if in_escape:
            in_escape = False
            if ch == "_":
                normalized.append(ch)
            elif ch in ".-":
                normalized.append(f"\\{ch}" if not normalized else ch)
            elif ch in _LOCAL_KEEP_ESCAPED:
                normalized.append(f"\\{ch}")
            else:
                raise LexicalError(INVALID_LOCAL_NAME_ESCAPE, f"Unexpected escape character \\{ch}")
        elif ch == "\\":
            in_escape = True
        else:
            normalized.append(ch)

    result = "".join(normalized)
    if result.endswith(".") and not result.endswith("\\."):
        result = result[:-1] + "\\."
    return result


def normalize_string(body: str, *, is_long: bool) -> str:
    """Re-encode a string body for output between ``"`` or ``\"\"\"`` quotes."""
    decoded = "".join(decode_escapes(body))
    if not is_long:
        return "".join(_SHORT_STRING_ESCAPES.get(ch, ch) for ch in decoded)

    # Trailing quotes would merge with the closing delimiter.
    stripped = decoded.rstrip('"')
    trailing_quotes = len(decoded) - len(stripped)

    normalized: list[str] = []
    previous_quotes = 0
    for ch in stripped:
        if ch == '"':
            if previous_quotes >= 2:
                normalized.append('\\"')
            else:
                normalized.append(ch)
                previous_quotes += 1
        elif ch == "\\":
            normalized.append("\\\\")
            previous_quotes = 0
        else:
            normalized.append(ch)
            previous_quotes = 0
    normalized.append('\\"' * trailing_quotes)
    return "".join(normalized)


def is_turtle_integer(value: str) -> bool:
    """``[+-]? [0-9]+``"""
    return _INTEGER_RE.fullmatch(value) is not None


def is_turtle_decimal(value: str) -> bool:
    """``[+-]? [0-9]* '.' [0-9]+``"""
    return _DECIMAL_RE.fullmatch(value) is not None


def is_turtle_double(value: str) -> bool:
    """``[+-]? ([0-9]+ '.' [0-9]* | '.' [0-9]+ | [0-9]+) [eE] [+-]? [0-9]+``"""
    return _DOUBLE_RE.fullmatch(value) is not None


def is_turtle_boolean(value: str) -> bool:
    return value in ("true", "false")
