#!/usr/bin/env python
import sys
from pathlib import Path

from turtlefmt.lexer import Lexer, Token, TokenFlags, TokenKind, token_text


def format_token(idx: int, token: Token, source: str) -> str:
    start, end = token.range.as_tuple()
    base = f"[{idx}] kind={token.kind.name} text={token_text(source, token)!r} span=({start},{end})"

    # Add kind-specific details
    if token.kind == TokenKind.STRING:
        return base + f" long={bool(token.flags & TokenFlags.LONG_STRING)}"
    if token.kind.is_trivia:
        return base + " trivia"
    return base


def main() -> None:
    if len(sys.argv) != 2:
        raise SystemExit("usage: dump_tokens.py FILE.ttl")

    input_path = Path(sys.argv[1]).expanduser()
    output_path = Path("out") / f"{input_path.stem}_tokens.txt"

    text = input_path.read_text(encoding="utf-8")

    lexer = Lexer(text)
    tokens = lexer.lex()

    output_path.parent.mkdir(parents=True, exist_ok=True)

    with output_path.open("w", encoding="utf-8") as f:
        for idx, token in enumerate(tokens):
            f.write(format_token(idx, token, text) + "\n")
        for diagnostic in lexer.diagnostics:
            f.write(f"{diagnostic.code} {diagnostic.range.as_tuple()} {diagnostic.message}\n")

    print(f"Wrote {len(tokens)} tokens to {output_path}")


if __name__ == "__main__":
    main()
