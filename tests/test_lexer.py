import textwrap

import pytest

from tests._debug import debug_dump_tokens
from turtlefmt.lexer import Lexer, Token, TokenFlags, TokenKind, token_text


def lex(text: str) -> list[Token]:
    return Lexer(text).lex()


def significant(tokens: list[Token]) -> list[TokenKind]:
    return [token.kind for token in tokens if not token.kind.is_trivia]


def test_prefix_directive_tokens() -> None:
    src = "@prefix ex: <http://example.com/> ."
    tokens = lex(src)
    debug_dump_tokens("test_prefix_directive_tokens", src, tokens)

    assert [token.kind for token in tokens] == [
        TokenKind.PREFIX_KW,
        TokenKind.WHITESPACE,
        TokenKind.PNAME,
        TokenKind.WHITESPACE,
        TokenKind.IRIREF,
        TokenKind.WHITESPACE,
        TokenKind.DOT,
        TokenKind.EOF,
    ]
    assert token_text(src, tokens[2]) == "ex:"
    assert token_text(src, tokens[4]) == "<http://example.com/>"


def test_lexing_is_lossless() -> None:
    src = textwrap.dedent(
        """
        # comment
        @prefix : <http://example.com/> .
        :s :p "x"@en , 1.5 ; a :C . # trailing
        """
    ).lstrip()
    tokens = lex(src)

    assert "".join(token_text(src, token) for token in tokens) == src
    assert tokens[-1].kind == TokenKind.EOF
    assert tokens[-1].range.is_empty()


@pytest.mark.parametrize(
    ("src", "kind"),
    [
        ("1", TokenKind.INTEGER),
        ("-2", TokenKind.INTEGER),
        ("+2.5", TokenKind.DECIMAL),
        (".5", TokenKind.DECIMAL),
        ("3e10", TokenKind.DOUBLE),
        ("1.0E-3", TokenKind.DOUBLE),
        (".5e1", TokenKind.DOUBLE),
    ],
)
def test_numeric_literals(src: str, kind: TokenKind) -> None:
    tokens = lex(src)
    assert [token.kind for token in tokens] == [kind, TokenKind.EOF]


def test_integer_followed_by_dot_ends_statement() -> None:
    src = ":s :p 1."
    tokens = lex(src)

    assert significant(tokens)[-3:] == [TokenKind.INTEGER, TokenKind.DOT, TokenKind.EOF]


def test_prefixed_name_does_not_swallow_final_dot() -> None:
    src = "ex:a.b ex:c."
    tokens = [token for token in lex(src) if not token.kind.is_trivia]

    assert token_text(src, tokens[0]) == "ex:a.b"
    assert token_text(src, tokens[1]) == "ex:c"
    assert tokens[2].kind == TokenKind.DOT


def test_local_name_escapes_stay_in_one_token() -> None:
    src = r"ex:a\_b ex:\-x ex:%20"
    tokens = [token for token in lex(src) if not token.kind.is_trivia]

    assert [token.kind for token in tokens] == [TokenKind.PNAME] * 3 + [TokenKind.EOF]
    assert token_text(src, tokens[0]) == r"ex:a\_b"


def test_string_forms() -> None:
    src = "\"a\" 'b' \"\"\"c\n\"\"\" '''d'''"
    tokens = [token for token in lex(src) if not token.kind.is_trivia]

    assert [token.kind for token in tokens] == [TokenKind.STRING] * 4 + [TokenKind.EOF]
    assert not tokens[0].flags & TokenFlags.LONG_STRING
    assert not tokens[1].flags & TokenFlags.LONG_STRING
    assert tokens[2].flags & TokenFlags.LONG_STRING
    assert tokens[3].flags & TokenFlags.LONG_STRING


def test_string_with_escape_sets_flag() -> None:
    src = r'"a\"b"'
    tokens = lex(src)

    assert tokens[0].kind == TokenKind.STRING
    assert tokens[0].flags & TokenFlags.HAS_ESCAPE
    assert token_text(src, tokens[0]) == src


def test_language_tag_and_datatype_marker() -> None:
    src = '"x"@en-US "1"^^xsd:integer'
    assert significant(lex(src)) == [
        TokenKind.STRING,
        TokenKind.LANGTAG,
        TokenKind.STRING,
        TokenKind.CARET_CARET,
        TokenKind.PNAME,
        TokenKind.EOF,
    ]


def test_anon_and_brackets() -> None:
    assert significant(lex("[ ]")) == [TokenKind.ANON, TokenKind.EOF]
    assert significant(lex("[\n]")) == [TokenKind.ANON, TokenKind.EOF]
    assert significant(lex("[ :p 1 ]")) == [
        TokenKind.LBRACKET,
        TokenKind.PNAME,
        TokenKind.INTEGER,
        TokenKind.RBRACKET,
        TokenKind.EOF,
    ]


def test_keywords() -> None:
    assert significant(lex("PREFIX prefix BASE base a true false @base")) == [
        TokenKind.SPARQL_PREFIX,
        TokenKind.SPARQL_PREFIX,
        TokenKind.SPARQL_BASE,
        TokenKind.SPARQL_BASE,
        TokenKind.A,
        TokenKind.TRUE,
        TokenKind.FALSE,
        TokenKind.BASE_KW,
        TokenKind.EOF,
    ]


def test_blank_node_label() -> None:
    src = "_:b0 _:node.1"
    tokens = [token for token in lex(src) if not token.kind.is_trivia]

    assert tokens[0].kind == TokenKind.BLANK_NODE_LABEL
    assert token_text(src, tokens[1]) == "_:node.1"


def test_comment_stops_at_line_break() -> None:
    src = "# one\r\n# two"
    tokens = lex(src)

    assert [token.kind for token in tokens] == [
        TokenKind.COMMENT,
        TokenKind.NEWLINE,
        TokenKind.COMMENT,
        TokenKind.EOF,
    ]
    assert token_text(src, tokens[1]) == "\r\n"


def test_line_break_flag() -> None:
    tokens = [token for token in lex(":s\n  :p :o") if not token.kind.is_trivia]

    assert not tokens[0].has_preceding_line_break()
    assert tokens[1].has_preceding_line_break()
    assert not tokens[2].has_preceding_line_break()


def test_unterminated_string_reports_diagnostic() -> None:
    src = ':s :p "open .\n:t :p :o .'
    lexer = Lexer(src)
    tokens = lexer.lex()

    error = next(token for token in tokens if token.kind == TokenKind.ERROR)
    assert token_text(src, error) == '"open .'
    assert [diagnostic.code for diagnostic in lexer.diagnostics] == ["LEXER_UNTERMINATED_STRING"]
    # The next line lexes normally.
    assert significant(tokens)[-5:] == [
        TokenKind.PNAME,
        TokenKind.PNAME,
        TokenKind.PNAME,
        TokenKind.DOT,
        TokenKind.EOF,
    ]


def test_invalid_iri_reports_diagnostic() -> None:
    src = "<bad iri> :p :o ."
    lexer = Lexer(src)
    tokens = lexer.lex()

    assert tokens[0].kind == TokenKind.ERROR
    assert token_text(src, tokens[0]) == "<bad iri>"
    assert [diagnostic.code for diagnostic in lexer.diagnostics] == ["LEXER_INVALID_IRI"]


def test_bare_word_is_an_error_token() -> None:
    lexer = Lexer(":s :p hello .")
    tokens = lexer.lex()

    assert TokenKind.ERROR in [token.kind for token in tokens]
    assert lexer.diagnostics[0].code == "LEXER_UNEXPECTED_CHARACTER"
    assert "hello" in lexer.diagnostics[0].message
