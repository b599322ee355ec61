"""Turtle grammar routines that emit CST events."""

from typing import Final

from turtlefmt.diagnostics import Diagnostic
from turtlefmt.diagnostics.codes import PARSER_EXPECTED_TOKEN, PARSER_UNEXPECTED_TOKEN
from turtlefmt.lexer import TokenKind
from turtlefmt.parser.parse_lists import ParseNodeList
from turtlefmt.parser.parse_recovery import ParseRecoveryTokenSet
from turtlefmt.parser.parsed_syntax import ParsedSyntax
from turtlefmt.parser.parser import Parser
from turtlefmt.syntax import TurtleSyntaxKind

DIRECTIVE_KEYWORDS: Final[frozenset[TokenKind]] = frozenset(
    {
        TokenKind.PREFIX_KW,
        TokenKind.BASE_KW,
        TokenKind.SPARQL_PREFIX,
        TokenKind.SPARQL_BASE,
    }
)

VERB_START: Final[frozenset[TokenKind]] = frozenset({TokenKind.IRIREF, TokenKind.PNAME, TokenKind.A})

_TERM_TOKENS: Final[dict[TokenKind, TurtleSyntaxKind]] = {
    TokenKind.IRIREF: TurtleSyntaxKind.IRI,
    TokenKind.PNAME: TurtleSyntaxKind.PREFIXED_NAME,
    TokenKind.BLANK_NODE_LABEL: TurtleSyntaxKind.BLANK_NODE,
    TokenKind.ANON: TurtleSyntaxKind.ANON_BLANK_NODE,
    TokenKind.INTEGER: TurtleSyntaxKind.INTEGER_LITERAL,
    TokenKind.DECIMAL: TurtleSyntaxKind.DECIMAL_LITERAL,
    TokenKind.DOUBLE: TurtleSyntaxKind.DOUBLE_LITERAL,
    TokenKind.TRUE: TurtleSyntaxKind.BOOLEAN_LITERAL,
    TokenKind.FALSE: TurtleSyntaxKind.BOOLEAN_LITERAL,
}

_SUBJECT_TOKENS: Final[frozenset[TokenKind]] = frozenset(
    {TokenKind.IRIREF, TokenKind.PNAME, TokenKind.BLANK_NODE_LABEL, TokenKind.ANON}
)

_TOKEN_DISPLAY: Final[dict[TokenKind, str]] = {
    TokenKind.DOT: "'.'",
    TokenKind.RBRACKET: "']'",
    TokenKind.RPAREN: "')'",
    TokenKind.PNAME: "a prefix namespace",
    TokenKind.IRIREF: "an IRI reference",
}

STATEMENT_RECOVERY: Final[ParseRecoveryTokenSet] = ParseRecoveryTokenSet(
    node_kind=TurtleSyntaxKind.ERROR,
    recovery_set=frozenset({TokenKind.DOT, *DIRECTIVE_KEYWORDS}),
    terminator=TokenKind.DOT,
)


def parse_turtle_doc(parser: Parser) -> None:
    def recover_statement(current: Parser, parsed: ParsedSyntax) -> bool:
        if parsed.is_present():
            return True

        current.error(_unexpected_token(current))
        _, recovery_error = STATEMENT_RECOVERY.recover(current)
        return recovery_error is None

    ParseNodeList(
        list_kind=TurtleSyntaxKind.TURTLE_DOC,
        is_at_list_end=lambda current: False,
        parse_element=parse_statement,
        recover=recover_statement,
    ).parse_list(parser)


def parse_statement(parser: Parser) -> ParsedSyntax:
    match parser.current:
        case TokenKind.PREFIX_KW | TokenKind.SPARQL_PREFIX:
            return parse_prefix(parser)
        case TokenKind.BASE_KW | TokenKind.SPARQL_BASE:
            return parse_base(parser)
        case _:
            return parse_triples(parser)


def parse_prefix(parser: Parser) -> ParsedSyntax:
    marker = parser.start()
    turtle_style = parser.at(TokenKind.PREFIX_KW)
    parser.bump()

    if parser.at(TokenKind.PNAME) and _is_namespace(parser.current_text):
        parser.bump()
    else:
        parser.error(_expected_token(parser, TokenKind.PNAME))
        parser.missing()

    _expect_iri(parser)
    if turtle_style:
        parser.expect(TokenKind.DOT, _expected_token(parser, TokenKind.DOT))

    marker.complete(parser, TurtleSyntaxKind.PREFIX)
    return ParsedSyntax.present(TurtleSyntaxKind.PREFIX)


def parse_base(parser: Parser) -> ParsedSyntax:
    marker = parser.start()
    turtle_style = parser.at(TokenKind.BASE_KW)
    parser.bump()

    _expect_iri(parser)
    if turtle_style:
        parser.expect(TokenKind.DOT, _expected_token(parser, TokenKind.DOT))

    marker.complete(parser, TurtleSyntaxKind.BASE)
    return ParsedSyntax.present(TurtleSyntaxKind.BASE)


def parse_triples(parser: Parser) -> ParsedSyntax:
    marker = parser.start()

    if parser.at(TokenKind.LBRACKET):
        parse_blank_node_property_list(parser)
        if parser.at_set(VERB_START):
            parse_predicate_object_list(parser)
    elif parse_subject(parser).is_present():
        parse_predicate_object_list(parser)
    else:
        marker.abandon(parser)
        return ParsedSyntax.absent()

    parser.expect(TokenKind.DOT, _expected_token(parser, TokenKind.DOT))
    marker.complete(parser, TurtleSyntaxKind.TRIPLES)
    return ParsedSyntax.present(TurtleSyntaxKind.TRIPLES)


def parse_subject(parser: Parser) -> ParsedSyntax:
    if parser.at_set(_SUBJECT_TOKENS):
        return _parse_single_token_term(parser)
    if parser.at(TokenKind.LPAREN):
        return parse_collection(parser)
    return ParsedSyntax.absent()


def parse_predicate_object_list(parser: Parser) -> None:
    """``verb objectList (';' (verb objectList)?)*``; each group is a PREDICATE_OBJECTS node."""
    if not parser.at_set(VERB_START):
        parser.error(_expected(parser, "a predicate"))
        parser.missing()
        return

    parse_predicate_objects(parser)
    while parser.eat(TokenKind.SEMICOLON):
        if parser.at_set(VERB_START):
            parse_predicate_objects(parser)


def parse_predicate_objects(parser: Parser) -> ParsedSyntax:
    marker = parser.start()
    parse_verb(parser)

    _expect_object(parser)
    while parser.eat(TokenKind.COMMA):
        _expect_object(parser)

    marker.complete(parser, TurtleSyntaxKind.PREDICATE_OBJECTS)
    return ParsedSyntax.present(TurtleSyntaxKind.PREDICATE_OBJECTS)


def parse_verb(parser: Parser) -> ParsedSyntax:
    if parser.at(TokenKind.A):
        marker = parser.start()
        parser.bump()
        marker.complete(parser, TurtleSyntaxKind.VERB_A)
        return ParsedSyntax.present(TurtleSyntaxKind.VERB_A)
    if parser.at(TokenKind.IRIREF) or parser.at(TokenKind.PNAME):
        return _parse_single_token_term(parser)
    return ParsedSyntax.absent()


def parse_object(parser: Parser) -> ParsedSyntax:
    match parser.current:
        case TokenKind.LPAREN:
            return parse_collection(parser)
        case TokenKind.LBRACKET:
            return parse_blank_node_property_list(parser)
        case TokenKind.STRING:
            return parse_rdf_literal(parser)
        case kind if kind in _TERM_TOKENS:
            return _parse_single_token_term(parser)
        case _:
            return ParsedSyntax.absent()


def parse_collection(parser: Parser) -> ParsedSyntax:
    marker = parser.start()
    parser.bump()

    while not parser.at(TokenKind.RPAREN) and not parser.at(TokenKind.EOF):
        if parse_object(parser).is_absent():
            break

    parser.expect(TokenKind.RPAREN, _expected_token(parser, TokenKind.RPAREN))
    marker.complete(parser, TurtleSyntaxKind.COLLECTION)
    return ParsedSyntax.present(TurtleSyntaxKind.COLLECTION)


def parse_blank_node_property_list(parser: Parser) -> ParsedSyntax:
    marker = parser.start()
    parser.bump()

    parse_predicate_object_list(parser)

    parser.expect(TokenKind.RBRACKET, _expected_token(parser, TokenKind.RBRACKET))
    marker.complete(parser, TurtleSyntaxKind.BLANK_NODE_PROPERTY_LIST)
    return ParsedSyntax.present(TurtleSyntaxKind.BLANK_NODE_PROPERTY_LIST)


def parse_rdf_literal(parser: Parser) -> ParsedSyntax:
    """``String (LANGTAG | '^^' iri)?``"""
    marker = parser.start()
    parser.bump()

    if parser.at(TokenKind.LANGTAG):
        parser.bump()
    elif parser.eat(TokenKind.CARET_CARET):
        if parser.at(TokenKind.IRIREF) or parser.at(TokenKind.PNAME):
            _parse_single_token_term(parser)
        else:
            parser.error(_expected(parser, "a datatype IRI"))
            parser.missing()

    marker.complete(parser, TurtleSyntaxKind.LITERAL)
    return ParsedSyntax.present(TurtleSyntaxKind.LITERAL)


def _parse_single_token_term(parser: Parser) -> ParsedSyntax:
    marker = parser.start()
    kind = _TERM_TOKENS[parser.current]
    parser.bump()
    marker.complete(parser, kind)
    return ParsedSyntax.present(kind)


def _expect_iri(parser: Parser) -> None:
    if parser.at(TokenKind.IRIREF):
        _parse_single_token_term(parser)
        return
    parser.error(_expected_token(parser, TokenKind.IRIREF))
    parser.missing()


def _expect_object(parser: Parser) -> None:
    if parse_object(parser).is_absent():
        parser.error(_expected(parser, "an object"))
        parser.missing()


def _is_namespace(text: str) -> bool:
    return text.find(":") == len(text) - 1


def _expected_token(parser: Parser, kind: TokenKind) -> Diagnostic:
    return _expected(parser, _TOKEN_DISPLAY.get(kind, kind.name))


def _expected(parser: Parser, what: str) -> Diagnostic:
    return PARSER_EXPECTED_TOKEN.at(
        parser.current_range,
        f"Expected {what}, found {_describe_current(parser)}",
    )


def _unexpected_token(parser: Parser) -> Diagnostic:
    return PARSER_UNEXPECTED_TOKEN.at(
        parser.current_range,
        f"Unexpected {_describe_current(parser)}",
    )


def _describe_current(parser: Parser) -> str:
    if parser.at(TokenKind.EOF):
        return "end of file"
    return f"{parser.current.name} {parser.current_text!r}"
