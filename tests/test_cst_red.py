import textwrap

from turtlefmt.cst import SyntaxNode, SyntaxToken, from_green
from turtlefmt.lexer import TriviaKind
from turtlefmt.parser import parse
from turtlefmt.syntax import TurtleSyntaxKind
from turtlefmt.text import LineCol


def _red(source: str) -> SyntaxNode:
    return from_green(parse(source).root, source)


def _statements(root: SyntaxNode) -> tuple[SyntaxNode, ...]:
    document = root.first_child_node(TurtleSyntaxKind.TURTLE_DOC)
    assert document is not None
    return document.child_nodes()


def test_red_tree_round_trips_source() -> None:
    src = textwrap.dedent(
        """
        # header
        @prefix ex: <http://example.com/> .

        ex:s ex:p ( 1 2 ) ; # inner
            ex:q [ ex:r "x"@en ] .
        """
    ).lstrip()
    root = _red(src)

    tokens = root.descendants_tokens()
    assert [token.start for token in tokens[1:]] == [token.end for token in tokens[:-1]]
    assert "".join(src[token.start : token.end] for token in tokens) == src
    assert root.start == 0
    assert root.end == len(src)


def test_offsets_exclude_trivia() -> None:
    src = "@prefix ex: <http://example.com/> .\n  ex:s ex:p ex:o . # note\n"
    root = _red(src)
    _, triples = _statements(root)

    assert triples.text == "ex:s ex:p ex:o ."
    assert root.line_index.line_col(triples.token_start) == LineCol(row=1, column=2)
    assert root.line_index.line_col(triples.token_end) == LineCol(row=1, column=18)
    assert triples.start < triples.token_start


def test_trailing_comment_belongs_to_previous_token() -> None:
    src = "@prefix ex: <http://example.com/> .\nex:s ex:p ex:o . # note\n# next\n"
    root = _red(src)
    _, triples = _statements(root)

    dot = triples.last_token()
    assert dot is not None
    assert dot.kind == TurtleSyntaxKind.DOT
    assert [piece.text for piece in dot.comments()] == ["# note"]
    assert all(piece.kind != TriviaKind.NEWLINE for piece in dot.trailing_trivia)

    tokens = root.descendants_tokens()
    eof = tokens[-1]
    assert eof.kind == TurtleSyntaxKind.EOF
    assert [piece.text for piece in eof.comments()] == ["# next"]


def test_leading_comment_belongs_to_next_token() -> None:
    src = "@prefix ex: <http://example.com/> .\n# about s\nex:s ex:p ex:o .\n"
    root = _red(src)
    _, triples = _statements(root)

    first = triples.first_token()
    assert first is not None
    assert first.text == "ex:s"
    assert [piece.text for piece in first.comments()] == ["# about s"]
    comment = next(first.comments())
    assert src[comment.start : comment.end] == "# about s"


def test_parent_links() -> None:
    root = _red(":s :p :o ; :q :r .")
    (triples,) = _statements(root)

    subject, first_group, second_group = triples.child_nodes()
    assert subject.parent is triples
    assert first_group.parent is triples
    semicolon = triples.children[2]
    assert isinstance(semicolon, SyntaxToken)
    assert semicolon.kind == TurtleSyntaxKind.SEMICOLON
    assert semicolon.parent is triples
    assert second_group.text == ":q :r"


def test_to_sexp() -> None:
    root = _red("@prefix ex: <http://example.com/> .\nex:s ex:p ex:o .\n")
    prefix, triples = _statements(root)

    assert prefix.to_sexp() == "(prefix (iri))"
    assert triples.to_sexp() == "(triples (prefixed_name) (predicate_objects (prefixed_name) (prefixed_name)))"


def test_find_error_reports_first_error_element() -> None:
    root = _red("<http://a.example/s> <http://a.example/p> .\n")

    error = root.find_error()
    assert isinstance(error, SyntaxNode)
    assert error.kind == TurtleSyntaxKind.MISSING
    assert error.to_sexp() == "(MISSING)"


def test_error_node_sexp_lists_tokens() -> None:
    root = _red('"lit" <http://a.example/p> 1 .\n')
    (error,) = _statements(root)

    assert error.kind == TurtleSyntaxKind.ERROR
    assert error.to_sexp() == "(ERROR '\"lit\"' '<http://a.example/p>' '1' '.')"


def test_error_token_inside_valid_node() -> None:
    root = _red("<http://a.example/s> <http://a.example/p> hello .\n")

    error = root.find_error()
    assert error is not None
    assert error.kind.is_error


def test_no_error_in_valid_tree() -> None:
    assert _red(":s :p :o .").find_error() is None
