from dataclasses import replace

import pytest

from tests._debug import debug_print_formatted
from tests._shared_cases import (
    EMPTY_PREFIX,
    EX,
    FORMAT_CASES,
    NEGATIVE_SYNTAX_CASES,
    OPTION_SETS,
    SORTED,
    VALID_DOCUMENTS,
    FormatCase,
    TurtleCase,
    case_id,
)
from turtlefmt import FormatOptions, FormatStyle, TurtleFormatError, format_turtle, run_format


def _format(test_name: str, source: str, options: FormatOptions | None = None) -> str:
    formatted = format_turtle(source, options)
    debug_print_formatted(test_name, formatted)
    return formatted


@pytest.mark.parametrize("case", FORMAT_CASES, ids=case_id)
def test_format_cases(case: FormatCase) -> None:
    assert _format(f"test_format_cases[{case.name}]", case.source, case.options) == case.expected


@pytest.mark.parametrize("case", FORMAT_CASES, ids=case_id)
def test_format_cases_are_idempotent(case: FormatCase) -> None:
    assert format_turtle(case.expected, case.options) == case.expected


@pytest.mark.parametrize("options", OPTION_SETS, ids=repr)
@pytest.mark.parametrize("case", VALID_DOCUMENTS, ids=case_id)
def test_formatting_is_idempotent(case: TurtleCase, options: FormatOptions) -> None:
    if case.has_comments and options.includes_sorting:
        # Sorting only formats commented documents when forced.
        options = replace(options, force=True)

    once = _format(f"test_formatting_is_idempotent[{case.name}]", case.source, options)
    assert format_turtle(once, options) == once


def test_empty_document() -> None:
    assert format_turtle("") == "\n"
    assert format_turtle("  \n\n") == "\n"


def test_output_ends_with_single_newline() -> None:
    formatted = format_turtle(EX + "ex:s ex:p ex:o .\n\n\n\n")
    assert formatted.endswith(" .\n")
    assert not formatted.endswith("\n\n")


def test_default_options() -> None:
    options = FormatOptions()

    assert options.indentation == 4
    assert not options.sort_terms
    assert not options.diff_minimizing_layout
    assert not options.single_object_on_new_line
    assert not options.force
    assert not options.includes_sorting


def test_negative_indentation_is_rejected() -> None:
    with pytest.raises(ValueError, match="indentation"):
        FormatOptions(indentation=-1)


def test_diff_optimized_style_enables_sorting_and_layout() -> None:
    options = FormatOptions.for_style(FormatStyle.DIFF_OPTIMIZED, indentation=2)

    assert options.sort_terms
    assert options.diff_minimizing_layout
    assert options.indentation == 2
    assert FormatOptions.for_style(FormatStyle.DEFAULT) == FormatOptions()


@pytest.mark.parametrize("case", NEGATIVE_SYNTAX_CASES, ids=case_id)
def test_invalid_documents_are_rejected(case: TurtleCase) -> None:
    with pytest.raises(TurtleFormatError) as excinfo:
        format_turtle(case.source)

    assert excinfo.value.code == "SYNTAX_ERROR"
    assert str(excinfo.value).startswith("Error on line 1")


def test_undefined_prefix_names_prefix_and_line() -> None:
    src = "# leading comment\nex:foo ex:bar ex:baz .\n"
    with pytest.raises(TurtleFormatError) as excinfo:
        format_turtle(src)

    error = excinfo.value
    assert error.code == "UNDEFINED_PREFIX"
    assert str(error) == "The prefix ex: is not defined on line 2"
    assert error.line == 2
    assert error.columns == (1, 7)


def test_prefix_must_be_declared_before_use() -> None:
    src = "ex:s ex:p ex:o .\n" + EX
    with pytest.raises(TurtleFormatError) as excinfo:
        format_turtle(src)
    assert excinfo.value.code == "UNDEFINED_PREFIX"


def test_redeclared_prefix_applies_to_later_statements() -> None:
    src = (
        "@prefix ex: <http://one.example/> .\n"
        "@prefix rdf: <http://www.w3.org/1999/02/22-rdf-syntax-ns#> .\n"
        "ex:s rdf:type ex:C .\n"
        "@prefix rdf: <http://not-rdf.example/> .\n"
        "ex:s rdf:type ex:C .\n"
    )
    formatted = format_turtle(src)

    assert "ex:s a ex:C ." in formatted
    assert "ex:s rdf:type ex:C ." in formatted


def test_invalid_iri_character_after_unescaping() -> None:
    src = "<http://example.com/\\u0020> <http://example.com/p> 1 .\n"
    with pytest.raises(TurtleFormatError) as excinfo:
        format_turtle(src)

    assert excinfo.value.code == "INVALID_IRI_CHARACTER"
    assert excinfo.value.line == 1


def test_invalid_unicode_escape_in_string() -> None:
    src = EX + 'ex:s ex:p "\\uD800" .\n'
    with pytest.raises(TurtleFormatError) as excinfo:
        format_turtle(src)

    assert excinfo.value.code == "INVALID_UNICODE_ESCAPE"
    assert excinfo.value.line == 2


def test_sorting_with_comments_is_refused() -> None:
    src = EMPTY_PREFIX + "# note\n:s :p 1 .\n"
    with pytest.raises(TurtleFormatError) as excinfo:
        format_turtle(src, SORTED)

    assert excinfo.value.code == "SORT_WITH_COMMENTS"


def test_sorting_with_comments_is_forced() -> None:
    src = EMPTY_PREFIX + "# note\n:s :p 1 .\n"
    result = run_format(src, FormatOptions(sort_terms=True, force=True))

    assert result.formatted_text == EMPTY_PREFIX + "\n# note\n:s :p 1 .\n"
    assert [diagnostic.code for diagnostic in result.diagnostics] == ["SORT_WITH_COMMENTS"]
    assert result.diagnostics[0].severity == "warning"


def test_comments_without_sorting_produce_no_warning() -> None:
    result = run_format(EMPTY_PREFIX + "# note\n:s :p 1 .\n")
    assert result.diagnostics == []
