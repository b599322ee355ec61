"""Centralized Turtle source cases used across parser/format/graph tests."""

from __future__ import annotations

from dataclasses import dataclass, field
import textwrap

from turtlefmt.format import FormatOptions, FormatStyle


@dataclass(frozen=True, slots=True)
class FormatCase:
    name: str
    source: str
    expected: str
    options: FormatOptions = field(default_factory=FormatOptions)


@dataclass(frozen=True, slots=True)
class TurtleCase:
    name: str
    source: str
    has_comments: bool = False


def _dedent(text: str) -> str:
    return textwrap.dedent(text).lstrip()


EX: str = "@prefix ex: <http://example.com/> .\n"
EMPTY_PREFIX: str = "@prefix : <http://example.com/> .\n"

SORTED = FormatOptions(sort_terms=True)
DIFF = FormatOptions(diff_minimizing_layout=True)

OPTION_SETS: tuple[FormatOptions, ...] = (
    FormatOptions(),
    FormatOptions(indentation=2, single_object_on_new_line=True),
    DIFF,
    SORTED,
    FormatOptions.for_style(FormatStyle.DIFF_OPTIMIZED),
)


FORMAT_CASES: tuple[FormatCase, ...] = (
    FormatCase(
        name="prefix_and_triples",
        source="@prefix  ex:<http://example.com/>.\nex:s   ex:p ex:o.",
        expected=EX + "\nex:s ex:p ex:o .\n",
    ),
    FormatCase(
        name="triple_blocks_separated_by_one_blank_line",
        source=EX + "ex:a ex:p 1 .\nex:b ex:p 2 .\n",
        expected=EX + "\nex:a ex:p 1 .\n\nex:b ex:p 2 .\n",
    ),
    FormatCase(
        name="prefix_group_collapses_blank_lines",
        source=_dedent(
            """
            @prefix foaf: <http://xmlns.com/foaf/0.1/> .

            @prefix ex: <http://example.com/> .
            ex:a foaf:name "A" .
            """
        ),
        expected=_dedent(
            """
            @prefix foaf: <http://xmlns.com/foaf/0.1/> .
            @prefix ex: <http://example.com/> .

            ex:a foaf:name "A" .
            """
        ),
    ),
    FormatCase(
        name="sparql_style_directives",
        source="PREFIX ex: <http://example.com/>\nBASE <http://base.example/>\nex:a ex:p ex:b .\n",
        expected=(
            "@prefix ex: <http://example.com/> .\n"
            "@base <http://base.example/> .\n"
            "\n"
            "ex:a ex:p ex:b .\n"
        ),
    ),
    FormatCase(
        name="objects_and_predicate_groups",
        source=EX + 'ex:s ex:p ex:o1,ex:o2;ex:q "v" .\n',
        expected=EX + '\nex:s ex:p ex:o1 , ex:o2 ;\n    ex:q "v" .\n',
    ),
    FormatCase(
        name="trailing_semicolon_is_dropped",
        source=EX + "ex:s ex:p 1 ; .\n",
        expected=EX + "\nex:s ex:p 1 .\n",
    ),
    FormatCase(
        name="rdf_type_predicate_becomes_a",
        source=_dedent(
            """
            @prefix rdf: <http://www.w3.org/1999/02/22-rdf-syntax-ns#> .
            @prefix ex: <http://example.com/> .
            ex:s rdf:type ex:C .
            ex:t <http://www.w3.org/1999/02/22-rdf-syntax-ns#type> ex:C .
            ex:u ex:p rdf:type .
            """
        ),
        expected=_dedent(
            """
            @prefix rdf: <http://www.w3.org/1999/02/22-rdf-syntax-ns#> .
            @prefix ex: <http://example.com/> .

            ex:s a ex:C .

            ex:t a ex:C .

            ex:u ex:p rdf:type .
            """
        ),
    ),
    FormatCase(
        name="typed_literals_use_bare_forms",
        source=_dedent(
            """
            @prefix xsd: <http://www.w3.org/2001/XMLSchema#> .
            @prefix ex: <http://example.com/> .
            ex:s ex:int "007"^^xsd:integer ;
                ex:dec "1.5e"^^xsd:decimal ;
                ex:bool "true"^^xsd:boolean ;
                ex:dbl "1e3"^^<http://www.w3.org/2001/XMLSchema#double> ;
                ex:str "x"^^xsd:string .
            """
        ),
        expected=_dedent(
            """
            @prefix xsd: <http://www.w3.org/2001/XMLSchema#> .
            @prefix ex: <http://example.com/> .

            ex:s ex:int 007 ;
                ex:dec "1.5e"^^xsd:decimal ;
                ex:bool true ;
                ex:dbl 1e3 ;
                ex:str "x"^^xsd:string .
            """
        ),
    ),
    FormatCase(
        name="numeric_and_boolean_tokens_are_kept",
        source=EX + "ex:s ex:p -1 , +2.50 , 1.0E-3 , .5 , false .\n",
        expected=EX + "\nex:s ex:p -1 , +2.50 , 1.0E-3 , .5 , false .\n",
    ),
    FormatCase(
        name="string_escapes_are_normalized",
        source=EX + r"""ex:s ex:p 'single' , "tab\there" , "aA" , 'it\'s' , "chat"@en-GB .""" + "\n",
        expected=EX + "\n" + r"""ex:s ex:p "single" , "tab\there" , "aA" , "it's" , "chat"@en-GB .""" + "\n",
    ),
    FormatCase(
        name="long_string_keeps_line_breaks",
        source=EX + "ex:s ex:p '''first\nsecond''' .\n",
        expected=EX + '\nex:s ex:p """first\nsecond""" .\n',
    ),
    FormatCase(
        name="long_string_ending_with_quote",
        source=EX + "ex:s ex:p '''ends with quote\"''' .\n",
        expected=EX + '\nex:s ex:p """ends with quote\\"""" .\n',
    ),
    FormatCase(
        name="iri_and_local_name_escapes",
        source=EX + r"<http://example.com/\u0041> ex:a\_b ex:\-x , ex:a\-b , ex:a\~b ." + "\n",
        expected=EX + "\n" + r"<http://example.com/A> ex:a_b ex:\-x , ex:a-b , ex:a\~b ." + "\n",
    ),
    FormatCase(
        name="blank_nodes_and_collections",
        source=EX + "_:b0 ex:p [ ] , [ ex:q 1 ; ex:r 2 ] , ( 1 2 ) , () .\n",
        expected=EX + "\n_:b0 ex:p [] , [ ex:q 1 ; ex:r 2 ] , ( 1 2 ) , ( ) .\n",
    ),
    FormatCase(
        name="blank_node_property_list_subjects",
        source=EX + "[ ex:p 1 ] .\n[ ex:p 2 ] ex:q 3 .\n",
        expected=EX + "\n[ ex:p 1 ] .\n\n[ ex:p 2 ] ex:q 3 .\n",
    ),
    FormatCase(
        name="collection_subject",
        source=EX + "( ex:a ex:b ) ex:p ex:o .\n",
        expected=EX + "\n( ex:a ex:b ) ex:p ex:o .\n",
    ),
    FormatCase(
        name="comments_keep_their_place",
        source=_dedent(
            """
            # Header comment
            @prefix ex: <http://example.com/> . # prefix note

            # About s
            ex:s ex:p 1 ; # first
                ex:q 2 . # trailing
            """
        ),
        expected=_dedent(
            """
            # Header comment
            @prefix ex: <http://example.com/> . # prefix note

            # About s
            ex:s ex:p 1 ; # first
                ex:q 2 . # trailing
            """
        ),
    ),
    FormatCase(
        name="comment_separated_by_blank_line_stays_detached",
        source=EX + "# detached\n\n\nex:s ex:p 1 .\n",
        expected=EX + "\n# detached\n\nex:s ex:p 1 .\n",
    ),
    FormatCase(
        name="comment_inside_blank_node_moves_after_statement",
        source=EX + "ex:s ex:p [\n    # inside\n    ex:q 1\n] .\n",
        expected=EX + "\nex:s ex:p [ ex:q 1 ] . # inside\n",
    ),
    FormatCase(
        name="indentation_option",
        source=EX + "ex:s ex:p 1 ; ex:q 2 .\n",
        expected=EX + "\nex:s ex:p 1 ;\n  ex:q 2 .\n",
        options=FormatOptions(indentation=2),
    ),
    FormatCase(
        name="single_object_on_new_line",
        source=EX + "ex:s ex:p 1 ; ex:q 2 , 3 .\n",
        expected=EX + "\nex:s ex:p\n        1 ;\n    ex:q 2 , 3 .\n",
        options=FormatOptions(single_object_on_new_line=True),
    ),
    FormatCase(
        name="diff_minimizing_layout",
        source=EX + "ex:s ex:p 1 , 2 ; ex:q 3 .\n",
        expected=EX + "\nex:s\n    ex:p\n        1 ,\n        2 ;\n    ex:q 3 ;\n    .\n",
        options=DIFF,
    ),
    FormatCase(
        name="diff_minimizing_layout_blank_node_property_list",
        source=EX + "ex:s ex:p [ ex:q 1 ] .\n",
        expected=EX + "\nex:s\n    ex:p [\n            ex:q 1 ;\n        ] ;\n    .\n",
        options=DIFF,
    ),
    FormatCase(
        name="sorting_keeps_subject_order",
        source=EMPTY_PREFIX + ":b :p 1 . :a :p 2 .\n",
        expected=EMPTY_PREFIX + "\n:b :p 1 .\n\n:a :p 2 .\n",
        options=SORTED,
    ),
    FormatCase(
        name="sorting_predicates_and_objects",
        source=EMPTY_PREFIX + ':s :q 3 , 1 , 2 ; a :C ; :p "b" , :x , 2 , <http://z.example/> .\n',
        expected=EMPTY_PREFIX + '\n:s a :C ;\n    :p :x , <http://z.example/> , "b" , 2 ;\n    :q 1 , 2 , 3 .\n',
        options=SORTED,
    ),
    FormatCase(
        name="sorting_prefixes_by_label",
        source="@prefix b: <http://b.example/> .\n@prefix a: <http://a.example/> .\na:s b:p 1 .\n",
        expected="@prefix a: <http://a.example/> .\n@prefix b: <http://b.example/> .\n\na:s b:p 1 .\n",
        options=SORTED,
    ),
    FormatCase(
        name="diff_optimized_style",
        source=EMPTY_PREFIX + ":s :q 2 ; :p 1 .\n",
        expected=EMPTY_PREFIX + "\n:s\n    :p 1 ;\n    :q 2 ;\n    .\n",
        options=FormatOptions.for_style(FormatStyle.DIFF_OPTIMIZED),
    ),
)


VALID_DOCUMENTS: tuple[TurtleCase, ...] = (
    TurtleCase(
        name="people",
        source=_dedent(
            """
            @prefix foaf: <http://xmlns.com/foaf/0.1/> .
            @prefix ex: <http://example.com/> .
            @prefix xsd: <http://www.w3.org/2001/XMLSchema#> .

            ex:alice a foaf:Person ;
                foaf:name "Alice"@en , "Alicia"@es ;
                foaf:age "42"^^xsd:integer ;
                foaf:knows ex:bob , [ foaf:name "Carol" ; foaf:age 30 ] .

            ex:bob foaf:name 'Bob' ; foaf:nick '''Bobby
            the "builder"''' .
            """
        ),
    ),
    TurtleCase(
        name="collections_and_blank_nodes",
        source=_dedent(
            """
            @prefix ex: <http://example.com/> .
            _:list ex:items ( 1 2.5 3e1 true "four" ( ex:nested ) [ ex:p ex:o ] ) .
            [ ex:label "anonymous subject" ] .
            ex:s ex:empty () ; ex:anon [] .
            """
        ),
    ),
    TurtleCase(
        name="escapes_and_datatypes",
        source=_dedent(
            r"""
            @prefix ex: <http://example.com/> .
            @prefix xsd: <http://www.w3.org/2001/XMLSchema#> .
            <http://example.com/été> ex:text "line\nbreak \"quoted\"" ;
                ex:local ex:a_b , ex:c-d ;
                ex:decimal "12.50"^^xsd:decimal ;
                ex:bad "x1"^^xsd:integer .
            """
        ),
    ),
    TurtleCase(
        name="commented",
        source=_dedent(
            """
            # A small vocabulary.
            @prefix ex: <http://example.com/> . # main namespace

            # Things
            ex:thing ex:p ex:o ; # one
                ex:q "two" .

            ex:other ex:p ex:thing . # done
            """
        ),
        has_comments=True,
    ),
)


NEGATIVE_SYNTAX_CASES: tuple[TurtleCase, ...] = (
    TurtleCase(name="missing_object", source="<http://a.example/s> <http://a.example/p> .\n"),
    TurtleCase(name="missing_dot", source="<http://a.example/s> <http://a.example/p> <http://a.example/o>\n"),
    TurtleCase(name="unterminated_string", source='<http://a.example/s> <http://a.example/p> "open .\n'),
    TurtleCase(name="prefix_without_colon", source="@prefix ex <http://example.com/> .\n"),
    TurtleCase(name="literal_subject", source='"lit" <http://a.example/p> <http://a.example/o> .\n'),
    TurtleCase(name="iri_with_space", source="<http://a.example/s p> <http://a.example/p> 1 .\n"),
    TurtleCase(name="sparql_prefix_with_dot", source="PREFIX ex: <http://example.com/> .\n"),
    TurtleCase(name="bare_word_object", source="<http://a.example/s> <http://a.example/p> hello .\n"),
    TurtleCase(name="unclosed_blank_node", source="<http://a.example/s> <http://a.example/p> [ <http://a.example/q> 1 .\n"),
    TurtleCase(name="unclosed_collection", source="<http://a.example/s> <http://a.example/p> ( 1 2 .\n"),
)


def case_id(case: FormatCase | TurtleCase) -> str:
    return case.name
