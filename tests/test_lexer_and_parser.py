import sys

import pytest
from hypothesis import given, strategies as st

from bebop.errors import BebopSyntaxError
from bebop.reader.parser import lex, parse, TokenStream
from bebop.types.expressions import SExpr, QExpr
from bebop.types.symbol import Symbol


@pytest.mark.parametrize(
    "source,expected",
    [
        ("a", [("atom", "a")]),
        ("(a b c)", [("lparen", "("), ("atom", "a"), ("atom", "b"), ("atom", "c"), ("rparen", ")")]),
        ("[x]", [("lbracket", "["), ("atom", "x"), ("rbracket", "]")]),
        ('"hello"', [("string", '"hello"')]),
        ('"two\nlines"', [("string", '"two\nlines"')]),
        (" ; comment\n a b", [("atom", "a"), ("atom", "b")]),
        ("\\ rec-list", [("atom", "\\"), ("atom", "rec-list")]),
        ("1.1e+13", [("atom", "1.1e+13")]),
        ("", []),
        ("   \n\t", []),
    ]
)
def test_lexer_basic(source, expected):
    tokens = list(lex(source))
    assert tokens == expected


@pytest.mark.parametrize(
    "source, expected",
    [
        ("123", 123),
        ("-12302", -12302),
        ("+7", 7),
        ("1.1", 1.1),
        ("1.1e+13", 1.1e13),
        ("123E-02", 1.23),
        ("-", Symbol("-")),
        ("+", Symbol("+")),
        ("\\", Symbol("\\")),
        (":", Symbol(":")),
        ("&&", Symbol("&&")),
        ("is-nil", Symbol("is-nil")),
        ("h1", Symbol("h1")),
        ('"hello world"', "hello world"),
        ('""', ""),
        ("(* 1 2 3)", SExpr([Symbol("*"), 1, 2, 3])),
        ("[* 1 2 3]", QExpr([Symbol("*"), 1, 2, 3])),
        ("()", SExpr()),
        ("[]", QExpr()),
    ]
)
def test_parser(source, expected):
    result = parse(source)
    assert result == [expected]     # Parser yields one expression


def test_integer_literals_stay_integers():
    assert type(parse("42")[0]) is int
    assert type(parse("42.0")[0]) is float


def test_nested_forms():
    source = "(def [fun] (\\ [args body] [def (head args) body]))"
    expected = SExpr([
        Symbol("def"),
        QExpr([Symbol("fun")]),
        SExpr([
            Symbol("\\"),
            QExpr([Symbol("args"), Symbol("body")]),
            QExpr([Symbol("def"), SExpr([Symbol("head"), Symbol("args")]), Symbol("body")]),
        ]),
    ])
    assert parse(source) == [expected]


def test_multiple_top_level_forms():
    source = """
        (def [a] 1) ; bind a
        "text"
        [a b]
    """
    assert parse(source) == [
        SExpr([Symbol("def"), QExpr([Symbol("a")]), 1]),
        "text",
        QExpr([Symbol("a"), Symbol("b")]),
    ]


def test_sexpr_and_qexpr_are_distinct():
    (s,) = parse("(1 2)")
    (q,) = parse("[1 2]")
    assert s != q
    assert list(s) == list(q)


def test_strings_are_taken_literally():
    assert parse('"semi ; colon (and) [brackets] \\n"') == ["semi ; colon (and) [brackets] \\n"]


def test_token_stream_returns_none_when_exhausted():
    stream = TokenStream(lex("1"))
    assert stream.parse_expr() == 1
    assert stream.parse_expr() is None


@pytest.mark.parametrize(
    "source",
    [
        "(+ 1 2",
        "[1 2",
        "(+ 1 2))",
        "]",
        "(1 2]",
        "[1 2)",
        '"unterminated',
        "1abc",
        "-5x",
        "1.2.3",
        "a.b",
        "{1}",
        "#t",
    ]
)
def test_syntax_errors(source):
    with pytest.raises(BebopSyntaxError):
        parse(source)


def test_syntax_error_reports_position():
    with pytest.raises(BebopSyntaxError, match="line 2, column 3"):
        parse('(a\n  "oops')


# -------------------------------
# Hypothesis tests
# -------------------------------
symbol_strat = st.text(
    alphabet="abcdefghijklmnopqrstuvwxyz_+-*/=|!&%", min_size=1, max_size=8
)
number_strat = st.integers(min_value=-10**6, max_value=10**6)
string_strat = st.text(alphabet=st.characters(blacklist_characters='"'), max_size=10)

atom_strat = st.one_of(symbol_strat.map(Symbol), number_strat, string_strat)

expr_strat = st.recursive(
    atom_strat,
    lambda children: st.one_of(
        st.lists(children, max_size=4).map(SExpr),
        st.lists(children, max_size=4).map(QExpr),
    ),
    max_leaves=12,
)


def _to_source(expr):
    if isinstance(expr, (SExpr, QExpr)):
        return expr.open_bracket + " ".join(_to_source(e) for e in expr) + expr.close_bracket
    if isinstance(expr, str):
        return f'"{expr}"'
    return str(expr)


@given(expr_strat)
def test_parser_reads_back_generated_source(expr):
    assert parse(_to_source(expr)) == [expr]


def test_deep_nesting_within_the_stack_bound_parses(bare):
    depth = 1500
    expr = bare.eval("[" * depth + "1" + "]" * depth)
    for _ in range(depth):
        (expr,) = expr
    assert expr == 1


def test_nesting_beyond_the_stack_bound_is_a_syntax_error():
    depth = sys.getrecursionlimit() + 100
    with pytest.raises(BebopSyntaxError, match="nested too deeply"):
        parse("(" * depth + ")" * depth)
