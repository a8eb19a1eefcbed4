import logging

import pytest

from bebop.errors import (
    BebopError,
    BebopInterrupt,
    BebopRecursionError,
    BebopSyntaxError,
    BebopUnboundSymbol,
)
from bebop.interpreter import Interpreter
from bebop.reader.parser import parse
from bebop.types.expressions import NIL
from bebop.types.symbol import Symbol


def test_bare_interpreter_has_only_primitives(bare):
    assert bare.eval("(+ 1 2)") == 3
    with pytest.raises(BebopUnboundSymbol):
        bare.eval("(fac 3)")


def test_string_prelude_is_evaluated():
    itp = Interpreter(prelude="(def [answer] 42) (def [twice] (\\ [x] [* 2 x]))")
    assert itp.eval("(twice answer)") == 84


def test_each_interpreter_has_its_own_environment():
    first = Interpreter(prelude=None)
    second = Interpreter(prelude=None)
    first.eval("(def [only-here] 1)")
    assert Symbol("only-here") not in second.env


def test_eval_result_shapes(bare):
    assert bare.eval("") == NIL
    assert bare.eval("(+ 1 1)") == 2
    assert bare.eval("1 2 (+ 1 2)") == [1, 2, 3]


def test_eval_forms_yields_one_value_per_form(bare):
    values = bare.eval_forms(parse("(def [x] 2) (* x 3) x"))
    assert list(values) == [NIL, 6, 2]


def test_error_aborts_the_form_but_keeps_earlier_bindings(bare):
    forms = bare.eval_forms(parse("(def [kept] 5) (+ kept missing) (def [never] 1)"))
    assert next(forms) == NIL
    with pytest.raises(BebopUnboundSymbol, match="missing"):
        next(forms)
    assert bare.eval("kept") == 5
    assert Symbol("never") not in bare.env


def test_errors_are_logged(bare, caplog):
    with caplog.at_level(logging.ERROR, logger="bebop"):
        with pytest.raises(BebopUnboundSymbol):
            bare.eval("nope")
    assert "top-level form 0 failed" in caplog.text


def test_syntax_error_evaluates_nothing(bare):
    with pytest.raises(BebopSyntaxError):
        bare.eval("(def [early] 1) (+ 1")
    assert Symbol("early") not in bare.env


def test_die_stops_rendering(interp):
    with pytest.raises(BebopInterrupt, match="draft"):
        interp.render('(h1 "Title") (die "draft")')


def test_unbounded_recursion_is_reported(bare):
    bare.eval("(def [forever] (\\ [n] [forever (+ n 1)]))")
    with pytest.raises(BebopRecursionError):
        bare.eval("(forever 0)")
    assert bare.eval("(+ 1 1)") == 2


def test_all_errors_share_a_base_class(bare):
    for source in ["missing", "(1 2)", "(/ 1 0)", "(head [])", "((\\ [a] [a]) 1 2)"]:
        with pytest.raises(BebopError):
            bare.eval(source)


def test_recursion_limit_from_environment(monkeypatch):
    import sys

    current = sys.getrecursionlimit()
    try:
        monkeypatch.setenv("BEBOP_RECURSION_LIMIT", str(current + 500))
        Interpreter(prelude=None)
        assert sys.getrecursionlimit() == current + 500

        monkeypatch.setenv("BEBOP_RECURSION_LIMIT", "10")
        Interpreter(prelude=None)
        assert sys.getrecursionlimit() == current + 500
    finally:
        sys.setrecursionlimit(current)


def test_log_level_from_environment(monkeypatch):
    logger = logging.getLogger("bebop")
    previous = logger.level
    try:
        monkeypatch.setenv("BEBOP_LOG_LEVEL", "debug")
        Interpreter(prelude=None)
        assert logger.level == logging.DEBUG
    finally:
        logger.setLevel(previous)


def test_default_stack_bound_fits_prelude_workloads(monkeypatch):
    import sys

    monkeypatch.delenv("BEBOP_RECURSION_LIMIT", raising=False)
    itp = Interpreter()
    assert sys.getrecursionlimit() >= 10000

    items = " ".join(str(n) for n in range(300))
    assert itp.eval(f"(len (map (list {items}) inc))") == 300
    assert itp.eval(f"(fst (reverse (filter (list {items}) (\\ [x] [> x 10]))))") == 299
    assert itp.eval("(gauss 500)") == 125250
