"""Core evaluator for the Bebop interpreter.

A direct tree-walking reducer: every reduction is a function of
(expression, environment). Special forms are dispatched from the
SPECIAL_FORMS table before ordinary application and always receive the
exact environment object passed to `evaluate`.
"""

from __future__ import annotations

from bebop import Expression, LispValue
from bebop.evaluation.apply import apply
from bebop.evaluation.special_forms import SPECIAL_FORMS
from bebop.types.builtin import Builtin
from bebop.types.environment import Environment
from bebop.types.expressions import SExpr, NIL
from bebop.types.lambda_fn import Lambda
from bebop.types.symbol import Symbol


def evaluate(expr: Expression, env: Environment) -> LispValue:
    """Reduce `expr` against `env`."""
    match expr:
        case Symbol():
            return env.lookup(expr)
        case SExpr():
            return evaluate_sexpr(expr, env)

    # --- Numbers, strings, Q-expressions and functions return as-is ---
    return expr


def evaluate_sexpr(expr: SExpr, env: Environment) -> LispValue:
    if not expr:
        return NIL

    head, *tail_args = expr

    # --- Special forms handling ---
    if isinstance(head, Symbol) and head in SPECIAL_FORMS:
        return SPECIAL_FORMS[head](tail_args, env, evaluate)

    fn = evaluate(head, env)
    args = [evaluate(arg, env) for arg in tail_args]

    # A lone non-function value, e.g. the (0) produced from an [0] branch
    if not args and not isinstance(fn, (Lambda, Builtin)):
        return fn

    return apply(fn, args, env, evaluate)
