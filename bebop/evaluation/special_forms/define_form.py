import logging
from typing import Callable

from bebop import EvaluatorFn
from bebop import Expression, LispValue
from bebop.errors import BebopArityError, BebopTypeError
from bebop.printer import to_string
from bebop.types.environment import Environment
from bebop.types.expressions import QExpr, NIL
from bebop.types.symbol import Symbol

logger = logging.getLogger(__name__)


def _assign(
    form_name: str,
    tail: list[Expression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
    bind: Callable[[Symbol, LispValue], None],
) -> LispValue:
    if len(tail) < 2:
        raise BebopArityError(
            f"{form_name} needs a list of names and a value for each, was given {len(tail)} arg(s)"
        )

    names = evaluate_fn(tail[0], env)
    if not isinstance(names, QExpr) or not names:
        raise BebopTypeError(
            f"{form_name} needs a Q-expression of symbols but was given {to_string(names, top_level=False)}"
        )
    if not all(isinstance(name, Symbol) for name in names):
        raise BebopTypeError(f"{form_name} needs a name list of all symbols")

    values = [evaluate_fn(val_expr, env) for val_expr in tail[1:]]
    if len(names) != len(values):
        raise BebopArityError(
            f"{form_name} needs to assign {len(names)} value(s) but was passed {len(values)}"
        )

    for name, value in zip(names, values):
        logger.debug("%s %s", form_name, name)
        bind(name, value)
    return NIL


def define_form(
    tail: list[Expression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (def [name ...] value ...)
    Binds in the root frame of `env`, so a helper that wraps def still
    installs names visible to every later call.
    """
    return _assign("def", tail, env, evaluate_fn, env.define_global)


def local_define_form(
    tail: list[Expression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (= [name ...] value ...)
    Binds in `env` itself, the frame the form is evaluated against.
    """
    return _assign("=", tail, env, evaluate_fn, env.define)
