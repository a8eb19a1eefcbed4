"""Application engine for Bebop.

This module centralizes function application semantics for the interpreter:
- Partial application: a Lambda given fewer arguments than its positional
  formals returns a new Lambda awaiting the rest (currying without a
  separate operator).
- Full application: one new frame under the closure env, formals bound
  (including a ':' rest parameter), body promoted to an SExpr and reduced.
- Application of Builtins registered in the environment.

Keeping this logic in one place prevents duplication between the evaluator
and builtin helpers such as eval.
"""

from __future__ import annotations

import logging

from bebop import LispValue, EvaluatorFn
from bebop.errors import BebopArityError, BebopTypeError
from bebop.printer import to_string
from bebop.types.builtin import Builtin
from bebop.types.environment import Environment
from bebop.types.expressions import promote
from bebop.types.lambda_fn import Lambda

logger = logging.getLogger(__name__)


def apply_lambda(
    fn: Lambda,
    args: list[LispValue],
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """Apply a Lisp Lambda value.

    Parameters:
    - fn: The Lambda being applied.
    - args: The already-evaluated argument values.
    - evaluate_fn: Evaluator used to reduce the body.

    Behavior:
    - Fewer arguments than positional formals: return a new Lambda whose
      environment is a child of fn.env holding the supplied bindings.
    - Positional formals satisfied: bind (rest collects any extras) and
      evaluate the body in the new frame.
    - Too many arguments without a ':' rest formal raises BebopArityError.
    """
    positional = fn.positional
    provided = len(args)
    arity = len(positional)

    if provided < arity:
        new_env = Environment(outer=fn.env)
        for name, value in zip(positional, args):
            new_env.define(name, value)
        logger.debug("partial application: %d of %d args bound", provided, arity)
        return Lambda(fn.formals[provided:], fn.body, new_env)

    if provided > arity and fn.rest is None:
        extra = [to_string(a, top_level=False) for a in args[arity:]]
        raise BebopArityError(
            f"Function needed {arity} arg(s) but was given {provided}; extra: {' '.join(extra)}"
        )

    new_env = fn.extend_env(args)
    return evaluate_fn(promote(fn.body), new_env)


def apply(
    head: Lambda | Builtin | object,
    args: list[LispValue],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """Apply either a Lambda or a Builtin.

    - For Lambda, defer to apply_lambda (partials, rest parameters).
    - For Builtins, invoke with the caller's env and list of args.
    - Otherwise, raise a type error.
    """
    if isinstance(head, Lambda):
        return apply_lambda(head, args, evaluate_fn)
    elif isinstance(head, Builtin):
        return head(env, args)
    else:
        raise BebopTypeError(f"{to_string(head, top_level=False)} is not a function")
