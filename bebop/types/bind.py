from __future__ import annotations

from bebop import LispValue
from bebop.errors import BebopArityError, BebopTypeError
from bebop.types.environment import Environment
from bebop.types.expressions import QExpr
from bebop.types.symbol import Symbol, REST_MARKER


def split_formals(formals: tuple[Symbol, ...]) -> tuple[tuple[Symbol, ...], Symbol | None]:
    """
    Split a formal parameter list into its positional names and the optional
    rest name that follows the ':' marker.

    Raises BebopTypeError for a malformed list (':' not followed by exactly
    one symbol, or a non-symbol formal).
    """
    for f in formals:
        if not isinstance(f, Symbol):
            raise BebopTypeError(f"Formal parameters must be symbols, got {f!r}")
    if REST_MARKER not in formals:
        return tuple(formals), None
    i = formals.index(REST_MARKER)
    trailing = formals[i + 1:]
    if len(trailing) != 1 or trailing[0] == REST_MARKER:
        raise BebopTypeError("':' must be followed by exactly one formal parameter")
    return tuple(formals[:i]), trailing[0]


def bind_arguments(
    formals: tuple[Symbol, ...],
    supplied_args: list[LispValue],
    closure_env: Environment,
) -> Environment:
    """
    Single source of truth for lambda-list binding in Bebop.

    Supports:
    - Positional required parameters, consumed in order
    - ':' name capturing the remaining supplied args as a QExpr (possibly empty)

    Returns a new Environment whose outer is the closure_env, populated with
    the bindings for evaluating the callee body.
    """
    positional, rest = split_formals(formals)
    supplied = list(supplied_args)

    if len(supplied) < len(positional):
        raise BebopArityError(
            f"Function needed {len(positional)} arg(s) but was given {len(supplied)}"
        )
    if rest is None and len(supplied) > len(positional):
        raise BebopArityError(
            f"Function needed {len(positional)} arg(s) but was given {len(supplied)}"
        )

    local_env = Environment(outer=closure_env)
    for name, value in zip(positional, supplied):
        local_env.define(name, value)
    if rest is not None:
        local_env.define(rest, QExpr(supplied[len(positional):]))
    return local_env
