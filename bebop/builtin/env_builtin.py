"""Built-in functions for the Bebop runtime environment.

This module defines core arithmetic, comparison, logic, list and string
processing, equality, forced evaluation, and registration utilities exposed
to Lisp code. Every builtin receives the caller's environment and the list
of already evaluated arguments.
"""
from __future__ import annotations

import math
import time
from typing import Callable

from bebop import LispValue
from bebop.errors import (
    BebopArityError,
    BebopDivisionByZero,
    BebopEmptyList,
    BebopInterrupt,
    BebopTypeError,
)
from bebop.evaluation.evaluator import evaluate
from bebop.printer import to_string
from bebop.types.builtin import Builtin
from bebop.types.environment import Environment
from bebop.types.expressions import SExpr, QExpr, is_number, promote
from bebop.types.symbol import Symbol

TRUE = 1
FALSE = 0


def _truth(flag: bool) -> int:
    return TRUE if flag else FALSE


def _expect_arity(name: str, args: list[LispValue], count: int) -> None:
    if len(args) != count:
        raise BebopArityError(
            f"Function {name} needed {count} arg(s) but was given {len(args)}"
        )


def _expect_at_least(name: str, args: list[LispValue], count: int) -> None:
    if len(args) < count:
        raise BebopArityError(
            f"Function {name} needed at least {count} arg(s) but was given {len(args)}"
        )


def _numbers(name: str, args: list[LispValue]) -> list[int | float]:
    for a in args:
        if not is_number(a):
            raise BebopTypeError(
                f"Function {name} can operate only on numbers, got {to_string(a, top_level=False)}"
            )
    return list(args)


def _qexpr(name: str, arg: LispValue) -> QExpr:
    if not isinstance(arg, QExpr):
        raise BebopTypeError(
            f"Function {name} needed a Q-expression but was given {to_string(arg, top_level=False)}"
        )
    return arg


# -------------------------------
# Arithmetic
# -------------------------------
def add(env: Environment, expr: list[LispValue]) -> LispValue:
    """Return the numeric sum of all arguments."""
    _expect_at_least("+", expr, 1)
    return sum(_numbers("+", expr))


def sub(env: Environment, expr: list[LispValue]) -> LispValue:
    """Subtract all subsequent numbers from the first; unary negation for one arg."""
    _expect_at_least("-", expr, 1)
    first, *rest = _numbers("-", expr)
    if not rest:
        return -first
    for x in rest:
        first -= x
    return first


def mul(env: Environment, expr: list[LispValue]) -> LispValue:
    """Return the product of all arguments."""
    _expect_at_least("*", expr, 1)
    first, *rest = _numbers("*", expr)
    for x in rest:
        first *= x
    return first


def div(env: Environment, expr: list[LispValue]) -> LispValue:
    """(/ n d); exact integer quotients stay integers."""
    _expect_arity("/", expr, 2)
    n, d = _numbers("/", expr)
    if d == 0:
        raise BebopDivisionByZero(f"You cannot divide {to_string(n)}, or any number, by 0")
    if isinstance(n, int) and isinstance(d, int) and n % d == 0:
        return n // d
    return n / d


def mod(env: Environment, expr: list[LispValue]) -> LispValue:
    """(% n d) => remainder truncated toward zero; its sign follows n."""
    _expect_arity("%", expr, 2)
    n, d = _numbers("%", expr)
    if d == 0:
        raise BebopDivisionByZero(f"You cannot take {to_string(n)} modulo 0")
    if isinstance(n, int) and isinstance(d, int):
        r = abs(n) % abs(d)
        return -r if n < 0 else r
    return math.fmod(n, d)


# -------------------------------
# Comparison and logic
# -------------------------------
def _ordering(name: str, test: Callable[[int | float, int | float], bool]):
    def compare(env: Environment, expr: list[LispValue]) -> int:
        _expect_arity(name, expr, 2)
        a, b = _numbers(name, expr)
        return _truth(test(a, b))

    compare.__name__ = f"compare_{name}"
    compare.__doc__ = f"({name} a b) on numbers; 1 or 0."
    return compare


lt = _ordering("<", lambda a, b: a < b)
gt = _ordering(">", lambda a, b: a > b)
lte = _ordering("<=", lambda a, b: a <= b)
gte = _ordering(">=", lambda a, b: a >= b)
logical_and = _ordering("&&", lambda a, b: a != 0 and b != 0)
logical_or = _ordering("||", lambda a, b: a != 0 or b != 0)


def logical_not(env: Environment, expr: list[LispValue]) -> int:
    """(! n) => 1 when n is 0, else 0."""
    _expect_arity("!", expr, 1)
    (n,) = _numbers("!", expr)
    return _truth(n == 0)


def is_equal(a: LispValue, b: LispValue) -> bool:
    """Deep equality for Lisp values, with element-wise comparison for lists."""
    if is_number(a) and is_number(b):
        return a == b
    if isinstance(a, (SExpr, QExpr)) or isinstance(b, (SExpr, QExpr)):
        if type(a) is not type(b) or len(a) != len(b):
            return False
        return all(is_equal(x, y) for x, y in zip(a, b))
    if isinstance(a, (str, Symbol)) and type(a) is type(b):
        return a == b
    # Functions compare by identity
    return a is b


def equals(env: Environment, expr: list[LispValue]) -> int:
    """(== a b) => 1 if structurally equal, else 0."""
    _expect_arity("==", expr, 2)
    return _truth(is_equal(*expr))


def not_equals(env: Environment, expr: list[LispValue]) -> int:
    """Logical negation of equals."""
    _expect_arity("!=", expr, 2)
    return _truth(not is_equal(*expr))


# -------------------------------
# Lists and strings
# -------------------------------
def list_builtin(env: Environment, expr: list[LispValue]) -> QExpr:
    """Collect the arguments into a new Q-expression."""
    return QExpr(expr)


def head(env: Environment, expr: list[LispValue]) -> QExpr:
    """First element, still wrapped in a one-element Q-expression."""
    _expect_arity("head", expr, 1)
    xs = _qexpr("head", expr[0])
    if not xs:
        raise BebopEmptyList("Function head was given an empty list")
    return xs[:1]


def tail(env: Environment, expr: list[LispValue]) -> QExpr:
    """All but the first element."""
    _expect_arity("tail", expr, 1)
    xs = _qexpr("tail", expr[0])
    if not xs:
        raise BebopEmptyList("Function tail was given an empty list")
    return xs[1:]


def _concatenate(name: str, expr: list[LispValue]) -> LispValue:
    """Join Q-expressions into one Q-expression, or strings into one string."""
    if all(isinstance(item, QExpr) for item in expr):
        return QExpr(x for item in expr for x in item)
    if all(isinstance(item, str) for item in expr):
        return "".join(expr)
    raise BebopTypeError(
        f"Function {name} needed all Q-expressions or all strings but was given "
        + " ".join(to_string(item, top_level=False) for item in expr)
    )


def join(env: Environment, expr: list[LispValue]) -> LispValue:
    """(join a b ...) for two or more lists (or strings)."""
    _expect_at_least("join", expr, 2)
    return _concatenate("join", expr)


def concat(env: Environment, expr: list[LispValue]) -> LispValue:
    """(concat s ...) for one or more strings (or lists)."""
    _expect_at_least("concat", expr, 1)
    return _concatenate("concat", expr)


# -------------------------------
# Evaluation and utilities
# -------------------------------
def eval_builtin(env: Environment, expr: list[LispValue]) -> LispValue:
    """Evaluate a Q-expression as code in the caller's environment."""
    _expect_arity("eval", expr, 1)
    arg = expr[0]
    if isinstance(arg, QExpr):
        return evaluate(promote(arg), env)
    return evaluate(arg, env)


def echo(env: Environment, expr: list[LispValue]) -> str:
    """Printed representation of a value, as a string."""
    _expect_arity("echo", expr, 1)
    return to_string(expr[0], top_level=False)


def rand(env: Environment, expr: list[LispValue]) -> int:
    """Sub-second nanoseconds of the wall clock."""
    _expect_arity("rand", expr, 0)
    return time.time_ns() % 1_000_000_000


def die(env: Environment, expr: list[LispValue]) -> LispValue:
    """Abort evaluation with a user supplied message."""
    _expect_arity("die", expr, 1)
    message = expr[0]
    if not isinstance(message, str):
        raise BebopTypeError(
            f"Function die needed a string but was given {to_string(message, top_level=False)}"
        )
    raise BebopInterrupt(message)


BUILTINS: dict[str, Callable[[Environment, list[LispValue]], LispValue]] = {
    "+": add,
    "-": sub,
    "*": mul,
    "/": div,
    "%": mod,
    "<": lt,
    ">": gt,
    "<=": lte,
    ">=": gte,
    "&&": logical_and,
    "||": logical_or,
    "!": logical_not,
    "==": equals,
    "!=": not_equals,
    "list": list_builtin,
    "head": head,
    "tail": tail,
    "join": join,
    "concat": concat,
    "eval": eval_builtin,
    "echo": echo,
    "rand": rand,
    "die": die,
}


def register(env: Environment) -> None:
    """Register all builtin functions into the given environment."""
    env.update({Symbol(name): Builtin(name, fn) for name, fn in BUILTINS.items()})
