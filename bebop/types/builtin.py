from __future__ import annotations

from typing import Callable

from bebop import LispValue
from bebop.types.environment import Environment

NativeFn = Callable[[Environment, list[LispValue]], LispValue]


class Builtin:
    """A primitive implemented in Python, identified by name.

    The native callable receives the caller's environment and the list of
    already evaluated arguments.
    """

    __slots__ = ("name", "fn")

    def __init__(self, name: str, fn: NativeFn):
        self.name = name
        self.fn = fn

    def __call__(self, env: Environment, args: list[LispValue]) -> LispValue:
        return self.fn(env, args)

    def __repr__(self) -> str:
        return f"<builtin {self.name}>"

    __str__ = __repr__
