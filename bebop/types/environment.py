"""Runtime environment for Bebop.

The Environment stores bindings of Symbols to evaluated Lisp values and supports
nested scopes via an `outer` link. A frame's parent is fixed at construction,
so frames form a DAG rooted at the interpreter's root environment.
"""

from __future__ import annotations

from io import StringIO
from typing import Iterator, Optional

from bebop import LispValue
from bebop.errors import BebopTypeError, BebopUnboundSymbol
from bebop.types.symbol import Symbol


class Environment:
    """Hierarchical mapping from Symbols to Lisp values."""

    __slots__ = ("vars", "outer")

    def __init__(self, outer: Optional[Environment] = None):
        self.vars: dict[Symbol, LispValue] = {}
        self.outer: Environment | None = outer

    def define(self, name: Symbol, value: LispValue) -> None:
        """Bind `name` to `value` in this frame.

        Raises BebopTypeError if `name` is not a Symbol.
        """
        if not isinstance(name, Symbol):
            raise BebopTypeError(f"Cannot define {name!r} as a symbol")
        self.vars[name] = value

    def define_global(self, name: Symbol, value: LispValue) -> None:
        """Bind `name` in the root frame of this chain."""
        self.root().define(name, value)

    def root(self) -> Environment:
        env = self
        while env.outer is not None:
            env = env.outer
        return env

    def frames(self) -> Iterator[Environment]:
        """Iterate from this frame outward to the root."""
        env: Optional[Environment] = self
        while env is not None:
            yield env
            env = env.outer

    def find(self, symbol: Symbol) -> Optional[Environment]:
        """Find the nearest environment in the chain that contains `symbol`."""
        for env in self.frames():
            if symbol in env.vars:
                return env
        return None

    def lookup(self, name: Symbol) -> LispValue:
        """Look up the value bound to `name`, innermost frame first.

        Raises BebopUnboundSymbol if no frame binds the name.
        """
        env = self.find(name)
        if env is None:
            raise BebopUnboundSymbol(f"Symbol '{name}' has not been defined")
        return env.vars[name]

    def __contains__(self, name: Symbol) -> bool:
        return self.find(name) is not None

    def update(self, mapping: dict[Symbol, LispValue]) -> None:
        """Bulk-define a mapping of Symbol -> value in the current frame."""
        for k, v in mapping.items():
            self.define(k, v)

    def _write_vars(self, buffer: StringIO) -> None:
        """Write this frame's variables into the buffer in a compact form."""
        buffer.write("{")
        buffer.write(", ".join(f"{k}: {v!r}" for k, v in self.vars.items()))
        buffer.write("}")

    def __str__(self) -> str:
        """Human-readable single-frame view with an indicator for parent."""
        with StringIO() as buffer:
            self._write_vars(buffer)
            if self.outer is not None:
                buffer.write(" -> ...")
            return buffer.getvalue()

    def __repr__(self) -> str:
        """Frame sizes along the chain; the root frame is usually large."""
        sizes = " -> ".join(str(len(env.vars)) for env in self.frames())
        return f"<Environment chain: {sizes}>"
