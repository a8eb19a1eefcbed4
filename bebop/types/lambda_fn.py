"""Lambda function representation for Bebop."""

from __future__ import annotations

from io import StringIO

from bebop import LispValue
from bebop.types.environment import Environment
from bebop.types.expressions import QExpr
from bebop.types.symbol import Symbol
from bebop.types.bind import bind_arguments, split_formals


class Lambda:
    """A first-class lambda with formal parameters, body, and closure env."""

    __slots__ = ("formals", "body", "env")

    def __init__(
        self, formals: tuple[Symbol, ...], body: QExpr, env: Environment | None = None
    ):
        self.formals: tuple[Symbol, ...] = tuple(formals)
        self.body: QExpr = body
        # Avoid shared default Environment across instances
        self.env: Environment = env if env is not None else Environment()

    @property
    def positional(self) -> tuple[Symbol, ...]:
        return split_formals(self.formals)[0]

    @property
    def rest(self) -> Symbol | None:
        return split_formals(self.formals)[1]

    def __str__(self) -> str:
        from bebop.printer import to_string
        with StringIO() as buffer:
            buffer.write("(\\ [")
            buffer.write(" ".join(str(f) for f in self.formals))
            buffer.write("] ")
            buffer.write(to_string(self.body, top_level=False))
            buffer.write(")")
            return buffer.getvalue()

    def __repr__(self) -> str:
        """Return the Lisp-style representation of the lambda."""
        return str(self)

    # --- Evaluation helpers ---
    def extend_env(self, args: list[LispValue]) -> Environment:
        """
        Bind the given argument values to this lambda's formal parameters and
        return a new Environment for evaluating the body.

        Delegates to the shared binder in bebop.types.bind.
        """
        return bind_arguments(self.formals, list(args), self.env)
