"""List-shaped values: S-expressions (code) and Q-expressions (data).

Both are immutable, tuple-backed sequences. They differ only in how the
evaluator treats them: an SExpr is reduced by application, a QExpr evaluates
to itself. An SExpr never compares equal to a QExpr holding the same items.
"""

from __future__ import annotations

from typing import Iterable

from bebop import LispValue


class _Expr(tuple):
    __slots__ = ()

    open_bracket = ""
    close_bracket = ""

    def __new__(cls, items: Iterable[LispValue] = ()):
        return super().__new__(cls, items)

    def __eq__(self, other: object) -> bool:
        return type(self) is type(other) and tuple.__eq__(self, other)

    def __ne__(self, other: object) -> bool:
        return not self == other

    __hash__ = tuple.__hash__

    def __add__(self, other):
        return type(self)(tuple.__add__(self, tuple(other)))

    def __getitem__(self, index):
        item = tuple.__getitem__(self, index)
        if isinstance(index, slice):
            return type(self)(item)
        return item

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def __str__(self) -> str:
        from bebop.printer import to_string
        return to_string(self)


class SExpr(_Expr):
    """Parenthesised form; evaluated by special-form dispatch or application."""

    __slots__ = ()
    open_bracket = "("
    close_bracket = ")"


class QExpr(_Expr):
    """Bracketed form; literal list data, also formals and lambda bodies."""

    __slots__ = ()
    open_bracket = "["
    close_bracket = "]"


# The empty Q-expression doubles as the language's nil / "no value" marker.
NIL = QExpr()


def is_number(value: LispValue) -> bool:
    """True for int/float values; bools are not Numbers in Bebop."""
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def promote(qexpr: QExpr) -> SExpr:
    """Re-interpret quoted data as code."""
    return SExpr(qexpr)
