"""String conversion of Bebop values.

The document renderer concatenates `to_string` of every top-level result, so
the rules here decide what ends up in the output document:

- strings render raw at top level and double-quoted inside lists
- integral numbers render without a fractional part (7.0 -> "7")
- the empty Q-expression (nil, returned by def) renders as nothing at top level
"""

from __future__ import annotations

import math
from typing import Iterable

from bebop import LispValue
from bebop.types.expressions import SExpr, QExpr, is_number
from bebop.types.symbol import Symbol


def format_number(n: int | float) -> str:
    if isinstance(n, float) and math.isfinite(n) and n.is_integer():
        return str(int(n))
    return repr(n)


def to_string(value: LispValue, top_level: bool = True) -> str:
    """Convert a value to its printed form."""
    if isinstance(value, str):
        return value if top_level else f'"{value}"'
    if is_number(value):
        return format_number(value)
    if isinstance(value, Symbol):
        return value.id
    if isinstance(value, (SExpr, QExpr)):
        if top_level and isinstance(value, QExpr) and not value:
            return ""
        inner = " ".join(to_string(item, top_level=False) for item in value)
        return f"{value.open_bracket}{inner}{value.close_bracket}"
    # Builtin and Lambda carry their own representations
    return str(value)


def render(values: Iterable[LispValue]) -> str:
    """Concatenate the printed form of each top-level result."""
    return "".join(to_string(v) for v in values)
