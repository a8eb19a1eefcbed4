# Core type aliases for Bebop's data model.
# Numbers and strings are plain Python int/float/str values; symbols, the two
# list kinds and functions are small classes under bebop.types.
#
# Naming guidance:
# - Expression: Use in reader/parser code to denote syntactic forms (code-as-data).
# - LispValue:  Use in evaluator/runtime code to denote evaluated values.
# Both aliases resolve to `Any`; a form read by the parser is also a value.

from typing import Any, Callable

# Runtime value alias
LispValue = Any
# Forms produced by the reader
Expression = LispValue

# Evaluator function type: Python evaluator used inside special forms/builtins
EvaluatorFn = Callable[..., LispValue]
