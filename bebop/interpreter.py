from __future__ import annotations

import logging
import sys
from typing import Iterable, Iterator, Literal

from bebop import Expression, LispValue
from bebop.builtin.env_builtin import register
from bebop.config import get_log_level, get_recursion_limit
from bebop.errors import BebopError, BebopRecursionError
from bebop.evaluation.evaluator import evaluate
from bebop.printer import render
from bebop.reader.parser import parse
from bebop.types.environment import Environment
from bebop.types.expressions import NIL

logger = logging.getLogger(__name__)


def _apply_runtime_config() -> None:
    limit = get_recursion_limit()
    # Only ever raised: other code in the process may depend on the current limit
    if limit > sys.getrecursionlimit():
        logger.debug("raising recursion limit to %d", limit)
        sys.setrecursionlimit(limit)
    level = get_log_level()
    if level:
        logging.getLogger("bebop").setLevel(level)


class Interpreter:
    """
    Owns the root Environment shared by the prelude and every document.

    Bootstrap: register the primitive library into a fresh root environment,
    then evaluate the prelude in it. Prelude definitions stay visible for the
    lifetime of the interpreter.
    """

    def __init__(self, prelude: str | None | Literal['auto'] = 'auto'):
        _apply_runtime_config()
        self.env: Environment = Environment()
        register(self.env)
        logger.debug("registered %d builtins", len(self.env.vars))

        if prelude is None:
            pass  # explicit: no prelude
        elif prelude == 'auto':
            # Lazy import to avoid circular imports
            from bebop.modules.prelude_loader import load_prelude
            load_prelude(self)
        elif prelude:
            self.eval_prelude(prelude)

    def eval_prelude(self, code: str) -> None:
        for _ in self.eval_forms(parse(code)):
            pass

    def eval_forms(self, exprs: Iterable[Expression]) -> Iterator[LispValue]:
        """Evaluate already parsed top-level forms in order, one value per form.

        An error aborts the failing form and stops the iteration; values
        already yielded and bindings made by earlier forms are unaffected.
        """
        for index, expr in enumerate(exprs):
            try:
                value = evaluate(expr, self.env)
            except RecursionError:
                logger.error("top-level form %d exhausted the call stack", index)
                raise BebopRecursionError(
                    f"Maximum recursion depth exceeded while evaluating top-level form {index}"
                ) from None
            except BebopError as err:
                logger.error("top-level form %d failed: %s", index, err)
                raise
            yield value

    def eval(self, code: str) -> LispValue:
        results: list[LispValue] = list(self.eval_forms(parse(code)))
        if not results:
            return NIL
        if len(results) == 1:
            return results[0]
        return results

    def render(self, code: str) -> str:
        """Evaluate a document and concatenate the printed top-level results."""
        return render(self.eval_forms(parse(code)))
