from __future__ import annotations
import logging
from typing import Protocol

from bebop.config import get_prelude_root

logger = logging.getLogger(__name__)

# Evaluated in order: the core library first, then the document helpers
# that build on it.
PRELUDE_FILES = ('core.lisp', 'html.lisp')


class _HasEvalPrelude(Protocol):
    def eval_prelude(self, code: str) -> None: ...


def load_prelude(itp: _HasEvalPrelude) -> None:
    """Evaluate std/core.lisp then std/html.lisp from the prelude root.

    Raises FileNotFoundError when std/core.lisp is missing; html.lisp is optional.
    """
    std = get_prelude_root() / 'std'
    core = std / PRELUDE_FILES[0]
    if not core.exists():
        raise FileNotFoundError(f"Cannot find prelude file {core}")

    for name in PRELUDE_FILES:
        path = std / name
        if not path.exists():
            logger.debug("prelude file %s not present, skipping", path)
            continue
        logger.debug("loading prelude %s", path)
        itp.eval_prelude(path.read_text(encoding='utf-8'))
