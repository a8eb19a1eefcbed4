from __future__ import annotations
import os
from pathlib import Path
from typing import Iterable, List, Optional


def _sep() -> str:
    return ';' if os.name == 'nt' else ':'


# Resolve installation dir (bebop package directory)
_BEBOP_DIR = Path(__file__).resolve().parent

# Defaults
_DEFAULT_PRELUDE_DIR = _BEBOP_DIR / 'prelude'
# Each Lisp call costs roughly a dozen and a half Python frames
_DEFAULT_RECURSION_LIMIT = 10000


def paths_from_env(var: str, defaults: Iterable[Path]) -> List[Path]:
    raw = os.environ.get(var)
    if not raw:
        return [Path(p) for p in defaults]
    sep = _sep()
    return [Path(p.strip()) for p in raw.split(sep) if p.strip()]


def get_prelude_root() -> Path:
    roots = paths_from_env('BEBOP_PRELUDE_PATH', [_DEFAULT_PRELUDE_DIR])
    # treat as single directory; if a file path is set, return its parent
    p = roots[0]
    return p if p.is_dir() else p.parent


def get_recursion_limit() -> int:
    raw = os.environ.get('BEBOP_RECURSION_LIMIT', '').strip()
    if not raw:
        return _DEFAULT_RECURSION_LIMIT
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"BEBOP_RECURSION_LIMIT must be an integer, got {raw!r}") from None


def get_log_level() -> Optional[str]:
    raw = os.environ.get('BEBOP_LOG_LEVEL', '').strip()
    return raw.upper() or None
