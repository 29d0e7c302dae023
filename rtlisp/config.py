from __future__ import annotations
import os
from pathlib import Path


# Resolve installation dir (rtlisp package directory)
_RTLISP_DIR = Path(__file__).resolve().parent

# Defaults
_DEFAULT_PRELUDE_DIR = _RTLISP_DIR / 'prelude'
_DEFAULT_RECURSION_LIMIT = 10_000
_DEFAULT_LOG_LEVEL = 'WARNING'

# Library files, loaded in this order
PRELUDE_FILES = ('arithmetic.rtl', 'recursive.rtl', 'church.rtl')


def get_prelude_root() -> Path:
    raw = os.environ.get('RTLISP_PRELUDE_PATH')
    if not raw:
        return _DEFAULT_PRELUDE_DIR
    p = Path(raw.strip())
    # treat as single directory; if a file path is set, return its parent
    return p if p.is_dir() else p.parent


def get_recursion_limit() -> int:
    raw = os.environ.get('RTLISP_RECURSION_LIMIT')
    if not raw:
        return _DEFAULT_RECURSION_LIMIT
    try:
        limit = int(raw)
    except ValueError:
        raise ValueError(f"RTLISP_RECURSION_LIMIT must be an integer, got {raw!r}")
    return max(limit, 1_000)


def get_log_level() -> str:
    return os.environ.get('RTLISP_LOG_LEVEL', _DEFAULT_LOG_LEVEL).upper()
