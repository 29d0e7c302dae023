from __future__ import annotations
import logging
from pathlib import Path
from typing import Protocol

from rtlisp.config import PRELUDE_FILES, get_prelude_root

logger = logging.getLogger(__name__)


class _HasEvalPrelude(Protocol):
    def eval_prelude(self, code: str) -> None: ...


def prelude_paths(root: Path | None = None) -> list[Path]:
    """Library files under `root` (default: the configured prelude dir), in load order."""
    root = root if root is not None else get_prelude_root()
    return [root / name for name in PRELUDE_FILES]


def load_prelude(itp: _HasEvalPrelude, root: Path | None = None) -> None:
    """Evaluate every library file into `itp`.

    Raises FileNotFoundError if the prelude directory holds none of them.
    """
    paths = [p for p in prelude_paths(root) if p.is_file()]
    if not paths:
        raise FileNotFoundError(f"No prelude files found under {root or get_prelude_root()}")
    for path in paths:
        logger.debug("loading prelude file %s", path)
        itp.eval_prelude(path.read_text(encoding='utf-8'))
