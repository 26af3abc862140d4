from __future__ import annotations
import logging
import os
import sys
from typing import Iterable, Iterator, List, TextIO

from . import config as CFG

log = logging.getLogger(__name__)

# Progress logging (set FOCUSINDEX_VERBOSE=1 or pass verbose=True to enable)
def _verbose() -> bool:
    return os.environ.get(CFG.VERBOSE_ENV) == "1"

def read_paths(stream: Iterable[str]) -> Iterator[str]:
    """
    Yield open-item paths from a path list, one per line, in order.
    Blank lines and lines starting with '#' are skipped. Surrounding whitespace is trimmed;
    the path itself is not normalized.
    """
    for raw in stream:
        line = raw.strip()
        if not line or line.startswith(CFG.COMMENT_PREFIX):
            continue
        yield line

def _open_source(src: str) -> TextIO:
    if src == "-":
        return sys.stdin
    return open(src, "r", encoding="utf-8")

def load_paths(sources: Iterable[str], extra: Iterable[str] = (), verbose: bool = False) -> List[str]:
    """
    Read path lists from files ('-' for stdin) followed by any extra paths given directly.
    Repeated paths are dropped (first occurrence wins) since the picker needs distinct items.
    """
    seen: set[str] = set()
    out: List[str] = []

    def _add(p: str, origin: str) -> None:
        if p in seen:
            log.debug("skipping repeated path %r from %s", p, origin)
            return
        seen.add(p)
        out.append(p)

    for src in sources:
        f = _open_source(src)
        try:
            for p in read_paths(f):
                _add(p, src)
        finally:
            if f is not sys.stdin:
                f.close()
    for p in read_paths(extra):
        _add(p, "argv")

    if verbose or _verbose():
        print(f"[loaded] paths={len(out):,}")
    return out
