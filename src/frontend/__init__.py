"""Public API for the picker front ends (web UI and desktop app)."""
from __future__ import annotations
import time
import logging
from typing import Iterable, List
from focusindex.engine import Picker
from focusindex.models import PickItem

log = logging.getLogger(__name__)

_picker: Picker | None = None

def initialize(paths: Iterable[str], verbose: bool = False) -> List[PickItem]:
    """Replace the open items. Raises ValueError for malformed paths."""
    global _picker
    t0 = time.perf_counter()
    picker = Picker()
    items = picker.open(paths, verbose=verbose)
    if _picker is not None:
        _picker.close()
    _picker = picker
    if verbose:
        print(f"[ready] {len(items)} items in {time.perf_counter() - t0:.3f}s")
    return items

def current() -> Picker:
    if _picker is None:
        raise RuntimeError("Picker not initialized. Call initialize(...) first.")
    return _picker

def items(query: str = "") -> List[PickItem]:
    """Rows matching query (all rows when it is empty)."""
    return current().filter(query)

def select(value: str) -> str:
    """Full path for a keystroke, row text or label. Raises SelectionError."""
    return current().accept(value)

def shutdown() -> None:
    global _picker
    if _picker is not None:
        _picker.close()
    _picker = None
