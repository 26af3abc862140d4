# focusindex/engine.py
from __future__ import annotations

import re
import logging
from typing import Dict, Iterable, List, Optional

from . import config as CFG
from .models import PickItem
from .disambiguate import disambiguate
from .normalize import find_match, normalize_only

log = logging.getLogger(__name__)

_DIGIT = re.compile(r"[0-9]")


class SelectionError(LookupError):
    """A selected value does not resolve to any open item. Recoverable; show ``message`` to the user."""

    def __init__(self, value: str, message: str = CFG.SELECTION_ERROR_MESSAGE) -> None:
        super().__init__(message)
        self.value = value
        self.message = message


class Picker:
    """
    Thin orchestration layer between the open items and a front end:
      - disambiguate(): shortest unique suffix per open path,
      - PickItem rows numbered in tab order,
      - filtering, digit jumps and label -> path resolution.

    Public API (used by CLI/Flask/desktop):
      * open(paths):     replace the open items and rebuild the rows
      * items():         all rows in tab order
      * filter(query):   rows whose "{index}: {label}" text contains the query
      * jump(value):     direct jump for a single digit while fewer than 10 items are open
      * resolve(text):   row text or bare label -> full path (SelectionError otherwise)
      * accept(value):   keystroke/typed value -> full path
      * close():         forget the open items
    """

    # ------------- lifecycle -------------

    def __init__(self) -> None:
        self._items: Optional[List[PickItem]] = None
        self._by_text: Dict[str, PickItem] = {}
        self._by_label: Dict[str, PickItem] = {}

    # /* ~~~ Compute labels for the open paths and number them ~~~ */
    def open(self, paths: Iterable[str], *, verbose: bool = False) -> List[PickItem]:
        if verbose:
            logging.basicConfig(level=logging.INFO)

        # a tab opened twice keeps the label it would have on its own
        paths = list(dict.fromkeys(paths))
        labels = disambiguate(paths)  # ValueError on malformed paths
        items = [PickItem(index=i, label=label, path=path)
                 for i, (path, label) in enumerate(labels.items(), start=1)]

        self._items = items
        self._by_text = {it.text: it for it in items}
        self._by_label = {}
        for it in items:
            self._by_label.setdefault(it.label, it)
        log.info("Picker open: items=%d", len(items))
        return list(items)

    def close(self) -> None:
        self._items = None
        self._by_text = {}
        self._by_label = {}
        log.info("Picker closed")

    # ------------- query -------------

    def items(self) -> List[PickItem]:
        return list(self._require())

    def count(self) -> int:
        return len(self._require())

    def filter(self, query: str) -> List[PickItem]:
        items = self._require()
        if not normalize_only(query):
            return list(items)
        return [it for it in items if find_match(it.text, query) is not None]

    def is_jump_key(self, value: str) -> bool:
        """A single digit typed while fewer than DIGIT_JUMP_LIMIT items are open."""
        return len(self._require()) < CFG.DIGIT_JUMP_LIMIT and _DIGIT.fullmatch(value) is not None

    def jump(self, value: str) -> Optional[PickItem]:
        """Item for a single typed digit, or None when the value is not a usable jump."""
        items = self._require()
        if not self.is_jump_key(value):
            return None
        index = int(value)
        if not 1 <= index <= len(items):
            return None
        return items[index - 1]

    def resolve(self, text: str) -> str:
        """Full path for an exact row text ("2: b/index.ts") or an exact label ("b/index.ts")."""
        item = self._lookup(text)
        if item is None:
            log.warning("Selection %r does not resolve to an open item", text)
            raise SelectionError(text)
        return item.path

    # /* ~~~ Keystroke handler: digit jump, exact text, or the single remaining match ~~~ */
    def accept(self, value: str) -> str:
        if self.is_jump_key(value):
            item = self.jump(value)
            if item is None:
                # out-of-range digit: no jump and no filtering
                log.warning("Digit %r is out of range", value)
                raise SelectionError(value)
        else:
            item = self._lookup(value)
        if item is None:
            matches = self.filter(value)
            if len(matches) != 1:
                log.warning("Selection %r matched %d items", value, len(matches))
                raise SelectionError(value)
            item = matches[0]
        log.info("Accepted %s -> %s", item.text, item.path)
        return item.path

    # ------------- internals -------------

    def _require(self) -> List[PickItem]:
        if self._items is None:
            raise RuntimeError("Picker not initialized. Call open() first.")
        return self._items

    def _lookup(self, text: str) -> Optional[PickItem]:
        self._require()
        text = text.strip()
        return self._by_text.get(text) or self._by_label.get(text)
