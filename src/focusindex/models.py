# src/focusindex/models.py
"""
Data models for the focus-by-index picker.

- Chunk: one candidate suffix and the open paths currently sharing it.
- PickItem: one numbered row of the picker, as shown to the user.

These classes carry no business logic; grouping, expansion and selection
live in disambiguate.py and engine.py.
"""

from dataclasses import dataclass
from typing import Tuple

from . import config as CFG


@dataclass(frozen=True, slots=True)
class Chunk:
    """
    A group of full paths that share the same trailing segments.

    Attributes
    ----------
    suffix : str
        The candidate label: the last ``depth`` segments joined with "/".
    depth : int
        Number of trailing segments in ``suffix``.
    members : Tuple[str, ...]
        Full paths mapped to ``suffix``, in input order.
    """
    suffix: str
    depth: int
    members: Tuple[str, ...]

    @property
    def overlap(self) -> int:
        """How many input paths currently share this suffix."""
        return len(self.members)


@dataclass(frozen=True, slots=True)
class PickItem:
    """
    One selectable row.

    Attributes
    ----------
    index : int
        1-based position in tab order. Typing it as a single digit jumps here.
    label : str
        Shortest unique suffix of ``path``.
    path : str
        The full path of the open item.
    """
    index: int
    label: str
    path: str

    @property
    def text(self) -> str:
        return f"{self.index}{CFG.INDEX_SEPARATOR}{self.label}"

    def to_dict(self) -> dict:
        return {"index": self.index, "label": self.label, "path": self.path, "text": self.text}
