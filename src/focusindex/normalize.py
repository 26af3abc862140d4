from __future__ import annotations
import unicodedata
from typing import List, Optional, Tuple

def _fold(ch: str) -> str:
    """Casefold and drop combining marks, so 'É' and 'e' compare equal."""
    decomposed = unicodedata.normalize("NFKD", ch)
    return "".join(c for c in decomposed if not unicodedata.combining(c)).casefold()

def normalize_and_map(text: str) -> tuple[str, List[int]]:
    """
    Normalize text for filtering and return:
      - normalized string (casefolded, accents stripped, whitespace runs collapsed, trimmed)
      - mapping list: normalized index -> original index
    Separators and punctuation are kept: "/" and "." are part of what users type.
    """
    out_chars: list[str] = []
    mapping: List[int] = []
    pending_space: int | None = None

    for orig_i, ch in enumerate(text):
        if ch.isspace():
            if pending_space is None:
                pending_space = orig_i
            continue
        if pending_space is not None and out_chars:
            out_chars.append(' ')
            mapping.append(pending_space)
        pending_space = None
        for folded in _fold(ch):
            out_chars.append(folded)
            mapping.append(orig_i)

    return ''.join(out_chars), mapping

def normalize_only(text: str) -> str:
    """Convenience: normalize and return only the normalized string."""
    return normalize_and_map(text)[0]

def find_match(text: str, query: str) -> Optional[Tuple[int, int]]:
    """
    Locate the normalized query inside text.
    Returns the (start, end) span in the ORIGINAL text, or None when it does not occur.
    An empty query matches the empty span at 0.
    """
    q = normalize_only(query)
    if not q:
        return (0, 0)
    norm, mapping = normalize_and_map(text)
    i = norm.find(q)
    if i < 0:
        return None
    return mapping[i], mapping[i + len(q) - 1] + 1
