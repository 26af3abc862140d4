from __future__ import annotations

import logging
from typing import Dict, Iterable, Iterator, List, Tuple

from . import config as CFG
from .models import Chunk

log = logging.getLogger(__name__)

# suffix -> Chunk; one complete round of grouping
Generation = Dict[str, Chunk]


def split_path(path: str) -> List[str]:
    """Split a full path into segments. A path must end in a non-empty file name."""
    if not path:
        raise ValueError("empty path")
    parts = path.split(CFG.PATH_SEPARATOR)
    if not parts[-1]:
        raise ValueError(f"path has no file name: {path!r}")
    return parts


def path_depth(path: str) -> int:
    """Number of segments, e.g. path_depth('I/am/a/file.ts') == 4."""
    return len(split_path(path))


def suffix_of(path: str, depth: int) -> str:
    """The last ``depth`` segments of ``path``, capped at the full path."""
    parts = split_path(path)
    depth = max(1, min(depth, len(parts)))
    return CFG.PATH_SEPARATOR.join(parts[-depth:])


def _group(keyed: Iterable[Tuple[str, int, str]]) -> Generation:
    """Collect (suffix, depth, path) triples into chunks, first-seen order."""
    members: Dict[str, List[str]] = {}
    depths: Dict[str, int] = {}
    for suffix, depth, path in keyed:
        members.setdefault(suffix, []).append(path)
        depths.setdefault(suffix, depth)
    return {s: Chunk(suffix=s, depth=depths[s], members=tuple(m)) for s, m in members.items()}


def initial_generation(paths: Iterable[str]) -> Generation:
    """Group paths by bare file name. No guarantee of overlap == 1."""
    return _group((suffix_of(p, 1), 1, p) for p in paths)


def max_overlap(generation: Generation) -> int:
    return max((c.overlap for c in generation.values()), default=0)


def generation_size(generation: Generation) -> int:
    """Sum of overlaps; equals the number of input paths for every round."""
    return sum(c.overlap for c in generation.values())


def expand_generation(generation: Generation) -> Generation:
    """
    Build the next round from ``generation`` without touching it.

    Colliding chunks (overlap > 1) re-key every member one segment deeper.
    Chunks with overlap == 1 are frozen and carried forward as they are.
    A member already at full depth keeps its full path as its suffix.
    """
    def rekeyed() -> Iterator[Tuple[str, int, str]]:
        for chunk in generation.values():
            if chunk.overlap == 1:
                yield chunk.suffix, chunk.depth, chunk.members[0]
                continue
            for path in chunk.members:
                parts = split_path(path)
                depth = min(chunk.depth + 1, len(parts))
                yield CFG.PATH_SEPARATOR.join(parts[-depth:]), depth, path

    return _group(rekeyed())


def disambiguate(paths: Iterable[str]) -> Dict[str, str]:
    """
    Map every full path to its shortest unique trailing-segment suffix.

    Starts from bare file names and only walks up the tree for paths that
    still collide, so the work is O(max depth * N) instead of pairwise
    O(N^2). Paths that are identical even at full depth (duplicates, or a
    bare file name clashing with itself) keep their full path as label.

    Raises ValueError for an empty path or one ending in the separator.
    The result preserves input order; duplicate paths collapse to one key.
    """
    paths = list(paths)
    if not paths:
        return {}
    limit = max(path_depth(p) for p in paths)

    generation = initial_generation(paths)
    rounds = 1
    # after limit - 1 expansions every colliding path sits at full depth
    while max_overlap(generation) > 1 and rounds < limit:
        nxt = expand_generation(generation)
        rounds += 1
        if nxt == generation:
            break  # only full-depth ties left
        generation = nxt
        log.debug("round %d: chunks=%d max_overlap=%d", rounds, len(generation), max_overlap(generation))

    labels: Dict[str, str] = {}
    for chunk in generation.values():
        for path in chunk.members:
            labels[path] = chunk.suffix
    return {p: labels[p] for p in paths}
