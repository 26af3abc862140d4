# src/e2e/test_disambiguate_generations.py

import pytest

from focusindex.disambiguate import (
    expand_generation,
    generation_size,
    initial_generation,
    max_overlap,
    path_depth,
    split_path,
    suffix_of,
)


PATHS = [
    "src/a/index.ts",
    "lib/a/index.ts",
    "b/index.ts",
    "index.ts",
    "README.md",
]


def test_split_and_depth():
    assert split_path("I/am/a/file.ts") == ["I", "am", "a", "file.ts"]
    assert path_depth("I/am/a/file.ts") == 4
    assert path_depth("file.ts") == 1


def test_suffix_is_capped_at_full_path():
    assert suffix_of("a/b/c.ts", 1) == "c.ts"
    assert suffix_of("a/b/c.ts", 2) == "b/c.ts"
    assert suffix_of("a/b/c.ts", 9) == "a/b/c.ts"


def test_initial_generation_groups_by_file_name():
    gen = initial_generation(PATHS)
    assert set(gen) == {"index.ts", "README.md"}
    assert gen["index.ts"].overlap == 4
    assert gen["index.ts"].members == ("src/a/index.ts", "lib/a/index.ts", "b/index.ts", "index.ts")
    assert gen["index.ts"].depth == 1
    assert max_overlap(gen) == 4


def test_every_round_accounts_for_every_path():
    gen = initial_generation(PATHS)
    for _ in range(4):
        assert generation_size(gen) == len(PATHS)
        gen = expand_generation(gen)
    assert generation_size(gen) == len(PATHS)
    assert max_overlap(gen) == 1


def test_expansion_builds_a_new_generation():
    gen = initial_generation(PATHS)
    snapshot = dict(gen)
    nxt = expand_generation(gen)
    assert gen == snapshot
    assert nxt is not gen
    assert set(nxt) == {"a/index.ts", "b/index.ts", "index.ts", "README.md"}
    assert nxt["a/index.ts"].depth == 2
    assert nxt["a/index.ts"].overlap == 2


def test_frozen_chunks_are_carried_forward_unchanged():
    gen = initial_generation(PATHS)
    nxt = expand_generation(gen)
    assert nxt["README.md"] == gen["README.md"]
    after = expand_generation(nxt)
    assert after["b/index.ts"] == nxt["b/index.ts"]
    assert after["index.ts"] == nxt["index.ts"]


def test_full_depth_paths_stop_being_rekeyed():
    gen = initial_generation(["x.ts", "x.ts"])
    assert expand_generation(gen) == gen


def test_max_overlap_of_empty_generation():
    assert max_overlap({}) == 0
