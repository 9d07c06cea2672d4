"""Shared fixtures for the word grid tests."""

from __future__ import annotations

import pytest

from wordgrid.dictionary import build_trie
from wordgrid.trie import Trie

BOARD = [
    ["c", "a", "t", "s"],
    ["r", "e", "p", "o"],
    ["b", "o", "n", "e"],
    ["d", "i", "g", "s"],
]

BOARD_WORDS = [
    "cat", "cats", "car", "care", "bone", "bones", "rep", "pen", "pone",
    "dig", "digs", "one", "ones", "ape", "nod", "nog", "son", "repo",
    "open", "nope", "peon", "sing", "sign",
]


@pytest.fixture
def board() -> list[list[str]]:
    return [row[:] for row in BOARD]


@pytest.fixture
def board_trie() -> Trie:
    return build_trie(BOARD_WORDS)


@pytest.fixture
def example_grid() -> list[str]:
    return ["cats", "btaa", "xxxx", "xxxx"]


@pytest.fixture
def example_trie() -> Trie:
    return build_trie(["cat", "cats", "at", "cab"])


@pytest.fixture
def wordlist_file(tmp_path):
    path = tmp_path / "wordlist.txt"
    path.write_text("\n".join(["cat", "cats", "at", "cab"]) + "\n", encoding="utf-8")
    return path
