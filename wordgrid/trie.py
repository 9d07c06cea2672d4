from __future__ import annotations

from enum import Enum


class Status(str, Enum):
    """How a letter sequence relates to the dictionary."""

    WORD = "WORD"
    POSSIBLE = "POSSIBLE"
    IMPOSSIBLE = "IMPOSSIBLE"


class TrieFrozenError(RuntimeError):
    """Raised when a trie is mutated after construction, or read concurrently before it."""


class TrieNode:
    __slots__ = ("letter", "terminal", "children")

    def __init__(self, letter: str | None = None):
        self.letter: str | None = letter
        self.terminal: bool = False
        self.children: dict[str, TrieNode] = {}


class Trie:
    """Prefix tree over a word list.

    Build it with :meth:`insert`, then call :meth:`freeze` before handing it to
    searches. A frozen trie is never mutated again and can be shared by any
    number of concurrent searches.
    """

    def __init__(self):
        self.root = TrieNode()
        self._word_count = 0
        self._frozen = False

    def insert(self, word: str):
        if self._frozen:
            raise TrieFrozenError("cannot insert into a frozen trie")
        if not word:
            return
        node = self.root
        for ch in word:
            if ch not in node.children:
                node.children[ch] = TrieNode(ch)
            node = node.children[ch]
        if not node.terminal:
            node.terminal = True
            self._word_count += 1

    def classify(self, sequence: str) -> Status:
        node = self.root
        for ch in sequence:
            node = node.children.get(ch)
            if node is None:
                return Status.IMPOSSIBLE
        if node.terminal:
            return Status.WORD
        if node.children:
            return Status.POSSIBLE
        return Status.IMPOSSIBLE

    def freeze(self) -> Trie:
        self._frozen = True
        return self

    @property
    def frozen(self) -> bool:
        return self._frozen

    def __len__(self) -> int:
        return self._word_count

    def __contains__(self, word: str) -> bool:
        return self.classify(word) is Status.WORD
