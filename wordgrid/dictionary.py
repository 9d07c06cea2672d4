from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from wordgrid.trie import Trie

logger = logging.getLogger("wordgrid")

BOM = "\ufeff"


def normalize_word(text: str) -> str:
    """Lowercase a dictionary entry and drop any leading byte-order marks."""
    return text.strip().lower().lstrip(BOM)


def build_trie(words: Iterable[str], min_length: int = 1) -> Trie:
    """Insert every usable word and return the trie frozen."""
    trie = Trie()
    for raw in words:
        word = normalize_word(raw)
        if word and len(word) >= min_length:
            trie.insert(word)
    return trie.freeze()


def _read_lines(path: Path) -> Iterable[str]:
    with open(path, "rb") as f:
        for lineno, raw in enumerate(f, start=1):
            try:
                yield raw.decode("utf-8")
            except UnicodeDecodeError:
                logger.debug("Skipping unreadable line %d in %s", lineno, path)


def load_trie(path: str | Path, min_length: int = 1) -> Trie:
    """Load a one-word-per-line file into a frozen trie."""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Dictionary not found at {path}")
    trie = build_trie(_read_lines(path), min_length)
    logger.info("Loaded %d words from %s", len(trie), path)
    return trie
