import pytest

from wordgrid.trie import Status, Trie, TrieFrozenError


def _make_trie(words: list[str]) -> Trie:
    trie = Trie()
    for w in words:
        trie.insert(w)
    return trie


def test_inserted_words_classify_as_word():
    words = ["cat", "cats", "cab", "dog"]
    trie = _make_trie(words)
    for w in words:
        assert trie.classify(w) is Status.WORD


def test_strict_prefixes_are_possible():
    trie = _make_trie(["cats", "dogma"])
    for prefix in ["c", "ca", "cat", "d", "do", "dog", "dogm"]:
        assert trie.classify(prefix) is Status.POSSIBLE, prefix


def test_word_wins_over_possible():
    """A word that is also a prefix of a longer word is still a word."""
    trie = _make_trie(["cat", "cats"])
    assert trie.classify("cat") is Status.WORD


def test_unknown_sequences_are_impossible():
    trie = _make_trie(["cat", "cats"])
    assert trie.classify("x") is Status.IMPOSSIBLE
    assert trie.classify("cb") is Status.IMPOSSIBLE
    assert trie.classify("catsx") is Status.IMPOSSIBLE
    assert trie.classify("dogs") is Status.IMPOSSIBLE


def test_empty_sequence():
    assert _make_trie(["cat"]).classify("") is Status.POSSIBLE
    assert Trie().classify("") is Status.IMPOSSIBLE


def test_empty_word_is_ignored():
    trie = _make_trie(["", "cat"])
    assert len(trie) == 1
    assert trie.classify("") is Status.POSSIBLE


def test_insert_is_idempotent():
    trie = _make_trie(["cat", "cats"])
    before = {s: trie.classify(s) for s in ["c", "ca", "cat", "cats", "catsx", "dog"]}
    trie.insert("cat")
    trie.insert("cats")
    after = {s: trie.classify(s) for s in before}
    assert before == after
    assert len(trie) == 2
    assert len(trie.root.children) == 1


def test_shared_prefixes_share_nodes():
    trie = _make_trie(["cat", "cab", "car"])
    a = trie.root.children["c"].children["a"]
    assert a.letter == "a"
    assert set(a.children) == {"t", "b", "r"}
    assert trie.root.letter is None


def test_contains():
    trie = _make_trie(["cat", "cats"])
    assert "cat" in trie
    assert "ca" not in trie
    assert "dog" not in trie


def test_frozen_trie_rejects_inserts():
    trie = _make_trie(["cat"]).freeze()
    assert trie.frozen
    with pytest.raises(TrieFrozenError):
        trie.insert("dog")
    assert trie.classify("dog") is Status.IMPOSSIBLE
