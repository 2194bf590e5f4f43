"""
t9words.engine
==============
Pure T9 decoding — no file access beyond loading the configured word lists.
Can be imported and used standalone for testing or embedding.
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Iterable, Iterator

from .keypad import letters_for
from .trie import Trie, TrieNode
from .wordlist import load_language, load_wordlist


# ─── Decoding ─────────────────────────────────────────────────────────────────

def iter_decode(trie: Trie, digits: str) -> Iterator[str]:
    """
    Yield every word in ``trie`` that types as ``digits``.

    Walks the digit string and the tree together: at each position only the
    letters of that key which continue an existing branch are followed, so
    dead prefixes are cut off immediately. Words come out in keypad order,
    depth first (for the standard keypad that is alphabetical).
    """
    if not isinstance(digits, str):
        raise TypeError(f"digits must be a str, not {type(digits).__name__}")
    if not digits:
        return

    end = len(digits)
    # Explicit stack instead of recursion; entries are (node, index, prefix).
    stack: list[tuple[TrieNode, int, str]] = [(trie.root, 0, "")]
    while stack:
        node, index, prefix = stack.pop()
        if index == end:
            if node.is_terminal:
                yield prefix
            continue
        # Reversed so the first letter of the key is popped first.
        for ch in reversed(letters_for(digits[index])):
            child = node.get_child(ch)
            if child is not None:
                stack.append((child, index + 1, prefix + ch))


def decode(trie: Trie, digits: str) -> list[str]:
    """
    Return all words in ``trie`` that type as ``digits``.

    Empty when nothing matches, when ``digits`` is empty, or when it holds a
    key with no letters (0, 1, or a non-digit). Never modifies ``trie``.
    """
    return list(iter_decode(trie, digits))


# ─── Engine ───────────────────────────────────────────────────────────────────

class T9Engine:
    """
    A trie built from the configured word lists, plus decoding against it.

    Usage::

        engine = T9Engine(config)
        engine.decode("4663")            # ['gone', 'good', 'home', 'hood', ...]
        engine.decode_many(["2", "43556"])

    The engine holds no per-query state; once constructed it can be used
    from several threads at once.
    """

    def __init__(self, config: dict, words: Iterable[str] | None = None) -> None:
        self.config = config
        self.verbose: bool = config.get("verbose", True)
        if words is None:
            words = self._load_words()
        self.trie = Trie(words)
        if self.verbose:
            print(f"[T9] Dictionary ready: {len(self.trie):,} unique words", file=sys.stderr)

    # ── Loading ───────────────────────────────────────────────────────────────

    def _load_words(self) -> list[str]:
        wordlist = self.config.get("wordlist")
        if wordlist:
            return load_wordlist(Path(wordlist), verbose=self.verbose)

        wordlist_dir = self.config.get("wordlist_dir", "wordlists")
        words: list[str] = []
        for lang in self.config.get("languages", ["en"]):
            words.extend(load_language(lang, wordlist_dir, verbose=self.verbose))
        return words

    # ── Queries ───────────────────────────────────────────────────────────────

    def decode(self, digits: str) -> list[str]:
        return decode(self.trie, digits)

    def decode_many(self, sequences: Iterable[str]) -> list[list[str]]:
        """One result list per sequence, in input order."""
        return [decode(self.trie, seq) for seq in sequences]

    @property
    def word_count(self) -> int:
        return len(self.trie)
