"""
t9words.trie
============
Plain prefix tree over characters.

Built once from a word list and only read afterwards, so a finished
:class:`Trie` can be shared between threads without locking.
"""

from __future__ import annotations

from typing import Iterable, Iterator


class TrieNode:
    """
    One character step in the tree.

    ``char`` is the letter that leads here from the parent (``""`` for the
    root). ``is_terminal`` is set when a complete word ends at this node.
    """

    __slots__ = ("char", "is_terminal", "children")

    def __init__(self, char: str = "") -> None:
        self.char = char
        self.is_terminal: bool = False
        self.children: dict[str, TrieNode] = {}

    def get_child(self, ch: str) -> TrieNode | None:
        return self.children.get(ch)

    def __repr__(self) -> str:
        return (
            f"TrieNode(char={self.char!r}, is_terminal={self.is_terminal}, "
            f"children={len(self.children)})"
        )


class Trie:
    """
    Prefix tree holding exactly the words it was given.

    Usage::

        trie = Trie(["cab", "cat", "act"])
        trie.contains("ca")              # True  (prefix)
        trie.contains("ca", exact=True)  # False (not a word)
        "cat" in trie                    # True
    """

    def __init__(self, words: Iterable[str | None] = ()) -> None:
        self._root = TrieNode()
        self._size = 0
        for word in words:
            # Blank entries are skipped, never stored as the empty word.
            if word:
                self.insert(word)

    # ── Building ──────────────────────────────────────────────────────────────

    def insert(self, word: str | None) -> None:
        """Add ``word``. Inserting a word that is already present is a no-op."""
        if word is None:
            return
        node = self._root
        for ch in word:
            child = node.children.get(ch)
            if child is None:
                child = TrieNode(ch)
                node.children[ch] = child
            node = child
        if not node.is_terminal:
            node.is_terminal = True
            self._size += 1

    # ── Queries ───────────────────────────────────────────────────────────────

    def contains(self, prefix: str, exact: bool = False) -> bool:
        """
        Walk ``prefix`` down from the root.

        With ``exact=False`` any complete walk counts (``prefix`` starts at
        least one word). With ``exact=True`` the walk must also end on a
        terminal node, i.e. ``prefix`` is itself a word.
        """
        node = self._walk(prefix)
        if node is None:
            return False
        return not exact or node.is_terminal

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.contains(word, exact=True)

    def __len__(self) -> int:
        return self._size

    @property
    def root(self) -> TrieNode:
        """Root node, for callers that traverse the tree themselves."""
        return self._root

    def get_root(self) -> TrieNode:
        return self._root

    def words(self) -> Iterator[str]:
        """Yield every stored word, depth-first."""
        stack: list[tuple[TrieNode, str]] = [(self._root, "")]
        while stack:
            node, prefix = stack.pop()
            if node.is_terminal:
                yield prefix
            for ch in reversed(list(node.children)):
                stack.append((node.children[ch], prefix + ch))

    def _walk(self, s: str) -> TrieNode | None:
        node = self._root
        for ch in s:
            node = node.children.get(ch)
            if node is None:
                return None
        return node
