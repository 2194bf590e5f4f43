"""
t9words
=======
Every dictionary word a T9 keypad digit sequence could spell.

Public API
----------
    from t9words import Trie, decode, T9Engine, load_config

    trie = Trie(["cab", "cat", "act"])
    decode(trie, "228")              # ['act', 'cat']

    engine = T9Engine(load_config())
    engine.decode("4663")            # ['gone', 'good', 'home', ...]
"""

__version__ = "1.0.0"

from .keypad import KEYPAD, letters_for, word_to_digits
from .trie import Trie, TrieNode
from .engine import T9Engine, decode, iter_decode
from .config import load_config

__all__ = [
    "KEYPAD",
    "T9Engine",
    "Trie",
    "TrieNode",
    "decode",
    "iter_decode",
    "letters_for",
    "load_config",
    "word_to_digits",
]
