"""
t9words.keypad
==============
The telephone keypad: which letters live under which digit.
Static, read-only, shared by everything that needs it.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

# ─── Keypad table ─────────────────────────────────────────────────────────────

# 0 and 1 carry no letters. Letter order per key is the order the decoder
# tries them in, and therefore the order results come out in.
KEYPAD: Mapping[str, str] = MappingProxyType({
    "0": "",
    "1": "",
    "2": "abc",
    "3": "def",
    "4": "ghi",
    "5": "jkl",
    "6": "mno",
    "7": "pqrs",
    "8": "tuv",
    "9": "wxyz",
})


def _build_char_to_digit() -> dict[str, str]:
    mapping: dict[str, str] = {}
    for digit, chars in KEYPAD.items():
        for ch in chars:
            mapping[ch] = digit
    return mapping


CHAR_TO_DIGIT: Mapping[str, str] = MappingProxyType(_build_char_to_digit())


# ─── Lookups ──────────────────────────────────────────────────────────────────

def letters_for(digit: str) -> str:
    """Letters under ``digit``; ``""`` for 0, 1 and anything that isn't a key."""
    return KEYPAD.get(digit, "")


def word_to_digits(word: str) -> str:
    """Convert a word to its T9 digit string. Returns ``""`` if unmappable."""
    result: list[str] = []
    for ch in word.lower():
        digit = CHAR_TO_DIGIT.get(ch)
        if digit is None:
            return ""
        result.append(digit)
    return "".join(result)


def is_mappable(word: str) -> bool:
    return all(ch in CHAR_TO_DIGIT for ch in word.lower())
