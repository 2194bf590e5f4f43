"""
t9words.wordlist
================
Reading, cleaning and importing plain-text word lists.

A word list is UTF-8 text with one word per line. Blank lines and lines
starting with ``#`` are ignored.
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Iterable

from .keypad import is_mappable


# ─── Loading ──────────────────────────────────────────────────────────────────

def load_wordlist(path: str | Path, verbose: bool = True) -> list[str]:
    """
    Load ``path`` and return a list of lowercase words.

    Raises :class:`FileNotFoundError` when the file does not exist, and lets
    other :class:`OSError` and :class:`UnicodeDecodeError` failures through;
    callers decide whether that is fatal.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Word list not found: {path}")
    words: list[str] = []
    with open(path, "r", encoding="utf-8") as f:
        for line in f:
            word = line.strip().lower()
            if word and not word.startswith("#"):
                words.append(word)
    if verbose:
        print(f"[T9] Loaded {len(words):,} words  [{path.name}]", file=sys.stderr)
    return words


def load_language(lang_code: str, wordlist_dir: str | Path, verbose: bool = True) -> list[str]:
    """Load ``<wordlist_dir>/<lang_code>.txt``."""
    return load_wordlist(Path(wordlist_dir) / f"{lang_code}.txt", verbose=verbose)


def available_languages(wordlist_dir: str | Path) -> list[tuple[str, int]]:
    """``(lang_code, word_count)`` for every ``*.txt`` in ``wordlist_dir``, sorted."""
    wdir = Path(wordlist_dir)
    if not wdir.is_dir():
        return []
    result: list[tuple[str, int]] = []
    for f in sorted(wdir.glob("*.txt")):
        count = 0
        for ln in f.read_text(encoding="utf-8").splitlines():
            w = ln.strip()
            if w and not w.startswith("#"):
                count += 1
        result.append((f.stem, count))
    return result


# ─── Importing ────────────────────────────────────────────────────────────────

def clean_words(lines: Iterable[str]) -> tuple[list[str], int]:
    """
    Normalise raw lines into keypad-typeable words.

    Returns ``(words, skipped)``: the unique lowercase words in first-seen
    order, and how many entries were dropped for unmappable characters.
    """
    seen: set[str] = set()
    words: list[str] = []
    skipped = 0
    for line in lines:
        w = line.strip().lower()
        if not w or w.startswith("#"):
            continue
        if not is_mappable(w):
            skipped += 1
            continue
        if w not in seen:
            seen.add(w)
            words.append(w)
    return words, skipped


def import_wordlist(
    lang: str,
    source: str | Path,
    wordlist_dir: str | Path,
    append: bool = False,
    verbose: bool = True,
) -> tuple[Path, int, int]:
    """
    Clean ``source`` and write it as ``<wordlist_dir>/<lang>.txt``.

    With ``append`` the words already in the destination are kept. Returns
    ``(dest_path, total_words, added_words)``.
    """
    source_path = Path(source).resolve()
    if not source_path.exists():
        raise FileNotFoundError(f"Source file not found: {source_path}")

    wdir = Path(wordlist_dir)
    wdir.mkdir(parents=True, exist_ok=True)
    dest_path = wdir / f"{lang}.txt"

    with open(source_path, "r", encoding="utf-8") as f:
        new_words, skipped = clean_words(f)
    if verbose:
        if skipped:
            print(f"[T9] Skipped {skipped} word(s) with unmappable characters.", file=sys.stderr)
        print(f"[T9] Mappable words found: {len(new_words):,}", file=sys.stderr)

    existing: set[str] = set()
    if append and dest_path.exists():
        existing.update(load_wordlist(dest_path, verbose=verbose))

    combined = sorted(existing | set(new_words))
    added = len(combined) - len(existing)

    header = (
        f"# {lang} word list for t9words\n"
        f"# Words: {len(combined):,}\n"
        f"# One word per line. Lines starting with # are ignored.\n\n"
    )
    with open(dest_path, "w", encoding="utf-8") as f:
        f.write(header)
        for word in combined:
            f.write(word + "\n")

    return dest_path, len(combined), added
