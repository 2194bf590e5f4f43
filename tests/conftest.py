from pathlib import Path

import pytest

from t9words.trie import Trie


@pytest.fixture
def small_trie() -> Trie:
    """Trie over a handful of words sharing keypad encodings."""
    return Trie(["cab", "cat", "act", "hello", "home", "good", "gone", "hood", "hoof", "a"])


@pytest.fixture
def wordlist_file(tmp_path: Path) -> Path:
    path = tmp_path / "words.txt"
    path.write_text("# test list\ncab\nCat\n\n  act  \nhello\n", encoding="utf-8")
    return path


@pytest.fixture
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run from an empty directory with no config override in the environment."""
    monkeypatch.delenv("T9WORDS_CONFIG", raising=False)
    monkeypatch.chdir(tmp_path)
    return tmp_path
