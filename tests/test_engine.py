from pathlib import Path

import hypothesis.strategies as st
import pytest
from hypothesis import given

from t9words.engine import T9Engine, decode, iter_decode
from t9words.keypad import word_to_digits
from t9words.trie import Trie

LETTERS = "abcdefghijklmnopqrstuvwxyz"
DICTIONARIES = st.lists(st.text(alphabet=LETTERS, min_size=1, max_size=6), max_size=40)


def test_words_sharing_a_sequence(small_trie: Trie) -> None:
    assert decode(small_trie, "228") == ["act", "cat"]
    assert decode(small_trie, "222") == ["cab"]


def test_single_word() -> None:
    assert decode(Trie(["hello"]), "43556") == ["hello"]


def test_keypad_order(small_trie: Trie) -> None:
    assert decode(small_trie, "4663") == ["gone", "good", "home", "hood", "hoof"]


def test_empty_dictionary() -> None:
    assert decode(Trie([]), "43556") == []


def test_empty_digits() -> None:
    assert decode(Trie(["a"]), "") == []


def test_empty_digits_with_empty_word() -> None:
    trie = Trie()
    trie.insert("")
    assert decode(trie, "") == []


def test_prefix_is_not_a_match(small_trie: Trie) -> None:
    assert decode(small_trie, "22") == []
    assert decode(small_trie, "2") == ["a"]


@pytest.mark.parametrize("digits", ["0", "1", "2208", "1228", "22*8", "22a8", "228 "])
def test_keys_without_letters_yield_nothing(small_trie: Trie, digits: str) -> None:
    assert decode(small_trie, digits) == []


def test_none_is_a_caller_error(small_trie: Trie) -> None:
    with pytest.raises(TypeError):
        decode(small_trie, None)  # type: ignore[arg-type]


def test_iter_decode_is_lazy(small_trie: Trie) -> None:
    it = iter_decode(small_trie, "228")
    assert next(it) == "act"
    assert list(it) == ["cat"]


def test_decode_does_not_mutate_trie(small_trie: Trie) -> None:
    before = sorted(small_trie.words())
    decode(small_trie, "4663")
    decode(small_trie, "0000")
    assert sorted(small_trie.words()) == before


def test_long_sequence_does_not_recurse() -> None:
    word = "ab" * 1500
    assert decode(Trie([word]), word_to_digits(word)) == [word]


@given(words=DICTIONARIES, digits=st.text(alphabet="0123456789", max_size=6))
def test_results_encode_to_digits(words: list[str], digits: str) -> None:
    for word in decode(Trie(words), digits):
        assert len(word) == len(digits)
        assert word_to_digits(word) == digits


@given(words=DICTIONARIES.filter(bool), data=st.data())
def test_every_matching_word_appears_once(words: list[str], data: st.DataObject) -> None:
    digits = word_to_digits(data.draw(st.sampled_from(words)))
    result = decode(Trie(words), digits)
    expected = {w for w in words if word_to_digits(w) == digits}
    assert len(result) == len(set(result))
    assert set(result) == expected


@given(words=DICTIONARIES)
def test_results_come_out_sorted(words: list[str]) -> None:
    trie = Trie(words)
    for digits in {word_to_digits(w) for w in words}:
        result = decode(trie, digits)
        assert result == sorted(result)


# ─── T9Engine ────────────────────────────────────────────────────────────────

def test_engine_from_word_list(wordlist_file: Path) -> None:
    engine = T9Engine({"wordlist": str(wordlist_file), "verbose": False})
    assert engine.word_count == 4
    assert engine.decode("228") == ["act", "cat"]
    assert engine.decode_many(["43556", "0", "228"]) == [["hello"], [], ["act", "cat"]]


def test_engine_from_languages(tmp_path: Path) -> None:
    (tmp_path / "xx.txt").write_text("cab\ncat\n", encoding="utf-8")
    (tmp_path / "yy.txt").write_text("cat\nact\n", encoding="utf-8")
    engine = T9Engine({"languages": ["xx", "yy"], "wordlist_dir": str(tmp_path), "verbose": False})
    assert engine.word_count == 3
    assert engine.decode("228") == ["act", "cat"]


def test_engine_with_explicit_words() -> None:
    engine = T9Engine({"verbose": False}, words=["home", "gone"])
    assert engine.decode("4663") == ["gone", "home"]


def test_engine_missing_word_list(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        T9Engine({"wordlist": str(tmp_path / "missing.txt"), "verbose": False})


def test_engine_status_lines(wordlist_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
    T9Engine({"wordlist": str(wordlist_file)})
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "[T9] Loaded 4 words" in captured.err
    assert "[T9] Dictionary ready: 4 unique words" in captured.err
