from pathlib import Path

import pytest

from pwcheck.errors import WordlistIoError
from pwcheck.rules.wordlist import WordlistSource, embedded_wordlist, resolve_wordlist, split_lines


def test_split_lines_strips_carriage_returns() -> None:
    assert split_lines("password\r\nqwerty\r\n") == ("password", "qwerty")


def test_split_lines_keeps_interior_empty_lines_and_spaces() -> None:
    assert split_lines("a\n\n b \nc") == ("a", "", " b ", "c")


def test_split_lines_empty_text() -> None:
    assert split_lines("") == ()


def test_from_text_is_external() -> None:
    source = WordlistSource.from_text("one\ntwo\n")
    assert source.kind == "external"
    assert list(source) == ["one", "two"]
    assert len(source) == 2


def test_resolve_without_path_returns_embedded() -> None:
    source = resolve_wordlist(None)
    assert source.kind == "embedded"
    assert source is embedded_wordlist()


def test_embedded_wordlist_contents() -> None:
    source = embedded_wordlist()
    assert len(source) > 100
    assert source.entries[0] == "123456"
    assert "password" in source.entries
    assert "qwerty" in source.entries
    assert all("\r" not in entry and "\n" not in entry for entry in source)


def test_resolve_external_file(tmp_path: Path) -> None:
    path = tmp_path / "words.txt"
    path.write_text("letmein\r\ntrustno1\n", encoding="utf-8")
    source = resolve_wordlist(path)
    assert source.kind == "external"
    assert source.path == path
    assert source.entries == ("letmein", "trustno1")
    assert source.label == str(path)


def test_resolve_missing_file_raises(tmp_path: Path) -> None:
    path = tmp_path / "missing.txt"
    with pytest.raises(WordlistIoError) as excinfo:
        resolve_wordlist(path)
    assert excinfo.value.path == path
    assert str(path) in str(excinfo.value)


def test_resolve_non_utf8_file_raises(tmp_path: Path) -> None:
    path = tmp_path / "latin1.txt"
    path.write_bytes(b"caf\xe9\n")
    with pytest.raises(WordlistIoError):
        resolve_wordlist(path)


def test_resolve_directory_raises(tmp_path: Path) -> None:
    with pytest.raises(WordlistIoError):
        resolve_wordlist(tmp_path)
