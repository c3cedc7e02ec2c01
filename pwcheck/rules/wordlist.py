"""Wordlist sources for collision checks."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from functools import cache
from importlib import resources
from pathlib import Path
from typing import Literal, TypeAlias

from loguru import logger

from pwcheck.errors import WordlistIoError

WordlistKind: TypeAlias = Literal["embedded", "external"]

_EMBEDDED_PACKAGE = "pwcheck.data"
_EMBEDDED_NAME = "wordlist.txt"


def split_lines(text: str) -> tuple[str, ...]:
    """Split text on ``\\n``, dropping one trailing ``\\r`` per line.

    A final newline does not produce an empty trailing entry. Lines are
    otherwise kept verbatim, including empty interior lines.
    """
    if not text:
        return ()
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return tuple(line[:-1] if line.endswith("\r") else line for line in lines)


@dataclass(frozen=True, slots=True)
class WordlistSource:
    """Ordered, read-only sequence of known weak passwords."""

    kind: WordlistKind
    entries: tuple[str, ...]
    path: Path | None = None

    @classmethod
    def from_text(cls, text: str, path: Path | None = None) -> WordlistSource:
        return cls(kind="external", entries=split_lines(text), path=path)

    @property
    def label(self) -> str:
        if self.path is not None:
            return str(self.path)
        return self.kind

    def __iter__(self) -> Iterator[str]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)


@cache
def embedded_wordlist() -> WordlistSource:
    """Default most-common-passwords list shipped with the package."""
    text = resources.files(_EMBEDDED_PACKAGE).joinpath(_EMBEDDED_NAME).read_text(encoding="utf-8")
    source = WordlistSource(kind="embedded", entries=split_lines(text))
    logger.debug("Loaded embedded wordlist with {} entries", len(source))
    return source


def resolve_wordlist(path: Path | None = None) -> WordlistSource:
    """Return the external wordlist at ``path`` or the embedded default.

    Raises:
        WordlistIoError: If ``path`` is given and cannot be read as UTF-8 text.
    """
    if path is None:
        return embedded_wordlist()

    resolved = path.expanduser()
    try:
        text = resolved.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        reason = e.strerror if isinstance(e, OSError) and e.strerror else str(e)
        raise WordlistIoError(resolved, reason) from e

    source = WordlistSource.from_text(text, path=resolved)
    logger.debug("Loaded external wordlist {} with {} entries", resolved, len(source))
    return source
