"""String similarity scoring for wordlist collision checks."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from rapidfuzz.distance import Levenshtein


@dataclass(frozen=True, slots=True)
class Match:
    """Closest wordlist entry and its similarity score in [0, 1]."""

    entry: str
    score: float

    @property
    def percent(self) -> float:
        return self.score * 100.0


def similarity(a: str, b: str) -> float:
    """Normalized Levenshtein similarity, 1.0 for identical strings.

    Computed as ``1 - distance / max(len(a), len(b))``; two empty strings are
    identical. No case or Unicode normalization is applied.
    """
    return Levenshtein.normalized_similarity(a, b)


def best_match(candidate: str, corpus: Iterable[str]) -> Match | None:
    """Scan the whole corpus and return the most similar entry.

    Only a strictly higher score replaces the current best, so the first
    occurrence wins on ties. Returns None for an empty corpus.
    """
    best: Match | None = None
    for entry in corpus:
        score = similarity(candidate, entry)
        if best is None or score > best.score:
            best = Match(entry=entry, score=score)
    return best
