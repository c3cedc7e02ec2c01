"""Password strength rules."""

from __future__ import annotations

import string
from collections.abc import Callable
from typing import TypeAlias

from pwcheck.config.schema import RulesConfig
from pwcheck.core.models import Fail, Pass, RuleId, RuleOutcome
from pwcheck.errors import WordlistIoError
from pwcheck.rules.similarity import best_match
from pwcheck.rules.wordlist import WordlistSource

_ASCII_DIGITS = frozenset(string.digits)
_ASCII_PUNCTUATION = frozenset(string.punctuation)

WordlistLoader: TypeAlias = Callable[[], WordlistSource]


def rule_name(rule_id: RuleId, config: RulesConfig) -> str:
    """Display name for one rule."""
    match rule_id:
        case RuleId.MINIMUM_CHARS:
            return f"At least {config.min_length} characters"
        case RuleId.NUMBERS:
            return "numbers"
        case RuleId.SPECIAL_CHARS:
            return "quirky characters"
        case RuleId.WORDLIST_COLLISIONS:
            return "collisions in wordlist"


def check_min_length(password: str, min_length: int) -> RuleOutcome:
    # Code points, not bytes or grapheme clusters.
    length = len(password)
    if length >= min_length:
        return Pass()
    return Fail(detail=f"Password too short: {length}/{min_length} characters")


def check_numbers(password: str) -> RuleOutcome:
    if any(ch in _ASCII_DIGITS for ch in password):
        return Pass()
    return Fail(detail="No numeric characters in password")


def check_special_chars(password: str) -> RuleOutcome:
    if any(ch in _ASCII_PUNCTUATION for ch in password):
        return Pass()
    return Fail(detail="No special characters in password")


def check_wordlist_collisions(password: str, wordlist: WordlistSource, threshold: float) -> RuleOutcome:
    """Fail when the closest wordlist entry is at least ``threshold`` similar.

    An empty wordlist fails: no collision check actually took place.
    """
    closest = best_match(password, wordlist)
    if closest is None:
        return Fail(detail="Wordlist is empty, no collision check was possible")
    detail = f"Best match in wordlist is {closest.entry} with similarity {closest.percent:g}%"
    if closest.score >= threshold:
        return Fail(detail=detail)
    return Pass(detail=detail)


def evaluate(
    rule_id: RuleId,
    password: str,
    config: RulesConfig,
    load_wordlist: WordlistLoader,
) -> RuleOutcome:
    """Run one rule against ``password``.

    ``load_wordlist`` is only called by the collision rule. A wordlist that
    cannot be read fails that rule instead of propagating.
    """
    match rule_id:
        case RuleId.MINIMUM_CHARS:
            return check_min_length(password, config.min_length)
        case RuleId.NUMBERS:
            return check_numbers(password)
        case RuleId.SPECIAL_CHARS:
            return check_special_chars(password)
        case RuleId.WORDLIST_COLLISIONS:
            try:
                wordlist = load_wordlist()
            except WordlistIoError as e:
                return Fail(detail=str(e))
            return check_wordlist_collisions(password, wordlist, config.effective_threshold)
