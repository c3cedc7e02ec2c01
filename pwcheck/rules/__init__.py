"""Password rule engine."""

from pwcheck.rules.engine import RULE_ORDER, RuleSetEvaluator, evaluate_password
from pwcheck.rules.similarity import Match, best_match, similarity
from pwcheck.rules.wordlist import WordlistSource, embedded_wordlist, resolve_wordlist

__all__ = [
    "RULE_ORDER",
    "Match",
    "RuleSetEvaluator",
    "WordlistSource",
    "best_match",
    "embedded_wordlist",
    "evaluate_password",
    "resolve_wordlist",
    "similarity",
]
