"""Centralized defaults for rule configuration."""

from __future__ import annotations

from typing import Any

DEFAULT_MIN_LENGTH = 8
DEFAULT_SIMILARITY_THRESHOLD = 97
# Configured thresholds above this are clamped.
MAX_SIMILARITY_THRESHOLD = 99

DEFAULT_RULES: dict[str, Any] = {
    "min_length": DEFAULT_MIN_LENGTH,
    "similarity_threshold": DEFAULT_SIMILARITY_THRESHOLD,
    "ignored_rules": [],
    "wordlist_path": None,
}
