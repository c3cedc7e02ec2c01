"""Error taxonomy for pwcheck."""

from __future__ import annotations

from pathlib import Path


class PwcheckError(Exception):
    """Base class for all pwcheck errors."""


class ConfigError(PwcheckError):
    """Invalid configuration. Raised before any rule is evaluated."""


class WordlistIoError(PwcheckError):
    """An external wordlist could not be read."""

    def __init__(self, path: Path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to read wordlist '{path}': {reason}")
