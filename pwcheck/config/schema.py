"""Configuration schema using Pydantic."""

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_settings import BaseSettings

from pwcheck.config.defaults import DEFAULT_RULES, MAX_SIMILARITY_THRESHOLD
from pwcheck.core.models import RuleId


class RulesConfig(BaseModel):
    """Rule options. Read-only for the duration of an evaluation."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    min_length: int = Field(default=int(DEFAULT_RULES["min_length"]), ge=1, le=255)
    similarity_threshold: int = Field(default=int(DEFAULT_RULES["similarity_threshold"]), ge=0, le=100)
    ignored_rules: frozenset[RuleId] = Field(default_factory=frozenset)
    wordlist_path: Path | None = None

    @field_validator("ignored_rules", mode="before")
    @classmethod
    def _normalize_ignored(cls, value: object) -> object:
        if value is None:
            return frozenset()
        if isinstance(value, str):
            return frozenset(part.strip() for part in value.split(",") if part.strip())
        return value

    @field_validator("wordlist_path", mode="before")
    @classmethod
    def _empty_path_is_none(cls, value: object) -> object:
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @property
    def effective_threshold(self) -> float:
        """Similarity ratio at or above which a wordlist match is a collision."""
        return min(self.similarity_threshold, MAX_SIMILARITY_THRESHOLD) / 100.0

    def is_ignored(self, rule_id: RuleId) -> bool:
        return rule_id in self.ignored_rules


class Config(BaseSettings):
    """Root configuration for pwcheck."""
    model_config = ConfigDict(extra="ignore", populate_by_name=True, env_prefix="PWCHECK_", env_nested_delimiter="__")

    rules: RulesConfig = Field(default_factory=RulesConfig)