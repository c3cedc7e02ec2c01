"""Domain models for password rule evaluation."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import ClassVar, Literal, TypeAlias

RuleStatus: TypeAlias = Literal["pass", "fail", "ignored"]


class RuleId(StrEnum):
    """Closed set of rule identifiers, in evaluation order."""

    MINIMUM_CHARS = "minimum-chars"
    NUMBERS = "numbers"
    SPECIAL_CHARS = "special-chars"
    WORDLIST_COLLISIONS = "wordlist-collisions"


@dataclass(frozen=True, slots=True, kw_only=True)
class Pass:
    """Rule succeeded. Detail is optional extra information."""

    status: ClassVar[RuleStatus] = "pass"
    detail: str = ""


@dataclass(frozen=True, slots=True, kw_only=True)
class Fail:
    """Rule failed with a human-readable reason."""

    status: ClassVar[RuleStatus] = "fail"
    detail: str


@dataclass(frozen=True, slots=True, kw_only=True)
class Ignored:
    """Rule was suppressed by the ignore configuration."""

    status: ClassVar[RuleStatus] = "ignored"
    detail: str


RuleOutcome: TypeAlias = Pass | Fail | Ignored


@dataclass(frozen=True, slots=True, kw_only=True)
class RuleResult:
    """Outcome of one rule for one evaluation run."""

    rule_id: RuleId
    name: str
    outcome: RuleOutcome

    @property
    def status(self) -> RuleStatus:
        return self.outcome.status

    def to_dict(self) -> dict[str, str]:
        return {
            "rule": self.rule_id.value,
            "name": self.name,
            "status": self.status,
            "detail": self.outcome.detail,
        }


@dataclass(frozen=True, slots=True, kw_only=True)
class EvaluationSummary:
    """Aggregate counts over one evaluation run.

    The pass percentage is computed over enabled rules only. With every rule
    ignored it is undefined and reported as ``None`` / ``"N/A"``.
    """

    passed: int
    enabled: int
    total: int

    @property
    def ignored(self) -> int:
        return self.total - self.enabled

    @property
    def pass_percentage(self) -> float | None:
        if self.enabled == 0:
            return None
        return self.passed / self.enabled * 100.0

    @property
    def all_passed(self) -> bool:
        return self.passed == self.enabled

    def format_percentage(self) -> str:
        percentage = self.pass_percentage
        if percentage is None:
            return "N/A"
        return f"{percentage:g}"

    def to_dict(self) -> dict[str, object]:
        return {
            "passed": self.passed,
            "enabled": self.enabled,
            "ignored": self.ignored,
            "total": self.total,
            "pass_percentage": self.pass_percentage,
        }


@dataclass(frozen=True, slots=True, kw_only=True)
class EvaluationReport:
    """Per-rule results plus summary for one password."""

    password: str
    results: tuple[RuleResult, ...]
    summary: EvaluationSummary
    wordlist_source: str | None = None

    def result_for(self, rule_id: RuleId) -> RuleResult:
        for result in self.results:
            if result.rule_id == rule_id:
                return result
        raise KeyError(rule_id)

    def to_dict(self) -> dict[str, object]:
        return {
            "password": self.password,
            "results": [result.to_dict() for result in self.results],
            "summary": self.summary.to_dict(),
            "wordlist_source": self.wordlist_source,
        }
