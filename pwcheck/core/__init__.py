"""Typed core models shared by the rule engine and the CLI."""

from pwcheck.core.models import (
    EvaluationReport,
    EvaluationSummary,
    Fail,
    Ignored,
    Pass,
    RuleId,
    RuleOutcome,
    RuleResult,
)

__all__ = [
    "EvaluationReport",
    "EvaluationSummary",
    "Fail",
    "Ignored",
    "Pass",
    "RuleId",
    "RuleOutcome",
    "RuleResult",
]
