"""Rule set evaluation engine."""

from __future__ import annotations

from loguru import logger

from pwcheck.config.schema import RulesConfig
from pwcheck.core.models import (
    EvaluationReport,
    EvaluationSummary,
    Ignored,
    Pass,
    RuleId,
    RuleOutcome,
    RuleResult,
)
from pwcheck.rules.checks import evaluate, rule_name
from pwcheck.rules.wordlist import WordlistSource, resolve_wordlist

RULE_ORDER: tuple[RuleId, ...] = (
    RuleId.MINIMUM_CHARS,
    RuleId.NUMBERS,
    RuleId.SPECIAL_CHARS,
    RuleId.WORDLIST_COLLISIONS,
)


class _WordlistCache:
    """Resolves the wordlist at most once per evaluation run."""

    def __init__(self, config: RulesConfig, source: WordlistSource | None):
        self._config = config
        self._source = source
        self._attempted = False

    @property
    def label(self) -> str | None:
        if self._source is not None:
            return self._source.label
        if self._attempted and self._config.wordlist_path is not None:
            return str(self._config.wordlist_path.expanduser())
        return None

    def __call__(self) -> WordlistSource:
        if self._source is None:
            self._attempted = True
            self._source = resolve_wordlist(self._config.wordlist_path)
        return self._source


class RuleSetEvaluator:
    """Runs every rule in fixed order and tallies the results.

    No rule failure aborts the run. Ignored rules count toward ``total`` but
    not toward ``enabled`` or ``passed``.
    """

    def __init__(self, config: RulesConfig | None = None, *, wordlist: WordlistSource | None = None):
        self._config = config or RulesConfig()
        self._wordlist = wordlist

    @property
    def config(self) -> RulesConfig:
        return self._config

    def evaluate(self, password: str) -> EvaluationReport:
        wordlist = _WordlistCache(self._config, self._wordlist)
        results: list[RuleResult] = []
        for rule_id in RULE_ORDER:
            outcome = self._run_rule(rule_id, password, wordlist)
            logger.debug("rule={} status={} detail={}", rule_id.value, outcome.status, outcome.detail)
            results.append(RuleResult(rule_id=rule_id, name=rule_name(rule_id, self._config), outcome=outcome))

        summary = self._summarize(results)
        logger.info(
            "evaluation passed={} enabled={} total={} percentage={}",
            summary.passed,
            summary.enabled,
            summary.total,
            summary.format_percentage(),
        )
        return EvaluationReport(
            password=password,
            results=tuple(results),
            summary=summary,
            wordlist_source=wordlist.label,
        )

    def _run_rule(self, rule_id: RuleId, password: str, wordlist: _WordlistCache) -> RuleOutcome:
        if self._config.is_ignored(rule_id):
            return Ignored(detail=f"disabled with --ignore {rule_id.value}")
        return evaluate(rule_id, password, self._config, wordlist)

    @staticmethod
    def _summarize(results: list[RuleResult]) -> EvaluationSummary:
        total = len(results)
        ignored = sum(1 for result in results if isinstance(result.outcome, Ignored))
        passed = sum(1 for result in results if isinstance(result.outcome, Pass))
        return EvaluationSummary(passed=passed, enabled=total - ignored, total=total)


def evaluate_password(
    password: str,
    config: RulesConfig | None = None,
    *,
    wordlist: WordlistSource | None = None,
) -> EvaluationReport:
    """Evaluate ``password`` with a fresh evaluator."""
    return RuleSetEvaluator(config, wordlist=wordlist).evaluate(password)
