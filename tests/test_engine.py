from pathlib import Path

import pytest

from pwcheck.config.schema import RulesConfig
from pwcheck.core.models import EvaluationSummary, Fail, Ignored, Pass, RuleId
from pwcheck.rules.engine import RULE_ORDER, RuleSetEvaluator, evaluate_password
from pwcheck.rules.wordlist import WordlistSource


def _corpus(*entries: str) -> WordlistSource:
    return WordlistSource(kind="external", entries=entries)


def test_rules_run_in_declaration_order() -> None:
    report = evaluate_password("Xk9#mQ2!", wordlist=_corpus("password", "qwerty"))
    assert [result.rule_id for result in report.results] == list(RULE_ORDER)
    assert RULE_ORDER == (
        RuleId.MINIMUM_CHARS,
        RuleId.NUMBERS,
        RuleId.SPECIAL_CHARS,
        RuleId.WORDLIST_COLLISIONS,
    )


def test_strong_password_passes_everything() -> None:
    report = evaluate_password("Xk9#mQ2!", wordlist=_corpus("password", "qwerty"))
    assert all(isinstance(result.outcome, Pass) for result in report.results)
    assert report.summary == EvaluationSummary(passed=4, enabled=4, total=4)
    assert report.summary.pass_percentage == 100.0
    assert report.summary.all_passed


def test_weak_password_fails_but_all_rules_run() -> None:
    report = evaluate_password("password", wordlist=_corpus("password", "qwerty"))
    statuses = [result.status for result in report.results]
    assert statuses == ["pass", "fail", "fail", "fail"]
    assert report.summary.passed == 1
    assert report.summary.enabled == 4
    assert report.summary.pass_percentage == 25.0
    assert not report.summary.all_passed


def test_ignored_rule_counts_toward_total_only() -> None:
    config = RulesConfig(ignored_rules=frozenset({RuleId.NUMBERS}))
    report = evaluate_password("abcdefgh!", config, wordlist=_corpus("qwerty"))

    numbers = report.result_for(RuleId.NUMBERS)
    assert numbers.outcome == Ignored(detail="disabled with --ignore numbers")
    assert report.summary.total == 4
    assert report.summary.enabled == 3
    assert report.summary.ignored == 1
    assert report.summary.passed == 3


def test_all_rules_ignored_reports_undefined_percentage() -> None:
    config = RulesConfig(ignored_rules=frozenset(RuleId))
    report = evaluate_password("x", config)

    assert all(isinstance(result.outcome, Ignored) for result in report.results)
    assert report.summary.enabled == 0
    assert report.summary.pass_percentage is None
    assert report.summary.format_percentage() == "N/A"
    assert report.to_dict()["summary"]["pass_percentage"] is None


def test_ignored_collision_rule_never_loads_wordlist(monkeypatch: pytest.MonkeyPatch) -> None:
    def boom(path: Path | None) -> WordlistSource:
        raise AssertionError("wordlist should not be resolved")

    monkeypatch.setattr("pwcheck.rules.engine.resolve_wordlist", boom)
    config = RulesConfig(ignored_rules=frozenset({RuleId.WORDLIST_COLLISIONS}))
    report = RuleSetEvaluator(config).evaluate("abcdefg1!")

    assert report.summary == EvaluationSummary(passed=3, enabled=3, total=4)
    assert report.wordlist_source is None


def test_wordlist_resolved_once_per_run(monkeypatch: pytest.MonkeyPatch) -> None:
    calls: list[Path | None] = []

    def fake_resolve(path: Path | None) -> WordlistSource:
        calls.append(path)
        return _corpus("password")

    monkeypatch.setattr("pwcheck.rules.engine.resolve_wordlist", fake_resolve)
    evaluator = RuleSetEvaluator(RulesConfig())
    evaluator.evaluate("hunter2")
    evaluator.evaluate("hunter3")

    assert calls == [None, None]


def test_unreadable_wordlist_only_fails_collision_rule(tmp_path: Path) -> None:
    missing = tmp_path / "missing.txt"
    report = evaluate_password("Xk9#mQ2!", RulesConfig(wordlist_path=missing))

    collision = report.result_for(RuleId.WORDLIST_COLLISIONS)
    assert isinstance(collision.outcome, Fail)
    assert str(missing) in collision.outcome.detail
    assert report.summary == EvaluationSummary(passed=3, enabled=4, total=4)
    assert report.wordlist_source == str(missing)


def test_external_wordlist_from_config(tmp_path: Path) -> None:
    path = tmp_path / "words.txt"
    path.write_text("password\nqwerty\n", encoding="utf-8")
    report = evaluate_password("qwerty", RulesConfig(wordlist_path=path))

    collision = report.result_for(RuleId.WORDLIST_COLLISIONS)
    assert collision.outcome == Fail(detail="Best match in wordlist is qwerty with similarity 100%")
    assert report.wordlist_source == str(path)


def test_embedded_wordlist_end_to_end_is_deterministic() -> None:
    first = evaluate_password("Tr0ub4dor&3")
    second = evaluate_password("Tr0ub4dor&3")

    assert first.result_for(RuleId.MINIMUM_CHARS).status == "pass"
    assert first.result_for(RuleId.NUMBERS).status == "pass"
    assert first.result_for(RuleId.SPECIAL_CHARS).status == "pass"
    assert first.wordlist_source == "embedded"
    assert first.result_for(RuleId.WORDLIST_COLLISIONS) == second.result_for(RuleId.WORDLIST_COLLISIONS)


def test_embedded_wordlist_flags_common_password() -> None:
    report = evaluate_password("letmein")
    collision = report.result_for(RuleId.WORDLIST_COLLISIONS)
    assert isinstance(collision.outcome, Fail)
    assert "letmein" in collision.outcome.detail


def test_rule_names_follow_config() -> None:
    report = evaluate_password("abc", RulesConfig(min_length=4), wordlist=_corpus("x"))
    assert report.results[0].name == "At least 4 characters"
    assert report.results[0].outcome == Fail(detail="Password too short: 3/4 characters")


def test_report_to_dict() -> None:
    report = evaluate_password("abc", wordlist=_corpus("abc"))
    payload = report.to_dict()
    assert payload["password"] == "abc"
    assert payload["results"][0] == {
        "rule": "minimum-chars",
        "name": "At least 8 characters",
        "status": "fail",
        "detail": "Password too short: 3/8 characters",
    }
    assert payload["summary"] == {
        "passed": 0,
        "enabled": 4,
        "ignored": 0,
        "total": 4,
        "pass_percentage": 0.0,
    }
    assert payload["wordlist_source"] == "external"


def test_ignored_collision_rule_with_configured_path_has_no_source(tmp_path: Path) -> None:
    config = RulesConfig(
        wordlist_path=tmp_path / "missing.txt",
        ignored_rules=frozenset({RuleId.WORDLIST_COLLISIONS}),
    )
    report = evaluate_password("abcdefg1!", config)
    assert report.wordlist_source is None
