"""Rich rendering of evaluation reports."""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape
from rich.text import Text

from pwcheck.core.models import EvaluationReport, RuleResult

_STATUS_LABEL = {
    "pass": "success",
    "fail": "failure",
    "ignored": "ignored",
}

_STATUS_STYLE = {
    "pass": "bold black on bright_green",
    "fail": "bold black on bright_red",
    "ignored": "bold black on white",
}

EMBEDDED_WORDLIST_NOTE = "No wordlist provided, defaulting to internal wordlist."


def render_report(console: Console, report: EvaluationReport) -> None:
    width = max(len(result.name) for result in report.results) + 4
    header = "Password:"
    console.print(f"{header.ljust(width + 1)}[bold blue]{escape(report.password)}[/bold blue]")

    for result in report.results:
        _render_result(console, result, width)

    if report.wordlist_source == "embedded":
        console.print(f"[blue]{EMBEDDED_WORDLIST_NOTE}[/blue]")

    summary = report.summary
    percentage = summary.format_percentage()
    if summary.pass_percentage is not None:
        percentage += "%"
    console.print(
        f"Passed [blue]{summary.passed}[/blue] out of [blue]{summary.enabled}[/blue] tests "
        f"([yellow]{percentage}[/yellow]), {summary.ignored} ignored"
    )


def _render_result(console: Console, result: RuleResult, width: int) -> None:
    line = Text(f"{result.name}:".ljust(width + 1))
    line.append(_STATUS_LABEL[result.status], style=_STATUS_STYLE[result.status])
    console.print(line)

    detail = result.outcome.detail
    if not detail:
        return
    info = Text("Additional info: ")
    if result.status == "pass":
        info.append(detail)
    else:
        info.append(detail, style=_STATUS_STYLE[result.status])
    console.print(info)
