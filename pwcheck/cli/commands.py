"""CLI commands for pwcheck."""

from __future__ import annotations

import json
from pathlib import Path

import typer
from rich.markup import escape
from rich.table import Table

from pwcheck.config.loader import apply_overrides, get_config_path, load_config, save_config
from pwcheck.core.models import RuleId
from pwcheck.errors import ConfigError

from .core import app, console, err_console
from .render import render_report

config_app = typer.Typer(help="Manage pwcheck configuration")
app.add_typer(config_app, name="config")

PROMPT = "Please enter the password to check.\n>"


@app.command()
def check(
    password: str = typer.Argument(None, help="The password to check"),
    wordlist: Path = typer.Option(
        None,
        "--wordlist",
        "-w",
        metavar="FILE",
        help="Wordlist to check against, defaults to the internal wordlist",
    ),
    min_length: int = typer.Option(None, "--min-length", "-m", help="Overrides the minimum length of the password"),
    ignore: list[RuleId] = typer.Option(None, "--ignore", "-i", help="Rules to ignore, may be repeated"),
    similarity: int = typer.Option(
        None,
        "--similarity",
        "-s",
        help="Minimum percentage match for a wordlist entry to count as a collision",
    ),
    config_path: Path = typer.Option(None, "--config", "-c", help="Config file path"),
    as_json: bool = typer.Option(False, "--json", help="Print the report as JSON"),
) -> None:
    """Check a password against the configured rules."""
    from pwcheck.rules.engine import RuleSetEvaluator

    try:
        config = load_config(config_path)
        config = apply_overrides(
            config,
            min_length=min_length,
            similarity_threshold=similarity,
            ignored_rules=list(ignore) if ignore else None,
            wordlist_path=wordlist,
        )
    except ConfigError as e:
        err_console.print(f"[red]{escape(str(e))}[/red]")
        raise typer.Exit(2)

    if password is None:
        password = _read_password()

    report = RuleSetEvaluator(config.rules).evaluate(password)

    if as_json:
        console.print_json(json.dumps(report.to_dict(), ensure_ascii=False))
    else:
        render_report(console, report)

    if not report.summary.all_passed:
        raise typer.Exit(1)


def _read_password() -> str:
    """Prompt for the password when none was given on the command line."""
    value = typer.prompt(PROMPT, hide_input=True, prompt_suffix=" ")
    return value.rstrip("\r\n")


@app.command()
def rules(
    config_path: Path = typer.Option(None, "--config", "-c", help="Config file path"),
) -> None:
    """List available rules and whether they are enabled."""
    from pwcheck.rules.checks import rule_name
    from pwcheck.rules.engine import RULE_ORDER

    try:
        config = load_config(config_path)
    except ConfigError as e:
        err_console.print(f"[red]{escape(str(e))}[/red]")
        raise typer.Exit(2)

    table = Table(title="Rules")
    table.add_column("ID", style="cyan")
    table.add_column("Name")
    table.add_column("Status")

    for rule_id in RULE_ORDER:
        status = "[dim]ignored[/dim]" if config.rules.is_ignored(rule_id) else "[green]enabled[/green]"
        table.add_row(rule_id.value, rule_name(rule_id, config.rules), status)

    console.print(table)


@config_app.command("path")
def config_path_cmd() -> None:
    """Show config file location."""
    console.print(escape(str(get_config_path())))


@config_app.command("init")
def config_init(
    config_path: Path = typer.Option(None, "--config", "-c", help="Config file path"),
    force: bool = typer.Option(False, "--force", help="Overwrite an existing config file"),
) -> None:
    """Write a config file with default rule settings."""
    from pwcheck.config.schema import Config

    path = config_path or get_config_path()
    if path.exists() and not force:
        console.print(f"[yellow]Config already exists at {escape(str(path))}[/yellow]")
        raise typer.Exit(1)

    save_config(Config(), path)
    console.print(f"[green]✓[/green] Created config at {escape(str(path))}")


@config_app.command("show")
def config_show(
    config_path: Path = typer.Option(None, "--config", "-c", help="Config file path"),
) -> None:
    """Show the effective configuration."""
    try:
        config = load_config(config_path)
    except ConfigError as e:
        err_console.print(f"[red]{escape(str(e))}[/red]")
        raise typer.Exit(2)
    console.print_json(config.model_dump_json())
