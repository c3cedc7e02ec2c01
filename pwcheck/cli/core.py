"""Shared CLI application context and setup helpers."""

from __future__ import annotations

import os
import sys

import typer
from dotenv import load_dotenv
from loguru import logger
from rich.console import Console

from pwcheck import __logo__, __version__

app = typer.Typer(
    name="pwcheck",
    help=f"{__logo__} pwcheck - Password strength checker",
    no_args_is_help=True,
)

console = Console()
err_console = Console(stderr=True)


def version_callback(value: bool) -> None:
    if value:
        console.print(f"{__logo__} pwcheck v{__version__}")
        raise typer.Exit()


def configure_logging(verbose: bool) -> None:
    """Route loguru to stderr; debug output only with --verbose."""
    logger.remove()
    logger.add(sys.stderr, level="DEBUG" if verbose else "WARNING")


@app.callback()
def main(
    version: bool = typer.Option(None, "--version", "-V", callback=version_callback, is_eager=True),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """pwcheck - Password strength checker."""
    # Precedence: existing env vars > .env file (override=False)
    load_dotenv(os.path.expanduser("~/.pwcheck/.env"), override=False)
    configure_logging(verbose)
