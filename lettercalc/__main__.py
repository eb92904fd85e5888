"""CLI for lettercalc.

Usage:
    python -m lettercalc 3a2c4                       # Evaluate an expression
    python -m lettercalc e1ae2c3ff --groups nested   # Keep nested group markers
    python -m lettercalc 3ae4c66fb32 --verbose       # Show the fold trace
"""

from __future__ import annotations

import logging
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from lettercalc.config import Settings
from lettercalc.errors import EvalError
from lettercalc.evaluator import evaluate
from lettercalc.formatting import format_number
from lettercalc.models import GroupMode

app = typer.Typer(
    name="lettercalc",
    help="Left-to-right calculator for letter-notation expressions",
    add_completion=False,
)
# Expressions are echoed verbatim, so no markup/emoji/highlight on stdout.
console = Console(highlight=False, emoji=False, soft_wrap=True)
err_console = Console(stderr=True)


def _setup_logging(verbose: bool) -> None:
    """Route lettercalc logging through rich on stderr."""
    log = logging.getLogger("lettercalc")
    log.setLevel(logging.DEBUG if verbose else logging.WARNING)
    if not any(isinstance(h, RichHandler) for h in log.handlers):
        log.addHandler(RichHandler(console=err_console, show_path=False))


@app.command()
def cmd_evaluate(
    expression: str = typer.Argument(help="Expression, e.g. '3ae4c66fb32'"),
    groups: Optional[GroupMode] = typer.Option(
        None, "--groups", "-g", help="Nested group handling: flat or nested (env LETTERCALC_GROUP_MODE)",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log each fold step (env LETTERCALC_VERBOSE)"),
) -> None:
    """Evaluate an expression and print the result."""
    try:
        settings = Settings.from_env(group_mode=groups)
    except ValueError as e:
        err_console.print(f"[red]Invalid configuration:[/red] {escape(str(e))}")
        raise typer.Exit(2)

    settings.verbose = settings.verbose or verbose
    _setup_logging(settings.verbose)

    console.print(f"Evaluating {expression}", markup=False)
    try:
        result = evaluate(expression, settings.group_mode)
    except EvalError as e:
        console.print(f"[red]Error:[/red] {e.kind}")
        raise typer.Exit(1)

    console.print(f"Result: {format_number(result)}", markup=False)


if __name__ == "__main__":
    app()
