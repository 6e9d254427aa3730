"""
Bantam CLI - Entry point.

Commands:
- tokens: print successive tokenizer results for a piece of source text
- render: print the canonical form of a JSON expression tree
- precedence: show the operator precedence table
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Annotated

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.table import Table

from bantam._version import get_version
from bantam.core.config import BantamConfig, LoggingConfig, load_config
from bantam.core.errors import BantamError
from bantam.core.expression_lang.precedence import OPERATOR_TABLE, Precedence, operators_at
from bantam.core.expression_lang.tokenizer import Lexer
from bantam.core.ir.expressions import load_expr

logger = logging.getLogger(__name__)

app = typer.Typer(
    help="Bantam - expression language tokenizer and expression trees",
    no_args_is_help=True,
)

console = Console()


def version_callback(value: bool) -> None:
    """Display version information."""
    if value:
        typer.echo(f"Bantam version {get_version()}")
        raise typer.Exit()


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


def _config(ctx: typer.Context) -> BantamConfig:
    config = ctx.obj
    if isinstance(config, BantamConfig):
        return config
    return BantamConfig()


@app.callback()
def main_callback(
    ctx: typer.Context,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-v",
            callback=version_callback,
            is_eager=True,
            help="Show version information",
        ),
    ] = None,
    config_path: Annotated[
        Path | None,
        typer.Option(
            "--config",
            "-c",
            help="Path to bantam.toml (default: ./bantam.toml if present)",
        ),
    ] = None,
    log_level: Annotated[
        str | None,
        typer.Option(
            "--log-level",
            envvar="BANTAM_LOG_LEVEL",
            help="Logging level (overrides [logging] level in bantam.toml)",
        ),
    ] = None,
) -> None:
    """Bantam CLI main callback for global options."""
    try:
        config = load_config(config_path)
    except BantamError as e:
        typer.echo(f"Error loading config: {e}", err=True)
        raise typer.Exit(code=1)

    level = config.logging.level
    if log_level is not None:
        try:
            level = LoggingConfig(level=log_level).level
        except ValidationError as e:
            typer.echo(f"Invalid --log-level: {e}", err=True)
            raise typer.Exit(code=1)

    _configure_logging(level)
    ctx.obj = config


@app.command()
def tokens(
    ctx: typer.Context,
    text: Annotated[
        str | None,
        typer.Argument(help="Source text (default: [tokens] sample from config)"),
    ] = None,
    limit: Annotated[
        int | None,
        typer.Option(
            "--limit",
            "-n",
            min=0,
            help="Number of results to print; 0 prints until the input is exhausted",
        ),
    ] = None,
) -> None:
    """
    Print successive tokenizer results.

    Each line is one call to next_token(). Once the input is exhausted the
    result is None.

    Examples:
        bantam tokens                 # "b + a", three results
        bantam tokens "x1 + 2y" -n 0  # every token, then None
    """
    config = _config(ctx).tokens
    source = text if text is not None else config.sample
    count = limit if limit is not None else config.limit

    lexer = Lexer(source)
    printed = 0
    while count == 0 or printed < count:
        token = lexer.next_token()
        console.print(repr(token), markup=False, highlight=False)
        printed += 1
        if token is None:
            break

    logger.info("Printed %d tokenizer results", printed)


@app.command()
def render(
    source: Annotated[
        str,
        typer.Argument(help="JSON file holding an expression tree, or '-' for stdin"),
    ],
) -> None:
    """
    Print the canonical form of a serialized expression tree.

    Examples:
        bantam render tree.json
        echo '{"kind": "name", "name": "a"}' | bantam render -
    """
    if source == "-":
        document = sys.stdin.read()
    else:
        path = Path(source)
        if not path.exists():
            typer.echo(f"File not found: {path}", err=True)
            raise typer.Exit(code=1)
        document = path.read_text(encoding="utf-8")

    try:
        expr = load_expr(document)
    except BantamError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    typer.echo(str(expr))


@app.command()
def precedence() -> None:
    """Show operator precedence, from loosest to tightest binding."""
    table = Table(title="Operator precedence")
    table.add_column("Rank", justify="right")
    table.add_column("Level")
    table.add_column("Operators")
    table.add_column("Associativity")

    for level in Precedence:
        rules = operators_at(level)
        operators = ", ".join(f"{rule.punctuator.value} ({rule.position})" for rule in rules)
        associativity = ", ".join(sorted({str(rule.associativity) for rule in rules}))
        table.add_row(str(int(level)), level.name.lower(), operators or "-", associativity or "-")

    console.print(table)
    logger.debug("Listed %d operator rules", len(OPERATOR_TABLE))


def main(argv: list[str] | None = None) -> None:
    app(args=argv, standalone_mode=True)


if __name__ == "__main__":
    main(sys.argv[1:])
