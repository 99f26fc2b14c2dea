"""
Main CLI entry point for langsplit.

This module provides the command-line interface for the langsplit tool.
"""

import logging
from typing import Annotated

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape

from langsplit import __version__
from langsplit.config import ReportOptions
from langsplit.core import (
    get_language_breakdown,
    group_languages,
    print_file_breakdown,
    print_language_split,
    print_strategy_breakdown,
)
from langsplit.utils.logger import get_logger, set_log_level

app = typer.Typer(
    name="langsplit",
    help="Get the programming language breakdown for a directory or file.",
    add_completion=False,
)

err_console = Console(stderr=True)
logger = get_logger(__name__)


def _build_console(options: ReportOptions) -> Console:
    """Console the report is written to (stdout)."""
    return Console(
        color_system="auto" if options.color else None,
        highlight=False,
    )


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"langsplit {__version__}")
        raise typer.Exit()


@app.command()
def main(
    path: Annotated[
        str,
        typer.Argument(help="Directory or file to scan"),
    ] = ".",
    breakdown: Annotated[
        bool,
        typer.Option(
            "--breakdown",
            "-b",
            help="Print the language detected for each file it visits",
        ),
    ] = False,
    strategies: Annotated[
        bool,
        typer.Option(
            "--strategies",
            "-s",
            help="Print each strategy used and what files were determined using that strategy",
        ),
    ] = False,
    condensed: Annotated[
        bool,
        typer.Option(
            "--condensed",
            "-c",
            help="Condense the breakdowns to only show the counts",
        ),
    ] = False,
    filter_pattern: Annotated[
        str | None,
        typer.Option(
            "--filter",
            "-f",
            help="A regex used to filter the output of the file and strategy breakdowns",
        ),
    ] = None,
    no_color: Annotated[
        bool,
        typer.Option(
            "--no-color",
            help="Disable colored output",
        ),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Enable debug logging on stderr",
        ),
    ] = False,
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            "-V",
            help="Show the version and exit",
            callback=_version_callback,
            is_eager=True,
        ),
    ] = False,
) -> None:
    """
    Report the language split of the files under PATH.

    Always prints the percentage of files per language (markup and
    programming languages only). The breakdowns are optional.

    Examples:

        # Language split of the current directory
        langsplit

        # Per-file breakdown of a project, Python files only
        langsplit ~/src/project -b -f '^Python$'

        # Counts per detection strategy
        langsplit -s -c
    """
    if verbose:
        set_log_level(logging.DEBUG)

    try:
        options = ReportOptions.from_env(
            breakdown=breakdown,
            strategies=strategies,
            condensed=condensed,
            filter=filter_pattern,
            color=False if no_color else None,
        )
    except ValidationError as e:
        messages = "; ".join(error["msg"] for error in e.errors())
        err_console.print(
            f"[bold red]Configuration Error:[/bold red] {escape(messages)}",
            highlight=False,
            soft_wrap=True,
        )
        logger.error(f"Invalid report options: {messages}")
        raise typer.Exit(1) from None

    detections = get_language_breakdown(path)

    console = _build_console(options)
    groups = group_languages(detections)

    try:
        print_language_split(groups, console)

        if options.breakdown:
            console.print()
            print_file_breakdown(groups, options, console)

        if options.strategies:
            console.print()
            print_strategy_breakdown(groups, options, console)
    except OSError as e:
        if verbose:
            err_console.print_exception()
        logger.error(f"Output error: {e}", exc_info=True)
        raise typer.Exit(1) from None
