import logging
import sys
from typing import Optional

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from fontcheck.models.diagnostic import Level

LEVEL_CHOICES = [level.label for level in Level]


@click.command("check")
@click.argument("fonts", nargs=-1, required=True, type=click.Path(path_type=str, dir_okay=False))
@click.option(
    "--config",
    "config_path",
    type=click.Path(path_type=str, dir_okay=False, exists=True),
    default=None,
    help="Run configuration YAML (defaults to ./fontcheck.yaml when present).",
)
@click.option(
    "--check",
    "check_codes",
    multiple=True,
    help="Check code to run; repeat to run several in order. Defaults to all registered checks.",
)
@click.option(
    "--min-level",
    type=click.Choice(LEVEL_CHOICES, case_sensitive=False),
    default=None,
    help="Hide diagnostics below this level.",
)
@click.option("--strict", is_flag=True, help="Treat warnings as failures (exit code 2).")
@click.option("--jobs", "-j", type=click.IntRange(min=1), default=None, help="Check fonts in parallel threads.")
@click.option(
    "--tables",
    is_flag=True,
    help="Inputs are YAML table dumps instead of binary font files.",
)
@click.option(
    "--export",
    type=click.Path(path_type=str, dir_okay=False),
    help="Export the full report to a YAML file.",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging.")
def check(
    fonts: tuple[str, ...],
    config_path: Optional[str],
    check_codes: tuple[str, ...],
    min_level: Optional[str],
    strict: bool,
    jobs: Optional[int],
    tables: bool,
    export: Optional[str],
    verbose: bool,
) -> None:
    """Run metric checks on one or more fonts."""
    from fontcheck.checker import CheckRunner, check_fonts
    from fontcheck.checks.registry import resolve_checks
    from fontcheck.codebase.debug import configure_logging
    from fontcheck.data.loader import load_run_config, open_table_dump
    from fontcheck.fonts.provider import open_font
    from fontcheck.reporting import export_report, print_font_report, print_summary

    console = Console()
    configure_logging(logging.DEBUG if verbose else logging.WARNING)

    try:
        config = load_run_config(config_path)
        if check_codes:
            config.checks = list(check_codes)
        if min_level is not None:
            config.min_level = Level.parse(min_level)
        if strict:
            config.strict = True
        if jobs is not None:
            config.jobs = jobs

        runner = CheckRunner(resolve_checks(config.checks))
    except (ValueError, KeyError, OSError) as e:
        console.print(f"[red]Configuration error: {escape(str(e))}[/red]")
        sys.exit(1)

    try:
        opener = open_table_dump if tables else open_font
        run = check_fonts(list(fonts), runner, jobs=config.jobs, opener=opener)

        for report in run.fonts:
            print_font_report(console, report, config.min_level)

        if export:
            export_report(run, export)
            console.print(f"[green]✓[/green] Report exported to {export}")

        print_summary(console, run)

        if run.fail_count > 0 or run.unreadable_count > 0:
            sys.exit(1)
        elif config.strict and run.warning_count > 0:
            sys.exit(2)
        else:
            sys.exit(0)

    except Exception as e:
        console.print(f"[red]Error during checks: {escape(str(e))}[/red]")
        sys.exit(1)


@click.command("list-checks")
def list_checks() -> None:
    """List registered checks in run order."""
    from fontcheck.checks.registry import available_checks

    console = Console()
    table = Table(title="Registered Checks")
    table.add_column("Code", style="cyan")
    table.add_column("Description")
    for registered in available_checks():
        table.add_row(registered.CODE, registered.DESCRIPTION)
    console.print(table)
