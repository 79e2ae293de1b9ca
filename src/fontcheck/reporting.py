"""
Reporting sink.

Turns diagnostics into "<source>: <Level>: <message>" lines, optionally
coloured with rich, and exports whole runs as YAML.
"""

from pathlib import Path

import yaml
from rich.console import Console
from rich.table import Table

from fontcheck.models.diagnostic import Diagnostic, Level
from fontcheck.models.report import FontReport, RunReport

LEVEL_STYLES = {
    Level.SKIP: "dim",
    Level.INFO: "blue",
    Level.WARNING: "yellow",
    Level.FAIL: "red",
}


def format_diagnostic_line(source: str, diagnostic: Diagnostic) -> str:
    return f"{source}: {diagnostic.level}: {diagnostic.message}"


def filter_diagnostics(diagnostics: list[Diagnostic], min_level: Level = Level.SKIP) -> list[Diagnostic]:
    return [d for d in diagnostics if d.level >= min_level]


def report_lines(report: FontReport, min_level: Level = Level.SKIP) -> list[tuple[str, str]]:
    """Sink lines for one font, each paired with its rich style."""
    if not report.readable:
        return [(f"{report.source}: error: {report.error}", "red")]
    return [
        (format_diagnostic_line(report.source, d), LEVEL_STYLES[d.level])
        for d in filter_diagnostics(report.diagnostics, min_level)
    ]


def print_font_report(console: Console, report: FontReport, min_level: Level = Level.SKIP) -> None:
    for line, style in report_lines(report, min_level):
        console.print(line, style=style, markup=False, highlight=False, soft_wrap=True)


def print_summary(console: Console, run: RunReport) -> None:
    table = Table(title="Font Check Summary")
    table.add_column("Level", style="cyan")
    table.add_column("Count", justify="right")

    for level in Level:
        table.add_row(level.label, str(run.summary.get(level.label.lower(), 0)), style=LEVEL_STYLES[level])
    table.add_row("Unreadable", str(run.unreadable_count), style="red" if run.unreadable_count else None)
    table.add_row("Fonts", str(run.summary.get("fonts", 0)))

    console.print(table)


def export_report(run: RunReport, path: Path | str) -> None:
    with open(path, "w", encoding="utf-8") as f:
        yaml.dump(run.model_dump(mode="json"), f, default_flow_style=False, sort_keys=False)
