"""
Check runner.

Runs an ordered list of checks against one font and concatenates their
diagnostics. Checks are independent: one check reporting a missing table
does not stop the next one from running. Nothing is filtered here; level
filtering belongs to the reporting side.
"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Callable, Sequence

from fontcheck.checks.base import BaseCheck, CheckFunction, FunctionCheck
from fontcheck.codebase.debug import spy_trace
from fontcheck.fonts.provider import FontLoadError, TableProvider, open_font
from fontcheck.models.diagnostic import Diagnostic
from fontcheck.models.report import FontReport, RunReport

logger = logging.getLogger(__name__)

FontOpener = Callable[[Path | str], TableProvider]


class CheckRunner:
    def __init__(self, checks: Sequence[BaseCheck | CheckFunction]):
        if not checks:
            raise ValueError("CheckRunner needs at least one check")
        self.checks: list[BaseCheck] = [c if isinstance(c, BaseCheck) else FunctionCheck(c) for c in checks]

    @spy_trace
    def _run_one(self, check: BaseCheck, font: TableProvider) -> list[Diagnostic]:
        return list(check.run(font))

    def run(self, font: TableProvider) -> list[Diagnostic]:
        """Run every check in order and return one flat list of diagnostics."""
        diagnostics: list[Diagnostic] = []
        for check in self.checks:
            found = self._run_one(check, font)
            logger.debug("%s: %s produced %d diagnostic(s)", font.source, check.CODE, len(found))
            diagnostics.extend(found)
        return diagnostics

    def check(self, font: TableProvider) -> FontReport:
        return FontReport(source=font.source, diagnostics=self.run(font))


def check_font(path: Path | str, runner: CheckRunner, opener: FontOpener = open_font) -> FontReport:
    """Open one font and run the checks. An unreadable font yields a report with `error` set."""
    try:
        font = opener(path)
    except FontLoadError as e:
        logger.warning("Skipping %s: %s", path, e)
        return FontReport(source=str(path), error=str(e))
    return runner.check(font)


def check_fonts(
    paths: Sequence[Path | str],
    runner: CheckRunner,
    jobs: int = 1,
    opener: FontOpener = open_font,
) -> RunReport:
    """Check several fonts. Fonts share no state, so `jobs > 1` fans out to threads; output keeps input order."""
    if jobs > 1 and len(paths) > 1:
        with ThreadPoolExecutor(max_workers=jobs) as pool:
            reports = list(pool.map(lambda p: check_font(p, runner, opener), paths))
    else:
        reports = [check_font(p, runner, opener) for p in paths]
    return RunReport.from_fonts(reports)
