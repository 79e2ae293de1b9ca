"""
Windows ascent/descent plausibility check.

OS/2.usWinAscent and OS/2.usWinDescent define the clipping region on Windows.
They are expected to cover the font's global extents from the head table
without being wildly larger:

    head.yMax  <= usWinAscent  <= 2 * head.yMax
    |head.yMin| <= usWinDescent <= 2 * |head.yMin|
"""

import logging

from fontcheck.codebase.int32 import checked_abs_i32, checked_mul_i32, widen_i32
from fontcheck.fonts.provider import TableNotFoundError, TableProvider
from fontcheck.models.diagnostic import Diagnostic, ExpectedRange, Level, MetricOutOfRange, MissingTable
from fontcheck.models.tables import HEAD_TABLE, OS2_TABLE

from .base import BaseCheck

logger = logging.getLogger(__name__)

REQUIRED_TABLES = f"{OS2_TABLE} or {HEAD_TABLE}"


def _expected_range(lower: int) -> ExpectedRange:
    upper = checked_mul_i32(lower, 2)
    # A negative bound doubles downwards; keep the range ordered.
    return ExpectedRange(lower=min(lower, upper), upper=max(lower, upper))


def _check_metric(field: str, expected: ExpectedRange, actual: int) -> Diagnostic | None:
    if actual in expected:
        return None
    return Diagnostic(
        level=Level.FAIL,
        error=MetricOutOfRange(table=OS2_TABLE, field=field, expected=expected, actual=actual),
    )


def check_win_ascent_and_descent(font: TableProvider) -> list[Diagnostic]:
    """usWinAscent/usWinDescent must cover head.yMax/|head.yMin| and not exceed twice them."""
    try:
        os2 = font.os2()
        head = font.head()
    except TableNotFoundError as e:
        logger.debug("%s: %s", font.source, e)
        return [Diagnostic(level=Level.FAIL, error=MissingTable(name=REQUIRED_TABLES))]

    diagnostics = []

    ascent_range = _expected_range(widen_i32(head.y_max))
    finding = _check_metric("usWinAscent", ascent_range, widen_i32(os2.us_win_ascent))
    if finding:
        diagnostics.append(finding)

    descent_range = _expected_range(checked_abs_i32(widen_i32(head.y_min)))
    finding = _check_metric("usWinDescent", descent_range, widen_i32(os2.us_win_descent))
    if finding:
        diagnostics.append(finding)

    return diagnostics


class WinAscentDescentCheck(BaseCheck):
    CODE = "win-ascent-descent"
    DESCRIPTION = "OS/2 usWinAscent/usWinDescent fall within [1x, 2x] of head yMax/|yMin|"

    def run(self, font: TableProvider) -> list[Diagnostic]:
        return check_win_ascent_and_descent(font)
