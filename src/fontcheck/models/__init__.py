from .config import RunConfig
from .diagnostic import CheckError, Diagnostic, ExpectedRange, Level, MetricOutOfRange, MissingTable
from .report import FontReport, RunReport
from .tables import HeadTable, Os2Table

__all__ = [
    "CheckError",
    "Diagnostic",
    "ExpectedRange",
    "FontReport",
    "HeadTable",
    "Level",
    "MetricOutOfRange",
    "MissingTable",
    "Os2Table",
    "RunConfig",
    "RunReport",
]
