from .base import BaseCheck, CheckFunction, FunctionCheck
from .registry import available_checks, get_check, register, resolve_checks
from .win_metrics import WinAscentDescentCheck, check_win_ascent_and_descent

__all__ = [
    "BaseCheck",
    "CheckFunction",
    "FunctionCheck",
    "WinAscentDescentCheck",
    "available_checks",
    "check_win_ascent_and_descent",
    "get_check",
    "register",
    "resolve_checks",
]
