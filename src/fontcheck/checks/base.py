from abc import ABC, abstractmethod
from typing import Callable, Sequence

from fontcheck.fonts.provider import TableProvider
from fontcheck.models.diagnostic import Diagnostic

CheckFunction = Callable[[TableProvider], Sequence[Diagnostic]]


class BaseCheck(ABC):
    CODE: str = ""
    DESCRIPTION: str = ""

    @abstractmethod
    def run(self, font: TableProvider) -> list[Diagnostic]:
        """Inspect the font and return diagnostics in emission order."""
        ...

    def __call__(self, font: TableProvider) -> list[Diagnostic]:
        return self.run(font)

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.CODE}>"


class FunctionCheck(BaseCheck):
    """Adapt a plain `font -> diagnostics` callable to the BaseCheck interface."""

    def __init__(self, func: CheckFunction, code: str | None = None, description: str | None = None):
        self.func = func
        self.CODE = code or func.__name__
        doc_lines = (func.__doc__ or "").strip().splitlines()
        self.DESCRIPTION = description or (doc_lines[0] if doc_lines else "")

    def run(self, font: TableProvider) -> list[Diagnostic]:
        return list(self.func(font))
