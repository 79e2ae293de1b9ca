from pydantic import BaseModel, ConfigDict, Field

from .diagnostic import Diagnostic, Level


def _count_levels(diagnostics: list[Diagnostic]) -> dict[str, int]:
    counts = {level.label.lower(): 0 for level in Level}
    for diagnostic in diagnostics:
        counts[diagnostic.level.label.lower()] += 1
    return counts


class FontReport(BaseModel):
    """Diagnostics produced for one font, in check registration order."""

    model_config = ConfigDict(extra="ignore")
    source: str
    diagnostics: list[Diagnostic] = Field(default_factory=list)
    error: str | None = None

    @property
    def readable(self) -> bool:
        return self.error is None


class RunReport(BaseModel):
    """Complete run over one or more fonts with per-level summary counts."""

    model_config = ConfigDict(extra="ignore")
    summary: dict[str, int] = Field(default_factory=dict)
    fonts: list[FontReport] = Field(default_factory=list)

    @classmethod
    def from_fonts(cls, fonts: list[FontReport]) -> "RunReport":
        diagnostics = [d for font in fonts for d in font.diagnostics]
        summary = _count_levels(diagnostics)
        summary["fonts"] = len(fonts)
        summary["unreadable"] = len([f for f in fonts if not f.readable])
        return cls(summary=summary, fonts=fonts)

    @property
    def fail_count(self) -> int:
        return self.summary.get("fail", 0)

    @property
    def warning_count(self) -> int:
        return self.summary.get("warning", 0)

    @property
    def unreadable_count(self) -> int:
        return self.summary.get("unreadable", 0)
