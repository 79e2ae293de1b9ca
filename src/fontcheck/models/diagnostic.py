"""
Diagnostic data model.

A check produces zero or more `Diagnostic` values. Each one pairs a `Level`
with a closed `CheckError` payload that can always render itself to a
human-readable message without access to the font that produced it.
"""

from __future__ import annotations

from enum import IntEnum
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, computed_field, field_serializer, field_validator, model_validator

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1

Int32 = Annotated[int, Field(ge=INT32_MIN, le=INT32_MAX)]


class Level(IntEnum):
    """Diagnostic severity, ordered from least to most severe."""

    SKIP = 0
    INFO = 1
    WARNING = 2
    FAIL = 3

    @property
    def label(self) -> str:
        return self.name.capitalize()

    def __str__(self) -> str:
        return self.label

    def __format__(self, format_spec: str) -> str:
        return format(self.label, format_spec)

    @classmethod
    def parse(cls, value: "Level | int | str") -> "Level":
        """Accept a Level, its integer value, or its name in any case."""
        if isinstance(value, cls):
            return value
        if isinstance(value, int):
            return cls(value)
        try:
            return cls[str(value).strip().upper()]
        except KeyError:
            valid = ", ".join(level.label for level in cls)
            raise ValueError(f"unknown level {value!r} (expected one of: {valid})") from None


class ExpectedRange(BaseModel):
    """Inclusive range of signed 32-bit integers with lower <= upper."""

    model_config = ConfigDict(frozen=True)
    lower: Int32
    upper: Int32

    @model_validator(mode="after")
    def _check_order(self) -> "ExpectedRange":
        if self.lower > self.upper:
            raise ValueError(f"range lower bound {self.lower} exceeds upper bound {self.upper}")
        return self

    def __contains__(self, value: int) -> bool:
        return self.lower <= value <= self.upper

    def __str__(self) -> str:
        return f"[{self.lower}, {self.upper}]"


class MissingTable(BaseModel):
    """A required table could not be obtained from the font."""

    model_config = ConfigDict(frozen=True)
    kind: Literal["missing_table"] = "missing_table"
    name: str

    @property
    def message(self) -> str:
        return f"Cannot read {self.name} table"


class MetricOutOfRange(BaseModel):
    """A measured metric fell outside the range derived from another table."""

    model_config = ConfigDict(frozen=True)
    kind: Literal["metric_out_of_range"] = "metric_out_of_range"
    table: str = "OS/2"
    field: str
    expected: ExpectedRange
    actual: Int32

    @property
    def message(self) -> str:
        return f"{self.table}.{self.field} value should be in the range {self.expected}, but got {self.actual}"


CheckError = Annotated[Union[MissingTable, MetricOutOfRange], Field(discriminator="kind")]


class Diagnostic(BaseModel):
    """A leveled, displayable validation finding."""

    model_config = ConfigDict(frozen=True)
    level: Level
    error: CheckError

    @field_validator("level", mode="before")
    @classmethod
    def _coerce_level(cls, v):
        return Level.parse(v)

    @field_serializer("level")
    def _serialize_level(self, level: Level) -> str:
        return level.label

    @computed_field  # type: ignore[prop-decorator]
    @property
    def message(self) -> str:
        return self.error.message

    def __str__(self) -> str:
        return f"{self.level}: {self.message}"
