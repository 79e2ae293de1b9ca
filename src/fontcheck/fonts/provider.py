"""
Font table access.

Checks never touch binary font data directly. They ask a `TableProvider` for
named tables and receive typed, validated snapshots (`Os2Table`,
`HeadTable`). A table that is absent or cannot be decoded raises
`TableNotFoundError` naming that table.
"""

from __future__ import annotations

import io
import logging
import struct
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Protocol, runtime_checkable

from fontTools.ttLib import TTFont, TTLibError
from pydantic import BaseModel, ValidationError

from fontcheck.models.tables import HEAD_TABLE, OS2_TABLE, HeadTable, Os2Table

logger = logging.getLogger(__name__)

TABLE_MODELS: dict[str, type[BaseModel]] = {
    OS2_TABLE: Os2Table,
    HEAD_TABLE: HeadTable,
}


class TableNotFoundError(KeyError):
    """Raised when a named table is missing or unreadable."""

    def __init__(self, name: str, reason: str | None = None):
        super().__init__(name)
        self.name = name
        self.reason = reason

    def __str__(self) -> str:
        if self.reason:
            return f"table {self.name!r} not available: {self.reason}"
        return f"table {self.name!r} not available"


class FontLoadError(ValueError):
    """Raised when a font file cannot be read or is not a font at all."""


@runtime_checkable
class TableProvider(Protocol):
    source: str

    def get_table(self, name: str) -> BaseModel: ...

    def os2(self) -> Os2Table: ...

    def head(self) -> HeadTable: ...


class BaseTableProvider(ABC):
    """Shared typed-view logic; subclasses only supply raw field values."""

    def __init__(self, source: str):
        self.source = source
        self._views: dict[str, BaseModel] = {}

    @abstractmethod
    def _raw_fields(self, name: str, wanted: list[str]) -> dict[str, Any]:
        """Return the raw values of `wanted` fields on table `name`."""
        ...

    def get_table(self, name: str) -> BaseModel:
        if name in self._views:
            return self._views[name]
        model = TABLE_MODELS.get(name)
        if model is None:
            raise TableNotFoundError(name, "no typed view for this table")

        wanted = [f.alias or key for key, f in model.model_fields.items()]
        raw = self._raw_fields(name, wanted)
        try:
            view = model.model_validate(raw)
        except ValidationError as e:
            raise TableNotFoundError(name, f"invalid field values: {e}") from e

        self._views[name] = view
        return view

    def os2(self) -> Os2Table:
        return self.get_table(OS2_TABLE)  # type: ignore[return-value]

    def head(self) -> HeadTable:
        return self.get_table(HEAD_TABLE)  # type: ignore[return-value]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.source!r})"


class TTFontTableProvider(BaseTableProvider):
    """Table provider backed by a fontTools TTFont."""

    def __init__(self, font: TTFont, source: str = "<memory>"):
        super().__init__(source)
        self.font = font

    @classmethod
    def from_bytes(cls, data: bytes, source: str = "<memory>") -> "TTFontTableProvider":
        try:
            font = TTFont(io.BytesIO(data), lazy=True)
        except (TTLibError, struct.error, AssertionError) as e:
            raise FontLoadError(f"{source}: not a readable font: {e}") from e
        return cls(font, source=source)

    def _raw_fields(self, name: str, wanted: list[str]) -> dict[str, Any]:
        if name not in self.font:
            raise TableNotFoundError(name)
        try:
            table = self.font[name]
        except (TTLibError, struct.error, AssertionError, KeyError) as e:
            logger.debug("Failed to decompile %s in %s: %s", name, self.source, e)
            raise TableNotFoundError(name, str(e)) from e

        missing = [field for field in wanted if not hasattr(table, field)]
        if missing:
            raise TableNotFoundError(name, f"missing fields {', '.join(missing)}")
        return {field: getattr(table, field) for field in wanted}


class StaticTableProvider(BaseTableProvider):
    """In-memory table provider built from plain field mappings."""

    def __init__(self, tables: dict[str, dict[str, Any]], source: str = "<static>"):
        super().__init__(source)
        self.tables = tables

    def _raw_fields(self, name: str, wanted: list[str]) -> dict[str, Any]:
        if name not in self.tables:
            raise TableNotFoundError(name)
        return dict(self.tables[name])


def open_font(path: Path | str) -> TTFontTableProvider:
    """Read a font file from disk and wrap it in a table provider."""
    p = Path(path)
    try:
        data = p.read_bytes()
    except OSError as e:
        raise FontLoadError(f"{p}: cannot read file: {e.strerror or e}") from e
    logger.debug("Read %d bytes from %s", len(data), p)
    return TTFontTableProvider.from_bytes(data, source=str(p))
