from pathlib import Path
from typing import Any, TypeVar, overload

import yaml
from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError

from fontcheck.fonts.provider import FontLoadError, StaticTableProvider
from fontcheck.models.config import RunConfig

T = TypeVar("T")

DEFAULT_CONFIG_NAME = "fontcheck.yaml"


class TableDump(BaseModel):
    """YAML snapshot of table fields, e.g. taken from `ttx` output."""

    model_config = ConfigDict(extra="ignore")
    source: str | None = None
    tables: dict[str, dict[str, int]] = Field(default_factory=dict)


# -------------------------------
# Internal raw YAML reader (single source of truth)
# -------------------------------


def _read_yaml_raw(path: Path | str) -> Any:
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"File not found: {p}")

    try:
        text = p.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise ValueError(f"Unable to decode UTF-8 in {p}: {e}") from e

    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in {p}: {e}") from e

    if data is None:
        raise ValueError(f"Empty YAML file: {p}")

    return data


# -------------------------------
# Public typed YAML loader
# -------------------------------


@overload
def load_yaml_typed[T](path: Path | str, *, adapter: TypeAdapter[T]) -> T: ...


@overload
def load_yaml_typed[T](path: Path | str, *, model: type[T]) -> T: ...


def load_yaml_typed(
    path: Path | str,
    *,
    adapter: TypeAdapter[T] | None = None,
    model: type[T] | None = None,
) -> T:
    """Read YAML and validate/parse it into a typed object using Pydantic v2.

    Exactly one of {adapter, model} must be supplied.

    Example:
        load_yaml_typed("fontcheck.yaml", model=RunConfig)
    """
    if (adapter is None) == (model is None):
        raise ValueError("Provide exactly one of 'adapter' or 'model'.")

    data = _read_yaml_raw(path)

    try:
        if adapter is not None:
            return adapter.validate_python(data)
        return TypeAdapter(model).validate_python(data)  # type: ignore[arg-type]
    except ValidationError as e:
        # Normalize error so callers see the file path in the message
        raise ValueError(f"Invalid structure in {path}: {e}") from e


# -------------------------------
# Convenience helpers
# -------------------------------


def load_run_config(path: Path | str | None = None) -> RunConfig:
    """Load run configuration. Without a path, use ./fontcheck.yaml if present, else defaults."""
    if path is None:
        default = Path(DEFAULT_CONFIG_NAME)
        if not default.exists():
            return RunConfig()
        path = default
    return load_yaml_typed(path, model=RunConfig)


def load_table_dump(path: Path | str) -> StaticTableProvider:
    """Load a YAML table dump into an in-memory table provider."""
    dump = load_yaml_typed(path, model=TableDump)
    return StaticTableProvider(dump.tables, source=dump.source or str(path))


def open_table_dump(path: Path | str) -> StaticTableProvider:
    """Like `load_table_dump`, but unreadable dumps raise FontLoadError so runs can continue."""
    try:
        return load_table_dump(path)
    except (OSError, ValueError) as e:
        raise FontLoadError(str(e)) from e
