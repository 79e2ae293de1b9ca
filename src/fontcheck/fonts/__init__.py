from .provider import (
    FontLoadError,
    StaticTableProvider,
    TableNotFoundError,
    TableProvider,
    TTFontTableProvider,
    open_font,
)

__all__ = [
    "FontLoadError",
    "StaticTableProvider",
    "TableNotFoundError",
    "TableProvider",
    "TTFontTableProvider",
    "open_font",
]
