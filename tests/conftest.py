import io

import pytest
from fontTools.fontBuilder import FontBuilder
from fontTools.pens.ttGlyphPen import TTGlyphPen

from fontcheck.fonts.provider import StaticTableProvider


def make_tables(y_max=1000, y_min=-200, win_ascent=1500, win_descent=300, drop=()):
    """Raw table fields for a StaticTableProvider."""
    tables = {
        "OS/2": {"usWinAscent": win_ascent, "usWinDescent": win_descent},
        "head": {"yMax": y_max, "yMin": y_min},
    }
    for name in drop:
        tables.pop(name)
    return tables


def _box(y_min, y_max):
    pen = TTGlyphPen(None)
    pen.moveTo((0, y_min))
    pen.lineTo((0, y_max))
    pen.lineTo((500, y_max))
    pen.lineTo((500, y_min))
    pen.closePath()
    return pen.glyph()


def build_font_bytes(y_max=1000, y_min=-200, win_ascent=1500, win_descent=300, drop_os2=False) -> bytes:
    """Compile a minimal TrueType font whose glyph bounds set head.yMax/yMin."""
    fb = FontBuilder(1000, isTTF=True)
    fb.setupGlyphOrder([".notdef", "A"])
    fb.setupCharacterMap({ord("A"): "A"})
    fb.setupGlyf({".notdef": _box(y_min, y_max), "A": _box(y_min, y_max)})
    fb.setupHorizontalMetrics({".notdef": (500, 0), "A": (500, 0)})
    fb.setupHorizontalHeader(ascent=max(y_max, 0), descent=min(y_min, 0))
    fb.setupNameTable({"familyName": "Fontcheck Test", "styleName": "Regular"})
    fb.setupOS2(usWinAscent=win_ascent, usWinDescent=win_descent)
    fb.setupPost()
    if drop_os2:
        del fb.font["OS/2"]

    buf = io.BytesIO()
    fb.save(buf)
    return buf.getvalue()


@pytest.fixture
def valid_font():
    """Example 1: yMax=1000, yMin=-200, winAscent=1500, winDescent=300."""
    return StaticTableProvider(make_tables(), source="valid.ttf")


@pytest.fixture
def font_factory():
    def _make(source="test.ttf", **kwargs):
        return StaticTableProvider(make_tables(**kwargs), source=source)

    return _make


@pytest.fixture
def font_file(tmp_path):
    """Write a compiled font to disk and return its path."""

    def _write(name="test.ttf", **kwargs):
        path = tmp_path / name
        path.write_bytes(build_font_bytes(**kwargs))
        return path

    return _write
