from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field

UInt16 = Annotated[int, Field(ge=0, le=0xFFFF)]
Int16 = Annotated[int, Field(ge=-0x8000, le=0x7FFF)]

OS2_TABLE = "OS/2"
HEAD_TABLE = "head"


class Os2Table(BaseModel):
    """Horizontal-metrics overview fields read from the OS/2 table."""

    model_config = ConfigDict(extra="ignore", frozen=True, populate_by_name=True)
    us_win_ascent: UInt16 = Field(alias="usWinAscent")
    us_win_descent: UInt16 = Field(alias="usWinDescent")


class HeadTable(BaseModel):
    """Global glyph extents read from the head table."""

    model_config = ConfigDict(extra="ignore", frozen=True, populate_by_name=True)
    y_max: Int16 = Field(alias="yMax")
    y_min: Int16 = Field(alias="yMin")
