from .api import render_coords, render_row, render_row_values
from .cells import (
    BlankCell,
    Cell,
    FormulaCell,
    FormulaStringCell,
    LabelCell,
    LabelSSTCell,
    MulBlankCell,
    MulRKCell,
    NumberCell,
    RKCell,
    XfRK,
    render_cell,
)
from .codec.dates import SerialTimestamp, from_excel_serial
from .codec.rk import RK
from .errors import RKIsIntegerError, StyleLookupError, XlsCellError
from .model import BookContext, EpochMode, RenderOptions, XFRecord

__all__ = [
    "BlankCell",
    "BookContext",
    "Cell",
    "EpochMode",
    "FormulaCell",
    "FormulaStringCell",
    "LabelCell",
    "LabelSSTCell",
    "MulBlankCell",
    "MulRKCell",
    "NumberCell",
    "RK",
    "RKCell",
    "RKIsIntegerError",
    "RenderOptions",
    "SerialTimestamp",
    "StyleLookupError",
    "XFRecord",
    "XfRK",
    "XlsCellError",
    "from_excel_serial",
    "render_cell",
    "render_coords",
    "render_row",
    "render_row_values",
]
