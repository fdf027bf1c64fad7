from __future__ import annotations

from typing import Iterable

from .cells import AnyCell, render_cell
from .model import BookContext
from .utils import rowcol_to_coord


def render_row(cells: Iterable[AnyCell], book: BookContext) -> dict[int, str]:
    """Map each spanned column to its text; later cells win on overlap."""
    values: dict[int, str] = {}
    for cell in cells:
        for offset, text in enumerate(render_cell(cell, book)):
            values[cell.first_col + offset] = text
    return values


def render_row_values(cells: Iterable[AnyCell], book: BookContext) -> list[str]:
    values = render_row(cells, book)
    if not values:
        return []
    return [values.get(col, "") for col in range(max(values) + 1)]


def render_coords(cells: Iterable[AnyCell], book: BookContext) -> dict[str, str]:
    result: dict[str, str] = {}
    for cell in cells:
        for offset, text in enumerate(render_cell(cell, book)):
            result[rowcol_to_coord(cell.row, cell.first_col + offset)] = text
    return result
