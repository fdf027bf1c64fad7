from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union

from .codec.numfmt import render_number, render_rk
from .codec.rk import RK
from .model import BookContext
from .utils import rowcol_to_coord


@dataclass(frozen=True, slots=True)
class XfRK:
    xf: int
    rk: RK

    def text(self, book: BookContext) -> str:
        return render_rk(book, self.xf, self.rk)


@dataclass(frozen=True, slots=True)
class Cell:
    """Position shared by every cell record; renders as a placeholder on its own."""

    row: int
    first_col: int

    @property
    def last_col(self) -> int:
        return self.first_col

    @property
    def span(self) -> int:
        return self.last_col - self.first_col + 1

    @property
    def coord(self) -> str:
        return rowcol_to_coord(self.row, self.first_col)

    def render(self, book: BookContext) -> list[str]:
        return render_cell(self, book)


@dataclass(frozen=True, slots=True)
class BlankCell(Cell):
    xf: int = 0


@dataclass(frozen=True, slots=True)
class NumberCell(Cell):
    xf: int
    value: float


@dataclass(frozen=True, slots=True)
class RKCell(Cell):
    xf: int
    rk: RK


@dataclass(frozen=True, slots=True)
class LabelSSTCell(Cell):
    xf: int
    sst: int


@dataclass(frozen=True, slots=True)
class LabelCell(Cell):
    xf: int
    text: str


@dataclass(frozen=True, slots=True)
class FormulaStringCell(Cell):
    text: str


@dataclass(frozen=True, slots=True)
class FormulaCell(Cell):
    """Formula record kept as parsed bytes; its tokens are not evaluated."""

    xf: int
    result: bytes = b""
    flags: int = 0
    tokens: bytes = b""


def _check_run(cell: Cell, count: int) -> None:
    if cell.last_col < cell.first_col:
        raise ValueError(f"Run at {cell.coord} ends before it starts: {cell.first_col}..{cell.last_col}")
    if count != cell.span:
        raise ValueError(f"Run at {cell.coord} spans {cell.span} columns but carries {count} values")


@dataclass(frozen=True, slots=True)
class MulRKCell(Cell):
    items: tuple[XfRK, ...]
    last_col: int = field()  # shadows Cell.last_col

    def __post_init__(self) -> None:
        _check_run(self, len(self.items))


@dataclass(frozen=True, slots=True)
class MulBlankCell(Cell):
    xfs: tuple[int, ...]
    last_col: int = field()  # shadows Cell.last_col

    def __post_init__(self) -> None:
        _check_run(self, len(self.xfs))


AnyCell = Union[
    Cell,
    BlankCell,
    NumberCell,
    RKCell,
    LabelSSTCell,
    LabelCell,
    FormulaStringCell,
    FormulaCell,
    MulRKCell,
    MulBlankCell,
]


def render_cell(cell: AnyCell, book: BookContext) -> list[str]:
    """Text for each column the cell spans, in column order."""
    if isinstance(cell, BlankCell):
        return [""]
    if isinstance(cell, MulBlankCell):
        return ["" for _ in cell.xfs]
    if isinstance(cell, RKCell):
        return [render_rk(book, cell.xf, cell.rk)]
    if isinstance(cell, MulRKCell):
        return [item.text(book) for item in cell.items]
    if isinstance(cell, NumberCell):
        return [render_number(book, cell.xf, cell.value)]
    if isinstance(cell, LabelSSTCell):
        return [book.shared_string(cell.sst)]
    if isinstance(cell, (LabelCell, FormulaStringCell)):
        return [cell.text]
    if isinstance(cell, FormulaCell):
        return [book.options.formula_placeholder]
    return [book.options.default_placeholder]
