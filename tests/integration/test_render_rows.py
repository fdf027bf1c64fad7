from __future__ import annotations

from tests.helpers import pack_float, pack_int
from xlscell import (
    BlankCell,
    BookContext,
    EpochMode,
    FormulaCell,
    FormulaStringCell,
    LabelSSTCell,
    MulBlankCell,
    MulRKCell,
    NumberCell,
    RK,
    RKCell,
    XFRecord,
    XfRK,
    render_coords,
    render_row,
    render_row_values,
)


def _loaded_book(epoch: EpochMode = EpochMode.EPOCH_1900) -> BookContext:
    # What a loader would hand over after reading XF, FORMAT and SST records.
    return BookContext(
        styles=(XFRecord(0), XFRecord(2), XFRecord(14), XFRecord(164), XFRecord(165)),
        custom_formats={164: "dd mmm yyyy", 165: "#,##0.00"},
        shared_strings=("Item", "Price", "Bought"),
        epoch=epoch,
    )


def _invoice_row() -> list:
    return [
        LabelSSTCell(row=1, first_col=0, xf=0, sst=0),
        NumberCell(row=1, first_col=1, xf=1, value=19.989),
        RKCell(row=1, first_col=2, xf=3, rk=RK(pack_int(45000))),
        MulBlankCell(row=1, first_col=3, xfs=(0, 0), last_col=4),
        MulRKCell(
            row=1,
            first_col=5,
            items=(XfRK(4, RK(pack_int(150050, multiplied=True))), XfRK(2, RK(pack_float(45000.5)))),
            last_col=6,
        ),
        FormulaStringCell(row=1, first_col=7, text="ok"),
        FormulaCell(row=1, first_col=8, xf=0),
    ]


def test_render_row_dense_values() -> None:
    values = render_row_values(_invoice_row(), _loaded_book())
    assert values == [
        "Item",
        "19.99",
        "15 Mar 2023",
        "",
        "",
        "1500.5",
        "2023-03-15T12:00:00Z",
        "ok",
        "FormulaCol",
    ]


def test_render_row_fills_gaps() -> None:
    cells = [BlankCell(row=0, first_col=1), LabelSSTCell(row=0, first_col=3, xf=0, sst=1)]
    assert render_row(cells, _loaded_book()) == {1: "", 3: "Price"}
    assert render_row_values(cells, _loaded_book()) == ["", "", "", "Price"]
    assert render_row_values([], _loaded_book()) == []


def test_render_coords() -> None:
    coords = render_coords(_invoice_row(), _loaded_book())
    assert coords["A2"] == "Item"
    assert coords["E2"] == ""
    assert coords["G2"] == "2023-03-15T12:00:00Z"


def test_same_cells_under_1904_system() -> None:
    values = render_row_values(_invoice_row(), _loaded_book(EpochMode.EPOCH_1904))
    assert values[2] == "15 Mar 2027"
