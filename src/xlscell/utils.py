from __future__ import annotations


def index_to_col(index: int) -> str:
    """Column label for a zero-based column index (0 -> "A")."""
    if index < 0:
        raise ValueError("Column index must be >= 0")
    result: list[str] = []
    value = index + 1
    while value > 0:
        value, rem = divmod(value - 1, 26)
        result.append(chr(65 + rem))
    return "".join(reversed(result))


def rowcol_to_coord(row: int, col: int) -> str:
    if row < 0 or col < 0:
        raise ValueError("row/col must be >= 0")
    return f"{index_to_col(col)}{row + 1}"
