"""Cell type and coordinate helpers.

Board layout (row-major, dark on top):
    row 0           = dark back row   (rank ``rows``)
    row ``rows - 1`` = light back row  (rank 1)
    column 0        = file ``a``
"""

from __future__ import annotations

from typing import NamedTuple

from varichess.core.enums import Color


class Cell(NamedTuple):
    """A board coordinate. Off-board pieces report ``Cell(-1, -1)``."""

    row: int
    column: int


def in_bounds(row: int, column: int, rows: int, columns: int) -> bool:
    return 0 <= row < rows and 0 <= column < columns


def file_letter(column: int) -> str:
    """File letter for *column*, e.g. 0 → 'a'."""
    return chr(ord("a") + column)


def cell_name(cell: Cell, rows: int = 8) -> str:
    """Human-readable name, e.g. ``Cell(6, 4)`` → 'e2' on an 8-row board."""
    return f"{file_letter(cell.column)}{rows - cell.row}"


def parse_cell(name: str, rows: int = 8, columns: int = 8) -> Cell:
    """Parse a cell name, e.g. 'e4' → ``Cell(4, 4)`` on an 8×8 board."""
    if len(name) < 2 or not name[0].isalpha() or not name[1:].isdigit():
        raise ValueError(f"Invalid cell name: {name!r}")
    column = ord(name[0].lower()) - ord("a")
    row = rows - int(name[1:])
    if not in_bounds(row, column, rows, columns):
        raise ValueError(f"Cell out of bounds: {name!r}")
    return Cell(row, column)


def back_row_of(color: Color, rows: int) -> int:
    """Row index of *color*'s back row."""
    return rows - 1 if color == Color.LIGHT else 0


def pawn_row_of(color: Color, rows: int) -> int:
    """Row index of *color*'s starting pawn band."""
    return rows - 2 if color == Color.LIGHT else 1


def forward_of(color: Color) -> int:
    """Row delta of a forward step for *color*."""
    return -1 if color == Color.LIGHT else 1
