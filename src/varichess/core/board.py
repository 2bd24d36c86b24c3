"""Board - piece placement on a configurable rectangular grid."""

from __future__ import annotations

from collections.abc import Iterator, Sequence

from varichess.core.enums import Color, PieceType
from varichess.core.piece import Piece
from varichess.core.types import Cell, file_letter, in_bounds

Layout = Sequence[Sequence[Piece | None]]


class Board:
    """Mutable ``rows × columns`` grid of optional pieces.

    Placing a piece keeps its ``row``/``column`` in sync with its slot.
    """

    __slots__ = ("rows", "columns", "_tiles")

    def __init__(self, rows: int = 8, columns: int = 8) -> None:
        if rows < 1 or columns < 1:
            raise ValueError(f"Invalid board extent: {rows}x{columns}")
        self.rows = rows
        self.columns = columns
        self._tiles: list[list[Piece | None]] = [
            [None] * columns for _ in range(rows)
        ]

    # -- Element access -----------------------------------------------------

    def get(self, row: int, column: int) -> Piece | None:
        """Occupant of a cell; ``None`` when empty or out of bounds."""
        if not in_bounds(row, column, self.rows, self.columns):
            return None
        return self._tiles[row][column]

    def __getitem__(self, cell: Cell) -> Piece | None:
        return self.get(cell.row, cell.column)

    def place(self, piece: Piece, row: int, column: int) -> Piece | None:
        """Put *piece* on a cell, returning the occupant it replaced."""
        replaced = self._tiles[row][column]
        self._tiles[row][column] = piece
        piece.row = row
        piece.column = column
        return replaced

    def remove(self, row: int, column: int) -> Piece | None:
        """Empty a cell, returning its former occupant."""
        if not in_bounds(row, column, self.rows, self.columns):
            return None
        piece = self._tiles[row][column]
        self._tiles[row][column] = None
        return piece

    def lift(self, piece: Piece) -> None:
        """Vacate *piece*'s slot if it currently holds that piece."""
        if piece.on_board and self.get(piece.row, piece.column) is piece:
            self._tiles[piece.row][piece.column] = None

    def is_empty(self, row: int, column: int) -> bool:
        return self.get(row, column) is None

    def contains(self, row: int, column: int) -> bool:
        return in_bounds(row, column, self.rows, self.columns)

    # -- Query helpers ------------------------------------------------------

    def __iter__(self) -> Iterator[Piece]:
        for row in self._tiles:
            for piece in row:
                if piece is not None:
                    yield piece

    def pieces(self, color: Color | None = None) -> list[Piece]:
        """All placed pieces, optionally only *color*'s, in row-major order."""
        if color is None:
            return list(self)
        return [p for p in self if p.color == color]

    def kings(self, color: Color) -> list[Piece]:
        return [p for p in self if p.color == color and p.piece_type == PieceType.KING]

    def find(self, piece_id: str) -> Piece | None:
        for piece in self:
            if piece.id == piece_id:
                return piece
        return None

    def empty_cells(self) -> list[Cell]:
        return [
            Cell(row, column)
            for row in range(self.rows)
            for column in range(self.columns)
            if self._tiles[row][column] is None
        ]

    def __len__(self) -> int:
        return sum(1 for _ in self)

    # -- Mutation / copying -------------------------------------------------

    def copy(self) -> Board:
        """Deep copy: pieces are copied with their ids."""
        b = Board(self.rows, self.columns)
        b._tiles = [
            [None if p is None else p.copy() for p in row] for row in self._tiles
        ]
        return b

    def clear(self) -> None:
        self._tiles = [[None] * self.columns for _ in range(self.rows)]

    # -- Factory ------------------------------------------------------------

    @classmethod
    def from_layout(cls, layout: Layout, columns: int | None = None) -> Board:
        """Build a board from a row-major layout; ragged rows are padded."""
        rows = len(layout)
        width = columns if columns is not None else max(len(r) for r in layout)
        b = cls(rows, width)
        for row_idx, row in enumerate(layout):
            for col_idx, piece in enumerate(row):
                if piece is not None:
                    b.place(piece, row_idx, col_idx)
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._tiles == other._tiles

    def __repr__(self) -> str:
        lines: list[str] = []
        for row_idx, row in enumerate(self._tiles):
            cells = " ".join(str(p) if p else "." for p in row)
            lines.append(f"{self.rows - row_idx:>2} {cells}")
        files = " ".join(file_letter(c) for c in range(self.columns))
        lines.append(f"   {files}")
        return "\n".join(lines)
