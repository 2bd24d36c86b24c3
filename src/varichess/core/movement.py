"""Movement candidate value objects."""

from __future__ import annotations

from dataclasses import dataclass, replace

from varichess.core.piece import Piece
from varichess.core.types import Cell


@dataclass(frozen=True, slots=True)
class Destination:
    """One cell assignment of a movement.

    Either relocates the existing piece ``piece_id`` or, when ``spawn`` is
    set, materialises a new piece (reserve drop, traitor conversion, a duck
    entering the board). A ``rebirth`` relocation resets the piece's move
    count instead of incrementing it.
    """

    row: int
    column: int
    piece_id: str
    spawn: Piece | None = None
    rebirth: bool = False

    @property
    def cell(self) -> Cell:
        return Cell(self.row, self.column)


@dataclass(frozen=True, slots=True)
class Movement:
    """Immutable movement candidate.

    ``row``/``column`` is the primary target a user or engine points at.
    Captures are decoupled from destinations so en passant and area
    captures can vacate cells nobody lands on.
    """

    piece_id: str
    row: int
    column: int
    destinations: tuple[Destination, ...]
    captures: tuple[Cell, ...] = ()
    en_passant: str | None = None
    castle: bool = False
    breaks_king_side: bool = False
    breaks_queen_side: bool = False
    drop: bool = False

    @property
    def target(self) -> Cell:
        return Cell(self.row, self.column)

    def with_destinations(self, destinations: tuple[Destination, ...]) -> Movement:
        return replace(self, destinations=destinations)

    def with_captures(self, captures: tuple[Cell, ...]) -> Movement:
        return replace(self, captures=captures)

    def relocated_ids(self) -> set[str]:
        """Ids of existing pieces this movement moves (spawns excluded)."""
        return {d.piece_id for d in self.destinations if d.spawn is None}


def step(piece: Piece, row: int, column: int, **flags: object) -> Movement:
    """Single-destination movement of *piece* onto a cell."""
    return Movement(
        piece_id=piece.id,
        row=row,
        column=column,
        destinations=(Destination(row, column, piece.id),),
        **flags,  # type: ignore[arg-type]
    )
