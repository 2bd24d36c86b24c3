"""Board/game state snapshot — the unit stored in the undo history."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from typing import NamedTuple

from varichess.core.board import Board
from varichess.core.enums import PLAYER_COLORS, Color
from varichess.core.types import Cell


class LastMove(NamedTuple):
    """Cells of the most recent movement; ``source`` is ``None`` for spawns."""

    source: Cell | None
    target: Cell


class ReserveSlot(NamedTuple):
    """A reserve entry a player interacts with to start a drop."""

    color: Color
    piece_type: str


def _per_color_counts() -> dict[Color, int]:
    return {color: 0 for color in PLAYER_COLORS}


def _per_color_reserve() -> dict[Color, Counter[str]]:
    return {color: Counter() for color in PLAYER_COLORS}


@dataclass
class BoardState:
    """Everything needed to resume a game from this point.

    ``whole_moves`` counts completed turns of either side; ``halfmove_clock``
    counts plies since the last capture or pawn move.
    """

    board: Board
    turn: Color = Color.LIGHT
    plies_remaining: int = 1
    halfmove_clock: int = 0
    whole_moves: int = 0
    en_passant_id: str | None = None
    checks: dict[Color, int] = field(default_factory=_per_color_counts)
    reserve: dict[Color, Counter[str]] = field(default_factory=_per_color_reserve)
    last_move: LastMove | None = None

    def copy(self) -> BoardState:
        """Deep copy; pieces keep their ids."""
        return BoardState(
            board=self.board.copy(),
            turn=self.turn,
            plies_remaining=self.plies_remaining,
            halfmove_clock=self.halfmove_clock,
            whole_moves=self.whole_moves,
            en_passant_id=self.en_passant_id,
            checks=dict(self.checks),
            reserve={color: Counter(tally) for color, tally in self.reserve.items()},
            last_move=self.last_move,
        )
