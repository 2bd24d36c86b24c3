"""Variants that keep standard captures and a single-ply turn."""

from __future__ import annotations

import random
from typing import TYPE_CHECKING

from varichess.core import legality, move_generator
from varichess.core.enums import Color, GameStatus, PieceType
from varichess.core.layouts import (
    CAPABLANCA_BACK_ROW,
    GOTHIC_BACK_ROW,
    Row,
    horde_layout,
    queens_layout,
    racing_layout,
    random_back_row,
    standard_layout,
)
from varichess.core.movement import Movement
from varichess.core.piece import Piece
from varichess.core.types import Cell
from varichess.variants.base import Variant, VariantRules

if TYPE_CHECKING:
    from varichess.game.controller import GameController


class KingOfTheHillRules(VariantRules):
    """A king reaching one of the four centre cells wins."""

    HILL: tuple[Cell, ...] = (Cell(3, 3), Cell(3, 4), Cell(4, 3), Cell(4, 4))

    def evaluate(self, controller: GameController) -> GameStatus | None:
        for cell in self.HILL:
            piece = controller.piece_at(cell.row, cell.column)
            if piece is not None and piece.piece_type == PieceType.KING:
                return GameStatus.win_for(piece.color)
        return None


class HordeRules(VariantRules):
    """Light plays a pawn army without a king and loses when it is gone."""

    def initial_layout(self, variant: Variant) -> list[Row]:
        return horde_layout()

    def evaluate(self, controller: GameController) -> GameStatus | None:
        if not controller.pieces(Color.LIGHT):
            return GameStatus.DARK_WINS
        return None


class Chess960Rules(VariantRules):
    """Randomised back row shared by both sides."""

    def __init__(self, seed: int | None = None) -> None:
        self._rng = random.Random(seed)

    def initial_layout(self, variant: Variant) -> list[Row]:
        return standard_layout(random_back_row(self._rng))


class ThreeCheckRules(VariantRules):
    """Being checked a third time loses."""

    LIMIT = 3

    def evaluate(self, controller: GameController) -> GameStatus | None:
        for color in (Color.LIGHT, Color.DARK):
            if controller.checks[color] >= self.LIMIT:
                return GameStatus.win_for(color.opposite)
        return None


class RacingKingsRules(VariantRules):
    """First king to the far row wins; nobody may give or remain in check."""

    def initial_layout(self, variant: Variant) -> list[Row]:
        return racing_layout()

    def evaluate(self, controller: GameController) -> GameStatus | None:
        for column in range(controller.board.columns):
            piece = controller.piece_at(0, column)
            if piece is not None and piece.piece_type == PieceType.KING:
                return GameStatus.win_for(piece.color)
        return None

    def filter_moves(
        self,
        controller: GameController,
        piece: Piece,
        movements: list[Movement],
        attacks_only: bool,
    ) -> list[Movement]:
        if attacks_only:
            return movements
        legal: list[Movement] = []
        for movement in movements:
            future = controller.clone()
            future.apply_movement(movement, track_checks=False)
            if future.checked_king(Color.LIGHT) or future.checked_king(Color.DARK):
                continue
            legal.append(movement)
        return legal


class CheckingMateRules(VariantRules):
    """A move may give check only when it is checkmate."""

    def filter_moves(
        self,
        controller: GameController,
        piece: Piece,
        movements: list[Movement],
        attacks_only: bool,
    ) -> list[Movement]:
        if attacks_only:
            return movements
        legal: list[Movement] = []
        for movement in movements:
            future = controller.clone()
            future.apply_movement(movement, track_checks=False)
            defender = future.turn
            if future.checked_king(defender) is not None and _can_respond(
                future, defender
            ):
                continue
            legal.append(movement)
        return legal


def _can_respond(controller: GameController, color: Color) -> bool:
    return any(
        legality.builtin_filter(controller, p, move_generator.generate(controller, p))
        for p in controller.pieces(color)
    )


class AllQueensRules(VariantRules):
    """5×5 queens that never capture; four of a colour in a line wins."""

    RUN = 4

    def initial_layout(self, variant: Variant) -> list[Row]:
        return queens_layout()

    def filter_moves(
        self,
        controller: GameController,
        piece: Piece,
        movements: list[Movement],
        attacks_only: bool,
    ) -> list[Movement]:
        board = controller.board
        quiet: list[Movement] = []
        for movement in movements:
            destinations = tuple(
                d for d in movement.destinations if board.is_empty(d.row, d.column)
            )
            if destinations:
                quiet.append(movement.with_destinations(destinations))
        return quiet

    def evaluate(self, controller: GameController) -> GameStatus | None:
        board = controller.board
        for dr, dc in ((0, 1), (1, 0), (1, 1), (1, -1)):
            for row in range(board.rows):
                for column in range(board.columns):
                    color = self._run_color(controller, row, column, dr, dc)
                    if color is not None:
                        return GameStatus.win_for(color)
        return None

    def _run_color(
        self, controller: GameController, row: int, column: int, dr: int, dc: int
    ) -> Color | None:
        first = controller.piece_at(row, column)
        if first is None or not first.color.is_partisan:
            return None
        for n in range(1, self.RUN):
            piece = controller.piece_at(row + dr * n, column + dc * n)
            if piece is None or piece.color != first.color:
                return None
        return first.color


class WideBoardRules(VariantRules):
    """Ten-column board with a custom back row."""

    def __init__(self, back_row: tuple[str, ...]) -> None:
        self._back_row = back_row

    def initial_layout(self, variant: Variant) -> list[Row]:
        return standard_layout(self._back_row)


VANILLA = Variant()
KING_OF_THE_HILL = Variant(
    "King of the Hill", "koth", rules=KingOfTheHillRules()
)
HORDE = Variant("Horde", "horde", king_optional=True, rules=HordeRules())
CHESS_960 = Variant("960", "960", rules=Chess960Rules())
THREE_CHECK = Variant("Three Check", "three", rules=ThreeCheckRules())
RACING_KINGS = Variant("Racing Kings", "race", rules=RacingKingsRules())
CHECKLESS = Variant("Checkless", "checkless", rules=CheckingMateRules())
ALL_QUEENS = Variant(
    "All Queens",
    "queens",
    rows=5,
    columns=5,
    has_check=False,
    king_optional=True,
    rules=AllQueensRules(),
)
GOTHIC = Variant(
    "Gothic", "gothic", columns=10, rules=WideBoardRules(GOTHIC_BACK_ROW)
)
CAPABLANCA = Variant(
    "Capablanca", "capablanca", columns=10, rules=WideBoardRules(CAPABLANCA_BACK_ROW)
)
