"""Variants whose turns span several plies."""

from __future__ import annotations

from typing import TYPE_CHECKING

from varichess.core.enums import Color, GameStatus, PieceType
from varichess.core.movement import Movement
from varichess.core.piece import Piece
from varichess.core.rules import Rules
from varichess.variants.base import Variant, VariantRules

if TYPE_CHECKING:
    from varichess.game.controller import GameController


class MultiMoveRules(VariantRules):
    """A fixed number of plies per turn; the opening turn has one."""

    def __init__(self, plies: int) -> None:
        self.plies = plies

    def turn_plies(self, controller: GameController, opening: bool) -> int:
        return 1 if opening else self.plies

    def evaluate(self, controller: GameController) -> GameStatus | None:
        return Rules.missing_kings(controller.board)


class ProgressiveRules(VariantRules):
    """Turn *n* consists of *n* plies."""

    def turn_plies(self, controller: GameController, opening: bool) -> int:
        return 1 if opening else controller.whole_moves + 1

    def evaluate(self, controller: GameController) -> GameStatus | None:
        return Rules.missing_kings(controller.board)


DUCK_ID = "duck"


class DuckRules(VariantRules):
    """Each turn ends by moving the neutral duck to another empty cell.

    The side to move wins when it has no move at all.
    """

    def turn_plies(self, controller: GameController, opening: bool) -> int:
        return 2

    def duck(self, controller: GameController) -> Piece:
        for piece in controller.pieces(Color.NEUTRAL):
            if piece.piece_type == PieceType.DUCK:
                return piece
        return Piece(Color.NEUTRAL, PieceType.DUCK, id=DUCK_ID)

    @staticmethod
    def is_duck_ply(controller: GameController) -> bool:
        return controller.plies_remaining == 1

    def forced_selection(self, controller: GameController) -> Piece | None:
        return self.duck(controller) if self.is_duck_ply(controller) else None

    def can_move(self, controller: GameController, piece: Piece) -> bool:
        if self.is_duck_ply(controller):
            return piece.piece_type == PieceType.DUCK
        return piece.color == controller.turn

    def filter_moves(
        self,
        controller: GameController,
        piece: Piece,
        movements: list[Movement],
        attacks_only: bool,
    ) -> list[Movement]:
        duck = self.duck(controller)
        if not duck.on_board:
            return movements
        legal: list[Movement] = []
        for movement in movements:
            destinations = tuple(
                d for d in movement.destinations if d.cell != duck.cell
            )
            if destinations:
                legal.append(movement.with_destinations(destinations))
        return legal

    def evaluate(self, controller: GameController) -> GameStatus | None:
        status = Rules.missing_kings(controller.board)
        if status is not None:
            return status
        if self.is_duck_ply(controller):
            return GameStatus.ACTIVE
        turn = controller.turn
        if Rules.has_movable_piece(controller, turn):
            return GameStatus.ACTIVE
        return GameStatus.win_for(turn)


DOUBLE_MOVE = Variant("Double Move Chess", "double", rules=MultiMoveRules(2))
TRIPLE_MOVE = Variant("Triple Move Chess", "triple", rules=MultiMoveRules(3))
PROGRESSIVE = Variant("Progressive", "progressive", rules=ProgressiveRules())
DUCK = Variant("Duck Chess", "duck", has_check=False, rules=DuckRules())
