"""Variants that change what a capture does."""

from __future__ import annotations

from typing import TYPE_CHECKING

from varichess.core import move_generator
from varichess.core.enums import Color, GameStatus, PieceType, Trait
from varichess.core.layouts import Row, back_row, empty_row, pawns
from varichess.core.legality import clamp
from varichess.core.movement import Movement
from varichess.core.piece import Piece
from varichess.core.rules import Rules
from varichess.variants.base import Variant, VariantRules

if TYPE_CHECKING:
    from varichess.game.controller import GameController


class AtomicRules(VariantRules):
    """Captures explode; a move may not blow up the mover's own king."""

    piece_traits = frozenset({Trait.ATOMIC})

    def __init__(self, spare_pawns: bool = True) -> None:
        self.spare_pawns_in_blast = spare_pawns

    def filter_moves(
        self,
        controller: GameController,
        piece: Piece,
        movements: list[Movement],
        attacks_only: bool,
    ) -> list[Movement]:
        if attacks_only:
            return movements
        color = piece.color
        legal: list[Movement] = []
        for movement in movements:
            if movement.captures:
                future = controller.clone()
                future.apply_movement(movement, track_checks=False)
                if not future.board.kings(color):
                    continue
            legal.append(movement)
        return legal

    def evaluate(self, controller: GameController) -> GameStatus | None:
        return Rules.missing_kings(controller.board)


class CirceRules(VariantRules):
    """Captured pieces are reborn on their home cell when it is free."""

    piece_traits = frozenset({Trait.CIRCE})


class TraitorRules(VariantRules):
    """Pawns convert the pieces they capture."""

    def traits_for(self, piece_type: str) -> frozenset[Trait]:
        if piece_type == PieceType.PAWN:
            return frozenset({Trait.TRAITOR})
        return frozenset()

    def initial_layout(self, variant: Variant) -> list[Row]:
        traitor = frozenset({Trait.TRAITOR})
        return [
            back_row(Color.DARK),
            pawns(Color.DARK, traits=traitor),
            *(empty_row() for _ in range(4)),
            pawns(Color.LIGHT, traits=traitor),
            back_row(Color.LIGHT),
        ]


def _captures(controller: GameController, piece: Piece, movement: Movement) -> bool:
    if movement.captures:
        return True
    for destination in movement.destinations:
        occupant = controller.piece_at(destination.row, destination.column)
        if (
            occupant is not None
            and occupant.color.is_partisan
            and occupant.color != piece.color
        ):
            return True
    return False


class AntichessRules(VariantRules):
    """Captures are compulsory; a side left without moves wins."""

    def promotions(self, controller: GameController, color: Color) -> list[str]:
        return super().promotions(controller, color) + [PieceType.KING]

    def filter_moves(
        self,
        controller: GameController,
        piece: Piece,
        movements: list[Movement],
        attacks_only: bool,
    ) -> list[Movement]:
        if attacks_only:
            return movements
        if self._capture_available(controller, piece.color):
            return [m for m in movements if _captures(controller, piece, m)]
        return [m for m in movements if not m.castle]

    def _capture_available(self, controller: GameController, color: Color) -> bool:
        board = controller.board
        for other in controller.pieces(color):
            for candidate in move_generator.generate(controller, other):
                movement = clamp(board, candidate)
                if movement is not None and _captures(controller, other, movement):
                    return True
        return False

    def evaluate(self, controller: GameController) -> GameStatus | None:
        turn = controller.turn
        if not Rules.has_movable_piece(controller, turn):
            return GameStatus.win_for(turn)
        return None


ATOMIC = Variant("Atomic", "atomic", rules=AtomicRules())
CIRCE = Variant("Circe", "circe", rules=CirceRules())
TRAITOR = Variant("Traitor", "traitor", rules=TraitorRules())
ANTICHESS = Variant(
    "Antichess", "anti", has_check=False, king_optional=True, rules=AntichessRules()
)
