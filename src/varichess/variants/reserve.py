"""Drop variants: captured pieces join the capturer's reserve."""

from __future__ import annotations

from typing import TYPE_CHECKING

from varichess.core.enums import Color, GameStatus, PieceType, Trait
from varichess.core.layouts import DEFAULT_PROMOTIONS, Row, dragonfly_layout
from varichess.core.movement import Movement
from varichess.core.piece import Piece
from varichess.core.rules import Rules
from varichess.game.state import ReserveSlot
from varichess.variants.base import Variant, VariantRules

if TYPE_CHECKING:
    from varichess.game.controller import GameController


class ReserveRules(VariantRules):
    """Selecting a reserve slot of the side to move starts a drop."""

    droppable: tuple[str, ...] = (
        PieceType.PAWN,
        PieceType.KNIGHT,
        PieceType.BISHOP,
        PieceType.ROOK,
        PieceType.QUEEN,
    )

    def drop_piece(self, controller: GameController, piece_type: str) -> Piece | None:
        """Off-board piece for a drop, if the side to move holds one."""
        turn = controller.turn
        if piece_type not in self.droppable or controller.reserve(turn)[piece_type] <= 0:
            return None
        return Piece(turn, piece_type, traits=frozenset({Trait.DROP}))

    def interact(self, controller: GameController, target: object) -> bool:
        if not isinstance(target, ReserveSlot) or target.color != controller.turn:
            return False
        piece = self.drop_piece(controller, target.piece_type)
        return piece is not None and controller.select_piece(piece)

    def after_execute(self, controller: GameController, movement: Movement) -> None:
        if not movement.drop:
            return
        spawn = movement.destinations[0].spawn
        if spawn is not None:
            controller.reserve(controller.turn)[spawn.piece_type] -= 1

    def has_legal_drop(self, controller: GameController) -> bool:
        for piece_type in self.droppable:
            piece = self.drop_piece(controller, piece_type)
            if piece is not None and controller.legal_moves_for(piece):
                return True
        return False

    def evaluate(self, controller: GameController) -> GameStatus | None:
        status = Rules.missing_kings(controller.board)
        if status is not None:
            return status
        # A drop can still block a check when no board piece can move.
        if not Rules.has_movable_piece(
            controller, controller.turn
        ) and self.has_legal_drop(controller):
            return GameStatus.ACTIVE
        return None


class DragonflyRules(ReserveRules):
    """7×7 drops; pawns promote only to own pieces the opponent captured."""

    droppable = DEFAULT_PROMOTIONS

    def initial_layout(self, variant: Variant) -> list[Row]:
        return dragonfly_layout()

    def promotions(self, controller: GameController, color: Color) -> list[str]:
        lost = controller.reserve(color.opposite)
        return [t for t in DEFAULT_PROMOTIONS if lost[t] > 0]

    def after_promote(self, controller: GameController, piece: Piece) -> None:
        controller.reserve(piece.color.opposite)[piece.piece_type] -= 1

    def filter_moves(
        self,
        controller: GameController,
        piece: Piece,
        movements: list[Movement],
        attacks_only: bool,
    ) -> list[Movement]:
        if (
            attacks_only
            or piece.piece_type != PieceType.PAWN
            or self.promotions(controller, piece.color)
        ):
            return movements
        last_rows = (0, controller.board.rows - 1)
        legal: list[Movement] = []
        for movement in movements:
            destinations = tuple(
                d
                for d in movement.destinations
                if not (d.piece_id == piece.id and d.row in last_rows)
            )
            if destinations:
                legal.append(movement.with_destinations(destinations))
        return legal


CRAZYHOUSE = Variant("Crazy House", "crazy", rules=ReserveRules())
DRAGONFLY = Variant(
    "Dragonfly",
    "dragonfly",
    rows=7,
    columns=7,
    castle_from_left=1,
    rules=DragonflyRules(),
)
