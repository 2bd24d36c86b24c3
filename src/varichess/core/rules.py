"""High-level rules: king structure, mate/stalemate, no-progress detection."""

from __future__ import annotations

from typing import TYPE_CHECKING

from varichess.core.board import Board
from varichess.core.enums import PLAYER_COLORS, Color, GameStatus

if TYPE_CHECKING:
    from varichess.game.controller import GameController


class Rules:
    """Static rule-checker that operates on a :class:`GameController`."""

    @staticmethod
    def missing_kings(board: Board) -> GameStatus | None:
        """Result when kings have been removed from the board.

        A lone surviving king wins for its side; no kings at all is a
        stalemate. ``None`` while two or more kings remain.
        """
        kings = [k for color in PLAYER_COLORS for k in board.kings(color)]
        if len(kings) == 1:
            return GameStatus.win_for(kings[0].color)
        if not kings:
            return GameStatus.STALEMATE
        return None

    @staticmethod
    def king_structure(board: Board) -> GameStatus | None:
        """Terminal status implied by a malformed king set, if any."""
        light = len(board.kings(Color.LIGHT))
        dark = len(board.kings(Color.DARK))
        if light > 1 or dark > 1:
            return GameStatus.STALEMATE
        if light == 0 and dark == 0:
            return GameStatus.STALEMATE
        if light == 0:
            return GameStatus.DARK_WINS
        if dark == 0:
            return GameStatus.LIGHT_WINS
        return None

    @staticmethod
    def is_in_check(controller: GameController, color: Color | None = None) -> bool:
        color = color if color is not None else controller.turn
        return controller.checked_king(color) is not None

    @staticmethod
    def has_movable_piece(controller: GameController, color: Color) -> bool:
        return any(
            controller.legal_moves_for(piece)
            for piece in controller.pieces(color)
        )

    @staticmethod
    def is_no_progress(controller: GameController) -> bool:
        limit = controller.variant.no_progress_limit
        return limit is not None and controller.halfmove_clock >= limit

    @staticmethod
    def game_status(controller: GameController) -> GameStatus:
        """Default evaluation, used after the variant's own evaluator."""
        if not controller.variant.king_optional:
            status = Rules.king_structure(controller.board)
            if status is not None:
                return status

        turn = controller.turn
        if not Rules.has_movable_piece(controller, turn):
            if Rules.is_in_check(controller, turn):
                return GameStatus.win_for(turn.opposite)
            return GameStatus.STALEMATE

        if Rules.is_no_progress(controller):
            return GameStatus.STALEMATE
        return GameStatus.ACTIVE
