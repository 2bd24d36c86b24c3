"""Game management layer — controller, state snapshots, engine replies.

Quick start::

    from varichess.game import GameController
    from varichess.variants import KING_OF_THE_HILL

    ctrl = GameController(KING_OF_THE_HILL)
    ctrl.new_game()
    pawn = ctrl.piece_at(6, 4)
    ctrl.execute_move(ctrl.legal_moves_for(pawn)[-1])

The PyQt6 bridge lives in :mod:`varichess.game.qt_bridge` and is imported
explicitly, so the rest of the package works without Qt installed.
"""

from varichess.game.controller import GameController, GameEvents
from varichess.game.state import BoardState, LastMove, ReserveSlot
from varichess.game.suggestion import apply_suggestion, find_suggested_move

__all__ = [
    "BoardState",
    "GameController",
    "GameEvents",
    "LastMove",
    "ReserveSlot",
    "apply_suggestion",
    "find_suggested_move",
]
