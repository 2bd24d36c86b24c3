"""Qt bridge exposing a :class:`GameController` through signals and slots."""

from __future__ import annotations

from PyQt6.QtCore import QObject, pyqtSignal, pyqtSlot

from varichess.core.enums import GameStatus
from varichess.core.movement import Movement
from varichess.core.piece import Piece
from varichess.game.controller import GameController
from varichess.game.state import BoardState
from varichess.game.suggestion import apply_suggestion


class ControllerBridge(QObject):
    """GUI-thread relay: controller callbacks become Qt signals."""

    move_made = pyqtSignal(object)  # Movement
    promoted = pyqtSignal(object)  # Piece
    game_over = pyqtSignal(str)  # GameStatus value
    board_reset = pyqtSignal()

    __slots__ = ("_controller",)

    def __init__(self, controller: GameController, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._controller = controller
        controller.events.on_move.append(self._on_move)
        controller.events.on_promote.append(self._on_promote)
        controller.events.on_game_over.append(self._on_game_over)

    @property
    def controller(self) -> GameController:
        return self._controller

    @pyqtSlot()
    def new_game(self) -> None:
        self._controller.new_game()
        self.board_reset.emit()

    @pyqtSlot(result=bool)
    def undo(self) -> bool:
        if not self._controller.undo():
            return False
        self.board_reset.emit()
        return True

    @pyqtSlot(result=bool)
    def redo(self) -> bool:
        if not self._controller.redo():
            return False
        self.board_reset.emit()
        return True

    @pyqtSlot(str, result=bool)
    def submit_suggestion(self, reply: str) -> bool:
        """Apply an engine reply such as ``"bestmove e2e4"``."""
        return apply_suggestion(self._controller, reply)

    # ── Controller callbacks ─────────────────────────────────────────────

    def _on_move(self, movement: Movement, _state: BoardState) -> None:
        self.move_made.emit(movement)

    def _on_promote(self, piece: Piece) -> None:
        self.promoted.emit(piece)

    def _on_game_over(self, status: GameStatus) -> None:
        self.game_over.emit(status.value)
