"""Tests for the Qt controller bridge."""

from __future__ import annotations

from PyQt6.QtTest import QSignalSpy

from varichess.core.enums import GameStatus, PieceType
from varichess.core.movement import Movement
from varichess.core.piece import Piece
from varichess.core.types import Cell
from varichess.game.controller import GameController
from varichess.game.qt_bridge import ControllerBridge
from varichess.variants import VANILLA


def _bridge() -> ControllerBridge:
    ctrl = GameController(VANILLA)
    ctrl.new_game()
    return ControllerBridge(ctrl)


class TestControllerBridge:
    def test_suggestion_emits_move(self, qapp) -> None:
        bridge = _bridge()
        moves = QSignalSpy(bridge.move_made)
        received: list[Movement] = []
        bridge.move_made.connect(received.append)

        assert bridge.submit_suggestion("bestmove e2e4")

        assert len(moves) == 1
        assert received[0].target == Cell(4, 4)

    def test_rejected_suggestion_emits_nothing(self, qapp) -> None:
        bridge = _bridge()
        moves = QSignalSpy(bridge.move_made)

        assert not bridge.submit_suggestion("e2e5")

        assert len(moves) == 0

    def test_undo_redo_reset_board(self, qapp) -> None:
        bridge = _bridge()
        resets = QSignalSpy(bridge.board_reset)

        assert not bridge.undo()
        assert len(resets) == 0

        bridge.submit_suggestion("e2e4")
        assert bridge.undo()
        assert bridge.redo()
        assert len(resets) == 2

    def test_new_game_resets(self, qapp) -> None:
        bridge = _bridge()
        resets = QSignalSpy(bridge.board_reset)
        bridge.submit_suggestion("e2e4")

        bridge.new_game()

        assert len(resets) == 1
        assert not bridge.controller.can_undo

    def test_promotion_relayed(self, qapp) -> None:
        ctrl = GameController(VANILLA)
        ctrl.new_game("k7/4P3/1K6/8/8/8/8/8")
        bridge = ControllerBridge(ctrl)
        promoted = QSignalSpy(bridge.promoted)
        over = QSignalSpy(bridge.game_over)
        received: list[Piece] = []
        bridge.promoted.connect(received.append)

        assert bridge.submit_suggestion("e7e8q")

        assert len(promoted) == 1
        assert received[0].piece_type == PieceType.QUEEN
        assert len(over) == 1
        assert over[0][0] == GameStatus.LIGHT_WINS.value

    def test_game_over_carries_status_value(self, qapp) -> None:
        bridge = _bridge()
        over = QSignalSpy(bridge.game_over)

        for reply in ("f2f3", "e7e5", "g2g4"):
            bridge.submit_suggestion(reply)
        assert len(over) == 0

        bridge.submit_suggestion("d8h4")
        assert len(over) == 1
        assert over[0][0] == GameStatus.DARK_WINS.value
