"""Tests for BoardState snapshots."""

from varichess.core.enums import Color, PieceType
from varichess.core.notation import STARTING_PLACEMENT, board_from_fen
from varichess.core.types import Cell
from varichess.game.state import BoardState, LastMove, ReserveSlot


class TestBoardState:
    def test_defaults(self) -> None:
        state = BoardState(board_from_fen(STARTING_PLACEMENT))
        assert state.turn == Color.LIGHT
        assert state.plies_remaining == 1
        assert state.checks == {Color.LIGHT: 0, Color.DARK: 0}
        assert sum(state.reserve[Color.DARK].values()) == 0
        assert state.last_move is None

    def test_copy_is_deep(self) -> None:
        state = BoardState(board_from_fen(STARTING_PLACEMENT))
        state.reserve[Color.LIGHT][PieceType.KNIGHT] = 2
        state.checks[Color.DARK] = 1
        state.last_move = LastMove(Cell(6, 4), Cell(4, 4))

        copy = state.copy()
        assert copy.board == state.board and copy.board is not state.board
        assert copy.last_move == state.last_move

        copy.reserve[Color.LIGHT][PieceType.KNIGHT] = 0
        copy.checks[Color.DARK] = 3
        pawn = copy.board.get(6, 0)
        assert pawn is not None
        pawn.moves = 4

        assert state.reserve[Color.LIGHT][PieceType.KNIGHT] == 2
        assert state.checks[Color.DARK] == 1
        original = state.board.get(6, 0)
        assert original is not None and original.moves == 0
        assert original.id == pawn.id

    def test_defaults_not_shared(self) -> None:
        first = BoardState(board_from_fen("8/8/8/8/8/8/8/8"))
        second = BoardState(board_from_fen("8/8/8/8/8/8/8/8"))
        first.reserve[Color.LIGHT][PieceType.PAWN] += 1
        first.checks[Color.LIGHT] += 1
        assert second.reserve[Color.LIGHT][PieceType.PAWN] == 0
        assert second.checks[Color.LIGHT] == 0


def test_spawned_last_move_has_no_source() -> None:
    last = LastMove(None, Cell(3, 3))
    assert last.source is None
    assert last.target == Cell(3, 3)


def test_reserve_slot_is_hashable() -> None:
    assert {ReserveSlot(Color.LIGHT, PieceType.KNIGHT)} == {
        ReserveSlot(Color.LIGHT, PieceType.KNIGHT)
    }
