"""Tests for crazyhouse and dragonfly drops."""

from varichess.core.enums import Color, GameStatus, PieceType, Trait
from varichess.core.types import Cell
from varichess.game.state import ReserveSlot
from varichess.variants import CRAZYHOUSE, DRAGONFLY, DragonflyRules, ReserveRules

PAWN_TAKES_KNIGHT = "4k3/8/8/3n4/4P3/8/8/4K3"
BACK_RANK_CHECK = "k7/8/8/8/8/8/PP6/K6r"


class TestCrazyhouse:
    def test_capture_drop_cycle(self, make_game, play) -> None:
        ctrl = make_game(CRAZYHOUSE, PAWN_TAKES_KNIGHT)
        play(ctrl, "e4d5")
        assert ctrl.reserve(Color.LIGHT)[PieceType.KNIGHT] == 1
        play(ctrl, "e8e7")

        assert ctrl.interact(ReserveSlot(Color.LIGHT, PieceType.KNIGHT))
        dropping = ctrl.selected_piece
        assert dropping is not None and dropping.has_trait(Trait.DROP)
        assert not dropping.on_board

        drop = next(
            m for m in ctrl.legal_moves_for(dropping) if m.target == Cell(5, 0)
        )
        assert drop.drop
        ctrl.execute_move(drop)

        assert ctrl.reserve(Color.LIGHT)[PieceType.KNIGHT] == 0
        knight = ctrl.piece_at(5, 0)
        assert knight is not None
        assert knight.moves == 0
        assert knight.color == Color.LIGHT
        assert not knight.has_trait(Trait.DROP)
        assert ctrl.last_move is not None and ctrl.last_move.source is None
        assert ctrl.turn == Color.DARK

    def test_interact_rejections(self, make_game) -> None:
        ctrl = make_game(CRAZYHOUSE, PAWN_TAKES_KNIGHT)
        assert not ctrl.interact(ReserveSlot(Color.LIGHT, PieceType.KNIGHT))
        ctrl.reserve(Color.DARK)[PieceType.KNIGHT] = 1
        assert not ctrl.interact(ReserveSlot(Color.DARK, PieceType.KNIGHT))
        assert not ctrl.interact("not a slot")
        assert ctrl.selected_piece is None

    def test_pawns_not_dropped_on_end_rows(self, make_game) -> None:
        ctrl = make_game(CRAZYHOUSE, "4k3/8/8/8/8/8/8/4K3")
        ctrl.reserve(Color.LIGHT)[PieceType.PAWN] = 1
        pawn = ReserveRules().drop_piece(ctrl, PieceType.PAWN)
        assert pawn is not None
        rows = {m.row for m in ctrl.legal_moves_for(pawn)}
        assert rows == set(range(1, 7))

    def test_drop_can_answer_check(self, make_game) -> None:
        ctrl = make_game(CRAZYHOUSE, BACK_RANK_CHECK)
        assert ctrl.game_state() == GameStatus.DARK_WINS
        ctrl.reserve(Color.LIGHT)[PieceType.KNIGHT] = 1
        assert ctrl.game_state() == GameStatus.ACTIVE
        knight = ReserveRules().drop_piece(ctrl, PieceType.KNIGHT)
        assert knight is not None
        blocks = {m.target for m in ctrl.legal_moves_for(knight)}
        assert blocks == {Cell(7, c) for c in range(1, 7)}

    def test_kings_are_not_droppable(self, make_game) -> None:
        ctrl = make_game(CRAZYHOUSE)
        ctrl.reserve(Color.LIGHT)[PieceType.KING] = 1
        assert ReserveRules().drop_piece(ctrl, PieceType.KING) is None


class TestDragonfly:
    PROMOTING = "3k3/P6/7/7/7/7/3K3"

    def test_layout(self, make_game) -> None:
        ctrl = make_game(DRAGONFLY)
        assert (ctrl.board.rows, ctrl.board.columns) == (7, 7)
        assert len(ctrl.pieces(Color.LIGHT)) == 14

    def test_no_promotion_without_lost_pieces(self, make_game) -> None:
        ctrl = make_game(DRAGONFLY, self.PROMOTING)
        pawn = ctrl.piece_at(1, 0)
        assert pawn is not None
        assert ctrl.promotions(Color.LIGHT) == []
        assert ctrl.legal_moves_for(pawn) == []

    def test_promotion_draws_from_lost_pieces(self, make_game, play) -> None:
        ctrl = make_game(DRAGONFLY, self.PROMOTING)
        ctrl.reserve(Color.DARK)[PieceType.ROOK] = 1
        assert ctrl.promotions(Color.LIGHT) == [PieceType.ROOK]

        play(ctrl, "a6a7r")
        rook = ctrl.piece_at(0, 0)
        assert rook is not None and rook.piece_type == PieceType.ROOK
        assert ctrl.reserve(Color.DARK)[PieceType.ROOK] == 0

    def test_pawns_are_not_droppable(self, make_game) -> None:
        ctrl = make_game(DRAGONFLY)
        ctrl.reserve(Color.LIGHT)[PieceType.PAWN] = 1
        assert DragonflyRules().drop_piece(ctrl, PieceType.PAWN) is None

    def test_pawns_never_double_step(self, make_game) -> None:
        ctrl = make_game(DRAGONFLY)
        pawn = ctrl.piece_at(5, 2)
        assert pawn is not None
        assert {m.target for m in ctrl.legal_moves_for(pawn)} == {Cell(4, 2)}
