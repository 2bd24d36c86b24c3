"""Tests for applying engine coordinate replies."""

import logging

import pytest

from varichess.core.enums import Color, PieceType
from varichess.core.types import Cell
from varichess.game.suggestion import apply_suggestion, find_suggested_move


class TestFindSuggestedMove:
    def test_plain_move(self, make_game) -> None:
        ctrl = make_game()
        movement, promotion = find_suggested_move(ctrl, "bestmove e2e4 ponder e7e5")
        assert movement.target == Cell(4, 4)
        assert promotion is None

    def test_promotion(self, make_game) -> None:
        ctrl = make_game(placement="4k3/P7/8/8/8/8/8/4K3")
        movement, promotion = find_suggested_move(ctrl, "a7a8q")
        assert movement.target == Cell(0, 0)
        assert promotion == PieceType.QUEEN

    @pytest.mark.parametrize(
        ("reply", "message"),
        [
            ("e3e4", "No piece"),
            ("e2e5", "not legal"),
            ("e7e5", "not legal"),
            ("junk", "Invalid"),
        ],
    )
    def test_rejections(self, make_game, reply: str, message: str) -> None:
        with pytest.raises(ValueError, match=message):
            find_suggested_move(make_game(), reply)


class TestApplySuggestion:
    def test_applies_move(self, make_game) -> None:
        ctrl = make_game()
        assert apply_suggestion(ctrl, "bestmove g1f3")
        assert ctrl.turn == Color.DARK
        assert ctrl.piece_at(5, 5) is not None

    def test_bad_reply_leaves_game_untouched(
        self, make_game, caplog: pytest.LogCaptureFixture
    ) -> None:
        ctrl = make_game()
        before = ctrl.to_fen()
        with caplog.at_level(logging.WARNING, logger="varichess.game.suggestion"):
            assert not apply_suggestion(ctrl, "bestmove (none)")
        assert ctrl.to_fen() == before
        assert "Ignoring engine reply" in caplog.text

    def test_applies_promotion(self, make_game) -> None:
        ctrl = make_game(placement="4k3/P7/8/8/8/8/8/4K3")
        assert apply_suggestion(ctrl, "a7a8n")
        knight = ctrl.piece_at(0, 0)
        assert knight is not None and knight.piece_type == PieceType.KNIGHT

    def test_unavailable_promotion_is_logged(
        self, make_game, caplog: pytest.LogCaptureFixture
    ) -> None:
        ctrl = make_game(placement="4k3/P7/8/8/8/8/8/4K3")
        with caplog.at_level(logging.WARNING, logger="varichess.game.suggestion"):
            assert apply_suggestion(ctrl, "a7a8k")
        assert ctrl.promotable_pawn() is not None
        assert "not available" in caplog.text
