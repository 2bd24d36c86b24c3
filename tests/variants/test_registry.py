"""Tests for the shipped variant registry."""

import pytest

from varichess.core.enums import GameStatus
from varichess.game.controller import GameController
from varichess.variants import KING_OF_THE_HILL, VARIANTS, variant_by_slug


def test_twenty_variants_with_unique_slugs() -> None:
    assert len(VARIANTS) == 20
    assert len({v.slug for v in VARIANTS}) == 20


def test_lookup() -> None:
    assert variant_by_slug("koth") is KING_OF_THE_HILL
    assert str(variant_by_slug("vanilla")) == "Vanilla"


def test_unknown_slug() -> None:
    with pytest.raises(ValueError, match="Unknown variant slug"):
        variant_by_slug("bughouse")


@pytest.mark.parametrize("variant", VARIANTS, ids=lambda v: v.slug)
def test_every_variant_starts(variant) -> None:  # type: ignore[no-untyped-def]
    ctrl = GameController(variant)
    ctrl.new_game()
    assert (ctrl.board.rows, ctrl.board.columns) == (variant.rows, variant.columns)
    assert ctrl.game_state() == GameStatus.ACTIVE
    movable = [p for p in ctrl.pieces(ctrl.turn) if ctrl.legal_moves_for(p)]
    assert movable
