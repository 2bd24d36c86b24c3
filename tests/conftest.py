"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import os
import sys
from collections.abc import Callable, Iterator

import pytest

from varichess.core.enums import Color
from varichess.core.movement import Movement
from varichess.game.controller import GameController
from varichess.game.suggestion import find_suggested_move
from varichess.variants import VANILLA, Variant

# Linux CI runners are often headless. Force an offscreen backend only there.
if (
    sys.platform.startswith("linux")
    and "QT_QPA_PLATFORM" not in os.environ
    and "DISPLAY" not in os.environ
    and "WAYLAND_DISPLAY" not in os.environ
):
    os.environ["QT_QPA_PLATFORM"] = "offscreen"


@pytest.fixture(scope="session")
def qapp() -> Iterator[object]:
    """Provide a singleton QCoreApplication for signal tests."""
    from PyQt6.QtCore import QCoreApplication

    app = QCoreApplication.instance()
    if app is None:
        app = QCoreApplication([])
    yield app


GameFactory = Callable[..., GameController]
PlayFn = Callable[[GameController, str], Movement]


@pytest.fixture
def make_game() -> GameFactory:
    """Build a started controller: ``make_game(variant, placement, turn)``."""

    def _make(
        variant: Variant = VANILLA,
        placement: str | None = None,
        turn: Color = Color.LIGHT,
    ) -> GameController:
        ctrl = GameController(variant)
        ctrl.new_game(placement, turn)
        return ctrl

    return _make


@pytest.fixture
def play() -> PlayFn:
    """Execute a coordinate move such as ``"e2e4"`` or ``"a7a8q"``."""

    def _play(ctrl: GameController, text: str) -> Movement:
        movement, promotion = find_suggested_move(ctrl, text)
        ctrl.execute_move(movement)
        if promotion is not None:
            assert ctrl.promote_pawn(promotion)
        return movement

    return _play
