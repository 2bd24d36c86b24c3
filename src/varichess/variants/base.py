"""Variant configuration: an immutable ``Variant`` plus a rules strategy.

Every hook on :class:`VariantRules` has a default matching standard chess,
so a variant overrides only what it changes.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from varichess.core.enums import Color, GameStatus, Trait
from varichess.core.layouts import DEFAULT_PROMOTIONS, Row, standard_layout
from varichess.core.movement import Movement
from varichess.core.piece import Piece

if TYPE_CHECKING:
    from varichess.game.controller import GameController


class VariantRules:
    """Behavioural hooks consulted by the controller and legality filter."""

    # Traits carried by every partisan piece.
    piece_traits: frozenset[Trait] = frozenset()
    # Atomic blasts leave pawns on the surrounding ring standing.
    spare_pawns_in_blast: bool = True

    def initial_layout(self, variant: Variant) -> list[Row]:
        return standard_layout(traits=self.piece_traits)

    def traits_for(self, piece_type: str) -> frozenset[Trait]:
        """Traits a freshly created piece of *piece_type* carries."""
        return self.piece_traits

    def promotions(self, controller: GameController, color: Color) -> list[str]:
        """Piece types a pawn of *color* may promote to."""
        return list(DEFAULT_PROMOTIONS)

    def filter_moves(
        self,
        controller: GameController,
        piece: Piece,
        movements: list[Movement],
        attacks_only: bool,
    ) -> list[Movement]:
        """Last legality stage; runs after the built-in checks."""
        return movements

    def evaluate(self, controller: GameController) -> GameStatus | None:
        """Variant-specific result, or ``None`` to fall through to defaults."""
        return None

    def turn_plies(self, controller: GameController, opening: bool) -> int:
        """Plies in the turn that is about to start."""
        return 1

    def after_execute(self, controller: GameController, movement: Movement) -> None:
        """Called after a movement is applied, before the turn advances."""

    def after_promote(self, controller: GameController, piece: Piece) -> None:
        """Called with the freshly promoted piece."""

    def interact(self, controller: GameController, target: object) -> bool:
        """Handle a non-board interaction; return whether it was consumed."""
        return False

    def forced_selection(self, controller: GameController) -> Piece | None:
        """Piece that must be moved next, overriding the user's selection."""
        return None

    def can_move(self, controller: GameController, piece: Piece) -> bool:
        return piece.color == controller.turn


@dataclass(frozen=True)
class Variant:
    """Board dimensions, flags and the rules strategy of one variant."""

    name: str = "Vanilla"
    slug: str = "vanilla"
    rows: int = 8
    columns: int = 8
    castle_from_left: int = 2
    castle_from_right: int = 1
    has_check: bool = True
    king_optional: bool = False
    no_progress_limit: int | None = 100
    rules: VariantRules = field(default_factory=VariantRules)

    def __str__(self) -> str:
        return self.name
