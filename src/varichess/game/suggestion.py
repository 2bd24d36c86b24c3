"""Apply an engine's coordinate-move reply to a controller."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from varichess.core.movement import Movement
from varichess.core.notation import parse_move_text

if TYPE_CHECKING:
    from varichess.game.controller import GameController

_LOGGER = logging.getLogger(__name__)


def find_suggested_move(
    controller: GameController, reply: str
) -> tuple[Movement, str | None]:
    """Legal movement matching *reply*, plus its promotion type if any.

    Raises ``ValueError`` when the text is malformed or matches nothing.
    """
    variant = controller.variant
    text = parse_move_text(reply, variant.rows, variant.columns)
    piece = controller.piece_at(text.source.row, text.source.column)
    if piece is None:
        raise ValueError(f"No piece on the suggested source cell: {reply!r}")
    for movement in controller.legal_moves_for(piece):
        if movement.target == text.target:
            return movement, text.promotion
    raise ValueError(f"Suggested move is not legal: {reply!r}")


def apply_suggestion(controller: GameController, reply: str) -> bool:
    """Execute the move named in *reply* (``"bestmove e2e4 ponder …"``).

    Returns ``False`` and leaves the game untouched when the reply cannot be
    used.
    """
    try:
        movement, promotion = find_suggested_move(controller, reply)
    except ValueError as exc:
        _LOGGER.warning("Ignoring engine reply: %s", exc)
        return False

    controller.execute_move(movement)
    if promotion is not None and not controller.promote_pawn(promotion):
        _LOGGER.warning("Engine promotion %r not available", promotion)
    return True
