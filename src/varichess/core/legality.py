"""Legality filter applied to every generator's candidates.

Order: bounds clamp, self-capture, (unless attacks-only) self-check
simulation, then the variant's own hook.
"""

from __future__ import annotations

from dataclasses import replace
from typing import TYPE_CHECKING

from varichess.core.board import Board
from varichess.core.enums import Color
from varichess.core.movement import Destination, Movement
from varichess.core.piece import Piece

if TYPE_CHECKING:
    from varichess.game.controller import GameController


def _destination_color(by_id: dict[str, Piece], destination: Destination) -> Color | None:
    if destination.spawn is not None:
        return destination.spawn.color
    piece = by_id.get(destination.piece_id)
    return piece.color if piece is not None else None


def clamp(board: Board, movement: Movement) -> Movement | None:
    """Drop out-of-range destinations and captures and own-color landings.

    Returns ``None`` when no destination survives.
    """
    destinations = tuple(
        d for d in movement.destinations if board.contains(d.row, d.column)
    )
    captures = tuple(c for c in movement.captures if board.contains(c.row, c.column))

    if destinations and not (movement.castle or movement.drop):
        by_id = {p.id: p for p in board}
        moving = movement.relocated_ids()
        kept: list[Destination] = []
        for d in destinations:
            occupant = board.get(d.row, d.column)
            if (
                occupant is not None
                and occupant.id not in moving
                and occupant.color == _destination_color(by_id, d)
            ):
                continue
            kept.append(d)
        destinations = tuple(kept)

    if not destinations:
        return None
    if destinations == movement.destinations and captures == movement.captures:
        return movement
    return replace(movement, destinations=destinations, captures=captures)


def exposes_king(controller: GameController, piece: Piece, movement: Movement) -> bool:
    """Whether executing *movement* leaves the mover's king attacked.

    Only the final ply of a turn is checked. A move that removes the
    opponent's last king is never rejected.
    """
    if not controller.has_check or controller.plies_remaining != 1:
        return False
    color = piece.color if piece.color.is_partisan else controller.turn
    future = controller.clone()
    opponent_had_king = bool(future.board.kings(color.opposite))
    future.apply_movement(movement, track_checks=False)
    if opponent_had_king and not future.board.kings(color.opposite):
        return False
    return future.checked_king(color) is not None


def builtin_filter(
    controller: GameController,
    piece: Piece,
    candidates: list[Movement],
    attacks_only: bool = False,
) -> list[Movement]:
    """Bounds, self-capture and self-check stages without the variant hook."""
    board = controller.board
    survivors: list[Movement] = []
    for candidate in candidates:
        movement = clamp(board, candidate)
        if movement is None:
            continue
        if not attacks_only and exposes_king(controller, piece, movement):
            continue
        survivors.append(movement)
    return survivors


def filter_movements(
    controller: GameController,
    piece: Piece,
    candidates: list[Movement],
    attacks_only: bool = False,
) -> list[Movement]:
    """Return the subset of *candidates* that is legal for *piece*."""
    survivors = builtin_filter(controller, piece, candidates, attacks_only)
    return controller.rules.filter_moves(controller, piece, survivors, attacks_only)
