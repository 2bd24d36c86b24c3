"""Core domain layer — pieces, boards, movement generation and legality.

Quick start::

    from varichess.core import STARTING_PLACEMENT, board_from_fen

    board = board_from_fen(STARTING_PLACEMENT)
    print(board)
"""

from varichess.core.board import Board
from varichess.core.enums import (
    PLAYER_COLORS,
    Color,
    GameStatus,
    PawnStart,
    PieceType,
    Trait,
)
from varichess.core.legality import builtin_filter, filter_movements
from varichess.core.move_generator import generate, register_generator
from varichess.core.movement import Destination, Movement
from varichess.core.notation import (
    STARTING_PLACEMENT,
    MoveText,
    board_from_fen,
    board_to_fen,
    export_fen,
    move_text,
    parse_move_text,
)
from varichess.core.piece import Piece
from varichess.core.rules import Rules
from varichess.core.types import (
    Cell,
    back_row_of,
    cell_name,
    forward_of,
    in_bounds,
    parse_cell,
    pawn_row_of,
)

__all__ = [
    # Enums
    "PLAYER_COLORS",
    "Color",
    "GameStatus",
    "PawnStart",
    "PieceType",
    "Trait",
    # Types / helpers
    "Cell",
    "back_row_of",
    "cell_name",
    "forward_of",
    "in_bounds",
    "parse_cell",
    "pawn_row_of",
    # Domain objects
    "Board",
    "Destination",
    "Movement",
    "Piece",
    "Rules",
    # Generation / legality
    "builtin_filter",
    "filter_movements",
    "generate",
    "register_generator",
    # Notation
    "STARTING_PLACEMENT",
    "MoveText",
    "board_from_fen",
    "board_to_fen",
    "export_fen",
    "move_text",
    "parse_move_text",
]
