"""Pseudo-legal movement generation.

Generators are plain functions keyed by piece-type tag. They take the board
context and the acting piece explicitly and return immutable
:class:`Movement` candidates; bounds, self-capture and self-check are left
to :mod:`varichess.core.legality`.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import replace
from typing import Protocol

from varichess.core.board import Board
from varichess.core.enums import Color, PawnStart, PieceType, Trait
from varichess.core.movement import Destination, Movement, step
from varichess.core.piece import Piece
from varichess.core.types import (
    Cell,
    back_row_of,
    forward_of,
    pawn_row_of,
)


class BoardContext(Protocol):
    """What a generator may read. Implemented by ``GameController``."""

    @property
    def board(self) -> Board: ...

    @property
    def en_passant_id(self) -> str | None: ...

    @property
    def has_check(self) -> bool: ...

    @property
    def castle_from_left(self) -> int: ...

    @property
    def castle_from_right(self) -> int: ...

    @property
    def spare_pawns_in_blast(self) -> bool: ...

    def attacks_against(self, color: Color) -> frozenset[Cell]: ...


Generator = Callable[[BoardContext, Piece, bool], list[Movement]]
Decorator = Callable[[BoardContext, Piece, list[Movement]], list[Movement]]


KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
    (-2, -1),
    (-2, 1),
    (-1, -2),
    (-1, 2),
    (1, -2),
    (1, 2),
    (2, -1),
    (2, 1),
)

BISHOP_DIRS: tuple[tuple[int, int], ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))
ROOK_DIRS: tuple[tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))
QUEEN_DIRS: tuple[tuple[int, int], ...] = BISHOP_DIRS + ROOK_DIRS

# Canonical back-row columns for circe rebirth, indexed by square parity.
_REBIRTH_COLUMNS: dict[str, tuple[int, int]] = {
    PieceType.ROOK: (0, 7),
    PieceType.BISHOP: (2, 5),
    PieceType.KNIGHT: (6, 1),
}
_REBIRTH_QUEEN_COLUMN = 3


def _is_enemy(piece: Piece, other: Piece) -> bool:
    return (
        piece.color.is_partisan
        and other.color.is_partisan
        and piece.color != other.color
    )


# -- Shape helpers -----------------------------------------------------------


def _slide(
    ctx: BoardContext,
    piece: Piece,
    directions: tuple[tuple[int, int], ...],
    max_steps: int | None = None,
) -> list[Movement]:
    board = ctx.board
    limit = max_steps if max_steps is not None else max(board.rows, board.columns)
    moves: list[Movement] = []
    for dr, dc in directions:
        for n in range(1, limit + 1):
            row = piece.row + dr * n
            column = piece.column + dc * n
            if not board.contains(row, column):
                break
            blocker = board.get(row, column)
            if blocker is None:
                moves.append(step(piece, row, column))
                continue
            if _is_enemy(piece, blocker):
                moves.append(step(piece, row, column))
            break
    return moves


def _leap(piece: Piece, offsets: tuple[tuple[int, int], ...]) -> list[Movement]:
    return [step(piece, piece.row + dr, piece.column + dc) for dr, dc in offsets]


# -- Piece-specific generators ----------------------------------------------


def may_double_step(piece: Piece, rows: int) -> bool:
    """Whether *piece*'s start policy allows a two-cell advance from here."""
    if piece.pawn_start == PawnStart.NEVER:
        return False
    if piece.row == pawn_row_of(piece.color, rows):
        return True
    return (
        piece.pawn_start == PawnStart.HORDE
        and piece.moves == 0
        and piece.row == back_row_of(piece.color, rows)
    )


def _gen_pawn(ctx: BoardContext, piece: Piece, attacks_only: bool) -> list[Movement]:
    board = ctx.board
    direction = forward_of(piece.color)
    row = piece.row + direction
    column = piece.column
    moves: list[Movement] = []

    if not attacks_only and board.contains(row, column) and board.is_empty(row, column):
        moves.append(step(piece, row, column))
        row2 = piece.row + 2 * direction
        if (
            may_double_step(piece, board.rows)
            and board.contains(row2, column)
            and board.is_empty(row2, column)
        ):
            moves.append(step(piece, row2, column, en_passant=piece.id))

    for side in (-1, 1):
        cap_column = column + side
        target = board.get(row, cap_column)
        if attacks_only or (target is not None and _is_enemy(piece, target)):
            moves.append(step(piece, row, cap_column))
        if attacks_only:
            continue
        beside = board.get(piece.row, cap_column)
        if (
            beside is not None
            and beside.id == ctx.en_passant_id
            and beside.piece_type == PieceType.PAWN
            and _is_enemy(piece, beside)
            and target is None
        ):
            moves.append(
                step(piece, row, cap_column, captures=(Cell(piece.row, cap_column),))
            )
    return moves


def _gen_knight(ctx: BoardContext, piece: Piece, attacks_only: bool) -> list[Movement]:
    return _leap(piece, KNIGHT_OFFSETS)


def _gen_bishop(ctx: BoardContext, piece: Piece, attacks_only: bool) -> list[Movement]:
    return _slide(ctx, piece, BISHOP_DIRS)


def _gen_rook(ctx: BoardContext, piece: Piece, attacks_only: bool) -> list[Movement]:
    rows = ctx.board.rows
    columns = ctx.board.columns
    in_corner = piece.row in (0, rows - 1)
    breaks_queen_side = in_corner and piece.column == 0
    breaks_king_side = in_corner and piece.column == columns - 1
    if not (breaks_queen_side or breaks_king_side):
        return _slide(ctx, piece, ROOK_DIRS)
    return [
        replace(
            m,
            breaks_queen_side=breaks_queen_side,
            breaks_king_side=breaks_king_side,
        )
        for m in _slide(ctx, piece, ROOK_DIRS)
    ]


def _gen_queen(ctx: BoardContext, piece: Piece, attacks_only: bool) -> list[Movement]:
    return _slide(ctx, piece, QUEEN_DIRS)


def _gen_archbishop(
    ctx: BoardContext, piece: Piece, attacks_only: bool
) -> list[Movement]:
    return _slide(ctx, piece, BISHOP_DIRS) + _leap(piece, KNIGHT_OFFSETS)


def _gen_chancellor(
    ctx: BoardContext, piece: Piece, attacks_only: bool
) -> list[Movement]:
    return _slide(ctx, piece, ROOK_DIRS) + _leap(piece, KNIGHT_OFFSETS)


def _gen_king(ctx: BoardContext, piece: Piece, attacks_only: bool) -> list[Movement]:
    moves = _slide(ctx, piece, QUEEN_DIRS, max_steps=1)
    if (
        not attacks_only
        and piece.moves == 0
        and piece.row == back_row_of(piece.color, ctx.board.rows)
    ):
        moves.extend(_gen_castling(ctx, piece))
    return moves


def _castling_rook(board: Board, king: Piece, direction: int) -> Piece | None:
    """First blocker outward from the king, if it is an unmoved friendly rook."""
    column = king.column + direction
    while board.contains(king.row, column):
        blocker = board.get(king.row, column)
        if blocker is not None:
            if (
                blocker.piece_type == PieceType.ROOK
                and blocker.moves == 0
                and blocker.color == king.color
            ):
                return blocker
            return None
        column += direction
    return None


def _gen_castling(ctx: BoardContext, king: Piece) -> list[Movement]:
    board = ctx.board
    row = king.row
    sides = (
        (-1, ctx.castle_from_left),
        (1, board.columns - ctx.castle_from_right - 1),
    )
    attacked: frozenset[Cell] | None = None
    moves: list[Movement] = []

    for direction, king_column in sides:
        rook = _castling_rook(board, king, direction)
        if rook is None:
            continue
        rook_column = king_column - direction

        lo = min(king.column, rook.column, king_column, rook_column)
        hi = max(king.column, rook.column, king_column, rook_column)
        if any(
            board.get(row, column) not in (None, king, rook)
            for column in range(lo, hi + 1)
        ):
            continue

        if ctx.has_check:
            if attacked is None:
                attacked = ctx.attacks_against(king.color)
            step_dir = 1 if king_column >= king.column else -1
            transit = range(king.column, king_column + step_dir, step_dir)
            if any(Cell(row, column) in attacked for column in transit):
                continue

        if direction > 0:
            target = min(king.column + 2, rook.column)
        else:
            target = max(king.column - 2, rook.column)
        moves.append(
            Movement(
                piece_id=king.id,
                row=row,
                column=target,
                destinations=(
                    Destination(row, rook_column, rook.id),
                    Destination(row, king_column, king.id),
                ),
                castle=True,
                breaks_king_side=direction > 0,
                breaks_queen_side=direction < 0,
            )
        )
    return moves


def _gen_duck(ctx: BoardContext, piece: Piece, attacks_only: bool) -> list[Movement]:
    if attacks_only:
        return []
    spawn = None if piece.on_board else piece
    return [
        Movement(
            piece_id=piece.id,
            row=cell.row,
            column=cell.column,
            destinations=(Destination(cell.row, cell.column, piece.id, spawn),),
        )
        for cell in ctx.board.empty_cells()
    ]


def _gen_drop(ctx: BoardContext, piece: Piece) -> list[Movement]:
    board = ctx.board
    dropped = Piece(
        color=piece.color,
        piece_type=piece.piece_type,
        traits=piece.traits - {Trait.DROP},
        pawn_start=piece.pawn_start,
        id=piece.id,
    )
    last_row = board.rows - 1
    return [
        Movement(
            piece_id=piece.id,
            row=cell.row,
            column=cell.column,
            destinations=(Destination(cell.row, cell.column, piece.id, dropped),),
            drop=True,
        )
        for cell in board.empty_cells()
        if piece.piece_type != PieceType.PAWN or cell.row not in (0, last_row)
    ]


# -- Trait decorators --------------------------------------------------------


def captured_by(board: Board, piece: Piece, movement: Movement) -> Piece | None:
    """Enemy piece removed by *movement*'s landing or first capture cell."""
    landing = movement.destinations[0]
    target = board.get(landing.row, landing.column)
    if target is not None and _is_enemy(piece, target):
        return target
    for cell in movement.captures:
        occupant = board[cell]
        if occupant is not None and _is_enemy(piece, occupant):
            return occupant
    return None


def _traitor(ctx: BoardContext, piece: Piece, movements: list[Movement]) -> list[Movement]:
    result: list[Movement] = []
    for movement in movements:
        captured = (
            captured_by(ctx.board, piece, movement)
            if len(movement.destinations) == 1
            else None
        )
        if captured is not None:
            landing = movement.destinations[0]
            convert = captured.with_color(piece.color)
            movement = movement.with_destinations(
                movement.destinations
                + (Destination(landing.row, landing.column, convert.id, convert),)
            )
        result.append(movement)
    return result


def rebirth_cell(captured: Piece, rows: int) -> Cell | None:
    """Home cell a captured piece returns to under circe rules."""
    home_row = back_row_of(captured.color, rows)
    if captured.piece_type == PieceType.PAWN:
        return Cell(pawn_row_of(captured.color, rows), captured.column)
    if captured.piece_type == PieceType.QUEEN:
        return Cell(home_row, _REBIRTH_QUEEN_COLUMN)
    columns = _REBIRTH_COLUMNS.get(captured.piece_type)
    if columns is None:
        return None
    light_square = (captured.column + captured.row % 2) % 2 == 0
    tile_index = 1 if light_square else 0
    color_index = 0 if captured.color == Color.LIGHT else 1
    return Cell(home_row, columns[(tile_index + color_index) % 2])


def _circe(ctx: BoardContext, piece: Piece, movements: list[Movement]) -> list[Movement]:
    result: list[Movement] = []
    for movement in movements:
        captured = captured_by(ctx.board, piece, movement)
        home = rebirth_cell(captured, ctx.board.rows) if captured else None
        if captured is not None and home is not None:
            # The home cell must be free, or vacated by the capture itself.
            occupant = ctx.board[home]
            if occupant is None or occupant.id in (captured.id, piece.id):
                rebirth = Destination(home.row, home.column, captured.id, rebirth=True)
                movement = movement.with_destinations((rebirth,) + movement.destinations)
        result.append(movement)
    return result


def _atomic(ctx: BoardContext, piece: Piece, movements: list[Movement]) -> list[Movement]:
    board = ctx.board
    spare_pawns = ctx.spare_pawns_in_blast
    result: list[Movement] = []
    for movement in movements:
        if len(movement.destinations) == 1 and captured_by(board, piece, movement):
            centre = movement.destinations[0].cell
            blast: list[Cell] = list(movement.captures)
            for dr in (-1, 0, 1):
                for dc in (-1, 0, 1):
                    cell = Cell(centre.row + dr, centre.column + dc)
                    if cell in blast:
                        continue
                    occupant = board[cell]
                    if (
                        cell != centre
                        and spare_pawns
                        and occupant is not None
                        and occupant.piece_type == PieceType.PAWN
                    ):
                        continue
                    blast.append(cell)
            movement = movement.with_captures(tuple(blast))
        result.append(movement)
    return result


# -- Dispatch ----------------------------------------------------------------

_GENERATORS: dict[str, Generator] = {
    PieceType.PAWN: _gen_pawn,
    PieceType.KNIGHT: _gen_knight,
    PieceType.BISHOP: _gen_bishop,
    PieceType.ROOK: _gen_rook,
    PieceType.QUEEN: _gen_queen,
    PieceType.KING: _gen_king,
    PieceType.ARCHBISHOP: _gen_archbishop,
    PieceType.CHANCELLOR: _gen_chancellor,
    PieceType.DUCK: _gen_duck,
}

# Applied in this order; a piece normally carries at most one.
_DECORATORS: tuple[tuple[Trait, Decorator], ...] = (
    (Trait.TRAITOR, _traitor),
    (Trait.CIRCE, _circe),
    (Trait.ATOMIC, _atomic),
)


def register_generator(piece_type: str, generator: Generator) -> None:
    """Add (or replace) the generator for a piece-type tag."""
    _GENERATORS[piece_type] = generator


def has_generator(piece_type: str) -> bool:
    return piece_type in _GENERATORS


def generate(
    ctx: BoardContext, piece: Piece, attacks_only: bool = False
) -> list[Movement]:
    """All pseudo-legal candidates for *piece*.

    In attacks-only mode asymmetric effects (double steps, en passant,
    castling, drops, trait side-effects) are suppressed and every threatened
    cell is reported.
    """
    if piece.has_trait(Trait.DROP):
        return [] if attacks_only else _gen_drop(ctx, piece)
    try:
        generator = _GENERATORS[piece.piece_type]
    except KeyError:
        raise ValueError(f"No generator for piece type: {piece.piece_type!r}") from None
    movements = generator(ctx, piece, attacks_only)
    if attacks_only:
        return movements
    for trait, decorator in _DECORATORS:
        if piece.has_trait(trait):
            movements = decorator(ctx, piece, movements)
    return movements
