"""FEN-style board export and coordinate move text."""

from __future__ import annotations

from typing import NamedTuple

from varichess.core.board import Board
from varichess.core.enums import PLAYER_COLORS, Color, PieceType
from varichess.core.piece import Piece, promotion_type_for_letter
from varichess.core.types import Cell, back_row_of, cell_name, forward_of, parse_cell

STARTING_PLACEMENT = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR"


# -- Placement ---------------------------------------------------------------


def board_from_fen(placement: str, columns: int | None = None) -> Board:
    """Parse the placement field of a FEN string into a :class:`Board`.

    Rows are separated by ``/``; digit runs (possibly multi-digit on wide
    boards) denote empty cells. The width is taken from the first row
    unless *columns* is given.
    """
    rows_text = placement.split()[0].split("/") if placement.strip() else []
    if not rows_text:
        raise ValueError(f"Invalid FEN placement: {placement!r}")

    layout: list[list[Piece | None]] = []
    for row_text in rows_text:
        row: list[Piece | None] = []
        run = ""
        for ch in row_text:
            if ch.isdigit():
                run += ch
                continue
            if run:
                row.extend([None] * int(run))
                run = ""
            row.append(Piece.from_letter(ch))
        if run:
            row.extend([None] * int(run))
        layout.append(row)

    width = columns if columns is not None else len(layout[0])
    if any(len(row) != width for row in layout):
        raise ValueError(f"Invalid FEN row width: {placement!r}")
    return Board.from_layout(layout, width)


def board_to_fen(board: Board) -> str:
    """Serialise piece placement, top row first."""
    rows: list[str] = []
    for row_idx in range(board.rows):
        empty = 0
        text = ""
        for column in range(board.columns):
            piece = board.get(row_idx, column)
            if piece is None:
                empty += 1
                continue
            if empty:
                text += str(empty)
                empty = 0
            text += piece.letter
        if empty:
            text += str(empty)
        rows.append(text)
    return "/".join(rows)


# -- Derived fields ----------------------------------------------------------


def castling_field(board: Board) -> str:
    """Castling availability from unmoved kings and rooks on back rows."""
    out = ""
    for color in PLAYER_COLORS:
        row = back_row_of(color, board.rows)
        king = next(
            (k for k in board.kings(color) if k.moves == 0 and k.row == row), None
        )
        if king is None:
            continue
        rooks = [
            p
            for p in board.pieces(color)
            if p.piece_type == PieceType.ROOK and p.moves == 0 and p.row == row
        ]
        rights = ""
        if any(r.column > king.column for r in rooks):
            rights += "k"
        if any(r.column < king.column for r in rooks):
            rights += "q"
        out += rights.upper() if color == Color.LIGHT else rights
    return out or "-"


def en_passant_field(board: Board, en_passant_id: str | None) -> str:
    """Cell behind the pawn that just double-stepped, or ``-``."""
    if en_passant_id is None:
        return "-"
    pawn = board.find(en_passant_id)
    if pawn is None:
        return "-"
    behind = Cell(pawn.row - forward_of(pawn.color), pawn.column)
    return cell_name(behind, board.rows)


def export_fen(
    board: Board,
    turn: Color,
    en_passant_id: str | None,
    halfmove_clock: int,
    whole_moves: int,
) -> str:
    """Six-field FEN. *whole_moves* counts completed turns of either side."""
    side = "w" if turn == Color.LIGHT else "b"
    fullmove = whole_moves // 2 + 1
    return (
        f"{board_to_fen(board)} {side} {castling_field(board)} "
        f"{en_passant_field(board, en_passant_id)} {halfmove_clock} {fullmove}"
    )


# -- Coordinate move text ----------------------------------------------------


class MoveText(NamedTuple):
    """Parsed coordinate move such as ``e7e8q``."""

    source: Cell
    target: Cell
    promotion: str | None = None


def parse_move_text(text: str, rows: int = 8, columns: int = 8) -> MoveText:
    """Parse ``e2e4`` / ``e7e8q``; also accepts an engine ``bestmove`` reply.

    Ranks may have two digits on tall boards.
    """
    tokens = text.split()
    if tokens and tokens[0] == "bestmove":
        tokens = tokens[1:]
    if not tokens:
        raise ValueError(f"Invalid move text: {text!r}")
    move = tokens[0]

    cells: list[Cell] = []
    pos = 0
    while len(cells) < 2:
        end = pos + 1
        while end < len(move) and move[end].isdigit():
            end += 1
        if end == pos + 1:
            raise ValueError(f"Invalid move text: {text!r}")
        cells.append(parse_cell(move[pos:end], rows, columns))
        pos = end

    rest = move[pos:]
    if len(rest) > 1:
        raise ValueError(f"Invalid move text: {text!r}")
    promotion = promotion_type_for_letter(rest) if rest else None
    return MoveText(cells[0], cells[1], promotion)


def move_text(source: Cell, target: Cell, rows: int = 8, promotion: str | None = None) -> str:
    """Inverse of :func:`parse_move_text` for a plain relocation."""
    text = cell_name(source, rows) + cell_name(target, rows)
    if promotion is not None:
        text += Piece(Color.DARK, promotion).letter
    return text
