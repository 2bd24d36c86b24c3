"""GameController — the central orchestrator of a variant game.

Coordinates: BoardState, undo/redo history, movement generation, the
legality filter and the variant's rules strategy. Emits events via simple
callbacks so the UI / tests can subscribe.
"""

from __future__ import annotations

import logging
from collections import Counter
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from varichess.core import legality, move_generator
from varichess.core.board import Board
from varichess.core.enums import Color, GameStatus, PieceType
from varichess.core.movement import Movement
from varichess.core.notation import board_from_fen, export_fen
from varichess.core.piece import Piece
from varichess.core.rules import Rules
from varichess.core.types import Cell, back_row_of
from varichess.game.state import BoardState, LastMove

if TYPE_CHECKING:
    from varichess.variants.base import Variant, VariantRules

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[Movement, BoardState], None]  # movement, state after
PromoteCallback = Callable[[Piece], None]
GameOverCallback = Callable[[GameStatus], None]


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_promote: list[PromoteCallback] = field(default_factory=list)
    on_game_over: list[GameOverCallback] = field(default_factory=list)


# ── Controller ───────────────────────────────────────────────────────────────


class GameController:
    """Runs one game of a :class:`Variant`: legal moves, execution, history.

    Thread-safety: methods are designed to be called from a single thread.
    Getters return live objects that callers must not mutate; use
    :meth:`clone` for an isolated copy.
    """

    __slots__ = (
        "_variant",
        "_state",
        "_history",
        "_cursor",
        "_selected",
        "events",
    )

    def __init__(self, variant: Variant) -> None:
        self._variant = variant
        self._state = BoardState(Board(variant.rows, variant.columns))
        self._history: list[BoardState] = [self._state.copy()]
        self._cursor = 0
        self._selected: Piece | None = None
        self.events = GameEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def variant(self) -> Variant:
        return self._variant

    @property
    def rules(self) -> VariantRules:
        return self._variant.rules

    @property
    def state(self) -> BoardState:
        return self._state

    @property
    def board(self) -> Board:
        return self._state.board

    @property
    def turn(self) -> Color:
        return self._state.turn

    @property
    def plies_remaining(self) -> int:
        return self._state.plies_remaining

    @property
    def halfmove_clock(self) -> int:
        return self._state.halfmove_clock

    @property
    def whole_moves(self) -> int:
        return self._state.whole_moves

    @property
    def en_passant_id(self) -> str | None:
        return self._state.en_passant_id

    @property
    def checks(self) -> dict[Color, int]:
        return self._state.checks

    @property
    def last_move(self) -> LastMove | None:
        return self._state.last_move

    @property
    def can_undo(self) -> bool:
        return self._cursor > 0

    @property
    def can_redo(self) -> bool:
        return self._cursor < len(self._history) - 1

    # Variant settings read by the movement generator.

    @property
    def has_check(self) -> bool:
        return self._variant.has_check

    @property
    def castle_from_left(self) -> int:
        return self._variant.castle_from_left

    @property
    def castle_from_right(self) -> int:
        return self._variant.castle_from_right

    @property
    def spare_pawns_in_blast(self) -> bool:
        return self._variant.rules.spare_pawns_in_blast

    # ── Queries ──────────────────────────────────────────────────────────

    def piece_at(self, row: int, column: int) -> Piece | None:
        return self._state.board.get(row, column)

    def pieces(self, color: Color | None = None) -> list[Piece]:
        return self._state.board.pieces(color)

    def piece_by_id(self, piece_id: str) -> Piece | None:
        piece = self._state.board.find(piece_id)
        if piece is None and self._selected is not None and self._selected.id == piece_id:
            return self._selected
        return piece

    def reserve(self, color: Color) -> Counter[str]:
        """Captured-piece tally of *color*, available for drops."""
        return self._state.reserve[color]

    def attacks_against(self, color: Color) -> frozenset[Cell]:
        """Cells threatened by every piece not of *color*."""
        cells: set[Cell] = set()
        for piece in self._state.board.pieces():
            if piece.color == color:
                continue
            candidates = move_generator.generate(self, piece, attacks_only=True)
            for movement in legality.filter_movements(
                self, piece, candidates, attacks_only=True
            ):
                cells.add(movement.target)
        return frozenset(cells)

    def checked_king(self, color: Color) -> Piece | None:
        """*color*'s king standing on an attacked cell, if any."""
        kings = self._state.board.kings(color)
        if not kings:
            return None
        attacked = self.attacks_against(color)
        return next((k for k in kings if k.cell in attacked), None)

    def legal_moves_for(self, piece: Piece) -> list[Movement]:
        """Legal movements of *piece*; empty when it may not move now."""
        if not self.rules.can_move(self, piece):
            return []
        candidates = move_generator.generate(self, piece)
        return legality.filter_movements(self, piece, candidates)

    def game_state(self) -> GameStatus:
        status = self.rules.evaluate(self)
        if status is not None:
            return status
        return Rules.game_status(self)

    def to_fen(self) -> str:
        s = self._state
        return export_fen(s.board, s.turn, s.en_passant_id, s.halfmove_clock, s.whole_moves)

    # ── Lifecycle ────────────────────────────────────────────────────────

    def new_game(self, placement: str | None = None, turn: Color = Color.LIGHT) -> None:
        """Reset to the variant's starting layout, or to a FEN *placement*."""
        variant = self._variant
        if placement is None:
            layout = self.rules.initial_layout(variant)
            board = Board.from_layout(layout, variant.columns)
        else:
            board = board_from_fen(placement, variant.columns)
            for piece in board.pieces():
                traits = self.rules.traits_for(piece.piece_type)
                if traits and piece.color.is_partisan:
                    board.place(piece.with_traits(*traits), piece.row, piece.column)
        if board.rows != variant.rows:
            raise ValueError(
                f"Layout has {board.rows} rows, {variant.slug!r} expects {variant.rows}"
            )

        self._state = BoardState(board, turn=turn)
        self._state.plies_remaining = max(1, self.rules.turn_plies(self, opening=True))
        self._history = [self._state.copy()]
        self._cursor = 0
        self._selected = None
        _LOGGER.debug("New %s game (%dx%d)", variant.slug, variant.rows, variant.columns)

    def clone(self) -> GameController:
        """Independent controller with a deep copy of the live state.

        The single history entry shares the live state until the clone
        records a move of its own.
        """
        other = GameController.__new__(GameController)
        other._variant = self._variant
        other._state = self._state.copy()
        other._history = [other._state]
        other._cursor = 0
        other._selected = None
        other.events = GameEvents()
        return other

    # ── Selection ────────────────────────────────────────────────────────

    @property
    def selected_piece(self) -> Piece | None:
        forced = self.rules.forced_selection(self)
        return forced if forced is not None else self._selected

    def select_piece(self, piece: Piece) -> bool:
        """Select *piece*; ignored when it has no legal moves."""
        if not self.legal_moves_for(piece):
            return False
        self._selected = piece
        return True

    def clear_selection(self) -> None:
        self._selected = None

    def interact(self, target: object) -> bool:
        """Forward a non-board interaction (e.g. a reserve slot) to the variant."""
        return self.rules.interact(self, target)

    # ── Execution ────────────────────────────────────────────────────────

    def execute_move(self, movement: Movement) -> None:
        """Apply a movement taken from the latest legal set and record it."""
        if self._history[self._cursor] is self._state:
            self._history[self._cursor] = self._state.copy()
        self.apply_movement(movement)
        del self._history[self._cursor + 1 :]
        self._history.append(self._state.copy())
        self._cursor = len(self._history) - 1
        self._selected = None
        _LOGGER.debug(
            "Executed %s -> %s; %s to move, %d plies left",
            movement.piece_id[:8],
            movement.target,
            self._state.turn,
            self._state.plies_remaining,
        )

        self._emit_move(movement)
        self._check_game_over()

    def apply_movement(self, movement: Movement, track_checks: bool = True) -> None:
        """Mutate the live state; no history, selection or events."""
        state = self._state
        board = state.board
        mover = state.turn
        by_id = {p.id: p for p in board}
        acting = by_id.get(movement.piece_id)
        source = acting.cell if acting is not None else None

        for destination in movement.destinations:
            if destination.spawn is None and destination.piece_id in by_id:
                board.lift(by_id[destination.piece_id])

        removed: list[Piece] = []
        pawn_moved = False
        for destination in movement.destinations:
            if destination.spawn is not None:
                piece = destination.spawn.copy()
            else:
                piece = by_id.get(destination.piece_id)
                if piece is None:
                    continue
                if destination.rebirth:
                    piece.moves = 0
                else:
                    piece.moves += 1
                    pawn_moved = pawn_moved or piece.piece_type == PieceType.PAWN
            replaced = board.place(piece, destination.row, destination.column)
            if replaced is not None and replaced is not piece:
                removed.append(replaced)

        for cell in movement.captures:
            occupant = board.remove(cell.row, cell.column)
            if occupant is not None:
                removed.append(occupant)

        for piece in removed:
            if piece.color.is_partisan and piece.color != mover:
                tallied = PieceType.PAWN if piece.promoted else piece.piece_type
                state.reserve[mover][tallied] += 1

        state.halfmove_clock = 0 if removed or pawn_moved else state.halfmove_clock + 1
        state.en_passant_id = movement.en_passant
        state.last_move = LastMove(source, movement.target)
        self.rules.after_execute(self, movement)

        state.plies_remaining -= 1
        if state.plies_remaining <= 0:
            self._advance_turn(track_checks)

    def _advance_turn(self, track_checks: bool) -> None:
        state = self._state
        state.turn = state.turn.opposite
        state.whole_moves += 1
        state.plies_remaining = max(1, self.rules.turn_plies(self, opening=False))
        if track_checks and self.has_check and self.checked_king(state.turn) is not None:
            state.checks[state.turn] += 1

    # ── Promotion ────────────────────────────────────────────────────────

    def promotable_pawn(self) -> Piece | None:
        """A pawn standing on its far row, awaiting promotion."""
        board = self._state.board
        for piece in board:
            if (
                piece.piece_type == PieceType.PAWN
                and piece.color.is_partisan
                and piece.row == back_row_of(piece.color.opposite, board.rows)
            ):
                return piece
        return None

    def promotions(self, color: Color) -> list[str]:
        return self.rules.promotions(self, color)

    def promote_pawn(self, piece_type: str) -> bool:
        """Replace the pending pawn with *piece_type* in place.

        Amends the current history snapshot instead of adding one.
        """
        pawn = self.promotable_pawn()
        if pawn is None or piece_type not in self.promotions(pawn.color):
            return False

        before = self.game_state() if self.events.on_game_over else GameStatus.ACTIVE
        turn = self._state.turn
        tracked = self.has_check and self.checked_king(turn) is None
        promoted = pawn.with_type(piece_type)
        promoted.promoted = True
        promoted.traits = self.rules.traits_for(piece_type)
        self._state.board.place(promoted, pawn.row, pawn.column)
        if tracked and self.checked_king(turn) is not None:
            self._state.checks[turn] += 1
        self.rules.after_promote(self, promoted)

        self._history[self._cursor] = self._state.copy()
        _LOGGER.debug("Promoted pawn on %s to %s", promoted.cell, piece_type)
        self._emit_promote(promoted)
        self._check_game_over(before)
        return True

    # ── History ──────────────────────────────────────────────────────────

    def undo(self) -> bool:
        if not self.can_undo:
            return False
        self._cursor -= 1
        self._restore()
        return True

    def redo(self) -> bool:
        if not self.can_redo:
            return False
        self._cursor += 1
        self._restore()
        return True

    def _restore(self) -> None:
        self._state = self._history[self._cursor].copy()
        self._selected = None
        _LOGGER.debug("History cursor at %d/%d", self._cursor, len(self._history) - 1)

    # ── Internal helpers ─────────────────────────────────────────────────

    def _emit_move(self, movement: Movement) -> None:
        for cb in self.events.on_move:
            cb(movement, self._state)

    def _emit_promote(self, piece: Piece) -> None:
        for cb in self.events.on_promote:
            cb(piece)

    def _emit_game_over(self, status: GameStatus) -> None:
        for cb in self.events.on_game_over:
            cb(status)

    def _check_game_over(self, before: GameStatus = GameStatus.ACTIVE) -> None:
        """Emit ``on_game_over`` when the result turned terminal since *before*."""
        if not self.events.on_game_over:
            return
        status = self.game_state()
        if status.is_terminal and status != before:
            self._emit_game_over(status)
