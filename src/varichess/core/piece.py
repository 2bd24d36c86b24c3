"""Piece record."""

from __future__ import annotations

import dataclasses
import uuid
from dataclasses import dataclass, field

from varichess.core.enums import Color, PawnStart, PieceType, Trait
from varichess.core.types import Cell

# Piece type ↔ FEN letter (uppercase = light, lowercase = dark)
_FEN_LETTERS: dict[str, str] = {
    PieceType.PAWN: "p",
    PieceType.KNIGHT: "n",
    PieceType.BISHOP: "b",
    PieceType.ROOK: "r",
    PieceType.QUEEN: "q",
    PieceType.KING: "k",
    PieceType.ARCHBISHOP: "a",
    PieceType.CHANCELLOR: "c",
    PieceType.DUCK: "*",
}

_TYPES_BY_LETTER: dict[str, str] = {v: k for k, v in _FEN_LETTERS.items()}


def _new_id() -> str:
    return uuid.uuid4().hex


@dataclass(slots=True)
class Piece:
    """Mutable piece record.

    ``row``/``column`` are ``-1`` while the piece is off the board (reserve
    drops, a duck that has not been placed yet). Only type and color are of
    interest to a renderer.
    """

    color: Color
    piece_type: str
    row: int = -1
    column: int = -1
    moves: int = 0
    promoted: bool = False
    traits: frozenset[Trait] = frozenset()
    pawn_start: PawnStart = PawnStart.STANDARD
    id: str = field(default_factory=_new_id)

    # ── Position ─────────────────────────────────────────────────────────

    @property
    def cell(self) -> Cell:
        return Cell(self.row, self.column)

    @property
    def on_board(self) -> bool:
        return self.row >= 0 and self.column >= 0

    def has_trait(self, trait: Trait) -> bool:
        return trait in self.traits

    # ── Copies ───────────────────────────────────────────────────────────

    def copy(self) -> Piece:
        """Exact copy, same id."""
        return dataclasses.replace(self)

    def with_color(self, color: Color) -> Piece:
        """Re-colored copy with a fresh id."""
        return dataclasses.replace(self, color=color, id=_new_id())

    def with_type(self, piece_type: str) -> Piece:
        """Re-typed copy with a fresh id."""
        return dataclasses.replace(self, piece_type=piece_type, id=_new_id())

    def with_traits(self, *traits: Trait) -> Piece:
        """Copy carrying additional *traits*, same id."""
        return dataclasses.replace(self, traits=self.traits | frozenset(traits))

    # ── Serialisation ────────────────────────────────────────────────────

    @property
    def letter(self) -> str:
        """FEN letter, uppercase for light. Unknown types render as '?'."""
        letter = _FEN_LETTERS.get(self.piece_type, "?")
        return letter.upper() if self.color == Color.LIGHT else letter

    def __str__(self) -> str:
        return self.letter

    @classmethod
    def from_letter(cls, letter: str) -> Piece:
        """Create a piece from a FEN letter, e.g. 'N' → light knight."""
        try:
            piece_type = _TYPES_BY_LETTER[letter.lower()]
        except KeyError:
            raise ValueError(f"Invalid piece letter: {letter!r}") from None
        if piece_type == PieceType.DUCK:
            return cls(Color.NEUTRAL, piece_type)
        color = Color.LIGHT if letter.isupper() else Color.DARK
        return cls(color, piece_type)


def promotion_type_for_letter(letter: str) -> str:
    """Piece type for a promotion letter such as 'q'."""
    try:
        return _TYPES_BY_LETTER[letter.lower()]
    except KeyError:
        raise ValueError(f"Invalid promotion letter: {letter!r}") from None
