"""Core enumerations for the variant rules engine."""

from __future__ import annotations

from enum import Enum, IntEnum, StrEnum, auto


class Color(StrEnum):
    """Side color. ``NEUTRAL`` marks non-partisan pieces such as the duck."""

    LIGHT = "light"
    DARK = "dark"
    NEUTRAL = "neutral"

    @property
    def opposite(self) -> Color:
        if self is Color.LIGHT:
            return Color.DARK
        if self is Color.DARK:
            return Color.LIGHT
        return Color.NEUTRAL

    @property
    def is_partisan(self) -> bool:
        return self is not Color.NEUTRAL


PLAYER_COLORS: tuple[Color, Color] = (Color.LIGHT, Color.DARK)


class PieceType(StrEnum):
    """Built-in piece type tags.

    The type set is open: any string tag with a registered generator is a
    valid ``Piece.piece_type``. StrEnum members compare equal to plain strings.
    """

    PAWN = "pawn"
    KNIGHT = "knight"
    BISHOP = "bishop"
    ROOK = "rook"
    QUEEN = "queen"
    KING = "king"
    ARCHBISHOP = "archbishop"  # bishop + knight
    CHANCELLOR = "chancellor"  # rook + knight
    DUCK = "duck"


class Trait(StrEnum):
    """Generator decorators a piece carries."""

    ATOMIC = "atomic"
    CIRCE = "circe"
    TRAITOR = "traitor"
    DROP = "drop"


class PawnStart(IntEnum):
    """When a pawn may advance two cells."""

    STANDARD = auto()  # from its starting band only
    HORDE = auto()  # starting band, or unmoved on its own back row
    NEVER = auto()


class GameStatus(Enum):
    """Outcome of a game."""

    ACTIVE = "active"
    LIGHT_WINS = "light_wins"
    DARK_WINS = "dark_wins"
    STALEMATE = "stalemate"

    @property
    def is_terminal(self) -> bool:
        return self is not GameStatus.ACTIVE

    @classmethod
    def win_for(cls, color: Color) -> GameStatus:
        return cls.LIGHT_WINS if color == Color.LIGHT else cls.DARK_WINS
