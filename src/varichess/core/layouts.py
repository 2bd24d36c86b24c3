"""Starting-layout builders shared by the shipped variants."""

from __future__ import annotations

import random
from collections.abc import Sequence

from varichess.core.enums import Color, PawnStart, PieceType, Trait
from varichess.core.piece import Piece

Row = list[Piece | None]

STANDARD_BACK_ROW: tuple[str, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)

CAPABLANCA_BACK_ROW: tuple[str, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.ARCHBISHOP,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.CHANCELLOR,
    PieceType.KNIGHT,
    PieceType.ROOK,
)

GOTHIC_BACK_ROW: tuple[str, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.CHANCELLOR,
    PieceType.KING,
    PieceType.ARCHBISHOP,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)

DRAGONFLY_BACK_ROW: tuple[str, ...] = (
    PieceType.ROOK,
    PieceType.BISHOP,
    PieceType.BISHOP,
    PieceType.KING,
    PieceType.KNIGHT,
    PieceType.KNIGHT,
    PieceType.ROOK,
)

DEFAULT_PROMOTIONS: tuple[str, ...] = (
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.ROOK,
    PieceType.QUEEN,
)


def back_row(
    color: Color,
    types: Sequence[str] = STANDARD_BACK_ROW,
    traits: frozenset[Trait] = frozenset(),
) -> Row:
    return [Piece(color, t, traits=traits) for t in types]


def pawns(
    color: Color,
    columns: int = 8,
    traits: frozenset[Trait] = frozenset(),
    pawn_start: PawnStart = PawnStart.STANDARD,
) -> Row:
    return [
        Piece(color, PieceType.PAWN, traits=traits, pawn_start=pawn_start)
        for _ in range(columns)
    ]


def empty_row(columns: int = 8) -> Row:
    return [None] * columns


def standard_layout(
    types: Sequence[str] = STANDARD_BACK_ROW,
    traits: frozenset[Trait] = frozenset(),
) -> list[Row]:
    """Back rows of *types* with pawn bands; 8 rows, ``len(types)`` columns."""
    columns = len(types)
    return [
        back_row(Color.DARK, types, traits),
        pawns(Color.DARK, columns, traits),
        *(empty_row(columns) for _ in range(4)),
        pawns(Color.LIGHT, columns, traits),
        back_row(Color.LIGHT, types, traits),
    ]


def random_back_row(rng: random.Random) -> tuple[str, ...]:
    """Chess960 arrangement: bishops on opposite colours, king between rooks."""
    cells: list[str | None] = [None] * 8
    cells[rng.randrange(0, 8, 2)] = PieceType.BISHOP
    cells[rng.randrange(1, 8, 2)] = PieceType.BISHOP

    def place(piece_type: str) -> None:
        free = [i for i, t in enumerate(cells) if t is None]
        cells[rng.choice(free)] = piece_type

    place(PieceType.QUEEN)
    place(PieceType.KNIGHT)
    place(PieceType.KNIGHT)

    free = [i for i, t in enumerate(cells) if t is None]
    for index, piece_type in zip(
        free, (PieceType.ROOK, PieceType.KING, PieceType.ROOK), strict=True
    ):
        cells[index] = piece_type
    return tuple(t for t in cells if t is not None)


def horde_layout() -> list[Row]:
    """Dark's standard army against thirty-six light pawns."""
    horde = PawnStart.HORDE
    partial = empty_row()
    for column in (1, 2, 5, 6):
        partial[column] = Piece(Color.LIGHT, PieceType.PAWN, pawn_start=horde)
    return [
        back_row(Color.DARK),
        pawns(Color.DARK),
        empty_row(),
        partial,
        pawns(Color.LIGHT, pawn_start=horde),
        pawns(Color.LIGHT, pawn_start=horde),
        pawns(Color.LIGHT, pawn_start=horde),
        pawns(Color.LIGHT, pawn_start=horde),
    ]


def racing_layout() -> list[Row]:
    """Racing kings: both armies on the two light-side rows."""

    def pieces(color: Color, types: Sequence[str]) -> Row:
        return [Piece(color, t) for t in types]

    k, q, r, b, n = (
        PieceType.KING,
        PieceType.QUEEN,
        PieceType.ROOK,
        PieceType.BISHOP,
        PieceType.KNIGHT,
    )
    return [
        *(empty_row() for _ in range(6)),
        pieces(Color.DARK, (k, r, b, n)) + pieces(Color.LIGHT, (n, b, r, k)),
        pieces(Color.DARK, (q, r, b, n)) + pieces(Color.LIGHT, (n, b, r, q)),
    ]


def queens_layout() -> list[Row]:
    """5×5 board of alternating queens on the outer rows."""
    size = 5

    def alternating(first: Color) -> Row:
        colors = (first, first.opposite)
        return [Piece(colors[i % 2], PieceType.QUEEN) for i in range(size)]

    return [
        alternating(Color.DARK),
        empty_row(size),
        [
            Piece(Color.LIGHT, PieceType.QUEEN),
            None,
            None,
            None,
            Piece(Color.DARK, PieceType.QUEEN),
        ],
        empty_row(size),
        alternating(Color.LIGHT),
    ]


def dragonfly_layout() -> list[Row]:
    """7×7 board; pawns never double-step."""
    never = PawnStart.NEVER

    def home(color: Color) -> Row:
        return [
            Piece(color, t, pawn_start=never) for t in DRAGONFLY_BACK_ROW
        ]

    return [
        home(Color.DARK),
        pawns(Color.DARK, 7, pawn_start=never),
        *(empty_row(7) for _ in range(3)),
        pawns(Color.LIGHT, 7, pawn_start=never),
        home(Color.LIGHT),
    ]
