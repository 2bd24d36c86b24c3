"""Shipped variant configurations.

Quick start::

    from varichess.game import GameController
    from varichess.variants import variant_by_slug

    ctrl = GameController(variant_by_slug("atomic"))
    ctrl.new_game()
"""

from varichess.variants.base import Variant, VariantRules
from varichess.variants.capture import (
    ANTICHESS,
    ATOMIC,
    CIRCE,
    TRAITOR,
    AntichessRules,
    AtomicRules,
    CirceRules,
    TraitorRules,
)
from varichess.variants.reserve import (
    CRAZYHOUSE,
    DRAGONFLY,
    DragonflyRules,
    ReserveRules,
)
from varichess.variants.standard import (
    ALL_QUEENS,
    CAPABLANCA,
    CHECKLESS,
    CHESS_960,
    GOTHIC,
    HORDE,
    KING_OF_THE_HILL,
    RACING_KINGS,
    THREE_CHECK,
    VANILLA,
    AllQueensRules,
    Chess960Rules,
    CheckingMateRules,
    HordeRules,
    KingOfTheHillRules,
    RacingKingsRules,
    ThreeCheckRules,
    WideBoardRules,
)
from varichess.variants.tempo import (
    DOUBLE_MOVE,
    DUCK,
    PROGRESSIVE,
    TRIPLE_MOVE,
    DuckRules,
    MultiMoveRules,
    ProgressiveRules,
)

VARIANTS: tuple[Variant, ...] = (
    VANILLA,
    KING_OF_THE_HILL,
    HORDE,
    CHESS_960,
    ATOMIC,
    DOUBLE_MOVE,
    TRIPLE_MOVE,
    THREE_CHECK,
    RACING_KINGS,
    ANTICHESS,
    CRAZYHOUSE,
    DUCK,
    CIRCE,
    ALL_QUEENS,
    PROGRESSIVE,
    GOTHIC,
    TRAITOR,
    CHECKLESS,
    DRAGONFLY,
    CAPABLANCA,
)

_BY_SLUG: dict[str, Variant] = {v.slug: v for v in VARIANTS}


def variant_by_slug(slug: str) -> Variant:
    """Look up a shipped variant, e.g. ``"koth"``."""
    try:
        return _BY_SLUG[slug]
    except KeyError:
        raise ValueError(f"Unknown variant slug: {slug!r}") from None


__all__ = [
    # Configuration
    "Variant",
    "VariantRules",
    "VARIANTS",
    "variant_by_slug",
    # Variants
    "ALL_QUEENS",
    "ANTICHESS",
    "ATOMIC",
    "CAPABLANCA",
    "CHECKLESS",
    "CHESS_960",
    "CIRCE",
    "CRAZYHOUSE",
    "DOUBLE_MOVE",
    "DRAGONFLY",
    "DUCK",
    "GOTHIC",
    "HORDE",
    "KING_OF_THE_HILL",
    "PROGRESSIVE",
    "RACING_KINGS",
    "THREE_CHECK",
    "TRAITOR",
    "TRIPLE_MOVE",
    "VANILLA",
    # Rules strategies
    "AllQueensRules",
    "AntichessRules",
    "AtomicRules",
    "CheckingMateRules",
    "Chess960Rules",
    "CirceRules",
    "DragonflyRules",
    "DuckRules",
    "HordeRules",
    "KingOfTheHillRules",
    "MultiMoveRules",
    "ProgressiveRules",
    "RacingKingsRules",
    "ReserveRules",
    "ThreeCheckRules",
    "TraitorRules",
    "WideBoardRules",
]
