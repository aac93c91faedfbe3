"""Core enumerations for the infinite-board domain."""

from __future__ import annotations

from enum import IntEnum


class Player(IntEnum):
    """Owner of a piece.

    Numbers past BLACK are the colored players of multiplayer variants; the
    number is what appears as the prefix of a non-standard piece code.
    """

    NEUTRAL = 0
    WHITE = 1
    BLACK = 2
    RED = 3
    BLUE = 4
    YELLOW = 5
    GREEN = 6

    def __str__(self) -> str:
        return self.name.lower()


class RawType(IntEnum):
    """Piece kind without an owner."""

    KING = 0
    PAWN = 1
    KNIGHT = 2
    BISHOP = 3
    ROOK = 4
    QUEEN = 5
    AMAZON = 6
    HAWK = 7
    CHANCELLOR = 8
    ARCHBISHOP = 9
    GUARD = 10
    CAMEL = 11
    GIRAFFE = 12
    ZEBRA = 13
    CENTAUR = 14
    ROYAL_QUEEN = 15
    ROYAL_CENTAUR = 16
    KNIGHTRIDER = 17
    HUYGEN = 18
    ROSE = 19
    OBSTACLE = 20
    VOID = 21

    def __str__(self) -> str:
        return self.name.lower()


PLAYER_COUNT = len(Player)

# Kinds that only ever belong to the neutral player.
NEUTRAL_ONLY: frozenset[RawType] = frozenset({RawType.OBSTACLE, RawType.VOID})

# Royals that move by jumping and may therefore castle.
JUMPING_ROYALS: frozenset[RawType] = frozenset({RawType.KING, RawType.ROYAL_CENTAUR})

# Kinds a jumping royal may castle with.
CASTLE_PARTNERS: frozenset[RawType] = frozenset({RawType.ROOK, RawType.GUARD})
