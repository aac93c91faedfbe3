"""Position-level value types shared by the codec and its consumers."""

from __future__ import annotations

from collections.abc import Mapping, Set
from dataclasses import dataclass

from infinichess.core.piece import PieceType
from infinichess.core.types import Coords, CoordsKey

# Placement of every piece, keyed by canonical coords key.
Position = Mapping[CoordsKey, PieceType]

# Squares whose occupant still holds an unused special first move.
SpecialRights = Set[CoordsKey]


@dataclass(frozen=True, slots=True)
class EnPassant:
    """En passant target handed through to rendering consumers.

    The codec never creates or changes one; it only carries it.
    """

    square: Coords
    pawn: Coords
