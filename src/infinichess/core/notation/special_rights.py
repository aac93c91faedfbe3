"""Deriving special rights from a starting position.

A compact way to write a variant's starting position is to omit the ``+``
markers and let them be inferred: every pawn may double push, every jumping
royal may castle, and a castling partner may castle when it stands on the
same row as a royal of its own player, at least 3 squares away.
"""

from __future__ import annotations

from dataclasses import dataclass

from infinichess.core.enums import CASTLE_PARTNERS, JUMPING_ROYALS, Player, RawType
from infinichess.core.errors import InvalidCastlePartner
from infinichess.core.position import Position
from infinichess.core.types import Coords, CoordsKey, coords_from_key

# Minimum x-distance between a royal and a partner that can castle with it.
MIN_CASTLE_DISTANCE = 3


@dataclass(frozen=True, slots=True)
class SpecialRightsRules:
    """The gamerules special rights are derived from.

    Args:
        pawn_double_push: Pawns keep a double-push right.
        castle_with: The kind a royal castles with (rook or guard), or
            ``None`` when castling is off.
    """

    pawn_double_push: bool = False
    castle_with: RawType | None = None

    def __post_init__(self) -> None:
        if self.castle_with is None:
            return
        if self.castle_with not in CASTLE_PARTNERS:
            raise InvalidCastlePartner(f"Cannot allow castling with {self.castle_with!r}")
        object.__setattr__(self, "castle_with", RawType(self.castle_with))


def generate_special_rights(position: Position, rules: SpecialRightsRules) -> set[CoordsKey]:
    """Return the keys of every piece in *position* that holds a special right."""
    special_rights: set[CoordsKey] = set()
    castle_with = rules.castle_with
    if not rules.pawn_double_push and castle_with is None:
        return special_rights

    royals: dict[CoordsKey, Player] = {}
    partners: dict[CoordsKey, Player] = {}

    for key, piece_type in position.items():
        raw = piece_type.raw
        if rules.pawn_double_push and raw == RawType.PAWN:
            special_rights.add(key)
        elif castle_with is not None and raw in JUMPING_ROYALS:
            special_rights.add(key)
            royals[key] = piece_type.player
        elif castle_with is not None and raw == castle_with:
            partners[key] = piece_type.player

    if not royals:
        return special_rights

    royal_coords: list[tuple[Coords, Player]] = [
        (coords_from_key(key), player) for key, player in royals.items()
    ]
    for key, player in partners.items():
        x, y = coords_from_key(key)
        for (royal_x, royal_y), royal_player in royal_coords:
            if royal_y != y or royal_player != player:
                continue
            if abs(x - royal_x) < MIN_CASTLE_DISTANCE:
                continue
            # First qualifying royal wins; the rest are not consulted.
            special_rights.add(key)
            break

    return special_rights
