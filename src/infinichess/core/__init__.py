"""Core domain layer — pure ICN logic with zero external dependencies.

Quick start::

    from infinichess.core import PieceType, position_from_shortform

    record = position_from_shortform("K5,1+|R1,1+|R8,1+|k5,8")
    for key, piece_type in record.position.items():
        print(key, piece_type)
"""

from infinichess.core.enums import (
    CASTLE_PARTNERS,
    JUMPING_ROYALS,
    NEUTRAL_ONLY,
    PLAYER_COUNT,
    Player,
    RawType,
)
from infinichess.core.errors import (
    IcnError,
    InfiniteCoordinate,
    InvalidCastlePartner,
    InvalidCoordinate,
    InvalidPieceCode,
    InvalidPlayerCode,
    MalformedMetadataText,
    MalformedMoveText,
    MalformedPositionText,
)
from infinichess.core.move import Move, MoveDraft, MoveFlags
from infinichess.core.notation import (
    MOST_COMPACT,
    PRETTY,
    MoveStyle,
    NumberedMoveStyle,
    ParsedMove,
    SpecialRightsRules,
    clock_tag,
    compact_move_from_draft,
    generate_special_rights,
    move_to_shortform,
    moves_to_shortform,
    parse_compact_move,
    parse_shortform_move,
    parse_shortform_moves,
    position_from_shortform,
    position_to_shortform,
)
from infinichess.core.piece import PieceType, piece_code, piece_type_from_code
from infinichess.core.position import EnPassant, Position, SpecialRights
from infinichess.core.types import (
    Coords,
    CoordsKey,
    coords_from_key,
    coords_key,
    ensure_finite,
)

__all__ = [
    # Enums / constants
    "Player",
    "RawType",
    "PLAYER_COUNT",
    "NEUTRAL_ONLY",
    "JUMPING_ROYALS",
    "CASTLE_PARTNERS",
    # Errors
    "IcnError",
    "InvalidPieceCode",
    "InvalidPlayerCode",
    "InvalidCastlePartner",
    "InvalidCoordinate",
    "InfiniteCoordinate",
    "MalformedMoveText",
    "MalformedPositionText",
    "MalformedMetadataText",
    # Types / helpers
    "Coords",
    "CoordsKey",
    "coords_key",
    "coords_from_key",
    "ensure_finite",
    # Domain objects
    "PieceType",
    "piece_code",
    "piece_type_from_code",
    "MoveDraft",
    "MoveFlags",
    "Move",
    "Position",
    "SpecialRights",
    "EnPassant",
    # Notation
    "MoveStyle",
    "NumberedMoveStyle",
    "MOST_COMPACT",
    "PRETTY",
    "ParsedMove",
    "SpecialRightsRules",
    "clock_tag",
    "compact_move_from_draft",
    "move_to_shortform",
    "moves_to_shortform",
    "parse_compact_move",
    "parse_shortform_move",
    "parse_shortform_moves",
    "position_from_shortform",
    "position_to_shortform",
    "generate_special_rights",
]
