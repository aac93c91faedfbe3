"""Notation package: ICN moves, move lists, positions, special rights and headers."""

from infinichess.core.notation.clock import CLOCK_TAG_RE, ZERO_CLOCK_TAG, clock_tag
from infinichess.core.notation.gamerules import (
    DEFAULT_PROMOTIONS,
    DEFAULT_WIN_CONDITIONS,
    EXCLUDED_GAMERULES,
    is_default_promotion_list,
    player_code,
    player_from_code,
    turn_order_from_icn,
    turn_order_to_icn,
)
from infinichess.core.notation.metadata import (
    METADATA_KEY_ORDER,
    metadata_from_icn,
    metadata_to_icn,
    order_metadata,
)
from infinichess.core.notation.models import (
    COMPACT_WITH_COMMENTS,
    MOST_COMPACT,
    PRETTY,
    MoveStyle,
    NumberedMoveStyle,
    ParsedMove,
    PositionRecord,
)
from infinichess.core.notation.moves import (
    compact_move_from_draft,
    move_to_shortform,
    moves_to_shortform,
    parse_compact_move,
    parse_shortform_move,
    parse_shortform_moves,
)
from infinichess.core.notation.position import (
    position_from_shortform,
    position_to_shortform,
)
from infinichess.core.notation.special_rights import (
    SpecialRightsRules,
    generate_special_rights,
)

__all__ = [
    # Models / styles
    "ParsedMove",
    "PositionRecord",
    "MoveStyle",
    "NumberedMoveStyle",
    "MOST_COMPACT",
    "COMPACT_WITH_COMMENTS",
    "PRETTY",
    # Clock
    "CLOCK_TAG_RE",
    "ZERO_CLOCK_TAG",
    "clock_tag",
    # Moves
    "compact_move_from_draft",
    "move_to_shortform",
    "moves_to_shortform",
    "parse_compact_move",
    "parse_shortform_move",
    "parse_shortform_moves",
    # Positions
    "position_from_shortform",
    "position_to_shortform",
    "SpecialRightsRules",
    "generate_special_rights",
    # Gamerules / metadata
    "DEFAULT_PROMOTIONS",
    "DEFAULT_WIN_CONDITIONS",
    "EXCLUDED_GAMERULES",
    "is_default_promotion_list",
    "player_code",
    "player_from_code",
    "turn_order_from_icn",
    "turn_order_to_icn",
    "METADATA_KEY_ORDER",
    "metadata_from_icn",
    "metadata_to_icn",
    "order_metadata",
]
