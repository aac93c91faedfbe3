"""ICN shortform positions: ``'P1,2+|k15,-56|Q5000,1'``.

Each entry is a piece code, a coords key and an optional ``+`` marking a
special right (pawn double push, castling). Entries are found by scanning, so
any separator is accepted on input; ``|`` is written on output.
"""

from __future__ import annotations

import logging
import re
from types import MappingProxyType

from infinichess.core.errors import InvalidPieceCode, MalformedPositionText
from infinichess.core.notation.models import PositionRecord
from infinichess.core.piece import PIECE_CODE_SOURCE, PieceType, piece_code, piece_type_from_code
from infinichess.core.position import Position, SpecialRights
from infinichess.core.types import COORDS_KEY_SOURCE, CoordsKey

_LOGGER = logging.getLogger(__name__)

_PIECE_ENTRY_RE = re.compile(
    rf"(?P<code>{PIECE_CODE_SOURCE})(?P<key>{COORDS_KEY_SOURCE})(?P<special>\+)?"
)


def position_to_shortform(
    position: Position, special_rights: SpecialRights = frozenset()
) -> str:
    """Serialise *position* and its *special_rights* to a shortform position."""
    return "|".join(
        f"{piece_code(piece_type)}{key}{'+' if key in special_rights else ''}"
        for key, piece_type in position.items()
    )


def position_from_shortform(text: str) -> PositionRecord:
    """Parse a shortform position back into pieces and special rights."""
    position: dict[CoordsKey, PieceType] = {}
    special_rights: set[CoordsKey] = set()

    for match in _PIECE_ENTRY_RE.finditer(text):
        key = match["key"]
        try:
            piece_type = piece_type_from_code(match["code"])
        except InvalidPieceCode as exc:
            raise MalformedPositionText(f"Invalid piece entry {match[0]!r}: {exc}") from exc

        position[key] = piece_type
        # A repeated key replaces the earlier entry, special right included.
        if match["special"]:
            special_rights.add(key)
        else:
            special_rights.discard(key)

    _LOGGER.debug("Parsed %d pieces from shortform position", len(position))
    return PositionRecord(
        position=MappingProxyType(position), special_rights=frozenset(special_rights)
    )
