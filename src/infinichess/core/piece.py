"""Piece type value object and the ICN piece-code registry.

Standard pieces of white and black use a fixed 1-2 letter code, uppercase for
white and lowercase for black (``K`` / ``k``). Neutral-only kinds use a fixed
lowercase code (``ob``, ``vo``). Every other owner is written as its player
number followed by the lowercase raw code: a red king is ``3k``.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from infinichess.core.enums import NEUTRAL_ONLY, PLAYER_COUNT, Player, RawType
from infinichess.core.errors import InvalidPieceCode

# Raw code ↔ RawType. The standard code table is generated from this one.
_RAW_CODES: dict[RawType, str] = {
    RawType.KING: "k",
    RawType.PAWN: "p",
    RawType.KNIGHT: "n",
    RawType.BISHOP: "b",
    RawType.ROOK: "r",
    RawType.QUEEN: "q",
    RawType.AMAZON: "am",
    RawType.HAWK: "ha",
    RawType.CHANCELLOR: "ch",
    RawType.ARCHBISHOP: "ar",
    RawType.GUARD: "gu",
    RawType.CAMEL: "ca",
    RawType.GIRAFFE: "gi",
    RawType.ZEBRA: "ze",
    RawType.CENTAUR: "ce",
    RawType.ROYAL_QUEEN: "rq",
    RawType.ROYAL_CENTAUR: "rc",
    RawType.KNIGHTRIDER: "nr",
    RawType.HUYGEN: "hu",
    RawType.ROSE: "ro",
    RawType.OBSTACLE: "ob",
    RawType.VOID: "vo",
}

# Optional player number (no negatives, no leading zeros) + letters.
PIECE_CODE_SOURCE = r"(?:0|[1-9]\d*)?[A-Za-z]+"
_PIECE_CODE_RE = re.compile(r"(?P<player>0|[1-9]\d*)?(?P<abbrev>[A-Za-z]+)")


@dataclass(frozen=True, slots=True)
class PieceType:
    """Immutable composite key: a raw piece kind owned by a player."""

    raw: RawType
    player: Player

    def __post_init__(self) -> None:
        object.__setattr__(self, "raw", RawType(self.raw))
        object.__setattr__(self, "player", Player(self.player))

    # ── Integer packing ──────────────────────────────────────────────────

    @property
    def packed(self) -> int:
        """Single-int form: ``raw * PLAYER_COUNT + player``."""
        return int(self.raw) * PLAYER_COUNT + int(self.player)

    def __int__(self) -> int:
        return self.packed

    @classmethod
    def unpack(cls, value: int) -> PieceType:
        """Inverse of :attr:`packed`."""
        raw, player = divmod(value, PLAYER_COUNT)
        try:
            return cls(RawType(raw), Player(player))
        except ValueError:
            raise ValueError(f"Invalid packed piece type: {value!r}") from None

    # ── Serialisation ────────────────────────────────────────────────────

    def __str__(self) -> str:
        """ICN piece code, e.g. white pawn → ``'P'``."""
        return piece_code(self)

    @classmethod
    def from_code(cls, code: str) -> PieceType:
        """Create a piece type from its ICN code, e.g. ``'3q'`` → red queen."""
        return piece_type_from_code(code)


def _build_code_tables() -> tuple[
    dict[PieceType, str], dict[str, PieceType], dict[str, RawType]
]:
    """Generate both directions of the code tables, failing on any collision."""
    code_by_type: dict[PieceType, str] = {}
    for raw, code in _RAW_CODES.items():
        if raw in NEUTRAL_ONLY:
            code_by_type[PieceType(raw, Player.NEUTRAL)] = code
        else:
            code_by_type[PieceType(raw, Player.WHITE)] = code.upper()
            code_by_type[PieceType(raw, Player.BLACK)] = code

    type_by_code: dict[str, PieceType] = {}
    for piece_type, code in code_by_type.items():
        if code in type_by_code:
            raise RuntimeError(
                f"Piece code {code!r} assigned to both {type_by_code[code]!r} "
                f"and {piece_type!r}"
            )
        type_by_code[code] = piece_type

    raw_by_code: dict[str, RawType] = {}
    for raw, code in _RAW_CODES.items():
        if code in raw_by_code:
            raise RuntimeError(
                f"Raw code {code!r} assigned to both {raw_by_code[code]} and {raw}"
            )
        raw_by_code[code] = raw

    return code_by_type, type_by_code, raw_by_code


_CODE_BY_TYPE, _TYPE_BY_CODE, _RAW_BY_CODE = _build_code_tables()

STANDARD_CODES: frozenset[str] = frozenset(_TYPE_BY_CODE)


def all_piece_types() -> tuple[PieceType, ...]:
    """Every piece type the registry can encode, in packed order."""
    return tuple(
        PieceType(raw, player)
        for raw in RawType
        for player in Player
        if raw not in NEUTRAL_ONLY or player == Player.NEUTRAL
    )


def raw_code(raw: RawType) -> str:
    """Lowercase, owner-less code of *raw*, e.g. rook → ``'r'``."""
    return _RAW_CODES[RawType(raw)]


def piece_code(piece_type: PieceType) -> str:
    """Encode *piece_type* to its ICN code.

    ``PieceType(PAWN, WHITE)`` → ``'P'``, ``PieceType(QUEEN, BLACK)`` → ``'q'``,
    ``PieceType(KING, RED)`` → ``'3k'``.
    """
    code = _CODE_BY_TYPE.get(piece_type)
    if code is not None:
        return code
    if piece_type.raw in NEUTRAL_ONLY:
        raise InvalidPieceCode(
            f"{piece_type.raw} can only be owned by the neutral player, "
            f"got {piece_type.player}"
        )
    return f"{int(piece_type.player)}{_RAW_CODES[piece_type.raw]}"


def piece_type_from_code(code: str) -> PieceType:
    """Decode an ICN piece code.

    Without a player number the standard table is consulted (case matters).
    With one, the letters are read case-insensitively as a raw code.
    """
    match = _PIECE_CODE_RE.fullmatch(code)
    if match is None:
        raise InvalidPieceCode(f"Piece code is in invalid form: {code!r}")

    player_str = match["player"]
    abbrev = match["abbrev"]

    if player_str is None:
        try:
            return _TYPE_BY_CODE[abbrev]
        except KeyError:
            raise InvalidPieceCode(f"Unknown piece code: {code!r}") from None

    raw = _RAW_BY_CODE.get(abbrev.lower())
    if raw is None:
        raise InvalidPieceCode(f"Unknown raw piece code: {code!r}")
    try:
        player = Player(int(player_str))
    except ValueError:
        raise InvalidPieceCode(f"Unknown player number in piece code: {code!r}") from None
    if raw in NEUTRAL_ONLY and player != Player.NEUTRAL:
        raise InvalidPieceCode(f"{raw} can only be owned by the neutral player: {code!r}")
    return PieceType(raw, player)
