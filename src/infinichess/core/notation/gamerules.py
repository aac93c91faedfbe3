"""Gamerule vocabulary shared by ICN headers: player codes, turn order,
default promotions and default win conditions."""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from types import MappingProxyType

from infinichess.core.enums import Player, RawType
from infinichess.core.errors import InvalidPlayerCode

_PLAYER_CODES: dict[Player, str] = {
    Player.NEUTRAL: "n",
    Player.WHITE: "w",
    Player.BLACK: "b",
    Player.RED: "r",
    Player.BLUE: "bu",
    Player.YELLOW: "y",
    Player.GREEN: "g",
}
_PLAYERS_BY_CODE: dict[str, Player] = {v: k for k, v in _PLAYER_CODES.items()}
if len(_PLAYERS_BY_CODE) != len(_PLAYER_CODES):
    raise RuntimeError("Player codes must be unique")

TURN_ORDER_SEPARATOR = ":"

# Promotions assumed when a game does not list its own.
DEFAULT_PROMOTIONS: tuple[RawType, ...] = (
    RawType.QUEEN,
    RawType.ROOK,
    RawType.BISHOP,
    RawType.KNIGHT,
)

DEFAULT_WIN_CONDITIONS: Mapping[Player, tuple[str, ...]] = MappingProxyType(
    {
        Player.WHITE: ("checkmate",),
        Player.BLACK: ("checkmate",),
    }
)

# Gamerules with a dedicated ICN encoding; never written as plain metadata.
EXCLUDED_GAMERULES: frozenset[str] = frozenset(
    {"promotionRanks", "promotionsAllowed", "winConditions", "turnOrder", "moveRule"}
)


def player_code(player: Player) -> str:
    """1-2 letter code of *player*, e.g. white → ``'w'``, blue → ``'bu'``."""
    return _PLAYER_CODES[Player(player)]


def player_from_code(code: str) -> Player:
    try:
        return _PLAYERS_BY_CODE[code]
    except KeyError:
        raise InvalidPlayerCode(f"Unknown player code: {code!r}") from None


def turn_order_to_icn(turn_order: Sequence[Player]) -> str:
    """``[WHITE, BLACK]`` → ``'w:b'``."""
    return TURN_ORDER_SEPARATOR.join(player_code(player) for player in turn_order)


def turn_order_from_icn(text: str) -> tuple[Player, ...]:
    """``'w:b'`` → ``(WHITE, BLACK)``."""
    if not text:
        raise InvalidPlayerCode("Turn order must contain at least one player")
    return tuple(player_from_code(code) for code in text.split(TURN_ORDER_SEPARATOR))


def is_default_promotion_list(promotions: Iterable[RawType]) -> bool:
    """True if *promotions* is exactly the default set, in any order."""
    promotions = list(promotions)
    if len(promotions) != len(DEFAULT_PROMOTIONS):
        return False
    return all(promotion in promotions for promotion in DEFAULT_PROMOTIONS)
