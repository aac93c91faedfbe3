"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import pytest

from infinichess.core.enums import Player, RawType
from infinichess.core.move import Move, MoveFlags
from infinichess.core.piece import PieceType

_BACK_RANK = (
    RawType.ROOK,
    RawType.KNIGHT,
    RawType.BISHOP,
    RawType.QUEEN,
    RawType.KING,
    RawType.BISHOP,
    RawType.KNIGHT,
    RawType.ROOK,
)


def white(raw: RawType) -> PieceType:
    return PieceType(raw, Player.WHITE)


def black(raw: RawType) -> PieceType:
    return PieceType(raw, Player.BLACK)


@pytest.fixture
def classical_position() -> dict[str, PieceType]:
    """Classical starting position on squares 1,1 .. 8,8."""
    position: dict[str, PieceType] = {}
    for x in range(1, 9):
        position[f"{x},2"] = white(RawType.PAWN)
        position[f"{x},7"] = black(RawType.PAWN)
    for x, raw in enumerate(_BACK_RANK, start=1):
        position[f"{x},1"] = white(raw)
        position[f"{x},8"] = black(raw)
    return position


@pytest.fixture
def opening_moves() -> list[Move]:
    """Five plies ending in an en passant capture."""
    return [
        Move((4, 2), (4, 4), white(RawType.PAWN)),
        Move((4, 7), (4, 6), black(RawType.PAWN)),
        Move((4, 4), (4, 5), white(RawType.PAWN)),
        Move((3, 7), (3, 5), black(RawType.PAWN), clk=596_650),
        Move(
            (4, 5),
            (3, 6),
            white(RawType.PAWN),
            flags=MoveFlags(capture=True),
            comment="White captures en passant",
        ),
    ]
