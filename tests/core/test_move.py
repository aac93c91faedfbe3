"""Tests for MoveDraft and Move value objects."""

import dataclasses
import math

import pytest

from infinichess.core.enums import Player, RawType
from infinichess.core.errors import InfiniteCoordinate
from infinichess.core.move import Move, MoveDraft, MoveFlags
from infinichess.core.piece import PieceType
from infinichess.core.position import EnPassant

WHITE_PAWN = PieceType(RawType.PAWN, Player.WHITE)
WHITE_QUEEN = PieceType(RawType.QUEEN, Player.WHITE)


class TestMoveDraft:
    def test_str_without_promotion(self) -> None:
        assert str(MoveDraft((1, 2), (3, -4))) == "1,2>3,-4"

    def test_str_with_promotion(self) -> None:
        draft = MoveDraft((1, 7), (2, 8), WHITE_QUEEN)
        assert str(draft) == "1,7>2,8=Q"
        assert draft.compact == "1,7>2,8=Q"

    def test_infinite_coordinate_raises(self) -> None:
        with pytest.raises(InfiniteCoordinate):
            str(MoveDraft((math.inf, 0), (1, 1)))

    def test_coordinate_past_int_string_limit_raises(self) -> None:
        draft = MoveDraft((10**5000, 0), (1, 1))
        with pytest.raises(InfiniteCoordinate, match="too large"):
            str(draft)
        with pytest.raises(InfiniteCoordinate):
            Move(draft.start, draft.end, WHITE_PAWN)


class TestMove:
    def test_compact_is_cached_on_construction(self) -> None:
        move = Move((1, 7), (2, 8), WHITE_PAWN, promotion=WHITE_QUEEN)
        assert move.compact == "1,7>2,8=Q"
        assert str(move) == move.compact

    def test_draft(self) -> None:
        move = Move((1, 7), (2, 8), WHITE_PAWN, promotion=WHITE_QUEEN, comment="!")
        assert move.draft == MoveDraft((1, 7), (2, 8), WHITE_QUEEN)

    def test_defaults(self) -> None:
        move = Move((0, 0), (0, 1), WHITE_PAWN)
        assert move.flags == MoveFlags()
        assert move.comment is None
        assert move.clk is None

    def test_is_immutable(self) -> None:
        move = Move((0, 0), (0, 1), WHITE_PAWN)
        with pytest.raises(dataclasses.FrozenInstanceError):
            move.comment = "changed"  # type: ignore[misc]

    def test_equality_compares_fields(self) -> None:
        a = Move((0, 0), (0, 1), WHITE_PAWN, clk=1000)
        b = Move((0, 0), (0, 1), WHITE_PAWN, clk=1000)
        c = Move((0, 0), (0, 1), WHITE_PAWN, clk=2000)
        assert a == b
        assert a != c


class TestEnPassant:
    def test_value_object(self) -> None:
        target = EnPassant(square=(3, 6), pawn=(3, 5))
        assert target == EnPassant((3, 6), (3, 5))
        with pytest.raises(dataclasses.FrozenInstanceError):
            target.square = (0, 0)  # type: ignore[misc]
