"""Tests for player codes, turn order and gamerule defaults."""

import pytest

from infinichess.core.enums import Player, RawType
from infinichess.core.errors import InvalidPlayerCode
from infinichess.core.notation import (
    DEFAULT_PROMOTIONS,
    DEFAULT_WIN_CONDITIONS,
    EXCLUDED_GAMERULES,
    is_default_promotion_list,
    player_code,
    player_from_code,
    turn_order_from_icn,
    turn_order_to_icn,
)


class TestPlayerCodes:
    def test_codes(self) -> None:
        assert player_code(Player.WHITE) == "w"
        assert player_code(Player.BLUE) == "bu"
        assert player_code(Player.NEUTRAL) == "n"

    def test_roundtrip(self) -> None:
        for player in Player:
            assert player_from_code(player_code(player)) is player

    def test_unknown_code_raises(self) -> None:
        with pytest.raises(InvalidPlayerCode):
            player_from_code("x")


class TestTurnOrder:
    def test_to_icn(self) -> None:
        assert turn_order_to_icn([Player.WHITE, Player.BLACK]) == "w:b"

    def test_from_icn(self) -> None:
        assert turn_order_from_icn("w:b:r:bu") == (
            Player.WHITE,
            Player.BLACK,
            Player.RED,
            Player.BLUE,
        )

    def test_empty_raises(self) -> None:
        with pytest.raises(InvalidPlayerCode):
            turn_order_from_icn("")

    def test_bad_code_raises(self) -> None:
        with pytest.raises(InvalidPlayerCode, match="q"):
            turn_order_from_icn("w:q")


class TestDefaults:
    def test_default_promotions_any_order(self) -> None:
        assert is_default_promotion_list(
            [RawType.KNIGHT, RawType.BISHOP, RawType.ROOK, RawType.QUEEN]
        )
        assert is_default_promotion_list(DEFAULT_PROMOTIONS)

    def test_non_default_promotions(self) -> None:
        assert not is_default_promotion_list([RawType.QUEEN, RawType.ROOK, RawType.BISHOP])
        assert not is_default_promotion_list(
            [RawType.QUEEN, RawType.QUEEN, RawType.ROOK, RawType.BISHOP]
        )
        assert not is_default_promotion_list(
            [RawType.QUEEN, RawType.ROOK, RawType.BISHOP, RawType.KNIGHT, RawType.AMAZON]
        )

    def test_default_win_conditions_are_read_only(self) -> None:
        assert DEFAULT_WIN_CONDITIONS[Player.WHITE] == ("checkmate",)
        with pytest.raises(TypeError):
            DEFAULT_WIN_CONDITIONS[Player.RED] = ("checkmate",)  # type: ignore[index]

    def test_excluded_gamerules(self) -> None:
        assert EXCLUDED_GAMERULES == {
            "promotionRanks",
            "promotionsAllowed",
            "winConditions",
            "turnOrder",
            "moveRule",
        }
