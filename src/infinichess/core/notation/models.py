"""Shared notation-layer data models and style configuration."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field

from infinichess.core.enums import Player
from infinichess.core.move import MoveDraft
from infinichess.core.piece import PieceType
from infinichess.core.types import CoordsKey


@dataclass(frozen=True, slots=True)
class ParsedMove:
    """A move decoded from any shortform.

    ``comment`` is the raw text between the braces, embedded command
    sequences such as ``[%clk 0:09:56.7]`` included.
    """

    draft: MoveDraft
    comment: str | None = None


@dataclass(frozen=True, slots=True)
class PositionRecord:
    """A decoded position together with its special rights.

    Both fields are read-only: ``position`` is a mapping proxy over a fresh
    dict and ``special_rights`` is a frozenset.
    """

    position: Mapping[CoordsKey, PieceType]
    special_rights: frozenset[CoordsKey]


@dataclass(frozen=True, slots=True)
class MoveStyle:
    """How a single move (or an unnumbered move list) is written.

    Args:
        compact: Drop piece codes and the ``x`` / ``+`` / ``#`` markers.
        spaces: Put a space between the segments of each move.
        comments: Emit the ``{...}`` comment block (clock tag + comment).
    """

    compact: bool = False
    spaces: bool = False
    comments: bool = False

    @property
    def is_most_compact(self) -> bool:
        return self.compact and not self.spaces and not self.comments


@dataclass(frozen=True, slots=True)
class NumberedMoveStyle(MoveStyle):
    """Move-list style with move numbers.

    One move number covers one full cycle of *turn_order*. Numbering starts
    at *fullmove*; lines are joined by newlines when *make_new_lines* is set,
    otherwise by a single space.
    """

    turn_order: Sequence[Player] = field(default=(Player.WHITE, Player.BLACK))
    fullmove: int = 1
    make_new_lines: bool = True

    def __post_init__(self) -> None:
        if not self.turn_order:
            raise ValueError("Turn order must contain at least one player")
        if self.fullmove < 0:
            raise ValueError(f"Starting move number must not be negative: {self.fullmove}")
        object.__setattr__(self, "turn_order", tuple(self.turn_order))


MOST_COMPACT = MoveStyle(compact=True)
COMPACT_WITH_COMMENTS = MoveStyle(compact=True, comments=True)
PRETTY = MoveStyle(spaces=True, comments=True)
